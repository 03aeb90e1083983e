"""
Configuration Management Module

Centralized configuration management following the 12-factor app methodology.
All configuration is loaded from environment variables with sensible defaults.
"""

import os
from dotenv import load_dotenv

# Load environment variables from config.env next to this module
load_dotenv(os.path.join(os.path.dirname(os.path.abspath(__file__)), 'config.env'))


class Config:
    """Base configuration class with all settings."""

    # Flask Settings
    SECRET_KEY = os.getenv('SECRET_KEY', 'dev-secret-key-change-in-production')
    DEBUG = os.getenv('DEBUG', 'False').lower() == 'true'

    # Server Settings
    HOST = os.getenv('HOST', '127.0.0.1')
    PORT = int(os.getenv('PORT', 5000))

    # Word Provider Settings
    WORD_API_URL = os.getenv('WORD_API_URL', 'https://random-word-api.herokuapp.com')
    WORD_API_TIMEOUT_SECONDS = float(os.getenv('WORD_API_TIMEOUT_SECONDS', 5))
    WORD_FETCH_MAX_ATTEMPTS = int(os.getenv('WORD_FETCH_MAX_ATTEMPTS', 25))

    # Game Settings
    DEFAULT_LANGUAGE = os.getenv('DEFAULT_LANGUAGE', 'en')
    DEFAULT_DIFFICULTY = os.getenv('DEFAULT_DIFFICULTY', 'medium')
    EVALUATION_MODE = os.getenv('EVALUATION_MODE', 'lenient')
    STALE_GAME_SECONDS = int(os.getenv('STALE_GAME_SECONDS', 3600))
    CLEANUP_INTERVAL_SECONDS = int(os.getenv('CLEANUP_INTERVAL_SECONDS', 300))

    # Logging Settings
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
    LOG_DIR = os.getenv('LOG_DIR', 'logs')


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False


class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    DEBUG = True
    WORD_FETCH_MAX_ATTEMPTS = 3


# Configuration mapping
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}
