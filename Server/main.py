"""
Wordgame Server - Main Entry Point

This is the main entry point for the game server.
It initializes the word provider and game service and starts the
Flask-SocketIO application.
"""

import os
import threading
import time
from wordgame import create_app
from wordgame.config import config
from wordgame.game.evaluator import EvaluationMode
from wordgame.services.game_service import initialize_game_service
from wordgame.services.word_provider import RandomWordApiProvider
from wordgame.utils.game_logger import game_logger


def build_game_service(config_class):
    """Create the word provider and the global game service from configuration."""
    word_provider = RandomWordApiProvider(
        base_url=config_class.WORD_API_URL,
        timeout=config_class.WORD_API_TIMEOUT_SECONDS,
        max_attempts=config_class.WORD_FETCH_MAX_ATTEMPTS,
    )
    return initialize_game_service(word_provider, EvaluationMode(config_class.EVALUATION_MODE))


def stale_game_cleanup_worker(game_service, max_idle_seconds, interval_seconds):
    """
    Background worker that periodically drops games without recent activity,
    including games whose first word fetch failed and was never retried.
    """
    while True:
        try:
            removed = game_service.cleanup_stale_games(max_idle_seconds)
            if removed:
                game_logger.logger.info(f"Stale game cleanup: removed {len(removed)} game(s)")
        except Exception as e:
            game_logger.logger.error(f"Error in stale game cleanup worker: {e}")

        time.sleep(interval_seconds)


def main():
    """Main function to initialize services and start the server."""
    config_class = config[os.getenv('APP_ENV', 'default')]

    try:
        print("Initializing services...")
        game_service = build_game_service(config_class)
        print("✓ Game service initialized successfully")

        print("Creating Flask application...")
        app, socketio = create_app(config_class)
        print("✓ Flask application created successfully")

        cleanup_thread = threading.Thread(
            target=stale_game_cleanup_worker,
            args=(game_service, config_class.STALE_GAME_SECONDS, config_class.CLEANUP_INTERVAL_SECONDS),
            daemon=True
        )
        cleanup_thread.start()
        print(f"✓ Stale game cleanup worker started - checking every {config_class.CLEANUP_INTERVAL_SECONDS} seconds")

        game_logger.logger.info(
            f"Wordgame Server starting - word API: {config_class.WORD_API_URL}, "
            f"evaluation mode: {config_class.EVALUATION_MODE}"
        )

        print(f"\nStarting Wordgame Server on {config_class.HOST}:{config_class.PORT}")
        print(f"Debug mode: {config_class.DEBUG}")
        print("=" * 50)

        socketio.run(app, host=config_class.HOST, port=config_class.PORT, debug=config_class.DEBUG)

    except KeyboardInterrupt:
        print("\nServer shutting down...")
        game_logger.logger.info("Wordgame Server shutting down (KeyboardInterrupt)")
    except Exception as e:
        print(f"Error starting server: {e}")
        game_logger.logger.error(f"Error starting server: {e}")
        raise


if __name__ == '__main__':
    main()
