"""
Helper Functions

Contains utility functions used throughout the application.
"""

from typing import Dict


def get_user_identity(request_obj) -> Dict[str, str]:
    """Extract user identity information from request."""
    user_ip = getattr(request_obj, 'remote_addr', None) or 'unknown'

    return {
        'user_ip': user_ip,
        'session_id': getattr(request_obj, 'sid', None),  # Set for WebSocket requests
    }


def normalize_word(word: str) -> str:
    """Canonical form of a word: surrounding whitespace removed, uppercase."""
    return word.strip().upper()
