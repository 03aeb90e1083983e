"""
WebSocket Event Handlers

Real-time counterpart of the HTTP game endpoints. Every event answers the
sender with either a 'game_state' or an 'error' event.
"""

from dataclasses import asdict
from flask import current_app, request
from flask_socketio import emit
from ..errors import WordgameError
from ..services.game_service import get_game_service
from ..utils.game_logger import game_logger


def _payload(data):
    """Event data as a dict; anything else is treated as empty."""
    return data if isinstance(data, dict) else {}


def _emit_error(error, action, game_id=None):
    if not isinstance(error, WordgameError):
        game_logger.log_error(request, error, action, game_id)
    payload = {
        'game_id': game_id,
        'error': str(error),
        'error_type': type(error).__name__
    }
    game_logger.log_server_response(request, action, False, payload, game_id)
    emit('error', payload)


def _emit_state(state, action, **extra):
    payload = {
        'game_id': state.game_id,
        'state': asdict(state),
        **extra
    }
    game_logger.log_server_response(request, action, True, payload, state.game_id)
    emit('game_state', payload)


def register_websocket_handlers(socketio):
    """Register all WebSocket event handlers."""

    @socketio.on('new_game')
    def handle_new_game(data=None):
        """Create a game and start its first round."""
        game_service = get_game_service()
        if not game_service:
            emit('error', {'error': 'Game service unavailable'})
            return

        data = _payload(data)
        language = data.get('language', current_app.config.get('DEFAULT_LANGUAGE', 'en'))
        difficulty = data.get('difficulty', current_app.config.get('DEFAULT_DIFFICULTY', 'medium'))
        game_logger.log_user_action(request, 'new_game', language=language, difficulty=difficulty)

        try:
            game_id = game_service.create_new_game(language, difficulty)
        except Exception as e:
            _emit_error(e, 'new_game')
            return

        try:
            state = game_service.start_round(game_id)
        except Exception as e:
            _emit_error(e, 'new_game', game_id)
            return

        _emit_state(state, 'new_game')

    @socketio.on('submit_guess')
    def handle_submit_guess(data=None):
        """Submit a guess for an existing game."""
        game_service = get_game_service()
        if not game_service:
            emit('error', {'error': 'Game service unavailable'})
            return

        data = _payload(data)
        game_id = data.get('game_id')
        guess = data.get('guess')
        game_logger.log_user_action(request, 'submit_guess', game_id, guess=guess)

        is_valid, error = game_service.is_valid_guess(guess)
        if not is_valid:
            payload = {'game_id': game_id, 'error': error, 'error_type': 'InvalidGuess'}
            game_logger.log_server_response(
                request, 'submit_guess', False, payload, game_id,
                validation_error=error, attempted_guess=guess
            )
            emit('error', payload)
            return

        try:
            evaluated, state = game_service.make_guess(game_id, guess)
        except Exception as e:
            _emit_error(e, 'submit_guess', game_id)
            return

        _emit_state(state, 'submit_guess', result=evaluated.as_pairs())

    @socketio.on('reset_game')
    def handle_reset_game(data=None):
        """Start a fresh round, or retry the first word fetch."""
        game_service = get_game_service()
        if not game_service:
            emit('error', {'error': 'Game service unavailable'})
            return

        game_id = _payload(data).get('game_id')
        game_logger.log_user_action(request, 'reset_game', game_id)

        try:
            state = game_service.start_round(game_id)
        except Exception as e:
            _emit_error(e, 'reset_game', game_id)
            return

        _emit_state(state, 'reset_game')

    @socketio.on('get_state')
    def handle_get_state(data=None):
        """Send the current state of a game."""
        game_service = get_game_service()
        if not game_service:
            emit('error', {'error': 'Game service unavailable'})
            return

        game_id = _payload(data).get('game_id')
        state = game_service.get_game_state(game_id)
        if state is None:
            emit('error', {'game_id': game_id, 'error': 'Game not found', 'error_type': 'GameNotFound'})
            return

        _emit_state(state, 'get_state')
