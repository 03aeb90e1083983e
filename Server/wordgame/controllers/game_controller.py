"""
Game Controller

Handles all game-related HTTP endpoints.
"""

from flask import Blueprint, current_app, request, jsonify
from dataclasses import asdict
from ..config.game_settings import get_settings_catalog
from ..errors import (
    GameNotFound, InvalidGameSettings, InvalidGuessLength, SessionNotActive, WordFetchFailed
)
from ..services.game_service import get_game_service
from ..utils.game_logger import game_logger

game_bp = Blueprint('game', __name__)

# HTTP status per domain error
ERROR_STATUS_CODES = {
    GameNotFound: 404,
    InvalidGameSettings: 400,
    InvalidGuessLength: 400,
    SessionNotActive: 409,
    WordFetchFailed: 502,
}


def _service_unavailable():
    return jsonify({
        'success': False,
        'error': 'Game service unavailable'
    }), 500


def _error_response(error, action, log_game_id=None, **extra):
    """Log a failed action and build its JSON error response."""
    status_code = ERROR_STATUS_CODES.get(type(error), 500)
    if status_code == 500:
        game_logger.log_error(request, error, action, log_game_id)

    error_response = {
        'success': False,
        'error': str(error),
        'error_type': type(error).__name__,
        **extra
    }
    game_logger.log_server_response(request, action, False, error_response, log_game_id)
    return jsonify(error_response), status_code


@game_bp.route('/settings', methods=['GET'])
def get_settings():
    """List selectable languages and difficulties."""
    return jsonify({
        'success': True,
        'defaults': {
            'language': current_app.config.get('DEFAULT_LANGUAGE', 'en'),
            'difficulty': current_app.config.get('DEFAULT_DIFFICULTY', 'medium'),
        },
        **get_settings_catalog()
    })


@game_bp.route('/new_game', methods=['POST'])
def new_game():
    """Create a new game session and fetch its first word."""
    game_service = get_game_service()
    if not game_service:
        return _service_unavailable()

    data = request.get_json(silent=True)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        error_response = {
            'success': False,
            'error': 'Request body must be a JSON object'
        }
        game_logger.log_server_response(request, 'new_game', False, error_response)
        return jsonify(error_response), 400

    language = data.get('language', current_app.config.get('DEFAULT_LANGUAGE', 'en'))
    difficulty = data.get('difficulty', current_app.config.get('DEFAULT_DIFFICULTY', 'medium'))

    game_logger.log_user_action(request, 'new_game', language=language, difficulty=difficulty)

    try:
        game_id = game_service.create_new_game(language, difficulty)
    except Exception as e:
        return _error_response(e, 'new_game')

    try:
        state = game_service.start_round(game_id)
    except Exception as e:
        # The game stays registered so the client can retry the fetch
        return _error_response(
            e, 'new_game', game_id,
            game_id=game_id, state=asdict(game_service.get_game_state(game_id))
        )

    response_data = {
        'success': True,
        'game_id': game_id,
        'state': asdict(state)
    }
    game_logger.log_server_response(
        request, 'new_game', True, response_data, game_id,
        word_length=state.word_length, max_attempts=state.max_attempts
    )
    return jsonify(response_data)


@game_bp.route('/game/<game_id>/word', methods=['POST'])
def retry_word(game_id):
    """Retry fetching the target word of a game still awaiting it."""
    game_service = get_game_service()
    if not game_service:
        return _service_unavailable()

    game_logger.log_user_action(request, 'retry_word', game_id)

    try:
        state = game_service.retry_word_fetch(game_id)
    except Exception as e:
        return _error_response(e, 'retry_word', game_id)

    response_data = {
        'success': True,
        'state': asdict(state)
    }
    game_logger.log_server_response(request, 'retry_word', True, response_data, game_id)
    return jsonify(response_data)


@game_bp.route('/game/<game_id>/state', methods=['GET'])
def get_state(game_id):
    """Get current game state."""
    game_service = get_game_service()
    if not game_service:
        return _service_unavailable()

    game_logger.log_user_action(request, 'get_state', game_id)

    state = game_service.get_game_state(game_id)
    if state is None:
        return _error_response(GameNotFound(game_id), 'get_state', game_id)

    response_data = {
        'success': True,
        'state': asdict(state)
    }
    game_logger.log_server_response(
        request, 'get_state', True, response_data, game_id,
        attempts_used=state.attempts_used, status=state.status
    )
    return jsonify(response_data)


@game_bp.route('/game/<game_id>/guess', methods=['POST'])
def make_guess(game_id):
    """Submit a guess for evaluation."""
    game_service = get_game_service()
    if not game_service:
        return _service_unavailable()

    data = request.get_json(silent=True)
    if not isinstance(data, dict) or 'guess' not in data:
        error_response = {
            'success': False,
            'error': 'Guess is required'
        }
        game_logger.log_server_response(request, 'submit_guess', False, error_response, game_id)
        return jsonify(error_response), 400

    guess = data['guess']
    game_logger.log_user_action(request, 'submit_guess', game_id, guess=guess)

    is_valid, error = game_service.is_valid_guess(guess)
    if not is_valid:
        error_response = {
            'success': False,
            'error': error,
            'error_type': 'InvalidGuess'
        }
        game_logger.log_server_response(
            request, 'submit_guess', False, error_response, game_id,
            validation_error=error, attempted_guess=guess
        )
        return jsonify(error_response), 400

    try:
        evaluated, state = game_service.make_guess(game_id, guess)
    except Exception as e:
        return _error_response(e, 'submit_guess', game_id)

    response_data = {
        'success': True,
        'result': evaluated.as_pairs(),
        'state': asdict(state)
    }
    game_logger.log_server_response(
        request, 'submit_guess', True, response_data, game_id,
        guess=evaluated.guess, attempts_used=state.attempts_used, status=state.status
    )
    return jsonify(response_data)


@game_bp.route('/game/<game_id>/reset', methods=['POST'])
def reset_game(game_id):
    """Start a fresh round with a newly fetched word."""
    game_service = get_game_service()
    if not game_service:
        return _service_unavailable()

    game_logger.log_user_action(request, 'reset_game', game_id)

    try:
        state = game_service.start_round(game_id)
    except Exception as e:
        return _error_response(e, 'reset_game', game_id)

    response_data = {
        'success': True,
        'state': asdict(state)
    }
    game_logger.log_server_response(request, 'reset_game', True, response_data, game_id)
    return jsonify(response_data)


@game_bp.route('/game/<game_id>', methods=['DELETE'])
def delete_game(game_id):
    """Delete a game session."""
    game_service = get_game_service()
    if not game_service:
        return _service_unavailable()

    game_logger.log_user_action(request, 'delete_game', game_id)

    success = game_service.delete_game(game_id)
    response_data = {
        'success': success
    }
    game_logger.log_server_response(request, 'delete_game', success, response_data, game_id)

    if not success:
        response_data['error'] = 'Game not found'
        return jsonify(response_data), 404

    game_logger.log_game_event(game_id, 'game_deleted', request.remote_addr)
    return jsonify(response_data)


@game_bp.route('/health', methods=['GET'])
def health_check():
    """Health check endpoint."""
    game_service = get_game_service()

    response_data = {
        'status': 'healthy' if game_service else 'degraded',
        'active_games': len(game_service.games) if game_service else 0,
        'log_stats': game_logger.get_log_stats()
    }
    game_logger.log_server_response(request, 'health_check', True, response_data)

    return jsonify(response_data)
