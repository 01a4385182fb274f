"""
Game Controller

Handles all game-related HTTP endpoints.
"""

from flask import Blueprint, request, jsonify
from dataclasses import asdict
from ..models.game import ResultCode
from ..services.game_session import GameStateError
from ..utils.decorators import require_game_service
from ..utils.game_logger import game_logger
from ..utils.helpers import parse_bool
from ..utils.messages import result_message

game_bp = Blueprint('game', __name__)


def _not_found(action, game_id):
    error_response = {
        'success': False,
        'error': 'Game not found'
    }
    game_logger.log_server_response(request, action, False, error_response, game_id)
    return jsonify(error_response), 404


@game_bp.route('/new_game', methods=['POST'])
@require_game_service
def new_game(game_service):
    """Create a new game session."""
    try:
        data = request.get_json(silent=True) or {}
        random_target = parse_bool(data.get('random_target'), game_service.random_target)

        game_logger.log_user_action(request, 'new_game', extra_data={'random_target': random_target})

        game_id = game_service.create_new_game(random_target)
        state = game_service.get_game_state(game_id)

        response_data = {
            'success': True,
            'game_id': game_id,
            'state': asdict(state)
        }

        game_logger.log_server_response(
            request, 'new_game', True, response_data, game_id,
            max_attempts=state.max_attempts
        )

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'new_game')

        error_response = {
            'success': False,
            'error': str(e)
        }

        game_logger.log_server_response(request, 'new_game', False, error_response)
        return jsonify(error_response), 400


@game_bp.route('/game/<game_id>/state', methods=['GET'])
@require_game_service
def get_state(game_id, game_service):
    """Get current game state."""
    try:
        game_logger.log_user_action(request, 'get_state', game_id)

        state = game_service.get_game_state(game_id)
        if state is None:
            return _not_found('get_state', game_id)

        response_data = {
            'success': True,
            'state': asdict(state)
        }

        game_logger.log_server_response(
            request, 'get_state', True, response_data, game_id,
            remaining_attempts=state.remaining_attempts, game_over=state.game_over
        )

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'get_state', game_id)
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'get_state', False, error_response, game_id)
        return jsonify(error_response), 500


@game_bp.route('/game/<game_id>/guess', methods=['POST'])
@require_game_service
def make_guess(game_id, game_service):
    """Submit a guess for validation and evaluation."""
    try:
        data = request.get_json(silent=True)
        if not data or 'guess' not in data:
            error_response = {
                'success': False,
                'error': 'Guess is required'
            }
            game_logger.log_server_response(request, 'submit_guess', False, error_response, game_id)
            return jsonify(error_response), 400

        guess = data['guess']

        game_logger.log_user_action(request, 'submit_guess', game_id, guess=guess)

        try:
            outcome = game_service.make_guess(game_id, guess)
        except GameStateError as e:
            error_response = {
                'success': False,
                'error': str(e)
            }
            game_logger.log_server_response(request, 'submit_guess', False, error_response, game_id)
            return jsonify(error_response), 409

        if outcome is None:
            return _not_found('submit_guess', game_id)

        result, state = outcome
        guess_text = guess if isinstance(guess, str) else None
        response_data = {
            'success': result is ResultCode.ACCEPTED,
            'result': result.value,
            'message': result_message(result, guess_text),
            'state': asdict(state)
        }

        if result is not ResultCode.ACCEPTED:
            response_data['error'] = response_data['message']
            game_logger.log_server_response(
                request, 'submit_guess', False, response_data, game_id,
                validation_error=result.value, attempted_guess=guess
            )
            return jsonify(response_data), 400

        game_logger.log_server_response(
            request, 'submit_guess', True, response_data, game_id,
            guess=guess, remaining_attempts=state.remaining_attempts, game_over=state.game_over
        )

        if state.game_over:
            attempts_used = state.max_attempts - state.remaining_attempts
            if state.won:
                game_logger.log_game_event(
                    game_id, 'game_won', request.remote_addr,
                    attempts_used=attempts_used, target_equation=state.answer,
                    winning_guess=guess
                )
            else:
                game_logger.log_game_event(
                    game_id, 'game_lost', request.remote_addr,
                    attempts_used=attempts_used, target_equation=state.answer,
                    final_guess=guess
                )

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'submit_guess', game_id)
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'submit_guess', False, error_response, game_id)
        return jsonify(error_response), 500


@game_bp.route('/game/<game_id>/answer', methods=['GET'])
@require_game_service
def show_answer(game_id, game_service):
    """Reveal the target equation of a game."""
    try:
        game_logger.log_user_action(request, 'show_answer', game_id)

        answer = game_service.reveal_answer(game_id)
        if answer is None:
            return _not_found('show_answer', game_id)

        response_data = {
            'success': True,
            'answer': answer
        }

        game_logger.log_server_response(request, 'show_answer', True, response_data, game_id)
        game_logger.log_game_event(game_id, 'answer_revealed', request.remote_addr)

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'show_answer', game_id)
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'show_answer', False, error_response, game_id)
        return jsonify(error_response), 500


@game_bp.route('/game/<game_id>', methods=['DELETE'])
@require_game_service
def delete_game(game_id, game_service):
    """Delete a game session."""
    try:
        game_logger.log_user_action(request, 'delete_game', game_id)

        success = game_service.delete_game(game_id)

        response_data = {
            'success': success
        }

        game_logger.log_server_response(request, 'delete_game', success, response_data, game_id)

        if success:
            game_logger.log_game_event(game_id, 'game_deleted', request.remote_addr)

        return jsonify(response_data), 200 if success else 404

    except Exception as e:
        game_logger.log_error(request, e, 'delete_game', game_id)
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'delete_game', False, error_response, game_id)
        return jsonify(error_response), 500


@game_bp.route('/health', methods=['GET'])
@require_game_service
def health_check(game_service):
    """Health check endpoint."""
    try:
        game_logger.log_user_action(request, 'health_check')

        response_data = {
            'status': 'healthy',
            'active_games': len(game_service.games),
            'equations_loaded': len(game_service.equations),
            'log_stats': game_logger.get_log_stats()
        }

        game_logger.log_server_response(request, 'health_check', True, response_data)

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'health_check')
        error_response = {
            'status': 'error',
            'error': str(e)
        }
        game_logger.log_server_response(request, 'health_check', False, error_response)
        return jsonify(error_response), 500
