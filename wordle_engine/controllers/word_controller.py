"""
Word Controller

Dictionary endpoints: a random secret word and membership checks.
"""

from flask import Blueprint, request, jsonify
from ..services.game_service import get_game_service
from ..utils.game_logger import game_logger

word_bp = Blueprint('word', __name__)


@word_bp.route('/word', methods=['GET'])
def random_word():
    """Return a uniformly chosen dictionary word."""
    game_service = get_game_service()
    if not game_service:
        return jsonify({
            'success': False,
            'error': 'Game service unavailable'
        }), 500

    game_logger.log_user_action(request, 'random_word')

    word = game_service.pick_word()
    response_data = {'value': str(word)}

    game_logger.log_server_response(request, 'random_word', True, {'served': True})
    return jsonify(response_data)


@word_bp.route('/words/<word>', methods=['GET'])
def check_word(word):
    """Tell whether ``word`` is in the dictionary."""
    game_service = get_game_service()
    if not game_service:
        return jsonify({
            'success': False,
            'error': 'Game service unavailable'
        }), 500

    game_logger.log_user_action(request, 'check_word', word=word)

    valid = game_service.word_set.contains(word)
    response_data = {
        'success': True,
        'word': word.upper(),
        'valid': valid
    }

    game_logger.log_server_response(request, 'check_word', True, response_data)
    return jsonify(response_data)
