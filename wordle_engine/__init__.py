"""
Wordle Engine Package

Scoring, perfect-hash dictionary lookup, game sessions and player stats for
a Wordle-style game, with a small Flask API on top.
"""

from flask import Flask
from flask_cors import CORS
from .config import Config


def create_app(config_class=Config):
    """
    Application factory pattern for creating Flask app instances.

    Services are initialized separately (see main.py) so tests can install
    their own dictionary and random source.

    Args:
        config_class: Configuration class to use

    Returns:
        Flask application instance with all extensions initialized
    """
    app = Flask(__name__)
    app.config.from_object(config_class)

    # Any origin may fetch a word, as browsers call the API directly
    CORS(app)

    from .controllers.game_controller import game_bp
    from .controllers.word_controller import word_bp

    app.register_blueprint(game_bp, url_prefix='/api')
    app.register_blueprint(word_bp, url_prefix='/api')

    return app
