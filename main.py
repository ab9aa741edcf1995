"""
Wordle Engine Server - Main Entry Point

Loads and verifies the dictionary, initializes the game service and starts
the Flask application.
"""

import os

from wordle_engine import create_app
from wordle_engine.config import config, get_word_statistics
from wordle_engine.services.dictionary import initialize_dictionary, get_word_set
from wordle_engine.services.game_service import initialize_game_service
from wordle_engine.services.random_source import XorShiftRandom
from wordle_engine.utils.game_logger import game_logger


def main():
    """Main function to initialize services and start the server."""
    config_class = config.get(os.getenv('APP_ENV', 'default'), config['default'])
    try:
        print("Initializing services...")

        dictionary = initialize_dictionary()
        print(f"✓ Dictionary loaded: {len(dictionary)} words, perfect hash verified")
        word_stats = get_word_statistics()
        game_logger.logger.info(
            f"Dictionary: {word_stats['total_words']} words, "
            f"{word_stats['avg_vowel_count']} vowels on average"
        )

        initialize_game_service(dictionary, get_word_set(), XorShiftRandom(config_class.RANDOM_SEED))
        print("✓ Game service initialized successfully")

        print("Creating Flask application...")
        app = create_app(config_class)
        print("✓ Flask application created successfully")

        game_logger.logger.info("Wordle Engine Server starting")

        print(f"\nStarting Wordle Engine Server on {config_class.HOST}:{config_class.PORT}")
        print(f"Debug mode: {config_class.DEBUG}")
        print("=" * 50)

        app.run(host=config_class.HOST, port=config_class.PORT, debug=config_class.DEBUG)

    except KeyboardInterrupt:
        print("\nServer shutting down...")
        game_logger.logger.info("Wordle Engine Server shutting down (KeyboardInterrupt)")
    except Exception as e:
        print(f"Error starting server: {e}")
        game_logger.logger.error(f"Error starting server: {e}")
        raise


if __name__ == '__main__':
    main()
