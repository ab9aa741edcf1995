import os

# Keep test runs from writing dated log files into the working directory
os.environ.setdefault('LOG_DIR', '')

import pytest

from wordle_engine import create_app
from wordle_engine.config import TestingConfig
from wordle_engine.services.dictionary import load_dictionary
from wordle_engine.services.game_service import GameService, initialize_game_service
from wordle_engine.services.random_source import XorShiftRandom


@pytest.fixture(scope='session')
def loaded_dictionary():
    return load_dictionary()


@pytest.fixture
def dictionary(loaded_dictionary):
    return loaded_dictionary[0]


@pytest.fixture
def word_set(loaded_dictionary):
    return loaded_dictionary[1]


@pytest.fixture
def game_service(dictionary, word_set):
    return GameService(dictionary, word_set, XorShiftRandom(TestingConfig.RANDOM_SEED))


@pytest.fixture
def client(dictionary, word_set):
    service = initialize_game_service(dictionary, word_set, XorShiftRandom(TestingConfig.RANDOM_SEED))
    app = create_app(TestingConfig)
    with app.test_client() as client:
        client.game_service = service
        yield client


