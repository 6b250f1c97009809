"""Shared fixtures for the TicTacToe tests."""

import pytest

from helpers import RecordingObserver
from logic.config import GameConfig
from logic.game_engine import GameEngine
from logic.game_state import Player


@pytest.fixture
def recorder():
    return RecordingObserver()


@pytest.fixture
def engine(recorder):
    """Two-human engine with a RecordingObserver subscribed as 'recorder'."""
    game = GameEngine(config=GameConfig())
    game.registry.subscribe("recorder", recorder)
    return game


@pytest.fixture
def cpu_config():
    config = GameConfig()
    config.AUTONOMOUS_PLAYER = Player.O
    config.RANDOM_SEED = 7
    return config
