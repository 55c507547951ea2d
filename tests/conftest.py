"""Shared pytest fixtures for cubegame tests."""

import pytest

from cubegame.models.types import Capacity

SAMPLE_LOG = """\
Game 1: 3 blue, 4 red; 1 red, 2 green, 6 blue; 2 green
Game 2: 1 blue, 2 green; 3 green, 4 blue, 1 red; 1 green, 1 blue
Game 3: 8 green, 6 blue, 20 red; 5 blue, 4 red, 13 green; 5 green, 1 red
Game 4: 1 green, 3 red, 6 blue; 3 green, 6 red; 3 green, 15 blue, 14 red
Game 5: 6 red, 1 blue, 3 green; 2 blue, 1 red, 2 green
"""


@pytest.fixture
def sample_log() -> str:
    """The five-game sample log."""
    return SAMPLE_LOG


@pytest.fixture
def sample_games(sample_log):
    """Parsed five-game sample log."""
    from cubegame.core.parser import parse_games

    return parse_games(sample_log)


@pytest.fixture
def capacity() -> Capacity:
    """Bag with 12 red, 13 green and 14 blue cubes."""
    return Capacity(red=12, green=13, blue=14)
