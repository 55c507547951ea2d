"""Minimum-power aggregate (part two).

For each game, the fewest cubes of each color that make every draw
possible is the per-color maximum across its draws. A game's power is
the product of those maxima over the colors it ever showed.
"""

from __future__ import annotations

import logging
import math
from typing import Iterable

from cubegame.aggregation.matrix import ABSENT, count_matrix
from cubegame.models.types import COLOR_ORDER, Color, Game

logger = logging.getLogger(__name__)


def minimum_cubes(game: Game) -> dict[Color, int]:
    """Per-color maximum count across a game's draws.

    Colors never shown in any draw are left out rather than mapped to 0.
    """
    matrix = count_matrix(game)
    if matrix.size == 0:
        return {}

    maxima = matrix.max(axis=0)
    return {
        color: int(maxima[col])
        for col, color in enumerate(COLOR_ORDER)
        if maxima[col] != ABSENT
    }


def game_power(game: Game) -> int:
    """Product of the minimum cube counts (1 when no color was shown)."""
    # Python ints, so large counts cannot overflow
    return math.prod(minimum_cubes(game).values())


def sum_powers(games: Iterable[Game]) -> int:
    """Sum of game powers.

    Args:
        games: Parsed games.

    Returns:
        Sum of game_power over all games (0 if none).
    """
    total = 0
    for game in games:
        power = game_power(game)
        logger.debug(f"Game {game.game_id} power={power}")
        total += power
    return total
