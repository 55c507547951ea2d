"""Feasibility aggregate (part one).

A game is feasible when no draw shows more cubes of a color than the
bag holds. Colors a draw does not mention always pass.
"""

from __future__ import annotations

import logging
from typing import Iterable

import numpy as np

from cubegame.aggregation.matrix import count_matrix
from cubegame.models.types import MAX_COUNT, Capacity, Game

logger = logging.getLogger(__name__)


def is_feasible(game: Game, capacity: Capacity) -> bool:
    """Check whether every draw of a game fits within capacity.

    A game with zero draws is feasible.
    """
    matrix = count_matrix(game)
    if matrix.size == 0:
        return True

    # Counts never exceed MAX_COUNT, so clipping keeps limits within int64
    limits = np.array([min(limit, MAX_COUNT) for limit in capacity.as_tuple()], dtype=np.int64)
    # ABSENT (-1) is always <= a non-negative limit
    return bool(np.all(matrix <= limits))


def feasible_games(games: Iterable[Game], capacity: Capacity) -> list[Game]:
    """Games possible under capacity, in input order."""
    feasible = []
    for game in games:
        if is_feasible(game, capacity):
            feasible.append(game)
        else:
            logger.debug(f"Game {game.game_id} exceeds capacity {capacity.as_tuple()}")
    return feasible


def sum_feasible_ids(games: Iterable[Game], capacity: Capacity) -> int:
    """Sum of ids of every game possible under capacity.

    Args:
        games: Parsed games.
        capacity: Cubes of each color in the bag.

    Returns:
        Sum of feasible game ids (0 if none).
    """
    return sum(game.game_id for game in feasible_games(games, capacity))
