"""Run both aggregates over a game log.

Pure: parsed games are only read, so repeated calls give identical
answers.
"""

from __future__ import annotations

import logging
from typing import Sequence

from cubegame.aggregation.feasibility import sum_feasible_ids
from cubegame.aggregation.power import sum_powers
from cubegame.core.parser import parse_games
from cubegame.models.types import Capacity, Game, PuzzleAnswer

logger = logging.getLogger(__name__)


def solve(games: Sequence[Game], capacity: Capacity) -> PuzzleAnswer:
    """Compute part one and part two for parsed games.

    Args:
        games: Parsed games.
        capacity: Bag contents for the feasibility check.

    Returns:
        PuzzleAnswer with both aggregates.
    """
    answer = PuzzleAnswer(
        part_one=sum_feasible_ids(games, capacity),
        part_two=sum_powers(games),
        game_count=len(games),
    )
    logger.info(
        f"Solved {answer.game_count} games: part_one={answer.part_one}, "
        f"part_two={answer.part_two}"
    )
    return answer


def solve_text(text: str, capacity: Capacity) -> PuzzleAnswer:
    """Parse a game log and compute both aggregates.

    Raises:
        ParseError: If the log is malformed.
    """
    return solve(parse_games(text), capacity)
