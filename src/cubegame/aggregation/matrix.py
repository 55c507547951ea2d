"""Count matrix for a single game.

Rows are draws, columns follow COLOR_ORDER. Colors a draw does not
mention hold ABSENT so that "not shown" stays distinct from "shown 0".
"""

from __future__ import annotations

import numpy as np

from cubegame.models.types import COLOR_ORDER, Game

ABSENT = -1


def count_matrix(game: Game) -> np.ndarray:
    """Build the (draws x colors) count matrix for a game.

    Args:
        game: Parsed game.

    Returns:
        int64 array of shape (len(game.draws), len(COLOR_ORDER)).
    """
    matrix = np.full((len(game.draws), len(COLOR_ORDER)), ABSENT, dtype=np.int64)
    for row, draw in enumerate(game.draws):
        for color, count in draw.cubes:
            matrix[row, COLOR_ORDER.index(color)] = count
    return matrix
