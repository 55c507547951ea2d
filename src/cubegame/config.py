"""Runtime configuration.

Defaults live here as module constants; environment variables override
them and are read at call time:
- CUBEGAME_INPUT: path of the game log
- CUBEGAME_CAPACITY: bag contents, e.g. "red=12,green=13,blue=14"
- CUBEGAME_LOG_LEVEL: logging level for the console entry
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from cubegame.models.types import Capacity, Color

DEFAULT_INPUT_PATH = Path("input.txt")
DEFAULT_CAPACITY = {Color.RED: 12, Color.GREEN: 13, Color.BLUE: 14}
DEFAULT_LOG_LEVEL = "WARNING"

INPUT_ENV = "CUBEGAME_INPUT"
CAPACITY_ENV = "CUBEGAME_CAPACITY"
LOG_LEVEL_ENV = "CUBEGAME_LOG_LEVEL"


def get_input_path(override: str | Path | None = None) -> Path:
    """Resolve the game log path: explicit override, then env, then default."""
    if override is not None:
        return Path(override)
    return Path(os.environ.get(INPUT_ENV, str(DEFAULT_INPUT_PATH)))


def parse_capacity(spec: str) -> Capacity:
    """Parse a "red=12,green=13,blue=14" capacity string.

    Raises:
        ValueError: If an entry is malformed, a color is unknown or
            repeated, or a color is missing.
    """
    mapping: dict[Color, int] = {}
    for entry in spec.split(","):
        name, sep, value = entry.partition("=")
        if not sep:
            raise ValueError(f"capacity entry must be 'color=count', got {entry.strip()!r}")
        try:
            color = Color(name.strip())
        except ValueError:
            raise ValueError(f"unknown color in capacity: {name.strip()!r}") from None
        if color in mapping:
            raise ValueError(f"color {color.value} given twice in capacity")
        try:
            mapping[color] = int(value.strip())
        except ValueError:
            raise ValueError(f"invalid capacity count for {color.value}: {value.strip()!r}") from None
    return Capacity.from_mapping(mapping)


def get_capacity() -> Capacity:
    """Capacity from CUBEGAME_CAPACITY, or DEFAULT_CAPACITY when unset."""
    spec = os.environ.get(CAPACITY_ENV)
    if spec:
        return parse_capacity(spec)
    return Capacity.from_mapping(DEFAULT_CAPACITY)


def get_log_level() -> str:
    """Logging level name from CUBEGAME_LOG_LEVEL, or DEFAULT_LOG_LEVEL.

    Raises:
        ValueError: If the name is not a known logging level.
    """
    level = os.environ.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"unknown log level: {level!r}")
    return level
