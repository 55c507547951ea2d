"""Pydantic models for cube game records.

Records are frozen: they are built once by the parser and only read by
the aggregates.
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class Color(str, Enum):
    """Cube colors. Values are the literal names used in game logs."""

    RED = "red"
    GREEN = "green"
    BLUE = "blue"


# Column order for count matrices
COLOR_ORDER: tuple[Color, ...] = (Color.RED, Color.GREEN, Color.BLUE)


# Counts and ids are unsigned 32-bit in the log format
MAX_COUNT = 2**32 - 1


class Draw(BaseModel):
    """One round of cubes shown from the bag.

    Stored as ``(color, count)`` pairs so the record stays immutable;
    ``counts`` is a read-only view. Colors absent from it were not shown
    in this round.
    """

    model_config = ConfigDict(frozen=True)

    cubes: tuple[tuple[Color, int], ...] = ()

    @model_validator(mode="before")
    @classmethod
    def counts_to_cubes(cls, data: Any) -> Any:
        if isinstance(data, dict) and "counts" in data:
            data = dict(data)
            counts = data.pop("counts")
            data["cubes"] = tuple(counts.items()) if isinstance(counts, Mapping) else counts
        return data

    @field_validator("cubes")
    @classmethod
    def cubes_valid(cls, value: tuple[tuple[Color, int], ...]) -> tuple[tuple[Color, int], ...]:
        seen: set[Color] = set()
        for color, count in value:
            if color in seen:
                raise ValueError(f"color {color.value} appears twice in one draw")
            seen.add(color)
            if not 0 <= count <= MAX_COUNT:
                raise ValueError(f"count for {color.value} must be in [0, {MAX_COUNT}], got {count}")
        return value

    @property
    def counts(self) -> Mapping[Color, int]:
        return MappingProxyType(dict(self.cubes))


class Game(BaseModel):
    """A labeled sequence of draws."""

    model_config = ConfigDict(frozen=True)

    game_id: int = Field(gt=0, le=MAX_COUNT)
    draws: tuple[Draw, ...] = ()


class Capacity(BaseModel):
    """Assumed true number of cubes of each color in the bag.

    Every color is required, so a draw can never name a color the
    capacity does not cover.
    """

    model_config = ConfigDict(frozen=True)

    red: int = Field(ge=0)
    green: int = Field(ge=0)
    blue: int = Field(ge=0)

    @classmethod
    def from_mapping(cls, mapping: Mapping[Color, int]) -> Capacity:
        """Build from a color -> count mapping covering every color.

        Raises:
            ValueError: If a color is missing or a count is negative.
        """
        missing = [color.value for color in COLOR_ORDER if color not in mapping]
        if missing:
            raise ValueError(f"capacity missing colors: {', '.join(missing)}")
        for color in COLOR_ORDER:
            if mapping[color] < 0:
                raise ValueError(f"capacity for {color.value} must be >= 0, got {mapping[color]}")
        return cls(**{color.value: mapping[color] for color in COLOR_ORDER})

    def limit(self, color: Color) -> int:
        return getattr(self, color.value)

    def as_tuple(self) -> tuple[int, ...]:
        """Limits in COLOR_ORDER."""
        return tuple(self.limit(color) for color in COLOR_ORDER)


class PuzzleAnswer(BaseModel):
    """Both aggregates over one parsed log."""

    part_one: int
    part_two: int
    game_count: int
