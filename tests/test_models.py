"""Tests for pydantic models.

Tests validate:
1. Records are immutable after construction
2. Constraint violations are rejected
3. Capacity must cover every color
"""

import pytest
from pydantic import ValidationError

from cubegame.core.parser import parse_line
from cubegame.models.types import (
    COLOR_ORDER,
    MAX_COUNT,
    Capacity,
    Color,
    Draw,
    Game,
    PuzzleAnswer,
)


class TestColor:
    """Test Color enum."""

    def test_values_are_log_names(self):
        """Enum values match the names used in logs."""
        assert [c.value for c in COLOR_ORDER] == ["red", "green", "blue"]

    def test_lookup_is_case_sensitive(self):
        """Only lowercase names map to colors."""
        assert Color("red") is Color.RED
        with pytest.raises(ValueError):
            Color("Red")


class TestDraw:
    """Test Draw model."""

    def test_string_keys_coerced(self):
        """Color names are accepted as keys."""
        draw = Draw(counts={"red": 3})
        assert draw.counts == {Color.RED: 3}

    def test_negative_count_rejected(self):
        """Negative counts fail validation."""
        with pytest.raises(ValidationError):
            Draw(counts={Color.RED: -1})

    def test_unknown_color_rejected(self):
        """Keys outside the color set fail validation."""
        with pytest.raises(ValidationError):
            Draw(counts={"purple": 1})

    def test_frozen(self):
        """Draws cannot be reassigned."""
        draw = Draw(counts={Color.RED: 1})
        with pytest.raises(ValidationError):
            draw.cubes = ()

    def test_counts_read_only(self):
        """Counts cannot be changed in place after parsing."""
        draw = parse_line("Game 1: 3 red").draws[0]
        with pytest.raises(TypeError):
            draw.counts[Color.RED] = 99
        with pytest.raises(TypeError):
            draw.counts[Color.BLUE] = 2
        assert draw.counts == {Color.RED: 3}

    def test_count_above_max_rejected(self):
        """Counts beyond the unsigned 32-bit range fail validation."""
        with pytest.raises(ValidationError):
            Draw(counts={Color.RED: MAX_COUNT + 1})

    def test_duplicate_color_rejected(self):
        """A color may appear once per draw."""
        with pytest.raises(ValidationError):
            Draw(cubes=((Color.RED, 1), (Color.RED, 2)))

    def test_hashable(self):
        """Equal draws hash equal."""
        assert hash(Draw(counts={"red": 1})) == hash(Draw(counts={Color.RED: 1}))


class TestGame:
    """Test Game model."""

    def test_non_positive_id_rejected(self):
        """Game ids must be positive."""
        with pytest.raises(ValidationError):
            Game(game_id=0)

    def test_draws_default_empty(self):
        """A game may have no draws."""
        assert Game(game_id=1).draws == ()

    def test_frozen(self):
        """Games cannot be reassigned."""
        game = Game(game_id=1)
        with pytest.raises(ValidationError):
            game.game_id = 2

    def test_hashable(self):
        """Parsed games can be hashed and used in sets."""
        game = parse_line("Game 1: 3 red; 2 blue")
        assert hash(game) == hash(parse_line("Game 1: 3 red; 2 blue"))
        assert len({game, parse_line("Game 1: 3 red; 2 blue")}) == 1

    def test_id_above_max_rejected(self):
        """Ids beyond the unsigned 32-bit range fail validation."""
        with pytest.raises(ValidationError):
            Game(game_id=MAX_COUNT + 1)


class TestCapacity:
    """Test Capacity model."""

    def test_from_mapping(self):
        """A full mapping builds a capacity."""
        capacity = Capacity.from_mapping({Color.RED: 12, Color.GREEN: 13, Color.BLUE: 14})
        assert capacity.as_tuple() == (12, 13, 14)
        assert capacity.limit(Color.GREEN) == 13

    def test_missing_color_rejected(self):
        """A mapping that misses a color is rejected."""
        with pytest.raises(ValueError, match="blue"):
            Capacity.from_mapping({Color.RED: 12, Color.GREEN: 13})

    def test_negative_rejected(self):
        """Negative capacity is rejected."""
        with pytest.raises(ValueError):
            Capacity.from_mapping({Color.RED: -1, Color.GREEN: 13, Color.BLUE: 14})

    def test_all_fields_required(self):
        """Direct construction requires every color."""
        with pytest.raises(ValidationError):
            Capacity(red=1, green=2)


class TestPuzzleAnswer:
    """Test PuzzleAnswer model."""

    def test_valid_answer(self):
        """Valid answer should create model."""
        answer = PuzzleAnswer(part_one=8, part_two=2286, game_count=5)
        assert answer.model_dump() == {"part_one": 8, "part_two": 2286, "game_count": 5}
