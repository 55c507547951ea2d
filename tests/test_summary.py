"""Tests for running both aggregates together."""

import pytest

from cubegame.aggregation.summary import solve, solve_text
from cubegame.core.errors import ParseError


class TestSolve:
    """Test solve and solve_text."""

    def test_sample(self, sample_games, capacity):
        """Sample log gives 8 and 2286."""
        answer = solve(sample_games, capacity)
        assert answer.part_one == 8
        assert answer.part_two == 2286
        assert answer.game_count == 5

    def test_solve_text(self, sample_log, capacity):
        """Text is parsed then aggregated."""
        answer = solve_text(sample_log, capacity)
        assert (answer.part_one, answer.part_two) == (8, 2286)

    def test_idempotent(self, sample_games, capacity):
        """Repeated runs on the same records agree."""
        assert solve(sample_games, capacity) == solve(sample_games, capacity)

    def test_records_unchanged(self, sample_games, capacity):
        """Aggregation does not modify parsed records."""
        before = [g.model_dump() for g in sample_games]
        solve(sample_games, capacity)
        assert [g.model_dump() for g in sample_games] == before

    def test_malformed_text_raises(self, capacity):
        """A malformed log produces no answer."""
        with pytest.raises(ParseError):
            solve_text("Game 1: 1 red\nGame two: 1 red\n", capacity)
