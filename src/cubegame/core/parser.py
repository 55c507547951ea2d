"""Game log parser.

Grammar, one game per line:

    Game <id>: <count> <color>, <count> <color>; <count> <color>; ...

Rounds are separated by ';', cubes within a round by ','. Color names
are case-sensitive. Blank lines are skipped.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path

from cubegame.core.errors import (
    InvalidColorError,
    InvalidCountError,
    MalformedLineError,
    ParseError,
)
from cubegame.models.types import MAX_COUNT, Color, Draw, Game

logger = logging.getLogger(__name__)

DRAW_SEPARATOR = ";"
CUBE_SEPARATOR = ","

_HEADER_RE = re.compile(r"^Game ([0-9]+):(.*)$")


def parse_games(text: str) -> list[Game]:
    """Parse a whole game log.

    Args:
        text: Log text, one game per line.

    Returns:
        Games in input line order.

    Raises:
        ParseError: On the first malformed line. No partial result is returned.
    """
    games: list[Game] = []
    seen_ids: dict[int, int] = {}

    # Only \n and \r\n end a line; other Unicode separators stay in the text
    for line_no, raw in enumerate(text.split("\n"), start=1):
        line = raw.removesuffix("\r")
        if not line.strip():
            continue

        game = parse_line(line, line_no=line_no)

        if game.game_id in seen_ids:
            raise MalformedLineError(
                f"duplicate game id {game.game_id} (first seen on line {seen_ids[game.game_id]})",
                line_no=line_no,
                line=line,
            )
        seen_ids[game.game_id] = line_no
        games.append(game)

    logger.debug(f"Parsed {len(games)} games")
    return games


def parse_line(line: str, line_no: int | None = None) -> Game:
    """Parse a single ``Game <id>: ...`` record.

    Args:
        line: One line of the log.
        line_no: 1-based line number for diagnostics.

    Returns:
        The parsed Game.

    Raises:
        MalformedLineError: If the line does not match the grammar.
        InvalidColorError: If a color name is not recognized.
        InvalidCountError: If a count is not a valid non-negative integer.
    """
    try:
        return _parse_record(line.strip())
    except ParseError as e:
        raise type(e)(e.message, line_no=line_no, line=line) from None


def read_games(path: Path) -> list[Game]:
    """Read and parse a UTF-8 game log file.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        ParseError: If any line is malformed.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Game log not found: {path}")

    logger.info(f"Reading game log {path}")
    return parse_games(path.read_text(encoding="utf-8"))


def _parse_record(text: str) -> Game:
    match = _HEADER_RE.match(text)
    if match is None:
        raise MalformedLineError("expected 'Game <id>: <draws>'")

    game_id = int(match.group(1))
    if game_id <= 0:
        raise MalformedLineError(f"game id must be positive, got {game_id}")
    if game_id > MAX_COUNT:
        raise MalformedLineError(f"game id {game_id} exceeds {MAX_COUNT}")

    draws = tuple(_parse_draw(chunk) for chunk in match.group(2).split(DRAW_SEPARATOR))
    return Game(game_id=game_id, draws=draws)


def _parse_draw(chunk: str) -> Draw:
    if not chunk.strip():
        raise MalformedLineError("empty draw")

    counts: dict[Color, int] = {}
    for entry in chunk.split(CUBE_SEPARATOR):
        tokens = entry.split()
        if len(tokens) != 2:
            raise MalformedLineError(f"expected '<count> <color>', got {entry.strip()!r}")

        count = _parse_count(tokens[0])
        color = _parse_color(tokens[1])
        if color in counts:
            raise MalformedLineError(f"color {color.value} appears twice in one draw")
        counts[color] = count

    return Draw(counts=counts)


def _parse_count(token: str) -> int:
    # isdigit alone accepts non-ASCII digits such as superscripts
    if not (token.isascii() and token.isdigit()):
        raise InvalidCountError(f"invalid count {token!r}")

    value = int(token)
    if value > MAX_COUNT:
        raise InvalidCountError(f"count {value} exceeds {MAX_COUNT}")
    return value


def _parse_color(token: str) -> Color:
    try:
        return Color(token)
    except ValueError:
        raise InvalidColorError(f"unknown color {token!r}") from None
