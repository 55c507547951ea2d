"""Console entry point.

Usage:
    cubegame [INPUT]
    python -m cubegame [INPUT]

Exit codes:
    0: Both answers printed
    1: Input missing, malformed log or bad configuration
"""

from __future__ import annotations

import argparse
import logging
import sys

from cubegame import config
from cubegame.aggregation.summary import solve
from cubegame.core.errors import ParseError
from cubegame.core.parser import read_games


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="cubegame",
        description="Compute feasibility and minimum-power sums for a cube game log.",
    )
    parser.add_argument(
        "input",
        nargs="?",
        default=None,
        help=f"game log path (default: ${config.INPUT_ENV} or {config.DEFAULT_INPUT_PATH})",
    )
    args = parser.parse_args(argv)

    try:
        logging.basicConfig(
            level=config.get_log_level(),
            format="%(levelname)s %(name)s: %(message)s",
            stream=sys.stderr,
        )
        capacity = config.get_capacity()
        games = read_games(config.get_input_path(args.input))
    except (FileNotFoundError, ParseError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    answer = solve(games, capacity)
    print(f"Part one: {answer.part_one}")
    print(f"Part two: {answer.part_two}")
    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
