"""CLI for inspecting legal Hive moves in a position.

Usage::

    uv run python -m src.games.hive.cli position.json --color white

    # Moves of a single piece (colour is taken from the piece)
    uv run python -m src.games.hive.cli position.json --origin 0,0,0

    # Where a new black piece may be dropped
    uv run python -m src.games.hive.cli position.json --color black --placements

The position file maps "q,r,s" keys to {"creature": ..., "color": ...}.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Iterable

from src.config import settings
from src.engine.errors import GameEngineError
from src.games.hive.board import Position, legal_placements
from src.games.hive.movement import available_moves
from src.games.hive.queries import all_available_moves
from src.games.hive.types import Color, Hex


def _sorted_keys(cells: Iterable[Hex]) -> list[str]:
    return sorted(cell.to_key() for cell in cells)


def _load_position(path: str) -> Position:
    with open(path, encoding="utf-8") as f:
        return Position.from_dict(json.load(f))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Hive legal move inspector")
    parser.add_argument("position", help="Path to a JSON position file")
    parser.add_argument(
        "--color",
        choices=[c.value for c in Color],
        default=Color.WHITE.value,
        help="Player whose moves or placements are listed",
    )
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("--origin", help="Only list moves of the piece at this hex (q,r,s)")
    mode.add_argument(
        "--placements",
        action="store_true",
        help="List legal drop hexes instead of moves",
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=settings.max_workers,
        help="Thread pool size for the board-wide query",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(level=settings.log_level)

    try:
        position = _load_position(args.position)
        color = Color(args.color)

        if args.placements:
            result: object = _sorted_keys(legal_placements(position, color))
        elif args.origin:
            result = _sorted_keys(available_moves(Hex.from_key(args.origin), position))
        else:
            moves = all_available_moves(position, color, max_workers=args.workers)
            result = {
                origin.to_key(): _sorted_keys(dests)
                for origin, dests in sorted(moves.items(), key=lambda item: item[0].to_key())
            }
    except (OSError, ValueError, GameEngineError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(json.dumps(result, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
