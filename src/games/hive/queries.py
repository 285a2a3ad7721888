"""Board-wide move queries for one player's pieces."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed

from src.config import settings
from src.games.hive.board import Position
from src.games.hive.movement import available_moves
from src.games.hive.types import Color, Hex

logger = logging.getLogger(__name__)


def all_available_moves(
    position: Position,
    color: Color,
    max_workers: int | None = None,
) -> dict[Hex, set[Hex]]:
    """Return the legal moves of every *color* piece, keyed by origin hex.

    Pieces without a legal move are left out. Each piece is evaluated on its
    own copy of the position, so the evaluations run in parallel and never see
    each other's temporarily removed piece. Errors raised for any piece
    propagate to the caller.
    """
    origins = position.pieces_of(color)
    if not origins:
        return {}

    workers = max_workers or settings.max_workers
    logger.debug("Evaluating %d %s pieces on %d workers", len(origins), color.value, workers)

    moves: dict[Hex, set[Hex]] = {}
    with ThreadPoolExecutor(max_workers=workers) as executor:
        futures = {
            executor.submit(available_moves, origin, position.copy()): origin
            for origin in origins
        }
        for future in as_completed(futures):
            destinations = future.result()
            if destinations:
                moves[futures[future]] = destinations

    logger.debug("%d of %d %s pieces can move", len(moves), len(origins), color.value)
    return moves
