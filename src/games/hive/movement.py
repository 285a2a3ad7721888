"""Movement rules for Hive pieces.

Every rule runs on the position with the moving piece already taken off the
board, so a piece never blocks or supports its own move.
"""

from __future__ import annotations

import logging

from src.engine.errors import UnknownCreatureError
from src.engine.traversal import bfs
from src.games.hive.board import Position, is_connected
from src.games.hive.types import Creature, Direction, Hex

logger = logging.getLogger(__name__)

SPIDER_STEPS = 3


def available_moves(origin: Hex, position: Position) -> set[Hex]:
    """Return every hex the piece at *origin* may move to this turn.

    Raises NoPieceError if *origin* is empty. The position is left exactly as
    it was on return.
    """
    piece = position.piece_at(origin)

    with position.piece_removed(origin):
        # Moving this piece must not split the hive
        if not is_connected(position):
            logger.debug("%s at %s is pinned by the one-hive rule", piece.creature.value, origin.to_key())
            return set()

        return set(_creature_moves(piece.creature, origin, position))


def _creature_moves(creature: Creature, origin: Hex, position: Position) -> list[Hex]:
    if creature is Creature.QUEEN_BEE:
        return adjacent_slide_moves(origin, position, allow_climbing=False)
    if creature is Creature.BEETLE:
        return adjacent_slide_moves(origin, position, allow_climbing=True)
    if creature is Creature.GRASSHOPPER:
        return jump_moves(origin, position)
    if creature is Creature.SPIDER:
        return bounded_traversal_moves(origin, position)
    if creature is Creature.SOLDIER_ANT:
        return unbounded_traversal_moves(origin, position)
    raise UnknownCreatureError(creature)


def adjacent_slide_moves(cell: Hex, position: Position, allow_climbing: bool) -> list[Hex]:
    """Return the adjacent hexes a piece at *cell* can slide (or climb) to.

    Rules for each neighbour, judged together with the neighbours either side
    of it:
    1. The piece must stay in contact with the hive
    2. An empty gap between two occupied hexes is too narrow to slide through
    3. Occupied hexes are only reachable by creatures that climb
    """
    adjacent = cell.adjacent()
    n = len(adjacent)

    moves: list[Hex] = []
    for i, dest in enumerate(adjacent):
        dest_occupied = position.is_occupied(dest)
        prev_occupied = position.is_occupied(adjacent[(i - 1) % n])
        next_occupied = position.is_occupied(adjacent[(i + 1) % n])

        if not dest_occupied and not prev_occupied and not next_occupied:
            continue
        if not dest_occupied and prev_occupied and next_occupied:
            continue
        if dest_occupied and not allow_climbing:
            continue

        moves.append(dest)
    return moves


def jump_moves(cell: Hex, position: Position) -> list[Hex]:
    """Return the hexes reachable by jumping in a straight line over pieces."""
    moves: list[Hex] = []
    for direction in Direction:
        target = cell.move(direction)
        if not position.is_occupied(target):
            continue
        while position.is_occupied(target):
            target = target.move(direction)
        moves.append(target)
    return moves


def bounded_traversal_moves(cell: Hex, position: Position) -> list[Hex]:
    """Return the hexes exactly SPIDER_STEPS slides away.

    Hexes reachable in fewer slides by another route are excluded, and a walk
    that dead-ends early contributes nothing.
    """
    return bfs(cell, _slide_neighbors(position), SPIDER_STEPS)[SPIDER_STEPS]


def unbounded_traversal_moves(cell: Hex, position: Position) -> list[Hex]:
    """Return every hex reachable by any number of slides."""
    nodes_by_depth = bfs(cell, _slide_neighbors(position))
    return [h for bucket in nodes_by_depth[1:] for h in bucket]


def _slide_neighbors(position: Position):
    def neighbors(cell: Hex) -> list[Hex]:
        return adjacent_slide_moves(cell, position, allow_climbing=False)
    return neighbors
