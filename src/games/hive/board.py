"""Board state for Hive.

A position maps each occupied hex to the piece resting on it. The movement
rules read it, take one piece off for the duration of a query, and work on
private copies when several pieces are evaluated at once.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator, Mapping

from pydantic import TypeAdapter

from src.engine.errors import NoPieceError
from src.engine.traversal import bfs
from src.games.hive.types import Color, Hex, Piece

# JSON form of a position: {"q,r,s": {"creature": ..., "color": ...}}
PositionData = dict[str, Piece]
_position_adapter = TypeAdapter(PositionData)


class Position:
    """Occupied hexes of a Hive board. At most one piece per hex."""

    def __init__(self, cells: Mapping[Hex, Piece] | None = None) -> None:
        self._cells: dict[Hex, Piece] = dict(cells) if cells else {}

    def __len__(self) -> int:
        return len(self._cells)

    def __iter__(self) -> Iterator[Hex]:
        return iter(self._cells)

    def __contains__(self, cell: object) -> bool:
        return cell in self._cells

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Position):
            return self._cells == other._cells
        return NotImplemented

    def __repr__(self) -> str:
        return f"Position({len(self._cells)} pieces)"

    def items(self):
        return self._cells.items()

    def is_occupied(self, cell: Hex) -> bool:
        return cell in self._cells

    def piece_at(self, cell: Hex) -> Piece:
        try:
            return self._cells[cell]
        except KeyError:
            raise NoPieceError(cell) from None

    def pieces_of(self, color: Color) -> list[Hex]:
        """Return the hexes holding a piece of *color*."""
        return [cell for cell, piece in self._cells.items() if piece.color == color]

    @contextmanager
    def piece_removed(self, cell: Hex) -> Iterator[Piece]:
        """Take the piece at *cell* off the board for the duration of the block.

        The same piece is put back on the same hex however the block exits.
        Not reentrant for the same hex: inside the block the hex is empty, so
        a nested removal raises NoPieceError.
        """
        piece = self.piece_at(cell)
        del self._cells[cell]
        try:
            yield piece
        finally:
            self._cells[cell] = piece

    def copy(self) -> Position:
        # Pieces are frozen, so a new mapping is a full deep copy
        return Position(self._cells)

    # ── Serialization ──

    @staticmethod
    def from_dict(data: dict) -> Position:
        pieces = _position_adapter.validate_python(data)
        return Position({Hex.from_key(key): piece for key, piece in pieces.items()})

    def to_dict(self) -> dict:
        return {cell.to_key(): piece.model_dump(mode="json") for cell, piece in self._cells.items()}


def is_connected(position: Position) -> bool:
    """Check the one-hive rule: every occupied hex forms a single group.

    An empty board counts as connected.
    """
    if not position:
        return True

    start = next(iter(position))

    def occupied_neighbors(cell: Hex) -> list[Hex]:
        return [n for n in cell.adjacent() if n in position]

    visited_count = sum(len(bucket) for bucket in bfs(start, occupied_neighbors))
    return visited_count == len(position)


def legal_placements(position: Position, color: Color) -> set[Hex]:
    """Return the empty hexes where a new *color* piece may be dropped.

    A hex qualifies when it touches the hive and every piece it touches is
    *color*. The first placements of a game are left to the caller.
    """
    touching: dict[Hex, set[Color]] = {}
    for cell, piece in position.items():
        for neighbor in cell.adjacent():
            if neighbor in position:
                continue
            touching.setdefault(neighbor, set()).add(piece.color)

    return {cell for cell, colors in touching.items() if colors == {color}}
