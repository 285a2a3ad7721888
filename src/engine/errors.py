from __future__ import annotations

from typing import Any


class GameEngineError(Exception):
    """Base class for engine errors."""
    pass


class PreconditionError(GameEngineError):
    """Caller broke the engine's contract. Never a game-rule outcome."""
    pass


class InvalidHexError(PreconditionError):
    """Cube coordinates do not sum to zero, or a hex key is malformed."""
    pass


class NoPieceError(PreconditionError):
    """A piece was expected at a hex that is empty."""

    def __init__(self, cell: Any):
        self.cell = cell
        super().__init__(f"No piece at coordinate {cell}")


class UnknownCreatureError(PreconditionError):
    """Creature outside the closed set the movement rules know about."""

    def __init__(self, creature: Any):
        self.creature = creature
        super().__init__(f"Unrecognised creature: {creature!r}")
