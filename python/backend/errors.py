"""Exception hierarchy for the unblock solver.

Two families live here:

* :class:`InvalidPuzzleError`: a bad puzzle definition supplied by the
  user.  Raised by the loader and validator, reported as a normal error.
* :class:`InvariantViolation`: an internal-consistency failure (pieces
  overlapping on the board, a broken predecessor chain).  Legal move
  generation never produces these; the CLI treats them as fatal.

"No solution" is **not** an error: the solver returns an empty list.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from backend.models.configuration import Configuration
    from backend.models.piece import Piece


class UnblockError(Exception):
    """Base class for every error raised by this package."""


class InvalidPuzzleError(UnblockError, ValueError):
    """The puzzle definition is malformed or describes an impossible board."""


class InvariantViolation(UnblockError, AssertionError):
    """An internal invariant was broken."""


class OverlapError(InvariantViolation):
    """Two pieces claim the same cell while rendering a configuration."""

    def __init__(
        self,
        x: int,
        y: int,
        piece: Piece,
        occupant: str,
        snapshot: str,
    ) -> None:
        self.x = x
        self.y = y
        self.piece = piece
        self.occupant = occupant
        self.snapshot = snapshot
        super().__init__(
            f"Clash at coordinates x={x}, y={y} when drawing {piece}, "
            f"found: {occupant}\nCurrent state of board:\n{snapshot}"
        )


class MissingPredecessorError(InvariantViolation):
    """A configuration on the solution path has no recorded predecessor."""

    def __init__(self, config: Configuration) -> None:
        self.config = config
        super().__init__(f"No predecessor recorded for configuration {config}")
