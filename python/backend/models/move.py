"""Move model — one edge of the configuration graph."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

from backend.models.piece import Axis, Piece

if TYPE_CHECKING:
    from backend.models.configuration import Configuration


class Direction(StrEnum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True)
class Move:
    """Slide the piece at ``index`` (currently at ``piece``) by ``delta`` cells."""

    index: int
    piece: Piece
    delta: int

    @property
    def direction(self) -> Direction:
        if self.piece.axis is Axis.HORIZONTAL:
            return Direction.RIGHT if self.delta > 0 else Direction.LEFT
        return Direction.DOWN if self.delta > 0 else Direction.UP

    @property
    def distance(self) -> int:
        return abs(self.delta)

    def apply(self, config: Configuration) -> Configuration:
        return config.move(self.index, self.delta)

    @classmethod
    def between(cls, before: Configuration, after: Configuration) -> Move:
        """Recover the single move that turns *before* into *after*.

        Raises ``ValueError`` unless exactly one piece changed position
        along its own axis.
        """
        if before.primary != after.primary:
            if Counter(before.others) != Counter(after.others):
                raise ValueError("More than one piece moved.")
            old, new, index = before.primary, after.primary, 0
        else:
            removed = Counter(before.others) - Counter(after.others)
            added = Counter(after.others) - Counter(before.others)
            if sum(removed.values()) != 1 or sum(added.values()) != 1:
                raise ValueError("Expected exactly one piece to move.")
            (old,) = removed
            (new,) = added
            index = before.pieces.index(old)

        if old.axis != new.axis or old.length != new.length:
            raise ValueError(f"{old} cannot become {new}.")
        if old.axis is Axis.HORIZONTAL:
            if old.y != new.y:
                raise ValueError(f"{old} cannot leave its row.")
            delta = new.x - old.x
        else:
            if old.x != new.x:
                raise ValueError(f"{old} cannot leave its column.")
            delta = new.y - old.y
        return cls(index=index, piece=old, delta=delta)

    def __str__(self) -> str:
        return f"{self.piece} {self.direction.value} {self.distance}"
