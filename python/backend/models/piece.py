"""Piece model — a rigid block sliding along one axis."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING, Iterator

if TYPE_CHECKING:
    from backend.models.board import Board

HASH_MULT = 31
HASH_MASK = (1 << 64) - 1


class Axis(StrEnum):
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"

    @property
    def ordinal(self) -> int:
        return 0 if self is Axis.HORIZONTAL else 1

    @property
    def step(self) -> tuple[int, int]:
        """Unit (dx, dy) offset along this axis."""
        return (1, 0) if self is Axis.HORIZONTAL else (0, 1)


@dataclass(frozen=True)
class Piece:
    """A block of ``length`` cells starting at its leading cell ``(x, y)``.

    Horizontal pieces extend to the right, vertical pieces extend down.
    """

    x: int
    y: int
    length: int = 2
    axis: Axis = Axis.HORIZONTAL

    # -- geometry -------------------------------------------------------------

    def cells(self) -> Iterator[tuple[int, int]]:
        dx, dy = self.axis.step
        for i in range(self.length):
            yield self.x + dx * i, self.y + dy * i

    @property
    def leading(self) -> tuple[int, int]:
        return self.x, self.y

    @property
    def trailing(self) -> tuple[int, int]:
        dx, dy = self.axis.step
        return self.x + dx * (self.length - 1), self.y + dy * (self.length - 1)

    def fits(self, size: int) -> bool:
        """Return True if every cell lies on a ``size``×``size`` board."""
        tx, ty = self.trailing
        return 0 <= self.x and 0 <= self.y and tx < size and ty < size

    def moved(self, delta: int) -> Piece:
        """Return a copy shifted ``delta`` cells along the axis."""
        dx, dy = self.axis.step
        return Piece(self.x + dx * delta, self.y + dy * delta, self.length, self.axis)

    def movement_range(self, board: Board) -> tuple[int, int]:
        """Return ``(min_delta, max_delta)`` this piece can slide on *board*.

        Walks backward from the leading cell and forward from the trailing
        cell until the first occupied cell or the board edge.  Each side is
        scanned independently, so a piece wedged on one side still reports
        its free run on the other.
        """
        dx, dy = self.axis.step

        min_delta = 0
        cx, cy = self.x - dx, self.y - dy
        while board.is_free(cx, cy):
            min_delta -= 1
            cx, cy = cx - dx, cy - dy

        max_delta = 0
        cx, cy = self.trailing
        cx, cy = cx + dx, cy + dy
        while board.is_free(cx, cy):
            max_delta += 1
            cx, cy = cx + dx, cy + dy

        return min_delta, max_delta

    # -- ordering / hashing ---------------------------------------------------

    def sort_key(self) -> tuple[int, int]:
        return self.y, self.x

    def structural_hash(self) -> int:
        return self.x + HASH_MULT * (
            self.y + HASH_MULT * (self.length + HASH_MULT * self.axis.ordinal)
        )

    def __hash__(self) -> int:
        return self.structural_hash()

    def __str__(self) -> str:
        return (
            f"Piece(x={self.x}, y={self.y}, length={self.length}, "
            f"axis={self.axis.value})"
        )
