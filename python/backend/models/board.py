"""Board model — a bounds-checked grid of cell labels."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from backend.errors import OverlapError

if TYPE_CHECKING:
    from backend.models.configuration import Configuration

EMPTY = "."
PRIMARY_LABEL = "*"


def piece_label(index: int) -> str:
    """Return the one-character label for the piece at *index*.

    Index 0 is the primary piece; the others get ``A``, ``B``, ...
    """
    if index == 0:
        return PRIMARY_LABEL
    return chr(ord("A") + index - 1)


@dataclass
class Board:
    """Square grid of one-character labels, ``EMPTY`` where no piece sits.

    Cells are addressed by ``(x, y)`` with x the column and y the row.
    Out-of-range access raises ``IndexError``.
    """

    size: int
    cells: list[list[str]]

    # -- construction helpers -------------------------------------------------

    @classmethod
    def empty(cls, size: int) -> Board:
        return cls(size=size, cells=[[EMPTY] * size for _ in range(size)])

    @classmethod
    def render(cls, config: Configuration, size: int) -> Board:
        """Project every piece of *config* onto a fresh board.

        Raises :class:`OverlapError` if two pieces claim the same cell.
        """
        board = cls.empty(size)
        for index, piece in enumerate(config.pieces):
            label = piece_label(index)
            for x, y in piece.cells():
                occupant = board.get(x, y)
                if occupant != EMPTY:
                    raise OverlapError(x, y, piece, occupant, board.to_text())
                board.set(x, y, label)
        return board

    # -- queries --------------------------------------------------------------

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.size and 0 <= y < self.size

    def get(self, x: int, y: int) -> str:
        self._check(x, y)
        return self.cells[y][x]

    def is_free(self, x: int, y: int) -> bool:
        """Return True if ``(x, y)`` is on the board and unoccupied."""
        return self.in_bounds(x, y) and self.cells[y][x] == EMPTY

    def to_text(self) -> str:
        """Row-major text, one row per line."""
        return "".join("".join(row) + "\n" for row in self.cells)

    # -- mutation -------------------------------------------------------------

    def set(self, x: int, y: int, label: str) -> None:
        self._check(x, y)
        self.cells[y][x] = label

    def copy(self) -> Board:
        return Board(size=self.size, cells=[row[:] for row in self.cells])

    # -- helpers --------------------------------------------------------------

    def _check(self, x: int, y: int) -> None:
        if not self.in_bounds(x, y):
            raise IndexError(
                f"Cell ({x}, {y}) is outside the {self.size}×{self.size} board."
            )
