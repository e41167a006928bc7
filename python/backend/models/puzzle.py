"""Puzzle definition — board size, start configuration and target cell."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from backend.errors import InvalidPuzzleError, OverlapError
from backend.models.board import Board
from backend.models.configuration import Configuration
from backend.models.piece import Axis, Piece

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Puzzle:
    """A ``size``×``size`` board, its start configuration, and the goal cell.

    The puzzle is solved when the primary piece's leading cell sits on
    ``target``.  Construction validates the definition and raises
    :class:`InvalidPuzzleError` for anything that is not a legal board.
    A target the primary piece can never reach is legal; solving it simply
    finds no solution.
    """

    size: int
    start: Configuration
    target: tuple[int, int]

    def __post_init__(self) -> None:
        self._validate()

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Puzzle:
        """Create a puzzle from its JSON representation.

        Example::

            Puzzle.from_dict({
                "size": 4,
                "target": [2, 1],
                "pieces": [{"x": 0, "y": 1, "length": 2, "axis": "horizontal"}],
            })
        """
        try:
            size = int(data["size"])
            tx, ty = data["target"]
            target = (int(tx), int(ty))
            pieces = [
                Piece(
                    x=int(p["x"]),
                    y=int(p["y"]),
                    length=int(p.get("length", 2)),
                    axis=Axis(p.get("axis", Axis.HORIZONTAL)),
                )
                for p in data["pieces"]
            ]
            start = Configuration.from_pieces(pieces)
        except (KeyError, TypeError, ValueError) as exc:
            raise InvalidPuzzleError(f"Malformed puzzle definition: {exc}") from exc
        return cls(size=size, start=start, target=target)

    def to_dict(self) -> dict[str, Any]:
        return {
            "size": self.size,
            "target": list(self.target),
            "pieces": [
                {"x": p.x, "y": p.y, "length": p.length, "axis": p.axis.value}
                for p in self.start.pieces
            ],
        }

    # -- queries --------------------------------------------------------------

    def is_goal(self, config: Configuration) -> bool:
        return config.primary.leading == self.target

    # -- helpers --------------------------------------------------------------

    def _validate(self) -> None:
        if self.size < 2:
            raise InvalidPuzzleError(f"Board size must be at least 2, got {self.size}.")

        for piece in self.start.pieces:
            if piece.length < 2:
                raise InvalidPuzzleError(f"{piece} must be at least 2 cells long.")
            if not piece.fits(self.size):
                raise InvalidPuzzleError(
                    f"{piece} does not fit on a {self.size}×{self.size} board."
                )

        try:
            Board.render(self.start, self.size)
        except OverlapError as exc:
            raise InvalidPuzzleError(
                f"Pieces overlap at ({exc.x}, {exc.y}):\n{exc.snapshot}"
            ) from exc

        tx, ty = self.target
        if not (0 <= tx < self.size and 0 <= ty < self.size):
            raise InvalidPuzzleError(
                f"Target {self.target} is outside the {self.size}×{self.size} board."
            )


def load_puzzle(path: Path) -> Puzzle:
    """Read a puzzle definition from a JSON file."""
    try:
        data = json.loads(path.read_text())
    except json.JSONDecodeError as exc:
        raise InvalidPuzzleError(f"{path} is not valid JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise InvalidPuzzleError(f"{path} must contain a JSON object.")
    puzzle = Puzzle.from_dict(data)
    logger.info("Loaded %d-piece puzzle from %s", len(puzzle.start.pieces), path)
    return puzzle


REFERENCE_PUZZLE = Puzzle(
    size=6,
    start=Configuration.from_pieces(
        [
            Piece(0, 2, 2, Axis.HORIZONTAL),
            Piece(3, 0, 2, Axis.VERTICAL),
            Piece(4, 0, 2, Axis.HORIZONTAL),
            Piece(4, 1, 2, Axis.HORIZONTAL),
            Piece(3, 2, 2, Axis.VERTICAL),
            Piece(0, 4, 2, Axis.VERTICAL),
            Piece(1, 4, 2, Axis.VERTICAL),
            Piece(3, 4, 2, Axis.HORIZONTAL),
            Piece(5, 3, 2, Axis.VERTICAL),
        ]
    ),
    target=(4, 2),
)
