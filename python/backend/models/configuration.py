"""Configuration model — one node of the puzzle's search graph."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Sequence

from backend.models.board import Board
from backend.models.move import Move
from backend.models.piece import HASH_MASK, HASH_MULT, Piece


def _canonical_key(piece: Piece) -> tuple[int, int, int, int]:
    # (y, x) decides; length and axis only break ties between overlapping pieces.
    return (*piece.sort_key(), piece.length, piece.axis.ordinal)


@dataclass(frozen=True, eq=False)
class Configuration:
    """A placement of every piece on the board.

    The primary piece is kept in its own field so that reordering the
    other pieces can never change which one the goal test looks at.
    Equality and hashing ignore the order of ``others``: two placements
    that differ only in bookkeeping order are the same configuration.
    """

    primary: Piece
    others: tuple[Piece, ...] = ()

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_pieces(cls, pieces: Sequence[Piece]) -> Configuration:
        """Build a configuration from a list whose element 0 is the primary piece."""
        if not pieces:
            raise ValueError("A configuration needs at least the primary piece.")
        return cls(primary=pieces[0], others=tuple(pieces[1:]))

    def canonical(self) -> Configuration:
        """Return the canonical form: non-primary pieces sorted by ``(y, x)``."""
        others = tuple(sorted(self.others, key=_canonical_key))
        if others == self.others:
            return self
        return Configuration(primary=self.primary, others=others)

    # -- queries --------------------------------------------------------------

    @property
    def pieces(self) -> tuple[Piece, ...]:
        return (self.primary, *self.others)

    def render(self, size: int) -> Board:
        return Board.render(self, size)

    def to_text(self, size: int) -> str:
        return self.render(size).to_text()

    def structural_hash(self) -> int:
        """Fold piece hashes in canonical order."""
        cur = 0
        for piece in self.canonical().pieces:
            cur = (cur * HASH_MULT + piece.structural_hash()) & HASH_MASK
            cur ^= (cur << 32) & HASH_MASK
        return cur

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Configuration):
            return NotImplemented
        return (
            self.primary == other.primary
            and self.canonical().others == other.canonical().others
        )

    def __hash__(self) -> int:
        return self.structural_hash()

    # -- move generation ------------------------------------------------------

    def move(self, index: int, delta: int) -> Configuration:
        """Return the canonical configuration with piece *index* moved by *delta*."""
        pieces = list(self.pieces)
        pieces[index] = pieces[index].moved(delta)
        return Configuration.from_pieces(pieces).canonical()

    def successors(self, size: int) -> Iterator[tuple[Move, Configuration]]:
        """Yield every ``(move, neighbor)`` pair reachable in one move.

        Order is ascending piece index, then ascending delta.
        """
        board = self.render(size)
        for index, piece in enumerate(self.pieces):
            min_delta, max_delta = piece.movement_range(board)
            for delta in range(min_delta, max_delta + 1):
                if delta == 0:
                    continue
                yield Move(index, piece, delta), self.move(index, delta)

    def neighbors(self, size: int) -> list[Configuration]:
        return [neighbor for _, neighbor in self.successors(size)]

    def __str__(self) -> str:
        return "[" + ", ".join(str(p) for p in self.pieces) + "]"
