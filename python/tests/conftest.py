"""Shared puzzles for the test suite.

Small boards are built by hand so their shortest solutions can be
checked by reasoning as well as by brute force.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from backend.models.configuration import Configuration
from backend.models.piece import Axis, Piece
from backend.models.puzzle import Puzzle

H = Axis.HORIZONTAL
V = Axis.VERTICAL

PUZZLES_DIR = Path(__file__).resolve().parent.parent.parent / "data" / "puzzles"


def make_puzzle(size: int, target: tuple[int, int], *pieces: Piece) -> Puzzle:
    return Puzzle(size=size, start=Configuration.from_pieces(pieces), target=target)


@pytest.fixture
def beginner() -> Puzzle:
    """Slide ``B`` left, drop ``A`` two cells, then the primary: 3 moves.

    ::

        ..A.
        **A.
        ....
        .BB.
    """
    return make_puzzle(4, (2, 1), Piece(0, 1, 2, H), Piece(2, 0, 2, V), Piece(1, 3, 2, H))


@pytest.fixture
def corner() -> Puzzle:
    """``B`` steps left so ``A`` can drop out of row 1: 3 moves.

    ::

        ...A
        **.A
        ..BB
        ....
    """
    return make_puzzle(4, (2, 1), Piece(0, 1, 2, H), Piece(3, 0, 2, V), Piece(2, 2, 2, H))


@pytest.fixture
def boxed_in() -> Puzzle:
    """Column 2 is filled by two immobile vertical pieces."""
    return make_puzzle(4, (2, 1), Piece(0, 1, 2, H), Piece(2, 0, 2, V), Piece(2, 2, 2, V))


@pytest.fixture
def already_solved() -> Puzzle:
    return make_puzzle(4, (2, 1), Piece(2, 1, 2, H), Piece(0, 0, 2, V))
