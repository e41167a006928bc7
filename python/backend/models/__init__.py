from backend.models.board import Board
from backend.models.configuration import Configuration
from backend.models.move import Direction, Move
from backend.models.piece import Axis, Piece
from backend.models.puzzle import REFERENCE_PUZZLE, Puzzle, load_puzzle

__all__ = [
    "Axis",
    "Board",
    "Configuration",
    "Direction",
    "Move",
    "Piece",
    "Puzzle",
    "REFERENCE_PUZZLE",
    "load_puzzle",
]
