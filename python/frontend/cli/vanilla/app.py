"""Vanilla terminal frontend — no third-party dependencies.

Uses only stdlib (print, ANSI codes) to replay a solution frame by frame.
Each frame is the plain-text board: ``*`` for the primary piece, a letter
per other piece, ``.`` for empty cells.
"""

from __future__ import annotations

import sys
import time

from backend.engine.gamesolver import Solver
from backend.models.board import EMPTY, PRIMARY_LABEL
from backend.models.configuration import Configuration
from backend.models.puzzle import Puzzle


# -- ANSI helpers -------------------------------------------------------------

_G = "\033[32;1m"    # bold green
_Y = "\033[33;1m"    # bold yellow
_C = "\033[36;1m"    # bold cyan
_DIM = "\033[2m"     # dim
_R = "\033[0m"       # reset


def _clear() -> None:
    sys.stdout.write("\033[2J\033[H")
    sys.stdout.flush()


# -- board rendering ----------------------------------------------------------


def _render_board(config: Configuration, size: int) -> str:
    """Return an ANSI-coloured text representation of *config*."""
    lines: list[str] = []
    for row in config.to_text(size).splitlines():
        cells: list[str] = []
        for label in row:
            if label == PRIMARY_LABEL:
                cells.append(f"{_G}{label}{_R}")
            elif label == EMPTY:
                cells.append(f"{_DIM}{label}{_R}")
            else:
                cells.append(label)
        lines.append("  " + " ".join(cells))
    return "\n".join(lines)


# -- screens ------------------------------------------------------------------


def _show_frame(puzzle: Puzzle, config: Configuration, status: str) -> None:
    _clear()
    size = puzzle.size
    print(f"  {_C}=== Unblock ({size}×{size}) ==={_R}")
    print()
    print(_render_board(config, size))
    print()
    print(f"  {status}")
    sys.stdout.flush()


def _print_summary(puzzle: Puzzle, path: list[Configuration]) -> None:
    print(_render_board(path[0], puzzle.size))
    print()
    for i, move in enumerate(Solver.moves(path), 1):
        print(f"  {i:>3}. {move}")
    print()


# -- public entry points ------------------------------------------------------


def run(puzzle: Puzzle, delay: float = 0.5, animate: bool = True) -> list[Configuration]:
    """Solve *puzzle* and replay the solution.  Returns the solution path."""
    path = Solver.solve(puzzle)

    if not path:
        print(_render_board(puzzle.start.canonical(), puzzle.size))
        print()
        print("No solution.")
        return path

    if animate:
        moves = Solver.moves(path)
        _show_frame(puzzle, path[0], "Start")
        time.sleep(delay)
        for i, (move, config) in enumerate(zip(moves, path[1:]), 1):
            _show_frame(puzzle, config, f"Move {i}/{len(moves)}  ({move.direction.value})")
            time.sleep(delay)
        print()
    else:
        _print_summary(puzzle, path)

    print(f"Moves: {len(path) - 1}")
    return path


def show_hint(puzzle: Puzzle) -> None:
    """Print the next move of a shortest solution."""
    hint = Solver.hint(puzzle)
    if hint is None:
        if puzzle.is_goal(puzzle.start):
            print(f"{_G}Already solved!{_R}")
        else:
            print(f"{_Y}No hint available (unsolvable).{_R}")
        return
    print(f"{_C}Hint:{_R} move {hint}")
