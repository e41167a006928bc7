#!/usr/bin/env python3
"""Unblock puzzle solver.

Usage::

    python main.py                       # solve the built-in 6×6 puzzle (Rich)
    python main.py -f vanilla -d 2       # plain terminal, 2 s per frame
    python main.py -p puzzle.json --no-animate
    python main.py --hint                # print only the next move
"""

import importlib
import logging
import sys
from enum import StrEnum
from pathlib import Path
from typing import TYPE_CHECKING, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

if TYPE_CHECKING:
    from backend.models.puzzle import Puzzle

logger = logging.getLogger("unblock")

# Exit statuses
EXIT_INTERNAL_ERROR = 1
EXIT_INVALID_PUZZLE = 2
EXIT_NO_SOLUTION = 3


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    vanilla = "vanilla"
    rich = "rich"


_RUNNERS = {
    Frontend.vanilla: "frontend.cli.vanilla.app",
    Frontend.rich: "frontend.cli.rich.app",
}


# -- helpers ------------------------------------------------------------------


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[
            RichHandler(
                console=Console(stderr=True),
                rich_tracebacks=True,
                show_path=verbose,
            )
        ],
        force=True,
    )


def _load(puzzle_path: Optional[Path]) -> "Puzzle":
    from backend.models.puzzle import REFERENCE_PUZZLE, load_puzzle

    if puzzle_path is None:
        return REFERENCE_PUZZLE
    return load_puzzle(puzzle_path)


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    puzzle_path: Optional[Path] = typer.Option(
        None, "-p", "--puzzle",
        exists=True, dir_okay=False, readable=True,
        help="JSON puzzle definition. Omit for the built-in 6×6 puzzle.",
    ),
    frontend: Frontend = typer.Option(
        Frontend.rich, "-f", "--frontend",
        help="Frontend used to show the solution.",
    ),
    delay: float = typer.Option(
        0.5, "-d", "--delay",
        min=0.0,
        help="Seconds between animation frames.",
    ),
    animate: bool = typer.Option(
        True, "--animate/--no-animate",
        help="Replay the solution frame by frame.",
    ),
    hint: bool = typer.Option(
        False, "--hint",
        help="Print only the next move and exit.",
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log search progress.",
    ),
) -> None:
    """Find a minimal-move solution to an unblock puzzle."""
    from backend.errors import InvalidPuzzleError, InvariantViolation

    _configure_logging(verbose)

    try:
        puzzle = _load(puzzle_path)
    except InvalidPuzzleError as exc:
        typer.echo(f"Invalid puzzle: {exc}", err=True)
        raise typer.Exit(EXIT_INVALID_PUZZLE) from exc

    mod = importlib.import_module(_RUNNERS[frontend])
    try:
        if hint:
            mod.show_hint(puzzle)
            return
        path = mod.run(puzzle, delay=delay, animate=animate)
    except InvariantViolation as exc:
        logger.critical("Internal consistency failure: %s", exc)
        raise typer.Exit(EXIT_INTERNAL_ERROR) from exc

    if not path:
        raise typer.Exit(EXIT_NO_SOLUTION)


if __name__ == "__main__":
    app()
