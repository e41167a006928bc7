"""Rich terminal frontend — tables, colours, and panels.

Uses the ``rich`` library for styled output while sharing the same
backend as the vanilla CLI.
"""

from __future__ import annotations

import time

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from backend.engine.gamesolver import Solver
from backend.models.board import EMPTY, PRIMARY_LABEL, piece_label
from backend.models.configuration import Configuration
from backend.models.move import Move
from backend.models.puzzle import Puzzle

console = Console()

_PALETTE = (
    "cyan", "magenta", "yellow", "blue", "bright_cyan",
    "bright_magenta", "bright_yellow", "bright_blue", "white",
)


# -- board rendering ----------------------------------------------------------


def _style(label: str) -> str:
    if label == PRIMARY_LABEL:
        return "bold red"
    return _PALETTE[(ord(label) - ord("A")) % len(_PALETTE)]


def _render_board(config: Configuration, puzzle: Puzzle) -> Table:
    """Return a Rich Table representing the board, with the target cell marked."""
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(puzzle.size):
        table.add_column(width=1, justify="center")

    board = config.render(puzzle.size)
    tx, ty = puzzle.target
    for y, row in enumerate(board.cells):
        cells: list[str] = []
        for x, label in enumerate(row):
            if label == EMPTY:
                marker = "○" if (x, y) == (tx, ty) else "·"
                cells.append(f"[dim]{marker}[/dim]")
            else:
                cells.append(f"[{_style(label)}]{label}[/{_style(label)}]")
        table.add_row(*cells)

    return table


def _panel(puzzle: Puzzle, config: Configuration, title: str, status: Text) -> Panel:
    size = puzzle.size
    return Panel(
        Group(Align.center(_render_board(config, puzzle)), Align.center(status)),
        title=f"[bold cyan]{title}  {size}×{size}[/bold cyan]",
        border_style="cyan",
        padding=(1, 2),
    )


def _move_table(moves: list[Move]) -> Table:
    table = Table(box=rich.box.ROUNDED, border_style="dim")
    table.add_column("#", justify="right", style="dim", width=3)
    table.add_column("Piece")
    table.add_column("Direction", style="yellow")
    table.add_column("Cells", justify="right", style="yellow")
    for i, move in enumerate(moves, 1):
        label = piece_label(move.index)
        table.add_row(
            str(i),
            f"[{_style(label)}]{label}[/{_style(label)}] ({move.piece.x}, {move.piece.y})",
            move.direction.value,
            str(move.distance),
        )
    return table


# -- public entry points ------------------------------------------------------


def run(puzzle: Puzzle, delay: float = 0.5, animate: bool = True) -> list[Configuration]:
    """Solve *puzzle* and replay the solution.  Returns the solution path."""
    with console.status("[cyan]Searching…[/cyan]"):
        path = Solver.solve(puzzle)

    if not path:
        console.print(
            _panel(puzzle, puzzle.start.canonical(), "Unblock",
                   Text("\nNo solution.", style="bold red"))
        )
        return path

    moves = Solver.moves(path)
    if animate:
        for i, config in enumerate(path):
            progress = Text("\n")
            if i == 0:
                progress.append("Start", style="bold cyan")
            else:
                progress.append(f"Move {i}/{len(moves)} ", style="bold cyan")
                progress.append(f"({moves[i - 1].direction.value})", style="dim")
            console.clear()
            console.print(Align.center(_panel(puzzle, config, "Unblock", progress)))
            time.sleep(delay)
    else:
        console.print(_panel(puzzle, path[0], "Unblock", Text("\nStart", style="bold cyan")))
        console.print(_move_table(moves))

    console.print(f"[bold green]Moves: {len(moves)}[/bold green]")
    return path


def show_hint(puzzle: Puzzle) -> None:
    """Print the next move of a shortest solution."""
    hint = Solver.hint(puzzle)
    if hint is None:
        if puzzle.is_goal(puzzle.start):
            console.print("[green]Already solved![/green]")
        else:
            console.print("[yellow]No hint available (unsolvable).[/yellow]")
        return
    console.print(f"[cyan]Hint:[/cyan] move [bold]{hint}[/bold]")
