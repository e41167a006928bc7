"""Unblock puzzle solver — breadth-first search over configurations."""

from __future__ import annotations

import logging
from collections import deque

from backend.engine.gamesolver.path import reconstruct_path
from backend.models.configuration import Configuration
from backend.models.move import Move
from backend.models.puzzle import Puzzle

logger = logging.getLogger(__name__)


class BreadthFirstSearch:
    """Level-by-level search from a puzzle's start configuration.

    ``predecessors`` doubles as the visited set: a configuration has been
    discovered iff it is a key.  Because every move costs the same, the
    first time a configuration is discovered it is at its shortest
    distance from the start, so entries are never revised.

    Call :meth:`step` repeatedly (e.g. to check a deadline between
    expansions) or :meth:`solve` to run to completion.
    """

    def __init__(self, puzzle: Puzzle) -> None:
        self.puzzle = puzzle
        start = puzzle.start.canonical()
        self.frontier: deque[tuple[Configuration, int]] = deque([(start, 0)])
        self.predecessors: dict[Configuration, Configuration | None] = {start: None}
        self.goal: Configuration | None = None
        self.expanded: int = 0
        self._depth: int = 0

    @property
    def done(self) -> bool:
        return self.goal is not None or not self.frontier

    def step(self) -> Configuration | None:
        """Expand the front of the frontier.

        Returns the goal configuration once it is dequeued, else ``None``.
        """
        if self.done:
            return self.goal

        config, moves = self.frontier.popleft()
        if moves != self._depth:
            self._depth = moves
            logger.debug(
                "Depth %d: %d discovered, %d queued",
                moves, len(self.predecessors), len(self.frontier),
            )

        if self.puzzle.is_goal(config):
            self.goal = config
            return config

        self.expanded += 1
        for neighbor in config.neighbors(self.puzzle.size):
            if neighbor not in self.predecessors:
                self.predecessors[neighbor] = config
                self.frontier.append((neighbor, moves + 1))
        return None

    def solve(self) -> list[Configuration]:
        """Run to completion; return the start-to-goal path or ``[]``."""
        while not self.done:
            self.step()

        if self.goal is None:
            logger.info(
                "No solution: explored all %d reachable configurations",
                len(self.predecessors),
            )
            return []

        path = reconstruct_path(self.goal, self.predecessors)
        logger.info(
            "Solved in %d moves (%d expanded, %d discovered)",
            len(path) - 1, self.expanded, len(self.predecessors),
        )
        return path


class Solver:
    """Stateless solver — all methods are static."""

    @staticmethod
    def solve(puzzle: Puzzle) -> list[Configuration]:
        """Return the configurations of a shortest solution, or ``[]`` if unsolvable.

        The first element is the canonical start configuration; a puzzle
        that already starts at its goal yields a one-element list.
        """
        return BreadthFirstSearch(puzzle).solve()

    @staticmethod
    def hint(puzzle: Puzzle) -> Move | None:
        """Return the first move of a shortest solution, or ``None`` if solved / unsolvable."""
        path = Solver.solve(puzzle)
        if len(path) < 2:
            return None
        return Move.between(path[0], path[1])

    @staticmethod
    def is_solvable(puzzle: Puzzle) -> bool:
        """Return True if *puzzle* can reach its goal."""
        return bool(Solver.solve(puzzle))

    @staticmethod
    def moves(path: list[Configuration]) -> list[Move]:
        """Return the move made between each consecutive pair of *path*."""
        return [Move.between(a, b) for a, b in zip(path, path[1:])]
