"""Solver test suite.

Shortest-solution lengths on small boards are cross-checked against an
iterative-deepening brute force that shares no move-generation code with
the solver.  Every returned path is replayed move by move.
"""

from __future__ import annotations

from typing import Optional

import pytest

from backend.engine.gamesolver import BreadthFirstSearch, Solver, reconstruct_path
from backend.errors import MissingPredecessorError
from backend.models.configuration import Configuration
from backend.models.move import Move
from backend.models.piece import Piece
from backend.models.puzzle import REFERENCE_PUZZLE, Puzzle
from tests.conftest import H, V, make_puzzle


# -- brute force --------------------------------------------------------------


def _slides(pieces: tuple[Piece, ...], index: int, size: int):
    """Yield every position piece *index* can slide to, one cell at a time."""
    blocked = {cell for i, p in enumerate(pieces) if i != index for cell in p.cells()}
    for sign in (-1, 1):
        step = 1
        while True:
            moved = pieces[index].moved(sign * step)
            if not moved.fits(size) or blocked.intersection(moved.cells()):
                break
            yield moved
            step += 1


def _brute_force(puzzle: Puzzle, limit: int = 8) -> Optional[int]:
    """Return the shortest move count by iterative deepening, or None."""

    def dfs(pieces: tuple[Piece, ...], depth: int) -> bool:
        if pieces[0].leading == puzzle.target:
            return True
        if depth == 0:
            return False
        for index in range(len(pieces)):
            for moved in _slides(pieces, index, puzzle.size):
                nxt = pieces[:index] + (moved,) + pieces[index + 1:]
                if dfs(nxt, depth - 1):
                    return True
        return False

    for depth in range(limit + 1):
        if dfs(puzzle.start.pieces, depth):
            return depth
    return None


# -- helpers ------------------------------------------------------------------


def _assert_valid_path(puzzle: Puzzle, path: list[Configuration]) -> None:
    """Every consecutive pair differs by one in-range move of one piece."""
    assert path[0] == puzzle.start
    assert puzzle.is_goal(path[-1])
    for a, b in zip(path, path[1:]):
        move = Move.between(a, b)
        low, high = move.piece.movement_range(a.render(puzzle.size))
        assert move.delta != 0
        assert low <= move.delta <= high
        assert move.apply(a) == b


# -- tests --------------------------------------------------------------------


@pytest.mark.parametrize("name,expected", [("beginner", 3), ("corner", 3)])
def test_shortest_solution_matches_brute_force(name, expected, request) -> None:
    puzzle = request.getfixturevalue(name)
    path = Solver.solve(puzzle)
    _assert_valid_path(puzzle, path)
    assert len(path) - 1 == expected
    assert _brute_force(puzzle) == expected


def test_single_blocker_two_moves() -> None:
    puzzle = make_puzzle(4, (2, 1), Piece(0, 1, 2, H), Piece(2, 0, 2, V))
    path = Solver.solve(puzzle)
    _assert_valid_path(puzzle, path)
    assert len(path) - 1 == _brute_force(puzzle) == 2


def test_no_solution_returns_empty(boxed_in) -> None:
    assert Solver.solve(boxed_in) == []
    assert not Solver.is_solvable(boxed_in)
    assert Solver.hint(boxed_in) is None


def test_zero_move_solution(already_solved) -> None:
    path = Solver.solve(already_solved)
    assert path == [already_solved.start]
    assert Solver.hint(already_solved) is None
    assert Solver.is_solvable(already_solved)


def test_zero_move_with_unsorted_start() -> None:
    puzzle = make_puzzle(4, (2, 1), Piece(2, 1, 2, H), Piece(1, 2, 2, V), Piece(0, 0, 2, V))
    assert puzzle.start.others != puzzle.start.canonical().others
    assert Solver.solve(puzzle) == [puzzle.start]


def test_target_off_primary_line_has_no_solution() -> None:
    puzzle = make_puzzle(4, (2, 2), Piece(0, 1, 2, H), Piece(3, 0, 2, V))
    assert Solver.solve(puzzle) == []


def test_target_where_primary_cannot_fit_has_no_solution() -> None:
    puzzle = make_puzzle(4, (3, 1), Piece(0, 1, 2, H))
    assert Solver.solve(puzzle) == []


def test_hint_is_first_move(beginner) -> None:
    hint = Solver.hint(beginner)
    path = Solver.solve(beginner)
    assert hint == Move.between(path[0], path[1])


def test_moves_lists_each_step(beginner) -> None:
    path = Solver.solve(beginner)
    moves = Solver.moves(path)
    assert len(moves) == len(path) - 1
    config = path[0]
    for move in moves:
        config = move.apply(config)
    assert config == path[-1]


def test_step_until_goal(corner) -> None:
    search = BreadthFirstSearch(corner)
    assert not search.done
    goal = None
    while goal is None:
        goal = search.step()
    assert search.done
    assert goal is search.goal
    assert corner.is_goal(goal)
    assert search.step() is goal


def test_step_until_exhausted(boxed_in) -> None:
    search = BreadthFirstSearch(boxed_in)
    while not search.done:
        assert search.step() is None
    assert search.goal is None
    assert search.solve() == []


def test_reference_puzzle_end_to_end() -> None:
    path = Solver.solve(REFERENCE_PUZZLE)
    assert path, "reference puzzle must be solvable"
    _assert_valid_path(REFERENCE_PUZZLE, path)
    assert path[-1].primary.leading == (4, 2)


def test_reachable_configurations_never_overlap() -> None:
    search = BreadthFirstSearch(REFERENCE_PUZZLE)
    search.solve()
    for config in search.predecessors:
        config.render(REFERENCE_PUZZLE.size)


# -- path reconstruction ------------------------------------------------------


def test_reconstruct_path_walks_back_to_root() -> None:
    a = Configuration.from_pieces([Piece(0, 0, 2, H)])
    b = a.move(0, 1)
    c = b.move(0, 1)
    assert reconstruct_path(c, {a: None, b: a, c: b}) == [a, b, c]
    assert reconstruct_path(a, {a: None}) == [a]


def test_reconstruct_path_missing_predecessor() -> None:
    a = Configuration.from_pieces([Piece(0, 0, 2, H)])
    b = a.move(0, 1)
    c = b.move(0, 1)
    with pytest.raises(MissingPredecessorError) as excinfo:
        reconstruct_path(c, {a: None, c: b})
    assert excinfo.value.config == b
