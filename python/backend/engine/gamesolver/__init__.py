from backend.engine.gamesolver.path import reconstruct_path
from backend.engine.gamesolver.solver import BreadthFirstSearch, Solver

__all__ = ["BreadthFirstSearch", "Solver", "reconstruct_path"]
