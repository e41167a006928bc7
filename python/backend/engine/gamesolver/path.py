"""Path reconstruction over a predecessor map."""

from __future__ import annotations

from typing import Mapping

from backend.errors import MissingPredecessorError
from backend.models.configuration import Configuration


def reconstruct_path(
    goal: Configuration,
    predecessors: Mapping[Configuration, Configuration | None],
) -> list[Configuration]:
    """Return the configurations from the search root to *goal*, inclusive.

    *predecessors* maps each visited configuration to the one it was first
    reached from; the root maps to ``None``.  A configuration missing from
    the map means it was never produced by the search that built it.
    """
    path: list[Configuration] = []
    current: Configuration | None = goal
    while current is not None:
        path.append(current)
        try:
            current = predecessors[current]
        except KeyError:
            raise MissingPredecessorError(current) from None
    path.reverse()
    return path
