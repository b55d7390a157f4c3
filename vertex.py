"""
Vertex abstraction for simplegraph.

A vertex is identified by its name. It also carries the colour/predecessor
record a breadth-first search needs; searches work on their own scratch
vertices so graph-owned vertices keep their initial state.
"""

from enum import Enum
from typing import Optional


class VisitState(Enum):
    """
    Traversal colour of a vertex during a single search.

    UNVISITED: not yet reached (white).
    DISCOVERED: reached and queued (gray).
    FINISHED: dequeued and all neighbours examined (black).
    """

    UNVISITED = "unvisited"
    DISCOVERED = "discovered"
    FINISHED = "finished"


class Vertex:
    """Named vertex with per-search traversal state."""

    __slots__ = ("_name", "_visit_state", "_predecessor")

    def __init__(self, name: str) -> None:
        self._name = name
        self._visit_state = VisitState.UNVISITED
        self._predecessor: Optional[str] = None

    @property
    def name(self) -> str:
        """Stable identity key."""
        return self._name

    # --- Traversal state ----------------------------------------------------

    @property
    def visit_state(self) -> VisitState:
        return self._visit_state

    def mark_discovered(self) -> None:
        self._visit_state = VisitState.DISCOVERED

    def mark_unvisited(self) -> None:
        self._visit_state = VisitState.UNVISITED

    def mark_finished(self) -> None:
        self._visit_state = VisitState.FINISHED

    @property
    def predecessor(self) -> Optional[str]:
        """Name of the vertex this one was discovered from, if any."""
        return self._predecessor

    def set_predecessor(self, name: Optional[str]) -> None:
        self._predecessor = name

    # --- Identity -----------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vertex):
            return NotImplemented
        return self._name == other._name

    def __hash__(self) -> int:
        return hash(self._name)

    def __str__(self) -> str:
        return self._name

    def __repr__(self) -> str:
        return f"Vertex({self._name!r})"
