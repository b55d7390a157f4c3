"""
Degree queries for simplegraph.

The degree of a vertex is the size of its adjacency set, so a self-loop
counts once.
"""

from enum import Enum
from typing import Optional, Union

from config import DEFAULT_TIE_BREAK
from errors import EmptyGraphError
from graph import Graph
from vertex import Vertex


class TieBreakPolicy(Enum):
    """
    Which vertex max_degree returns when several share the top degree.

    FIRST_INSERTED: the one added to the graph earliest.
    LAST_INSERTED: the one added to the graph latest.
    LEXICOGRAPHIC: the one with the smallest name.
    """

    FIRST_INSERTED = "first_inserted"
    LAST_INSERTED = "last_inserted"
    LEXICOGRAPHIC = "lexicographic"


# Global policy used when max_degree is called without one.
TIE_BREAK_POLICY: TieBreakPolicy = TieBreakPolicy(DEFAULT_TIE_BREAK)


def set_tie_break_policy(policy: Union[TieBreakPolicy, str]) -> None:
    """Set the global tie-break policy for max_degree."""
    global TIE_BREAK_POLICY
    TIE_BREAK_POLICY = TieBreakPolicy(policy)


def max_degree(graph: Graph, policy: Optional[Union[TieBreakPolicy, str]] = None) -> Vertex:
    """
    Return the vertex with the largest adjacency set.

    Vertices are scanned in the graph's iteration order (insertion order for
    AdjacencySetGraph); ties are settled by policy, or the global policy if
    none is given.

    Raises:
        EmptyGraphError: the graph has no vertices.
    """
    policy = TIE_BREAK_POLICY if policy is None else TieBreakPolicy(policy)

    best: Optional[Vertex] = None
    best_degree = -1
    for vertex in graph.vertices():
        deg = graph.degree(vertex)
        if best is None or _is_better(policy, vertex, deg, best, best_degree):
            best, best_degree = vertex, deg

    if best is None:
        raise EmptyGraphError("max_degree of a graph with no vertices")
    return best


def _is_better(
    policy: TieBreakPolicy, candidate: Vertex, cand_degree: int, current: Vertex, curr_degree: int
) -> bool:
    if cand_degree != curr_degree:
        return cand_degree > curr_degree
    if policy == TieBreakPolicy.LAST_INSERTED:
        return True
    if policy == TieBreakPolicy.LEXICOGRAPHIC:
        return candidate.name < current.name
    return False
