"""
Unit tests for max_degree and tie-break policies.
"""

import pytest

import degree
from adjacency_set_graph import AdjacencySetGraph
from degree import TieBreakPolicy, max_degree, set_tie_break_policy
from errors import EmptyGraphError


@pytest.fixture(autouse=True)
def restore_policy():
    saved = degree.TIE_BREAK_POLICY
    yield
    set_tie_break_policy(saved)


def build_example_graph() -> AdjacencySetGraph:
    g = AdjacencySetGraph()
    for a, b in [("A", "B"), ("A", "C"), ("C", "D"), ("D", "E"), ("D", "G"), ("E", "G")]:
        g.add_edge(a, b)
    g.add_vertex("H")
    return g


def build_star_pair() -> AdjacencySetGraph:
    # Q and P both have degree 2; Q is inserted first
    g = AdjacencySetGraph()
    g.add_edge("Q", "x")
    g.add_edge("Q", "y")
    g.add_edge("P", "z")
    g.add_edge("P", "w")
    return g


def test_max_degree_example():
    g = build_example_graph()

    v = max_degree(g)

    assert v.name == "D"
    assert v is g.get_vertex("D")
    assert g.degree(v) == 3


def test_empty_graph_raises():
    with pytest.raises(EmptyGraphError):
        max_degree(AdjacencySetGraph())


def test_isolated_vertices_only():
    g = AdjacencySetGraph()
    g.add_vertex("B")
    g.add_vertex("A")

    assert max_degree(g).name == "B"


def test_tie_break_first_inserted():
    assert max_degree(build_star_pair(), TieBreakPolicy.FIRST_INSERTED).name == "Q"


def test_tie_break_last_inserted():
    assert max_degree(build_star_pair(), TieBreakPolicy.LAST_INSERTED).name == "P"


def test_tie_break_lexicographic():
    assert max_degree(build_star_pair(), TieBreakPolicy.LEXICOGRAPHIC).name == "P"


def test_global_policy_setter():
    g = build_star_pair()

    set_tie_break_policy("last_inserted")
    assert degree.TIE_BREAK_POLICY is TieBreakPolicy.LAST_INSERTED
    assert max_degree(g).name == "P"

    set_tie_break_policy(TieBreakPolicy.FIRST_INSERTED)
    assert max_degree(g).name == "Q"


def test_policy_accepted_by_value():
    g = build_star_pair()

    assert max_degree(g, "last_inserted").name == "P"
    assert max_degree(g, "lexicographic").name == "P"


def test_unknown_policy_rejected():
    with pytest.raises(ValueError):
        set_tie_break_policy("random")


def test_self_loop_counts_once():
    g = AdjacencySetGraph()
    g.add_edge("A", "A")
    g.add_edge("B", "C")
    g.add_edge("B", "D")

    assert g.degree("A") == 1
    assert max_degree(g).name == "B"
