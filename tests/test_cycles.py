"""
Unit tests for is_cyclic.
"""

from adjacency_set_graph import AdjacencySetGraph
from cycles import is_cyclic


def graph_of(*edges) -> AdjacencySetGraph:
    g = AdjacencySetGraph()
    for a, b in edges:
        g.add_edge(a, b)
    return g


def test_empty_graph_is_acyclic():
    assert not is_cyclic(AdjacencySetGraph())


def test_tree_is_acyclic():
    g = graph_of(("A", "B"), ("A", "C"), ("C", "D"), ("C", "E"))
    g.add_vertex("F")

    assert not is_cyclic(g)


def test_triangle_is_cyclic():
    assert is_cyclic(graph_of(("A", "B"), ("B", "C"), ("C", "A")))


def test_self_loop_is_cyclic():
    assert is_cyclic(graph_of(("A", "A")))
    assert is_cyclic(graph_of(("A", "B"), ("B", "B")))


def test_repeated_edge_is_not_a_cycle():
    assert not is_cyclic(graph_of(("A", "B"), ("B", "A")))


def test_cycle_in_second_component():
    g = graph_of(("A", "B"), ("X", "Y"), ("Y", "Z"), ("Z", "W"), ("W", "X"))

    assert is_cyclic(g)


def test_example_graph_has_cycle():
    # D-E-G triangle
    g = graph_of(("A", "B"), ("A", "C"), ("C", "D"), ("D", "E"), ("D", "G"), ("E", "G"))

    assert is_cyclic(g)
