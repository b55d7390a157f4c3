"""
Text rendering of a graph as an adjacency list.

One line per vertex in iteration order: the vertex name, a colon, then each
neighbour name followed by a space.
"""

from graph import Graph


def render_adjacency_list(graph: Graph) -> str:
    """Return the adjacency-list form of graph, e.g. "A: B C \\n"."""
    lines = []
    for vertex in graph.vertices():
        neighbours = "".join(f"{w.name} " for w in graph.adjacent_to(vertex))
        lines.append(f"{vertex.name}: {neighbours}\n")
    return "".join(lines)
