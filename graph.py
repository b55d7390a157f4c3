"""
Undirected, unweighted graph abstraction for simplegraph.

Vertices are Vertex instances keyed by name.
Edges are unordered pairs; a vertex may be adjacent to itself.
"""

from abc import ABC, abstractmethod
from typing import Iterator, Optional, Union

from vertex import Vertex

# Anything that names a vertex: the name itself or a Vertex carrying it.
VertexRef = Union[str, Vertex]


def vertex_name(ref: VertexRef) -> str:
    """Return the name behind a vertex reference."""
    if isinstance(ref, Vertex):
        return ref.name
    if isinstance(ref, str):
        return ref
    raise TypeError(f"Expected a vertex name or Vertex, got {type(ref).__name__}")


class Graph(ABC):
    """Undirected simple graph over named vertices."""

    @abstractmethod
    def vertices(self) -> Iterator[Vertex]:
        """Return an iterator over all vertices in the graph."""
        raise NotImplementedError

    @abstractmethod
    def get_vertex(self, name: VertexRef) -> Optional[Vertex]:
        """Return the vertex called name, or None if there is none."""
        raise NotImplementedError

    @abstractmethod
    def adjacent_to(self, ref: VertexRef) -> Iterator[Vertex]:
        """
        Neighbours of a vertex.

        Returns an empty iterator when the vertex is not in the graph.
        """
        raise NotImplementedError

    @abstractmethod
    def has_edge(self, a: VertexRef, b: VertexRef) -> bool:
        """True iff a and b are adjacent. Order does not matter."""
        raise NotImplementedError

    @property
    @abstractmethod
    def vertex_count(self) -> int:
        raise NotImplementedError

    @property
    @abstractmethod
    def edge_count(self) -> int:
        raise NotImplementedError

    # --- Derived queries ----------------------------------------------------

    def has_vertex(self, ref: VertexRef) -> bool:
        return self.get_vertex(vertex_name(ref)) is not None

    def degree(self, ref: VertexRef) -> int:
        """Size of the adjacency set of ref (0 if absent)."""
        return sum(1 for _ in self.adjacent_to(ref))

    def __contains__(self, ref: object) -> bool:
        if not isinstance(ref, (str, Vertex)):
            return False
        return self.has_vertex(ref)

    def __len__(self) -> int:
        return self.vertex_count
