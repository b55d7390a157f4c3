"""
Concrete undirected graph implementation for simplegraph.

Implements the Graph interface with a name -> handle table and one
neighbour-handle set per vertex. Handles are dense ints handed out in
insertion order, so every iteration over the graph is in insertion order.
"""

import logging
from typing import Dict, Iterator, List, Optional, Set

from graph import Graph, VertexRef, vertex_name
from rendering import render_adjacency_list
from vertex import Vertex

logger = logging.getLogger(__name__)


class AdjacencySetGraph(Graph):
    """
    Undirected simple graph backed by handle-indexed adjacency sets.

    Parallel edges are rejected; self-loops are stored once.
    """

    def __init__(self) -> None:
        self._handles: Dict[str, int] = {}
        self._vertices: List[Vertex] = []
        self._adj: List[Set[int]] = []
        self._num_vertices = 0
        self._num_edges = 0

    # --- Mutation API -------------------------------------------------------

    def add_vertex(self, name: str) -> Vertex:
        """
        Return the vertex called name, creating it with no neighbours if
        it does not exist yet.
        """
        return self._vertices[self._ensure_handle(vertex_name(name))]

    def add_edge(self, a: VertexRef, b: VertexRef) -> None:
        """
        Add the undirected edge a-b. Auto-adds missing endpoints.
        A repeated edge is ignored.
        """
        if self.has_edge(a, b):
            return

        u = self._ensure_handle(vertex_name(a))
        v = self._ensure_handle(vertex_name(b))
        self._adj[u].add(v)
        self._adj[v].add(u)
        self._num_edges += 1
        logger.debug(f"Added edge {self._vertices[u].name!r}-{self._vertices[v].name!r}")

    # --- Graph interface ----------------------------------------------------

    def vertices(self) -> Iterator[Vertex]:
        return iter(list(self._vertices))

    def get_vertex(self, name: VertexRef) -> Optional[Vertex]:
        handle = self._handles.get(vertex_name(name))
        return None if handle is None else self._vertices[handle]

    def has_vertex(self, ref: VertexRef) -> bool:
        return vertex_name(ref) in self._handles

    def has_edge(self, a: VertexRef, b: VertexRef) -> bool:
        u = self._handles.get(vertex_name(a))
        v = self._handles.get(vertex_name(b))
        if u is None or v is None:
            return False
        return v in self._adj[u]

    def adjacent_to(self, ref: VertexRef) -> Iterator[Vertex]:
        handle = self._handles.get(vertex_name(ref))
        if handle is None:
            return iter(())
        # Snapshot so callers may add edges while iterating.
        return iter([self._vertices[h] for h in sorted(self._adj[handle])])

    def degree(self, ref: VertexRef) -> int:
        handle = self._handles.get(vertex_name(ref))
        return 0 if handle is None else len(self._adj[handle])

    @property
    def vertex_count(self) -> int:
        return self._num_vertices

    @property
    def edge_count(self) -> int:
        return self._num_edges

    def __str__(self) -> str:
        return render_adjacency_list(self)

    # --- Internal helpers ---------------------------------------------------

    def _ensure_handle(self, name: str) -> int:
        handle = self._handles.get(name)
        if handle is not None:
            return handle

        handle = len(self._vertices)
        self._handles[name] = handle
        self._vertices.append(Vertex(name))
        self._adj.append(set())
        self._num_vertices += 1
        logger.debug(f"Added vertex {name!r} (handle {handle})")
        return handle
