"""
Queue-based breadth-first SearchEngine implementation for simplegraph.

Uses collections.deque as the FIFO frontier. All colour/predecessor state
lives in scratch Vertex records owned by a single call, so repeated or
interleaved searches over the same graph cannot see each other's state.
"""

import logging
from collections import deque
from typing import Dict, List, Optional

from algorithms import SearchEngine
from errors import NoPathError
from graph import Graph, VertexRef, vertex_name
from vertex import Vertex, VisitState

logger = logging.getLogger(__name__)


class BreadthFirstEngine(SearchEngine):
    """
    Full breadth-first search from a source, no early exit.

    Complexity:
        O(V + E) over the component containing the source.
    """

    def __init__(self) -> None:
        # Instrumentation counters per invocation.
        self.last_dequeued = 0
        self.last_edges_examined = 0
        self.last_discovered = 0

    def search(self, graph: Graph, source: VertexRef) -> Dict[str, Vertex]:
        self.last_dequeued = 0
        self.last_edges_examined = 0
        self.last_discovered = 0

        source_name = vertex_name(source)
        if not graph.has_vertex(source_name):
            return {}

        root = Vertex(source_name)
        root.mark_discovered()
        root.set_predecessor(None)
        records: Dict[str, Vertex] = {source_name: root}
        queue = deque([source_name])
        self.last_discovered = 1

        while queue:
            current = queue.popleft()
            self.last_dequeued += 1

            for neighbour in graph.adjacent_to(current):
                self.last_edges_examined += 1
                record = records.get(neighbour.name)
                if record is None:
                    record = records[neighbour.name] = Vertex(neighbour.name)
                if record.visit_state is VisitState.UNVISITED:
                    record.mark_discovered()
                    record.set_predecessor(current)
                    queue.append(neighbour.name)
                    self.last_discovered += 1

            records[current].mark_finished()

        logger.debug(
            f"BFS from {source_name!r}: reached {self.last_discovered} vertices, "
            f"examined {self.last_edges_examined} adjacency entries"
        )
        return records

    def shortest_path(self, graph: Graph, source: VertexRef, target: VertexRef) -> List[Vertex]:
        """
        BFS from source, then walk predecessors back from target.

        The walk is bounded by the vertex count, so a predecessor chain that
        does not lead back to source fails instead of looping.
        """
        source_name = vertex_name(source)
        target_name = vertex_name(target)
        for name in (source_name, target_name):
            if not graph.has_vertex(name):
                raise NoPathError(source_name, target_name, f"{name!r} is not in the graph")

        records = self.search(graph, source_name)
        if target_name not in records:
            logger.warning(f"No path from {source_name!r} to {target_name!r}")
            raise NoPathError(source_name, target_name, "target is unreachable")

        stack: List[Vertex] = []
        name: Optional[str] = target_name
        for _ in range(graph.vertex_count):
            stack.append(graph.get_vertex(name))
            if name == source_name:
                break
            name = records[name].predecessor
            if name is None:
                raise NoPathError(source_name, target_name, "predecessor chain is broken")
        else:
            raise NoPathError(source_name, target_name, "predecessor chain exceeds vertex count")

        # Stack holds target..source; pop to read source..target.
        path: List[Vertex] = []
        while stack:
            path.append(stack.pop())
        return path

    def distances(self, graph: Graph, source: VertexRef) -> Dict[str, int]:
        """
        Hop count from source to every reachable vertex.

        Records come back in discovery order, so each predecessor's distance
        is known before its children are visited.
        """
        dist: Dict[str, int] = {}
        for name, record in self.search(graph, source).items():
            pred = record.predecessor
            dist[name] = 0 if pred is None else dist[pred] + 1
        return dist


def shortest_path(
    graph: Graph,
    source: VertexRef,
    target: VertexRef,
    engine: Optional[SearchEngine] = None,
) -> List[Vertex]:
    """Minimum-edge path source -> target; raises NoPathError if none exists."""
    return (engine or BreadthFirstEngine()).shortest_path(graph, source, target)


def distances(graph: Graph, source: VertexRef) -> Dict[str, int]:
    """Hop counts from source to every vertex it can reach."""
    return BreadthFirstEngine().distances(graph, source)
