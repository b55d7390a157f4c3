"""
Cycle detection for simplegraph.

An undirected simple graph has a cycle when some component contains a
self-loop or a closed walk through three or more distinct vertices.
"""

import logging
from collections import deque
from typing import Dict

from graph import Graph
from vertex import Vertex

logger = logging.getLogger(__name__)


def is_cyclic(graph: Graph) -> bool:
    """
    True iff graph contains a cycle.

    Runs a breadth-first sweep over every component. Reaching an already
    discovered vertex that is not the current vertex's predecessor closes a
    cycle; with no parallel edges that is the only way to revisit one. A
    self-loop is caught the same way, since a vertex is never its own
    predecessor.
    """
    records: Dict[str, Vertex] = {}

    for start in graph.vertices():
        if start.name in records:
            continue

        root = records[start.name] = Vertex(start.name)
        root.mark_discovered()
        queue = deque([start.name])

        while queue:
            current = queue.popleft()
            parent = records[current].predecessor
            for neighbour in graph.adjacent_to(current):
                seen = records.get(neighbour.name)
                if seen is None:
                    seen = records[neighbour.name] = Vertex(neighbour.name)
                    seen.mark_discovered()
                    seen.set_predecessor(current)
                    queue.append(neighbour.name)
                elif neighbour.name != parent:
                    logger.debug(f"Cycle closed by edge {current!r}-{neighbour.name!r}")
                    return True
            records[current].mark_finished()

    return False
