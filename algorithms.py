"""
Algorithm interfaces for simplegraph.

Keeps traversal algorithms separate from graph storage.
"""

from abc import ABC, abstractmethod
from typing import Dict, List

from graph import Graph, VertexRef
from vertex import Vertex


class SearchEngine(ABC):
    """
    Interface for single-source search with path reconstruction.
    """

    @abstractmethod
    def search(self, graph: Graph, source: VertexRef) -> Dict[str, Vertex]:
        """
        Explore everything reachable from source.

        Returns:
            Mapping name -> search-local record for each reached vertex,
            in discovery order. Each record holds the final visit state and
            the predecessor name (None for the source). Unreached vertices
            are absent. The graph's own vertices are left untouched.
        """
        raise NotImplementedError

    @abstractmethod
    def shortest_path(self, graph: Graph, source: VertexRef, target: VertexRef) -> List[Vertex]:
        """
        Compute a minimum-edge path from source to target.

        Returns:
            Graph-owned vertices ordered source -> ... -> target.

        Raises:
            NoPathError: target is unreachable or an endpoint is missing.
        """
        raise NotImplementedError
