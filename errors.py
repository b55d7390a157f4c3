"""
Exception types raised by simplegraph queries.

Lookups of unknown vertices never raise; these cover the two queries that
can have no answer at all.
"""

from typing import Optional


class GraphError(Exception):
    """Base class for simplegraph errors."""


class NoPathError(GraphError, LookupError):
    """
    No path connects source to target.

    Raised when the target is unreachable from the source, or when either
    endpoint is not a vertex of the graph.
    """

    def __init__(self, source: str, target: str, reason: Optional[str] = None) -> None:
        self.source = source
        self.target = target
        message = f"No path from {source!r} to {target!r}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class EmptyGraphError(GraphError, ValueError):
    """A whole-graph query was made on a graph with no vertices."""
