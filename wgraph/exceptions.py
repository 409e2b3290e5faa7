"""Exception types raised by the wgraph graph model and algorithms."""

from __future__ import annotations


class GraphError(Exception):
    """Base class for all wgraph errors."""


class InvalidEdgeError(GraphError, ValueError):
    """An edge was built with a missing endpoint or an endpoint out of range."""


class InvalidSourceError(GraphError, IndexError):
    """A shortest-path source index lies outside ``[0, vertex_count)``."""


class NegativeCycleDetected(GraphError):
    """A negative-weight cycle is reachable from the shortest-path source.

    Raised instead of returning distances: once a negative cycle is reachable,
    no distance or predecessor data is reported for any vertex.
    """


class AsymmetricGraphError(GraphError, ValueError):
    """A minimum spanning forest was requested for a non-symmetric input."""


class UnreachableVertexError(GraphError, ValueError):
    """A path was requested to a vertex the source cannot reach."""
