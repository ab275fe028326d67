from __future__ import annotations

"""Public error taxonomy for wgraph."""


class GraphError(Exception):
    """Base exception for graph errors."""
    pass


class InvalidArgumentError(GraphError, ValueError):
    """
    Raised when an operation is called with an argument it cannot accept:
    a negative or non-integral edge weight, a ``None`` vertex label, an
    unknown representation name or malformed interop input.

    The graph is left unchanged when this is raised.
    """
    pass
