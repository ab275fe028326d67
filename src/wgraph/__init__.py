try:
    from ._version import version as __version__  # populated by setuptools-scm
except ModuleNotFoundError:
    __version__ = "0.0.0"

from .errors import GraphError, InvalidArgumentError
from .graph import AdjacencyGraph, EdgeListGraph, Graph, create_graph

__all__ = [
    "__version__",
    "GraphError",
    "InvalidArgumentError",
    "Graph",
    "EdgeListGraph",
    "AdjacencyGraph",
    "create_graph",
]
