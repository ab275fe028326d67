"""
wgraph.graph
============

Directed, weighted graph ADT with two interchangeable representations.

Public API:

- Graph          : protocol implemented by every representation.
- EdgeListGraph  : vertex set + flat list of Edge records.
- AdjacencyGraph : one Vertex record per label, each owning its outgoing edges.
- Edge, Vertex   : the records used by the two representations.
- create_graph   : build an empty graph of a named or configured representation.
- to_matrix / from_matrix : GraphBLAS adjacency-matrix interop.
"""

from __future__ import annotations

from .base import Graph
from .edges import Edge, EdgeListGraph
from .vertices import Vertex, AdjacencyGraph
from .factory import REPRESENTATIONS, create_graph
from .matrix import LabelledMatrix, to_matrix, from_matrix

__all__ = [
    "Graph",
    "Edge",
    "EdgeListGraph",
    "Vertex",
    "AdjacencyGraph",
    "REPRESENTATIONS",
    "create_graph",
    "LabelledMatrix",
    "to_matrix",
    "from_matrix",
]
