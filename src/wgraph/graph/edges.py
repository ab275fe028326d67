from __future__ import annotations

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Generic, Hashable, List, Mapping, TypeVar

from .base import check_label, check_weight

logger = logging.getLogger(__name__)

V = TypeVar("V", bound=Hashable)


@dataclass(frozen=True, slots=True)
class Edge(Generic[V]):
    """Immutable directed edge record ``source -> target`` with its weight."""

    source: V
    target: V
    weight: int

    def __post_init__(self) -> None:
        check_label(self.source)
        check_label(self.target)
        check_weight(self.weight)

    def connects(self, source: V, target: V) -> bool:
        return self.source == source and self.target == target

    def touches(self, vertex: V) -> bool:
        return self.source == vertex or self.target == vertex

    def __str__(self) -> str:
        return f"{self.source} -> {self.target} (weight {self.weight})"


class EdgeListGraph(Generic[V]):
    """
    Graph stored as a set of vertex labels plus a flat list of edge records.

    Every edge operation scans the edge list, so ``set``, ``remove``,
    ``sources`` and ``targets`` are all O(E).

    Representation:
      - ``_vertices``: all labels.
      - ``_edges``: at most one :class:`Edge` per ordered (source, target)
        pair, each with weight > 0 and both endpoints in ``_vertices``.
    """

    __slots__ = ("_vertices", "_edges", "_check_invariants")

    def __init__(self, *, check_invariants: bool = True) -> None:
        self._vertices: set[V] = set()
        self._edges: List[Edge[V]] = []
        self._check_invariants = check_invariants
        self._check_rep()

    # ------------------------------------------------------------------ #
    # Mutation
    # ------------------------------------------------------------------ #
    def add(self, vertex: V) -> bool:
        check_label(vertex)
        if vertex in self._vertices:
            return False
        self._vertices.add(vertex)
        logger.debug("Added vertex %r", vertex)
        self._check_rep()
        return True

    def set(self, source: V, target: V, weight: int) -> int:
        check_label(source)
        check_label(target)
        weight = check_weight(weight)

        self._vertices.add(source)
        self._vertices.add(target)

        for index, edge in enumerate(self._edges):
            if not edge.connects(source, target):
                continue
            previous = edge.weight
            if weight == 0:
                del self._edges[index]
                logger.debug("Deleted edge %r -> %r (was %d)", source, target, previous)
            else:
                self._edges[index] = Edge(source, target, weight)
                logger.debug(
                    "Updated edge %r -> %r: %d -> %d", source, target, previous, weight
                )
            self._check_rep()
            return previous

        if weight > 0:
            self._edges.append(Edge(source, target, weight))
            logger.debug("Created edge %r -> %r (weight %d)", source, target, weight)
        self._check_rep()
        return 0

    def remove(self, vertex: V) -> bool:
        if vertex not in self._vertices:
            return False
        self._vertices.remove(vertex)
        kept = [edge for edge in self._edges if not edge.touches(vertex)]
        logger.debug(
            "Removed vertex %r and %d incident edge(s)",
            vertex,
            len(self._edges) - len(kept),
        )
        self._edges = kept
        self._check_rep()
        return True

    # ------------------------------------------------------------------ #
    # Queries
    # ------------------------------------------------------------------ #
    def vertices(self) -> frozenset[V]:
        return frozenset(self._vertices)

    def sources(self, target: V) -> Mapping[V, int]:
        found = {edge.source: edge.weight for edge in self._edges if edge.target == target}
        return MappingProxyType(found)

    def targets(self, source: V) -> Mapping[V, int]:
        found = {edge.target: edge.weight for edge in self._edges if edge.source == source}
        return MappingProxyType(found)

    # ------------------------------------------------------------------ #
    # Representation checks
    # ------------------------------------------------------------------ #
    def _check_rep(self) -> None:
        if not self._check_invariants:
            return
        pairs = set()
        for edge in self._edges:
            assert edge.source in self._vertices, f"Edge source {edge.source!r} not a vertex"
            assert edge.target in self._vertices, f"Edge target {edge.target!r} not a vertex"
            assert edge.weight > 0, f"Stored edge {edge} must have positive weight"
            pair = (edge.source, edge.target)
            assert pair not in pairs, f"Duplicate edge {edge.source!r} -> {edge.target!r}"
            pairs.add(pair)

    # ------------------------------------------------------------------ #
    # Introspection
    # ------------------------------------------------------------------ #
    def __str__(self) -> str:
        labels = ", ".join(sorted(map(str, self._vertices)))
        lines = [f"Vertices: [{labels}]", "Edges:"]
        lines.extend(str(edge) for edge in self._edges)
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"EdgeListGraph(num_vertices={len(self._vertices)}, "
            f"num_edges={len(self._edges)})"
        )
