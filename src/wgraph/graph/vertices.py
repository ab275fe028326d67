from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Dict, Generic, Hashable, Mapping, TypeVar

from ..errors import InvalidArgumentError
from .base import check_label, check_weight

logger = logging.getLogger(__name__)

V = TypeVar("V", bound=Hashable)


class Vertex(Generic[V]):
    """
    Vertex record owning its outgoing edges as a ``target label -> weight`` map.

    Targets are referenced by label only, never by another record.
    """

    __slots__ = ("_label", "_edges")

    def __init__(self, label: V) -> None:
        if label is None:
            raise InvalidArgumentError("Vertex label cannot be None")
        self._label = label
        self._edges: Dict[V, int] = {}

    @property
    def label(self) -> V:
        return self._label

    def add_edge(self, target: V, weight: int) -> None:
        """Add or overwrite the edge to ``target``; weight must be positive."""
        if weight <= 0:
            raise InvalidArgumentError(f"Edge weight must be positive, got {weight}")
        self._edges[target] = weight

    def remove_edge(self, target: V) -> int:
        """Drop the edge to ``target`` and return its weight (0 if there was none)."""
        return self._edges.pop(target, 0)

    def weight_to(self, target: V) -> int:
        return self._edges.get(target, 0)

    def edges(self) -> Mapping[V, int]:
        return MappingProxyType(dict(self._edges))

    def __len__(self) -> int:
        return len(self._edges)

    def __str__(self) -> str:
        body = ", ".join(f"{target}: {weight}" for target, weight in self._edges.items())
        return f"{self._label} -> {{ {body} }}" if body else f"{self._label} -> {{ }}"

    def __repr__(self) -> str:
        return f"Vertex({self._label!r}, out_degree={len(self._edges)})"


class AdjacencyGraph(Generic[V]):
    """
    Graph stored as one :class:`Vertex` record per label.

    Records are kept in a dict keyed by label, so locating a record is O(1).
    ``targets`` copies a single record's map; ``sources`` and ``remove`` have
    to visit every record.
    """

    __slots__ = ("_records", "_check_invariants")

    def __init__(self, *, check_invariants: bool = True) -> None:
        self._records: Dict[V, Vertex[V]] = {}
        self._check_invariants = check_invariants
        self._check_rep()

    # ------------------------------------------------------------------ #
    # Mutation
    # ------------------------------------------------------------------ #
    def add(self, vertex: V) -> bool:
        check_label(vertex)
        if vertex in self._records:
            return False
        self._records[vertex] = Vertex(vertex)
        logger.debug("Added vertex %r", vertex)
        self._check_rep()
        return True

    def set(self, source: V, target: V, weight: int) -> int:
        check_label(source)
        check_label(target)
        weight = check_weight(weight)

        source_record = self._find_or_add(source)
        self._find_or_add(target)

        if weight == 0:
            previous = source_record.remove_edge(target)
            if previous:
                logger.debug("Deleted edge %r -> %r (was %d)", source, target, previous)
        else:
            previous = source_record.weight_to(target)
            source_record.add_edge(target, weight)
            logger.debug("Set edge %r -> %r: %d -> %d", source, target, previous, weight)
        self._check_rep()
        return previous

    def remove(self, vertex: V) -> bool:
        record = self._records.pop(vertex, None)
        if record is None:
            return False
        incoming = 0
        for other in self._records.values():
            if other.remove_edge(vertex):
                incoming += 1
        logger.debug(
            "Removed vertex %r with %d outgoing and %d incoming edge(s)",
            vertex,
            len(record),
            incoming,
        )
        self._check_rep()
        return True

    # ------------------------------------------------------------------ #
    # Queries
    # ------------------------------------------------------------------ #
    def vertices(self) -> frozenset[V]:
        return frozenset(self._records)

    def sources(self, target: V) -> Mapping[V, int]:
        found: Dict[V, int] = {}
        for label, record in self._records.items():
            weight = record.weight_to(target)
            if weight > 0:
                found[label] = weight
        return MappingProxyType(found)

    def targets(self, source: V) -> Mapping[V, int]:
        record = self._records.get(source)
        if record is None:
            return MappingProxyType({})
        return record.edges()

    # ------------------------------------------------------------------ #
    # Helpers
    # ------------------------------------------------------------------ #
    def _find_or_add(self, label: V) -> Vertex[V]:
        record = self._records.get(label)
        if record is None:
            record = self._records[label] = Vertex(label)
            logger.debug("Added vertex %r", label)
        return record

    def _check_rep(self) -> None:
        if not self._check_invariants:
            return
        for label, record in self._records.items():
            assert record.label == label, f"Record {record!r} filed under {label!r}"
            for target, weight in record.edges().items():
                assert target in self._records, f"Edge target {target!r} not a vertex"
                assert weight > 0, f"Stored edge {label!r} -> {target!r} must have positive weight"

    # ------------------------------------------------------------------ #
    # Introspection
    # ------------------------------------------------------------------ #
    def __str__(self) -> str:
        lines = ["Vertices:"]
        lines.extend(str(record) for record in self._records.values())
        return "\n".join(lines)

    def __repr__(self) -> str:
        num_edges = sum(len(record) for record in self._records.values())
        return (
            f"AdjacencyGraph(num_vertices={len(self._records)}, "
            f"num_edges={num_edges})"
        )
