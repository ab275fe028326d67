from __future__ import annotations

"""Graph protocol shared by every representation."""

from numbers import Integral
from typing import Any, Hashable, Mapping, Protocol, TypeVar, runtime_checkable

from ..errors import InvalidArgumentError

V = TypeVar("V", bound=Hashable)


@runtime_checkable
class Graph(Protocol[V]):
    """
    Mutable directed graph with positive integer edge weights.

    Vertices are opaque hashable labels. A weight of 0 means "no edge" and is
    never stored. Representations satisfy this protocol structurally and must
    give identical answers for any sequence of calls.
    """

    def add(self, vertex: V) -> bool:
        """Add ``vertex`` if absent; return whether it was newly added."""

    def set(self, source: V, target: V, weight: int) -> int:
        """
        Create, update or (with ``weight == 0``) delete the edge
        ``source -> target`` and return its previous weight (0 if none).

        Missing endpoints are added first. A negative weight raises
        :class:`~wgraph.errors.InvalidArgumentError` and leaves the graph
        unchanged.
        """

    def remove(self, vertex: V) -> bool:
        """Remove ``vertex`` and every edge touching it; return whether it existed."""

    def vertices(self) -> frozenset[V]:
        """Return a snapshot of all vertex labels."""

    def sources(self, target: V) -> Mapping[V, int]:
        """Return a read-only ``source -> weight`` mapping of edges into ``target``."""

    def targets(self, source: V) -> Mapping[V, int]:
        """Return a read-only ``target -> weight`` mapping of edges out of ``source``."""


def check_label(label: Any) -> None:
    if label is None:
        raise InvalidArgumentError("Vertex label cannot be None")


def check_weight(weight: Any) -> int:
    """
    Validate an edge weight passed to ``set`` and return it as an ``int``.

    Accepts any integral value (including numpy integer scalars) that is
    >= 0. Booleans are rejected even though they are integral.
    """
    if isinstance(weight, bool) or not isinstance(weight, Integral):
        raise InvalidArgumentError(
            f"Edge weight must be an integer, got {type(weight).__name__}"
        )
    weight = int(weight)
    if weight < 0:
        raise InvalidArgumentError(f"Edge weight must be non-negative, got {weight}")
    return weight
