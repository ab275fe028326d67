from __future__ import annotations

"""Representation registry and configured graph construction."""

import logging
from types import MappingProxyType
from typing import Mapping, Optional

from ..config import get_settings
from ..errors import InvalidArgumentError
from .base import Graph
from .edges import EdgeListGraph
from .vertices import AdjacencyGraph

logger = logging.getLogger(__name__)

REPRESENTATIONS: Mapping[str, type] = MappingProxyType(
    {
        "edges": EdgeListGraph,
        "adjacency": AdjacencyGraph,
    }
)


def create_graph(
    representation: Optional[str] = None,
    *,
    check_invariants: Optional[bool] = None,
) -> Graph:
    """
    Return an empty graph of the named representation.

    representation:
        "edges" or "adjacency"; defaults to ``settings.graph.representation``.
    check_invariants:
        Run representation checks after each mutation; defaults to
        ``settings.graph.check_invariants``.
    """
    settings = get_settings().graph
    if representation is None:
        representation = settings.representation
    if check_invariants is None:
        check_invariants = settings.check_invariants

    try:
        cls = REPRESENTATIONS[representation]
    except KeyError:
        raise InvalidArgumentError(
            f"Unknown graph representation {representation!r}; "
            f"expected one of {sorted(REPRESENTATIONS)}"
        ) from None

    logger.debug(
        "Creating %s graph (check_invariants=%s)", representation, check_invariants
    )
    return cls(check_invariants=check_invariants)
