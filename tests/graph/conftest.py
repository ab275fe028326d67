from __future__ import annotations

from typing import Callable

import pytest

from wgraph.graph import REPRESENTATIONS, AdjacencyGraph, EdgeListGraph, Graph


@pytest.fixture(params=sorted(REPRESENTATIONS))
def empty_instance(request) -> Callable[[], Graph]:
    """
    Factory for empty graphs of one representation.

    Every test that takes this fixture runs once per representation, so the
    tests using it form the shared conformance suite.
    """
    return REPRESENTATIONS[request.param]


@pytest.fixture
def graph(empty_instance) -> Graph:
    return empty_instance()


@pytest.fixture
def both() -> tuple[Graph, Graph]:
    """One empty graph of each representation, for side-by-side comparison."""
    return EdgeListGraph(), AdjacencyGraph()
