from __future__ import annotations

import pytest

from wgraph.errors import InvalidArgumentError
from wgraph.graph import Edge, EdgeListGraph


# ---------------------------------------------------------------------------
# Edge record
# ---------------------------------------------------------------------------


def test_edge_fields_and_str() -> None:
    edge = Edge("A", "B", 5)
    assert (edge.source, edge.target, edge.weight) == ("A", "B", 5)
    assert str(edge) == "A -> B (weight 5)"


def test_edge_is_immutable() -> None:
    edge = Edge("A", "B", 5)
    with pytest.raises(AttributeError):
        edge.weight = 6  # type: ignore[misc]


def test_edge_equality_is_by_value() -> None:
    assert Edge("A", "B", 5) == Edge("A", "B", 5)
    assert Edge("A", "B", 5) != Edge("A", "B", 6)


@pytest.mark.parametrize(
    "source, target, weight",
    [(None, "B", 1), ("A", None, 1), ("A", "B", -1), ("A", "B", 1.0)],
)
def test_edge_rejects_bad_arguments(source, target, weight) -> None:
    with pytest.raises(InvalidArgumentError):
        Edge(source, target, weight)


def test_edge_connects_and_touches() -> None:
    edge = Edge("A", "B", 1)
    assert edge.connects("A", "B")
    assert not edge.connects("B", "A")
    assert edge.touches("A") and edge.touches("B")
    assert not edge.touches("C")


# ---------------------------------------------------------------------------
# EdgeListGraph specifics
# ---------------------------------------------------------------------------


def test_update_replaces_record_in_place() -> None:
    graph = EdgeListGraph()
    graph.set("A", "B", 1)
    graph.set("B", "C", 2)
    graph.set("A", "B", 9)

    assert graph._edges == [Edge("A", "B", 9), Edge("B", "C", 2)]


def test_zero_weight_never_stored() -> None:
    graph = EdgeListGraph()
    graph.set("A", "B", 0)
    assert graph._edges == []


def test_str_lists_vertices_then_edges() -> None:
    graph = EdgeListGraph()
    graph.set("A", "B", 5)
    graph.set("C", "B", 3)

    lines = str(graph).splitlines()
    assert lines[0] == "Vertices: [A, B, C]"
    assert lines[1] == "Edges:"
    assert lines[2:] == ["A -> B (weight 5)", "C -> B (weight 3)"]


def test_check_rep_detects_dangling_edge() -> None:
    graph = EdgeListGraph()
    graph.set("A", "B", 1)
    graph._vertices.discard("B")
    with pytest.raises(AssertionError):
        graph._check_rep()


def test_check_rep_detects_duplicate_pair() -> None:
    graph = EdgeListGraph()
    graph.set("A", "B", 1)
    graph._edges.append(Edge("A", "B", 2))
    with pytest.raises(AssertionError):
        graph._check_rep()


def test_check_rep_can_be_disabled() -> None:
    graph = EdgeListGraph(check_invariants=False)
    graph.set("A", "B", 1)
    graph._edges.append(Edge("A", "B", 2))
    graph._check_rep()


def test_edge_validation_matches_graph_messages() -> None:
    graph = EdgeListGraph()
    with pytest.raises(InvalidArgumentError) as from_edge:
        Edge("A", "B", True)
    with pytest.raises(InvalidArgumentError) as from_graph:
        graph.set("A", "B", True)
    assert str(from_edge.value) == str(from_graph.value)

    with pytest.raises(InvalidArgumentError, match="Vertex label cannot be None"):
        Edge(None, "B", 1)


def test_str_renders_labels_the_same_way_everywhere() -> None:
    graph = EdgeListGraph()
    graph.set(1, 2, 4)
    assert str(graph).splitlines() == ["Vertices: [1, 2]", "Edges:", "1 -> 2 (weight 4)"]
