from __future__ import annotations

"""
Conversion between graphs and GraphBLAS adjacency matrices.

Rows are sources, columns are targets and values are edge weights, the same
layout as one layer of a layered graph. A :class:`LabelledMatrix` carries the
label order that maps vertex labels to row/column indices.
"""

import logging
from dataclasses import dataclass
from typing import Hashable, Optional, Sequence, Tuple

import numpy as np
import graphblas as gb
from graphblas import Matrix

from ..errors import InvalidArgumentError
from .base import Graph
from .factory import create_graph

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class LabelledMatrix:
    """Square INT64 adjacency matrix plus the labels of its rows/columns."""

    matrix: Matrix
    labels: Tuple[Hashable, ...]

    def index_of(self, label: Hashable) -> int:
        try:
            return self.labels.index(label)
        except ValueError:
            raise KeyError(label) from None

    @property
    def num_vertices(self) -> int:
        return len(self.labels)

    @property
    def num_edges(self) -> int:
        return int(self.matrix.nvals)


def _check_labels(labels: Sequence[Hashable]) -> Tuple[Hashable, ...]:
    labels = tuple(labels)
    if len(set(labels)) != len(labels):
        raise InvalidArgumentError("Matrix labels must be unique")
    return labels


def edge_arrays(
    graph: Graph, labels: Sequence[Hashable]
) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Return ``(source_indices, target_indices, weights)`` for every edge of
    ``graph``, indexed by position in ``labels``.
    """
    index = {label: i for i, label in enumerate(labels)}
    src: list[int] = []
    dst: list[int] = []
    weights: list[int] = []
    for source in labels:
        for target, weight in graph.targets(source).items():
            src.append(index[source])
            dst.append(index[target])
            weights.append(weight)
    try:
        weight_array = np.asarray(weights, dtype=np.int64)
    except OverflowError:
        raise InvalidArgumentError("Edge weight does not fit in an int64 matrix") from None
    return (
        np.asarray(src, dtype=np.int64),
        np.asarray(dst, dtype=np.int64),
        weight_array,
    )


def to_matrix(graph: Graph, labels: Optional[Sequence[Hashable]] = None) -> LabelledMatrix:
    """
    Build the adjacency matrix of ``graph``.

    labels: row/column order. Defaults to ``sorted(graph.vertices())``; an
            explicit order must include every vertex and may add extra
            labels, which become empty rows/columns.
    """
    if labels is None:
        labels = sorted(graph.vertices())
    labels = _check_labels(labels)

    missing = graph.vertices() - set(labels)
    if missing:
        raise InvalidArgumentError(f"Labels do not cover vertices {sorted(map(repr, missing))}")

    src, dst, weights = edge_arrays(graph, labels)
    n = len(labels)
    matrix = gb.Matrix.from_coo(
        src,
        dst,
        weights,
        dtype=gb.dtypes.INT64,
        nrows=n,
        ncols=n,
    )
    logger.debug("Built %dx%d adjacency matrix with %d edges", n, n, matrix.nvals)
    return LabelledMatrix(matrix=matrix, labels=labels)


def from_matrix(
    matrix: Matrix,
    labels: Sequence[Hashable],
    representation: Optional[str] = None,
) -> Graph:
    """
    Build a graph from a square adjacency matrix.

    Every label becomes a vertex, every stored entry ``(i, j, w)`` becomes
    ``set(labels[i], labels[j], w)``. Stored zeros are skipped like any other
    weight-0 ``set``; negative entries raise InvalidArgumentError.
    """
    labels = _check_labels(labels)
    n = len(labels)
    if matrix.nrows != n or matrix.ncols != n:
        raise InvalidArgumentError(
            f"Matrix shape ({matrix.nrows}, {matrix.ncols}) does not match "
            f"{n} labels"
        )

    rows, cols, values = matrix.to_coo()
    if (values < 0).any():
        raise InvalidArgumentError("Matrix contains negative edge weights")
    if np.issubdtype(values.dtype, np.floating):
        if not np.isfinite(values).all():
            raise InvalidArgumentError("Matrix contains non-finite edge weights")
        if not np.array_equal(values, np.trunc(values)):
            raise InvalidArgumentError("Matrix contains non-integral edge weights")

    graph = create_graph(representation)
    for label in labels:
        graph.add(label)
    for i, j, w in zip(rows.tolist(), cols.tolist(), values.tolist()):
        graph.set(labels[i], labels[j], int(w))

    logger.debug("Loaded graph with %d vertices from %dx%d matrix", n, n, n)
    return graph
