"""
Dense directed, weighted graph for densegraph.

Implements MutableGraph over a flat, row-major numpy cost matrix. Node ids
are the contiguous block 0..N-1.
"""

from __future__ import annotations

import logging
from typing import List, Optional

import numpy as np
import numpy.typing as npt

from graph import DirectedEdge, Edge, MutableGraph
from graph_errors import NodeOutOfRangeError
from nodes import IntNode, NodeLike, check_node_count, node_id

logger = logging.getLogger(__name__)

NO_EDGE = np.inf


class DenseGraph(MutableGraph):
    """
    Directed, weighted graph backed by an N*N adjacency matrix.

    Cell (i, j) sits at offset i*N + j and holds the cost of the edge
    i -> j: the row is always the tail, the column always the head. A cell
    equal to +inf means there is no edge; any other value, including zero
    and negatives, is an edge with that cost.

    N is fixed at construction. Every node argument is bounds checked and
    out-of-range ids raise NodeOutOfRangeError.
    """

    def __init__(self, num_nodes: int, passable: bool = False) -> None:
        num_nodes = check_node_count(num_nodes)
        fill = 1.0 if passable else NO_EDGE
        self._n = num_nodes
        self._costs: npt.NDArray[np.float64] = np.full(
            num_nodes * num_nodes, fill, dtype=np.float64
        )
        logger.debug("DenseGraph allocated: %d nodes, passable=%s", num_nodes, passable)

    @classmethod
    def from_matrix(cls, matrix: npt.ArrayLike) -> "DenseGraph":
        """Build a graph from a square matrix of costs (row = tail)."""
        arr = np.asarray(matrix, dtype=np.float64)
        if arr.ndim != 2 or arr.shape[0] != arr.shape[1]:
            raise ValueError(f"cost matrix must be square, got shape {arr.shape}")
        g = cls(int(arr.shape[0]))
        g._costs[:] = arr.reshape(-1)
        logger.debug("DenseGraph loaded from %dx%d matrix", g._n, g._n)
        return g

    # --- Helpers -------------------------------------------------------------

    @property
    def num_nodes(self) -> int:
        return self._n

    def __len__(self) -> int:
        return self._n

    def __repr__(self) -> str:
        edges = int(np.count_nonzero(self._costs != NO_EDGE))
        return f"DenseGraph(num_nodes={self._n}, edges={edges})"

    def _checked(self, node: NodeLike) -> int:
        i = node_id(node)
        if not 0 <= i < self._n:
            raise NodeOutOfRangeError(i, self._n)
        return i

    def _row(self, i: int) -> npt.NDArray[np.float64]:
        return self._costs[i * self._n:(i + 1) * self._n]

    def _column(self, j: int) -> npt.NDArray[np.float64]:
        return self._costs[j::self._n]

    def _linked(self, i: int, j: int) -> bool:
        return self._costs[i * self._n + j] != NO_EDGE

    def to_matrix(self) -> npt.NDArray[np.float64]:
        """Fresh N x N copy of the cost matrix."""
        return self._costs.reshape(self._n, self._n).copy()

    # --- Graph interface -----------------------------------------------------

    def node_exists(self, node: NodeLike) -> bool:
        return 0 <= node_id(node) < self._n

    def degree(self, node: NodeLike) -> int:
        i = self._checked(node)
        out_deg = np.count_nonzero(self._row(i) != NO_EDGE)
        in_deg = np.count_nonzero(self._column(i) != NO_EDGE)
        return int(out_deg + in_deg)

    def node_list(self) -> List[IntNode]:
        return [IntNode(i) for i in range(self._n)]

    def directed_edge_list(self) -> List[DirectedEdge]:
        # flatnonzero walks the flat array in row-major order
        offsets = np.flatnonzero(self._costs != NO_EDGE)
        return [
            DirectedEdge(IntNode(int(k) // self._n), IntNode(int(k) % self._n))
            for k in offsets
        ]

    def neighbors(self, node: NodeLike) -> List[IntNode]:
        i = self._checked(node)
        mask = (self._row(i) != NO_EDGE) | (self._column(i) != NO_EDGE)
        return [IntNode(int(j)) for j in np.flatnonzero(mask)]

    def edge_between(
        self, node: NodeLike, neighbor: NodeLike
    ) -> Optional[DirectedEdge]:
        i = self._checked(node)
        j = self._checked(neighbor)
        if self._linked(i, j) or self._linked(j, i):
            return DirectedEdge(IntNode(i), IntNode(j))
        return None

    def successors(self, node: NodeLike) -> List[IntNode]:
        i = self._checked(node)
        return [IntNode(int(j)) for j in np.flatnonzero(self._row(i) != NO_EDGE)]

    def edge_to(self, node: NodeLike, succ: NodeLike) -> Optional[DirectedEdge]:
        i = self._checked(node)
        j = self._checked(succ)
        if self._linked(i, j):
            return DirectedEdge(IntNode(i), IntNode(j))
        return None

    def predecessors(self, node: NodeLike) -> List[IntNode]:
        j = self._checked(node)
        return [IntNode(int(i)) for i in np.flatnonzero(self._column(j) != NO_EDGE)]

    def cost(self, e: Edge) -> float:
        i = self._checked(e.tail)
        j = self._checked(e.head)
        return float(self._costs[i * self._n + j])

    def crunch(self) -> None:
        # Nothing to rebuild: the matrix is the only structure.
        pass

    # --- MutableGraph interface ----------------------------------------------

    def set_edge_cost(self, e: Edge, cost: float, directed: bool) -> None:
        i = self._checked(e.tail)
        j = self._checked(e.head)
        cost = float(cost)
        self._costs[i * self._n + j] = cost
        if not directed:
            self._costs[j * self._n + i] = cost
