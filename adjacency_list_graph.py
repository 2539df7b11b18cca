"""
Sparse directed, weighted graph for densegraph.

Implements the same MutableGraph contract as DenseGraph using an
adjacency-list representation, for graphs where most node pairs are
unconnected.
"""

from __future__ import annotations

import logging
import math
from typing import Dict, List, Optional, Tuple

from graph import DirectedEdge, Edge, MutableGraph
from graph_errors import NodeOutOfRangeError
from nodes import IntNode, NodeLike, check_node_count, node_id

logger = logging.getLogger(__name__)


class AdjacencyListGraph(MutableGraph):
    """
    Directed, weighted graph backed by tail -> (head -> cost) mappings.

    Node ids are the contiguous block 0..N-1, as for DenseGraph. An incoming
    index mirrors the outgoing one so predecessor scans do not walk every
    node. crunch() freezes both into sorted tuples; any later edit drops the
    frozen view until the next crunch().
    """

    def __init__(self, num_nodes: int) -> None:
        num_nodes = check_node_count(num_nodes)
        self._n = num_nodes
        self._out: Dict[int, Dict[int, float]] = {}
        self._in: Dict[int, Dict[int, float]] = {}
        self._crunched: Optional[
            Tuple[Dict[int, Tuple[int, ...]], Dict[int, Tuple[int, ...]]]
        ] = None
        logger.debug("AdjacencyListGraph allocated: %d nodes", num_nodes)

    # --- Helpers -------------------------------------------------------------

    @property
    def num_nodes(self) -> int:
        return self._n

    def __len__(self) -> int:
        return self._n

    def __repr__(self) -> str:
        edges = sum(len(heads) for heads in self._out.values())
        return f"AdjacencyListGraph(num_nodes={self._n}, edges={edges})"

    def _checked(self, node: NodeLike) -> int:
        i = node_id(node)
        if not 0 <= i < self._n:
            raise NodeOutOfRangeError(i, self._n)
        return i

    def _heads(self, i: int) -> Tuple[int, ...]:
        if self._crunched is not None:
            return self._crunched[0].get(i, ())
        return tuple(sorted(self._out.get(i, {})))

    def _tails(self, j: int) -> Tuple[int, ...]:
        if self._crunched is not None:
            return self._crunched[1].get(j, ())
        return tuple(sorted(self._in.get(j, {})))

    def _linked(self, i: int, j: int) -> bool:
        return j in self._out.get(i, {})

    def _store(self, i: int, j: int, cost: float) -> None:
        if cost == math.inf:
            self._out.get(i, {}).pop(j, None)
            self._in.get(j, {}).pop(i, None)
        else:
            self._out.setdefault(i, {})[j] = cost
            self._in.setdefault(j, {})[i] = cost

    # --- Graph interface -----------------------------------------------------

    def node_exists(self, node: NodeLike) -> bool:
        return 0 <= node_id(node) < self._n

    def degree(self, node: NodeLike) -> int:
        i = self._checked(node)
        return len(self._out.get(i, {})) + len(self._in.get(i, {}))

    def node_list(self) -> List[IntNode]:
        return [IntNode(i) for i in range(self._n)]

    def directed_edge_list(self) -> List[DirectedEdge]:
        return [
            DirectedEdge(IntNode(i), IntNode(j))
            for i in sorted(self._out)
            for j in self._heads(i)
        ]

    def neighbors(self, node: NodeLike) -> List[IntNode]:
        i = self._checked(node)
        ids = set(self._heads(i)) | set(self._tails(i))
        return [IntNode(j) for j in sorted(ids)]

    def edge_between(
        self, node: NodeLike, neighbor: NodeLike
    ) -> Optional[DirectedEdge]:
        i = self._checked(node)
        j = self._checked(neighbor)
        if self._linked(i, j) or self._linked(j, i):
            return DirectedEdge(IntNode(i), IntNode(j))
        return None

    def successors(self, node: NodeLike) -> List[IntNode]:
        return [IntNode(j) for j in self._heads(self._checked(node))]

    def edge_to(self, node: NodeLike, succ: NodeLike) -> Optional[DirectedEdge]:
        i = self._checked(node)
        j = self._checked(succ)
        if self._linked(i, j):
            return DirectedEdge(IntNode(i), IntNode(j))
        return None

    def predecessors(self, node: NodeLike) -> List[IntNode]:
        return [IntNode(i) for i in self._tails(self._checked(node))]

    def cost(self, e: Edge) -> float:
        i = self._checked(e.tail)
        j = self._checked(e.head)
        return self._out.get(i, {}).get(j, math.inf)

    def crunch(self) -> None:
        heads = {i: tuple(sorted(hs)) for i, hs in self._out.items() if hs}
        tails = {j: tuple(sorted(ts)) for j, ts in self._in.items() if ts}
        self._crunched = (heads, tails)
        logger.debug(
            "AdjacencyListGraph crunched: %d nodes, %d edges",
            self._n,
            sum(len(hs) for hs in heads.values()),
        )

    # --- MutableGraph interface ----------------------------------------------

    def set_edge_cost(self, e: Edge, cost: float, directed: bool) -> None:
        i = self._checked(e.tail)
        j = self._checked(e.head)
        self._crunched = None
        self._store(i, j, float(cost))
        if not directed:
            self._store(j, i, float(cost))
