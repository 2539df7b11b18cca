"""
Utilities to build graphs from edge lists and convert between representations.
"""

from __future__ import annotations

import logging
from typing import Iterable, Tuple

from adjacency_list_graph import AdjacencyListGraph
from dense_graph import DenseGraph
from graph import Graph, MutableGraph, edge
from graph_errors import NodeOutOfRangeError
from nodes import NodeLike

logger = logging.getLogger(__name__)

WeightedEdge = Tuple[NodeLike, NodeLike, float]


def build_dense_graph(
    num_nodes: int,
    edges: Iterable[WeightedEdge],
    directed: bool = True,
    passable: bool = False,
) -> DenseGraph:
    """
    Create a DenseGraph and apply (tail, head, cost) triples in order.

    Args:
        num_nodes: size of the node id range.
        edges: (tail, head, cost) triples; later triples overwrite earlier ones.
        directed: when False each triple also sets head -> tail.
        passable: initial state before the triples are applied.
    """
    graph = DenseGraph(num_nodes, passable)
    for tail, head, cost in edges:
        graph.set_edge_cost(edge(tail, head), cost, directed)
    return graph


def copy_edges(src: Graph, dst: MutableGraph, directed: bool = True) -> int:
    """
    Copy every directed edge of ``src`` into ``dst`` with its cost.

    Edges already present in ``dst`` are kept unless overwritten. Returns the
    number of edges copied. Raises NodeOutOfRangeError, before writing
    anything, when ``dst`` has fewer nodes than ``src``.
    """
    src_size = len(src.node_list())
    dst_size = len(dst.node_list())
    if dst_size < src_size:
        raise NodeOutOfRangeError(src_size - 1, dst_size)

    copied = 0
    for e in src.directed_edge_list():
        dst.set_edge_cost(e, src.cost(e), directed)
        copied += 1
    logger.debug("copied %d edges from %r into %r", copied, src, dst)
    return copied


def to_adjacency_list(graph: Graph) -> AdjacencyListGraph:
    """Sparse, crunched copy of any graph."""
    sparse = AdjacencyListGraph(len(graph.node_list()))
    copy_edges(graph, sparse)
    sparse.crunch()
    return sparse


def to_dense_graph(graph: Graph) -> DenseGraph:
    """Dense copy of any graph."""
    dense = DenseGraph(len(graph.node_list()))
    copy_edges(graph, dense)
    return dense
