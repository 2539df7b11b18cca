"""
Directed, weighted graph abstraction for densegraph.

Nodes are integer ids in [0, N) (see nodes.Node).
Edges are directed: tail -> head with a float cost; a cost of +inf means
there is no edge.

Algorithms written against Graph work over every representation in this
package (DenseGraph, AdjacencyListGraph).
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Optional

from nodes import IntNode, Node, NodeLike, node_id


class Edge(ABC):
    """Directed edge: tail is the source, head the destination."""

    @property
    @abstractmethod
    def tail(self) -> Node:
        raise NotImplementedError

    @property
    @abstractmethod
    def head(self) -> Node:
        raise NotImplementedError


@dataclass(frozen=True)
class DirectedEdge(Edge):
    """Concrete edge value returned by graph queries."""

    _tail: IntNode
    _head: IntNode

    @property
    def tail(self) -> IntNode:
        return self._tail

    @property
    def head(self) -> IntNode:
        return self._head

    def as_tuple(self) -> tuple[int, int]:
        return self._tail.id, self._head.id


def edge(tail: NodeLike, head: NodeLike) -> DirectedEdge:
    """Build a DirectedEdge from nodes or plain ints."""
    return DirectedEdge(IntNode(node_id(tail)), IntNode(node_id(head)))


class Graph(ABC):
    """
    Read-only capability set shared by every graph representation.

    All node arguments accept a Node or a plain int. Ids outside [0, N)
    raise graph_errors.NodeOutOfRangeError, except in node_exists.
    """

    @abstractmethod
    def node_exists(self, node: NodeLike) -> bool:
        """True iff the node id lies in [0, N)."""
        raise NotImplementedError

    @abstractmethod
    def degree(self, node: NodeLike) -> int:
        """
        In-degree plus out-degree. A self-loop counts once on each side.
        """
        raise NotImplementedError

    @abstractmethod
    def node_list(self) -> List[IntNode]:
        """Fresh list of every node, ascending by id."""
        raise NotImplementedError

    @abstractmethod
    def directed_edge_list(self) -> List[DirectedEdge]:
        """Every directed edge, ordered by tail then head."""
        raise NotImplementedError

    @abstractmethod
    def neighbors(self, node: NodeLike) -> List[IntNode]:
        """Nodes joined to ``node`` by an edge in either direction, ascending."""
        raise NotImplementedError

    @abstractmethod
    def edge_between(
        self, node: NodeLike, neighbor: NodeLike
    ) -> Optional[DirectedEdge]:
        """
        Edge oriented node -> neighbor if an edge exists in either direction.

        The orientation is node -> neighbor even when only neighbor -> node
        is stored. Returns None when the two are not adjacent.
        """
        raise NotImplementedError

    @abstractmethod
    def successors(self, node: NodeLike) -> List[IntNode]:
        """Heads of the outgoing edges of ``node``, ascending."""
        raise NotImplementedError

    @abstractmethod
    def edge_to(self, node: NodeLike, succ: NodeLike) -> Optional[DirectedEdge]:
        """Edge node -> succ if it exists, else None."""
        raise NotImplementedError

    @abstractmethod
    def predecessors(self, node: NodeLike) -> List[IntNode]:
        """Tails of the incoming edges of ``node``, ascending."""
        raise NotImplementedError

    @abstractmethod
    def cost(self, e: Edge) -> float:
        """Stored cost of tail -> head; +inf when there is no edge."""
        raise NotImplementedError

    @abstractmethod
    def crunch(self) -> None:
        """Finalize internal structures after bulk edits."""
        raise NotImplementedError


class MutableGraph(Graph):
    """Graph whose edge costs can be changed after construction."""

    @abstractmethod
    def set_edge_cost(self, e: Edge, cost: float, directed: bool) -> None:
        """
        Set the cost of tail -> head.

        When ``directed`` is False the reverse edge head -> tail gets the
        same cost. Setting +inf removes the edge.
        """
        raise NotImplementedError

    def remove_edge(self, e: Edge, directed: bool) -> None:
        """Equivalent to set_edge_cost(e, +inf, directed)."""
        self.set_edge_cost(e, float("inf"), directed)
