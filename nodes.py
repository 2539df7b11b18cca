"""
Node abstraction for densegraph.

Nodes are identified by an integer in [0, N); graphs store no node objects,
only the ids. Anything exposing an integer ``id`` can be passed in.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from functools import total_ordering
from numbers import Integral
from typing import Union


class Node(ABC):
    """
    Abstract node: anything with an integer identifier.

    Nodes compare and hash by id, so any two Node objects with the same id
    are equal and interchangeable as dict keys. Subclasses that generate
    their own __eq__ (e.g. a default dataclass) only keep the equality half.
    """

    @property
    @abstractmethod
    def id(self) -> int:
        """
        Position of the node in the graph's contiguous id range.
        """
        raise NotImplementedError

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Node):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)


@total_ordering
@dataclass(frozen=True, eq=False)
class IntNode(Node):
    """Plain integer node returned by graph scans."""

    _id: int

    @property
    def id(self) -> int:
        return self._id

    def __int__(self) -> int:
        return self._id

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Node):
            return NotImplemented
        return self._id < other.id


NodeLike = Union[Node, int]


def node_id(node: NodeLike) -> int:
    """Return the integer id of a Node or a plain int."""
    if isinstance(node, Node):
        node = node.id
    # bool is an int subclass but never a meaningful node id
    if isinstance(node, bool) or not isinstance(node, Integral):
        raise TypeError(f"node id must be an int, got {type(node).__name__}")
    return int(node)


def check_node_count(num_nodes: int) -> int:
    """Validate a graph size: a non-negative integer."""
    if isinstance(num_nodes, bool) or not isinstance(num_nodes, Integral):
        raise TypeError("num_nodes must be an int")
    if num_nodes < 0:
        raise ValueError("num_nodes must be non-negative")
    return int(num_nodes)
