"""
Exceptions raised by densegraph graphs.
"""


class GraphError(Exception):
    """Base class for graph errors."""


class NodeOutOfRangeError(GraphError, IndexError):
    """A node id fell outside the graph's [0, N) id range."""

    def __init__(self, node_id: int, num_nodes: int) -> None:
        self.node_id = node_id
        self.num_nodes = num_nodes
        super().__init__(
            f"node {node_id} is out of range for a graph with {num_nodes} nodes"
        )
