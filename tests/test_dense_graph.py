"""
Unit tests for DenseGraph.
"""

import math

import numpy as np
import pytest

from dense_graph import DenseGraph
from graph import edge
from graph_errors import NodeOutOfRangeError


def ids(nodes):
    return [n.id for n in nodes]


@pytest.mark.parametrize("n", [0, 1, 3, 5])
def test_passable_graph_is_fully_connected_at_unit_cost(n):
    g = DenseGraph(n, True)

    for i in range(n):
        for j in range(n):
            assert g.cost(edge(i, j)) == 1.0


@pytest.mark.parametrize("n", [0, 1, 3, 5])
def test_impassable_graph_has_no_edges(n):
    g = DenseGraph(n, False)

    for i in range(n):
        for j in range(n):
            assert g.cost(edge(i, j)) == math.inf
    assert g.directed_edge_list() == []


def test_empty_graph():
    g = DenseGraph(0, True)

    assert g.node_list() == []
    assert g.directed_edge_list() == []
    assert len(g) == 0
    assert not g.node_exists(0)


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        DenseGraph(-1, False)
    with pytest.raises(TypeError):
        DenseGraph(2.0, False)


def test_directed_set_leaves_reverse_unchanged():
    g = DenseGraph(3, False)
    g.set_edge_cost(edge(0, 2), 4.0, True)

    assert g.cost(edge(0, 2)) == 4.0
    assert g.cost(edge(2, 0)) == math.inf


def test_undirected_set_mirrors_cost():
    g = DenseGraph(3, True)
    g.set_edge_cost(edge(0, 2), -1.5, False)

    assert g.cost(edge(0, 2)) == -1.5
    assert g.cost(edge(2, 0)) == -1.5
    # other cells untouched
    assert g.cost(edge(0, 1)) == 1.0


def test_row_is_tail_column_is_head():
    g = DenseGraph(3, False)
    g.set_edge_cost(edge(1, 2), 7.0, True)

    m = g.to_matrix()
    assert m[1, 2] == 7.0
    assert m[2, 1] == math.inf


def test_remove_edge_directed():
    g = DenseGraph(3, True)
    g.remove_edge(edge(0, 1), True)

    assert g.cost(edge(0, 1)) == math.inf
    assert g.cost(edge(1, 0)) == 1.0
    assert (0, 1) not in [e.as_tuple() for e in g.directed_edge_list()]
    assert (1, 0) in [e.as_tuple() for e in g.directed_edge_list()]


def test_remove_edge_undirected():
    g = DenseGraph(2, True)
    g.remove_edge(edge(0, 1), False)

    assert [e.as_tuple() for e in g.directed_edge_list()] == [(0, 0), (1, 1)]


def test_zero_and_negative_costs_are_edges():
    g = DenseGraph(3, False)
    g.set_edge_cost(edge(0, 1), 0.0, True)
    g.set_edge_cost(edge(1, 2), -3.0, True)

    assert ids(g.successors(0)) == [1]
    assert ids(g.successors(1)) == [2]
    assert len(g.directed_edge_list()) == 2


def test_node_list_is_fresh_snapshot():
    g = DenseGraph(4, False)
    nodes = g.node_list()
    nodes.clear()

    assert ids(g.node_list()) == [0, 1, 2, 3]


def test_degree_counts_self_loop_twice():
    g = DenseGraph(3, True)

    for node in g.node_list():
        assert g.degree(node) == 6

    h = DenseGraph(3, False)
    h.set_edge_cost(edge(1, 1), 2.0, True)
    assert h.degree(1) == 2
    assert h.degree(0) == 0


def test_single_edge_scenario():
    g = DenseGraph(4, False)
    g.set_edge_cost(edge(0, 1), 2.5, True)

    assert ids(g.successors(0)) == [1]
    assert ids(g.predecessors(1)) == [0]
    assert ids(g.neighbors(0)) == [1]
    assert ids(g.neighbors(1)) == [0]

    e = g.edge_to(0, 1)
    assert e is not None
    assert g.cost(e) == 2.5
    assert g.edge_to(1, 0) is None


def test_edge_list_is_row_major():
    g = DenseGraph(3, False)
    g.set_edge_cost(edge(2, 0), 1.0, True)
    g.set_edge_cost(edge(0, 2), 1.0, True)
    g.set_edge_cost(edge(1, 1), 1.0, True)
    g.set_edge_cost(edge(0, 1), 1.0, True)

    assert [e.as_tuple() for e in g.directed_edge_list()] == [
        (0, 1),
        (0, 2),
        (1, 1),
        (2, 0),
    ]


def test_edge_list_length_matches_finite_cells():
    g = DenseGraph(2, True)
    assert len(g.directed_edge_list()) == 4

    g.remove_edge(edge(1, 0), True)
    assert len(g.directed_edge_list()) == 3


def test_edge_between_orients_from_first_argument():
    # Only 1 -> 0 is stored, yet the edge comes back as 0 -> 1.
    g = DenseGraph(3, False)
    g.set_edge_cost(edge(1, 0), 5.0, True)

    e = g.edge_between(0, 1)
    assert e is not None
    assert e.as_tuple() == (0, 1)
    assert g.cost(e) == math.inf
    assert g.edge_between(0, 2) is None


def test_crunch_changes_nothing():
    g = DenseGraph(3, False)
    g.set_edge_cost(edge(0, 1), 1.0, False)
    before = g.to_matrix()

    g.crunch()

    np.testing.assert_array_equal(g.to_matrix(), before)


def test_to_matrix_returns_copy():
    g = DenseGraph(2, False)
    m = g.to_matrix()
    m[0, 1] = 3.0

    assert g.cost(edge(0, 1)) == math.inf


def test_from_matrix():
    inf = math.inf
    g = DenseGraph.from_matrix([[inf, 2.0], [inf, 0.5]])

    assert g.num_nodes == 2
    assert g.cost(edge(0, 1)) == 2.0
    assert g.cost(edge(1, 1)) == 0.5
    assert ids(g.predecessors(1)) == [0, 1]


def test_from_matrix_rejects_non_square():
    with pytest.raises(ValueError):
        DenseGraph.from_matrix(np.ones((2, 3)))


def test_node_exists_bounds():
    g = DenseGraph(3, False)

    assert g.node_exists(0)
    assert g.node_exists(2)
    assert not g.node_exists(3)
    assert not g.node_exists(-1)


@pytest.mark.parametrize("bad", [3, -1])
def test_out_of_range_ids_raise(bad):
    g = DenseGraph(3, True)

    with pytest.raises(NodeOutOfRangeError):
        g.degree(bad)
    with pytest.raises(NodeOutOfRangeError):
        g.successors(bad)
    with pytest.raises(NodeOutOfRangeError):
        g.predecessors(bad)
    with pytest.raises(NodeOutOfRangeError):
        g.neighbors(bad)
    with pytest.raises(NodeOutOfRangeError):
        g.edge_to(0, bad)
    with pytest.raises(NodeOutOfRangeError):
        g.edge_between(bad, 0)
    with pytest.raises(NodeOutOfRangeError):
        g.cost(edge(bad, 0))
    with pytest.raises(NodeOutOfRangeError):
        g.set_edge_cost(edge(0, bad), 1.0, False)


def test_out_of_range_error_is_index_error():
    g = DenseGraph(1, False)

    with pytest.raises(IndexError) as info:
        g.successors(5)
    assert info.value.node_id == 5
    assert info.value.num_nodes == 1


def test_numpy_integer_ids_accepted():
    g = DenseGraph(3, False)
    g.set_edge_cost(edge(np.int64(0), np.int64(2)), 1.0, True)

    assert ids(g.successors(np.int64(0))) == [2]
