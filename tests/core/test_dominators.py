"""Tests for dominator and post-dominator sets."""

from graphtopo.core.graph_operations.dominators import DominatorAnalysis
from graphtopo.core.node_set import NodeSet


def as_ids(sets: dict) -> dict:
    return {nid: sorted(n.id for n in s) for nid, s in sets.items()}


def test_diamond_dominators(make_directed):
    """Test the join of a diamond is dominated only by the entry."""
    graph = make_directed([(1, 2), (1, 3), (2, 4), (3, 4), (4, 5)])
    dom = DominatorAnalysis.dominators(graph.get_node(1), graph)

    assert as_ids(dom) == {
        1: [1],
        2: [1, 2],
        3: [1, 3],
        4: [1, 4],
        5: [1, 4, 5],
    }
    assert all(isinstance(s, NodeSet) for s in dom.values())


def test_diamond_post_dominators(make_directed):
    """Test every path to the exit passes through the join."""
    graph = make_directed([(1, 2), (1, 3), (2, 4), (3, 4), (4, 5)])
    post = DominatorAnalysis.post_dominators(graph.get_node(5), graph)

    assert as_ids(post) == {
        1: [1, 4, 5],
        2: [2, 4, 5],
        3: [3, 4, 5],
        4: [4, 5],
        5: [5],
    }


def test_loop_dominators(make_directed):
    """Test a loop back edge does not add dominators."""
    graph = make_directed([(1, 2), (2, 3), (3, 2), (3, 4)])
    dom = DominatorAnalysis.dominators(graph.get_node(1), graph)

    assert as_ids(dom) == {
        1: [1],
        2: [1, 2],
        3: [1, 2, 3],
        4: [1, 2, 3, 4],
    }


def test_node_without_predecessors_keeps_all_nodes(make_directed):
    """Test a second source keeps the full node set."""
    graph = make_directed([(1, 3), (2, 3)])
    dom = DominatorAnalysis.dominators(graph.get_node(1), graph)

    assert as_ids(dom)[2] == [1, 2, 3]
    assert as_ids(dom)[3] == [1, 3]


def test_undirected_dominators(make_undirected):
    """Test dominators of an undirected path follow its neighbours."""
    graph = make_undirected([(1, 2), (2, 3)])
    dom = DominatorAnalysis.dominators(graph.get_node(1), graph)

    assert as_ids(dom) == {1: [1], 2: [1, 2], 3: [1, 2, 3]}


def test_results_are_graph_nodes(make_directed):
    """Test dominator sets hold the graph's own node objects."""
    graph = make_directed([(1, 2)])
    dom = DominatorAnalysis.dominators(graph.get_node(1), graph)
    for node in dom[2]:
        assert node is graph.get_node(node.id)
