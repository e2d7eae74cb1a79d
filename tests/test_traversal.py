import sys

import pytest

from graphwalk import Graph, GraphTraversal, Node


def test_dfs_without_start_returns_empty(graph):
    assert graph.depth_first_search(None) == []


def test_bfs_without_start_raises(graph):
    with pytest.raises(TypeError):
        graph.breadth_first_search(None)


def test_chain(chain):
    g, a, b, c = chain
    assert g.depth_first_search(a) == [1, 2, 3]
    assert g.breadth_first_search(a) == [1, 2, 3]


def test_chain_from_middle(chain):
    g, a, b, c = chain
    assert g.depth_first_search(b) == [2, 1, 3]
    assert g.breadth_first_search(b) == [2, 1, 3]


def test_branching_orders(branching):
    g, a, b, c, d = branching
    assert g.breadth_first_search(a) == [1, 2, 3, 4]
    assert g.depth_first_search(a) == [1, 2, 4, 3]


def test_disconnected_nodes_excluded(graph):
    a, b = Node(1), Node(2)
    graph.add_vertices([a, b])
    assert graph.depth_first_search(a) == [1]
    assert graph.breadth_first_search(a) == [1]


def test_single_node(graph):
    a = Node("only")
    assert graph.depth_first_search(a) == ["only"]
    assert graph.breadth_first_search(a) == ["only"]


def test_cycle_visits_each_node_once(graph):
    a, b, c = Node(1), Node(2), Node(3)
    graph.add_edge(a, b)
    graph.add_edge(b, c)
    graph.add_edge(c, a)
    assert graph.depth_first_search(a) == [1, 2, 3]
    assert graph.breadth_first_search(a) == [1, 2, 3]


def test_bfs_enqueues_shared_neighbour_once(graph):
    a, b, c, d = Node(1), Node(2), Node(3), Node(4)
    graph.add_edge(a, b)
    graph.add_edge(a, c)
    graph.add_edge(b, d)
    graph.add_edge(c, d)
    assert graph.breadth_first_search(a) == [1, 2, 3, 4]


def test_traversal_follows_links_outside_membership(graph):
    a, b = Node(1), Node(2)
    graph.add_vertex(a)
    graph.add_edge(a, b)
    assert graph.depth_first_search(a) == [1, 2]


def test_traversal_does_not_mutate(branching):
    g, a, b, c, d = branching
    before = [list(node.adjacent) for node in g]
    g.depth_first_search(a)
    g.breadth_first_search(a)
    assert [list(node.adjacent) for node in g] == before
    assert g.get_vertices() == [a, b, c, d]


def test_repeated_calls_are_independent(chain):
    g, a, b, c = chain
    assert g.depth_first_search(a) == g.depth_first_search(a)
    assert g.breadth_first_search(c) == g.breadth_first_search(c)


def test_dfs_deep_chain_beyond_recursion_limit():
    depth = sys.getrecursionlimit() + 500
    nodes = [Node(i) for i in range(depth)]
    g = Graph()
    g.add_vertices(nodes)
    for left, right in zip(nodes, nodes[1:]):
        g.add_edge(left, right)

    assert g.depth_first_search(nodes[0]) == list(range(depth))


def test_traversal_helper_used_directly(chain):
    g, a, b, c = chain
    traversal = GraphTraversal(g)
    assert traversal.depth_first_search(c) == [3, 2, 1]
    assert traversal.breadth_first_search(c) == [3, 2, 1]
