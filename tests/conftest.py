import pytest

from graphwalk import Graph, Node


@pytest.fixture
def graph():
    return Graph()


@pytest.fixture
def chain():
    """A(1) - B(2) - C(3)."""
    a, b, c = Node(1), Node(2), Node(3)
    g = Graph()
    g.add_vertices([a, b, c])
    g.add_edge(a, b)
    g.add_edge(b, c)
    return g, a, b, c


@pytest.fixture
def branching():
    """A(1) connected to B(2) and C(3); B connected to D(4)."""
    a, b, c, d = Node(1), Node(2), Node(3), Node(4)
    g = Graph()
    g.add_vertices([a, b, c, d])
    g.add_edge(a, b)
    g.add_edge(a, c)
    g.add_edge(b, d)
    return g, a, b, c, d
