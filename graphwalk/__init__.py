"""
graphwalk - In-memory undirected graph with depth-first and breadth-first search

A small Python library for building undirected graphs out of shared Node
objects, mutating vertices and edges, and traversing the adjacency structure.

Main Classes:
    Graph: Vertex membership, edge mutation, queries and traversal
    Node: Vertex holding a value and its adjacent nodes
    GraphTraversal: Depth-first and breadth-first search algorithms
    OrderedSet: Insertion-ordered set used for adjacency and membership

Example:
    >>> from graphwalk import Graph, Node
    >>> a, b, c = Node(1), Node(2), Node(3)
    >>> graph = Graph()
    >>> graph.add_vertices([a, b, c])
    >>> graph.add_edge(a, b)
    >>> graph.add_edge(b, c)
    >>> graph.depth_first_search(a)
    [1, 2, 3]
"""

__version__ = "0.1.0"
__author__ = "graphwalk developers"

from graphwalk.classes.node import Node
from graphwalk.classes.utils import OrderedSet
from graphwalk.analysis.traversal import GraphTraversal
from graphwalk.core.graph import Graph

__all__ = [
    'Graph',
    'Node',
    'GraphTraversal',
    'OrderedSet',
]
