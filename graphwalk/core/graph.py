"""
Core graph data structure for undirected graphs.

This module provides vertex membership, edge mutation and basic queries,
and delegates traversal to the analysis module.
"""

import logging
from typing import Any, Iterable, Iterator, List, Optional, Tuple

import numpy as np

from ..classes.node import Node
from ..classes.utils import OrderedSet, build_adjacency_matrix
from ..analysis.traversal import GraphTraversal

logger = logging.getLogger(__name__)


class Graph:
    """
    Undirected graph over Node objects.

    This class manages:
    - Vertex membership (insertion-ordered, unique)
    - Symmetric edge creation and removal
    - Basic graph queries (neighbours, degree, edges)
    - Depth-first and breadth-first traversal

    Mutations never raise: adding an existing vertex or edge and removing a
    missing one are no-ops. Edges live on the nodes themselves, so the graph
    does not validate that edge endpoints are members.
    """

    def __init__(self):
        self.nodes: OrderedSet = OrderedSet()
        self._traversal = GraphTraversal(self)

    # ========================================================================
    # VERTEX & EDGE MUTATION
    # ========================================================================

    def add_vertex(self, vertex: Node) -> None:
        """Add a single vertex to the graph."""
        self.nodes.add(vertex)
        logger.debug(f"Added vertex {vertex!r}")

    def add_vertices(self, vertices: Iterable[Node]) -> None:
        """
        Add several vertices to the graph.

        Args:
            vertices: Sequence of Node objects, added in order
        """
        for vertex in vertices:
            self.add_vertex(vertex)

    def add_edge(self, v1: Node, v2: Node) -> None:
        """
        Connect two vertices with an undirected edge.

        Args:
            v1: First endpoint
            v2: Second endpoint
        """
        v1.adjacent.add(v2)
        v2.adjacent.add(v1)
        logger.debug(f"Added edge {v1.value!r} <-> {v2.value!r}")

    def remove_edge(self, v1: Node, v2: Node) -> None:
        """
        Remove the undirected edge between two vertices, if present.

        Args:
            v1: First endpoint
            v2: Second endpoint
        """
        v1.adjacent.discard(v2)
        v2.adjacent.discard(v1)
        logger.debug(f"Removed edge {v1.value!r} <-> {v2.value!r}")

    def remove_vertex(self, vertex: Node) -> None:
        """
        Remove a vertex and sever every neighbour's link back to it.

        The vertex's own adjacency set is left as is, so the caller's node
        object stays intact. Links are severed even if the vertex is not a
        member of this graph.

        Args:
            vertex: Node to remove
        """
        neighbor_count = 0
        # snapshot, since a self-loop discards from the set being iterated
        for neighbor in list(vertex.adjacent):
            neighbor.adjacent.discard(vertex)
            neighbor_count += 1

        self.nodes.discard(vertex)
        logger.debug(f"Removed vertex {vertex!r} and severed {neighbor_count} neighbour links")

    # ========================================================================
    # QUERIES
    # ========================================================================

    def get_vertices(self) -> List[Node]:
        """Get all member vertices in insertion order."""
        return list(self.nodes)

    def get_vertex_count(self) -> int:
        """Get the number of member vertices."""
        return len(self.nodes)

    def has_vertex(self, vertex: Node) -> bool:
        return vertex in self.nodes

    def has_edge(self, v1: Node, v2: Node) -> bool:
        """Check whether v1 and v2 are linked in both directions."""
        return v2 in v1.adjacent and v1 in v2.adjacent

    def get_neighbors(self, vertex: Node) -> List[Node]:
        return list(vertex.adjacent)

    def get_degree(self, vertex: Node) -> int:
        return len(vertex.adjacent)

    def get_edges(self) -> List[Tuple[Node, Node]]:
        """
        Get each undirected edge between member vertices once.

        Returns:
            List of (v1, v2) pairs ordered by v1's position in the graph,
            then by v1's adjacency order
        """
        edges = []
        seen = OrderedSet()

        for vertex in self.nodes:
            for neighbor in vertex.adjacent:
                if neighbor not in self.nodes or neighbor in seen:
                    continue
                edges.append((vertex, neighbor))
            seen.add(vertex)

        return edges

    def get_edge_count(self) -> int:
        return len(self.get_edges())

    def adjacency_matrix(self) -> np.ndarray:
        """
        Get the adjacency matrix of member vertices.

        Returns:
            Square int8 array indexed by insertion order of the vertices
        """
        return build_adjacency_matrix(self.nodes)

    # ========================================================================
    # TRAVERSAL
    # ========================================================================

    def depth_first_search(self, start: Optional[Node]) -> List[Any]:
        """Return node values reachable from start in depth-first order."""
        return self._traversal.depth_first_search(start)

    def breadth_first_search(self, start: Node) -> List[Any]:
        """Return node values reachable from start in breadth-first order."""
        return self._traversal.breadth_first_search(start)

    def __contains__(self, vertex: Node) -> bool:
        return vertex in self.nodes

    def __iter__(self) -> Iterator[Node]:
        return iter(self.nodes)

    def __len__(self) -> int:
        return len(self.nodes)
