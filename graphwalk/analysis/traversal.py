"""
Traversal algorithms for graphwalk graphs.

This module provides depth-first and breadth-first search over the
adjacency structure of Node objects.
"""

import logging
from typing import Any, Iterator, List, Optional, Set, Tuple
from collections import deque

from ..classes.node import Node

logger = logging.getLogger(__name__)


class GraphTraversal:
    """
    Traversal algorithms for undirected graphs.

    This class provides methods for:
    - Depth-first (pre-order) search
    - Breadth-first (level-order) search

    Both read the adjacency sets reachable from the start node and never
    mutate the graph. Each call uses its own visited set and result list.
    """

    def __init__(self, graph):
        """
        Initialize the traversal helper.

        Args:
            graph: Graph instance to traverse
        """
        self.graph = graph

    def depth_first_search(self, start: Optional[Node]) -> List[Any]:
        """
        Collect node values in depth-first pre-order.

        Neighbours are explored in adjacency insertion order. An explicit
        stack of neighbour iterators stands in for recursion, so deep graphs
        do not hit the interpreter recursion limit.

        Args:
            start: Node to start from, or None

        Returns:
            List of node values in visitation order; empty if start is None
        """
        if start is None:
            logger.debug("Depth-first search called without a start node")
            return []

        visited: Set[Node] = {start}
        result = [start.value]
        stack: List[Tuple[Node, Iterator[Node]]] = [(start, iter(start.adjacent))]

        while stack:
            _, neighbors = stack[-1]
            for neighbor in neighbors:
                if neighbor not in visited:
                    visited.add(neighbor)
                    result.append(neighbor.value)
                    stack.append((neighbor, iter(neighbor.adjacent)))
                    break
            else:
                stack.pop()

        logger.debug(f"Depth-first search visited {len(result)} nodes")
        return result

    def breadth_first_search(self, start: Node) -> List[Any]:
        """
        Collect node values in breadth-first order.

        Nodes are marked visited when enqueued, so a node reachable from
        several predecessors is queued once.

        Args:
            start: Node to start from

        Returns:
            List of node values in dequeue order

        Raises:
            TypeError: If start is None
        """
        if start is None:
            logger.error("Breadth-first search called without a start node")
            raise TypeError("breadth_first_search requires a start node, got None")

        visited: Set[Node] = {start}
        result = []
        queue = deque([start])

        while queue:
            vertex = queue.popleft()
            result.append(vertex.value)

            for neighbor in vertex.adjacent:
                if neighbor not in visited:
                    visited.add(neighbor)
                    queue.append(neighbor)

        logger.debug(f"Breadth-first search visited {len(result)} nodes")
        return result
