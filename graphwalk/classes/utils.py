"""
Utility data structures for graphwalk.

This module provides shared helpers used across the graphwalk package,
including the insertion-ordered set that backs adjacency and membership,
and numeric views of the adjacency structure.
"""

import numpy as np
from typing import Any, Dict, Iterable, Iterator, Optional
from collections.abc import MutableSet
import logging

logger = logging.getLogger(__name__)


class OrderedSet(MutableSet):
    """
    Set with unique membership that iterates in insertion order.

    Backed by a dict, so membership tests are O(1) and iteration follows the
    order in which elements were first added.
    """

    def __init__(self, iterable: Optional[Iterable[Any]] = None):
        self._items: Dict[Any, None] = {}
        if iterable is not None:
            for item in iterable:
                self.add(item)

    def add(self, item: Any) -> None:
        # setdefault keeps the original position of an existing element
        self._items.setdefault(item, None)

    def discard(self, item: Any) -> None:
        self._items.pop(item, None)

    def __contains__(self, item: Any) -> bool:
        return item in self._items

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._items)!r})"


def build_adjacency_matrix(nodes: Iterable) -> np.ndarray:
    """
    Build a dense 0/1 adjacency matrix for a collection of nodes.

    Args:
        nodes: Iterable of Node objects; row/column order follows iteration order

    Returns:
        Square int8 array where entry [i, j] is 1 if nodes[j] is in
        nodes[i].adjacent. Neighbours outside the collection are ignored.
    """
    node_list = list(nodes)
    node_to_index = {node: index for index, node in enumerate(node_list)}
    matrix = np.zeros((len(node_list), len(node_list)), dtype=np.int8)

    for row, node in enumerate(node_list):
        for neighbor in node.adjacent:
            column = node_to_index.get(neighbor)
            if column is not None:
                matrix[row, column] = 1

    logger.debug(f"Built {len(node_list)}x{len(node_list)} adjacency matrix")
    return matrix
