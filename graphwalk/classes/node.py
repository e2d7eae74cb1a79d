"""
Vertex representation for graphwalk graphs.
"""

from typing import Any, Iterable, Optional

from .utils import OrderedSet


class Node:
    """
    A labeled vertex holding a value and a set of adjacent nodes.

    Nodes compare and hash by identity, so two nodes holding equal values
    are distinct vertices. A node is not owned by any graph; it may stand
    alone or be registered with several graphs at once.
    """

    def __init__(self, value: Any, adjacent: Optional[Iterable["Node"]] = None):
        """
        Initialize a node.

        Args:
            value: Payload of any type, fixed for the lifetime of the node
            adjacent: Optional initial neighbours. Links are one-directional
                as given; use Graph.add_edge for symmetric edges.
        """
        self._value = value
        self.adjacent: OrderedSet = OrderedSet(adjacent)

    @property
    def value(self) -> Any:
        return self._value

    def __repr__(self) -> str:
        return f"Node(value={self._value!r}, degree={len(self.adjacent)})"
