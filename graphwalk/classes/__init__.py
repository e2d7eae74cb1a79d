"""
Core data classes for graph representation.

This module contains the fundamental data structures used throughout
the graphwalk library.
"""

from .utils import OrderedSet
from .node import Node

__all__ = [
    'Node',
    'OrderedSet',
]
