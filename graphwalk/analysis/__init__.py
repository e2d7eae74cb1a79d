"""
Graph analysis modules.

This module contains the traversal algorithms.
"""

from .traversal import GraphTraversal

__all__ = ['GraphTraversal']
