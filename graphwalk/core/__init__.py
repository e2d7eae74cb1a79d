"""
Core graph data structures and management.

This module contains the graph representation with vertex and edge
mutation and basic queries.
"""

from .graph import Graph

__all__ = ['Graph']
