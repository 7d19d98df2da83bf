"""
Core graph data structures.

This module contains the shared graph contract and its two storage variants,
without conversion helpers.
"""

from .graph import Graph, VertexNotFound, NOT_FOUND
from .unweighted import UndirectedUnweightedGraph
from .weighted import WeightedGraph

__all__ = [
    'Graph',
    'VertexNotFound',
    'NOT_FOUND',
    'UndirectedUnweightedGraph',
    'WeightedGraph',
]
