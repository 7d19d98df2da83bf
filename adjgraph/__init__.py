"""
adjgraph - In-memory graph abstract data types

A small Python library providing mutable graphs keyed by vertex identity,
for use as the storage layer of traversal, shortest-path and connectivity code.

Main Classes:
    UndirectedUnweightedGraph: Undirected graph with set-based adjacency
    WeightedGraph: Graph with integer weights, directed or mirrored
    VertexNotFound: Raised by lookups on absent vertices or edges

Example:
    >>> from adjgraph import UndirectedUnweightedGraph
    >>> graph = UndirectedUnweightedGraph()
    >>> graph.add_vertices(["A", "B", "C"])
    >>> graph.add_edge("A", "B")
    True
    >>> graph.degree("A")
    1
"""

__version__ = "0.1.0"

from adjgraph.core.graph import Graph, VertexNotFound, NOT_FOUND
from adjgraph.core.unweighted import UndirectedUnweightedGraph
from adjgraph.core.weighted import WeightedGraph
from adjgraph.operations.conversion import (
    vertex_index,
    to_adjacency_matrix,
    from_adjacency_matrix,
    degree_sequence,
)

__all__ = [
    'Graph',
    'VertexNotFound',
    'NOT_FOUND',
    'UndirectedUnweightedGraph',
    'WeightedGraph',
    'vertex_index',
    'to_adjacency_matrix',
    'from_adjacency_matrix',
    'degree_sequence',
]
