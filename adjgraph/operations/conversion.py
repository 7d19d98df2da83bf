"""
Conversions between graphs and numpy arrays.

This module assigns 0-based ids to vertices in insertion order and builds
dense adjacency matrices and degree arrays from any graph variant, plus the
reverse construction from a square matrix.
"""

import logging
from typing import Dict, Hashable, List, Optional, Sequence, Union

import numpy as np

from ..core.graph import Graph
from ..core.unweighted import UndirectedUnweightedGraph
from ..core.weighted import WeightedGraph

logger = logging.getLogger(__name__)


def vertex_index(graph: Graph, order: Optional[Sequence[Hashable]] = None) -> Dict[Hashable, int]:
    """
    Map each vertex to a 0-based id.

    Args:
        graph: Graph whose vertices are indexed
        order: Optional explicit vertex order; must name exactly the graph's vertices

    Returns:
        Dictionary mapping vertex -> id

    Raises:
        ValueError: If order does not match the graph's vertex set
    """
    if order is None:
        return {vertex: i for i, vertex in enumerate(graph.vertices())}

    index: Dict[Hashable, int] = {}
    for vertex in order:
        if vertex in index:
            raise ValueError(f"Duplicate vertex in order: {vertex!r}")
        if not graph.has_vertex(vertex):
            raise ValueError(f"Vertex {vertex!r} is not in the graph")
        index[vertex] = len(index)
    if len(index) != graph.get_num_vertices():
        raise ValueError(f"Order names {len(index)} vertices, graph has {graph.get_num_vertices()}")
    return index


def to_adjacency_matrix(graph: Graph, order: Optional[Sequence[Hashable]] = None,
                        dtype=int) -> np.ndarray:
    """
    Build a dense adjacency matrix.

    Entry [i, j] holds the stored weight of i -> j for a WeightedGraph, 1 for
    an edge of an UndirectedUnweightedGraph, and 0 where no edge is recorded.
    An edge stored with weight 0 is therefore indistinguishable from no edge
    and does not survive from_adjacency_matrix().

    Args:
        graph: Graph to convert
        order: Optional vertex order for rows and columns
        dtype: numpy dtype of the result

    Returns:
        Array of shape (n, n)
    """
    index = vertex_index(graph, order)
    n = len(index)
    matrix = np.zeros((n, n), dtype=dtype)

    for vertex, record in graph.get_graph().items():
        i = index[vertex]
        if isinstance(record, dict):
            for neighbour, weight in record.items():
                matrix[i, index[neighbour]] = weight
        else:
            for neighbour in record:
                matrix[i, index[neighbour]] = 1

    logger.debug(f"Built {n}x{n} adjacency matrix")
    return matrix


def degree_sequence(graph: Graph, order: Optional[Sequence[Hashable]] = None) -> np.ndarray:
    """Get vertex degrees as an integer array, in vertex id order."""
    index = vertex_index(graph, order)
    degrees = np.zeros(len(index), dtype=int)
    for vertex, i in index.items():
        degrees[i] = graph.degree(vertex)
    return degrees


def from_adjacency_matrix(matrix, vertices: Sequence[Hashable],
                          weighted: Optional[bool] = None) -> Union[UndirectedUnweightedGraph, WeightedGraph]:
    """
    Build a graph from a square adjacency matrix.

    Args:
        matrix: Array-like of shape (n, n) with integral entries; nonzero
            entries are edges, so a zero weight cannot be expressed
        vertices: Vertex for each row/column, in order
        weighted: None for an UndirectedUnweightedGraph (matrix must be
            symmetric); True or False for a WeightedGraph with that flag

    Returns:
        New graph holding the matrix's edges

    Raises:
        ValueError: If the matrix is not square, does not match vertices, has
            nonzero diagonal entries, holds non-integral values, or is
            asymmetric where symmetry is required
    """
    array = np.asarray(matrix)
    vertex_list: List[Hashable] = list(vertices)
    n = len(vertex_list)

    if array.ndim != 2 or array.shape[0] != array.shape[1]:
        raise ValueError(f"Adjacency matrix must be square, got shape {array.shape}")
    if array.shape[0] != n:
        raise ValueError(f"Matrix has {array.shape[0]} rows but {n} vertices were given")
    if len(set(vertex_list)) != n:
        raise ValueError("Vertices must be distinct")
    if array.dtype.kind not in "biu":
        if array.dtype.kind != "f" or not np.all(np.isfinite(array) & (array == np.round(array))):
            raise ValueError("Adjacency matrix entries must be integral")
    if np.any(np.diagonal(array) != 0):
        raise ValueError("Self-loops are not supported")

    rows, cols = np.nonzero(array)

    if weighted is None:
        if not np.array_equal(array != 0, (array != 0).T):
            raise ValueError("Undirected adjacency matrix must be symmetric")
        graph = UndirectedUnweightedGraph()
        graph.add_vertices(vertex_list)
        for i, j in zip(rows, cols):
            if i < j:
                graph.add_edge(vertex_list[i], vertex_list[j])
    else:
        graph = WeightedGraph(weighted)
        graph.add_vertices(vertex_list)
        for i, j in zip(rows, cols):
            graph.add_edge(vertex_list[i], vertex_list[j], int(array[i, j]))

    logger.debug(f"Built {graph!r} from {n}x{n} matrix")
    return graph
