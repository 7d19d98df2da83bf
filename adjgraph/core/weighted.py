"""
Weighted, directed-capable graph.

Each vertex maps to a dictionary of neighbour -> integer weight. The weighted
flag chosen at construction decides how edges are stored:

- weighted=True: edges are directed; only the source record is written and the
  caller's weight is kept.
- weighted=False: edges are mirrored into both records with weight 1, whatever
  weight the caller passes.
"""

import logging
from typing import Dict, Iterable, Iterator, Optional, Set, Tuple

from .graph import E, Graph, VertexNotFound

logger = logging.getLogger(__name__)


class WeightedGraph(Graph[E]):
    """
    Graph with weight-keyed adjacency records.

    The edge counter holds one entry per logical edge: an ordered pair when
    directed, a mirrored pair when undirected.
    """

    def __init__(self, weighted: bool = True):
        """
        Initialize an empty graph.

        Args:
            weighted: True for directed edges carrying caller weights, False for
                mirrored edges of weight 1. Fixed for the graph's lifetime.
        """
        super().__init__()
        self._graph: Dict[E, Dict[E, int]] = {}
        self._weighted = bool(weighted)

    @property
    def weighted(self) -> bool:
        return self._weighted

    @classmethod
    def from_edges(cls, vertices: Iterable[E],
                   edges: Optional[Iterable[Tuple]] = None,
                   weighted: bool = True) -> 'WeightedGraph[E]':
        """
        Build a graph from a vertex collection and edge tuples.

        Args:
            vertices: Vertices to add, in order
            edges: (source, target) or (source, target, weight) tuples
            weighted: Passed to the constructor

        Returns:
            New WeightedGraph
        """
        graph = cls(weighted)
        graph.add_vertices(vertices)
        for edge in edges or ():
            graph.add_edge(*edge)
        logger.debug(f"Built {'weighted' if weighted else 'unweighted'} graph with "
                     f"{graph.get_num_vertices()} vertices and {graph.get_num_edges()} edges")
        return graph

    def add_vertex(self, vertex: E) -> None:
        if vertex not in self._graph:
            self._graph[vertex] = {}
            logger.debug(f"Added vertex {vertex!r}")

    def remove_vertex(self, vertex: E) -> None:
        """
        Remove a vertex and every edge into or out of it.

        Args:
            vertex: Vertex to remove; nothing happens if it is absent
        """
        if vertex not in self._graph:
            return
        for other in list(self._graph):
            if other == vertex:
                continue
            if self.has_edge(vertex, other):
                self.remove_edge(vertex, other)
            if self.has_edge(other, vertex):
                self.remove_edge(other, vertex)
        del self._graph[vertex]
        logger.debug(f"Removed vertex {vertex!r}")

    def add_edge(self, source: E, target: E, weight: int = 1) -> bool:
        """
        Add or update an edge between two existing vertices.

        Args:
            source: Vertex the edge starts from
            target: Vertex the edge points to
            weight: Edge weight; ignored (stored as 1) when the graph is unweighted

        Returns:
            True if the edge is stored, False if an endpoint is missing or the
            endpoints are the same vertex
        """
        if source not in self._graph or target not in self._graph:
            logger.debug(f"Cannot add edge {source!r} -> {target!r}: missing vertex")
            return False
        if source == target:
            logger.debug(f"Rejected self-loop on {source!r}")
            return False

        is_new = not self.has_edge(source, target)
        if self._weighted:
            self._graph[source][target] = weight
        else:
            self._graph[source][target] = 1
            self._graph[target][source] = 1
        if is_new:
            self._num_edges += 1
        logger.debug(f"Stored edge {source!r} -> {target!r} (weight {self._graph[source][target]})")
        return True

    def remove_edge(self, source: E, target: E) -> bool:
        """
        Remove the edge from source to target.

        The reverse entry is also cleared when the graph is unweighted.

        Returns:
            True if an edge was removed
        """
        if not self.has_edge(source, target):
            logger.debug(f"No edge to remove from {source!r} to {target!r}")
            return False
        self._graph[source].pop(target, None)
        if not self._weighted:
            self._graph[target].pop(source, None)
        self._num_edges -= 1
        logger.debug(f"Removed edge {source!r} -> {target!r}")
        return True

    def has_edge(self, source: E, target: E) -> bool:
        """
        Check for an edge.

        Directed graphs look only at source -> target; unweighted graphs accept
        either direction.
        """
        if source not in self._graph or target not in self._graph:
            return False
        if self._weighted:
            return target in self._graph[source]
        return target in self._graph[source] or source in self._graph[target]

    def get_weight(self, source: E, target: E) -> int:
        """
        Get the stored weight of source -> target.

        Raises:
            VertexNotFound: If source is absent or has no entry for target
        """
        record = self._graph.get(source)
        if record is None:
            raise VertexNotFound(source)
        if target not in record:
            raise VertexNotFound(source, target)
        return record[target]

    def neighbours(self, vertex: E) -> Set[E]:
        """
        Get the vertices recorded in a vertex's weight mapping, without weights.

        Raises:
            VertexNotFound: If the vertex is not in the graph
        """
        if vertex not in self._graph:
            raise VertexNotFound(vertex)
        return set(self._graph[vertex])

    def edges(self) -> Iterator[Tuple[E, E, int]]:
        """Yield (source, target, weight) for each logical edge."""
        seen: Set[E] = set()
        for source, record in self._graph.items():
            for target, weight in record.items():
                if self._weighted or target not in seen:
                    yield source, target, weight
            seen.add(source)

    def get_graph(self) -> Dict[E, Dict[E, int]]:
        return {vertex: dict(record) for vertex, record in self._graph.items()}

    def copy(self) -> 'WeightedGraph[E]':
        clone = type(self)(self._weighted)
        clone._graph = self.get_graph()
        clone._num_edges = self._num_edges
        return clone

    def __repr__(self) -> str:
        return (f"{type(self).__name__}(weighted={self._weighted}, vertices={len(self._graph)}, "
                f"edges={self._num_edges})")
