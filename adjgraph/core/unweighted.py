"""
Undirected unweighted graph.

Each vertex maps to the set of its neighbours. Every edge is stored as two
mirrored set entries and counted once.
"""

import logging
from typing import Dict, Iterable, Iterator, Optional, Set, Tuple

from .graph import E, Graph, VertexNotFound

logger = logging.getLogger(__name__)


class UndirectedUnweightedGraph(Graph[E]):
    """
    Undirected graph with set-based adjacency records.

    Invariants maintained by the public API:
    - If b is in a's set then a is in b's set
    - No vertex appears in its own set
    - The edge counter equals the number of mirrored pairs
    """

    def __init__(self):
        super().__init__()
        self._graph: Dict[E, Set[E]] = {}

    @classmethod
    def from_edges(cls, vertices: Iterable[E],
                   edges: Optional[Iterable[Tuple[E, E]]] = None) -> 'UndirectedUnweightedGraph[E]':
        """
        Build a graph from a vertex collection and (v1, v2) pairs.

        Args:
            vertices: Vertices to add, in order
            edges: Optional pairs; pairs naming unknown vertices are skipped

        Returns:
            New UndirectedUnweightedGraph
        """
        graph = cls()
        graph.add_vertices(vertices)
        for v1, v2 in edges or ():
            graph.add_edge(v1, v2)
        logger.debug(f"Built graph with {graph.get_num_vertices()} vertices and {graph.get_num_edges()} edges")
        return graph

    def add_vertex(self, vertex: E) -> None:
        if vertex not in self._graph:
            self._graph[vertex] = set()
            logger.debug(f"Added vertex {vertex!r}")

    def remove_vertex(self, vertex: E) -> None:
        """
        Remove a vertex and every edge incident to it.

        Args:
            vertex: Vertex to remove; nothing happens if it is absent
        """
        if vertex not in self._graph:
            return
        for neighbour in list(self._graph[vertex]):
            self.remove_edge(vertex, neighbour)
        # Entries left by a partially mirrored state
        for record in self._graph.values():
            record.discard(vertex)
        del self._graph[vertex]
        logger.debug(f"Removed vertex {vertex!r}")

    def add_edge(self, v1: E, v2: E) -> bool:
        """
        Add an undirected edge between two existing vertices.

        Args:
            v1: First endpoint
            v2: Second endpoint

        Returns:
            True if a new edge was stored, False if an endpoint is missing, the
            endpoints are the same vertex, or the edge already exists
        """
        if v1 not in self._graph or v2 not in self._graph:
            logger.debug(f"Cannot add edge {v1!r} - {v2!r}: missing vertex")
            return False
        if v1 == v2:
            logger.debug(f"Rejected self-loop on {v1!r}")
            return False
        if self.has_edge(v1, v2):
            logger.debug(f"Edge {v1!r} - {v2!r} already stored")
            return False
        self._graph[v1].add(v2)
        self._graph[v2].add(v1)
        self._num_edges += 1
        logger.debug(f"Added edge {v1!r} - {v2!r}")
        return True

    def remove_edge(self, v1: E, v2: E) -> bool:
        """
        Remove the undirected edge between two vertices.

        Returns:
            True if the edge existed and both mirrored entries were cleared
        """
        if not self.has_edge(v1, v2):
            logger.debug(f"No edge to remove between {v1!r} and {v2!r}")
            return False
        self._graph[v1].discard(v2)
        self._graph[v2].discard(v1)
        self._num_edges -= 1
        logger.debug(f"Removed edge {v1!r} - {v2!r}")
        return True

    def has_edge(self, v1: E, v2: E) -> bool:
        """True if either endpoint's set records the other."""
        return (v1 in self._graph and v2 in self._graph
                and (v2 in self._graph[v1] or v1 in self._graph[v2]))

    def neighbours(self, vertex: E) -> Set[E]:
        """
        Get a snapshot of the vertices adjacent to a vertex.

        Raises:
            VertexNotFound: If the vertex is not in the graph
        """
        if vertex not in self._graph:
            raise VertexNotFound(vertex)
        return set(self._graph[vertex])

    def edges(self) -> Iterator[Tuple[E, E]]:
        """Yield each undirected edge once, as (v1, v2) in vertex insertion order."""
        seen: Set[E] = set()
        for vertex, record in self._graph.items():
            for neighbour in record:
                if neighbour not in seen:
                    yield vertex, neighbour
            seen.add(vertex)

    def get_graph(self) -> Dict[E, Set[E]]:
        return {vertex: set(record) for vertex, record in self._graph.items()}

    def copy(self) -> 'UndirectedUnweightedGraph[E]':
        clone = type(self)()
        clone._graph = self.get_graph()
        clone._num_edges = self._num_edges
        return clone
