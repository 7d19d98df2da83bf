"""
Core graph contract shared by every graph variant.

This module provides the abstract graph structure without storage decisions.
Concrete variants decide how adjacency records are shaped and how edges are
mirrored; everything that only depends on the top-level vertex mapping lives here.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Generic, Hashable, Iterable, Iterator, List, Set, TypeVar

logger = logging.getLogger(__name__)

E = TypeVar('E', bound=Hashable)

# Returned by degree() when the vertex is not in the graph
NOT_FOUND = -1


class VertexNotFound(LookupError):
    """
    Raised when a lookup references a vertex or edge entry that is not stored.

    Attributes:
        vertex: The vertex whose record was queried
        target: For edge lookups, the neighbour that was expected in the record
    """

    def __init__(self, vertex: Any, target: Any = None):
        self.vertex = vertex
        self.target = target
        if target is None:
            message = f"Vertex not found: {vertex!r}"
        else:
            message = f"No edge from {vertex!r} to {target!r}"
        super().__init__(message)


class Graph(ABC, Generic[E]):
    """
    Abstract in-memory graph keyed by vertex identity.

    Subclasses store a mapping from each vertex to its adjacency record and
    maintain a running edge counter. This class provides:
    - Vertex presence queries and counting
    - Batch vertex insertion
    - Degree lookup with a -1 sentinel for missing vertices
    - Structural equality built on structure_matches()
    """

    def __init__(self):
        self._graph: Dict[E, Any] = {}
        self._num_edges = 0

    # ========================================================================
    # VERTEX OPERATIONS
    # ========================================================================

    @abstractmethod
    def add_vertex(self, vertex: E) -> None:
        """Add a vertex; no-op if it is already present."""

    def add_vertices(self, vertices: Iterable[E]) -> None:
        """
        Add every vertex of a collection, in the order given.

        Args:
            vertices: Vertices to add; already present ones are skipped
        """
        for vertex in vertices:
            self.add_vertex(vertex)

    @abstractmethod
    def remove_vertex(self, vertex: E) -> None:
        """Remove a vertex and every edge touching it; no-op if absent."""

    def has_vertex(self, vertex: E) -> bool:
        return vertex in self._graph

    def get_num_vertices(self) -> int:
        return len(self._graph)

    def vertices(self) -> List[E]:
        """Get the stored vertices in insertion order."""
        return list(self._graph)

    # ========================================================================
    # EDGE OPERATIONS
    # ========================================================================

    @abstractmethod
    def add_edge(self, v1: E, v2: E) -> bool:
        """Add an edge between two existing vertices."""

    @abstractmethod
    def remove_edge(self, v1: E, v2: E) -> bool:
        """Remove the edge between two vertices if it exists."""

    @abstractmethod
    def has_edge(self, v1: E, v2: E) -> bool:
        """Check whether an edge between two vertices is stored."""

    def get_num_edges(self) -> int:
        """
        Get the number of logical edges currently stored.

        A mirrored undirected edge counts once; a directed edge counts once
        per ordered pair.
        """
        return self._num_edges

    # ========================================================================
    # ADJACENCY QUERIES
    # ========================================================================

    @abstractmethod
    def neighbours(self, vertex: E) -> Set[E]:
        """
        Get the vertices adjacent to a vertex.

        Raises:
            VertexNotFound: If the vertex is not in the graph
        """

    def degree(self, vertex: E) -> int:
        """
        Get the number of neighbours of a vertex.

        Args:
            vertex: Vertex to inspect

        Returns:
            Size of the neighbour set, or NOT_FOUND (-1) if the vertex is absent
        """
        try:
            return len(self.neighbours(vertex))
        except VertexNotFound:
            logger.debug(f"Degree requested for missing vertex {vertex!r}")
            return NOT_FOUND

    @abstractmethod
    def get_graph(self) -> Dict[E, Any]:
        """Get a copy of the vertex -> adjacency record mapping."""

    # ========================================================================
    # STRUCTURAL COMPARISON
    # ========================================================================

    def structure_matches(self, other: 'Graph[E]') -> bool:
        """
        Check that every vertex of this graph is stored in other with an identical
        adjacency record.

        This is a one-sided check: vertices present only in other are not
        inspected, so a.structure_matches(b) does not imply b.structure_matches(a).

        Args:
            other: Graph to compare against

        Returns:
            True if all of this graph's adjacency records appear unchanged in other
        """
        if other is self:
            return True
        for vertex, record in self._graph.items():
            other_record = other._graph.get(vertex)
            if other_record is None or len(other_record) != len(record):
                return False
            if other_record != record:
                return False
        return True

    def __eq__(self, other: object) -> bool:
        if other is self:
            return True
        if type(other) is not type(self):
            return NotImplemented
        return self.structure_matches(other) and other.structure_matches(self)

    # Mutable container
    __hash__ = None

    def __len__(self) -> int:
        return len(self._graph)

    def __contains__(self, vertex: object) -> bool:
        return vertex in self._graph

    def __iter__(self) -> Iterator[E]:
        return iter(list(self._graph))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(vertices={len(self._graph)}, edges={self._num_edges})"
