"""
Operations that build graphs from, or export them to, numpy arrays.
"""

from .conversion import vertex_index, to_adjacency_matrix, from_adjacency_matrix, degree_sequence

__all__ = [
    'vertex_index',
    'to_adjacency_matrix',
    'from_adjacency_matrix',
    'degree_sequence',
]
