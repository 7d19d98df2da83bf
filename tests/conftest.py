"""
pytest configuration and shared graph fixtures.
"""

import pytest

from adjgraph import UndirectedUnweightedGraph, WeightedGraph


# ==================== Test markers ====================

def pytest_configure(config):
    """Register custom markers"""
    config.addinivalue_line(
        "markers", "numpy: marks tests that exercise the numpy conversions"
    )


# ==================== Shared fixtures ====================

@pytest.fixture
def path_graph():
    """
    Unweighted path A - B - C.
    """
    graph = UndirectedUnweightedGraph()
    graph.add_vertices(["A", "B", "C"])
    graph.add_edge("A", "B")
    graph.add_edge("B", "C")
    return graph


@pytest.fixture
def directed_graph():
    """
    Weighted directed graph.

        X --5--> Y --2--> Z
        ^                 |
        +--------7--------+
    """
    graph = WeightedGraph(weighted=True)
    graph.add_vertices(["X", "Y", "Z"])
    graph.add_edge("X", "Y", 5)
    graph.add_edge("Y", "Z", 2)
    graph.add_edge("Z", "X", 7)
    return graph


@pytest.fixture
def mirrored_graph():
    """Weighted-capable graph in unweighted mode: P - Q - R."""
    graph = WeightedGraph(weighted=False)
    graph.add_vertices(["P", "Q", "R"])
    graph.add_edge("P", "Q", 9)
    graph.add_edge("Q", "R", 4)
    return graph
