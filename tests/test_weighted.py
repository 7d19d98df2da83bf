"""
Tests for WeightedGraph in both directed (weighted=True) and mirrored
(weighted=False) modes.
"""

import logging

import pytest

from adjgraph import NOT_FOUND, UndirectedUnweightedGraph, VertexNotFound, WeightedGraph


# ==================== Directed ====================

class TestDirected:
    """weighted=True: one-directional edges carrying caller weights"""

    def test_edge_not_mirrored(self):
        graph = WeightedGraph(weighted=True)
        graph.add_vertices(["X", "Y"])

        assert graph.add_edge("X", "Y", 5)
        assert graph.get_weight("X", "Y") == 5
        assert graph.has_edge("X", "Y")
        assert not graph.has_edge("Y", "X")
        assert graph.get_num_edges() == 1
        assert graph.neighbours("Y") == set()

    def test_reverse_edge_counts_separately(self):
        graph = WeightedGraph()
        graph.add_vertices(["X", "Y"])
        graph.add_edge("X", "Y", 5)
        graph.add_edge("Y", "X", 3)

        assert graph.get_num_edges() == 2
        assert graph.get_weight("Y", "X") == 3

    def test_readd_updates_weight(self, directed_graph):
        assert directed_graph.add_edge("X", "Y", 11)
        assert directed_graph.get_weight("X", "Y") == 11
        assert directed_graph.get_num_edges() == 3

    def test_remove_edge_one_direction(self, directed_graph):
        directed_graph.add_edge("Y", "X", 1)

        assert directed_graph.remove_edge("X", "Y")
        assert not directed_graph.has_edge("X", "Y")
        assert directed_graph.has_edge("Y", "X")
        assert directed_graph.get_num_edges() == 3

    def test_remove_reverse_of_directed_edge_fails(self, directed_graph):
        assert not directed_graph.remove_edge("Y", "X")
        assert directed_graph.get_num_edges() == 3

    def test_remove_vertex_clears_incoming_edges(self, directed_graph):
        directed_graph.remove_vertex("X")

        assert not directed_graph.has_vertex("X")
        for vertex in directed_graph:
            assert "X" not in directed_graph.neighbours(vertex)
        assert directed_graph.get_num_edges() == 1
        assert directed_graph.get_graph() == {"Y": {"Z": 2}, "Z": {}}

    def test_neighbours_discard_weights(self, directed_graph):
        assert directed_graph.neighbours("X") == {"Y"}
        assert directed_graph.degree("X") == 1

    def test_edges(self, directed_graph):
        assert sorted(directed_graph.edges()) == [("X", "Y", 5), ("Y", "Z", 2), ("Z", "X", 7)]


# ==================== Mirrored ====================

class TestMirrored:
    """weighted=False: mirrored edges with weight forced to 1"""

    def test_weight_forced_to_one(self):
        graph = WeightedGraph(weighted=False)
        graph.add_vertices(["A", "B"])

        assert graph.add_edge("A", "B", 42)
        assert graph.get_weight("A", "B") == 1
        assert graph.get_weight("B", "A") == 1
        assert graph.get_num_edges() == 1

    def test_has_edge_either_direction(self, mirrored_graph):
        assert mirrored_graph.has_edge("P", "Q")
        assert mirrored_graph.has_edge("Q", "P")
        assert not mirrored_graph.has_edge("P", "R")

    def test_readd_not_counted(self, mirrored_graph):
        assert mirrored_graph.add_edge("Q", "P", 3)
        assert mirrored_graph.get_num_edges() == 2

    def test_remove_edge_clears_both(self, mirrored_graph):
        assert mirrored_graph.remove_edge("Q", "P")
        assert not mirrored_graph.has_edge("P", "Q")
        assert mirrored_graph.degree("P") == 0
        assert mirrored_graph.degree("Q") == 1
        assert mirrored_graph.get_num_edges() == 1

    def test_remove_vertex(self, mirrored_graph):
        mirrored_graph.remove_vertex("Q")
        assert mirrored_graph.get_graph() == {"P": {}, "R": {}}
        assert mirrored_graph.get_num_edges() == 0

    def test_edges_listed_once(self, mirrored_graph):
        assert len(list(mirrored_graph.edges())) == 2

    def test_weighted_flag(self, mirrored_graph, directed_graph):
        assert mirrored_graph.weighted is False
        assert directed_graph.weighted is True


# ==================== Shared contract ====================

class TestContract:
    """Behaviour common to both modes"""

    @pytest.mark.parametrize("weighted", [True, False])
    def test_add_edge_requires_vertices(self, weighted):
        graph = WeightedGraph(weighted)
        graph.add_vertex("A")
        assert not graph.add_edge("A", "B", 2)
        assert not graph.add_edge("B", "A", 2)
        assert graph.get_num_edges() == 0

    @pytest.mark.parametrize("weighted", [True, False])
    def test_self_loop_rejected(self, weighted):
        graph = WeightedGraph(weighted)
        graph.add_vertex("A")
        assert not graph.add_edge("A", "A", 2)
        assert graph.get_num_edges() == 0

    def test_missing_vertex(self, directed_graph):
        with pytest.raises(VertexNotFound):
            directed_graph.neighbours("W")
        assert directed_graph.degree("W") == NOT_FOUND

    def test_get_weight_missing_edge(self, directed_graph):
        with pytest.raises(VertexNotFound) as excinfo:
            directed_graph.get_weight("Y", "X")
        assert excinfo.value.vertex == "Y"
        assert excinfo.value.target == "X"

    def test_get_weight_missing_vertex(self, directed_graph):
        with pytest.raises(VertexNotFound) as excinfo:
            directed_graph.get_weight("W", "X")
        assert excinfo.value.target is None

    def test_from_edges(self):
        graph = WeightedGraph.from_edges(["A", "B", "C"], [("A", "B", 4), ("B", "C")])
        assert graph.get_weight("A", "B") == 4
        assert graph.get_weight("B", "C") == 1
        assert graph.get_num_edges() == 2

    def test_repr(self, mirrored_graph):
        assert repr(mirrored_graph) == "WeightedGraph(weighted=False, vertices=3, edges=2)"

    def test_subclass_repr(self):
        class RoadNetwork(WeightedGraph):
            pass

        graph = RoadNetwork(weighted=True)
        graph.add_vertex("A")
        assert repr(graph) == "RoadNetwork(weighted=True, vertices=1, edges=0)"


# ==================== Equality ====================

class TestEquality:
    """Structural equality including weights"""

    def test_same_edges_any_order(self, directed_graph):
        other = WeightedGraph()
        other.add_vertices(["Z", "Y", "X"])
        other.add_edge("Z", "X", 7)
        other.add_edge("Y", "Z", 2)
        other.add_edge("X", "Y", 5)
        assert other == directed_graph

    def test_weight_difference(self, directed_graph):
        other = directed_graph.copy()
        other.add_edge("X", "Y", 6)
        assert other != directed_graph
        assert not other.structure_matches(directed_graph)

    def test_extra_vertex_one_sided(self, directed_graph):
        bigger = directed_graph.copy()
        bigger.add_vertex("W")
        assert directed_graph.structure_matches(bigger)
        assert not bigger.structure_matches(directed_graph)
        assert bigger != directed_graph

    def test_variants_never_equal(self):
        unweighted = UndirectedUnweightedGraph()
        weighted = WeightedGraph()
        assert unweighted != weighted
        assert weighted != unweighted


# ==================== Logging ====================

class TestLogging:
    """Debug records for mutations and rejected operations"""

    def test_mutations_logged(self, caplog):
        caplog.set_level(logging.DEBUG, logger="adjgraph.core.weighted")
        graph = WeightedGraph(weighted=True)
        graph.add_vertices(["X", "Y"])
        graph.add_edge("X", "Y", 5)
        graph.remove_edge("X", "Y")
        graph.remove_edge("X", "Y")

        messages = [record.getMessage() for record in caplog.records]
        assert "Added vertex 'X'" in messages
        assert "Stored edge 'X' -> 'Y' (weight 5)" in messages
        assert "Removed edge 'X' -> 'Y'" in messages
        assert "No edge to remove from 'X' to 'Y'" in messages
