"""
Unit tests for the RouteGraph store.
"""

import pytest

from conftest import make_graph
from src.routegraph.store.route_graph import RouteGraph


class TestConstruction:
    """Node deduplication and edge insertion."""

    def test_duplicate_label_returns_existing_index(self):
        """Adding a known label should not create a new node."""
        graph = RouteGraph()
        first = graph.add_or_get_node("ATL")
        second = graph.add_or_get_node("ATL")
        assert first == second
        assert graph.node_count() == 1

    def test_node_count_matches_distinct_labels(self):
        """node_count equals the number of distinct labels seen."""
        graph = RouteGraph()
        for label in ["A", "B", "A", "C", "B", "D"]:
            graph.add_or_get_node(label)
        assert graph.node_count() == 4

    def test_indices_follow_insertion_order(self):
        """Enumeration order is insertion order."""
        graph = make_graph(["X", "Y", "Z"], [])
        assert [graph.label(n) for n in graph.nodes()] == ["X", "Y", "Z"]

    def test_parallel_edges_are_kept(self):
        """Repeated routes count once per record."""
        graph = make_graph(["A", "B"], [("A", "B"), ("A", "B"), ("B", "A")])
        assert graph.edge_count() == 3
        assert graph.neighbor_count(graph.index_of("A")) == 3

    def test_neighbors_ignore_edge_direction(self):
        """Neighbors are listed once per adjacent node, whichever way the route was added."""
        graph = make_graph(["A", "B", "C"], [("A", "B"), ("C", "A"), ("A", "B")])
        labels = sorted(graph.label(n) for n in graph.neighbors(graph.index_of("A")))
        assert labels == ["B", "C"]

    def test_self_loop_counts_once(self):
        """A self-loop is a single incident edge."""
        graph = make_graph(["A"], [("A", "A")])
        assert graph.neighbor_count(graph.index_of("A")) == 1


class TestIsConnected:
    """Reachability queries by label."""

    def test_direct_route(self, diamond_graph):
        assert diamond_graph.is_connected("A", "D") is True

    def test_unknown_label_is_false(self, diamond_graph):
        """Missing labels are not an error."""
        assert diamond_graph.is_connected("A", "ZZZ") is False
        assert diamond_graph.is_connected("ZZZ", "A") is False

    def test_reflexive(self, split_graph):
        """Every present label reaches itself, isolated or not."""
        for label in ["A", "B", "C"]:
            assert split_graph.is_connected(label, label) is True

    def test_symmetric(self, split_graph):
        labels = ["A", "B", "C", "Q"]
        for a in labels:
            for b in labels:
                assert split_graph.is_connected(a, b) == split_graph.is_connected(b, a)

    def test_separate_components(self, split_graph):
        assert split_graph.is_connected("A", "C") is False

    def test_edge_direction_is_ignored(self):
        """Edges inserted one way are traversable both ways."""
        graph = make_graph(["A", "B", "C"], [("A", "B"), ("C", "B")])
        assert graph.is_connected("A", "C") is True


class TestRanking:
    """top_connected and most_connected."""

    def test_most_connected_diamond(self, diamond_graph):
        assert diamond_graph.most_connected() == "C"

    def test_most_connected_star(self, star_graph):
        assert star_graph.most_connected() == "C"

    def test_most_connected_tie_first_wins(self):
        """On ties the earliest node keeps the title."""
        graph = make_graph(["A", "B", "C", "D"], [("A", "B"), ("C", "D")])
        assert graph.most_connected() == "A"

    def test_most_connected_empty(self, empty_graph):
        assert empty_graph.most_connected() is None

    def test_most_connected_edgeless(self):
        """No node beats zero connections."""
        graph = make_graph(["A", "B"], [])
        assert graph.most_connected() is None

    def test_top_connected_tie_order(self, diamond_graph):
        """C first, then A before B (both degree 2, insertion order)."""
        assert diamond_graph.top_connected(2) == [("C", 3), ("A", 2)]

    def test_top_connected_full_ranking(self, diamond_graph):
        assert diamond_graph.top_connected(10) == [("C", 3), ("A", 2), ("B", 2), ("D", 1)]

    def test_top_connected_zero(self, diamond_graph):
        assert diamond_graph.top_connected(0) == []


class TestWorkingCopy:
    """copy() and remove_node() isolation."""

    def test_copy_is_independent(self, diamond_graph):
        clone = diamond_graph.copy()
        clone.remove_node(clone.index_of("C"))

        assert clone.node_count() == 3
        assert "C" not in clone
        assert diamond_graph.node_count() == 4
        assert diamond_graph.edge_count() == 4
        assert "C" in diamond_graph

    def test_remove_node_drops_incident_edges(self, diamond_graph):
        clone = diamond_graph.copy()
        clone.remove_node(clone.index_of("C"))
        assert clone.edge_count() == 1
        assert clone.neighbor_count(clone.index_of("A")) == 1

    def test_copy_keeps_indices(self, diamond_graph):
        clone = diamond_graph.copy()
        for label in ["A", "B", "C", "D"]:
            assert clone.index_of(label) == diamond_graph.index_of(label)

    def test_new_nodes_after_removal_get_fresh_index(self):
        graph = make_graph(["A", "B"], [])
        clone = graph.copy()
        clone.remove_node(clone.index_of("B"))
        assert clone.add_or_get_node("B") == 2

    @pytest.mark.parametrize("label", ["A", "D"])
    def test_index_of_roundtrip(self, diamond_graph, label):
        assert diamond_graph.label(diamond_graph.index_of(label)) == label
