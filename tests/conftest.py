"""
Pytest configuration and shared fixtures.

Small hand-built route graphs used across the store, analytics and
driver tests.
"""

from pathlib import Path

import pytest

from src.routegraph.store.route_graph import RouteGraph


def make_graph(labels: list[str], edges: list[tuple[str, str]]) -> RouteGraph:
    """Build a RouteGraph, inserting labels first so enumeration order is fixed."""
    graph = RouteGraph()
    for label in labels:
        graph.add_or_get_node(label)
    for a, b in edges:
        graph.add_edge(graph.add_or_get_node(a), graph.add_or_get_node(b))
    return graph


@pytest.fixture
def diamond_graph() -> RouteGraph:
    """A-B, B-C, C-D, A-C: C has degree 3, D is a leaf."""
    return make_graph(
        ["A", "B", "C", "D"],
        [("A", "B"), ("B", "C"), ("C", "D"), ("A", "C")],
    )


@pytest.fixture
def star_graph() -> RouteGraph:
    """Center C with four leaves."""
    return make_graph(
        ["L1", "L2", "C", "L3", "L4"],
        [("C", "L1"), ("C", "L2"), ("C", "L3"), ("C", "L4")],
    )


@pytest.fixture
def split_graph() -> RouteGraph:
    """Component {A, B} plus isolated C."""
    return make_graph(["A", "B", "C"], [("A", "B")])


@pytest.fixture
def empty_graph() -> RouteGraph:
    return RouteGraph()


@pytest.fixture
def routes_csv(tmp_path: Path) -> Path:
    """A small routes file with a header row and an isolated pair."""
    path = tmp_path / "routes.csv"
    path.write_text(
        "source,destination,airline\n"
        "ATL,JFK,DL\n"
        "ATL,LAX,DL\n"
        "JFK,LAX,AA\n"
        "LAX,SFO,UA\n"
        "HNL,OGG,HA\n",
        encoding="utf-8",
    )
    return path
