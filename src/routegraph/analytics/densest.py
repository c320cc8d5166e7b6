# src/routegraph/analytics/densest.py

"""
Approximate densest subgraph via greedy minimum-degree peeling.

Density of a node set S is |E(S)| / |S|. Starting from the whole graph, the
lowest-degree node is removed one at a time and the density of every
intermediate subgraph is evaluated; the best one seen is returned. This is
Charikar's greedy peeling and is within a factor of 2 of the optimum.

Peeling happens on a private copy; the caller's graph is never modified.

Tie rules:
  - a new best is recorded only on strict improvement, so the earliest
    (largest) subgraph wins ties
  - among nodes of equal minimum degree the first in enumeration order
    is removed first
"""

from __future__ import annotations

from typing import FrozenSet, List, NamedTuple

from ..store.route_graph import RouteGraph


class DensestSubgraph(NamedTuple):
    density: float
    nodes: FrozenSet[int]


def induced_density(graph: RouteGraph) -> float:
    """
    Edges per node of the whole graph.

    The edge count is half the degree sum, each edge being seen from both
    endpoints. An empty graph has density 0.
    """
    n_nodes = graph.node_count()
    if n_nodes == 0:
        return 0.0

    edge_count = sum(graph.neighbor_count(n) for n in graph.nodes()) / 2.0
    return edge_count / n_nodes


def approximate_densest_subgraph(graph: RouteGraph) -> DensestSubgraph:
    """
    Greedy peeling 2-approximation of the densest subgraph.

    Parameters
    ----------
    graph : RouteGraph
        Source graph; left untouched.

    Returns
    -------
    DensestSubgraph
        (density, node indices). When no intermediate subgraph beats
        density 0 the full node set is returned; an empty graph gives
        (0.0, frozenset()).
    """
    working = graph.copy()
    subgraph_nodes: List[int] = working.nodes()

    best_subgraph: FrozenSet[int] = frozenset(subgraph_nodes)
    max_density = 0.0

    while subgraph_nodes:
        degrees = [working.neighbor_count(n) for n in subgraph_nodes]

        edge_count = sum(degrees) / 2.0
        density = edge_count / len(subgraph_nodes)

        if density > max_density:
            max_density = density
            best_subgraph = frozenset(subgraph_nodes)

        # index() returns the first position, i.e. earliest node on ties
        lowest = subgraph_nodes[degrees.index(min(degrees))]
        subgraph_nodes.remove(lowest)
        working.remove_node(lowest)

    return DensestSubgraph(max_density, best_subgraph)


def subgraph_labels(graph: RouteGraph, nodes: FrozenSet[int]) -> List[str]:
    """Labels of the given node set in the graph's enumeration order."""
    return [graph.label(n) for n in graph.nodes() if n in nodes]
