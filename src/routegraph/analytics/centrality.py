# src/routegraph/analytics/centrality.py

"""
Closeness centrality for the route graph.

For every source node an unweighted BFS collects the hop distance to each
reachable node (the source itself included at distance 0). The score is

    reachable / sum_dist          (0 when sum_dist == 0)

i.e. closeness restricted to the source's own component, left unnormalized
by total graph size. Isolated nodes therefore score 0 rather than raising.

Results are returned in node insertion order; ranking by score is left to
the reporting layer.
"""

from __future__ import annotations

from typing import List, NamedTuple, Optional

import networkx as nx

from ..store.route_graph import RouteGraph

# Number of nodes shown by the cheap console preview.
PREVIEW_SIZE = 5


class ClosenessScore(NamedTuple):
    label: str
    score: float


def closeness(graph: RouteGraph, index: int) -> float:
    """
    Closeness score of a single node.

    Parameters
    ----------
    graph : RouteGraph
        Populated route graph (not modified).
    index : int
        Source node index.

    Returns
    -------
    float
        reachable / sum_dist, or 0.0 for a node with no reachable neighbors.
    """
    lengths = nx.single_source_shortest_path_length(graph.to_networkx(), index)
    reachable = float(len(lengths))
    sum_dist = float(sum(lengths.values()))

    if sum_dist > 0:
        return reachable / sum_dist
    return 0.0


def compute_centrality(
    graph: RouteGraph,
    limit: Optional[int] = None,
) -> List[ClosenessScore]:
    """
    Compute closeness for every node, or the first `limit` nodes.

    Parameters
    ----------
    graph : RouteGraph
    limit : int, optional
        If given, only the first `limit` nodes in enumeration order are scored.

    Returns
    -------
    List[ClosenessScore]
        One (label, score) entry per node, in insertion order.
    """
    nodes = graph.nodes()
    if limit is not None:
        nodes = nodes[: max(0, limit)]

    return [ClosenessScore(graph.label(n), closeness(graph, n)) for n in nodes]


def preview_centrality(graph: RouteGraph) -> List[ClosenessScore]:
    """Closeness for the first PREVIEW_SIZE nodes only."""
    return compute_centrality(graph, limit=PREVIEW_SIZE)


def rank_by_closeness(
    scores: List[ClosenessScore],
    top_k: Optional[int] = None,
) -> List[ClosenessScore]:
    """Sort scores descending (stable on ties) and optionally truncate."""
    ranked = sorted(scores, key=lambda s: s.score, reverse=True)
    if top_k is not None:
        ranked = ranked[: max(0, top_k)]
    return ranked
