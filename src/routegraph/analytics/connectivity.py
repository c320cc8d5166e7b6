# src/routegraph/analytics/connectivity.py

"""
Connectivity analysis utilities.

This module provides:
  - connected component count
  - giant component size and share of all nodes
  - isolated nodes (airports with no routes)

Purely analytical: no printing, no CLI, no file I/O.
"""

from __future__ import annotations

from typing import Any, Dict

import networkx as nx

from ..store.route_graph import RouteGraph

# Cap on the number of isolate labels returned for display.
ISOLATE_PREVIEW = 50


def connectivity_summary(graph: RouteGraph) -> Dict[str, Any]:
    """
    Compute high-level connectivity statistics for the route graph.

    Parameters
    ----------
    graph : RouteGraph

    Returns
    -------
    Dict[str, Any]
        {
            "n_components"   : int,
            "giant_nodes"    : int,
            "giant_fraction" : float,
            "n_isolates"     : int,
            "isolates"       : List[str],
        }
    """
    if graph.node_count() == 0:
        return {
            "n_components": 0,
            "giant_nodes": 0,
            "giant_fraction": 0.0,
            "n_isolates": 0,
            "isolates": [],
        }

    G = graph.to_networkx()
    comps = list(nx.connected_components(G))
    giant = max(comps, key=len)

    # a node whose only edge is a self-loop is still cut off from the network
    isolates = [n for n in graph.nodes() if all(v == n for v in graph.neighbors(n))]

    return {
        "n_components": len(comps),
        "giant_nodes": len(giant),
        "giant_fraction": len(giant) / graph.node_count(),
        "n_isolates": len(isolates),
        "isolates": [graph.label(n) for n in isolates][:ISOLATE_PREVIEW],
    }
