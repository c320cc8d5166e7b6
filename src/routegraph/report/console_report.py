# src/routegraph/report/console_report.py

"""
Console report rendering for the route analysis.

Each function turns one analysis result into a printable text block:
  - Top connected airports
  - Hub airport
  - Connectivity checks between airport pairs
  - Connectivity summary (components, isolates)
  - Closeness centrality (preview or ranked)
  - Densest subgraph approximation

Rendering only: nothing here computes or prints.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple

from ..analytics.centrality import ClosenessScore
from ..analytics.densest import DensestSubgraph


def render_top_connected(rows: List[Tuple[str, int]], top_n: int) -> str:
    txt = f"\nTop {top_n} Connected Airports:\n"
    for airport, connections in rows:
        txt += f"{airport} with {connections} connections\n"
    return txt


def render_hub(hub: Optional[str]) -> str:
    if hub is None:
        return "No hub: the graph has no routes.\n"
    return f"Hub with most connections: {hub}\n"


def render_connectivity_checks(results: List[Tuple[str, str, bool]]) -> str:
    txt = ""
    for src, dst, connected in results:
        txt += f"Checking if {src} is connected to {dst}...\n"
        txt += f"  Connected? {str(connected).lower()}\n"
    return txt


def render_connectivity_summary(conn: Dict[str, Any]) -> str:
    txt = "\nConnectivity:\n"
    txt += (
        f"  Components: {conn['n_components']} | "
        f"Giant: {conn['giant_nodes']} ({conn['giant_fraction']:.2%}) | "
        f"Isolates: {conn['n_isolates']}\n"
    )
    if conn["isolates"]:
        txt += f"  Examples: {', '.join(conn['isolates'][:10])}\n"
    return txt


def render_centrality(
    scores: List[ClosenessScore],
    title: str = "Centrality (Closeness)",
    numbered: bool = False,
) -> str:
    """
    Render closeness scores in the order given.

    Callers rank beforehand (rank_by_closeness) when a sorted table is wanted.
    """
    txt = f"\n{title}:\n"
    for i, (label, score) in enumerate(scores, start=1):
        prefix = f"{i:>3}. " if numbered else ""
        txt += f"{prefix}{label} → closeness: {score:.4f}\n"
    return txt


def render_densest(
    result: DensestSubgraph,
    member_labels: List[str],
    max_members: int = 10,
) -> str:
    txt = "\nDensest Subgraph Approximation:\n"
    txt += f"Max density ≈ {result.density:.2f} with {len(result.nodes)} nodes\n"

    if max_members > 0 and member_labels:
        preview = ", ".join(member_labels[:max_members])
        more = len(member_labels) - max_members
        if more > 0:
            preview += f", … (+{more} more)"
        txt += f"  Members: {preview}\n"
    return txt
