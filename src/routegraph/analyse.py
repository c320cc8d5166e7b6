#!/usr/bin/env python3
"""
Route Graph Analysis
-------------------------------------------------------
Loads an airport routes CSV into an undirected graph and reports the best
connected airports, the hub, reachability between airport pairs, component
structure, closeness centrality, and an approximate densest subgraph.
Configurable via an optional INI file and CLI flags (input path, top-n,
connectivity checks, full centrality, memory monitor).
"""

from __future__ import annotations

import argparse
import gc
import time
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

import psutil

from .loader.routes_loader import RouteLoadError, load_routes
from .analytics.centrality import compute_centrality, preview_centrality, rank_by_closeness
from .analytics.connectivity import connectivity_summary
from .analytics.densest import approximate_densest_subgraph, subgraph_labels
from .report.console_report import (
    render_centrality,
    render_connectivity_checks,
    render_connectivity_summary,
    render_densest,
    render_hub,
    render_top_connected,
)
from .utils.config_loader import AnalysisConfig, ConfigError, load_config
from .utils.log import log
from .utils.paths import resolve_input_path


# ──────────────────────────────────────────────────────────────────────────────
# CLI
# ──────────────────────────────────────────────────────────────────────────────


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Analyse an airport route graph.")
    p.add_argument(
        "--input",
        help="Routes CSV file OR a directory of routes CSV files. Defaults to the configured input (data/routes.csv).",
    )
    p.add_argument(
        "--data-location",
        help="Data directory containing routes.csv (used when --input is not given).",
    )
    p.add_argument(
        "--config",
        help="Optional INI file with [analysis] and [connectivity] sections.",
    )
    p.add_argument(
        "--top",
        type=int,
        help="Number of top connected airports (and top central airports) to list",
    )
    p.add_argument(
        "--check",
        nargs=2,
        action="append",
        metavar=("SRC", "DST"),
        help="Check whether SRC and DST are connected (repeatable; replaces configured checks)",
    )
    p.add_argument(
        "--full-centrality",
        action="store_true",
        help="Score every airport and list the top ones instead of the 5-airport preview",
    )
    p.add_argument(
        "--densest-members",
        type=int,
        help="How many densest-subgraph members to list (0 = none)",
    )
    p.add_argument(
        "--max-records",
        type=int,
        default=0,
        help="Limit loading to the first N routes (0 = no limit)",
    )
    p.add_argument(
        "--memory-monitor",
        action="store_true",
        help="Enable memory usage monitoring and GC logging",
    )
    return p.parse_args(argv)


def build_config(args: argparse.Namespace) -> AnalysisConfig:
    """Defaults, then the INI file, then explicit CLI flags."""
    cfg = load_config(Path(args.config) if args.config else None)

    if args.top is not None:
        cfg.top = args.top
    if args.check:
        cfg.checks = [(src, dst) for src, dst in args.check]
    if args.full_centrality:
        cfg.full_centrality = True
    if args.densest_members is not None:
        cfg.densest_members = args.densest_members

    return cfg


# ──────────────────────────────────────────────────────────────────────────────
# Memory utilities
# ──────────────────────────────────────────────────────────────────────────────


def optimize_memory() -> None:
    """Force garbage collection and log process memory usage."""
    gc.collect()
    mem_mb = psutil.Process().memory_info().rss / 1024 / 1024
    print(f"[MEMORY] After GC: {mem_mb:.1f} MB")


# ──────────────────────────────────────────────────────────────────────────────
# Main orchestration
# ──────────────────────────────────────────────────────────────────────────────


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = parse_args(argv)

    try:
        cfg = build_config(args)
    except ConfigError as e:
        raise SystemExit(f"❌ Invalid configuration: {e}")

    input_path = resolve_input_path(args.input, args.data_location, cfg.input)

    start_time = time.time()
    print("✈️  Starting Flight Graph Analysis...")

    log(f"Loading routes from {input_path}")
    try:
        graph, stats = load_routes(str(input_path), max_records=args.max_records)
    except RouteLoadError as e:
        raise SystemExit(f"❌ Failed to load graph: {e}")

    print(f"✅ Loaded {graph.node_count()} airports ({stats.n_edges} routes)")
    if args.max_records > 0:
        print(f"📏 Limited to {args.max_records} routes")

    # Degree ranking and hub
    print(render_top_connected(graph.top_connected(cfg.top), cfg.top), end="")
    print(render_hub(graph.most_connected()), end="")

    # Reachability
    checks: List[Tuple[str, str, bool]] = [
        (src, dst, graph.is_connected(src, dst)) for src, dst in cfg.checks
    ]
    print(render_connectivity_checks(checks), end="")
    print(render_connectivity_summary(connectivity_summary(graph)), end="")

    # Closeness
    if cfg.full_centrality:
        log("Computing closeness for every airport …")
        scores = rank_by_closeness(compute_centrality(graph), top_k=cfg.top)
        print(render_centrality(scores, title=f"Top {cfg.top} by Closeness", numbered=True), end="")
    else:
        print(render_centrality(preview_centrality(graph)), end="")

    if args.memory_monitor:
        optimize_memory()

    # Densest subgraph
    densest = approximate_densest_subgraph(graph)
    members = subgraph_labels(graph, densest.nodes)
    print(render_densest(densest, members, max_members=cfg.densest_members), end="")

    if args.memory_monitor:
        optimize_memory()

    elapsed = time.time() - start_time
    print(f"⏱️ Total execution time: {elapsed:.1f}s")


if __name__ == "__main__":
    main()
