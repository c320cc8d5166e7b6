# src/routegraph/loader/routes_loader.py

"""
Route loading utilities.

This module builds a RouteGraph from either:
1. A single routes CSV file.
2. A directory of routes CSV files (loaded in sorted order into one graph).

Each file starts with a header row. Every following record must carry the
source label in column 0 and the destination label in column 1; any further
columns (airline, stops, ...) are ignored.

Any problem with the input raises RouteLoadError and no graph is returned,
so the analytics never see a partially built graph.
"""

from __future__ import annotations

import csv
from dataclasses import dataclass
from pathlib import Path
from typing import List, Tuple

from ..store.route_graph import RouteGraph
from ..utils.log import log


class RouteLoadError(ValueError):
    """The routes input could not be read or contains a malformed record."""


@dataclass
class LoadStats:
    n_records: int
    n_nodes: int
    n_edges: int


def _read_routes(path: Path) -> List[Tuple[str, str]]:
    """
    Read (source, destination) pairs from one CSV file, skipping the header.
    """
    routes: List[Tuple[str, str]] = []
    try:
        with path.open("r", encoding="utf-8", newline="") as f:
            reader = csv.reader(f)
            next(reader, None)  # header
            for record in reader:
                if not record:
                    continue
                if len(record) < 2:
                    raise RouteLoadError(
                        f"{path}:{reader.line_num}: expected source and destination, got {record!r}"
                    )
                source = record[0].strip()
                dest = record[1].strip()
                if not source or not dest:
                    raise RouteLoadError(f"{path}:{reader.line_num}: empty airport label")
                routes.append((source, dest))
    except (OSError, UnicodeDecodeError, csv.Error) as e:
        raise RouteLoadError(f"Failed to read {path}: {e}") from e

    return routes


def _route_files(path: Path) -> List[Path]:
    files = sorted(path.glob("*.csv"))
    if not files:
        raise RouteLoadError(f"No routes CSV files found in directory: {path}")
    return files


def build_route_graph(routes: List[Tuple[str, str]]) -> RouteGraph:
    """Populate a RouteGraph from (source, destination) label pairs."""
    graph = RouteGraph()
    for source, dest in routes:
        src_index = graph.add_or_get_node(source)
        dst_index = graph.add_or_get_node(dest)
        graph.add_edge(src_index, dst_index)
    return graph


def load_routes(input_path: str, max_records: int = 0) -> Tuple[RouteGraph, LoadStats]:
    """
    Unified entry point.

    Parameters
    ----------
    input_path : str
        Either a routes CSV file or a directory containing CSV files.
    max_records : int
        If > 0, only the first max_records routes are loaded.

    Returns
    -------
    (RouteGraph, LoadStats)
    """
    path = Path(input_path)
    if not path.exists():
        raise RouteLoadError(f"Routes input not found: {path}")

    files = _route_files(path) if path.is_dir() else [path]

    routes: List[Tuple[str, str]] = []
    for p in files:
        file_routes = _read_routes(p)
        log(f"Read {len(file_routes)} routes from {p}")
        routes.extend(file_routes)

    if max_records > 0:
        routes = routes[:max_records]

    graph = build_route_graph(routes)
    stats = LoadStats(
        n_records=len(routes),
        n_nodes=graph.node_count(),
        n_edges=graph.edge_count(),
    )
    return graph, stats
