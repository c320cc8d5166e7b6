# src/routegraph/store/route_graph.py

"""
Route graph store.

An undirected, unweighted graph over string-labelled nodes (e.g. airport
codes) backed by a NetworkX MultiGraph:
  - nodes are integer indices assigned in insertion order
  - every node carries a "label" attribute; labels are unique
  - parallel edges are kept, so routes loaded once per record all count

The store is built once by the loader and is read-only for the analytics
modules. Only private working copies (see copy()) are ever mutated.
"""

from __future__ import annotations

from typing import Dict, Iterator, List, Optional, Tuple

import networkx as nx


class RouteGraph:
    """Undirected route graph with label deduplication."""

    def __init__(self) -> None:
        self._graph = nx.MultiGraph()
        self._index_by_label: Dict[str, int] = {}
        self._next_index = 0

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    def add_or_get_node(self, label: str) -> int:
        """Return the index for label, creating the node if it is new."""
        existing = self._index_by_label.get(label)
        if existing is not None:
            return existing

        index = self._next_index
        self._next_index += 1
        self._graph.add_node(index, label=label)
        self._index_by_label[label] = index
        return index

    def add_edge(self, a: int, b: int) -> None:
        """Append an unordered edge between two existing node indices."""
        self._graph.add_edge(a, b)

    # ------------------------------------------------------------------
    # Read surface
    # ------------------------------------------------------------------

    def node_count(self) -> int:
        return self._graph.number_of_nodes()

    def edge_count(self) -> int:
        return self._graph.number_of_edges()

    def nodes(self) -> List[int]:
        """Node indices in enumeration (insertion) order."""
        return list(self._graph.nodes())

    def label(self, index: int) -> str:
        return self._graph.nodes[index]["label"]

    def index_of(self, label: str) -> Optional[int]:
        return self._index_by_label.get(label)

    def labels(self) -> Iterator[str]:
        for n in self._graph.nodes():
            yield self._graph.nodes[n]["label"]

    def neighbors(self, index: int) -> List[int]:
        return list(self._graph.neighbors(index))

    def neighbor_count(self, index: int) -> int:
        """
        Number of incident edges.

        Parallel edges count separately; a self-loop is one incident edge.
        """
        return sum(len(keys) for keys in self._graph.adj[index].values())

    def is_connected(self, src: str, dst: str) -> bool:
        """
        True when a path exists between the two labelled nodes.

        Unknown labels are not an error, they are simply unreachable.
        """
        src_index = self._index_by_label.get(src)
        if src_index is None:
            return False

        dst_index = self._index_by_label.get(dst)
        if dst_index is None:
            return False

        return nx.has_path(self._graph, src_index, dst_index)

    def top_connected(self, top_n: int) -> List[Tuple[str, int]]:
        """
        All nodes ranked by descending neighbor count, truncated to top_n.

        sorted() is stable, so ties keep insertion order.
        """
        connections = [
            (self.label(n), self.neighbor_count(n)) for n in self._graph.nodes()
        ]
        connections.sort(key=lambda x: x[1], reverse=True)
        return connections[: max(0, top_n)]

    def most_connected(self) -> Optional[str]:
        """
        Label of the node with the strictly highest neighbor count.

        The first node to beat the running maximum wins, so ties resolve to
        the earliest node and a graph without edges has no hub.
        """
        max_connections = 0
        hub: Optional[str] = None

        for n in self._graph.nodes():
            connections = self.neighbor_count(n)
            if connections > max_connections:
                max_connections = connections
                hub = self.label(n)

        return hub

    # ------------------------------------------------------------------
    # Working copies
    # ------------------------------------------------------------------

    def copy(self) -> "RouteGraph":
        """Independent copy with its own node, edge and label storage."""
        clone = RouteGraph()
        clone._graph = self._graph.copy()
        clone._index_by_label = dict(self._index_by_label)
        clone._next_index = self._next_index
        return clone

    def remove_node(self, index: int) -> None:
        """Remove a node and its incident edges (working copies only)."""
        label = self.label(index)
        self._graph.remove_node(index)
        del self._index_by_label[label]

    def to_networkx(self) -> nx.MultiGraph:
        """Read-only view of the underlying NetworkX graph."""
        return self._graph.copy(as_view=True)

    def __contains__(self, label: object) -> bool:
        return label in self._index_by_label
