"""
    Graph model - the authoritative store of nodes and edges.

    Nodes and edges are kept as ordered sequences in creation order and
    looked up by a linear scan.  Graphs edited interactively stay small,
    so an id -> position index isn't worth its bookkeeping here; the
    public lookups would keep the same contract if one were added.
"""
from typing import List, Optional

from ..exporters.base import Exporter
from ..types import Identifier, Label, IdAllocator
from .node import Node
from .edge import Edge


class Graph:
    """
        Entity store for one editing session.

        Invariants:
            • no two nodes share an id, no two edges share an id;
            • an edge's endpoints exist when the edge is created;
            • removing a node removes every edge touching it first.
    """

    def __init__(self, graph_id: str = "graph", allocator: Optional[IdAllocator] = None):
        """
        Initialize a graph.
        Args:
            graph_id:  Human-readable name of the graph
            allocator: Identifier allocator (a fresh one by default)
        """
        self.graph_id = graph_id
        self.nodes: List[Node] = []
        self.edges: List[Edge] = []
        self._allocator = allocator or IdAllocator()

    @property
    def allocator(self) -> IdAllocator:
        return self._allocator

    # ── Lookup ───────────────────────────────────────────────────

    def find_node_idx(self, node_id: Identifier) -> Optional[int]:
        for idx, node in enumerate(self.nodes):
            if node.node_id == node_id:
                return idx
        return None

    def find_edge_idx(self, edge_id: Identifier) -> Optional[int]:
        for idx, edge in enumerate(self.edges):
            if edge.edge_id == edge_id:
                return idx
        return None

    def get_node(self, node_id: Identifier) -> Optional[Node]:
        idx = self.find_node_idx(node_id)
        return None if idx is None else self.nodes[idx]

    def get_edge(self, edge_id: Identifier) -> Optional[Edge]:
        idx = self.find_edge_idx(edge_id)
        return None if idx is None else self.edges[idx]

    def has_node(self, node_id: Identifier) -> bool:
        return self.find_node_idx(node_id) is not None

    def edges_touching(self, node_id: Identifier) -> List[Identifier]:
        """Ids of every edge whose source or target is ``node_id``, deduplicated."""
        touching: List[Identifier] = []
        for edge in self.edges:
            if edge.touches(node_id) and edge.edge_id not in touching:
                touching.append(edge.edge_id)
        return touching

    # ── Mutation ─────────────────────────────────────────────────

    def add_node(self, label: Label) -> Node:
        """Allocate a fresh id and append a new node."""
        node = Node(self._allocator.next_node_id(), label)
        self.nodes.append(node)
        return node

    def add_edge(self, from_id: Identifier, to_id: Identifier) -> Edge:
        """
        Allocate a fresh id and append a new edge.

        Raises:
            ValueError: If either endpoint is not in the graph.
                        The source is checked first.
        """
        if not self.has_node(from_id):
            raise ValueError(f"Source node {from_id} not in graph")
        if not self.has_node(to_id):
            raise ValueError(f"Target node {to_id} not in graph")

        edge = Edge(self._allocator.next_edge_id(), from_id, to_id)
        self.edges.append(edge)
        return edge

    def restore_node(self, node: Node) -> None:
        """
        Append a node that already carries an id (e.g. read back from disk).
        The allocator is advanced so it never issues that id again.
        """
        if self.has_node(node.node_id):
            raise ValueError(f"Node with id {node.node_id} already exists")
        self._allocator.observe(node.node_id)
        self.nodes.append(node)

    def restore_edge(self, edge: Edge) -> None:
        """Append an edge that already carries an id, validating its endpoints."""
        if self.find_edge_idx(edge.edge_id) is not None:
            raise ValueError(f"Edge with id {edge.edge_id} already exists")
        if not self.has_node(edge.from_id):
            raise ValueError(f"Source node {edge.from_id} not in graph")
        if not self.has_node(edge.to_id):
            raise ValueError(f"Target node {edge.to_id} not in graph")
        self._allocator.observe(edge.edge_id)
        self.edges.append(edge)

    def remove_node(self, node_id: Identifier) -> List[Identifier]:
        """
        Remove a node and all connected edges.

        Edges go first, so no surviving edge ever references a removed node.

        Returns:
            Ids of the edges removed by the cascade.

        Raises:
            ValueError: If the node is not in the graph.
        """
        if not self.has_node(node_id):
            raise ValueError(f"Node {node_id} not in graph")

        # 1. Identify and delete edges
        touching = self.edges_touching(node_id)
        for edge_id in touching:
            self.remove_edge(edge_id)

        # 2. Delete node
        del self.nodes[self.find_node_idx(node_id)]
        return touching

    def remove_edge(self, edge_id: Identifier) -> bool:
        """Remove an edge.  Returns False if there was nothing to remove."""
        idx = self.find_edge_idx(edge_id)
        if idx is None:
            return False
        del self.edges[idx]
        return True

    def rename_node(self, node_id: Identifier, label: Label) -> Optional[Label]:
        """Relabel a node in place.  Returns the old label, or None if not found."""
        node = self.get_node(node_id)
        if node is None:
            return None
        return node.rename(label)

    # ── Search highlighting ──────────────────────────────────────

    def highlight_search_results(self, sub_label: str) -> int:
        """
        Highlight nodes whose label contains ``sub_label`` (case-insensitive)
        and edges whose endpoints are both highlighted.  Previous highlights
        are cleared first; an empty search only clears.

        Returns:
            Number of highlighted nodes.
        """
        matched = set()
        for node in self.nodes:
            node.highlighted = bool(sub_label) and node.label.contains(sub_label)
            if node.highlighted:
                matched.add(node.node_id)

        for edge in self.edges:
            edge.highlighted = edge.from_id in matched and edge.to_id in matched

        return len(matched)

    # ── Export ───────────────────────────────────────────────────

    def export(self, exporter: Exporter, left_right: bool = False) -> None:
        """
        Walk the graph through an exporter: direction first, then every
        node, then every edge, each in creation order.
        """
        exporter.set_direction(left_right)

        for node in self.nodes:
            exporter.add_node(node.node_id, node.label, highlighted=node.highlighted)

        for edge in self.edges:
            exporter.add_edge(edge.edge_id, edge.from_id, edge.to_id,
                              highlighted=edge.highlighted)

    # ── Introspection ────────────────────────────────────────────

    def get_number_of_nodes(self) -> int:
        return len(self.nodes)

    def get_number_of_edges(self) -> int:
        return len(self.edges)

    def __repr__(self) -> str:
        return f"Graph({self.graph_id}, nodes={len(self.nodes)}, edges={len(self.edges)})"
