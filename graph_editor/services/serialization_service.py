"""
    Serialization and deserialization service for Graph models.

    Writing goes through the JSON exporter so the document on disk is
    exactly what the render pass produces; this service adds the way
    back: document → ``Graph``.

    Reloading keeps ids, labels and endpoints.  The allocator of the new
    graph is advanced past every numeric id it sees, so its counters may
    differ from the session that wrote the file but never re-issue a
    loaded id.
"""
import json
import logging
from pathlib import Path
from typing import Any, Dict, Union

from editor_api.models.edge import Edge
from editor_api.models.graph import Graph
from editor_api.models.node import Node
from editor_api.types import Identifier, Label
from json_exporter.plugin import JsonExporter

from .exceptions import DocumentFormatError

logger = logging.getLogger(__name__)


class GraphSerializer:
    """
    Usage:
        serializer = GraphSerializer()
        json_str = serializer.to_json(graph)     # → str
        graph = serializer.from_json(json_str)   # → Graph
        graph = serializer.load(path)            # → Graph
    """

    # ── Serialization ────────────────────────────────────────────

    def to_json(self, graph: Graph) -> str:
        return JsonExporter().export(graph)

    # ── Deserialization ──────────────────────────────────────────

    def deserialize(self, data: Dict[str, Any], graph_id: str = "graph") -> Graph:
        """
        Reconstruct a Graph from a document dict (inverse of the JSON exporter).

        Raises:
            DocumentFormatError: If the document shape is wrong or ids repeat.
        """
        if not isinstance(data, dict):
            raise DocumentFormatError("graph document must be a JSON object")

        graph = Graph(graph_id)
        try:
            # --- Nodes ---
            for node_data in data.get('nodes', []):
                node = Node(Identifier(node_data['id']), Label(node_data.get('label', '')))
                graph.restore_node(node)

            # --- Edges ---
            for edge_data in data.get('edges', []):
                edge = Edge(
                    Identifier(edge_data['id']),
                    Identifier(edge_data['from']),
                    Identifier(edge_data['to']),
                )
                if not graph.has_node(edge.from_id) or not graph.has_node(edge.to_id):
                    logger.warning("Skipping edge %s: endpoint %s -> %s missing",
                                   edge.edge_id, edge.from_id, edge.to_id)
                    continue
                graph.restore_edge(edge)
        except (KeyError, TypeError, ValueError) as e:
            raise DocumentFormatError(f"invalid graph document: {e}") from e

        return graph

    def from_json(self, json_str: str, graph_id: str = "graph") -> Graph:
        """Deserialize a Graph from a JSON string."""
        try:
            data = json.loads(json_str)
        except json.JSONDecodeError as e:
            raise DocumentFormatError(f"not a JSON document: {e}") from e
        return self.deserialize(data, graph_id)

    def load(self, path: Union[str, Path]) -> Graph:
        """Read a document from disk.  A missing file yields an empty graph."""
        path = Path(path)
        if not path.exists():
            logger.info("No document at %s; starting with an empty graph.", path)
            return Graph(path.stem)

        graph = self.from_json(path.read_text(encoding="utf-8"), graph_id=path.stem)
        logger.info("Loaded %r from %s", graph, path)
        return graph
