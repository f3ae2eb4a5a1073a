"""
    JsonExporter — serializes the graph into a document that can be
    loaded back (see ``graph_editor.services.serialization_service``).

    Document shape:
        {
          "nodes": [{"id": "n0", "label": "abc"}, ...],
          "edges": [{"id": "e0", "from": "n0", "to": "n1"}, ...]
        }

    Highlighting is a presentation attribute and is not written.
"""
import json
from typing import Any, Dict, List

from editor_api.exporters.base import Exporter
from editor_api.types import Identifier, Label


class JsonExporter(Exporter):

    file_extension = "json"

    def __init__(self, indent: int = 2):
        self._indent = indent
        self._nodes: List[Dict[str, Any]] = []
        self._edges: List[Dict[str, Any]] = []

    def get_plugin_name(self) -> str:
        return "JSON Document"

    def configure(self, options: Dict[str, Any]) -> None:
        if "indent" in options:
            self._indent = int(options["indent"])

    def set_direction(self, is_left_right: bool) -> None:
        # Layout direction is a rendering concern, not part of the document
        pass

    def add_node(self, node_id: Identifier, label: Label, highlighted: bool = False) -> None:
        self._nodes.append({'id': node_id.value, 'label': label.value})

    def add_edge(self, edge_id: Identifier, from_id: Identifier, to_id: Identifier,
                 highlighted: bool = False) -> None:
        self._edges.append({'id': edge_id.value, 'from': from_id.value, 'to': to_id.value})

    def reset(self) -> None:
        self._nodes = []
        self._edges = []

    def document(self) -> Dict[str, Any]:
        """The accumulated document as plain dicts."""
        return {'nodes': list(self._nodes), 'edges': list(self._edges)}

    def render(self) -> str:
        return json.dumps(self.document(), indent=self._indent, ensure_ascii=False) + "\n"
