# tests/conftest.py
"""
Shared test fixtures.
Small graph: three nodes in a chain, plus a recording exporter that
captures every callback the graph makes during export.
"""
from typing import Any, List, Tuple

import pytest

from editor_api.exporters.base import Exporter
from editor_api.models.graph import Graph
from editor_api.types import Identifier, Label
from graph_editor.config import EditorConfig
from dot_exporter.plugin import GraphVizExporter
from fdg_exporter.plugin import FdgExporter
from json_exporter.plugin import JsonExporter


class RecordingExporter(Exporter):
    """Exporter that records the callback stream instead of rendering."""

    file_extension = "log"

    def __init__(self):
        self.calls: List[Tuple[Any, ...]] = []

    def get_plugin_name(self) -> str:
        return "Recorder"

    def set_direction(self, is_left_right: bool) -> None:
        self.calls.append(("direction", is_left_right))

    def add_node(self, node_id, label, highlighted=False) -> None:
        self.calls.append(("node", node_id.value, label.value, highlighted))

    def add_edge(self, edge_id, from_id, to_id, highlighted=False) -> None:
        self.calls.append(("edge", edge_id.value, from_id.value, to_id.value, highlighted))

    def reset(self) -> None:
        self.calls = []

    def render(self) -> str:
        return "\n".join(repr(c) for c in self.calls)


def _build_graph(graph_id: str = "chain") -> Graph:
    """
        n0 (abc) --e0--> n1 (def) --e1--> n2 (ghi)
    """
    g = Graph(graph_id)
    for text in ("abc", "def", "ghi"):
        g.add_node(Label(text))
    g.add_edge(Identifier("n0"), Identifier("n1"))
    g.add_edge(Identifier("n1"), Identifier("n2"))
    return g


# ── Pytest fixtures ──────────────────────────────────────────────

@pytest.fixture
def empty_graph() -> Graph:
    return Graph("empty")


@pytest.fixture
def small_graph() -> Graph:
    """Three nodes n0..n2 linked by e0 (n0->n1) and e1 (n1->n2)."""
    return _build_graph()


@pytest.fixture
def recording_exporter() -> RecordingExporter:
    return RecordingExporter()


@pytest.fixture
def config(tmp_path) -> EditorConfig:
    """GraphViz render method, no external program, files under tmp_path."""
    return EditorConfig(json_file=tmp_path / "graph.json", compile=False)


@pytest.fixture
def exporters():
    """The installed backends, built directly (no entry-point discovery)."""
    return {
        "json": JsonExporter(),
        "dot": GraphVizExporter(),
        "fdg": FdgExporter(),
    }
