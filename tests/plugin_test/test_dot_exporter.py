# tests/plugin_test/test_dot_exporter.py
"""
Tests for the GraphViz DOT exporter (dot_exporter/plugin.py).
"""
import pytest

from editor_api.models.graph import Graph
from editor_api.types import Identifier, Label
from dot_exporter.palettes import COLORS, resolve_palette
from dot_exporter.plugin import DisplayMode, GraphVizExporter, escape_id, escape_label

EXPECTED_ANNOTATED = """digraph G {
    graph [fontname="helvetica" rankdir=TB ranksep=0.8 nodesep=0.4];
    node [shape=box style="rounded,filled" fontname="helvetica" fillcolor="#FFDD99" fontcolor="#242D48" color="#485478"];
    edge [fontname="helvetica" color="#485478" fontcolor="#485478"];
    "n0" [label="n0: abc"];
    "n1" [label="n1: def"];
    "n0" -> "n1" [label="e0"];
}
"""


@pytest.fixture
def two_nodes() -> Graph:
    g = Graph("two")
    g.add_node(Label("abc"))
    g.add_node(Label("def"))
    g.add_edge(Identifier("n0"), Identifier("n1"))
    return g


class TestEscaping:

    def test_plain(self):
        assert escape_label("abc") == '"abc"'

    def test_quote(self):
        assert escape_label('say "hi"') == '"say \\"hi\\""'

    def test_newline(self):
        assert escape_label("a\nb") == '"a\\n b"'

    def test_id(self):
        assert escape_id("n0") == '"n0"'

    def test_trailing_backslash(self):
        assert escape_label("C:\\") == '"C:\\\\"'

    def test_backslash_before_quote(self):
        assert escape_label('a\\"b') == '"a\\\\\\"b"'

    def test_id_backslash(self):
        assert escape_id("x\\") == '"x\\\\"'

    def test_literal_backslash_n_is_not_a_line_break(self):
        assert escape_label("a\\nb") == '"a\\\\nb"'


class TestGraphVizExporter:

    def test_annotated_document(self, two_nodes):
        assert GraphVizExporter().export(two_nodes) == EXPECTED_ANNOTATED

    def test_repeat_export_is_identical(self, two_nodes):
        exporter = GraphVizExporter()
        assert exporter.export(two_nodes) == exporter.export(two_nodes)

    def test_left_right(self, two_nodes):
        assert "rankdir=LR" in GraphVizExporter().export(two_nodes, left_right=True)

    def test_direction_reset_between_exports(self, two_nodes):
        exporter = GraphVizExporter()
        exporter.export(two_nodes, left_right=True)
        assert "rankdir=TB" in exporter.export(two_nodes)

    def test_presentation_mode(self, two_nodes):
        out = GraphVizExporter(DisplayMode.PRESENTATION).export(two_nodes)
        assert '    "n0" [label="abc"];\n' in out
        assert '    "n0" -> "n1";\n' in out

    def test_long_labels_wrapped(self, empty_graph):
        empty_graph.add_node(Label("word " * 20))
        out = GraphVizExporter().export(empty_graph)
        assert "\\n " in out

    def test_label_with_quotes(self, empty_graph):
        empty_graph.add_node(Label('a "b"'))
        assert '[label="n0: a \\"b\\""]' in GraphVizExporter().export(empty_graph)

    def test_backslash_label_stays_quoted(self, empty_graph):
        empty_graph.add_node(Label("C:\\"))
        out = GraphVizExporter().export(empty_graph)
        assert '    "n0" [label="n0: C:\\\\"];\n' in out

    def test_highlight(self, two_nodes):
        for node in two_nodes.nodes:
            node.highlighted = True
        for edge in two_nodes.edges:
            edge.highlighted = True
        out = GraphVizExporter().export(two_nodes)
        assert '"n0" [label="n0: abc" fillcolor="#73DBE6" penwidth=2];' in out
        assert '"n0" -> "n1" [label="e0" color="#73DBE6" penwidth=2];' in out

    def test_empty_graph(self, empty_graph):
        out = GraphVizExporter().export(empty_graph)
        assert out.startswith("digraph G {\n")
        assert out.endswith('edge [fontname="helvetica" color="#485478" fontcolor="#485478"];\n}\n')

    def test_configure(self, two_nodes):
        exporter = GraphVizExporter()
        exporter.configure({"display_mode": "presentation", "palette": "orchid", "unknown": 1})
        out = exporter.export(two_nodes)
        assert exporter.display_mode == DisplayMode.PRESENTATION
        assert f'fillcolor="{COLORS["linkwater"]}"' in out

    def test_file_extension_and_name(self):
        exporter = GraphVizExporter()
        assert exporter.file_extension == "dot"
        assert exporter.get_plugin_name() == "GraphViz DOT"


class TestPalettes:

    def test_resolve_default(self):
        assert resolve_palette("default")["highlight"] == "#73DBE6"

    def test_unknown_palette(self):
        with pytest.raises(ValueError, match="Unknown palette"):
            resolve_palette("neon")
