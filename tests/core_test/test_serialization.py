# tests/core_test/test_serialization.py
"""
Tests for GraphSerializer (graph_editor/services/serialization_service.py).

Covers:
    • Round-trip through the JSON document
    • Allocator advanced past loaded ids
    • Dangling edges skipped on load
    • Malformed documents
    • Missing file → empty graph
"""
import json

import pytest

from editor_api.types import Identifier, Label
from graph_editor.services.exceptions import DocumentFormatError
from graph_editor.services.serialization_service import GraphSerializer


@pytest.fixture
def serializer() -> GraphSerializer:
    return GraphSerializer()


class TestRoundTrip:

    def test_round_trip_keeps_ids_labels_endpoints(self, serializer, small_graph):
        loaded = serializer.from_json(serializer.to_json(small_graph))
        assert [(n.node_id.value, n.label.value) for n in loaded.nodes] == [
            ("n0", "abc"), ("n1", "def"), ("n2", "ghi"),
        ]
        assert [(e.edge_id.value, e.from_id.value, e.to_id.value) for e in loaded.edges] == [
            ("e0", "n0", "n1"), ("e1", "n1", "n2"),
        ]

    def test_reexport_is_identical(self, serializer, small_graph):
        text = serializer.to_json(small_graph)
        assert serializer.to_json(serializer.from_json(text)) == text

    def test_loaded_graph_issues_fresh_ids(self, serializer, small_graph):
        small_graph.remove_node(Identifier("n2"))
        loaded = serializer.from_json(serializer.to_json(small_graph))
        assert loaded.add_node(Label("x")).node_id == Identifier("n2")
        assert loaded.add_edge(Identifier("n0"), Identifier("n1")).edge_id == Identifier("e1")

    def test_highlight_not_persisted(self, serializer, small_graph):
        small_graph.highlight_search_results("abc")
        loaded = serializer.from_json(serializer.to_json(small_graph))
        assert not any(n.highlighted for n in loaded.nodes)


class TestMalformed:

    def test_not_json(self, serializer):
        with pytest.raises(DocumentFormatError, match="not a JSON document"):
            serializer.from_json("{nope")

    def test_not_an_object(self, serializer):
        with pytest.raises(DocumentFormatError):
            serializer.from_json("[1, 2]")

    def test_node_without_id(self, serializer):
        with pytest.raises(DocumentFormatError):
            serializer.from_json(json.dumps({"nodes": [{"label": "x"}]}))

    def test_duplicate_node_id(self, serializer):
        doc = {"nodes": [{"id": "n0", "label": "a"}, {"id": "n0", "label": "b"}]}
        with pytest.raises(DocumentFormatError, match="already exists"):
            serializer.deserialize(doc)

    def test_dangling_edge_skipped(self, serializer):
        doc = {
            "nodes": [{"id": "n0", "label": "a"}],
            "edges": [{"id": "e0", "from": "n0", "to": "n9"},
                      {"id": "e1", "from": "n0", "to": "n0"}],
        }
        graph = serializer.deserialize(doc)
        assert [e.edge_id.value for e in graph.edges] == ["e1"]

    def test_missing_sections_mean_empty(self, serializer):
        graph = serializer.deserialize({})
        assert graph.get_number_of_nodes() == 0


class TestFiles:

    def test_missing_file_gives_empty_graph(self, serializer, tmp_path):
        graph = serializer.load(tmp_path / "absent.json")
        assert graph.get_number_of_nodes() == 0
        assert graph.graph_id == "absent"

    def test_load_from_disk(self, serializer, small_graph, tmp_path):
        path = tmp_path / "doc.json"
        path.write_text(serializer.to_json(small_graph), encoding="utf-8")
        graph = serializer.load(path)
        assert graph.graph_id == "doc"
        assert graph.get_number_of_edges() == 2
