# tests/cli_test/test_commands.py
"""
Tests for the editor commands (graph_editor/cli/commands.py).

Covers:
    • Each graph command: success, user-error outcome, dirty flag
    • Atomicity: a failed command leaves the graph untouched
    • Session commands describe themselves without touching the graph
"""
import pytest

from editor_api.models.graph import Graph
from editor_api.types import Identifier, Label
from graph_editor.cli.commands import (
    HELP_TEXT,
    CommandResult,
    DeleteNodeCommand,
    ExitCommand,
    HelpCommand,
    InsertNodeCommand,
    LinkEdgeCommand,
    ParseErrorCommand,
    PrintDotCommand,
    RenameNodeCommand,
    RenameNodeUnlabelledCommand,
    SearchCommand,
    UnlinkEdgeCommand,
)


def _id(value: str) -> Identifier:
    return Identifier(value)


def _snapshot(graph: Graph):
    return (
        [(n.node_id, n.label) for n in graph.nodes],
        [(e.edge_id, e.from_id, e.to_id) for e in graph.edges],
        graph.allocator.node_high_water,
        graph.allocator.edge_high_water,
    )


# ── Insert ───────────────────────────────────────────────────────

class TestInsert:

    def test_insert(self, empty_graph):
        result = InsertNodeCommand(Label("abc")).execute(empty_graph)
        assert result.success
        assert result.dirty
        assert result.message == "inserted node n0: 'abc'"
        assert result.data == {"id": "n0"}

    def test_consecutive_inserts(self, empty_graph):
        InsertNodeCommand(Label("abc")).execute(empty_graph)
        result = InsertNodeCommand(Label("def")).execute(empty_graph)
        assert result.data["id"] == "n1"


# ── Delete ───────────────────────────────────────────────────────

class TestDelete:

    def test_delete_cascades(self, small_graph):
        result = DeleteNodeCommand(_id("n1")).execute(small_graph)
        assert result.success and result.dirty
        assert result.message == "node n1 removed with 2 edge(s): e0, e1"
        assert result.data == {"id": "n1", "edges": ["e0", "e1"]}
        assert small_graph.edges == []

    def test_delete_isolated_node(self, small_graph):
        small_graph.add_node(Label("lonely"))
        result = DeleteNodeCommand(_id("n3")).execute(small_graph)
        assert result.message == "node n3 removed"

    def test_delete_unknown(self, small_graph):
        before = _snapshot(small_graph)
        result = DeleteNodeCommand(_id("n9")).execute(small_graph)
        assert not result.success
        assert not result.dirty
        assert result.message == "node n9 not found"
        assert _snapshot(small_graph) == before


# ── Link / Unlink ────────────────────────────────────────────────

class TestLink:

    def test_link(self, small_graph):
        result = LinkEdgeCommand(_id("n2"), _id("n0")).execute(small_graph)
        assert result.success and result.dirty
        assert result.message == "Added edge e2 from n2 to n0"

    def test_link_self_loop(self, small_graph):
        assert LinkEdgeCommand(_id("n0"), _id("n0")).execute(small_graph).success

    def test_both_missing_reports_source(self, empty_graph):
        result = LinkEdgeCommand(_id("n5"), _id("n6")).execute(empty_graph)
        assert not result.success
        assert result.message == "source node n5 not found"

    def test_missing_target(self, small_graph):
        before = _snapshot(small_graph)
        result = LinkEdgeCommand(_id("n0"), _id("n6")).execute(small_graph)
        assert result.message == "target node n6 not found"
        assert not result.dirty
        assert _snapshot(small_graph) == before

    def test_unlink(self, small_graph):
        result = UnlinkEdgeCommand(_id("e1")).execute(small_graph)
        assert result.success and result.dirty
        assert result.message == "edge e1 removed"
        assert [e.edge_id.value for e in small_graph.edges] == ["e0"]

    def test_unlink_unknown(self, small_graph):
        result = UnlinkEdgeCommand(_id("e7")).execute(small_graph)
        assert not result.success
        assert result.message == "edge e7 not found"

    def test_unlink_node_id_is_not_an_edge(self, small_graph):
        assert not UnlinkEdgeCommand(_id("n0")).execute(small_graph).success


# ── Rename ───────────────────────────────────────────────────────

class TestRename:

    def test_rename(self, small_graph):
        result = RenameNodeCommand(_id("n0"), Label("xyz")).execute(small_graph)
        assert result.success and result.dirty
        assert result.message == "Node n0 renamed to 'xyz'"
        assert result.data["old_label"] == "abc"
        assert small_graph.get_node(_id("n0")).label == Label("xyz")

    def test_rename_unknown(self, small_graph):
        result = RenameNodeCommand(_id("n9"), Label("xyz")).execute(small_graph)
        assert not result.success
        assert result.message == "Could not find node n9"

    def test_rename_without_label(self, small_graph):
        before = _snapshot(small_graph)
        result = RenameNodeUnlabelledCommand(_id("n0")).execute(small_graph)
        assert result.success
        assert result.message == ""
        assert not result.dirty
        assert _snapshot(small_graph) == before


# ── Search ───────────────────────────────────────────────────────

class TestSearch:

    def test_search_counts_matches(self, small_graph):
        result = SearchCommand("H").execute(small_graph)
        assert result.message == "1 node(s) match 'H'"
        assert result.dirty

    def test_search_without_match_still_dirty(self, small_graph):
        result = SearchCommand("zzz").execute(small_graph)
        assert result.data == {"matches": 0}
        assert result.dirty

    def test_empty_search_clears(self, small_graph):
        SearchCommand("abc").execute(small_graph)
        result = SearchCommand("").execute(small_graph)
        assert result.message == "search cleared"
        assert not any(n.highlighted for n in small_graph.nodes)


# ── Session commands ─────────────────────────────────────────────

class TestSessionCommands:

    @pytest.mark.parametrize("command", [PrintDotCommand(), ExitCommand()])
    def test_delegated(self, small_graph, command):
        before = _snapshot(small_graph)
        result = command.execute(small_graph)
        assert result.success
        assert "delegated to session" in result.message
        assert not command.mutates_graph
        assert _snapshot(small_graph) == before

    def test_help(self, empty_graph):
        result = HelpCommand().execute(empty_graph)
        assert result.message == HELP_TEXT
        assert "l <from> <to>" in HELP_TEXT

    def test_parse_error(self, empty_graph):
        result = ParseErrorCommand("frobnicate").execute(empty_graph)
        assert not result.success
        assert "try 'h' for help" in result.message
        assert result.data == {"line": "frobnicate"}

    def test_graph_commands_mutate(self):
        assert InsertNodeCommand(Label("a")).mutates_graph
        assert SearchCommand("a").mutates_graph


# ── Scenario ─────────────────────────────────────────────────────

class TestScenario:

    def test_insert_link_delete(self, empty_graph):
        commands = [
            InsertNodeCommand(Label("abc")),
            InsertNodeCommand(Label("def")),
            LinkEdgeCommand(_id("n0"), _id("n1")),
            DeleteNodeCommand(_id("n0")),
        ]
        results = [c.execute(empty_graph) for c in commands]

        assert all(r.success for r in results)
        assert results[2].message == "Added edge e0 from n0 to n1"
        assert results[3].data["edges"] == ["e0"]
        assert [(n.node_id.value, n.label.value) for n in empty_graph.nodes] == [("n1", "def")]
        assert empty_graph.edges == []

    def test_result_str_is_message(self):
        assert str(CommandResult(True, "done")) == "done"
