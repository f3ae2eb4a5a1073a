"""
    CLI Commands — concrete command implementations.

    Design Pattern: Command
    ───────────────────────
    Each command encapsulates one editor action as an object with
    ``execute(graph) → CommandResult``.

    Graph commands are atomic transitions of the graph: they either apply
    fully or leave the graph untouched.  A command never raises for a
    mistake in the user's input (unknown id, missing endpoint); it reports
    the outcome in its result message instead.

    Session commands (print, save, show, exit, ...) need more than the
    graph and are handled by ``EditorSession``; their ``execute`` only
    describes them.

    Supported commands:
    ───────────────────
        i <label>            insert a node
        d <id>               delete a node and every edge touching it
        l <from> <to>        link two nodes with a new edge
        u <id>               unlink (delete) an edge
        r <id> <label>       rename a node
        s <text>             highlight nodes whose label contains <text>
        dot | json           print the DOT / JSON rendering
        save | show          write files / open the rendered diagram
        h                    help
        q                    exit
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from editor_api.models.graph import Graph
from editor_api.types import Identifier, Label


# ── Result wrapper ───────────────────────────────────────────────

@dataclass
class CommandResult:
    """
    Value object returned by every command execution.

    Attributes:
        success:  Whether the command did what was asked.  False for
                  expected outcomes such as an unknown id.
        message:  Human-readable output.
        dirty:    Whether the graph or its highlighting changed, i.e.
                  whether a re-render is needed.
        data:     Optional structured data for programmatic consumers.
    """
    success: bool
    message: str
    dirty: bool = False
    data: Optional[Dict[str, Any]] = field(default_factory=dict)

    def __str__(self) -> str:
        return self.message


# ── Abstract bases ───────────────────────────────────────────────

class Command(ABC):
    """
    Abstract base for all commands.

    Design Pattern: Command
    """

    @abstractmethod
    def execute(self, graph: Graph) -> CommandResult:
        """Execute the command on the given graph."""
        ...

    @property
    def mutates_graph(self) -> bool:
        """Whether the command needs exclusive (write) access to the graph."""
        return False


class GraphCommand(Command):
    """A command that edits the graph."""

    @property
    def mutates_graph(self) -> bool:
        return True


class SessionCommand(Command):
    """
    A command handled by the session rather than by the graph.
    """

    def execute(self, graph: Graph) -> CommandResult:
        return CommandResult(True, f"{type(self).__name__} delegated to session.")


# ═════════════════════════════════════════════════════════════════
#  GRAPH COMMANDS
# ═════════════════════════════════════════════════════════════════

@dataclass
class InsertNodeCommand(GraphCommand):
    """
    Insert a node.  Always succeeds.

    Syntax:
        i <label>
    """
    label: Label

    def execute(self, graph: Graph) -> CommandResult:
        node = graph.add_node(self.label)
        return CommandResult(
            True,
            f"inserted node {node.node_id}: '{node.label}'",
            dirty=True,
            data={"id": node.node_id.value},
        )


@dataclass
class DeleteNodeCommand(GraphCommand):
    """
    Delete a node, cascading to every edge that touches it.

    Syntax:
        d <id>
    """
    node_id: Identifier

    def execute(self, graph: Graph) -> CommandResult:
        if not graph.has_node(self.node_id):
            return CommandResult(False, f"node {self.node_id} not found")

        removed_edges = graph.remove_node(self.node_id)
        message = f"node {self.node_id} removed"
        if removed_edges:
            message += f" with {len(removed_edges)} edge(s): {', '.join(map(str, removed_edges))}"
        return CommandResult(
            True,
            message,
            dirty=True,
            data={"id": self.node_id.value, "edges": [e.value for e in removed_edges]},
        )


@dataclass
class LinkEdgeCommand(GraphCommand):
    """
    Link two existing nodes with a new directed edge.
    Self-loops and parallel edges are allowed.

    Syntax:
        l <from> <to>
    """
    from_id: Identifier
    to_id: Identifier

    def execute(self, graph: Graph) -> CommandResult:
        # Source first, so a missing source is the one reported
        if not graph.has_node(self.from_id):
            return CommandResult(False, f"source node {self.from_id} not found")

        if not graph.has_node(self.to_id):
            return CommandResult(False, f"target node {self.to_id} not found")

        edge = graph.add_edge(self.from_id, self.to_id)
        return CommandResult(
            True,
            f"Added edge {edge.edge_id} from {edge.from_id} to {edge.to_id}",
            dirty=True,
            data={"id": edge.edge_id.value, "from": edge.from_id.value, "to": edge.to_id.value},
        )


@dataclass
class RenameNodeCommand(GraphCommand):
    """
    Replace a node's label.  The id and the node's edges are untouched.

    Syntax:
        r <id> <label>
    """
    node_id: Identifier
    label: Label

    def execute(self, graph: Graph) -> CommandResult:
        old_label = graph.rename_node(self.node_id, self.label)
        if old_label is None:
            return CommandResult(False, f"Could not find node {self.node_id}")

        return CommandResult(
            True,
            f"Node {self.node_id} renamed to '{self.label}'",
            dirty=True,
            data={"id": self.node_id.value, "old_label": old_label.value},
        )


@dataclass
class UnlinkEdgeCommand(GraphCommand):
    """
    Remove an edge.

    Syntax:
        u <id>
    """
    edge_id: Identifier

    def execute(self, graph: Graph) -> CommandResult:
        if not graph.remove_edge(self.edge_id):
            return CommandResult(False, f"edge {self.edge_id} not found")
        return CommandResult(True, f"edge {self.edge_id} removed", dirty=True,
                             data={"id": self.edge_id.value})


@dataclass
class SearchCommand(GraphCommand):
    """
    Highlight nodes whose label contains the text.  Changes presentation
    only, but always triggers a re-render.

    Syntax:
        s <text>
    """
    sub_label: str

    def execute(self, graph: Graph) -> CommandResult:
        matches = graph.highlight_search_results(self.sub_label)
        if not self.sub_label:
            message = "search cleared"
        else:
            message = f"{matches} node(s) match '{self.sub_label}'"
        return CommandResult(True, message, dirty=True, data={"matches": matches})


# ═════════════════════════════════════════════════════════════════
#  SESSION COMMANDS
# ═════════════════════════════════════════════════════════════════

@dataclass
class PrintDotCommand(SessionCommand):
    """Print the DOT rendering of the graph."""


@dataclass
class PrintJsonCommand(SessionCommand):
    """Print the JSON document of the graph."""


@dataclass
class SaveCommand(SessionCommand):
    """Write the document, DOT file and images now."""


@dataclass
class ShowCommand(SessionCommand):
    """Open the rendered diagram."""


@dataclass
class ExitCommand(SessionCommand):
    """Leave the session."""


@dataclass
class RenameNodeUnlabelledCommand(SessionCommand):
    """
    ``r <id>`` without a label.  Does nothing and prints nothing; it
    exists so that a half-typed rename can be completed rather than
    reported as an error.
    """
    node_id: Identifier

    def execute(self, graph: Graph) -> CommandResult:
        return CommandResult(True, "", data={"id": self.node_id.value})


@dataclass
class ParseErrorCommand(SessionCommand):
    """A line the parser could not understand."""
    line: str

    def execute(self, graph: Graph) -> CommandResult:
        return CommandResult(False, "could not understand command; try 'h' for help",
                             data={"line": self.line})


HELP_TEXT = """
Available commands:
───────────────────────────────────────────────────────
  i <label>          insert a node
  d <id>             delete a node (and every edge touching it)
  l <from> <to>      link two nodes with an edge
  u <id>             unlink (delete) an edge
  r <id> <label>     rename a node
  s <text>           highlight nodes whose label contains <text>
                     ('s' on its own clears the highlight)
  dot                print the DOT definition of the graph
  json               print the JSON document of the graph
  save               save the graph to disk
  show               open the rendered diagram
  h                  show this help
  q                  exit
───────────────────────────────────────────────────────
""".strip()


@dataclass
class HelpCommand(SessionCommand):
    """Display the available commands."""

    def execute(self, graph: Graph) -> CommandResult:
        return CommandResult(True, HELP_TEXT)
