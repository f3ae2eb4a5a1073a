"""
    GraphVizExporter — renders the graph as a GraphViz DOT document.

    Two presentation modes:
        • INTERACTIVE  – labels are prefixed with the node id and wrapped,
                         edges carry their own id as a label.  Meant for
                         the editing session, where ids are typed back in.
        • PRESENTATION – labels verbatim, unlabelled edges.
"""
import textwrap
from enum import Enum
from string import Template
from typing import Any, Dict, List

from editor_api.exporters.base import Exporter
from editor_api.types import Identifier, Label

from .palettes import DEFAULT_PALETTE, resolve_palette

WRAP_WIDTH = 40

_TEMPLATE = Template("""digraph G {
$DIRECTION
    node [shape=box style="rounded,filled" fontname="helvetica" fillcolor="$NODE_COLOR" fontcolor="$NODE_FONT_COLOR" color="$NODE_BORDER_COLOR"];
    edge [fontname="helvetica" color="$EDGE_COLOR" fontcolor="$EDGE_COLOR"];
$INNER_CONTENT}
""")


class DisplayMode(Enum):
    INTERACTIVE = "interactive"
    PRESENTATION = "presentation"


def _escape(text: str) -> str:
    # Backslashes first, so the ones added below stay escapes
    return text.replace("\\", "\\\\").replace('"', '\\"')


def escape_label(label: str) -> str:
    """Quote a label, turning newlines into DOT line breaks."""
    return '"{}"'.format(_escape(label).replace("\n", "\\n "))


def escape_id(id_: str) -> str:
    return '"{}"'.format(_escape(id_))


class GraphVizExporter(Exporter):
    """Accumulates DOT statements and wraps them in a fixed template."""

    file_extension = "dot"

    def __init__(self, display_mode: DisplayMode = DisplayMode.INTERACTIVE,
                 palette: str = DEFAULT_PALETTE):
        self.display_mode = display_mode
        self._colors = resolve_palette(palette)
        self._direction = "TB"
        self._lines: List[str] = []

    def get_plugin_name(self) -> str:
        return "GraphViz DOT"

    def configure(self, options: Dict[str, Any]) -> None:
        if "display_mode" in options:
            self.display_mode = DisplayMode(options["display_mode"])
        if "palette" in options:
            self._colors = resolve_palette(options["palette"])

    @property
    def annotated(self) -> bool:
        return self.display_mode == DisplayMode.INTERACTIVE

    # ── Exporter callbacks ───────────────────────────────────────

    def set_direction(self, is_left_right: bool) -> None:
        self._direction = "LR" if is_left_right else "TB"

    def add_node(self, node_id: Identifier, label: Label, highlighted: bool = False) -> None:
        if self.annotated:
            label_text = textwrap.fill(f"{node_id}: {label}", width=WRAP_WIDTH)
        else:
            label_text = label.value

        attrs = f"label={escape_label(label_text)}"
        if highlighted:
            attrs += f' fillcolor="{self._colors["highlight"]}" penwidth=2'
        self._lines.append(f"    {escape_id(node_id.value)} [{attrs}];\n")

    def add_edge(self, edge_id: Identifier, from_id: Identifier, to_id: Identifier,
                 highlighted: bool = False) -> None:
        attrs = []
        if self.annotated:
            attrs.append(f"label={escape_label(edge_id.value)}")
        if highlighted:
            attrs.append(f'color="{self._colors["highlight"]}" penwidth=2')
        edge_attrs = f" [{' '.join(attrs)}]" if attrs else ""

        self._lines.append(
            f"    {escape_id(from_id.value)} -> {escape_id(to_id.value)}{edge_attrs};\n"
        )

    # ── Output ───────────────────────────────────────────────────

    def reset(self) -> None:
        self._direction = "TB"
        self._lines = []

    def render(self) -> str:
        direction = (
            f'    graph [fontname="helvetica" rankdir={self._direction} '
            f'ranksep=0.8 nodesep=0.4];'
        )
        return _TEMPLATE.substitute(
            DIRECTION=direction,
            NODE_COLOR=self._colors["node"],
            NODE_FONT_COLOR=self._colors["node_font"],
            NODE_BORDER_COLOR=self._colors["node_border"],
            EDGE_COLOR=self._colors["edge"],
            INNER_CONTENT="".join(self._lines),
        )
