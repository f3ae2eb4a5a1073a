"""
    FdgExporter — lays the graph out with a force-directed simulation and
    writes the diagram as SVG.  Unlike the DOT backend, no external
    program is involved.
"""
import re
from typing import Any, Dict, List, Tuple

from lxml import etree

from editor_api.exporters.base import Exporter
from editor_api.types import Identifier, Label

from .layout import ForceLayout, LayoutSettings, Point

SVG_NS = "http://www.w3.org/2000/svg"

MARGIN = 20.0
BOX_HEIGHT = 30.0
CHAR_WIDTH = 7.0
MIN_BOX_WIDTH = 40.0
LOOP_RADIUS = 14.0

NODE_FILL = "#FFDD99"
HIGHLIGHT_FILL = "#73DBE6"
STROKE = "#485478"
FONT_COLOR = "#242D48"


# Characters XML 1.0 can't carry, control characters among them
_XML_INVALID = re.compile("[^\u0009\u000A\u000D\u0020-\uD7FF\uE000-\uFFFD\U00010000-\U0010FFFF]")


def _xml_safe(text: str) -> str:
    """Replace characters lxml refuses with U+FFFD."""
    return _XML_INVALID.sub("\ufffd", text)


def _tag(name: str) -> str:
    return f"{{{SVG_NS}}}{name}"


def _fmt(value: float) -> str:
    return f"{value:.1f}"


class FdgExporter(Exporter):
    """Collects nodes and edges, runs ``ForceLayout``, then draws boxes and lines."""

    file_extension = "svg"

    def __init__(self, settings: LayoutSettings = None, annotated: bool = True):
        self.settings = settings or LayoutSettings()
        self.annotated = annotated
        self._nodes: List[Tuple[Identifier, str, bool]] = []
        self._edges: List[Tuple[Identifier, Identifier, Identifier, bool]] = []

    def get_plugin_name(self) -> str:
        return "Force-directed SVG"

    def configure(self, options: Dict[str, Any]) -> None:
        for key in ("spring_length", "min_displacement", "cooling"):
            if key in options:
                setattr(self.settings, key, float(options[key]))
        if "max_iterations" in options:
            self.settings.max_iterations = int(options["max_iterations"])
        if "annotated" in options:
            self.annotated = bool(options["annotated"])

    # ── Exporter callbacks ───────────────────────────────────────

    def set_direction(self, is_left_right: bool) -> None:
        # The simulation has no preferred axis
        pass

    def add_node(self, node_id: Identifier, label: Label, highlighted: bool = False) -> None:
        text = f"{node_id}: {label}" if self.annotated else label.value
        self._nodes.append((node_id, _xml_safe(text), highlighted))

    def add_edge(self, edge_id: Identifier, from_id: Identifier, to_id: Identifier,
                 highlighted: bool = False) -> None:
        self._edges.append((edge_id, from_id, to_id, highlighted))

    def reset(self) -> None:
        self._nodes = []
        self._edges = []

    # ── Layout + drawing ─────────────────────────────────────────

    def layout(self) -> Dict[Identifier, Point]:
        """Run the simulation on the accumulated nodes and edges."""
        sim = ForceLayout(self.settings)
        for node_id, _, _ in self._nodes:
            sim.add_node(node_id)
        for _, from_id, to_id, _ in self._edges:
            sim.add_spring(from_id, to_id)
        return sim.run()

    @staticmethod
    def _box_width(text: str) -> float:
        return max(MIN_BOX_WIDTH, CHAR_WIDTH * len(text) + 20)

    def render(self) -> str:
        positions = self.layout()
        half_sizes = {
            node_id: (self._box_width(text) / 2, BOX_HEIGHT / 2)
            for node_id, text, _ in self._nodes
        }

        # Bounding box of every placed node, loops included
        if positions:
            min_x = min(positions[n][0] - hw for n, (hw, _) in half_sizes.items())
            max_x = max(positions[n][0] + hw for n, (hw, _) in half_sizes.items())
            min_y = min(positions[n][1] - hh - 2 * LOOP_RADIUS for n, (_, hh) in half_sizes.items())
            max_y = max(positions[n][1] + hh for n, (_, hh) in half_sizes.items())
        else:
            min_x = max_x = min_y = max_y = 0.0

        width = max_x - min_x + 2 * MARGIN
        height = max_y - min_y + 2 * MARGIN

        def place(node_id: Identifier) -> Point:
            x, y = positions[node_id]
            return x - min_x + MARGIN, y - min_y + MARGIN

        svg = etree.Element(_tag("svg"), nsmap={None: SVG_NS}, attrib={
            "width": _fmt(width),
            "height": _fmt(height),
            "viewBox": f"0 0 {_fmt(width)} {_fmt(height)}",
        })
        self._add_arrow_marker(svg)

        edges_group = etree.SubElement(svg, _tag("g"), attrib={"class": "edges"})
        for edge_id, from_id, to_id, highlighted in self._edges:
            color = HIGHLIGHT_FILL if highlighted else STROKE
            if from_id == to_id:
                self._draw_loop(edges_group, edge_id, place(from_id), half_sizes[from_id], color)
                continue
            start = place(from_id)
            end = place(to_id)
            x1, y1 = self._clip(start, end, half_sizes[from_id])
            x2, y2 = self._clip(end, start, half_sizes[to_id])
            line = etree.SubElement(edges_group, _tag("line"), attrib={
                "id": _xml_safe(edge_id.value),
                "x1": _fmt(x1), "y1": _fmt(y1), "x2": _fmt(x2), "y2": _fmt(y2),
                "stroke": color,
                "stroke-width": "2" if highlighted else "1",
                "marker-end": "url(#arrow)",
            })
            etree.SubElement(line, _tag("title")).text = _xml_safe(edge_id.value)

        nodes_group = etree.SubElement(svg, _tag("g"), attrib={"class": "nodes"})
        for node_id, text, highlighted in self._nodes:
            x, y = place(node_id)
            hw, hh = half_sizes[node_id]
            group = etree.SubElement(nodes_group, _tag("g"), attrib={"id": _xml_safe(node_id.value)})
            etree.SubElement(group, _tag("rect"), attrib={
                "x": _fmt(x - hw), "y": _fmt(y - hh),
                "width": _fmt(2 * hw), "height": _fmt(2 * hh),
                "rx": "6",
                "fill": HIGHLIGHT_FILL if highlighted else NODE_FILL,
                "stroke": STROKE,
            })
            label = etree.SubElement(group, _tag("text"), attrib={
                "x": _fmt(x), "y": _fmt(y + 4),
                "text-anchor": "middle",
                "font-family": "helvetica",
                "font-size": "12",
                "fill": FONT_COLOR,
            })
            label.text = text

        return etree.tostring(svg, pretty_print=True, encoding="unicode")

    @staticmethod
    def _add_arrow_marker(svg: etree._Element) -> None:
        defs = etree.SubElement(svg, _tag("defs"))
        marker = etree.SubElement(defs, _tag("marker"), attrib={
            "id": "arrow",
            "viewBox": "0 0 10 10",
            "refX": "10", "refY": "5",
            "markerWidth": "8", "markerHeight": "8",
            "orient": "auto-start-reverse",
        })
        etree.SubElement(marker, _tag("path"), attrib={"d": "M 0 0 L 10 5 L 0 10 z", "fill": STROKE})

    @staticmethod
    def _clip(origin: Point, towards: Point, half_size: Tuple[float, float]) -> Point:
        """Point where the segment origin -> towards leaves the origin's box."""
        dx = towards[0] - origin[0]
        dy = towards[1] - origin[1]
        hw, hh = half_size
        scales = []
        if dx:
            scales.append(hw / abs(dx))
        if dy:
            scales.append(hh / abs(dy))
        t = min(scales + [1.0])
        return origin[0] + dx * t, origin[1] + dy * t

    @staticmethod
    def _draw_loop(parent: etree._Element, edge_id: Identifier, center: Point,
                   half_size: Tuple[float, float], color: str) -> None:
        x, y = center
        top = y - half_size[1]
        d = (f"M {_fmt(x - LOOP_RADIUS / 2)} {_fmt(top)} "
             f"A {_fmt(LOOP_RADIUS)} {_fmt(LOOP_RADIUS)} 0 1 1 {_fmt(x + LOOP_RADIUS / 2)} {_fmt(top)}")
        path = etree.SubElement(parent, _tag("path"), attrib={
            "id": _xml_safe(edge_id.value),
            "d": d,
            "fill": "none",
            "stroke": color,
            "marker-end": "url(#arrow)",
        })
        etree.SubElement(path, _tag("title")).text = _xml_safe(edge_id.value)
