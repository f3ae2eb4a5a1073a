"""
    Editor configuration — file locations, render method and
    per-exporter options.

    Provides a typed configuration object with defaults in code; the
    console entry point overrides fields from its command-line options.
"""
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Tuple

DEFAULT_JSON_FILE = Path.home() / "graph_editor_graph.json"

# render method -> exporter names rendered on every dirty command
RENDER_METHODS: Dict[str, Tuple[str, ...]] = {
    "graphviz": ("json", "dot"),
    "fdg": ("json", "fdg"),
}


@dataclass
class EditorConfig:
    """
    Top-level configuration for an editing session.

    Attributes:
        json_file:        Serialized document.  The DOT file and rendered
                          images live next to it with other extensions.
        render_method:    ``"graphviz"`` (DOT compiled by the ``dot``
                          program) or ``"fdg"`` (built-in force-directed SVG).
        display_mode:     ``"interactive"`` (annotated) or ``"presentation"``.
        left_right:       Lay the diagram out left-to-right instead of top-down.
        compile:          Invoke the external diagram program after export.
        output_formats:   Image formats the DOT file is compiled to.
        palette:          Colour palette name for the DOT backend.
        exporter_options: Extra options per exporter name, merged over the
                          ones derived from the fields above.
    """
    json_file: Path = DEFAULT_JSON_FILE
    render_method: str = "graphviz"
    display_mode: str = "interactive"
    left_right: bool = False
    compile: bool = True
    output_formats: Tuple[str, ...] = ("svg", "png")
    palette: str = "default"
    exporter_options: Dict[str, Dict[str, Any]] = field(default_factory=dict)

    def __post_init__(self):
        self.json_file = Path(self.json_file)
        if self.render_method not in RENDER_METHODS:
            raise ValueError(
                f"Unknown render method: '{self.render_method}'. "
                f"Use one of {sorted(RENDER_METHODS)}."
            )

    @property
    def exporter_names(self) -> Tuple[str, ...]:
        return RENDER_METHODS[self.render_method]

    @property
    def dot_file(self) -> Path:
        return self.json_file.with_suffix(".dot")

    @property
    def svg_file(self) -> Path:
        return self.json_file.with_suffix(".svg")

    def output_path(self, extension: str) -> Path:
        return self.json_file.with_suffix(f".{extension}")

    def options_for(self, exporter_name: str) -> Dict[str, Any]:
        """Options passed to ``Exporter.configure`` for the named exporter."""
        options: Dict[str, Any] = {}
        if exporter_name == "dot":
            options = {"display_mode": self.display_mode, "palette": self.palette}
        elif exporter_name == "fdg":
            options = {"annotated": self.display_mode == "interactive"}
        options.update(self.exporter_options.get(exporter_name, {}))
        return options
