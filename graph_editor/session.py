"""
    EditorSession — drives the read → apply → render loop.

    Design Patterns applied
    ───────────────────────
    • Facade    – single entry-point for the console layer; hides the
                  lock, the parser, exporter discovery and persistence.
    • Strategy  – render backends are exporter plugins chosen by the
                  configured render method.
    • Command   – every input line becomes a ``Command`` object.

    The session owns the one graph of the editing session behind a
    ``ReadWriteLock``.  Graph commands take the write side; every render
    pass takes the read side once for the whole export, so all backends
    of a pass see the same snapshot.  Files are written and the external
    diagram program is run after the lock is released.

    Exporters accumulate state while they export, so the configured
    instances are kept as prototypes and every export works on its own
    copy.  Readers sharing the lock never share an exporter.
"""
import logging
from contextlib import contextmanager
from copy import deepcopy
from pathlib import Path
from typing import Dict, Iterator, Optional

from editor_api.exporters.base import Exporter
from editor_api.models.graph import Graph

from .cli.command_processor import CommandParser
from .cli.commands import (
    Command,
    CommandResult,
    GraphCommand,
    HelpCommand,
    PrintDotCommand,
    PrintJsonCommand,
    SaveCommand,
    ShowCommand,
    ExitCommand,
)
from .config import EditorConfig
from .interaction import Interaction
from .locking import ReadWriteLock
from .plugin_loader import create_exporter_loader
from .services.exceptions import RenderError
from .services.graphviz import compile_dot
from .services.serialization_service import GraphSerializer
from .services.viewer import open_diagram

logger = logging.getLogger(__name__)

PROMPT = ">> "

# exporters the print commands rely on, whatever the render method
_PRINT_EXPORTERS = ("dot", "json")


class EditorSession:
    """
    One editing session: one graph, one lock, one set of exporters.

    Usage:
        session = EditorSession.open(EditorConfig(json_file=path))
        session.run(ConsoleInteraction())
    """

    def __init__(self, graph: Graph, config: EditorConfig,
                 exporters: Optional[Dict[str, Exporter]] = None,
                 parser: Optional[CommandParser] = None):
        """
        Args:
            graph:     The graph to edit.  The session takes ownership.
            config:    Session configuration.
            exporters: Exporters by name.  Discovered from installed
                       plugins when omitted.
            parser:    Command parser (default grammar when omitted).
        """
        self._graph = graph
        self._lock = ReadWriteLock()
        self._config = config
        self._parser = parser or CommandParser()
        self._exporters = exporters if exporters is not None else self._discover_exporters()
        self._dirty = False

        for name, exporter in self._exporters.items():
            exporter.configure(config.options_for(name))

        logger.info("Session initialized on %s (%s).", config.json_file, config.render_method)

    @classmethod
    def open(cls, config: EditorConfig,
             exporters: Optional[Dict[str, Exporter]] = None) -> 'EditorSession':
        """Start a session on the document named in ``config``, loading it if present."""
        graph = GraphSerializer().load(config.json_file)
        return cls(graph, config, exporters)

    def _discover_exporters(self) -> Dict[str, Exporter]:
        loader = create_exporter_loader()
        exporters: Dict[str, Exporter] = {}
        for name in dict.fromkeys(self._config.exporter_names + _PRINT_EXPORTERS):
            plugin = loader.get(name)
            if plugin is None:
                raise ValueError(
                    f"Exporter plugin '{name}' not found. "
                    f"Available: {loader.get_names()}"
                )
            exporters[name] = plugin
        return exporters

    # ── Properties ───────────────────────────────────────────────

    @property
    def config(self) -> EditorConfig:
        return self._config

    @property
    def dirty(self) -> bool:
        """True when the graph changed since the last render."""
        return self._dirty

    @contextmanager
    def reading(self) -> Iterator[Graph]:
        """Shared access to the graph."""
        with self._lock.read():
            yield self._graph

    @contextmanager
    def writing(self) -> Iterator[Graph]:
        """Exclusive access to the graph."""
        with self._lock.write():
            yield self._graph

    # ── Command application ──────────────────────────────────────

    def apply(self, command: Command) -> CommandResult:
        """Run one command against the graph under the right side of the lock."""
        if command.mutates_graph:
            with self.writing() as graph:
                result = command.execute(graph)
        else:
            with self.reading() as graph:
                result = command.execute(graph)

        if result.dirty:
            self._dirty = True
        return result

    def handle(self, command: Command, interaction: Interaction) -> bool:
        """
        Carry out any command except exit and report to the user.

        Returns:
            Whether a re-render is needed.
        """
        if isinstance(command, GraphCommand):
            result = self.apply(command)
            interaction.log(f"({result})")
            return result.dirty

        if isinstance(command, HelpCommand):
            interaction.log(self.apply(command).message)
            return False

        if isinstance(command, ShowCommand):
            interaction.log(open_diagram(self._config.svg_file))
            return False

        if isinstance(command, PrintDotCommand):
            return self._print(interaction, "dot", "Dot printed")

        if isinstance(command, PrintJsonCommand):
            return self._print(interaction, "json", "Json printed")

        if isinstance(command, SaveCommand):
            interaction.log(f"saving to {self._config.json_file}")
            self._dirty = True
            return True

        # Parse errors report themselves; a half-typed rename stays silent
        result = self.apply(command)
        if not result.success and result.message:
            interaction.log(result.message)
        return False

    def new_exporter(self, name: str) -> Optional[Exporter]:
        """A fresh copy of the configured exporter, or None if not installed."""
        prototype = self._exporters.get(name)
        return None if prototype is None else deepcopy(prototype)

    def _print(self, interaction: Interaction, name: str, done: str) -> bool:
        exporter = self.new_exporter(name)
        if exporter is None:
            interaction.log(f"no '{name}' exporter installed")
            return False
        with self.reading() as graph:
            out = exporter.export(graph, self._config.left_right)
        interaction.log(out)
        interaction.log(done)
        return False

    # ── The loop ─────────────────────────────────────────────────

    def run(self, interaction: Interaction) -> None:
        """
        Read commands until exit, end of input or interrupt.

        A failing input stream or a poisoned lock propagates to the caller.
        """
        # When we start, make sure the files on disk match the graph
        self.render(interaction)

        while True:
            try:
                line = interaction.read(PROMPT)
            except EOFError:
                interaction.log("CTRL-D")
                break
            except KeyboardInterrupt:
                interaction.log("CTRL-C")
                break

            interaction.add_history(line)
            command = self._parser.parse(line)

            if isinstance(command, ExitCommand):
                break

            if self.handle(command, interaction):
                self.render(interaction)

        # Whatever ended the loop, the last committed command is rendered
        if self._dirty:
            self.render(interaction)
        logger.info("Session on %s ended.", self._config.json_file)

    # ── Rendering ────────────────────────────────────────────────

    def export_all(self) -> Dict[str, str]:
        """Export through every configured backend from one snapshot."""
        exporters: Dict[str, Exporter] = {}
        for name in self._config.exporter_names:
            exporter = self.new_exporter(name)
            if exporter is None:
                logger.error("Exporter '%s' not available; skipped.", name)
                continue
            exporters[name] = exporter

        outputs: Dict[str, str] = {}
        with self.reading() as graph:
            for name, exporter in exporters.items():
                outputs[name] = exporter.export(graph, self._config.left_right)
        return outputs

    def render(self, interaction: Interaction) -> Dict[str, Path]:
        """
        Export, write the files, and compile the DOT file when asked to.
        Write and compile failures are logged; the session carries on.

        Returns:
            Paths written, by exporter name (compiled images under their format).
        """
        outputs = self.export_all()
        self._dirty = False

        written: Dict[str, Path] = {}
        for name, text in outputs.items():
            path = self._output_path(name)
            try:
                path.write_text(text, encoding="utf-8")
            except OSError as e:
                logger.error("Could not write %s: %s", path, e)
                interaction.log(f"failed to write {path}: {e}")
                continue
            written[name] = path
            logger.debug("Wrote %s", path)

        if "dot" in written and self._config.compile and interaction.should_compile():
            written.update(self._compile(written["dot"], interaction))

        return written

    def _output_path(self, name: str) -> Path:
        if name == "json":
            return self._config.json_file
        return self._config.output_path(self._exporters[name].file_extension)

    def _compile(self, dot_file: Path, interaction: Interaction) -> Dict[str, Path]:
        images: Dict[str, Path] = {}
        for fmt in self._config.output_formats:
            try:
                images[fmt] = compile_dot(dot_file, fmt)
            except RenderError as e:
                logger.error("Failed to compile %s to %s: %s", dot_file, fmt, e)
                interaction.log(f"failed to compile dot to {fmt}: {e}")
        return images

    def __repr__(self) -> str:
        return (
            f"EditorSession(file='{self._config.json_file}', "
            f"method={self._config.render_method}, "
            f"exporters={sorted(self._exporters)})"
        )
