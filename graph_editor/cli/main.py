"""CLI entrypoint for graph-editor."""

import logging
from pathlib import Path
from typing import Optional, Tuple

import click

from .. import __version__
from ..config import DEFAULT_JSON_FILE, RENDER_METHODS, EditorConfig
from ..interaction import ConsoleInteraction, ScriptedInteraction
from ..session import EditorSession
from ..services.exceptions import DocumentFormatError, GraphEditorError


@click.command()
@click.version_option(__version__, prog_name="graph-editor")
@click.option(
    "--file",
    "-f",
    "json_file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=DEFAULT_JSON_FILE,
    show_default=True,
    help="Graph document; .dot and image files are written next to it",
)
@click.option(
    "--render",
    "render_method",
    type=click.Choice(sorted(RENDER_METHODS)),
    default="graphviz",
    show_default=True,
    help="Render through GraphViz or the built-in force-directed layout",
)
@click.option("--presentation", is_flag=True, help="Plain labels, no ids in the diagram")
@click.option("--left-right", is_flag=True, help="Lay the diagram out left to right")
@click.option("--no-compile", is_flag=True, help="Write the .dot file but don't run GraphViz")
@click.option(
    "--format",
    "formats",
    multiple=True,
    default=("svg", "png"),
    show_default=True,
    help="Image format(s) GraphViz compiles to",
)
@click.option("--palette", default="default", show_default=True, help="Colour palette of the diagram")
@click.option(
    "--script",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Run the commands in this file instead of prompting",
)
@click.option("--verbose", "-v", is_flag=True, help="Log debug output")
def main(
    json_file: Path,
    render_method: str,
    presentation: bool,
    left_right: bool,
    no_compile: bool,
    formats: Tuple[str, ...],
    palette: str,
    script: Optional[Path],
    verbose: bool,
) -> None:
    """graph-editor - edit a small directed graph one command at a time.

    Type 'h' at the prompt for the list of commands.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    config = EditorConfig(
        json_file=json_file,
        render_method=render_method,
        display_mode="presentation" if presentation else "interactive",
        left_right=left_right,
        compile=not no_compile,
        output_formats=tuple(formats),
        palette=palette,
    )

    try:
        session = EditorSession.open(config)
    except DocumentFormatError as e:
        raise click.ClickException(f"could not load {json_file}: {e}")
    except ValueError as e:
        raise click.ClickException(str(e))

    if script is not None:
        lines = script.read_text(encoding="utf-8").splitlines()
        interaction = ScriptedInteraction(lines, compile_diagrams=not no_compile, echo=True)
    else:
        interaction = ConsoleInteraction(compile_diagrams=not no_compile)

    try:
        session.run(interaction)
    except GraphEditorError as e:
        raise click.ClickException(str(e))
    except OSError as e:
        raise click.ClickException(f"input error: {e}")


if __name__ == "__main__":
    main()
