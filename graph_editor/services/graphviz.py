"""
    GraphViz compile service — turns a DOT file into an image by running
    the external ``dot`` program.
"""
import logging
import re
import subprocess
from pathlib import Path
from typing import Optional

from .exceptions import RenderError

logger = logging.getLogger(__name__)

DOT_EXECUTABLE = "dot"

# dot - graphviz version 2.49.1 (20210923.0004)
_VERSION_PATTERN = re.compile(r'^dot - graphviz version (?P<ver>[0-9.]+)')


def installed_graphviz_version() -> Optional[str]:
    """Version of the installed ``dot`` program, or None if it can't be run."""
    try:
        result = subprocess.run(
            [DOT_EXECUTABLE, "-V"],
            capture_output=True,
            text=True,
        )
    except OSError:
        return None

    # dot prints its version on stderr
    match = _VERSION_PATTERN.match(result.stderr.strip())
    return match.group("ver") if match else None


def compile_dot(dot_file: Path, output_format: str) -> Path:
    """
    Compile ``dot_file`` to ``<same name>.<output_format>``.

    Returns:
        Path of the written image.

    Raises:
        RenderError: If GraphViz is not installed or the compile fails.
    """
    if installed_graphviz_version() is None:
        raise RenderError("graphviz not installed")

    out = dot_file.with_suffix(f".{output_format}")
    try:
        result = subprocess.run(
            [DOT_EXECUTABLE, str(dot_file), f"-T{output_format}", "-o", str(out)],
            capture_output=True,
            text=True,
        )
    except OSError as e:
        raise RenderError(f"could not run {DOT_EXECUTABLE}: {e}") from e

    if result.returncode != 0:
        raise RenderError(
            f"{DOT_EXECUTABLE} exited with {result.returncode}: {result.stderr.strip()}"
        )

    logger.info("Compiled %s -> %s", dot_file, out)
    return out
