"""
    Opens a rendered diagram in the platform's default viewer.
"""
import logging
from pathlib import Path

import click

logger = logging.getLogger(__name__)


def open_diagram(path: Path) -> str:
    """Launch the viewer for ``path`` and describe the outcome."""
    if not path.exists():
        return f"no diagram at {path}; nothing has been rendered yet"

    exit_code = click.launch(str(path.resolve()))
    if exit_code != 0:
        logger.error("Viewer exited with %s for %s", exit_code, path)
        return f"could not open {path} (viewer exit code {exit_code})"
    return f"opened {path}"
