"""
Core services — serialization, diagram compilation, viewing, and exceptions.
"""
from .exceptions import GraphEditorError, LockPoisonedError, RenderError, DocumentFormatError
from .serialization_service import GraphSerializer
from .graphviz import installed_graphviz_version, compile_dot
from .viewer import open_diagram

__all__ = [
    'GraphEditorError',
    'LockPoisonedError',
    'RenderError',
    'DocumentFormatError',
    'GraphSerializer',
    'installed_graphviz_version',
    'compile_dot',
    'open_diagram',
]
