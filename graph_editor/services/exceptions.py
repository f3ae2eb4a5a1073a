# graph_editor/services/exceptions.py

class GraphEditorError(Exception):
    """Base class for editor errors."""
    pass

class LockPoisonedError(GraphEditorError):
    """Raised when the graph lock was left in an unknown state by a failed writer."""
    pass

class RenderError(GraphEditorError):
    """Raised when the external diagram program is missing or fails."""
    pass

class DocumentFormatError(GraphEditorError):
    """Raised when a serialized graph document cannot be read."""
    pass
