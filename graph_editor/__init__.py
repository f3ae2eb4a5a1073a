"""
Graph Editor — core package.

Public API:
    EditorSession   – owns the graph and drives the read/apply/render loop
    EditorConfig    – session configuration
    ReadWriteLock   – single-writer / multi-reader lock around the graph
    PluginLoader    – exporter plugin discovery
"""
from .session import EditorSession
from .config import EditorConfig
from .locking import ReadWriteLock
from .plugin_loader import PluginLoader, create_exporter_loader

__version__ = "1.0.0"

__all__ = [
    'EditorSession',
    'EditorConfig',
    'ReadWriteLock',
    'PluginLoader',
    'create_exporter_loader',
]
