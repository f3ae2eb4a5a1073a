"""
Force-directed exporter plugin — lays the graph out itself and emits SVG.
"""
from .layout import ForceLayout, LayoutSettings
from .plugin import FdgExporter

__all__ = ['ForceLayout', 'LayoutSettings', 'FdgExporter']
