"""
GraphViz DOT exporter plugin — structured-text rendering of the graph.
"""
from .plugin import DisplayMode, GraphVizExporter, escape_id, escape_label

__all__ = ['DisplayMode', 'GraphVizExporter', 'escape_id', 'escape_label']
