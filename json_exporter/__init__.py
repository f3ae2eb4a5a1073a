"""
JSON exporter plugin — serialized-document rendering of the graph.
"""
from .plugin import JsonExporter

__all__ = ['JsonExporter']
