"""
Exporter contract — the only coupling point between the graph and a renderer.
"""
from .base import Exporter

__all__ = ['Exporter']
