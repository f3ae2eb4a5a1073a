"""
Graph Editor API — entity model and exporter contract.
"""
from .types import Identifier, Label, IdAllocator
from .models.node import Node
from .models.edge import Edge
from .models.graph import Graph
from .exporters.base import Exporter

__all__ = [
    'Identifier',
    'Label',
    'IdAllocator',
    'Node',
    'Edge',
    'Graph',
    'Exporter',
]
