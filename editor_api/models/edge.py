"""
    Edge model - a directed connection between two nodes.
"""
from typing import Any, Dict

from ..types import Identifier


class Edge:
    """
        Class for a directed edge.

        Endpoints are stored as identifiers, not node references, so a
        rename never touches the edge.  Self-loops and parallel edges
        are allowed.
    """

    def __init__(self, edge_id: Identifier, from_id: Identifier, to_id: Identifier):
        self.edge_id = edge_id
        self.from_id = from_id
        self.to_id = to_id
        self.highlighted = False

    def touches(self, node_id: Identifier) -> bool:
        """Check if either endpoint is the given node"""
        return self.from_id == node_id or self.to_id == node_id

    def __repr__(self) -> str:
        return f"Edge({self.edge_id}: {self.from_id} -> {self.to_id})"

    def __eq__(self, other) -> bool:
        """Two edges are equal if they have the same ID"""
        if not isinstance(other, Edge):
            return False
        return self.edge_id == other.edge_id

    def __hash__(self) -> int:
        """Hash edge by ID"""
        return hash(self.edge_id)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.edge_id.value,
            'from': self.from_id.value,
            'to': self.to_id.value,
        }
