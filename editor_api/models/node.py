"""
    Node model - representation of a node in the graph
"""
from typing import Any, Dict

from ..types import Identifier, Label


class Node:
    """
    A node has a stable identifier and a mutable label.
    ``highlighted`` is a presentation flag set by search; it is not
    part of the node's identity and is never persisted.
    """

    def __init__(self, node_id: Identifier, label: Label):
        self.node_id = node_id
        self.label = label
        self.highlighted = False

    def rename(self, label: Label) -> Label:
        """Overwrite the label in place and return the previous one."""
        old = self.label
        self.label = label
        return old

    def __repr__(self) -> str:
        return f"Node({self.node_id}, {self.label!r})"

    def __eq__(self, other) -> bool:
        """Two nodes are equal if they have the same ID"""
        if not isinstance(other, Node):
            return False
        return self.node_id == other.node_id

    def __hash__(self) -> int:
        """Hash node by ID"""
        return hash(self.node_id)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.node_id.value,
            'label': self.label.value,
        }
