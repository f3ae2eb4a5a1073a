"""
    Value types for the entity model: identifiers, labels and the
    allocator that issues identifiers.
"""
from dataclasses import dataclass

NODE_PREFIX = "n"
EDGE_PREFIX = "e"


@dataclass(frozen=True)
class Identifier:
    """
    Opaque, stable key of a node or an edge.

    Node and edge identifiers never collide because the allocator
    gives them distinct prefixes.
    """
    value: str

    def __post_init__(self):
        # Ensure the wrapped value is always a string for consistent comparisons
        object.__setattr__(self, 'value', str(self.value))

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Label:
    """User-visible text attached to a node. No uniqueness constraint."""
    value: str

    def __post_init__(self):
        object.__setattr__(self, 'value', str(self.value))

    def __str__(self) -> str:
        return self.value

    def contains(self, text: str) -> bool:
        """Case-insensitive substring check used by search."""
        return text.lower() in self.value.lower()


class IdAllocator:
    """
    Issues identifiers ``n0, n1, ...`` for nodes and ``e0, e1, ...`` for
    edges from two independent counters.  Identifiers are never reclaimed,
    so a deleted entity's id can't be confused with a later one.
    """

    def __init__(self, node_high_water: int = 0, edge_high_water: int = 0):
        self._node_high_water = node_high_water
        self._edge_high_water = edge_high_water

    @property
    def node_high_water(self) -> int:
        return self._node_high_water

    @property
    def edge_high_water(self) -> int:
        return self._edge_high_water

    def next_node_id(self) -> Identifier:
        id_ = Identifier(f"{NODE_PREFIX}{self._node_high_water}")
        self._node_high_water += 1
        return id_

    def next_edge_id(self) -> Identifier:
        id_ = Identifier(f"{EDGE_PREFIX}{self._edge_high_water}")
        self._edge_high_water += 1
        return id_

    def observe(self, identifier: Identifier) -> None:
        """
        Advance the matching counter past an identifier issued elsewhere
        (e.g. read back from a saved document).  Identifiers that don't
        follow the ``<prefix><counter>`` shape are ignored.
        """
        raw = identifier.value
        prefix, counter = raw[:1], raw[1:]
        if not counter.isdigit():
            return
        if prefix == NODE_PREFIX:
            self._node_high_water = max(self._node_high_water, int(counter) + 1)
        elif prefix == EDGE_PREFIX:
            self._edge_high_water = max(self._edge_high_water, int(counter) + 1)

    def __repr__(self) -> str:
        return (f"IdAllocator(nodes={self._node_high_water}, "
                f"edges={self._edge_high_water})")
