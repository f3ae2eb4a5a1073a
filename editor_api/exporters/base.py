"""
    Abstract base class for exporters.
    Defines the "Contract" that every render backend follows.
"""
from abc import ABC, abstractmethod
from typing import Any, Dict, TYPE_CHECKING

from ..types import Identifier, Label

if TYPE_CHECKING:
    from ..models.graph import Graph


class Exporter(ABC):
    """
        Abstract base class for render backends.
        Pattern: Visitor-style callbacks + Template Method (``export``).

        The graph drives the callbacks; a backend never pulls data out of
        the graph itself, so a new format needs no change to the store.
    """

    #: File extension of the rendered output (without the dot).
    file_extension = "txt"

    @abstractmethod
    def get_plugin_name(self) -> str:
        """
            Returns the human-readable name of the backend.
            Example: "GraphViz DOT"
        """
        pass

    @abstractmethod
    def set_direction(self, is_left_right: bool) -> None:
        """Called once, before any node, with the layout direction."""
        pass

    @abstractmethod
    def add_node(self, node_id: Identifier, label: Label, highlighted: bool = False) -> None:
        """Called once per node, in creation order."""
        pass

    @abstractmethod
    def add_edge(self, edge_id: Identifier, from_id: Identifier, to_id: Identifier,
                 highlighted: bool = False) -> None:
        """Called once per edge, in creation order, after all nodes."""
        pass

    @abstractmethod
    def reset(self) -> None:
        """Discard anything accumulated by a previous export."""
        pass

    @abstractmethod
    def render(self) -> str:
        """Produce the final output from the accumulated callbacks."""
        pass

    def configure(self, options: Dict[str, Any]) -> None:
        """
        Apply backend-specific options.  Unknown keys are ignored.
        Override in backends that take options.
        """
        pass

    def export(self, graph: 'Graph', left_right: bool = False) -> str:
        """
        Template Method: reset → let the graph walk through the callbacks → render.

        Exporting the same graph twice yields identical output.
        """
        self.reset()
        graph.export(self, left_right)
        return self.render()
