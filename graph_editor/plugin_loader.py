"""
    Exporter discovery through entry points.

    Design Pattern: Service Locator / Registry
    ────────────────────────────────────────────
    Render backends ship as packages that register a class under the
    ``graph_editor.exporter`` entry-point group (see setup.py).  The
    session asks the loader for backends by name and never imports a
    backend module itself.
"""
import importlib.metadata
import logging
from typing import Dict, Generic, Iterator, List, Optional, Type, TypeVar

from editor_api.exporters.base import Exporter

logger = logging.getLogger(__name__)

TPlugin = TypeVar('TPlugin')

EXPORTER_EP_GROUP = 'graph_editor.exporter'


class PluginLoader(Generic[TPlugin]):
    """
    Instantiates every class registered under one entry-point group,
    keeping only subclasses of ``base``.  Discovery runs lazily on
    first use and again on ``reload``.

    Usage:
        loader = create_exporter_loader()
        dot = loader.get('dot')              # Optional[Exporter]
        loader.get_names()                   # ['dot', 'fdg', 'json']
    """

    def __init__(self, base: Type[TPlugin], group: str):
        self._base = base
        self._group = group
        self._plugins: Optional[Dict[str, TPlugin]] = None

    @property
    def plugins(self) -> Dict[str, TPlugin]:
        if self._plugins is None:
            self._plugins = dict(self._discover())
        return self._plugins

    def _discover(self) -> Iterator:
        for ep in importlib.metadata.entry_points(group=self._group):
            try:
                plugin_cls = ep.load()
            except Exception as exc:
                logger.error("Could not import exporter '%s' (%s): %s", ep.name, ep.value, exc)
                continue

            if not (isinstance(plugin_cls, type) and issubclass(plugin_cls, self._base)):
                logger.warning("'%s' is not a %s; skipped.", ep.name, self._base.__name__)
                continue

            logger.info("Loaded plugin: %s (%s)", ep.name, plugin_cls.__name__)
            yield ep.name, plugin_cls()

    def load_all(self) -> Dict[str, TPlugin]:
        """Every discovered plugin by entry-point name."""
        return self.plugins

    def get(self, name: str) -> Optional[TPlugin]:
        return self.plugins.get(name)

    def get_names(self) -> List[str]:
        return sorted(self.plugins)

    def reload(self) -> Dict[str, TPlugin]:
        """Forget what was found and scan the group again."""
        self._plugins = None
        return self.plugins

    def __len__(self) -> int:
        return len(self.plugins)

    def __contains__(self, name: str) -> bool:
        return name in self.plugins

    def __repr__(self) -> str:
        found = "?" if self._plugins is None else len(self._plugins)
        return f"PluginLoader(base={self._base.__name__}, group='{self._group}', found={found})"


def create_exporter_loader() -> PluginLoader[Exporter]:
    """Loader for render backends."""
    return PluginLoader(Exporter, EXPORTER_EP_GROUP)
