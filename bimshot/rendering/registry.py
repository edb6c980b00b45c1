"""Mini README: Renderer registry enabling pluggable browser backends.

Structure:
    * RendererRegistry - maps renderer names to ``ViewerRenderer`` classes.

Built-in renderers register on import; third-party packages can expose
``bimshot.renderers`` entry points picked up by ``load_plugins``.
"""

from __future__ import annotations

from typing import Dict, Iterable, Optional, Type

from ..configuration import BimshotSettings
from ..logging_utils import get_logger
from ..utils.plugin_loader import load_entry_point_plugins
from .base import ViewerRenderer

LOGGER = get_logger(__name__)


class RendererRegistry:
    """Simple registry for mapping renderer identifiers to classes."""

    def __init__(self) -> None:
        self._renderers: Dict[str, Type[ViewerRenderer]] = {}

    def register(self, renderer: Type[ViewerRenderer]) -> Type[ViewerRenderer]:
        """Register a renderer class; usable as a class decorator."""

        identifier = renderer.renderer_name.lower()
        LOGGER.debug("Registering renderer '%s'", identifier)
        self._renderers[identifier] = renderer
        return renderer

    def unregister(self, identifier: str) -> None:
        self._renderers.pop(identifier.lower(), None)

    def available_renderers(self) -> Iterable[str]:
        """Return renderer identifiers in display order."""

        return sorted(self._renderers.keys())

    def create(self, identifier: str, *, settings: Optional[BimshotSettings] = None) -> ViewerRenderer:
        """Instantiate the renderer matching the identifier."""

        renderer_cls = self._renderers.get(identifier.lower())
        if not renderer_cls:
            raise KeyError(f"Unknown renderer '{identifier}'")
        LOGGER.info("Creating renderer '%s'", identifier)
        return renderer_cls(settings=settings)

    def load_plugins(self, group: str = "bimshot.renderers") -> int:
        """Register renderer classes advertised through entry points."""

        count = 0
        for plugin in load_entry_point_plugins(group):
            if isinstance(plugin, type) and issubclass(plugin, ViewerRenderer):
                self.register(plugin)
                count += 1
            else:
                LOGGER.warning("Ignoring plugin %r: not a ViewerRenderer subclass", plugin)
        return count


REGISTRY = RendererRegistry()
