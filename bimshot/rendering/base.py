"""Mini README: Abstract base classes describing viewer renderers.

Structure:
    * ViewerSession - one open viewer page the proxy can drive.
    * ViewerRenderer - abstract interface implemented by browser backends.
    * RenderError - raised when a backend fails to produce a screenshot.

A renderer owns the browser lifecycle; a session exposes just the steps the
render service needs, so the service can be exercised with a fake session.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import AsyncContextManager, Dict, List, Optional

from ..configuration import BimshotSettings, get_settings
from ..logging_utils import get_logger

LOGGER = get_logger(__name__)


class RenderError(RuntimeError):
    """The viewer could not be loaded, driven or captured."""


class ViewerSession(ABC):
    """A loaded viewer page."""

    @abstractmethod
    async def load_model(self, model_url: str) -> None:
        """Ask the viewer to load the model at ``model_url``."""

    @abstractmethod
    async def wait_until_ready(self) -> None:
        """Block until the viewer reports the model as ready."""

    @abstractmethod
    async def list_object_ids(self) -> List[str]:
        """Return the identifiers of every object in the scene."""

    @abstractmethod
    async def apply_visual_states(self, states: Dict[str, dict]) -> None:
        """Set ``colorize``, ``opacity`` and ``visible`` on scene objects."""

    @abstractmethod
    async def screenshot(self) -> bytes:
        """Capture the viewport as PNG bytes."""


class ViewerRenderer(ABC):
    """Base interface for browser backends."""

    renderer_name: str = "generic"

    def __init__(self, settings: Optional[BimshotSettings] = None) -> None:
        self.settings = settings or get_settings()
        LOGGER.debug(
            "Initialising %s renderer for viewer '%s'", self.renderer_name, self.settings.viewer_url
        )

    @abstractmethod
    def open_session(self) -> AsyncContextManager[ViewerSession]:
        """Open the viewer page; closing the context releases the browser."""

    def metadata(self) -> Dict[str, str]:
        """Return diagnostic metadata for health checks."""

        return {
            "renderer": self.renderer_name,
            "viewer_url": self.settings.viewer_url,
        }
