"""Mini README: Viewer rendering subsystem package initialiser.

``base`` holds the renderer/session abstractions, ``registry`` the plugin
registry, ``providers`` the bundled Playwright backend and ``service`` the
orchestration of load, classify, apply and capture.
"""

from .base import RenderError, ViewerRenderer, ViewerSession
from .registry import REGISTRY, RendererRegistry
from .service import RenderResult, RenderService
from . import providers  # noqa: F401  # ensure built-in renderers register on import

__all__ = [
    "REGISTRY",
    "RenderError",
    "RenderResult",
    "RenderService",
    "RendererRegistry",
    "ViewerRenderer",
    "ViewerSession",
]
