"""Mini README: Tests for the renderer registry.

Ensures the bundled Playwright renderer registers on import and that the
registry instantiates and rejects renderers as expected.
"""

import pytest

from bimshot.configuration import BimshotSettings
from bimshot.rendering import REGISTRY, RendererRegistry, ViewerRenderer


def test_registry_contains_playwright_renderer():
    assert "playwright" in REGISTRY.available_renderers()


def test_registry_instantiates_renderer():
    settings = BimshotSettings(viewer_url="http://viewer.local/viewer.html")
    renderer = REGISTRY.create("Playwright", settings=settings)
    assert isinstance(renderer, ViewerRenderer)
    assert renderer.renderer_name == "playwright"
    assert renderer.metadata()["viewer_url"] == "http://viewer.local/viewer.html"


def test_registry_rejects_unknown_renderer():
    with pytest.raises(KeyError):
        RendererRegistry().create("selenium")


def test_registry_without_plugins_loads_nothing():
    assert RendererRegistry().load_plugins("bimshot.tests.no-such-group") == 0
