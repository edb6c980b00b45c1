"""Mini README: Headless Chromium renderer built on Playwright.

Structure:
    * PlaywrightSession - drives one viewer page through injected scripts.
    * PlaywrightRenderer - launches Chromium and yields sessions.

The viewer page is expected to expose ``window.loadModelAndCapture(url)``,
set ``window.modelIsReady = true`` once the model is on screen, and keep
its scene objects in ``window.viewer.scene.objects``.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator, Dict, List

from playwright.async_api import ConsoleMessage, Page, async_playwright

from ...logging_utils import get_logger
from ..base import ViewerRenderer, ViewerSession
from ..registry import REGISTRY

LOGGER = get_logger(__name__)

CHROMIUM_ARGS = ["--no-sandbox", "--disable-setuid-sandbox"]

LOAD_MODEL_SCRIPT = "async (modelUrl) => { await window.loadModelAndCapture(modelUrl); }"
READY_PREDICATE = "() => window.modelIsReady === true"
LIST_OBJECTS_SCRIPT = """() => {
    const scene = window.viewer && window.viewer.scene;
    return scene && scene.objects ? Object.keys(scene.objects) : [];
}"""
APPLY_STATES_SCRIPT = """(states) => {
    const objects = window.viewer.scene.objects;
    let applied = 0;
    for (const [id, state] of Object.entries(states)) {
        const entity = objects[id];
        if (!entity) continue;
        entity.colorize = state.colorize;
        entity.opacity = state.opacity;
        entity.visible = state.visible;
        applied += 1;
    }
    return applied;
}"""


def _forward_console(message: ConsoleMessage) -> None:
    LOGGER.debug("PAGE LOG: %s", message.text)


class PlaywrightSession(ViewerSession):
    """Viewer page controlled through ``page.evaluate``."""

    def __init__(self, page: Page, *, ready_timeout_ms: float) -> None:
        self.page = page
        self.ready_timeout_ms = ready_timeout_ms

    async def load_model(self, model_url: str) -> None:
        LOGGER.info("Loading model %s", model_url)
        await self.page.evaluate(LOAD_MODEL_SCRIPT, model_url)

    async def wait_until_ready(self) -> None:
        await self.page.wait_for_function(READY_PREDICATE, timeout=self.ready_timeout_ms)

    async def list_object_ids(self) -> List[str]:
        return [str(object_id) for object_id in await self.page.evaluate(LIST_OBJECTS_SCRIPT)]

    async def apply_visual_states(self, states: Dict[str, dict]) -> None:
        applied = await self.page.evaluate(APPLY_STATES_SCRIPT, states)
        LOGGER.debug("Applied visual states to %s of %s objects", applied, len(states))

    async def screenshot(self) -> bytes:
        return await self.page.screenshot(type="png")


@REGISTRY.register
class PlaywrightRenderer(ViewerRenderer):
    """Render through a fresh headless Chromium per session."""

    renderer_name = "playwright"

    @asynccontextmanager
    async def open_session(self) -> AsyncIterator[PlaywrightSession]:
        settings = self.settings
        async with async_playwright() as playwright:
            browser = await playwright.chromium.launch(headless=True, args=CHROMIUM_ARGS)
            try:
                page = await browser.new_page(
                    viewport={"width": settings.viewport_width, "height": settings.viewport_height}
                )
                page.on("console", _forward_console)
                LOGGER.debug("Opening viewer %s", settings.viewer_url)
                await page.goto(settings.viewer_url)
                yield PlaywrightSession(
                    page, ready_timeout_ms=settings.ready_timeout_seconds * 1000.0
                )
            finally:
                await browser.close()
