"""Mini README: Shared fixtures for the bimshot test-suite.

Structure:
    * FakeSession / FakeRenderer - in-memory stand-ins for a browser page.
    * fake_renderer - registers the fake under the name ``fake``.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Dict, List, Optional

import pytest

from bimshot.rendering import REGISTRY, ViewerRenderer, ViewerSession

PNG_BYTES = b"\x89PNG\r\n\x1a\nfake"


class FakeSession(ViewerSession):
    def __init__(self, object_ids: List[str], *, fail_on: Optional[str] = None) -> None:
        self.object_ids = object_ids
        self.fail_on = fail_on
        self.loaded: List[str] = []
        self.applied: Dict[str, dict] = {}
        self.ready = False

    def _maybe_fail(self, step: str) -> None:
        if self.fail_on == step:
            raise TimeoutError(f"{step} timed out")

    async def load_model(self, model_url: str) -> None:
        self._maybe_fail("load_model")
        self.loaded.append(model_url)

    async def wait_until_ready(self) -> None:
        self._maybe_fail("wait_until_ready")
        self.ready = True

    async def list_object_ids(self) -> List[str]:
        return list(self.object_ids)

    async def apply_visual_states(self, states: Dict[str, dict]) -> None:
        self.applied.update(states)

    async def screenshot(self) -> bytes:
        return PNG_BYTES


class FakeRenderer(ViewerRenderer):
    renderer_name = "fake"
    object_ids: List[str] = ["A", "B", "C"]
    fail_on: Optional[str] = None
    sessions: List[FakeSession] = []
    closed = 0

    @asynccontextmanager
    async def open_session(self):
        session = FakeSession(list(self.object_ids), fail_on=self.fail_on)
        FakeRenderer.sessions.append(session)
        try:
            yield session
        finally:
            FakeRenderer.closed += 1


@pytest.fixture
def fake_renderer():
    FakeRenderer.object_ids = ["A", "B", "C"]
    FakeRenderer.fail_on = None
    FakeRenderer.sessions = []
    FakeRenderer.closed = 0
    REGISTRY.register(FakeRenderer)
    yield FakeRenderer
    REGISTRY.unregister("fake")
