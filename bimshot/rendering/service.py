"""Mini README: Orchestrates one render request.

Structure:
    * RenderResult - the captured image plus object counts.
    * RenderService - load model, classify scene objects, apply, capture.

The classification step is skipped when the request carries neither status
data nor a product, which reproduces a plain model screenshot.
"""

from __future__ import annotations

import base64
from dataclasses import dataclass
from typing import Optional, Sequence

from ..classification import ClassificationEngine, SelectedProduct, StatusRecord
from ..logging_utils import get_logger
from .base import RenderError, ViewerRenderer

LOGGER = get_logger(__name__)


def png_data_uri(png: bytes) -> str:
    return "data:image/png;base64," + base64.b64encode(png).decode("ascii")


@dataclass(slots=True)
class RenderResult:
    """Outcome of a render request."""

    image: str
    object_count: int
    visible_count: int


class RenderService:
    """Drive a renderer through a full capture."""

    def __init__(
        self,
        renderer: ViewerRenderer,
        *,
        engine: Optional[ClassificationEngine] = None,
    ) -> None:
        self.renderer = renderer
        self.engine = engine or ClassificationEngine(logger=get_logger(f"{__name__}.engine"))

    async def render(
        self,
        model_url: str,
        records: Sequence[StatusRecord] = (),
        product: Optional[SelectedProduct] = None,
    ) -> RenderResult:
        """Render ``model_url`` coloured by the given status data."""

        try:
            async with self.renderer.open_session() as session:
                await session.load_model(model_url)
                await session.wait_until_ready()
                object_ids = await session.list_object_ids()
                visible_count = len(object_ids)
                if records or product is not None:
                    states = self.engine.classify(records, product, object_ids)
                    visible_count = sum(1 for state in states.values() if state.visible)
                    await session.apply_visual_states(
                        {object_id: state.to_payload() for object_id, state in states.items()}
                    )
                png = await session.screenshot()
        except RenderError:
            raise
        except Exception as error:
            LOGGER.exception("Rendering %s failed", model_url)
            raise RenderError(str(error)) from error

        LOGGER.info(
            "Rendered %s: %s objects, %s visible, %s bytes",
            model_url,
            len(object_ids),
            visible_count,
            len(png),
        )
        return RenderResult(
            image=png_data_uri(png),
            object_count=len(object_ids),
            visible_count=visible_count,
        )
