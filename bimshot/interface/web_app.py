"""Mini README: FastAPI service fronting the render proxy.

Structure:
    * create_application - application factory wiring routes and CORS.
    * RenderModelRequest / ClassifyRequest - JSON request bodies.

``/api/renderModel`` loads a model in the headless viewer, colours it from
the posted status data and answers with a base64 PNG data URI.
``/api/classify`` runs only the classification engine, which is handy for
checking colours without a browser.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response
from pydantic import BaseModel, Field

from ..classification import ClassificationEngine, SelectedProduct, StatusRecord
from ..configuration import BimshotSettings, get_settings
from ..logging_utils import get_logger
from ..rendering import REGISTRY, RenderError, RenderService

LOGGER = get_logger(__name__)

CORS_METHODS = ["GET", "POST", "PUT", "DELETE", "OPTIONS"]
CORS_HEADERS = ["Content-Type", "Authorization"]


class RenderModelRequest(BaseModel):
    """Body of a render request."""

    url: Optional[str] = None
    status_data: List[Dict[str, Any]] = Field(default_factory=list, alias="statusData")
    selected_product: Optional[Dict[str, Any]] = Field(None, alias="selectedProduct")


class ClassifyRequest(BaseModel):
    """Body of a classification-only request."""

    status_data: List[Dict[str, Any]] = Field(default_factory=list, alias="statusData")
    selected_product: Optional[Dict[str, Any]] = Field(None, alias="selectedProduct")
    object_ids: List[str] = Field(default_factory=list, alias="objectIds")


def _parse_inputs(
    status_data: List[Dict[str, Any]], selected_product: Optional[Dict[str, Any]]
) -> tuple[List[StatusRecord], Optional[SelectedProduct]]:
    records = [StatusRecord.from_payload(entry) for entry in status_data]
    product = SelectedProduct.from_payload(selected_product) if selected_product is not None else None
    return records, product


def create_application(settings: Optional[BimshotSettings] = None) -> FastAPI:
    """Create the FastAPI application with routes and dependencies."""

    settings = settings or get_settings()
    app = FastAPI(title="bimshot Render Proxy", version="0.1.0")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_methods=CORS_METHODS,
        allow_headers=CORS_HEADERS,
    )

    REGISTRY.load_plugins()
    renderer = REGISTRY.create(settings.renderer, settings=settings)
    render_service = RenderService(renderer)
    engine = ClassificationEngine(logger=get_logger(f"{__name__}.engine"))

    @app.get("/health")
    async def health() -> JSONResponse:
        """Report liveness and the active renderer."""

        return JSONResponse({"status": "ok", "renderer": renderer.renderer_name})

    @app.options("/api/renderModel")
    @app.options("/render-model")
    @app.options("/api/classify")
    async def preflight() -> Response:
        """Answer OPTIONS without an Origin header; CORS preflights stop at the middleware."""

        return Response(status_code=204)

    @app.post("/api/renderModel")
    @app.post("/render-model")
    async def render_model(payload: RenderModelRequest) -> JSONResponse:
        """Render the model at ``url`` coloured by the posted status data."""

        if not payload.url:
            return JSONResponse({"error": "Missing model URL"}, status_code=400)
        records, product = _parse_inputs(payload.status_data, payload.selected_product)
        LOGGER.info(
            "Render requested for %s with %s status records", payload.url, len(records)
        )
        try:
            result = await render_service.render(payload.url, records, product)
        except RenderError as error:
            return JSONResponse(
                {"error": "Failed to render image", "detail": str(error)},
                status_code=500,
            )
        return JSONResponse(
            {
                "image": result.image,
                "objects": result.object_count,
                "visible": result.visible_count,
            }
        )

    @app.post("/api/classify")
    async def classify_objects(payload: ClassifyRequest) -> JSONResponse:
        """Return the visual state of each requested object id."""

        records, product = _parse_inputs(payload.status_data, payload.selected_product)
        states = engine.classify(records, product, payload.object_ids)
        LOGGER.debug("Classification request resolved %s objects", len(states))
        return JSONResponse(
            {"states": {object_id: state.to_payload() for object_id, state in states.items()}}
        )

    return app
