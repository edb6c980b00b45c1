"""Mini README: Centralised configuration for the bimshot render proxy.

Structure:
    * BimshotSettings - Pydantic model describing runtime configuration.
    * get_settings - cached accessor for environment-aware settings.

Usage:
    Values come from ``BIMSHOT_*`` environment variables or a ``.env`` file.
    The viewer URL points at the page exposing ``loadModelAndCapture`` and
    the ``viewer.scene.objects`` map; the viewport and timeout control the
    headless browser.
"""

from __future__ import annotations

from functools import lru_cache
from typing import List
from urllib.parse import urlparse

from pydantic import Field, validator
from pydantic_settings import BaseSettings


class BimshotSettings(BaseSettings):
    """Runtime configuration for the render proxy."""

    environment: str = Field(
        "development",
        description="Environment label controlling debug toggles and logging levels.",
    )
    interface_host: str = Field(
        "0.0.0.0",
        description="Network interface for the HTTP service to bind to.",
    )
    interface_port: int = Field(
        8000,
        description="Port the HTTP service exposes.",
        ge=1,
        le=65535,
    )
    viewer_url: str = Field(
        "http://localhost:3000/viewer.html",
        description="Page hosting the 3D viewer the browser navigates to.",
    )
    viewport_width: int = Field(1280, ge=1, description="Screenshot width in pixels.")
    viewport_height: int = Field(720, ge=1, description="Screenshot height in pixels.")
    ready_timeout_seconds: float = Field(
        60.0,
        gt=0,
        description="Upper bound on waiting for the viewer to report the model as ready.",
    )
    renderer: str = Field(
        "playwright",
        description="Registry name of the renderer used to drive the browser.",
    )
    cors_allow_origins: List[str] = Field(
        default_factory=lambda: ["*"],
        description="Origins allowed to call the API from a browser.",
    )

    class Config:
        env_prefix = "BIMSHOT_"
        env_file = ".env"
        case_sensitive = False

    @validator("viewer_url")
    def _check_viewer_scheme(cls, value: str) -> str:
        """Only URLs a browser can navigate to are accepted."""

        scheme = urlparse(value).scheme.lower()
        if scheme not in {"http", "https", "file"}:
            raise ValueError(f"viewer_url must use http, https or file, got '{value}'")
        return value


@lru_cache()
def get_settings() -> BimshotSettings:
    """Return cached settings, ensuring consistent configuration across modules."""

    return BimshotSettings()
