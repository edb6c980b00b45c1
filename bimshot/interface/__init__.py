"""Mini README: HTTP interface for bimshot.

Exports the FastAPI application factory serving the render and classify
endpoints.
"""

from .web_app import create_application

__all__ = ["create_application"]
