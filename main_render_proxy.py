"""Mini README: Entry point CLI for the bimshot render proxy.

``run`` starts the FastAPI service under uvicorn with host, port and
production flags; ``classify`` runs the classification engine on a JSON
file so colour rules can be checked without a browser.
"""

from __future__ import annotations

import json
from pathlib import Path

import typer
import uvicorn

from bimshot.classification import ClassificationEngine, SelectedProduct, StatusRecord
from bimshot.configuration import get_settings
from bimshot.logging_utils import configure_root_logger, level_for_environment

cli = typer.Typer(help="Launch and exercise the bimshot render proxy.")


@cli.command()
def run(
    host: str = typer.Option(None, help="Host interface to bind."),
    port: int = typer.Option(None, help="Port to listen on."),
    production: bool = typer.Option(
        False, help="Use production server settings (disable auto-reload)."
    ),
) -> None:
    """Start the FastAPI application using uvicorn."""

    settings = get_settings()
    effective_host = host or settings.interface_host
    effective_port = port or settings.interface_port
    configure_root_logger(level_for_environment(settings.environment))

    # Browsers cannot open the 0.0.0.0 / :: wildcard, so point at localhost.
    browser_host = "127.0.0.1" if effective_host in {"0.0.0.0", "::"} else effective_host
    typer.echo(
        f"Starting bimshot on {effective_host}:{effective_port} "
        f"using viewer {settings.viewer_url}.\n"
        f"POST render requests to http://{browser_host}:{effective_port}/api/renderModel"
    )
    uvicorn.run(
        "bimshot.interface.web_app:create_application",
        host=effective_host,
        port=effective_port,
        factory=True,
        reload=not production,
    )


@cli.command()
def classify(
    payload_file: Path = typer.Argument(
        ..., exists=True, dir_okay=False, help="JSON with statusData, selectedProduct and objectIds."
    ),
) -> None:
    """Print the visual state of each object id as JSON."""

    payload = json.loads(payload_file.read_text(encoding="utf-8"))
    if not isinstance(payload, dict):
        raise typer.BadParameter(
            "expected a JSON object with statusData, selectedProduct and objectIds",
            param_hint="PAYLOAD_FILE",
        )
    records = [
        StatusRecord.from_payload(entry)
        for entry in payload.get("statusData") or []
        if isinstance(entry, dict)
    ]
    product = SelectedProduct.from_payload(payload.get("selectedProduct"))
    object_ids = [str(object_id) for object_id in payload.get("objectIds") or []]
    states = ClassificationEngine().classify(records, product, object_ids)
    typer.echo(
        json.dumps(
            {object_id: state.to_payload() for object_id, state in states.items()},
            indent=2,
            ensure_ascii=False,
        )
    )


if __name__ == "__main__":
    cli()
