"""Sora backend CLI."""

from __future__ import annotations

import click

from sora.core.config import get_settings
from sora.core.logging import setup_logging


@click.group()
def cli() -> None:
    """Sora weather assistant backend."""


@cli.command()
@click.option("--host", default=None, help="Host to bind to (default from SORA_HOST)")
@click.option("--port", default=None, type=int, help="Port to bind to (default from PORT)")
def serve(host: str | None, port: int | None) -> None:
    """Start the API server."""
    import uvicorn

    settings = get_settings()
    setup_logging(settings.log_level, settings.log_file)

    uvicorn.run(
        "sora.app:create_app",
        factory=True,
        host=host or settings.host,
        port=port or settings.port,
        reload=False,
    )


if __name__ == "__main__":
    cli()
