"""
Command line entry point.

Commands:
    serve     Run the API server with uvicorn
    init-db   Create missing tables
    reset-db  Drop and recreate every table
    codegen   Write GraphQL and TypeScript definitions for the frontend
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Optional

import click

from stay_with_friends import __version__
from stay_with_friends.core.logging_config import get_logger
from stay_with_friends.server.core.config import settings

logger = get_logger(__name__)


@click.group()
@click.version_option(version=__version__)
def main() -> None:
    """Stay With Friends backend."""


@main.command()
@click.option("--host", default=None, help="Address to bind to (defaults to SWF_SERVER_HOST).")
@click.option("--port", type=int, default=None, help="Port to listen on (defaults to SWF_SERVER_PORT).")
@click.option("--reload", is_flag=True, default=False, help="Reload on code changes.")
def serve(host: Optional[str], port: Optional[int], reload: bool) -> None:
    """Run the API server."""
    import uvicorn

    host = host or settings.server_host
    port = port or settings.server_port
    logger.info(f"Serving Stay With Friends API on {host}:{port}")
    uvicorn.run(
        "stay_with_friends.server.main:app",
        host=host,
        port=port,
        reload=reload,
        log_level=settings.log_level.lower(),
    )


@main.command("init-db")
def init_db_command() -> None:
    """Create missing tables."""
    from stay_with_friends.core.database import init_db

    asyncio.run(init_db())
    click.echo("Database initialized")


@main.command("reset-db")
@click.confirmation_option(prompt="This deletes every row. Continue?")
def reset_db_command() -> None:
    """Drop and recreate every table."""
    from stay_with_friends.core.database import reset_db

    asyncio.run(reset_db())
    click.echo("Database reset")


@main.command()
@click.option(
    "--out",
    "-o",
    "out_dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=Path("generated"),
    show_default=True,
    help="Directory for the generated files.",
)
def codegen(out_dir: Path) -> None:
    """Write GraphQL and TypeScript definitions for the frontend."""
    from stay_with_friends.codegen import generate

    written = generate(out_dir)
    if not written:
        click.echo(f"{out_dir} is up to date")
    for path in written:
        click.echo(f"Wrote {path}")


if __name__ == "__main__":
    main()
