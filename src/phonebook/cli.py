#!/usr/bin/env python3
"""
Main CLI entry point for the Phonebook backend server.
"""

import os
import sys

import click
import uvicorn

from phonebook import __version__
from phonebook.config import settings
from phonebook.logging import configure_logging, get_logger

logger = get_logger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name="phonebook")
def cli() -> None:
    """Phonebook CLI - run the server and inspect the person directory."""
    pass


@cli.command()
@click.option(
    "--host",
    default=settings.api_host,
    help=f"Host to bind to (default: {settings.api_host})",
)
@click.option(
    "--port",
    default=settings.api_port,
    type=int,
    help=f"Port to bind to (default: {settings.api_port})",
)
@click.option(
    "--reload",
    is_flag=True,
    default=False,
    help="Enable auto-reload for development",
)
@click.option(
    "--log-level",
    default="info",
    type=click.Choice(["debug", "info", "warning", "error"]),
    help="Log level (default: info)",
)
def serve(host: str, port: int, reload: bool, log_level: str) -> None:
    """Start the Phonebook API server."""

    configure_logging(debug=(log_level == "debug"))

    logger.info(
        "Starting Phonebook API server",
        host=host,
        port=port,
        reload=reload,
        log_level=log_level,
    )

    # The app reads its settings at import time
    if log_level == "debug":
        os.environ["PHONEBOOK_DEBUG"] = "true"
        os.environ["PHONEBOOK_LOG_LEVEL"] = "debug"
    else:
        os.environ.setdefault("PHONEBOOK_DEBUG", "false")
        os.environ.setdefault("PHONEBOOK_LOG_LEVEL", log_level)

    try:
        # The record store lives in the process, so a single worker only
        uvicorn.run(
            "phonebook.api.app:app",
            host=host,
            port=port,
            reload=reload,
            workers=1,
            log_level=log_level,
            access_log=True,
        )
    except KeyboardInterrupt:
        logger.info("Server shutdown requested by user")
    except Exception as e:
        logger.error("Server startup failed", error=str(e))
        sys.exit(1)


@cli.command("export-schema")
@click.option(
    "--output",
    type=click.Path(dir_okay=False, writable=True),
    default=None,
    help="Write the SDL to this file instead of stdout",
)
def export_schema(output: str | None) -> None:
    """Print the GraphQL schema in SDL form."""
    from phonebook.graphql.schema import schema

    sdl = schema.as_str()
    if output:
        with open(output, "w", encoding="utf-8") as f:
            f.write(sdl + "\n")
        click.echo(f"✓ Schema written to {output}")
    else:
        click.echo(sdl)


@cli.group()
def directory() -> None:
    """Inspect the external person directory."""
    pass


@directory.command("list")
@click.option(
    "--by-phone",
    type=click.Choice(["yes", "no"], case_sensitive=False),
    default=None,
    help="Only people with (yes) or without (no) a phone",
)
@click.option(
    "--url",
    default=settings.directory_url,
    help=f"Directory URL (default: {settings.directory_url})",
)
def list_directory(by_phone: str | None, url: str) -> None:
    """List people served by the external directory."""
    import asyncio

    from phonebook.directory.client import DirectoryClient, UpstreamUnavailableError
    from phonebook.people.address import derive_address
    from phonebook.people.models import PhoneFilter

    configure_logging()

    selector = PhoneFilter(by_phone.upper()) if by_phone else None
    client = DirectoryClient(url, timeout=settings.directory_timeout)

    try:
        people = asyncio.run(client.list_people(selector))
    except UpstreamUnavailableError as e:
        logger.error("Failed to list directory people", url=e.url, error=e.reason)
        click.echo(f"✗ {e}", err=True)
        sys.exit(1)

    if not people:
        click.echo("No people found.")
        return

    click.echo(f"Found {len(people)} person(s):")
    click.echo()
    for person in people:
        click.echo(f"  ID: {person.id}")
        click.echo(f"  Name: {person.name}")
        click.echo(f"  Phone: {person.phone or '-'}")
        click.echo(f"  Address: {derive_address(person.street, person.city).complete}")
        click.echo()


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
