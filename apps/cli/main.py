"""Typer CLI entrypoint for limited-support-agent."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated

import httpx
import typer

from apps.cli.io import read_template_source, render_reason
from core.config.settings import Settings, load_settings
from core.orchestrator.pipeline import PreparedPost, prepare_post, send_post
from core.support.connection import HttpxConnection
from core.utils.errors import (
    InvalidClusterKeyError,
    InvalidTemplateError,
    MalformedParameterError,
    RequestBuildError,
    ResponseBodyError,
    TemplateSourceError,
    UnusedParameterError,
)

app = typer.Typer(help="Limited support reason CLI", rich_markup_mode=None)

EXIT_OK = 0
EXIT_INTERNAL = 1
EXIT_VALIDATION = 2
EXIT_REJECTED = 3
EXIT_BAD_RESPONSE = 4

_VALIDATION_ERRORS = (
    MalformedParameterError,
    InvalidTemplateError,
    UnusedParameterError,
    InvalidClusterKeyError,
)


@app.callback()
def cli_callback() -> None:
    """Manage limited support reasons on clusters."""


@app.command("post")
def post_command(
    cluster_id: Annotated[str, typer.Argument(help="Internal cluster ID.")],
    template: Annotated[
        str, typer.Option("--template", "-t", help="Message template file or URL.")
    ],
    param: Annotated[
        list[str] | None,
        typer.Option(
            "--param",
            "-p",
            help="Specify a key-value pair (eg. -p FOO=BAR) to set a parameter in the template.",
        ),
    ] = None,
    dry_run: Annotated[
        bool,
        typer.Option(
            "--dry-run",
            "-d",
            help="Print the limited support reason about to be sent but don't send it.",
        ),
    ] = False,
    yes: Annotated[
        bool, typer.Option("--yes", "-y", help="Send without asking for confirmation.")
    ] = False,
    verbose: Annotated[bool, typer.Option("--verbose", help="Verbose output.")] = False,
    config: Annotated[
        Path | None,
        typer.Option("--config", exists=True, dir_okay=False, file_okay=True),
    ] = None,
) -> None:
    """Send a limited support reason to a given cluster."""

    if verbose:
        logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s %(message)s")

    try:
        settings = load_settings(config)
    except ValueError as exc:
        typer.echo(f"ERROR: {exc}")
        raise typer.Exit(code=EXIT_INTERNAL) from exc

    try:
        template_bytes = read_template_source(template)
        prepared = prepare_post(template_bytes, param or [], cluster_id)
    except TemplateSourceError as exc:
        typer.echo(f"ERROR: {exc}")
        raise typer.Exit(code=EXIT_INTERNAL) from exc
    except _VALIDATION_ERRORS as exc:
        typer.echo(f"ERROR: {exc}")
        raise typer.Exit(code=EXIT_VALIDATION) from exc

    if prepared.substitution.unresolved:
        typer.echo(
            "WARNING(template): unresolved placeholders remain "
            f"({', '.join(prepared.substitution.unresolved)})."
        )

    typer.echo(f"The following limited support reason will be sent to {cluster_id}:")
    typer.echo(render_reason(prepared.template))

    if dry_run:
        raise typer.Exit(code=EXIT_OK)

    if not yes and not typer.confirm("Continue?", default=False):
        typer.echo("INFO: aborted")
        raise typer.Exit(code=EXIT_OK)

    raise typer.Exit(code=_send(settings, prepared))


def _send(settings: Settings, prepared: PreparedPost) -> int:
    try:
        with _create_connection(settings) as connection:
            classified = send_post(connection, prepared)
    except RequestBuildError as exc:
        typer.echo(f"ERROR: failed to create post request: {exc}")
        return EXIT_INTERNAL
    except ResponseBodyError as exc:
        typer.echo(f"ERROR: failed to check post response: {exc}")
        return EXIT_BAD_RESPONSE
    except (httpx.HTTPError, httpx.InvalidURL) as exc:
        typer.echo(f"ERROR: failed to get post call response: {type(exc).__name__}: {exc}")
        return EXIT_INTERNAL

    if classified.outcome == "failure":
        typer.echo(f"ERROR: bad response reason is: {classified.reason}")
        return EXIT_REJECTED

    typer.echo("Limited support reason has been sent successfully")
    return EXIT_OK


def _create_connection(settings: Settings) -> HttpxConnection:
    return HttpxConnection(
        settings.api_url,
        token=settings.token,
        timeout_seconds=settings.timeout_seconds,
    )


def main() -> None:
    """Console script entrypoint."""

    app()


if __name__ == "__main__":
    main()
