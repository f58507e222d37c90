"""Sign command implementation."""

from typing import Optional

import typer

from ...domain.exceptions import SigningError
from ...signing import build_authorization_header
from ..params import parse_params
from ..state import CLIState


def sign(
    ctx: typer.Context,
    method: str = typer.Argument(..., help="HTTP method, e.g. POST"),
    url: str = typer.Argument(..., help="Absolute endpoint URL, without query string"),
    param: Optional[list[str]] = typer.Option(
        None, "-p", "--param", help="Body parameter as key=value (repeatable)"
    ),
) -> None:
    """Print an OAuth 1.0a Authorization header for a request."""
    state: CLIState = ctx.obj
    body_params = parse_params(param) or None

    try:
        header = build_authorization_header(
            method, url, body_params, state.app.credentials.to_credentials()
        )
    except SigningError as e:
        typer.secho(f"✗ Signing failed: {e}", fg=typer.colors.RED)
        raise typer.Exit(code=1)

    typer.echo(header)
