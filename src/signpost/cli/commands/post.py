"""Post command implementation."""

import asyncio
import json
from typing import Any, Optional

import aiohttp
import typer

from ...api import SignedApiClient
from ...domain.exceptions import SignpostError
from ...infrastructure.http import AiohttpClient
from ...infrastructure.logging import get_logger
from ...retry import RetryExecutor
from ..params import parse_params
from ..state import CLIState


async def post_request(
    client: SignedApiClient,
    url: str,
    form: dict[str, str] | None,
    body: Any,
) -> Any:
    """Core post logic with injected dependencies."""
    if form:
        return await client.post(url, form=form)
    return await client.post(url, json=body)


def post(
    ctx: typer.Context,
    url: str = typer.Argument(..., help="Absolute endpoint URL"),
    param: Optional[list[str]] = typer.Option(
        None, "-p", "--param", help="Form parameter as key=value (repeatable)"
    ),
    json_body: Optional[str] = typer.Option(
        None, "--json", help="JSON request body (not part of the signature)"
    ),
    attempts: Optional[int] = typer.Option(
        None, "--attempts", "-a", min=1, help="Maximum number of attempts"
    ),
) -> None:
    """Send a signed POST request with retry and print the JSON response."""
    state: CLIState = ctx.obj
    form = parse_params(param)

    if form and json_body is not None:
        typer.secho("✗ Use either --param or --json, not both", fg=typer.colors.RED)
        raise typer.Exit(code=1)

    try:
        body = json.loads(json_body) if json_body is not None else None
    except ValueError as e:
        typer.secho(f"✗ Invalid JSON body: {e}", fg=typer.colors.RED)
        raise typer.Exit(code=1)

    settings = state.settings
    if attempts is not None:
        settings = settings.model_copy(update={"max_attempts": attempts})

    async def run() -> Any:
        logger = get_logger("signpost.cli")
        async with AiohttpClient(timeout=settings.timeout) as http_client:
            client = SignedApiClient(
                http_client,
                state.app.credentials.to_credentials(),
                executor=RetryExecutor(logger),
                policy=settings.retry_policy(),
                logger=logger,
            )
            return await post_request(client, url, form or None, body)

    try:
        result = asyncio.run(run())
    except (SignpostError, aiohttp.ClientError, asyncio.TimeoutError) as e:
        typer.secho(f"✗ Request failed: {e}", fg=typer.colors.RED)
        raise typer.Exit(code=1)

    typer.echo(json.dumps(result, indent=2))
