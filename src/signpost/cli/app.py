"""CLI application factory."""

import typer

from ..app import App, create_app
from ..config.settings import LogLevel, build_settings
from .commands import post, sign
from .state import CLIState


def create_cli_app(app: App | None = None) -> typer.Typer:
    """Create CLI application with optional app override.

    Args:
        app: Optional pre-built App (settings and credentials) for testing

    Returns:
        Configured Typer application with commands registered
    """
    cli_app = typer.Typer(
        name="signpost",
        help="Sign OAuth 1.0a requests and post them with retry",
        no_args_is_help=True,
    )

    @cli_app.callback()
    def setup(
        ctx: typer.Context,
        verbose: bool = typer.Option(
            False,
            "--verbose",
            "-v",
            help="Enable verbose output (DEBUG logging)",
        ),
    ) -> None:
        """Global options available to all commands."""
        if app is not None:
            resolved_app = app
        else:
            resolved_app = create_app(
                build_settings(log_level=LogLevel.DEBUG if verbose else None)
            )

        ctx.obj = CLIState(resolved_app)

    cli_app.command()(sign)
    cli_app.command()(post)

    return cli_app
