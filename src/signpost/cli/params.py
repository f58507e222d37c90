"""Parsing helpers for command-line parameters."""

import typer


def parse_params(values: list[str] | None) -> dict[str, str]:
    """Parse repeated ``key=value`` options into a dict.

    Raises:
        typer.Exit: If an entry has no ``=`` or an empty key
    """
    params: dict[str, str] = {}
    for item in values or []:
        key, sep, value = item.partition("=")
        if not sep or not key:
            typer.secho(
                f"✗ Invalid parameter '{item}', expected key=value",
                fg=typer.colors.RED,
            )
            raise typer.Exit(code=1)
        params[key] = value
    return params
