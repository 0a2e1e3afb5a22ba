"""cideinit guess CLI command: print the inferred project name."""

from __future__ import annotations

from pathlib import Path

import typer

from cideinit.cli.common import tool_config
from cideinit.inference.project_name import guess_project_name_from_file


def guess(
    ctx: typer.Context,
    cmakelists: str = typer.Argument(..., help="Path to an existing CMakeLists.txt"),
) -> None:
    """Print the project name cideinit would suggest for a CMakeLists.txt."""
    config_file = Path(cmakelists).resolve()
    if not config_file.is_file():
        typer.echo(f"Error: File not found: {cmakelists}", err=True)
        raise typer.Exit(code=1)

    name = guess_project_name_from_file(config_file, tool_config(ctx).encoding)
    if not name:
        typer.echo("Error: Could not guess a project name.", err=True)
        raise typer.Exit(code=1)
    typer.echo(name)
