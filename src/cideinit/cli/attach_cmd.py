"""cideinit attach CLI command for existing CMakeLists.txt files.

Writes a <name>.cide descriptor next to the CMakeLists.txt and makes
sure the build directory exists. The project name defaults to the one
declared in the CMakeLists.txt.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from cideinit.cli.common import resolve_newline, run_scaffold, tool_config
from cideinit.inference.project_name import default_build_dir, guess_project_name_from_file
from cideinit.models.plan import AttachExisting, NewlineFormat
from cideinit.scaffold.planner import is_valid_project_name


def attach(
    ctx: typer.Context,
    cmakelists: str = typer.Argument(..., help="Path to the existing CMakeLists.txt"),
    name: Optional[str] = typer.Option(
        None, "--name", help="Project name (default: guessed from CMakeLists.txt)"
    ),
    build_dir: Optional[str] = typer.Option(
        None, "--build-dir", "-b", help="Build directory (default: existing build* folder or ./build)"
    ),
    newline: Optional[NewlineFormat] = typer.Option(
        None, "--newline", "-n", help="Line endings for generated files"
    ),
    dry_run: bool = typer.Option(
        False, "--dry-run", help="Show the planned operations without writing anything"
    ),
) -> None:
    """Create a .cide project for an existing CMakeLists.txt."""
    config_file = Path(cmakelists).resolve()
    if not config_file.is_file():
        typer.echo(f"Error: File not found: {cmakelists}", err=True)
        raise typer.Exit(code=1)

    config = tool_config(ctx)
    mode = AttachExisting(config_file)
    if name is None:
        name = guess_project_name_from_file(config_file, config.encoding) or ""
        if not is_valid_project_name(name):
            name = typer.prompt("Project name (must be a valid filename)")

    if build_dir is None:
        target = default_build_dir(config_file)
    else:
        target = Path(build_dir).resolve()

    run_scaffold(
        mode,
        name,
        target,
        resolve_newline(newline, config),
        dry_run,
        base=mode.config_dir,
    )
