"""cideinit new CLI command for brand-new CMake projects.

Creates <name>.cide, CMakeLists.txt, src/<name>/main.cc and an empty
build/ directory. Existing files are overwritten.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from cideinit.cli.common import resolve_newline, run_scaffold, tool_config
from cideinit.models.plan import NewlineFormat, NewProject


def new(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Project name (must be a valid filename)"),
    directory: Optional[str] = typer.Argument(
        None, help="Project directory (default: ./<name>)"
    ),
    newline: Optional[NewlineFormat] = typer.Option(
        None, "--newline", "-n", help="Line endings for generated files"
    ),
    dry_run: bool = typer.Option(
        False, "--dry-run", help="Show the planned operations without writing anything"
    ),
) -> None:
    """Create a new CMake project with a .cide descriptor."""
    target = Path(directory if directory is not None else name).resolve()
    run_scaffold(
        NewProject(),
        name,
        target,
        resolve_newline(newline, tool_config(ctx)),
        dry_run,
        base=target,
    )
