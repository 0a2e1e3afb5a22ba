"""Helpers shared by the scaffolding commands."""

from __future__ import annotations

from pathlib import Path

import typer

from cideinit.cli.output import print_created, print_plan
from cideinit.models.config import ToolConfig
from cideinit.models.plan import Mode, NewlineFormat
from cideinit.scaffold.errors import ScaffoldError
from cideinit.scaffold.executor import execute_plan
from cideinit.scaffold.planner import plan_scaffold


def tool_config(ctx: typer.Context) -> ToolConfig:
    """Return the ToolConfig loaded by the app callback."""
    return ctx.obj if isinstance(ctx.obj, ToolConfig) else ToolConfig()


def resolve_newline(newline: NewlineFormat | None, config: ToolConfig) -> NewlineFormat:
    """Use the --newline option if given, else the configured default."""
    if newline is not None:
        return newline
    return config.newline


def run_scaffold(
    mode: Mode,
    name: str,
    directory: Path,
    newline: NewlineFormat,
    dry_run: bool,
    base: Path,
) -> None:
    """Plan and (unless dry_run) execute a scaffold, exiting 1 on failure."""
    try:
        plan = plan_scaffold(mode, name, directory, newline)
        if dry_run:
            print_plan(plan, base)
            return
        written = execute_plan(plan)
    except ScaffoldError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    print_created(written, base)
