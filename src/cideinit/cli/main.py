"""cideinit CLI entry point.

The app callback loads cideinit.yaml once and hands the ToolConfig to
every subcommand through the typer context.
"""

from pathlib import Path
from typing import Optional

import typer
import yaml
from pydantic import ValidationError

from cideinit import __version__
from cideinit.cli.attach_cmd import attach
from cideinit.cli.guess_cmd import guess
from cideinit.cli.new_cmd import new
from cideinit.models.config import CONFIG_FILENAME, load_tool_config

app = typer.Typer(
    name="cideinit",
    help="Project scaffolding for CMake-based C/C++ projects",
    no_args_is_help=True,
)

for command in (new, attach, guess):
    app.command()(command)


def _print_version(value: bool) -> None:
    if value:
        typer.echo(f"cideinit {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    config_dir: Optional[str] = typer.Option(
        None,
        "--config-dir",
        help=f"Directory holding {CONFIG_FILENAME} (default: search upward from cwd)",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show version and exit.",
        callback=_print_version,
        is_eager=True,
    ),
) -> None:
    """Scaffold a new CMake project or attach to an existing CMakeLists.txt."""
    root = Path(config_dir).resolve() if config_dir is not None else None
    try:
        ctx.obj = load_tool_config(root)
    except (ValidationError, yaml.YAMLError) as e:
        typer.echo(f"Error: Invalid {CONFIG_FILENAME}: {e}", err=True)
        raise typer.Exit(code=1)
