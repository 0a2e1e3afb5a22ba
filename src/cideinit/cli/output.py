"""Rich terminal output for scaffold plans and results."""

from __future__ import annotations

from pathlib import Path

from rich import box
from rich.console import Console
from rich.table import Table

from cideinit.models.plan import ScaffoldPlan

console = Console()


def _display(path: Path, base: Path | None) -> str:
    if base is not None and path.is_relative_to(base):
        return str(path.relative_to(base)) or "."
    return str(path)


def render_plan(plan: ScaffoldPlan, base: Path | None = None) -> Table:
    """Build a table listing every planned operation in execution order."""
    table = Table(box=box.SIMPLE, show_header=True, header_style="bold")
    table.add_column("#", justify="right")
    table.add_column("Operation")
    table.add_column("Path")
    table.add_column("Bytes", justify="right")

    for step, path in enumerate(plan.paths(), start=1):
        entry = plan.find_file(path)
        if entry is None:
            table.add_row(str(step), "mkdir", _display(path, base), "")
        else:
            table.add_row(str(step), "write", _display(path, base), str(len(entry.content)))
    return table


def print_plan(plan: ScaffoldPlan, base: Path | None = None) -> None:
    console.print("[bold]Planned operations (dry run):[/bold]")
    console.print(render_plan(plan, base))


def print_created(written: list[Path], base: Path | None = None) -> None:
    console.print("[green][bold]Project initialized successfully![/bold][/green]")
    for path in written:
        console.print(f"  [green]\u2713[/green] {_display(path, base)}")
