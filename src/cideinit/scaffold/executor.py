"""Plan execution against a filesystem writer.

Creates every planned directory, then writes every planned file, in
order. Execution stops at the first failure and raises
ScaffoldIOError; directories and files written before it stay on disk.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path

from cideinit.models.plan import ScaffoldPlan
from cideinit.scaffold.errors import ScaffoldIOError


class FileWriter(ABC):
    """Filesystem primitives needed to materialize a ScaffoldPlan."""

    @abstractmethod
    def create_directory(self, path: Path) -> None:
        """Create path and any missing parents. Existing directories are fine."""

    @abstractmethod
    def write_file(self, path: Path, data: bytes) -> None:
        """Write data to path, truncating any existing file."""


class LocalFileWriter(FileWriter):
    """FileWriter backed by the local filesystem."""

    def create_directory(self, path: Path) -> None:
        path.mkdir(parents=True, exist_ok=True)

    def write_file(self, path: Path, data: bytes) -> None:
        path.write_bytes(data)


def execute_plan(plan: ScaffoldPlan, writer: FileWriter | None = None) -> list[Path]:
    """Materialize a plan.

    Args:
        plan: The plan to execute.
        writer: Filesystem writer. Defaults to LocalFileWriter.

    Returns:
        List of written file paths, in plan order.

    Raises:
        ScaffoldIOError: On the first directory or file that fails.
    """
    writer = writer or LocalFileWriter()

    for directory in plan.directories:
        try:
            writer.create_directory(directory.path)
        except OSError as e:
            raise ScaffoldIOError("create directory", directory.path, str(e)) from e

    written: list[Path] = []
    for entry in plan.files:
        try:
            writer.write_file(entry.path, entry.content)
        except OSError as e:
            raise ScaffoldIOError("write file", entry.path, str(e)) from e
        written.append(entry.path)

    return written
