"""Scaffold plan data model.

A plan is the pure, pre-computed description of the filesystem
operations needed to scaffold a project: directories first, then
files. Plans are built fresh per invocation and consumed once by
an executor.

These are plain frozen dataclasses (not Pydantic) since they never
cross a serialization boundary.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


class NewlineFormat(str, Enum):
    """Line ending applied to every generated file."""

    LF = "LF"
    CRLF = "CRLF"

    def apply(self, text: str) -> str:
        """Convert text written with \\n line endings to this format."""
        if self is NewlineFormat.CRLF:
            return text.replace("\n", "\r\n")
        return text


@dataclass(frozen=True)
class NewProject:
    """Scaffold a brand-new project (no CMakeLists.txt exists yet)."""


@dataclass(frozen=True)
class AttachExisting:
    """Attach to a project whose CMakeLists.txt already exists."""

    config_file: Path

    @property
    def config_dir(self) -> Path:
        return self.config_file.parent


Mode = NewProject | AttachExisting


@dataclass(frozen=True)
class DirectoryToCreate:
    path: Path


@dataclass(frozen=True)
class FileToWrite:
    path: Path
    content: bytes


@dataclass
class ScaffoldPlan:
    """Ordered directories to create followed by ordered files to write."""

    directories: list[DirectoryToCreate] = field(default_factory=list)
    files: list[FileToWrite] = field(default_factory=list)

    def paths(self) -> list[Path]:
        """All paths touched by the plan, in execution order."""
        return [d.path for d in self.directories] + [f.path for f in self.files]

    def find_file(self, path: Path) -> FileToWrite | None:
        for entry in self.files:
            if entry.path == path:
                return entry
        return None
