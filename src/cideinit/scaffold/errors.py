"""Scaffolding error types.

InputError is raised while planning, before any I/O happens.
ScaffoldIOError is raised by the executor at the first failed
filesystem operation; earlier steps are not rolled back.
"""

from __future__ import annotations

from pathlib import Path


class ScaffoldError(Exception):
    """Base class for all scaffolding failures."""


class InputError(ScaffoldError):
    """Raised when caller-supplied inputs cannot produce a plan."""


class ScaffoldIOError(ScaffoldError):
    """Raised when a directory or file in a plan cannot be created.

    Attributes:
        operation: The operation attempted ("create directory" or
            "write file").
        path: The path that failed.
    """

    def __init__(self, operation: str, path: Path, reason: str) -> None:
        self.operation = operation
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to {operation} ({path}): {reason}")
