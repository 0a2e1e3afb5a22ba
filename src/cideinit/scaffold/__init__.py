"""Scaffold planning and execution."""

from cideinit.scaffold.errors import InputError, ScaffoldError, ScaffoldIOError
from cideinit.scaffold.executor import FileWriter, LocalFileWriter, execute_plan
from cideinit.scaffold.planner import descriptor_path, plan_scaffold

__all__ = [
    "FileWriter",
    "InputError",
    "LocalFileWriter",
    "ScaffoldError",
    "ScaffoldIOError",
    "descriptor_path",
    "execute_plan",
    "plan_scaffold",
]
