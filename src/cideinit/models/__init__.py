"""cideinit data models - re-exports all public model classes."""

from cideinit.models.config import ToolConfig
from cideinit.models.plan import (
    AttachExisting,
    DirectoryToCreate,
    FileToWrite,
    Mode,
    NewlineFormat,
    NewProject,
    ScaffoldPlan,
)

__all__ = [
    "AttachExisting",
    "DirectoryToCreate",
    "FileToWrite",
    "Mode",
    "NewlineFormat",
    "NewProject",
    "ScaffoldPlan",
    "ToolConfig",
]
