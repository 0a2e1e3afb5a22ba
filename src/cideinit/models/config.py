"""Tool configuration model for cideinit.

Captures cideinit.yaml fields with sensible defaults for the
host-level settings that shape generated files.
"""

from __future__ import annotations

import codecs
from pathlib import Path

from pydantic import BaseModel, field_validator

from cideinit.models.plan import NewlineFormat

CONFIG_FILENAME = "cideinit.yaml"


class ToolConfig(BaseModel):
    """Tool-level configuration loaded from cideinit.yaml."""

    model_config = {"extra": "forbid"}

    newline: NewlineFormat = NewlineFormat.LF
    encoding: str = "utf-8"

    @field_validator("encoding")
    @classmethod
    def _known_encoding(cls, value: str) -> str:
        try:
            codecs.lookup(value)
        except LookupError as e:
            raise ValueError(f"unknown encoding: {value}") from e
        return value


def find_config_root(start: Path | None = None) -> Path:
    """Walk up from start (default: cwd) looking for cideinit.yaml.

    Args:
        start: Starting path (file or directory). Defaults to cwd.

    Returns:
        Path to the directory containing cideinit.yaml, or cwd if
        none is found.
    """
    current = (start or Path.cwd()).resolve()
    if current.is_file():
        current = current.parent
    while current != current.parent:
        if (current / CONFIG_FILENAME).exists():
            return current
        current = current.parent
    return Path.cwd()


def load_tool_config(root: Path | None = None) -> ToolConfig:
    """Load ToolConfig from cideinit.yaml. Returns defaults if not found.

    Args:
        root: Directory holding cideinit.yaml. If None, uses
            find_config_root() to locate it.

    Returns:
        Validated ToolConfig instance.

    Raises:
        pydantic.ValidationError: If the file holds unknown keys or
            invalid values.
    """
    if root is None:
        root = find_config_root()
    config_path = root / CONFIG_FILENAME
    if not config_path.exists():
        return ToolConfig()
    import yaml

    raw = yaml.safe_load(config_path.read_text(encoding="utf-8"))
    if raw is None:
        return ToolConfig()
    return ToolConfig.model_validate(raw)
