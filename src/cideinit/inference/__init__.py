"""Default-value inference from existing on-disk state."""

from cideinit.inference.project_name import (
    default_build_dir,
    find_project_name,
    guess_project_name,
    guess_project_name_from_file,
    read_config_text,
)

__all__ = [
    "default_build_dir",
    "find_project_name",
    "guess_project_name",
    "guess_project_name_from_file",
    "read_config_text",
]
