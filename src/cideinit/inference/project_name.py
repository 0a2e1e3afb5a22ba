"""Heuristic project name and build directory inference.

Scans CMakeLists.txt text for a project(...) declaration without a
CMake grammar. This is a best-effort default for the user, so every
failed candidate simply resumes the scan; false negatives are fine.
"""

from __future__ import annotations

import re
from pathlib import Path

from cideinit.models.plan import AttachExisting, Mode, NewProject

_TOKEN_RE = re.compile("project", re.IGNORECASE)


def _parse_name(arguments: str) -> str:
    """Extract the name from a trimmed project(...) argument string."""
    if arguments.startswith('"'):
        end = arguments.find('"', 1)
        return arguments[1:] if end < 0 else arguments[1:end]
    for i, c in enumerate(arguments):
        if c.isspace():
            return arguments[:i]
    return arguments


def find_project_name(text: str) -> str | None:
    """Return the name from the first project(...) construct in text.

    The first syntactically valid construct wins, even when its name
    is empty. No word boundary is required before the token, so
    ``myproject(Foo)`` yields ``Foo``.

    Returns:
        The extracted name, or None if no construct was found.
    """
    cursor = 0
    while True:
        match = _TOKEN_RE.search(text, cursor)
        if match is None:
            return None
        cursor = match.end()

        left = cursor
        while left < len(text) and text[left].isspace():
            left += 1
        if left >= len(text) or text[left] != "(":
            continue

        right = text.find(")", left + 1)
        if right < 0:
            continue
        return _parse_name(text[left + 1 : right].strip())


def read_config_text(path: Path, encoding: str = "utf-8") -> str:
    """Read a build-configuration file, replacing undecodable bytes."""
    return path.read_bytes().decode(encoding, errors="replace")


def guess_project_name(mode: Mode, config_text: str | None = None) -> str | None:
    """Guess a default project name for the given mode.

    Args:
        mode: NewProject or AttachExisting.
        config_text: Contents of the existing CMakeLists.txt (attach
            mode only). None is treated as empty text.

    Returns:
        None for NewProject. For AttachExisting, the name found in
        config_text, falling back to the config file's directory name.
        May be an empty string; callers must handle that.
    """
    match mode:
        case NewProject():
            return None
        case AttachExisting(config_file=config_file):
            name = find_project_name(config_text or "")
            if name is not None:
                return name
            return config_file.parent.name


def default_build_dir(config_file: Path) -> Path:
    """Pick the build directory to suggest next to an existing CMakeLists.txt.

    Uses the first existing child directory (by name) starting with
    "build", case-insensitive, or <config dir>/build otherwise.
    """
    config_dir = config_file.parent
    if config_dir.is_dir():
        for child in sorted(config_dir.iterdir(), key=lambda p: p.name):
            if child.is_dir() and child.name.lower().startswith("build"):
                return child
    return config_dir / "build"


def guess_project_name_from_file(config_file: Path, encoding: str = "utf-8") -> str | None:
    """Guess the project name for an existing CMakeLists.txt on disk.

    An unreadable file is a miss like any other and yields the
    directory-name fallback.
    """
    try:
        text = read_config_text(config_file, encoding)
    except OSError:
        text = None
    return guess_project_name(AttachExisting(config_file), text)
