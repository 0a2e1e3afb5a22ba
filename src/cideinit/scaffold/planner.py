"""Scaffold planning for `cideinit new` and `cideinit attach`.

Computes the full ScaffoldPlan (directories, then files with their
final bytes) from a mode, a project name, and an already-resolved
directory. Planning is pure: nothing here touches the filesystem
beyond reading the bundled templates.
"""

from __future__ import annotations

import os
from pathlib import Path

from cideinit.models.plan import (
    AttachExisting,
    DirectoryToCreate,
    FileToWrite,
    Mode,
    NewlineFormat,
    NewProject,
    ScaffoldPlan,
)
from cideinit.scaffold.errors import InputError

DESCRIPTOR_SUFFIX = ".cide"
BUILD_DIR_NAME = "build"


def _get_templates_dir() -> Path:
    """Return the path to the templates directory within the package."""
    return Path(__file__).parent / "templates"


def _render_template(template_name: str, **values: str) -> str:
    template = (_get_templates_dir() / template_name).read_text(encoding="utf-8")
    return template.format(**values)


def is_valid_project_name(name: str) -> bool:
    """Check that name is usable as a single filename component."""
    if not name or name in (".", ".."):
        return False
    separators = [sep for sep in (os.sep, os.altsep, "\0") if sep]
    return not any(sep in name for sep in separators)


def validate_project_name(name: str) -> None:
    """Raise InputError unless name is a legal filename component."""
    if not name:
        raise InputError("Please enter a name for the project.")
    if not is_valid_project_name(name):
        raise InputError(f"Project name must be a valid filename, not a path: {name!r}")


def render_descriptor(fields: list[tuple[str, str]]) -> str:
    """Render a .cide descriptor: one `key: value` line per field, in order."""
    return "".join(f"{key}: {value}\n" for key, value in fields)


def relative_build_dir(config_dir: Path, build_dir: Path) -> str:
    """Return build_dir relative to config_dir, ascending with '..' as needed.

    Raises:
        InputError: If no relative path exists (e.g. different drives).
    """
    try:
        return os.path.relpath(build_dir, config_dir)
    except ValueError as e:
        raise InputError(
            f"Build directory {build_dir} cannot be expressed relative to {config_dir}"
        ) from e


def descriptor_path(mode: Mode, name: str, directory: Path) -> Path:
    """Return where the .cide descriptor of a plan is written.

    For a new project it sits in the project directory; when attaching,
    it sits next to the existing CMakeLists.txt.
    """
    match mode:
        case NewProject():
            return directory / f"{name}{DESCRIPTOR_SUFFIX}"
        case AttachExisting():
            return mode.config_dir / f"{name}{DESCRIPTOR_SUFFIX}"
    raise TypeError(f"Unsupported mode: {mode!r}")


def _plan_new_project(name: str, project_dir: Path) -> tuple[list[Path], list[tuple[Path, str]]]:
    binary_name = name
    src_subfolder = name
    src_dir = project_dir / "src" / src_subfolder

    directories = [project_dir, src_dir, project_dir / BUILD_DIR_NAME]
    descriptor = render_descriptor(
        [
            ("name", name),
            ("projectCMakeDir", BUILD_DIR_NAME),
            ("buildDir", BUILD_DIR_NAME),
            ("buildTarget", binary_name),
            ("runDir", BUILD_DIR_NAME),
            ("runCmd", f"./{binary_name}"),
        ]
    )
    cmake_lists = _render_template(
        "CMakeLists.txt.tmpl",
        project_name=name,
        binary_name=binary_name,
        src_subfolder=src_subfolder,
    )
    main_cc = _render_template("main.cc.tmpl")

    files = [
        (descriptor_path(NewProject(), name, project_dir), descriptor),
        (project_dir / "CMakeLists.txt", cmake_lists),
        (src_dir / "main.cc", main_cc),
    ]
    return directories, files


def _plan_attach_existing(
    mode: AttachExisting, name: str, build_dir: Path
) -> tuple[list[Path], list[tuple[Path, str]]]:
    # The real target name is not read from CMakeLists.txt; assume the project name.
    binary_name = name
    relative = relative_build_dir(mode.config_dir, build_dir)

    descriptor = render_descriptor(
        [
            ("name", name),
            ("projectCMakeDir", relative),
            ("buildDir", relative),
            ("runDir", relative),
            ("runCmd", f"./{binary_name}"),
        ]
    )
    return [build_dir], [(descriptor_path(mode, name, build_dir), descriptor)]


def plan_scaffold(
    mode: Mode,
    name: str,
    directory: Path,
    newline: NewlineFormat = NewlineFormat.LF,
) -> ScaffoldPlan:
    """Compute the scaffold plan for a project.

    Args:
        mode: NewProject or AttachExisting(config_file).
        name: Project name, used verbatim for the descriptor, the
            binary, and the source subfolder.
        directory: The project directory (NewProject) or the build
            directory (AttachExisting).
        newline: Line ending applied to every generated file.

    Returns:
        A ScaffoldPlan listing directories to create, then files to
        write, in execution order.

    Raises:
        InputError: If name is not a legal filename component or the
            build directory cannot be made relative to the
            CMakeLists.txt directory.
    """
    validate_project_name(name)

    match mode:
        case NewProject():
            directories, files = _plan_new_project(name, directory)
        case AttachExisting():
            directories, files = _plan_attach_existing(mode, name, directory)
        case _:
            raise TypeError(f"Unsupported mode: {mode!r}")

    return ScaffoldPlan(
        directories=[DirectoryToCreate(path) for path in directories],
        files=[
            FileToWrite(path, newline.apply(text).encode("utf-8"))
            for path, text in files
        ],
    )
