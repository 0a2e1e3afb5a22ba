"""Tests for cideinit.scaffold.executor - materializing scaffold plans."""

from __future__ import annotations

from pathlib import Path

import pytest

from cideinit.models.plan import (
    AttachExisting,
    DirectoryToCreate,
    FileToWrite,
    NewlineFormat,
    NewProject,
    ScaffoldPlan,
)
from cideinit.scaffold.errors import ScaffoldIOError
from cideinit.scaffold.executor import FileWriter, LocalFileWriter, execute_plan
from cideinit.scaffold.planner import plan_scaffold


class RecordingWriter(FileWriter):
    """FileWriter that records calls and optionally fails on one path."""

    def __init__(self, fail_on: Path | None = None) -> None:
        self.calls: list[tuple[str, Path]] = []
        self.fail_on = fail_on

    def create_directory(self, path: Path) -> None:
        self.calls.append(("mkdir", path))
        if path == self.fail_on:
            raise PermissionError(13, "Permission denied")

    def write_file(self, path: Path, data: bytes) -> None:
        self.calls.append(("write", path))
        if path == self.fail_on:
            raise OSError(28, "No space left on device")


class TestExecutePlan:
    """Tests for execute_plan() with the local filesystem."""

    def test_new_project_creates_tree(self, tmp_path: Path) -> None:
        root = tmp_path / "demo"
        plan = plan_scaffold(NewProject(), "Demo", root)
        written = execute_plan(plan)

        assert written == [
            root / "Demo.cide",
            root / "CMakeLists.txt",
            root / "src" / "Demo" / "main.cc",
        ]
        assert (root / "build").is_dir()
        assert (root / "src" / "Demo" / "main.cc").read_bytes() == (
            b"int main(int argc, char** argv) {\n  \n}\n"
        )

    def test_rerun_overwrites_with_identical_content(self, tmp_path: Path) -> None:
        """Running twice neither fails on mkdir nor changes file content."""
        root = tmp_path / "demo"
        plan = plan_scaffold(NewProject(), "Demo", root)
        execute_plan(plan)
        first = {p: p.read_bytes() for p in (f.path for f in plan.files)}

        execute_plan(plan_scaffold(NewProject(), "Demo", root))
        second = {p: p.read_bytes() for p in (f.path for f in plan.files)}
        assert first == second

    def test_existing_file_is_truncated(self, tmp_path: Path) -> None:
        root = tmp_path / "demo"
        root.mkdir()
        (root / "CMakeLists.txt").write_text("x" * 10000, encoding="utf-8")
        execute_plan(plan_scaffold(NewProject(), "Demo", root))
        content = (root / "CMakeLists.txt").read_text(encoding="utf-8")
        assert content.startswith("cmake_minimum_required")
        assert "x" * 100 not in content

    def test_crlf_written_verbatim(self, tmp_path: Path) -> None:
        root = tmp_path / "demo"
        execute_plan(plan_scaffold(NewProject(), "Demo", root, NewlineFormat.CRLF))
        data = (root / "Demo.cide").read_bytes()
        assert data.count(b"\n") == data.count(b"\r\n")

    def test_attach_creates_build_dir_and_descriptor(self, tmp_path: Path) -> None:
        config_file = tmp_path / "CMakeLists.txt"
        config_file.write_text("project(Demo)\n", encoding="utf-8")
        build_dir = tmp_path / "out" / "build"
        mode = AttachExisting(config_file)

        written = execute_plan(plan_scaffold(mode, "Demo", build_dir))
        assert written == [tmp_path / "Demo.cide"]
        assert build_dir.is_dir()
        assert "buildDir: out/build\n" in (tmp_path / "Demo.cide").read_text(encoding="utf-8")

    def test_attach_existing_build_dir_is_fine(self, tmp_path: Path) -> None:
        config_file = tmp_path / "CMakeLists.txt"
        config_file.write_text("project(Demo)\n", encoding="utf-8")
        (tmp_path / "build").mkdir()
        (tmp_path / "build" / "keep.txt").write_text("keep", encoding="utf-8")

        execute_plan(plan_scaffold(AttachExisting(config_file), "Demo", tmp_path / "build"))
        assert (tmp_path / "build" / "keep.txt").read_text(encoding="utf-8") == "keep"


class TestExecutePlanWriter:
    """Tests for execute_plan() ordering and failure handling."""

    def test_directories_before_files(self) -> None:
        plan = plan_scaffold(NewProject(), "Demo", Path("/tmp/x"))
        writer = RecordingWriter()
        execute_plan(plan, writer)
        assert [path for _, path in writer.calls] == plan.paths()
        ops = [op for op, _ in writer.calls]
        assert ops == ["mkdir"] * 3 + ["write"] * 3

    def test_directory_failure_stops_execution(self) -> None:
        plan = plan_scaffold(NewProject(), "Demo", Path("/tmp/x"))
        failing = Path("/tmp/x/src/Demo")
        writer = RecordingWriter(fail_on=failing)

        with pytest.raises(ScaffoldIOError) as exc_info:
            execute_plan(plan, writer)

        assert exc_info.value.operation == "create directory"
        assert exc_info.value.path == failing
        assert writer.calls[-1] == ("mkdir", failing)
        assert all(op == "mkdir" for op, _ in writer.calls)

    def test_file_failure_reports_path(self) -> None:
        plan = plan_scaffold(NewProject(), "Demo", Path("/tmp/x"))
        failing = Path("/tmp/x/CMakeLists.txt")
        writer = RecordingWriter(fail_on=failing)

        with pytest.raises(ScaffoldIOError) as exc_info:
            execute_plan(plan, writer)

        assert exc_info.value.operation == "write file"
        assert str(failing) in str(exc_info.value)
        assert isinstance(exc_info.value.__cause__, OSError)
        assert ("write", Path("/tmp/x/src/Demo/main.cc")) not in writer.calls

    def test_earlier_writes_are_not_rolled_back(self, tmp_path: Path) -> None:
        good = tmp_path / "a.txt"
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory", encoding="utf-8")
        plan = ScaffoldPlan(
            directories=[DirectoryToCreate(tmp_path)],
            files=[
                FileToWrite(good, b"a\n"),
                FileToWrite(blocker / "b.txt", b"b\n"),
            ],
        )
        with pytest.raises(ScaffoldIOError):
            execute_plan(plan, LocalFileWriter())
        assert good.read_bytes() == b"a\n"

    def test_empty_plan(self) -> None:
        assert execute_plan(ScaffoldPlan(), RecordingWriter()) == []
