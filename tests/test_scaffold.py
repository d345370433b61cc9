"""Tests for project scaffolding and VS Code integration."""

import json
import subprocess

import pytest

from py_box.core import scaffold, vscode
from py_box.core.exceptions import (
    EditorError,
    ProjectExistsError,
    ProjectNotFoundError,
    ToolchainError,
    ToolchainNotFoundError,
)
from py_box.core.scaffold import add_libraries, copy_project, init_project
from py_box.core.vscode import (
    init_vscode_project,
    open_in_editor,
    venv_python_path,
)


class FakeRun:
    """Records subprocess.run calls and returns a canned result."""

    def __init__(self, returncode=0, stderr="", missing=False):
        self.returncode = returncode
        self.stderr = stderr
        self.missing = missing
        self.calls = []

    def __call__(self, args, **kwargs):
        self.calls.append((args, kwargs))
        if self.missing:
            raise FileNotFoundError(args[0])
        return subprocess.CompletedProcess(args, self.returncode, "", self.stderr)


class TestCopyProject:
    """Tests for copy_project."""

    def test_copies_tree(self, tmp_path):
        """Test the whole project tree is copied."""
        src = tmp_path / "proj"
        (src / "pkg").mkdir(parents=True)
        (src / "pkg" / "main.py").write_text("print('hi')\n")

        dest = copy_project(tmp_path, "proj", "proj-copy")

        assert dest == tmp_path / "proj-copy"
        assert (dest / "pkg" / "main.py").read_text() == "print('hi')\n"
        assert (src / "pkg" / "main.py").exists()

    def test_missing_source(self, tmp_path):
        """Test copying a missing project fails."""
        with pytest.raises(ProjectNotFoundError):
            copy_project(tmp_path, "nope", "nope-copy")

    def test_existing_destination(self, tmp_path):
        """Test an existing destination is not overwritten."""
        (tmp_path / "proj").mkdir()
        (tmp_path / "proj-copy").mkdir()
        with pytest.raises(ProjectExistsError):
            copy_project(tmp_path, "proj", "proj-copy")


class TestToolchain:
    """Tests for uv invocations."""

    def test_init_project(self, tmp_path, monkeypatch):
        """Test uv init runs inside root."""
        fake = FakeRun()
        monkeypatch.setattr(scaffold.subprocess, "run", fake)

        project_dir = init_project(tmp_path, "calm-owl-7")

        assert project_dir == tmp_path / "calm-owl-7"
        args, kwargs = fake.calls[0]
        assert args == ["uv", "init", "calm-owl-7"]
        assert kwargs["cwd"] == tmp_path

    def test_init_failure_carries_stderr(self, tmp_path, monkeypatch):
        """Test a failing init surfaces stderr."""
        monkeypatch.setattr(scaffold.subprocess, "run", FakeRun(returncode=2, stderr="boom"))
        with pytest.raises(ToolchainError) as exc_info:
            init_project(tmp_path, "demo")
        assert exc_info.value.stderr == "boom"

    def test_missing_toolchain(self, tmp_path, monkeypatch):
        """Test a missing executable raises ToolchainNotFoundError."""
        monkeypatch.setattr(scaffold.subprocess, "run", FakeRun(missing=True))
        with pytest.raises(ToolchainNotFoundError):
            init_project(tmp_path, "demo")

    def test_add_libraries(self, tmp_path, monkeypatch):
        """Test libraries are added in one uv add call."""
        fake = FakeRun()
        monkeypatch.setattr(scaffold.subprocess, "run", fake)

        assert add_libraries(tmp_path, ["rich", "httpx"]) is True

        args, kwargs = fake.calls[0]
        assert args == ["uv", "add", "rich", "httpx"]
        assert kwargs["cwd"] == tmp_path

    def test_add_nothing(self, tmp_path, monkeypatch):
        """Test an empty library list runs nothing."""
        fake = FakeRun()
        monkeypatch.setattr(scaffold.subprocess, "run", fake)
        assert add_libraries(tmp_path, []) is False
        assert fake.calls == []

    def test_add_failure(self, tmp_path, monkeypatch):
        """Test a failing uv add raises ToolchainError."""
        monkeypatch.setattr(scaffold.subprocess, "run", FakeRun(returncode=1, stderr="no such package"))
        with pytest.raises(ToolchainError, match="adding libraries"):
            add_libraries(tmp_path, ["not-a-package"])


class TestVSCode:
    """Tests for VS Code integration."""

    def test_writes_settings_and_launch(self, tmp_path):
        """Test .vscode files are written."""
        vscode_dir = init_vscode_project(tmp_path)

        settings = json.loads((vscode_dir / "settings.json").read_text())
        launch = json.loads((vscode_dir / "launch.json").read_text())

        assert settings["python.defaultInterpreterPath"] == venv_python_path()
        assert settings["python.testing.pytestEnabled"] is True
        assert launch["configurations"]

    def test_interpreter_path_posix(self):
        """Test the POSIX venv interpreter location."""
        assert venv_python_path("posix") == (
            "${workspaceFolder}/.venv/bin/python"
        )

    def test_interpreter_path_windows(self):
        """Test the Windows venv interpreter location."""
        assert venv_python_path("nt") == (
            "${workspaceFolder}/.venv/Scripts/python.exe"
        )

    def test_existing_vscode_dir(self, tmp_path):
        """Test an existing .vscode directory is not overwritten."""
        (tmp_path / ".vscode").mkdir()
        with pytest.raises(EditorError):
            init_vscode_project(tmp_path)

    def test_open_in_editor(self, tmp_path, monkeypatch):
        """Test the editor is launched with the project path."""
        fake = FakeRun()
        monkeypatch.setattr(vscode.subprocess, "run", fake)
        open_in_editor(tmp_path)
        assert fake.calls[0][0] == ["code", str(tmp_path)]

    def test_open_in_editor_failure(self, tmp_path, monkeypatch):
        """Test editor failures raise EditorError."""
        monkeypatch.setattr(vscode.subprocess, "run", FakeRun(returncode=1, stderr="nope"))
        with pytest.raises(EditorError):
            open_in_editor(tmp_path)

    def test_editor_missing(self, tmp_path, monkeypatch):
        """Test a missing editor raises EditorError."""
        monkeypatch.setattr(vscode.subprocess, "run", FakeRun(missing=True))
        with pytest.raises(EditorError):
            open_in_editor(tmp_path)
