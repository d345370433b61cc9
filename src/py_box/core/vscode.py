"""VS Code workspace settings for new sandboxes."""

import json
import logging
import os
import subprocess
from importlib import resources
from pathlib import Path

from .exceptions import EditorError

logger = logging.getLogger(__name__)

DEFAULT_EDITOR = "code"
LAUNCH_RESOURCE = "launch.json"


def venv_python_path(os_name: str = os.name) -> str:
    """Interpreter path inside the project .venv for the given platform."""
    if os_name == "nt":
        return "${workspaceFolder}/.venv/Scripts/python.exe"
    return "${workspaceFolder}/.venv/bin/python"


def generate_settings() -> dict:
    """Generate settings.json contents for a uv-managed project."""
    return {
        "python.defaultInterpreterPath": venv_python_path(),
        "python.terminal.activateEnvironment": True,
        "python.testing.pytestEnabled": True,
        "python.testing.unittestEnabled": False,
    }


def load_launch_template() -> dict:
    """Load the packaged launch.json template."""
    text = resources.files("py_box.assets.vscode").joinpath(LAUNCH_RESOURCE).read_text(
        encoding="utf-8"
    )
    return json.loads(text)


def _write_json(path: Path, data: dict) -> None:
    try:
        with open(path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)
    except OSError as e:
        raise EditorError(f"Error creating {path.name}: {e}") from e


def init_vscode_project(project_dir: str | Path) -> Path:
    """Create .vscode/ with settings.json and launch.json.

    Args:
        project_dir: Project directory

    Returns:
        Path to the .vscode directory

    Raises:
        EditorError: If the directory or files cannot be written
    """
    vscode_dir = Path(project_dir) / ".vscode"

    try:
        vscode_dir.mkdir()
    except OSError as e:
        raise EditorError(f"Error creating .vscode directory: {e}") from e

    _write_json(vscode_dir / "settings.json", generate_settings())
    _write_json(vscode_dir / "launch.json", load_launch_template())

    logger.info(f"Wrote VS Code settings to {vscode_dir}")
    return vscode_dir


def open_in_editor(project_dir: str | Path, command: str = DEFAULT_EDITOR) -> None:
    """Open the project in VS Code.

    Raises:
        EditorError: If the editor is missing or exits non-zero
    """
    try:
        result = subprocess.run(
            [command, str(project_dir)],
            capture_output=True,
            text=True,
        )
    except FileNotFoundError as e:
        raise EditorError(f"Error opening project: {command} is not installed") from e

    if result.returncode != 0:
        raise EditorError(f"Error opening project in VS Code: {result.stderr.strip()}")
