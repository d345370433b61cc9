"""Project creation: copying sandboxes and driving the uv toolchain."""

import logging
import shutil
import subprocess
from pathlib import Path
from typing import Sequence

from .exceptions import (
    ProjectExistsError,
    ProjectNotFoundError,
    ToolchainError,
    ToolchainNotFoundError,
)

logger = logging.getLogger(__name__)

DEFAULT_TOOLCHAIN = "uv"


def _run_toolchain(args: list[str], cwd: Path, action: str) -> subprocess.CompletedProcess:
    """Run a toolchain command, raising on failure.

    Args:
        args: Command and arguments
        cwd: Working directory for the command
        action: Short description used in error messages

    Raises:
        ToolchainNotFoundError: If the executable is not installed
        ToolchainError: If the command exits non-zero
    """
    logger.debug(f"Running {' '.join(args)} in {cwd}")
    try:
        result = subprocess.run(
            args,
            cwd=cwd,
            capture_output=True,
            text=True,
        )
    except FileNotFoundError as e:
        raise ToolchainNotFoundError(
            f"Error {action}: {args[0]} is not installed or not in PATH"
        ) from e

    if result.returncode != 0:
        logger.error(f"{' '.join(args)} failed with exit code {result.returncode}")
        raise ToolchainError(f"Error {action}", stderr=result.stderr or "")

    return result


def copy_project(root: str | Path, source: str, dest: str) -> Path:
    """Copy an existing sandbox to a new directory under root.

    Args:
        root: Sandbox root directory
        source: Name of the project to copy
        dest: Name of the new project

    Returns:
        Path to the new project

    Raises:
        ProjectNotFoundError: If the source project does not exist
        ProjectExistsError: If the destination already exists
    """
    root = Path(root)
    src = root / source
    dst = root / dest

    if not src.is_dir():
        raise ProjectNotFoundError(f"Project not found: {src}")
    if dst.exists():
        raise ProjectExistsError(f"Project already exists: {dst}")

    shutil.copytree(src, dst, symlinks=True)
    logger.info(f"Copied {src} to {dst}")
    return dst


def init_project(root: str | Path, name: str, command: str = DEFAULT_TOOLCHAIN) -> Path:
    """Initialize a new project with ``uv init <name>`` inside root.

    Returns:
        Path to the new project
    """
    root = Path(root)
    _run_toolchain([command, "init", name], cwd=root, action="initializing project")
    logger.info(f"Initialized project {name} in {root}")
    return root / name


def add_libraries(
    project_dir: str | Path,
    libraries: Sequence[str],
    command: str = DEFAULT_TOOLCHAIN,
) -> bool:
    """Add libraries to a project with ``uv add``.

    Returns:
        True if libraries were added, False if there was nothing to add
    """
    if not libraries:
        return False

    _run_toolchain(
        [command, "add", *libraries],
        cwd=Path(project_dir),
        action="adding libraries",
    )
    logger.info(f"Added libraries: {', '.join(libraries)}")
    return True
