"""Path helpers for the sandbox root directory."""

import logging
import os
import re
from pathlib import Path

from .exceptions import ProjectError

logger = logging.getLogger(__name__)

# $VAR or ${VAR}
ENV_VAR_PATTERN = re.compile(r"\$(\w+)|\$\{(\w+)\}")


def expand_path(path: str) -> str:
    """Expand a user-supplied path.

    - ``~`` is replaced with the home directory
    - a leading ``.`` is resolved against the current working directory
    - ``$VAR`` and ``${VAR}`` are replaced with the environment value,
      or an empty string when unset

    Args:
        path: Path to expand

    Returns:
        The expanded path
    """
    if path.startswith("~"):
        path = os.path.expanduser(path)

    if path.startswith("."):
        path = os.getcwd() + path[1:]

    return ENV_VAR_PATTERN.sub(
        lambda m: os.environ.get(m.group(1) or m.group(2), ""), path
    )


def ensure_root(root: str) -> Path:
    """Create the root directory (and parents) if missing.

    Raises:
        ProjectError: If the directory cannot be created
    """
    root_path = Path(root)
    try:
        root_path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise ProjectError(f"Error creating root directory: {e}") from e

    logger.debug(f"Sandbox root: {root_path}")
    return root_path
