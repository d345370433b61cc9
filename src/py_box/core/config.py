"""Configuration file handling and option merging."""

import logging
import os
from copy import deepcopy
from pathlib import Path
from typing import Iterable, Optional

import yaml

from .exceptions import ConfigError
from .models import Options
from .paths import expand_path

logger = logging.getLogger(__name__)

CONFIG_FILE = Path.home() / ".config" / "py-box" / "config.yaml"

# Environment overrides (may also come from a .env file)
CONFIG_ENV_VAR = "PY_BOX_CONFIG"
ROOT_ENV_VAR = "PY_BOX_ROOT"

DEFAULT_CONFIG = {
    "root": "~/tmp/py-box",
    "add": ["rich", "httpx", "pytest"],
    "vscode": False,
    "logging": {
        "level": "WARNING",
    },
}

# Expected type of each known key; bad values fall back to the default
CONFIG_TYPES = {
    "root": str,
    "add": list,
    "vscode": bool,
    "logging": dict,
}


def get_config_path() -> Path:
    """Get the config file location, honoring PY_BOX_CONFIG."""
    override = os.getenv(CONFIG_ENV_VAR)
    if override:
        return Path(expand_path(override))
    return CONFIG_FILE


def load_config(config_path: Optional[Path] = None) -> dict:
    """Load configuration from YAML, merged over the defaults.

    A missing file yields the defaults. A file that cannot be read or
    parsed is logged and ignored, as is any known key whose value has the
    wrong type.

    Args:
        config_path: Config file to read (default: get_config_path())

    Returns:
        Configuration dictionary
    """
    config = deepcopy(DEFAULT_CONFIG)
    config_path = config_path or get_config_path()

    if not config_path.exists():
        logger.debug(f"No config file at {config_path}, using defaults")
        return config

    try:
        with open(config_path, encoding="utf-8") as f:
            user_config = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        logger.warning(f"Failed to load config {config_path}: {e}")
        return config

    if not isinstance(user_config, dict):
        logger.warning(f"Ignoring config {config_path}: expected a mapping")
        return config

    for key, value in user_config.items():
        expected = CONFIG_TYPES.get(key)
        if expected is not None and not isinstance(value, expected):
            logger.warning(
                f"Ignoring {key!r} in {config_path}: expected {expected.__name__}, "
                f"got {type(value).__name__}"
            )
            continue
        config[key] = value

    if not all(isinstance(lib, str) for lib in config["add"]):
        logger.warning(f"Ignoring 'add' in {config_path}: entries must be strings")
        config["add"] = list(DEFAULT_CONFIG["add"])

    logger.debug(f"Loaded config from {config_path}")
    return config


def write_default_config(config_path: Optional[Path] = None) -> Path:
    """Write the default configuration as YAML.

    Args:
        config_path: Destination (default: get_config_path())

    Returns:
        The path written

    Raises:
        ConfigError: If the file cannot be written
    """
    config_path = config_path or get_config_path()

    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        with open(config_path, "w", encoding="utf-8") as f:
            yaml.safe_dump(DEFAULT_CONFIG, f, default_flow_style=False, sort_keys=False)
    except OSError as e:
        raise ConfigError(f"Failed to write config {config_path}: {e}") from e

    logger.info(f"Wrote default config to {config_path}")
    return config_path


def build_options(
    config: dict,
    root: Optional[str] = None,
    add: Optional[Iterable[str]] = None,
    vscode: Optional[bool] = None,
    name: Optional[str] = None,
    copy: Optional[str] = None,
    seed: Optional[int] = None,
    max_attempts: Optional[int] = None,
) -> Options:
    """Merge config defaults with command line values.

    Command line values win when given. ``add`` replaces the configured
    library list rather than extending it. PY_BOX_ROOT overrides the
    configured root but not an explicit ``root``.

    Returns:
        Options with ``root`` fully expanded
    """
    if not root:
        root = os.getenv(ROOT_ENV_VAR) or config.get("root") or DEFAULT_CONFIG["root"]

    if add:
        add = list(add)
    else:
        configured = config.get("add") or []
        add = [configured] if isinstance(configured, str) else list(configured)
    if vscode is None:
        vscode = bool(config.get("vscode", False))

    return Options(
        root=expand_path(str(root)),
        add=add,
        vscode=vscode,
        name=name or None,
        copy=copy or None,
        seed=seed,
        max_attempts=max_attempts,
    )
