"""Core components: name generation, configuration and project scaffolding."""

from .exceptions import (
    ConfigError,
    EditorError,
    NameExhaustedError,
    ProjectError,
    ProjectExistsError,
    ProjectNotFoundError,
    PyBoxError,
    ToolchainError,
    ToolchainNotFoundError,
)
from .models import NameGeneratorConfig, Options, WordLists
from .name_generator import NameGenerator, default_seed, load_word_lists
from .resolver import ProjectNameResolver, resolve_project_name
from .config import build_options, load_config, write_default_config
from .paths import ensure_root, expand_path
from .scaffold import add_libraries, copy_project, init_project
from .vscode import init_vscode_project, open_in_editor

__all__ = [
    # Models
    "NameGeneratorConfig",
    "Options",
    "WordLists",
    # Name Generator
    "NameGenerator",
    "default_seed",
    "load_word_lists",
    # Resolver
    "ProjectNameResolver",
    "resolve_project_name",
    # Config
    "build_options",
    "load_config",
    "write_default_config",
    # Paths
    "ensure_root",
    "expand_path",
    # Scaffolding
    "add_libraries",
    "copy_project",
    "init_project",
    # Editor
    "init_vscode_project",
    "open_in_editor",
    # Exceptions
    "PyBoxError",
    "ConfigError",
    "ProjectError",
    "ProjectExistsError",
    "ProjectNotFoundError",
    "ToolchainError",
    "ToolchainNotFoundError",
    "EditorError",
    "NameExhaustedError",
]
