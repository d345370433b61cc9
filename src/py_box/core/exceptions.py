"""Custom exceptions for py-box."""


class PyBoxError(Exception):
    """Base exception for py-box."""

    pass


class ConfigError(PyBoxError):
    """Configuration or packaged data could not be loaded."""

    pass


class ProjectError(PyBoxError):
    """Project directory errors."""

    pass


class ProjectExistsError(ProjectError):
    """Project directory already exists."""

    pass


class ProjectNotFoundError(ProjectError):
    """Project to copy does not exist."""

    pass


class ToolchainError(PyBoxError):
    """External toolchain command failed."""

    def __init__(self, message: str, stderr: str = ""):
        super().__init__(message)
        self.stderr = stderr


class ToolchainNotFoundError(ToolchainError):
    """Toolchain executable is not installed or not found."""

    pass


class EditorError(PyBoxError):
    """Editor setup or launch failed."""

    pass


class NameExhaustedError(PyBoxError):
    """No unused project name found within the attempt limit."""

    pass
