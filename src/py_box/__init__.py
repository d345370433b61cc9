"""py-box: scaffold throwaway Python sandbox projects."""

__version__ = "0.1.0"
