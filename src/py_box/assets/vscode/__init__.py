"""VS Code templates."""
