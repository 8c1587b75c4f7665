"""workflowlint: configuration subsystem of a GitHub Actions workflow linter."""

__version__ = "0.1.0"
