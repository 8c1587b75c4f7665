"""
Domain exceptions for workflowlint.

Follows the "Fail Fast" and "Strict Types" principles.
All application errors should inherit from WorkflowlintError.
"""


class WorkflowlintError(Exception):
    """Base class for all workflowlint exceptions."""

    def __init__(self, message: str, context: dict = None):
        super().__init__(message)
        self.context = context or {}


class ConfigurationError(WorkflowlintError):
    """Raised when configuration is invalid or corrupt."""

    pass
