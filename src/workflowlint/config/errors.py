"""
Errors raised while loading an actionlint.yaml configuration.

Every error carries the context known at the point it was raised (node
position, key or pattern text). Outer layers re-raise the same error type with
a coarser message prefix through ``ConfigError.wrap`` so the final message
names both the root cause and the file it came from.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from workflowlint.shared.domain.exceptions import ConfigurationError


def quote(text: str) -> str:
    """Double-quote text for error messages, escaping quotes and backslashes."""
    return json.dumps(text, ensure_ascii=False)


def format_position(line: int | None, column: int | None) -> str:
    """Render a 1-based source position the way all config errors do."""
    return f"line:{line},col:{column}"


class ConfigError(ConfigurationError):
    """
    Base class for configuration loading errors.

    Attributes:
        message: Error description including every context prefix
        path: Config file the error belongs to (if known)
        line: 1-based line of the offending YAML node (if known)
        column: 1-based column of the offending YAML node (if known)
    """

    def __init__(
        self,
        message: str,
        *,
        path: str | Path | None = None,
        line: int | None = None,
        column: int | None = None,
        context: dict[str, Any] | None = None,
    ):
        super().__init__(message, context)
        self.message = message
        self.path = str(path) if path is not None else None
        self.line = line
        self.column = column

    def __str__(self) -> str:
        return self.message

    def wrap(
        self,
        prefix: str,
        *,
        path: str | Path | None = None,
        line: int | None = None,
        column: int | None = None,
    ) -> ConfigError:
        """
        Return a copy of this error with an outer context prefix.

        The copy keeps the concrete error type and every attribute, so callers
        can still tell a duplicate key from an invalid regex after wrapping.
        """
        wrapped = type(self).__new__(type(self))
        wrapped.__dict__.update(self.__dict__)
        wrapped.message = f"{prefix}: {self.message}"
        wrapped.args = (wrapped.message,)
        wrapped.context = dict(self.context)
        if path is not None:
            wrapped.path = str(path)
        if line is not None:
            wrapped.line, wrapped.column = line, column
        return wrapped


class ConfigIOError(ConfigError):
    """A config file could not be read or written."""


class YAMLSyntaxError(ConfigError):
    """The document is not well-formed YAML."""


class SchemaError(ConfigError):
    """A node has an unexpected key or the wrong kind."""

    def __init__(self, message: str, *, key: str | None = None, **kwargs: Any):
        super().__init__(message, **kwargs)
        self.key = key


class DuplicateKeyError(SchemaError):
    """The same glob pattern appears twice in one "paths" mapping."""

    def __init__(self, message: str, *, pattern: str, **kwargs: Any):
        super().__init__(message, key=pattern, **kwargs)
        self.pattern = pattern


class PatternError(ConfigError):
    """A glob or regular expression failed to compile."""

    def __init__(self, message: str, *, pattern: str, **kwargs: Any):
        super().__init__(message, **kwargs)
        self.pattern = pattern
