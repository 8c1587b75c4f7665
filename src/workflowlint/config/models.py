"""
Configuration models for actionlint.yaml.

These models are built once by the decoder and never mutated:
- SuppressionRules: compiled "ignore" regexes of one path entry
- PathConfig: one glob pattern bound to its SuppressionRules
- PathConfigs: the "paths" mapping (glob source -> PathConfig)
- Config: the whole document

Loaded from .github/actionlint.yaml:
```yaml
self-hosted-runner:
  labels:
    - linux-large
config-variables:
  - DEPLOY_ENV
paths:
  .github/workflows/**/*.yml:
    ignore:
      - 'shellcheck reported issue in this script: SC2086:.+'
```
"""

from __future__ import annotations

import os
from collections.abc import Callable, Iterable, Iterator, Mapping, Sequence
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from workflowlint.config.errors import PatternError, format_position
from workflowlint.config.patterns import PathPattern, TextPattern, compile_regex, normalize_path

RegexFactory = Callable[[str], TextPattern]


def message_of(diagnostic: Any) -> str:
    """Accept a plain message or any object with a ``message`` attribute."""
    return diagnostic if isinstance(diagnostic, str) else str(getattr(diagnostic, "message", diagnostic))


@dataclass(frozen=True)
class SuppressionRules:
    """Ordered, compiled regular expressions matched against diagnostic messages."""

    rules: tuple[TextPattern, ...] = ()

    @classmethod
    def compile(
        cls,
        sources: Iterable[str],
        positions: Sequence[tuple[int, int]] | None = None,
        factory: RegexFactory = compile_regex,
    ) -> SuppressionRules:
        """
        Compile every source, failing on the first invalid one.

        Args:
            sources: Regular expression sources, in order
            positions: Optional 1-based (line, column) of each source
            factory: Pattern factory (defaults to Python ``re``)

        Raises:
            PatternError: For the first source that does not compile
        """
        compiled = []
        for index, source in enumerate(sources):
            try:
                compiled.append(factory(source))
            except PatternError as e:
                if positions is None:
                    raise
                line, column = positions[index]
                raise e.wrap(
                    f"\"ignore\" entry at {format_position(line, column)}",
                    line=line,
                    column=column,
                ) from e
        return cls(rules=tuple(compiled))

    def suppresses(self, message: str) -> bool:
        """Return True if any rule is found anywhere in the message."""
        return any(rule.find(message) for rule in self.rules)

    def __iter__(self) -> Iterator[TextPattern]:
        return iter(self.rules)

    def __len__(self) -> int:
        return len(self.rules)


@dataclass(frozen=True)
class PathConfig:
    """
    Configuration for files matching one glob pattern.

    This is a value of the "paths" mapping. ``ignore`` holds the compiled
    patterns matched against error messages, similar to the ``-ignore``
    command line option of the linter.
    """

    pattern: PathPattern
    ignore: SuppressionRules = field(default_factory=SuppressionRules)

    @property
    def glob(self) -> str:
        return self.pattern.source

    def matches(self, path: str | os.PathLike[str]) -> bool:
        """Check whether this config applies to the given path."""
        return self.pattern.matches(normalize_path(path))

    def ignores(self, diagnostic: Any) -> bool:
        """Check whether a diagnostic (or its message) should be ignored."""
        return self.ignore.suppresses(message_of(diagnostic))


class PathConfigs(Mapping[str, PathConfig]):
    """
    Read-only "paths" mapping.

    Keys are glob patterns matching file paths relative to the repository
    root; values are the corresponding PathConfig.
    """

    __slots__ = ("_entries",)

    def __init__(self, entries: Mapping[str, PathConfig] | None = None):
        self._entries = MappingProxyType(dict(entries or {}))

    def __getitem__(self, pattern: str) -> PathConfig:
        return self._entries[pattern]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"PathConfigs({list(self._entries)!r})"

    def matching(self, path: str | os.PathLike[str]) -> list[PathConfig]:
        """Return every entry whose glob matches the path."""
        normalized = normalize_path(path)
        return [cfg for cfg in self._entries.values() if cfg.matches(normalized)]


@dataclass(frozen=True)
class Config:
    """
    Configuration of the linter, parsed from .github/actionlint.yaml.

    Attributes:
        runner_labels: Label names of self-hosted runners
        config_variables: Names of configuration variables used in workflows.
            None disables the check of ``vars`` property names; an empty tuple
            means no configuration variable is allowed.
        paths: Per-path configuration keyed by glob pattern
    """

    runner_labels: tuple[str, ...] = ()
    config_variables: tuple[str, ...] | None = None
    paths: PathConfigs = field(default_factory=PathConfigs)

    @property
    def checks_config_variables(self) -> bool:
        return self.config_variables is not None

    def is_known_variable(self, name: str) -> bool:
        """
        Check a ``vars.<name>`` reference against config-variables.

        Always True when the check is disabled.
        """
        if self.config_variables is None:
            return True
        return name in self.config_variables

    def path_configs_for(self, path: str | os.PathLike[str]) -> list[PathConfig]:
        """
        Return all PathConfig values matching the given file path.

        The path must be relative to the root of the project.
        """
        return self.paths.matching(path)

    def ignores(self, path: str | os.PathLike[str], diagnostic: Any) -> bool:
        """Check whether any entry matching the path ignores the diagnostic."""
        return any(cfg.ignores(diagnostic) for cfg in self.path_configs_for(path))


def path_configs_for(config: Config | None, path: str | os.PathLike[str]) -> list[PathConfig]:
    """Like ``Config.path_configs_for`` but tolerates a missing configuration."""
    if config is None:
        return []
    return config.path_configs_for(path)
