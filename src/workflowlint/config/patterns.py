"""
Pattern capabilities used by the "paths" configuration.

Two pattern languages are compiled at load time:

- glob patterns (keys of the "paths" mapping) matched against file paths
- regular expressions ("ignore" entries) searched in diagnostic messages

Both are hidden behind small protocols built by fallible factories, so the
decoder never depends on a concrete matching engine.

Glob syntax:
    *, **       any sequence of characters, "/" included; a "/" written
                in the pattern still has to match, so "a/**/b" needs a
                directory between "a" and "b"
    ?           any single character
    [abc] [a-z] character class or range; [!abc] negates it ("^" is literal)
    {a,b}       alternatives; they nest and may contain wildcards
    \\x          the literal character x
"""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from workflowlint.config.errors import PatternError, quote


@runtime_checkable
class PathPattern(Protocol):
    """A compiled glob matched against whole paths."""

    source: str

    def matches(self, path: str) -> bool: ...


@runtime_checkable
class TextPattern(Protocol):
    """A compiled pattern searched anywhere inside a text."""

    source: str

    def find(self, text: str) -> bool: ...


def normalize_path(path: str | os.PathLike[str]) -> str:
    """Convert any path to the forward-slash form globs are written in."""
    return os.fspath(path).replace("\\", "/")


@dataclass(frozen=True)
class GlobPattern:
    """Glob pattern compiled to an anchored regular expression."""

    source: str
    regex: re.Pattern[str]

    def matches(self, path: str | os.PathLike[str]) -> bool:
        return self.regex.fullmatch(normalize_path(path)) is not None


@dataclass(frozen=True)
class RegexPattern:
    """Regular expression with substring (search) semantics."""

    source: str
    regex: re.Pattern[str]

    def find(self, text: str) -> bool:
        return self.regex.search(text) is not None


class _GlobTranslator:
    """Recursive-descent translation of one glob into regex source."""

    def __init__(self, source: str):
        self.source = source
        self.pos = 0

    def error(self, reason: str) -> PatternError:
        return PatternError(
            f"invalid glob pattern {quote(self.source)}: {reason}",
            pattern=self.source,
        )

    def translate(self) -> str:
        return self._sequence(in_braces=False)

    def _sequence(self, in_braces: bool) -> str:
        parts: list[str] = []
        src = self.source
        while self.pos < len(src):
            ch = src[self.pos]
            if in_braces and ch in ",}":
                return "".join(parts)
            self.pos += 1
            if ch == "*":
                # Runs of stars collapse; "**" means the same as "*"
                while self.pos < len(src) and src[self.pos] == "*":
                    self.pos += 1
                parts.append(".*")
            elif ch == "?":
                parts.append(".")
            elif ch == "[":
                parts.append(self._char_class(start=self.pos - 1))
            elif ch == "{":
                parts.append(self._alternatives(start=self.pos - 1))
            elif ch == "\\":
                parts.append(re.escape(self._escaped()))
            else:
                parts.append(re.escape(ch))
        return "".join(parts)

    def _escaped(self) -> str:
        if self.pos >= len(self.source):
            raise self.error("unexpected end of pattern after \"\\\"")
        ch = self.source[self.pos]
        self.pos += 1
        return ch

    def _alternatives(self, start: int) -> str:
        options: list[str] = []
        while True:
            options.append(self._sequence(in_braces=True))
            if self.pos >= len(self.source):
                raise self.error(f"unclosed \"{{\" at offset {start}")
            sep = self.source[self.pos]
            self.pos += 1
            if sep == "}":
                return "(?:" + "|".join(options) + ")"

    def _char_class(self, start: int) -> str:
        src = self.source
        negated = False
        if self.pos < len(src) and src[self.pos] == "!":
            negated = True
            self.pos += 1

        items: list[str] = []
        while True:
            if self.pos >= len(src):
                raise self.error(f"unclosed \"[\" at offset {start}")
            ch = src[self.pos]
            self.pos += 1
            if ch == "]":
                break
            if ch == "\\":
                ch = self._escaped()
            if self.pos + 1 < len(src) and src[self.pos] == "-" and src[self.pos + 1] != "]":
                self.pos += 1
                hi = src[self.pos]
                self.pos += 1
                if hi == "\\":
                    hi = self._escaped()
                if hi < ch:
                    raise self.error(f"invalid range {quote(ch + '-' + hi)} at offset {start}")
                items.append(f"{re.escape(ch)}-{re.escape(hi)}")
            else:
                items.append(re.escape(ch))

        if not items:
            raise self.error(f"empty character class at offset {start}")
        return ("[^" if negated else "[") + "".join(items) + "]"


def compile_glob(source: str) -> PathPattern:
    """
    Compile a glob pattern.

    Args:
        source: Glob pattern text

    Returns:
        Compiled PathPattern

    Raises:
        PatternError: If the pattern is not a valid glob
    """
    body = _GlobTranslator(source).translate()
    return GlobPattern(source=source, regex=re.compile(body, re.DOTALL))


def compile_regex(source: str) -> TextPattern:
    """
    Compile a regular expression used to match diagnostic messages.

    Raises:
        PatternError: If the expression does not compile
    """
    try:
        regex = re.compile(source)
    except re.error as e:
        raise PatternError(
            f"invalid regular expression {quote(source)}: {e}",
            pattern=source,
        ) from e
    return RegexPattern(source=source, regex=regex)
