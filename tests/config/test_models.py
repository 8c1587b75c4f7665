"""
Tests for configuration models.

Verifies:
1. SuppressionRules compile all-or-nothing and match by substring
2. Path lookups return every matching entry
3. Suppression decisions are the union of matching entries
4. Models are read-only after construction
"""

import dataclasses
from types import SimpleNamespace

import pytest

from workflowlint.config.errors import PatternError
from workflowlint.config.models import (
    Config,
    PathConfig,
    PathConfigs,
    SuppressionRules,
    path_configs_for,
)
from workflowlint.config.patterns import compile_glob


def _entry(glob: str, *ignore: str) -> PathConfig:
    return PathConfig(pattern=compile_glob(glob), ignore=SuppressionRules.compile(ignore))


def _config(*entries: PathConfig) -> Config:
    return Config(paths=PathConfigs({e.glob: e for e in entries}))


class TestSuppressionRules:
    """Test SuppressionRules compile and matching."""

    def test_union_of_rules(self):
        rules = SuppressionRules.compile(["^foo", "bar$"])

        assert rules.suppresses("foo at start")
        assert rules.suppresses("ends with bar")
        assert not rules.suppresses("a foo bar b")

    def test_substring_not_full_match(self):
        rules = SuppressionRules.compile(["unused"])

        assert rules.suppresses("variable is unused here")

    def test_empty_rules_suppress_nothing(self):
        assert not SuppressionRules().suppresses("anything")
        assert not SuppressionRules.compile([]).suppresses("")

    def test_first_invalid_rule_aborts(self):
        with pytest.raises(PatternError) as exc_info:
            SuppressionRules.compile(["ok", "(", "["])

        assert exc_info.value.pattern == "("

    def test_invalid_rule_with_position(self):
        with pytest.raises(PatternError) as exc_info:
            SuppressionRules.compile(["ok", "("], positions=[(3, 9), (4, 9)])

        err = exc_info.value
        assert (err.line, err.column) == (4, 9)
        assert str(err).startswith('"ignore" entry at line:4,col:9: ')

    def test_iteration_and_length(self):
        rules = SuppressionRules.compile(["a", "b"])

        assert len(rules) == 2
        assert [r.source for r in rules] == ["a", "b"]


class TestPathLookup:
    """Test Config.path_configs_for and PathConfigs.matching."""

    def test_example_from_documentation(self):
        config = _config(_entry("src/**/*.yml", "^unused variable"))

        matching = config.path_configs_for("src/a/b.yml")
        assert [c.glob for c in matching] == ["src/**/*.yml"]
        assert config.ignores("src/a/b.yml", "unused variable x")
        assert not config.ignores("src/a/b.yml", "other issue")

        assert config.path_configs_for("other/x.yml") == []
        assert not config.ignores("other/x.yml", "unused variable x")

    def test_overlapping_entries_are_all_returned(self):
        config = _config(
            _entry("**/*.yml", "foo"),
            _entry(".github/**", "bar"),
            _entry("docs/**", "baz"),
        )

        matching = config.path_configs_for(".github/workflows/ci.yml")
        assert {c.glob for c in matching} == {"**/*.yml", ".github/**"}

    def test_suppression_is_union_of_matching_entries(self):
        config = _config(_entry("**/*.yml", "foo"), _entry(".github/**", "bar"))
        path = ".github/workflows/ci.yml"

        assert config.ignores(path, "foo error")
        assert config.ignores(path, "bar error")
        assert not config.ignores(path, "baz error")

    def test_windows_separators(self):
        config = _config(_entry(".github/workflows/*.yml", "x"))

        assert len(config.path_configs_for(".github\\workflows\\ci.yml")) == 1

    def test_empty_rule_set_and_no_match_are_equivalent(self):
        config = _config(_entry("a/*.yml"))

        assert len(config.path_configs_for("a/x.yml")) == 1
        assert not config.ignores("a/x.yml", "msg")
        assert not config.ignores("b/x.yml", "msg")

    def test_missing_config_has_no_entries(self):
        assert path_configs_for(None, "a.yml") == []

    def test_diagnostic_objects_use_message_attribute(self):
        entry = _entry("*.yml", "shellcheck")

        assert entry.ignores(SimpleNamespace(message="shellcheck reported issue"))
        assert not entry.ignores(SimpleNamespace(message="other"))


class TestImmutability:
    """Test that loaded models cannot be mutated."""

    def test_path_configs_is_read_only(self):
        table = PathConfigs({"a": _entry("a")})

        with pytest.raises(TypeError):
            table["b"] = _entry("b")  # type: ignore[index]

    def test_path_configs_copies_input(self):
        source = {"a": _entry("a")}
        table = PathConfigs(source)
        source["b"] = _entry("b")

        assert list(table) == ["a"]

    def test_config_is_frozen(self):
        config = Config()

        with pytest.raises(dataclasses.FrozenInstanceError):
            config.runner_labels = ("x",)  # type: ignore[misc]
