"""
Tests for SuppressionFilter.

Verifies:
1. Diagnostics ignored by any matching "paths" entry are dropped
2. Order of kept diagnostics is preserved
3. Missing configuration or non-matching path keeps everything
4. INFO-level logging for each suppression and a summary event
"""

from dataclasses import dataclass

import pytest
import structlog
from structlog.testing import capture_logs

from workflowlint.config import filter as filter_module
from workflowlint.config.filter import SuppressionFilter
from workflowlint.config.loader import parse_config


@dataclass
class Diagnostic:
    message: str
    line: int = 1


SC2086 = "shellcheck reported issue in this script: SC2086: double quote"

CONFIG = parse_config(
    """\
paths:
  .github/workflows/*.yml:
    ignore:
      - 'shellcheck reported issue in this script: SC2086:.+'
  '**/release.yml':
    ignore:
      - '^label ".+" is unknown'
  .github/workflows/**/*.yml:
    ignore:
      - '^nested only'
""",
    "actionlint.yaml",
)


@pytest.fixture
def captured_logs(monkeypatch):
    """Capture structlog events of the filter module."""
    with capture_logs() as logs:
        # Fresh proxy: a logger cached by an earlier configure_logging() bypasses capture
        monkeypatch.setattr(filter_module, "logger", structlog.get_logger(filter_module.__name__))
        yield logs


def test_drops_ignored_diagnostics_in_order():
    diagnostics = [Diagnostic("first"), Diagnostic(SC2086), Diagnostic("second")]

    kept = SuppressionFilter.apply(CONFIG, ".github/workflows/ci.yml", diagnostics)

    assert [d.message for d in kept] == ["first", "second"]


def test_union_of_matching_entries():
    diagnostics = ['label "gpu" is unknown', SC2086, "kept"]

    kept = SuppressionFilter.apply(CONFIG, ".github/workflows/release.yml", diagnostics)

    assert kept == ["kept"]


def test_globstar_entry_skips_direct_children():
    diagnostics = ["nested only rule"]

    assert SuppressionFilter.apply(CONFIG, ".github/workflows/ci.yml", diagnostics) == diagnostics
    assert SuppressionFilter.apply(CONFIG, ".github/workflows/sub/ci.yml", diagnostics) == []


def test_non_matching_path_keeps_everything():
    diagnostics = ['label "gpu" is unknown']

    assert SuppressionFilter.apply(CONFIG, "docs/ci.yml", diagnostics) == diagnostics


def test_missing_config_keeps_everything():
    diagnostics = [Diagnostic("anything")]

    assert SuppressionFilter.apply(None, ".github/workflows/ci.yml", diagnostics) == diagnostics


def test_empty_diagnostics():
    assert SuppressionFilter.apply(CONFIG, ".github/workflows/ci.yml", []) == []


class TestSuppressionFilterLogging:
    """Test that suppression decisions are logged at INFO level."""

    def test_info_log_for_each_suppressed_diagnostic(self, captured_logs):
        diagnostics = [Diagnostic(SC2086), Diagnostic("kept"), 'label "gpu" is unknown']

        SuppressionFilter.apply(CONFIG, ".github/workflows/release.yml", diagnostics)

        events = [e for e in captured_logs if e["event"] == "diagnostic_suppressed_by_config"]
        assert len(events) == 2
        assert all(e["log_level"] == "info" for e in events)
        assert all(e["file"] == ".github/workflows/release.yml" for e in events)
        assert events[0]["message"] == SC2086
        assert events[0]["matched_glob"] == ".github/workflows/*.yml"
        assert events[1]["message"] == 'label "gpu" is unknown'
        assert events[1]["matched_glob"] == "**/release.yml"

    def test_summary_log_with_counts(self, captured_logs):
        diagnostics = [Diagnostic(SC2086), Diagnostic("kept")]

        SuppressionFilter.apply(CONFIG, ".github/workflows/ci.yml", diagnostics)

        summary = [e for e in captured_logs if e["event"] == "suppression_filter_summary"]
        assert len(summary) == 1
        assert summary[0]["file"] == ".github/workflows/ci.yml"
        assert summary[0]["total_diagnostics"] == 2
        assert summary[0]["suppressed"] == 1
        assert summary[0]["remaining"] == 1

    def test_no_logs_when_nothing_suppressed(self, captured_logs):
        SuppressionFilter.apply(CONFIG, ".github/workflows/ci.yml", [Diagnostic("kept")])

        assert captured_logs == []
