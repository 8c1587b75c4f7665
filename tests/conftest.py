"""Shared test fixtures for workflowlint test suite."""

import textwrap
from pathlib import Path

import pytest
from typer.testing import CliRunner


EXAMPLE_CONFIG = """\
self-hosted-runner:
  labels:
    - linux-large
    - gpu
config-variables:
  - DEPLOY_ENV
paths:
  src/**/*.yml:
    ignore:
      - '^unused variable'
"""


@pytest.fixture
def project_root(tmp_path):
    """Create a temporary project root directory."""
    return tmp_path


@pytest.fixture
def write_config(project_root):
    """Return a helper writing a config file under the project's .github directory."""

    def _write(content: str, name: str = "actionlint.yaml") -> Path:
        config_dir = project_root / ".github"
        config_dir.mkdir(parents=True, exist_ok=True)
        path = config_dir / name
        path.write_text(textwrap.dedent(content), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def example_config_file(write_config):
    """Create a valid actionlint.yaml with runner labels, variables and one path entry."""
    return write_config(EXAMPLE_CONFIG)


@pytest.fixture
def runner():
    """Fixture providing Typer CLI test runner."""
    return CliRunner()
