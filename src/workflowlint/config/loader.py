"""
Configuration loader for actionlint.yaml.

Reads the configuration from an explicit file path or discovers it in the
repository's .github directory, and writes the default template.

Functions:
- parse_config: Decode configuration bytes read from a file
- read_config_file: Load configuration from a given path
- find_repo_config: Locate the configuration file of a repository
- load_repo_config: Discover and load a repository's configuration
- write_default_config_file: Write the documented default template
"""

from __future__ import annotations

import os
from pathlib import Path

from workflowlint.config.decoder import decode_config
from workflowlint.config.errors import ConfigError, ConfigIOError, quote
from workflowlint.config.models import Config
from workflowlint.config.nodes import compose_document
from workflowlint.shared.infrastructure.logging import get_logger

logger = get_logger(__name__)

CONFIG_DIR = ".github"

# Probed in order; the first existing file wins
CONFIG_FILE_NAMES: tuple[str, ...] = ("actionlint.yaml", "actionlint.yml")

DEFAULT_CONFIG_TEMPLATE = """\
self-hosted-runner:
  # Labels of self-hosted runner in array of strings.
  labels: []

# Configuration variables in array of strings defined in your repository or
# organization. `null` means disabling configuration variables check.
# Empty array means no configuration variable is allowed.
config-variables: null

# Configuration for file paths. The keys are glob patterns to match to file
# paths relative to the repository root. The values are the configurations for
# the file paths. The following configurations are available.
#
# "ignore" is an array of regular expression patterns. Matched error messages
# are ignored. This is similar to the "-ignore" command line option.
paths:
#  .github/workflows/**/*.yml:
#    ignore: []
"""


def parse_config(data: bytes | str, path: str | Path) -> Config:
    """
    Parse configuration content read from ``path``.

    Args:
        data: Raw YAML document
        path: File the content came from (used in error messages)

    Returns:
        Decoded Config

    Raises:
        ConfigError: If the document is malformed or invalid
    """
    try:
        config = decode_config(compose_document(data))
    except ConfigError as e:
        raise e.wrap(f"could not parse config file {quote(str(path))}", path=path) from e

    logger.debug(
        "config_loaded",
        path=str(path),
        runner_labels=len(config.runner_labels),
        config_variables=None if config.config_variables is None else len(config.config_variables),
        paths=len(config.paths),
    )
    return config


def read_config_file(path: str | Path) -> Config:
    """
    Read actionlint config file (actionlint.yaml) from the given file path.

    Raises:
        ConfigIOError: If the file cannot be read
        ConfigError: If the content is invalid
    """
    path = Path(path)
    try:
        data = path.read_bytes()
    except OSError as e:
        raise ConfigIOError(
            f"could not read config file {quote(str(path))}: {e}",
            path=path,
        ) from e
    return parse_config(data, path)


def find_repo_config(root: str | Path) -> Path | None:
    """Return the first existing candidate config file under ``root``, if any."""
    config_dir = Path(root) / CONFIG_DIR
    for name in CONFIG_FILE_NAMES:
        candidate = config_dir / name
        if candidate.is_file():
            return candidate
    return None


def load_repo_config(root: str | Path) -> Config | None:
    """
    Load the configuration of the repository rooted at ``root``.

    Looks for .github/actionlint.yaml, then .github/actionlint.yml.

    Returns:
        Config of the first existing file, or None when the repository has no
        configuration file (this is not an error)

    Raises:
        ConfigError: If the discovered file cannot be read or is invalid
    """
    path = find_repo_config(root)
    if path is None:
        logger.debug("config_not_found", root=str(root), candidates=list(CONFIG_FILE_NAMES))
        return None
    return read_config_file(path)


def write_default_config_file(path: str | Path) -> None:
    """
    Write the default configuration template to ``path``.

    The file is created with 0644 permissions (before umask).

    Raises:
        ConfigIOError: If the file cannot be written
    """
    path = Path(path)
    try:
        fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o644)
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(DEFAULT_CONFIG_TEMPLATE)
    except OSError as e:
        raise ConfigIOError(
            f"could not write default configuration file at {quote(str(path))}: {e}",
            path=path,
        ) from e

    logger.info("default_config_written", path=str(path))
