"""
Configuration module for the workflow linter.

Loads .github/actionlint.yaml, which declares self-hosted runner labels and
configuration variables, and ignores error messages on files matching glob
patterns.

Exports:
    - Config: Whole configuration document
    - PathConfig / PathConfigs: "paths" entries and mapping
    - SuppressionRules: Compiled "ignore" patterns of one entry
    - SuppressionFilter: Drops ignored diagnostics of a file
    - read_config_file: Load configuration from a file path
    - load_repo_config: Discover and load a repository's configuration
    - write_default_config_file: Write the default template
    - ConfigError and its subclasses
"""

from workflowlint.config.errors import (
    ConfigError,
    ConfigIOError,
    DuplicateKeyError,
    PatternError,
    SchemaError,
    YAMLSyntaxError,
)
from workflowlint.config.filter import SuppressionFilter
from workflowlint.config.loader import (
    CONFIG_FILE_NAMES,
    DEFAULT_CONFIG_TEMPLATE,
    find_repo_config,
    load_repo_config,
    parse_config,
    read_config_file,
    write_default_config_file,
)
from workflowlint.config.models import (
    Config,
    PathConfig,
    PathConfigs,
    SuppressionRules,
    path_configs_for,
)
from workflowlint.config.patterns import PathPattern, TextPattern, compile_glob, compile_regex

__all__ = [
    "Config",
    "PathConfig",
    "PathConfigs",
    "SuppressionRules",
    "SuppressionFilter",
    "PathPattern",
    "TextPattern",
    "compile_glob",
    "compile_regex",
    "path_configs_for",
    "CONFIG_FILE_NAMES",
    "DEFAULT_CONFIG_TEMPLATE",
    "parse_config",
    "read_config_file",
    "find_repo_config",
    "load_repo_config",
    "write_default_config_file",
    "ConfigError",
    "ConfigIOError",
    "YAMLSyntaxError",
    "SchemaError",
    "DuplicateKeyError",
    "PatternError",
]
