"""
Decoding of actionlint.yaml from a composed YAML node tree.

Decoding is all-or-nothing: the first error aborts and is re-raised with the
context of each enclosing level (entry -> "paths" -> document).

Functions:
- decode_path_config: one value of the "paths" mapping
- decode_path_configs: the "paths" mapping
- decode_config: the whole document
"""

from __future__ import annotations

from collections.abc import Callable

from yaml.nodes import Node

from workflowlint.config import nodes
from workflowlint.config.errors import ConfigError, DuplicateKeyError, PatternError, format_position, quote
from workflowlint.config.models import Config, PathConfig, PathConfigs, RegexFactory, SuppressionRules
from workflowlint.config.patterns import PathPattern, compile_glob, compile_regex
from workflowlint.shared.infrastructure.logging import get_logger

logger = get_logger(__name__)

GlobFactory = Callable[[str], PathPattern]


def decode_path_config(
    node: Node | None,
    pattern: PathPattern,
    *,
    regex_factory: RegexFactory = compile_regex,
) -> PathConfig:
    """
    Decode the configuration of one glob pattern.

    The only recognized key is "ignore", a sequence of regular expressions.
    A null value yields a PathConfig without rules.

    Raises:
        SchemaError: On an unknown key or a wrong node kind
        PatternError: On an invalid regular expression
    """
    if nodes.is_null(node):
        return PathConfig(pattern=pattern)

    what = f"config of {quote(pattern.source)} in \"paths\""
    mapping = nodes.expect_mapping(node, what)
    ignore = SuppressionRules()
    for key, key_node, value_node in nodes.iter_mapping(mapping, what):
        if key != "ignore":
            raise nodes.invalid_key(key, key_node)

        seq = nodes.expect_sequence(value_node, "\"ignore\"")
        sources = [nodes.scalar_string(item, "element of \"ignore\"") for item in seq.value]
        positions = [nodes.position(item) for item in seq.value]
        ignore = SuppressionRules.compile(sources, positions=positions, factory=regex_factory)

    return PathConfig(pattern=pattern, ignore=ignore)


def decode_path_configs(
    node: Node | None,
    *,
    glob_factory: GlobFactory = compile_glob,
    regex_factory: RegexFactory = compile_regex,
) -> PathConfigs:
    """
    Decode the "paths" mapping.

    Keys are glob patterns matching file paths relative to the repository
    root. Each key is compiled, checked for duplicates, then its value is
    decoded with decode_path_config.

    Raises:
        SchemaError: If the node is not a mapping or an entry is malformed
        PatternError: On an invalid glob or regular expression
        DuplicateKeyError: If a glob pattern appears twice
    """
    if nodes.is_null(node):
        return PathConfigs()

    mapping = nodes.expect_mapping(node, "\"paths\" section")
    entries: dict[str, PathConfig] = {}
    for key_node, value_node in mapping.value:
        pattern = nodes.scalar_string(key_node, "key of \"paths\" section")
        line, column = nodes.position(key_node)

        try:
            compiled = glob_factory(pattern)
        except PatternError as e:
            raise e.wrap(
                f"error while processing \"paths\" config at {format_position(line, column)}",
                line=line,
                column=column,
            ) from e

        if pattern in entries:
            raise DuplicateKeyError(
                f"key duplicates within \"paths\" config: {quote(pattern)} at {format_position(line, column)}",
                pattern=pattern,
                line=line,
                column=column,
            )

        try:
            entries[pattern] = decode_path_config(value_node, compiled, regex_factory=regex_factory)
        except ConfigError as e:
            raise e.wrap("error while processing \"paths\" config") from e

    return PathConfigs(entries)


def _decode_self_hosted_runner(node: Node | None) -> tuple[str, ...]:
    if nodes.is_null(node):
        return ()

    what = "\"self-hosted-runner\" section"
    mapping = nodes.expect_mapping(node, what)
    labels: tuple[str, ...] = ()
    for key, key_node, value_node in nodes.iter_mapping(mapping, what):
        if key == "labels":
            labels = () if nodes.is_null(value_node) else nodes.decode_string_list(value_node, "\"labels\"")
        else:
            logger.debug("config_unknown_key_ignored", key=f"self-hosted-runner.{key}", line=key_node.start_mark.line + 1)
    return labels


def decode_config(
    node: Node | None,
    *,
    glob_factory: GlobFactory = compile_glob,
    regex_factory: RegexFactory = compile_regex,
) -> Config:
    """
    Decode a whole configuration document.

    Missing sections fall back to their defaults. "config-variables" keeps the
    difference between null (check disabled) and an empty sequence (no
    variable allowed). Unknown top-level keys are ignored.

    Raises:
        ConfigError: On the first structural or pattern error
    """
    if nodes.is_null(node):
        return Config()

    what = "configuration"
    mapping = nodes.expect_mapping(node, what)
    runner_labels: tuple[str, ...] = ()
    config_variables: tuple[str, ...] | None = None
    paths = PathConfigs()

    for key, key_node, value_node in nodes.iter_mapping(mapping, what):
        if key == "self-hosted-runner":
            runner_labels = _decode_self_hosted_runner(value_node)
        elif key == "config-variables":
            if not nodes.is_null(value_node):
                config_variables = nodes.decode_string_list(value_node, "\"config-variables\"")
        elif key == "paths":
            paths = decode_path_configs(value_node, glob_factory=glob_factory, regex_factory=regex_factory)
        else:
            logger.debug("config_unknown_key_ignored", key=key, line=key_node.start_mark.line + 1)

    return Config(runner_labels=runner_labels, config_variables=config_variables, paths=paths)
