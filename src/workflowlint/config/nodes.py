"""
Helpers for decoding a composed YAML node tree.

``yaml.compose`` keeps every node's kind, children and source mark, which is
what position-annotated config errors need. The functions here check node
kinds and report failures as SchemaError with 1-based line and column.
"""

from __future__ import annotations

from collections.abc import Iterator

import yaml
from yaml.nodes import MappingNode, Node, ScalarNode, SequenceNode

from workflowlint.config.errors import SchemaError, YAMLSyntaxError, format_position, quote

NULL_TAG = "tag:yaml.org,2002:null"


def position(node: Node) -> tuple[int, int]:
    """Return the 1-based (line, column) where a node starts."""
    mark = node.start_mark
    return mark.line + 1, mark.column + 1


def at(node: Node) -> str:
    """Format a node's position for an error message."""
    return format_position(*position(node))


def kind(node: Node) -> str:
    if isinstance(node, MappingNode):
        return "mapping node"
    if isinstance(node, SequenceNode):
        return "sequence node"
    if is_null(node):
        return "null"
    return "scalar node"


def is_null(node: Node | None) -> bool:
    """Return True for an absent value or an explicit YAML null."""
    return node is None or (isinstance(node, ScalarNode) and node.tag == NULL_TAG)


def compose_document(data: bytes | str) -> Node | None:
    """
    Compose a single YAML document into a node tree.

    Returns:
        Root node, or None for an empty document

    Raises:
        YAMLSyntaxError: If the document is malformed
    """
    try:
        return yaml.compose(data, Loader=yaml.SafeLoader)
    except yaml.YAMLError as e:
        mark = getattr(e, "problem_mark", None)
        line, column = (mark.line + 1, mark.column + 1) if mark is not None else (None, None)
        # PyYAML messages are multi-line with a source excerpt
        message = " ".join(part.strip() for part in str(e).splitlines() if part.strip())
        raise YAMLSyntaxError(f"yaml: {message}", line=line, column=column) from e


def _schema_error(message: str, node: Node, key: str | None = None) -> SchemaError:
    line, column = position(node)
    return SchemaError(f"{message} at {format_position(line, column)}", key=key, line=line, column=column)


def expect_mapping(node: Node, what: str) -> MappingNode:
    if not isinstance(node, MappingNode):
        raise _schema_error(f"{what} must be a mapping node but got {kind(node)}", node)
    return node


def expect_sequence(node: Node, what: str) -> SequenceNode:
    if not isinstance(node, SequenceNode):
        raise _schema_error(f"{what} must be a sequence node but got {kind(node)}", node)
    return node


def scalar_string(node: Node, what: str) -> str:
    """Return the raw text of a non-null scalar node."""
    if not isinstance(node, ScalarNode) or is_null(node):
        raise _schema_error(f"{what} must be a string but got {kind(node)}", node)
    return node.value


def iter_mapping(node: MappingNode, what: str) -> Iterator[tuple[str, Node, Node]]:
    """
    Yield (key, key_node, value_node) for each mapping entry.

    Keys must be scalars and must not repeat within the mapping.
    """
    seen: set[str] = set()
    for key_node, value_node in node.value:
        key = scalar_string(key_node, f"key in {what}")
        if key in seen:
            raise _schema_error(f"mapping key {quote(key)} already defined in {what}", key_node, key=key)
        seen.add(key)
        yield key, key_node, value_node


def decode_string_list(node: Node, what: str) -> tuple[str, ...]:
    """Decode a sequence of scalars into a tuple of strings."""
    seq = expect_sequence(node, what)
    return tuple(scalar_string(item, f"element of {what}") for item in seq.value)


def invalid_key(key: str, key_node: Node) -> SchemaError:
    return _schema_error(f"invalid key {quote(key)}", key_node, key=key)
