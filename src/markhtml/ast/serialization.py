#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/markhtml/ast/serialization.py
"""JSON serialization and deserialization for AST nodes.

The renderer does not parse markup itself; a document tree arrives from an
external parser. This module defines the JSON interchange format used to
hand such a tree to markhtml (for example from the command line):

    {"schema_version": 1, "node_type": "Document", "children": [
        {"node_type": "Paragraph", "children": [
            {"node_type": "Text", "literal": "A & B"}
        ]}
    ]}

Every node is an object with a ``node_type`` discriminator naming one of the
classes in :mod:`markhtml.ast.nodes`; the remaining keys are that class's
dataclass fields, with ``children`` holding nested node objects.

Examples
--------
Serialize AST to JSON:

    >>> from markhtml.ast import Document, Paragraph, Text
    >>> doc = Document(children=[Paragraph(children=[Text("Hello")])])
    >>> json_str = ast_to_json(doc, indent=2)

Deserialize JSON back to AST:

    >>> doc = json_to_ast(json_str)
    >>> doc.children[0].children[0].literal
    'Hello'

"""

from __future__ import annotations

import json
import logging
from dataclasses import MISSING, dataclass, field, fields
from typing import Any, Iterator, Literal, Union, get_args, get_origin, get_type_hints

from markhtml.ast.nodes import NODE_TYPES, Node
from markhtml.exceptions import ParsingError

logger = logging.getLogger(__name__)

SCHEMA_VERSION = 1

_NODE_CLASSES: dict[str, type[Node]] = {cls.__name__: cls for cls in NODE_TYPES}

# Resolved field annotations per node class, used to check scalar values on load
_FIELD_TYPES: dict[type[Node], dict[str, Any]] = {cls: get_type_hints(cls) for cls in NODE_TYPES}

_END = object()


def _node_fields(node: Node) -> dict[str, Any]:
    result: dict[str, Any] = {"node_type": type(node).__name__}
    for node_field in fields(node):  # type: ignore[arg-type]
        value = getattr(node, node_field.name)
        if node_field.name == "children":
            result["children"] = []
            continue
        if node_field.default is not MISSING and value == node_field.default:
            continue
        if node_field.default_factory is not MISSING and value == node_field.default_factory():
            continue
        result[node_field.name] = value
    return result


def ast_to_dict(node: Node) -> dict[str, Any]:
    """Convert an AST node to a dictionary representation.

    Fields still holding their default value are omitted to keep the output
    compact. The tree is converted without recursion, so nesting depth is
    not limited by the interpreter.

    Parameters
    ----------
    node : Node
        The AST node to convert

    Returns
    -------
    dict
        Dictionary representation of the node and its subtree

    """
    root = _node_fields(node)
    pending: list[tuple[Node, dict[str, Any]]] = [(node, root)]
    while pending:
        current, result = pending.pop()
        if "children" not in result:
            continue
        for child in current.iter_children():
            child_result = _node_fields(child)
            result["children"].append(child_result)
            pending.append((child, child_result))
    return root


def _matches_annotation(value: Any, annotation: Any) -> bool:
    origin = get_origin(annotation)
    if origin is Union:
        return any(_matches_annotation(value, arg) for arg in get_args(annotation))
    if origin is Literal:
        return any(value == choice and type(value) is type(choice) for choice in get_args(annotation))
    if annotation is Any:
        return True
    if annotation is type(None):
        return value is None
    if annotation is int:
        # bool is an int subclass but never a valid level or id
        return isinstance(value, int) and not isinstance(value, bool)
    if origin is not None:
        return isinstance(value, origin)
    return isinstance(value, annotation)


def _describe_annotation(annotation: Any) -> str:
    if isinstance(annotation, type):
        return annotation.__name__
    return str(annotation).replace("typing.", "")


@dataclass
class _PendingNode:
    """A node whose attributes are read but whose children are still loading."""

    node_class: type[Node]
    node_type: str
    kwargs: dict[str, Any]
    child_data: Iterator[Any]
    has_children: bool
    children: list[Node] = field(default_factory=list)

    def build(self) -> Node:
        if self.has_children:
            self.kwargs["children"] = self.children
        try:
            return self.node_class(**self.kwargs)
        except TypeError as e:
            raise ParsingError(
                f"Invalid {self.node_type} node: {e}", node_type=self.node_type, original_error=e
            ) from e


def _read_node(data: Any, strict_mode: bool) -> _PendingNode:
    if not isinstance(data, dict):
        raise ParsingError(f"Expected a node object, got {type(data).__name__}")

    node_type = data.get("node_type")
    if not node_type:
        raise ParsingError("Dictionary must contain 'node_type' field")

    node_class = _NODE_CLASSES.get(node_type) if isinstance(node_type, str) else None
    if node_class is None:
        raise ParsingError(f"Unknown node type: {node_type}", node_type=str(node_type))

    field_types = _FIELD_TYPES[node_class]
    known = {node_field.name for node_field in fields(node_class)}  # type: ignore[arg-type]
    kwargs: dict[str, Any] = {}
    child_data: list[Any] = []
    has_children = False
    for key, value in data.items():
        if key == "node_type":
            continue
        if key not in known:
            if strict_mode:
                raise ParsingError(f"Unknown attribute '{key}' for {node_type}", node_type=node_type)
            logger.warning("Ignoring unknown attribute '%s' for %s", key, node_type)
            continue
        if key == "children":
            if not isinstance(value, list):
                raise ParsingError(f"'children' of {node_type} must be a list", node_type=node_type)
            child_data = value
            has_children = True
            continue
        annotation = field_types[key]
        if not _matches_annotation(value, annotation):
            raise ParsingError(
                f"Invalid value for '{key}' of {node_type}: expected {_describe_annotation(annotation)}, "
                f"got {type(value).__name__} {value!r}",
                node_type=node_type,
            )
        kwargs[key] = value

    return _PendingNode(node_class, node_type, kwargs, iter(child_data), has_children)


def dict_to_ast(data: dict[str, Any], strict_mode: bool = True) -> Node:
    """Convert a dictionary representation back to an AST node.

    Scalar attributes are checked against the node class's field types, so
    a tree that loads is safe to render. Nested children are loaded with an
    explicit stack rather than recursion.

    Parameters
    ----------
    data : dict
        Dictionary representation of a node
    strict_mode : bool, default True
        If True, raise ParsingError on unknown attributes.
        If False, log a warning and ignore them.

    Returns
    -------
    Node
        Reconstructed AST node with parent links in place

    Raises
    ------
    ParsingError
        If ``node_type`` is missing or unknown, an attribute is unknown (in
        strict mode), an attribute has the wrong type, or a required
        attribute is missing

    """
    loading = [_read_node(data, strict_mode)]
    while True:
        pending = loading[-1]
        child = next(pending.child_data, _END)
        if child is not _END:
            loading.append(_read_node(child, strict_mode))
            continue

        loading.pop()
        node = pending.build()
        if not loading:
            return node
        loading[-1].children.append(node)


def ast_to_json(node: Node, indent: int | None = None) -> str:
    """Serialize an AST node to a JSON string with schema versioning.

    Parameters
    ----------
    node : Node
        The AST node to serialize
    indent : int or None, default = None
        Number of spaces for indentation (None for compact format)

    Returns
    -------
    str
        JSON string with a top-level ``schema_version`` field

    """
    versioned = {"schema_version": SCHEMA_VERSION, **ast_to_dict(node)}
    return json.dumps(versioned, indent=indent, ensure_ascii=False)


def json_to_ast(json_str: str, strict_mode: bool = True) -> Node:
    """Deserialize a JSON string to an AST node.

    JSON without a ``schema_version`` field is treated as version 1.

    Parameters
    ----------
    json_str : str
        JSON string representation
    strict_mode : bool, default True
        Passed through to :func:`dict_to_ast`

    Returns
    -------
    Node
        Reconstructed AST node

    Raises
    ------
    ParsingError
        If the JSON is malformed, has an unsupported schema version, or
        describes an invalid tree

    """
    try:
        data = json.loads(json_str)
    except json.JSONDecodeError as e:
        raise ParsingError(f"Invalid JSON: {e}", original_error=e) from e
    except RecursionError as e:
        raise ParsingError("Invalid JSON: nesting exceeds the decoder depth limit", original_error=e) from e

    if not isinstance(data, dict):
        raise ParsingError("Top-level JSON value must be a node object")

    schema_version = data.pop("schema_version", SCHEMA_VERSION)
    if schema_version != SCHEMA_VERSION:
        raise ParsingError(
            f"Unsupported schema version: {schema_version}. "
            f"This version of markhtml supports schema version {SCHEMA_VERSION} only."
        )

    return dict_to_ast(data, strict_mode=strict_mode)


__all__ = [
    "SCHEMA_VERSION",
    "ast_to_dict",
    "dict_to_ast",
    "ast_to_json",
    "json_to_ast",
]
