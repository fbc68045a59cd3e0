#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/markhtml/ast/__init__.py
"""Abstract Syntax Tree (AST) module for document representation.

The module consists of several components:

- nodes: the closed set of node kinds produced by an upstream parser
- visitors: visitor base class with one method per node kind
- walk: entering/exiting traversal with continue/skip/terminate control
- serialization: JSON interchange format for document trees

Examples
--------
    >>> from markhtml.ast import Document, Paragraph, Text
    >>> from markhtml.renderers.html import HtmlRenderer
    >>> doc = Document(children=[Paragraph(children=[Text("A & B")])])
    >>> HtmlRenderer().render_to_string(doc)
    '<p>A &amp; B</p>\\n'

"""

from __future__ import annotations

from markhtml.ast.nodes import (
    NODE_TYPES,
    Alignment,
    BlockQuote,
    Code,
    CodeBlock,
    ContainerNode,
    Delete,
    Document,
    Emphasis,
    HardBreak,
    Heading,
    HorizontalRule,
    HTMLBlock,
    HTMLSpan,
    Image,
    Link,
    List,
    ListItem,
    Node,
    Paragraph,
    SoftBreak,
    Strong,
    Table,
    TableBody,
    TableCell,
    TableHead,
    TableRow,
    Text,
)
from markhtml.ast.serialization import ast_to_dict, ast_to_json, dict_to_ast, json_to_ast
from markhtml.ast.visitors import NodeVisitor
from markhtml.ast.walk import NOT_HANDLED, Handled, HookResult, NotHandled, WalkStatus, walk

__all__ = [
    # Nodes
    "NODE_TYPES",
    "Alignment",
    "Node",
    "ContainerNode",
    "Document",
    "BlockQuote",
    "Paragraph",
    "Heading",
    "HorizontalRule",
    "CodeBlock",
    "HTMLBlock",
    "List",
    "ListItem",
    "Table",
    "TableHead",
    "TableBody",
    "TableRow",
    "TableCell",
    "Text",
    "SoftBreak",
    "HardBreak",
    "Emphasis",
    "Strong",
    "Delete",
    "Link",
    "Image",
    "Code",
    "HTMLSpan",
    # Traversal
    "NodeVisitor",
    "WalkStatus",
    "Handled",
    "NotHandled",
    "NOT_HANDLED",
    "HookResult",
    "walk",
    # Serialization
    "ast_to_dict",
    "dict_to_ast",
    "ast_to_json",
    "json_to_ast",
]
