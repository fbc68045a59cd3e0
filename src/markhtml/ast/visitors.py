#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/markhtml/ast/visitors.py
"""Visitor pattern base class for AST rendering.

Each node kind dispatches to exactly one ``visit_*`` method through
``Node.accept``. Because every method is abstract, a renderer that forgets a
node kind cannot be instantiated, which keeps the closed set of node kinds
and the set of rendering rules in lockstep.

Visit methods receive the node and an ``entering`` flag. Container nodes are
visited twice (``entering=True`` on descent, ``False`` on ascent); leaf nodes
once with ``entering=True``. A visit method may return a
:class:`~markhtml.ast.walk.WalkStatus` to steer the walk; returning ``None``
means "continue".

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from markhtml.ast.nodes import (
    BlockQuote,
    Code,
    CodeBlock,
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
from markhtml.exceptions import UnknownNodeError


class NodeVisitor(ABC):
    """Abstract base class for entering/exiting AST node visitors.

    Examples
    --------
    A visitor that collects heading levels (all other kinds ignored):

        >>> class LevelCollector(NodeVisitor):
        ...     def __init__(self):
        ...         self.levels = []
        ...
        ...     def visit_heading(self, node, entering):
        ...         if entering:
        ...             self.levels.append(node.level)
        ...
        ...     # ... every other visit_* method returning None

    """

    # Block-level nodes

    @abstractmethod
    def visit_document(self, node: Document, entering: bool) -> Any:
        """Visit a Document node."""

    @abstractmethod
    def visit_block_quote(self, node: BlockQuote, entering: bool) -> Any:
        """Visit a BlockQuote node."""

    @abstractmethod
    def visit_paragraph(self, node: Paragraph, entering: bool) -> Any:
        """Visit a Paragraph node.

        Parameters
        ----------
        node : Paragraph
            The paragraph node to visit
        entering : bool
            True when descending into the paragraph, False when leaving it

        Returns
        -------
        Any
            WalkStatus or None

        """

    @abstractmethod
    def visit_heading(self, node: Heading, entering: bool) -> Any:
        """Visit a Heading node.

        Parameters
        ----------
        node : Heading
            The heading node to visit
        entering : bool
            True when descending into the heading, False when leaving it

        Returns
        -------
        Any
            WalkStatus or None

        """

    @abstractmethod
    def visit_horizontal_rule(self, node: HorizontalRule, entering: bool) -> Any:
        """Visit a HorizontalRule leaf."""

    @abstractmethod
    def visit_code_block(self, node: CodeBlock, entering: bool) -> Any:
        """Visit a CodeBlock leaf."""

    @abstractmethod
    def visit_html_block(self, node: HTMLBlock, entering: bool) -> Any:
        """Visit an HTMLBlock leaf."""

    @abstractmethod
    def visit_list(self, node: List, entering: bool) -> Any:
        """Visit a List node.

        Parameters
        ----------
        node : List
            The list node to visit
        entering : bool
            True when descending into the list, False when leaving it

        Returns
        -------
        Any
            WalkStatus or None

        """

    @abstractmethod
    def visit_list_item(self, node: ListItem, entering: bool) -> Any:
        """Visit a ListItem node."""

    @abstractmethod
    def visit_table(self, node: Table, entering: bool) -> Any:
        """Visit a Table node."""

    @abstractmethod
    def visit_table_head(self, node: TableHead, entering: bool) -> Any:
        """Visit a TableHead node."""

    @abstractmethod
    def visit_table_body(self, node: TableBody, entering: bool) -> Any:
        """Visit a TableBody node."""

    @abstractmethod
    def visit_table_row(self, node: TableRow, entering: bool) -> Any:
        """Visit a TableRow node."""

    @abstractmethod
    def visit_table_cell(self, node: TableCell, entering: bool) -> Any:
        """Visit a TableCell node."""

    # Inline nodes

    @abstractmethod
    def visit_text(self, node: Text, entering: bool) -> Any:
        """Visit a Text leaf."""

    @abstractmethod
    def visit_soft_break(self, node: SoftBreak, entering: bool) -> Any:
        """Visit a SoftBreak leaf."""

    @abstractmethod
    def visit_hard_break(self, node: HardBreak, entering: bool) -> Any:
        """Visit a HardBreak leaf."""

    @abstractmethod
    def visit_emphasis(self, node: Emphasis, entering: bool) -> Any:
        """Visit an Emphasis node."""

    @abstractmethod
    def visit_strong(self, node: Strong, entering: bool) -> Any:
        """Visit a Strong node."""

    @abstractmethod
    def visit_delete(self, node: Delete, entering: bool) -> Any:
        """Visit a Delete node."""

    @abstractmethod
    def visit_link(self, node: Link, entering: bool) -> Any:
        """Visit a Link node.

        Parameters
        ----------
        node : Link
            The link node to visit; may be a footnote reference
        entering : bool
            True when descending into the link text, False when leaving it

        Returns
        -------
        Any
            WalkStatus or None

        """

    @abstractmethod
    def visit_image(self, node: Image, entering: bool) -> Any:
        """Visit an Image node."""

    @abstractmethod
    def visit_code(self, node: Code, entering: bool) -> Any:
        """Visit a Code leaf."""

    @abstractmethod
    def visit_html_span(self, node: HTMLSpan, entering: bool) -> Any:
        """Visit an HTMLSpan leaf."""

    def generic_visit(self, node: Node, entering: bool) -> Any:
        """Fallback for nodes outside the supported set.

        Raises
        ------
        UnknownNodeError
            Always; an unknown node kind is a producer contract violation

        """
        raise UnknownNodeError(node)
