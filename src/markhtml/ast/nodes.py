#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/markhtml/ast/nodes.py
"""AST node classes for document representation.

This module defines the closed set of node kinds an upstream markup parser
produces and the HTML renderer consumes. Each node is a dataclass with
kind-specific fields; container nodes own an ordered list of children and
link each child back to themselves so renderers can look at the parent,
grandparent and neighbouring siblings of the node being rendered.

Node Hierarchy
--------------
Container nodes are visited twice during a walk (entering and exiting):
    - Document, BlockQuote, Paragraph, Heading
    - List, ListItem
    - Table, TableHead, TableBody, TableRow, TableCell
    - Emphasis, Strong, Delete, Link, Image

Leaf nodes are visited once:
    - Text, SoftBreak, HardBreak, Code
    - CodeBlock, HTMLBlock, HTMLSpan, HorizontalRule

The tree is treated as read-only while rendering. The one exception is the
table-of-contents pass, which rewrites ``Heading.heading_id``.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, ClassVar, Iterator, Literal, Optional

Alignment = Literal["left", "center", "right"]


class Node(ABC):
    """Base class for all AST nodes.

    Attributes
    ----------
    parent : Node or None
        Back-reference to the owning container. Set by the container when it
        is constructed (or by :meth:`link_parents`); ``None`` for the root.

    """

    parent: Optional[Node] = None
    _sibling_index: Optional[int] = None
    is_container: ClassVar[bool] = False

    @abstractmethod
    def accept(self, visitor: Any, entering: bool) -> Any:
        """Accept a visitor for processing this node.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_* methods
        entering : bool
            True on descent, False on ascent (containers only)

        Returns
        -------
        Any
            Result from the visitor's processing

        """

    def iter_children(self) -> Iterator[Node]:
        """Iterate over child nodes (empty for leaves)."""
        return iter(())

    @property
    def first_child(self) -> Optional[Node]:
        """First child node, or None."""
        return next(self.iter_children(), None)

    @property
    def previous_sibling(self) -> Optional[Node]:
        """Sibling rendered immediately before this node, or None."""
        siblings = self._siblings()
        index = self._index_in(siblings)
        if index is None or index == 0:
            return None
        return siblings[index - 1]

    @property
    def next_sibling(self) -> Optional[Node]:
        """Sibling rendered immediately after this node, or None."""
        siblings = self._siblings()
        index = self._index_in(siblings)
        if index is None or index + 1 >= len(siblings):
            return None
        return siblings[index + 1]

    def _siblings(self) -> list[Node]:
        if self.parent is None:
            return []
        return getattr(self.parent, "children", [])

    def _index_in(self, siblings: list[Node]) -> Optional[int]:
        index = self._sibling_index
        if index is not None and index < len(siblings) and siblings[index] is self:
            return index
        # stale after an in-place edit of the parent's children; re-number them all once
        index = None
        for position, sibling in enumerate(siblings):
            sibling._sibling_index = position
            # identity, not equality: equal-looking siblings are common
            if sibling is self:
                index = position
        return index

    def link_parents(self) -> None:
        """Re-link ``parent`` references for this whole subtree.

        Containers link their direct children at construction time. Call this
        after mutating child lists in place.

        """
        stack: list[Node] = [self]
        while stack:
            node = stack.pop()
            for position, child in enumerate(node.iter_children()):
                child.parent = node
                child._sibling_index = position
                stack.append(child)


class ContainerNode(Node):
    """Base class for nodes that own an ordered list of children."""

    is_container: ClassVar[bool] = True
    children: list[Node]

    def __post_init__(self) -> None:
        """Link children back to this node and record their positions."""
        for position, child in enumerate(self.children):
            child.parent = self
            child._sibling_index = position

    def iter_children(self) -> Iterator[Node]:
        """Iterate over child nodes in parse order."""
        return iter(self.children)


# ============================================================================
# Block-level Nodes
# ============================================================================


@dataclass
class Document(ContainerNode):
    """Root document node containing all other nodes.

    Parameters
    ----------
    children : list of Node, default = empty list
        Block-level nodes in the document
    metadata : dict, default = empty dict
        Document-level metadata (title, author, etc.)

    """

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any, entering: bool) -> Any:
        """Dispatch to ``visitor.visit_document``."""
        return visitor.visit_document(self, entering)


@dataclass
class BlockQuote(ContainerNode):
    """Block quote node containing other block elements."""

    children: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any, entering: bool) -> Any:
        """Dispatch to ``visitor.visit_block_quote``."""
        return visitor.visit_block_quote(self, entering)


@dataclass
class Paragraph(ContainerNode):
    """Paragraph node containing inline content.

    Parameters
    ----------
    children : list of Node, default = empty list
        Inline nodes representing paragraph content

    """

    children: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any, entering: bool) -> Any:
        """Dispatch to ``visitor.visit_paragraph``."""
        return visitor.visit_paragraph(self, entering)


@dataclass
class Heading(ContainerNode):
    """Heading node.

    Parameters
    ----------
    level : int
        Heading level, 1 is most important. Levels outside 1-5 render as h6.
    children : list of Node, default = empty list
        Inline nodes representing heading text
    heading_id : str, default = ""
        Identifier assigned by the parser; empty means no ``id`` attribute.
        The table-of-contents pass overwrites it with ``toc_N``.
    is_titleblock : bool, default = False
        Whether this heading is the document title block. Title blocks get
        ``class="title"`` and are left out of the table of contents.

    """

    level: int
    children: list[Node] = field(default_factory=list)
    heading_id: str = ""
    is_titleblock: bool = False

    def accept(self, visitor: Any, entering: bool) -> Any:
        """Dispatch to ``visitor.visit_heading``."""
        return visitor.visit_heading(self, entering)


@dataclass
class HorizontalRule(Node):
    """Thematic break rendered as ``<hr>``."""

    def accept(self, visitor: Any, entering: bool) -> Any:
        """Dispatch to ``visitor.visit_horizontal_rule``."""
        return visitor.visit_horizontal_rule(self, entering)


@dataclass
class CodeBlock(Node):
    """Fenced or indented code block.

    Parameters
    ----------
    literal : str
        Code content, rendered escaped and never passed through punctuation
        substitution
    info : str, default = ""
        Info string; the part before the first space or tab names the language

    """

    literal: str
    info: str = ""

    def accept(self, visitor: Any, entering: bool) -> Any:
        """Dispatch to ``visitor.visit_code_block``."""
        return visitor.visit_code_block(self, entering)


@dataclass
class HTMLBlock(Node):
    """Raw HTML block passed through verbatim unless raw HTML is skipped."""

    literal: str

    def accept(self, visitor: Any, entering: bool) -> Any:
        """Dispatch to ``visitor.visit_html_block``."""
        return visitor.visit_html_block(self, entering)


@dataclass
class List(ContainerNode):
    """List node (unordered, ordered or definition list).

    Parameters
    ----------
    children : list of Node, default = empty list
        List items
    ordered : bool, default = False
        Render as ``<ol>``
    definition : bool, default = False
        Render as ``<dl>`` (takes precedence over ``ordered``)
    tight : bool, default = False
        Tight lists omit ``<p>`` wrappers around item paragraphs
    is_footnotes_list : bool, default = False
        The document's footnote list, wrapped in ``<div class="footnotes">``

    """

    children: list[Node] = field(default_factory=list)
    ordered: bool = False
    definition: bool = False
    tight: bool = False
    is_footnotes_list: bool = False

    def accept(self, visitor: Any, entering: bool) -> Any:
        """Dispatch to ``visitor.visit_list``."""
        return visitor.visit_list(self, entering)


@dataclass
class ListItem(ContainerNode):
    """List item node containing block content.

    Parameters
    ----------
    children : list of Node, default = empty list
        Block-level nodes in the list item
    ordered : bool, default = False
        Item of an ordered list
    definition : bool, default = False
        Definition-list description, rendered as ``<dd>``
    term : bool, default = False
        Definition-list term, rendered as ``<dt>`` (takes precedence)
    ref_link : str or None, default = None
        Footnote reference text; when set the item renders as a footnote

    """

    children: list[Node] = field(default_factory=list)
    ordered: bool = False
    definition: bool = False
    term: bool = False
    ref_link: Optional[str] = None

    def accept(self, visitor: Any, entering: bool) -> Any:
        """Dispatch to ``visitor.visit_list_item``."""
        return visitor.visit_list_item(self, entering)


@dataclass
class Table(ContainerNode):
    """Table node holding a head and/or body section."""

    children: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any, entering: bool) -> Any:
        """Dispatch to ``visitor.visit_table``."""
        return visitor.visit_table(self, entering)


@dataclass
class TableHead(ContainerNode):
    """Table header section (``<thead>``)."""

    children: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any, entering: bool) -> Any:
        """Dispatch to ``visitor.visit_table_head``."""
        return visitor.visit_table_head(self, entering)


@dataclass
class TableBody(ContainerNode):
    """Table body section (``<tbody>``)."""

    children: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any, entering: bool) -> Any:
        """Dispatch to ``visitor.visit_table_body``."""
        return visitor.visit_table_body(self, entering)


@dataclass
class TableRow(ContainerNode):
    """Table row (``<tr>``)."""

    children: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any, entering: bool) -> Any:
        """Dispatch to ``visitor.visit_table_row``."""
        return visitor.visit_table_row(self, entering)


@dataclass
class TableCell(ContainerNode):
    """Table cell node.

    Parameters
    ----------
    children : list of Node, default = empty list
        Inline nodes in the cell
    is_header : bool, default = False
        Render as ``<th>`` instead of ``<td>``
    align : {"left", "center", "right"} or None, default = None
        Cell alignment, emitted as an ``align`` attribute when set

    """

    children: list[Node] = field(default_factory=list)
    is_header: bool = False
    align: Optional[Alignment] = None

    def accept(self, visitor: Any, entering: bool) -> Any:
        """Dispatch to ``visitor.visit_table_cell``."""
        return visitor.visit_table_cell(self, entering)


# ============================================================================
# Inline Nodes
# ============================================================================


@dataclass
class Text(Node):
    """Plain text node."""

    literal: str

    def accept(self, visitor: Any, entering: bool) -> Any:
        """Dispatch to ``visitor.visit_text``."""
        return visitor.visit_text(self, entering)


@dataclass
class SoftBreak(Node):
    """Soft line break inside a paragraph."""

    def accept(self, visitor: Any, entering: bool) -> Any:
        """Dispatch to ``visitor.visit_soft_break``."""
        return visitor.visit_soft_break(self, entering)


@dataclass
class HardBreak(Node):
    """Hard line break (``<br>``)."""

    def accept(self, visitor: Any, entering: bool) -> Any:
        """Dispatch to ``visitor.visit_hard_break``."""
        return visitor.visit_hard_break(self, entering)


@dataclass
class Emphasis(ContainerNode):
    """Emphasis (``<em>``)."""

    children: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any, entering: bool) -> Any:
        """Dispatch to ``visitor.visit_emphasis``."""
        return visitor.visit_emphasis(self, entering)


@dataclass
class Strong(ContainerNode):
    """Strong emphasis (``<strong>``)."""

    children: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any, entering: bool) -> Any:
        """Dispatch to ``visitor.visit_strong``."""
        return visitor.visit_strong(self, entering)


@dataclass
class Delete(ContainerNode):
    """Struck-through text (``<del>``)."""

    children: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any, entering: bool) -> Any:
        """Dispatch to ``visitor.visit_delete``."""
        return visitor.visit_delete(self, entering)


@dataclass
class Link(ContainerNode):
    """Hyperlink or footnote reference.

    Parameters
    ----------
    destination : str
        Link target, possibly relative
    children : list of Node, default = empty list
        Inline nodes forming the link text
    title : str, default = ""
        Optional title attribute
    note_id : int, default = 0
        Nonzero marks a footnote reference; the number is the displayed
        footnote index and ``destination`` holds the raw reference text

    """

    destination: str
    children: list[Node] = field(default_factory=list)
    title: str = ""
    note_id: int = 0

    @property
    def is_footnote_reference(self) -> bool:
        """Whether this link renders through the footnote protocol."""
        return self.note_id != 0

    def accept(self, visitor: Any, entering: bool) -> Any:
        """Dispatch to ``visitor.visit_link``."""
        return visitor.visit_link(self, entering)


@dataclass
class Image(ContainerNode):
    """Image node whose children form the alt text.

    Parameters
    ----------
    destination : str
        Image source URL
    children : list of Node, default = empty list
        Inline nodes rendered (tag-stripped) into the ``alt`` attribute
    title : str or None, default = None
        Optional title; ``None`` omits the attribute entirely

    """

    destination: str
    children: list[Node] = field(default_factory=list)
    title: Optional[str] = None

    def accept(self, visitor: Any, entering: bool) -> Any:
        """Dispatch to ``visitor.visit_image``."""
        return visitor.visit_image(self, entering)


@dataclass
class Code(Node):
    """Inline code span."""

    literal: str

    def accept(self, visitor: Any, entering: bool) -> Any:
        """Dispatch to ``visitor.visit_code``."""
        return visitor.visit_code(self, entering)


@dataclass
class HTMLSpan(Node):
    """Inline raw HTML."""

    literal: str

    def accept(self, visitor: Any, entering: bool) -> Any:
        """Dispatch to ``visitor.visit_html_span``."""
        return visitor.visit_html_span(self, entering)


NODE_TYPES: frozenset[type[Node]] = frozenset(
    {
        Document,
        BlockQuote,
        Paragraph,
        Heading,
        HorizontalRule,
        CodeBlock,
        HTMLBlock,
        List,
        ListItem,
        Table,
        TableHead,
        TableBody,
        TableRow,
        TableCell,
        Text,
        SoftBreak,
        HardBreak,
        Emphasis,
        Strong,
        Delete,
        Link,
        Image,
        Code,
        HTMLSpan,
    }
)


def is_block_node(node: Optional[Node]) -> bool:
    """Return True for nodes after which a paragraph starts on a new line."""
    return isinstance(node, (HTMLBlock, List, Paragraph, Heading, CodeBlock, BlockQuote, HorizontalRule))
