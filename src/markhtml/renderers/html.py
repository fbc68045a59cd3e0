#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/markhtml/renderers/html.py
"""HTML rendering from AST.

This module provides the HtmlRenderer class which walks a document tree and
writes HTML. Container nodes are visited on entry and on exit; each visit
method writes the opening or closing markup for its node kind and decides,
from the node's neighbours and ancestors, where newlines belong.

Rendering a document runs, in order:

1. the optional full-page preamble
2. the optional table of contents (which renumbers heading ids)
3. the body walk
4. the optional full-page footer

Per-render state (output writer, heading-id registry, punctuation filter)
is created fresh for every call to :meth:`HtmlRenderer.render_to_string`;
an instance must not render two documents concurrently.

"""

from __future__ import annotations

import logging
from typing import Optional

from markhtml.ast.nodes import (
    NODE_TYPES,
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
    is_block_node,
)
from markhtml.ast.visitors import NodeVisitor
from markhtml.ast.walk import Handled, NotHandled, WalkStatus, walk
from markhtml.constants import GENERATOR_NAME, HTML5_DOCTYPE, XHTML_DOCTYPE
from markhtml.exceptions import RenderingError, UnknownNodeError
from markhtml.options.html import HtmlRendererOptions
from markhtml.renderers.base import BaseRenderer
from markhtml.renderers.heading_ids import HeadingIdRegistry
from markhtml.renderers.toc import TocBuilder
from markhtml.renderers.writer import HtmlWriter
from markhtml.smartypants import PunctuationFilter, SmartypantsRenderer
from markhtml.utils.escape import escape_html, escape_link
from markhtml.utils.footnotes import footnote_item, footnote_ref, footnote_return_link
from markhtml.utils.html_utils import language_from_info
from markhtml.utils.security import is_relative_link, need_skip_link

logger = logging.getLogger(__name__)


def _is_tight_list(node: Optional[Node]) -> bool:
    return isinstance(node, List) and node.tight


def _skip_paragraph_tags(node: Paragraph) -> bool:
    parent = node.parent
    grandparent = parent.parent if parent is not None else None
    if not isinstance(grandparent, List):
        return False
    is_parent_term = isinstance(parent, ListItem) and parent.term
    return grandparent.tight or is_parent_term


def _item_open_cr(node: ListItem) -> bool:
    if node.previous_sibling is None:
        return False
    parent = node.parent
    if not isinstance(parent, List):
        return False
    return not parent.tight and not parent.definition


def _is_last_list_item_child(node: Node) -> bool:
    return isinstance(node.parent, ListItem) and node.next_sibling is None


class HtmlRenderer(NodeVisitor, BaseRenderer):
    """Render AST nodes to HTML.

    Parameters
    ----------
    options : HtmlRendererOptions or None, default = None
        HTML rendering options
    punctuation_filter : PunctuationFilter or None, default = None
        Filter used for text when ``options.smartypants`` is set. Defaults to
        a :class:`~markhtml.smartypants.SmartypantsRenderer` built from the
        options, created fresh for each render.

    Examples
    --------
    Basic usage:

        >>> from markhtml.ast import Document, Heading, Text
        >>> doc = Document(children=[Heading(level=1, children=[Text("Title")], heading_id="title")])
        >>> HtmlRenderer().render_to_string(doc)
        '<h1 id="title">Title</h1>\\n'

    Safe links only:

        >>> from markhtml.ast import Link, Paragraph
        >>> doc = Document(children=[Paragraph(children=[Link("javascript:x", children=[Text("label")])])])
        >>> HtmlRenderer(HtmlRendererOptions(safelink=True)).render_to_string(doc)
        '<p><tt>label</tt></p>\\n'

    """

    def __init__(
        self,
        options: HtmlRendererOptions | None = None,
        punctuation_filter: PunctuationFilter | None = None,
    ):
        """Initialize the HTML renderer with options."""
        BaseRenderer._validate_options_type(options, HtmlRendererOptions, "html")
        options = options or HtmlRendererOptions()
        BaseRenderer.__init__(self, options)
        self.options: HtmlRendererOptions = options
        self._custom_filter = punctuation_filter
        self._writer = HtmlWriter()
        self.heading_ids = HeadingIdRegistry()
        self._punctuation_filter: PunctuationFilter = self._new_punctuation_filter()

    def _new_punctuation_filter(self) -> PunctuationFilter:
        if self._custom_filter is not None:
            return self._custom_filter
        return SmartypantsRenderer.from_options(self.options)

    # ------------------------------------------------------------------
    # Document-level rendering
    # ------------------------------------------------------------------

    def render_to_string(self, document: Document) -> str:
        """Render a document AST to an HTML string.

        Parameters
        ----------
        document : Document
            The document node to render

        Returns
        -------
        str
            HTML text

        Raises
        ------
        UnknownNodeError
            If a node outside the supported node kinds is encountered

        """
        writer = HtmlWriter()
        self._writer = writer
        self.heading_ids = HeadingIdRegistry()
        self._punctuation_filter = self._new_punctuation_filter()

        self.render_header(writer, document)
        walk(document, lambda node, entering: self.render_node(writer, node, entering))
        self.render_footer(writer, document)
        return writer.getvalue()

    def render_node(self, writer: HtmlWriter, node: Node, entering: bool) -> WalkStatus:
        """Render a single node event to ``writer``.

        The ``render_node_hook`` option, when set, sees the event first; a
        :class:`~markhtml.ast.walk.Handled` result replaces the default
        rendering and its status is returned as is.

        Parameters
        ----------
        writer : HtmlWriter
            Destination
        node : Node
            Node being visited
        entering : bool
            True on descent, False on ascent

        Returns
        -------
        WalkStatus
            How the walk should continue

        Raises
        ------
        UnknownNodeError
            If ``node`` is not one of the supported node kinds
        RenderingError
            If the hook returns something other than a hook result

        """
        hook = self.options.render_node_hook
        if hook is not None:
            result = hook(writer, node, entering)
            if isinstance(result, Handled):
                return result.status
            if not isinstance(result, NotHandled):
                raise RenderingError(
                    f"render_node_hook must return Handled or NOT_HANDLED, got {type(result).__name__}"
                )

        if type(node) not in NODE_TYPES:
            raise UnknownNodeError(node)

        saved_writer = self._writer
        self._writer = writer
        try:
            status = node.accept(self, entering)
        finally:
            self._writer = saved_writer
        return status or WalkStatus.GO_TO_NEXT

    def render_header(self, writer: HtmlWriter, document: Document) -> None:
        """Write the page preamble (full-page mode) and the table of contents."""
        self._write_document_header(writer)
        if self.options.toc:
            TocBuilder(self.render_node).write(writer, document)

    def render_footer(self, writer: HtmlWriter, document: Document) -> None:
        """Write the closing body and html tags in full-page mode."""
        if not self.options.complete_page:
            return
        writer.write_raw("\n</body>\n</html>\n")

    def _write_document_header(self, writer: HtmlWriter) -> None:
        if not self.options.complete_page:
            return

        ending = " /" if self.options.use_xhtml else ""
        parts = [XHTML_DOCTYPE if self.options.use_xhtml else HTML5_DOCTYPE]
        parts.append("<head>\n")
        parts.append(f"  <title>{self._page_title()}</title>\n")
        parts.append(f'  <meta name="GENERATOR" content="{GENERATOR_NAME}"{ending}>\n')
        parts.append(f'  <meta charset="utf-8"{ending}>\n')
        if self.options.css:
            parts.append(f'  <link rel="stylesheet" type="text/css" href="{escape_html(self.options.css)}"{ending}>\n')
        if self.options.icon:
            parts.append(f'  <link rel="icon" type="image/x-icon" href="{escape_html(self.options.icon)}"{ending}>\n')
        parts.append("</head>\n")
        parts.append("<body>\n\n")
        writer.write_raw("".join(parts))

    def _page_title(self) -> str:
        title = self.options.title
        if not self.options.smartypants:
            return escape_html(title)
        scratch = HtmlWriter()
        self._punctuation_filter.process(scratch, title)
        return scratch.getvalue()

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _out_hr_tag(self) -> None:
        self._writer.write("<hr />" if self.options.use_xhtml else "<hr>")

    def _out_paired_block(self, entering: bool, open_tag: str, close_tag: str) -> None:
        if entering:
            self._writer.cr()
            self._writer.write(open_tag)
        else:
            self._writer.write(close_tag)
            self._writer.cr()

    def _add_abs_prefix(self, link: str) -> str:
        prefix = self.options.absolute_prefix
        if prefix and is_relative_link(link) and link[0] != ".":
            separator = "" if link[0] == "/" else "/"
            return f"{prefix}{separator}{link}"
        return link

    def _link_attrs(self, link: str) -> list[str]:
        if is_relative_link(link):
            return []
        attrs = []
        rel = []
        if self.options.nofollow_links:
            rel.append("nofollow")
        if self.options.noreferrer_links:
            rel.append("noreferrer")
        if self.options.href_target_blank:
            attrs.append('target="_blank"')
        if rel:
            attrs.append(f'rel="{" ".join(rel)}"')
        return attrs

    # ------------------------------------------------------------------
    # Block nodes
    # ------------------------------------------------------------------

    def visit_document(self, node: Document, entering: bool) -> None:
        """Render a Document node (no markup of its own)."""

    def visit_block_quote(self, node: BlockQuote, entering: bool) -> None:
        """Render a BlockQuote node."""
        self._out_paired_block(entering, "<blockquote>", "</blockquote>")

    def visit_paragraph(self, node: Paragraph, entering: bool) -> None:
        """Render a Paragraph node.

        Paragraph tags are omitted inside tight lists and definition terms.

        """
        if _skip_paragraph_tags(node):
            return

        writer = self._writer
        if entering:
            previous = node.previous_sibling
            if previous is not None and is_block_node(previous):
                writer.cr()
            if isinstance(node.parent, BlockQuote) and previous is None:
                writer.cr()
            writer.write("<p>")
        else:
            writer.write("</p>")
            if not _is_last_list_item_child(node):
                writer.cr()

    def visit_heading(self, node: Heading, entering: bool) -> None:
        """Render a Heading node.

        Levels 1-5 map to ``<h1>``-``<h5>``; anything else renders as
        ``<h6>``. The id is made unique within the render before the
        configured prefix and suffix are applied.

        """
        level = node.level if 1 <= node.level <= 5 else 6
        writer = self._writer
        if not entering:
            writer.write(f"</h{level}>")
            if not _is_last_list_item_child(node):
                writer.cr()
            return

        attrs = []
        if node.is_titleblock:
            attrs.append('class="title"')
        if node.heading_id:
            heading_id = self.heading_ids.ensure_unique(node.heading_id)
            attrs.append(f'id="{self.options.heading_id_prefix}{heading_id}{self.options.heading_id_suffix}"')
        writer.cr()
        writer.write_tag(f"<h{level}", attrs)

    def visit_horizontal_rule(self, node: HorizontalRule, entering: bool) -> None:
        """Render a HorizontalRule node."""
        self._writer.cr()
        self._out_hr_tag()
        self._writer.cr()

    def visit_code_block(self, node: CodeBlock, entering: bool) -> None:
        """Render a CodeBlock node with an optional language class."""
        writer = self._writer
        attrs = []
        if node.info:
            attrs.append(f'class="language-{language_from_info(node.info)}"')
        writer.cr()
        writer.write("<pre>")
        writer.write_tag("<code", attrs)
        writer.write(escape_html(node.literal))
        writer.write("</code>")
        writer.write("</pre>")
        if not isinstance(node.parent, ListItem):
            writer.cr()

    def visit_html_block(self, node: HTMLBlock, entering: bool) -> None:
        """Render an HTMLBlock node verbatim unless raw HTML is skipped."""
        if self.options.skip_html:
            logger.debug("Skipping raw HTML block")
            return
        self._writer.cr()
        self._writer.write(node.literal)
        self._writer.cr()

    def visit_list(self, node: List, entering: bool) -> None:
        """Render a List node as ``<ul>``, ``<ol>`` or ``<dl>``.

        The footnotes list is wrapped in ``<div class="footnotes">`` and
        preceded by a horizontal rule.

        """
        writer = self._writer
        if node.definition:
            tag = "dl"
        elif node.ordered:
            tag = "ol"
        else:
            tag = "ul"

        if entering:
            if node.is_footnotes_list:
                writer.write('\n<div class="footnotes">\n\n')
                self._out_hr_tag()
                writer.cr()
            writer.cr()
            if isinstance(node.parent, ListItem) and _is_tight_list(node.parent.parent):
                writer.cr()
            writer.write_tag(f"<{tag}")
            writer.cr()
            return

        writer.write(f"</{tag}>")
        if isinstance(node.parent, ListItem) and node.next_sibling is not None:
            writer.cr()
        if isinstance(node.parent, (Document, BlockQuote)):
            writer.cr()
        if node.is_footnotes_list:
            writer.write("\n</div>\n")

    def visit_list_item(self, node: ListItem, entering: bool) -> None:
        """Render a ListItem node as ``<li>``, ``<dd>`` or ``<dt>``.

        Footnote items (``ref_link`` set) open with an anchored ``<li>`` and
        may end with a return link to their reference.

        """
        writer = self._writer
        if node.term:
            tag = "dt"
        elif node.definition:
            tag = "dd"
        else:
            tag = "li"

        if entering:
            if _item_open_cr(node):
                writer.cr()
            if node.ref_link is not None:
                writer.write(footnote_item(self.options.footnote_anchor_prefix, node.ref_link))
                return
            writer.write(f"<{tag}>")
            return

        if node.ref_link is not None and self.options.footnote_return_links:
            writer.write(
                footnote_return_link(
                    self.options.footnote_anchor_prefix,
                    self.options.effective_footnote_return_link_contents,
                    node.ref_link,
                )
            )
        writer.write(f"</{tag}>")
        writer.cr()

    def visit_table(self, node: Table, entering: bool) -> None:
        """Render a Table node."""
        self._out_paired_block(entering, "<table>", "</table>")

    def visit_table_head(self, node: TableHead, entering: bool) -> None:
        """Render a TableHead node."""
        self._out_paired_block(entering, "<thead>", "</thead>")

    def visit_table_body(self, node: TableBody, entering: bool) -> None:
        """Render a TableBody node."""
        writer = self._writer
        if entering:
            writer.cr()
            writer.write("<tbody>")
            if node.first_child is None:
                writer.cr()
        else:
            writer.write("</tbody>")
            writer.cr()

    def visit_table_row(self, node: TableRow, entering: bool) -> None:
        """Render a TableRow node."""
        self._out_paired_block(entering, "<tr>", "</tr>")

    def visit_table_cell(self, node: TableCell, entering: bool) -> None:
        """Render a TableCell node as ``<th>`` or ``<td>``."""
        writer = self._writer
        tag = "th" if node.is_header else "td"
        if not entering:
            writer.write(f"</{tag}>")
            writer.cr()
            return

        attrs = []
        if node.align:
            attrs.append(f'align="{node.align}"')
        if node.previous_sibling is None:
            writer.cr()
        writer.write_tag(f"<{tag}", attrs)

    # ------------------------------------------------------------------
    # Inline nodes
    # ------------------------------------------------------------------

    def visit_text(self, node: Text, entering: bool) -> None:
        """Render a Text node.

        With punctuation substitution enabled the escaped text goes through
        the filter; otherwise link text is link-escaped and all other text is
        HTML-escaped.

        """
        if self.options.smartypants:
            self._punctuation_filter.process(self._writer, escape_html(node.literal))
        elif isinstance(node.parent, Link):
            self._writer.write(escape_link(node.literal))
        else:
            self._writer.write(escape_html(node.literal))

    def visit_soft_break(self, node: SoftBreak, entering: bool) -> None:
        """Render a SoftBreak node as a newline."""
        self._writer.cr()

    def visit_hard_break(self, node: HardBreak, entering: bool) -> None:
        """Render a HardBreak node."""
        self._writer.write("<br />" if self.options.use_xhtml else "<br>")
        self._writer.cr()

    def visit_emphasis(self, node: Emphasis, entering: bool) -> None:
        """Render an Emphasis node."""
        self._writer.write("<em>" if entering else "</em>")

    def visit_strong(self, node: Strong, entering: bool) -> None:
        """Render a Strong node."""
        self._writer.write("<strong>" if entering else "</strong>")

    def visit_delete(self, node: Delete, entering: bool) -> None:
        """Render a Delete node."""
        self._writer.write("<del>" if entering else "</del>")

    def visit_link(self, node: Link, entering: bool) -> None:
        """Render a Link node.

        Links failing the skip/safe-link policy render as ``<tt>`` without
        an href. Footnote references render through the footnote protocol.

        """
        writer = self._writer
        if need_skip_link(node.destination, skip_links=self.options.skip_links, safelink=self.options.safelink):
            if entering:
                logger.debug(f"Rendering link without anchor: {node.destination!r}")
            writer.write("<tt>" if entering else "</tt>")
            return

        if not entering:
            if not node.is_footnote_reference:
                writer.write("</a>")
            return

        if node.is_footnote_reference:
            writer.write(footnote_ref(self.options.footnote_anchor_prefix, node.destination, node.note_id))
            return

        destination = self._add_abs_prefix(node.destination)
        attrs = [f'href="{escape_link(destination)}"']
        attrs.extend(self._link_attrs(destination))
        if node.title:
            attrs.append(f'title="{escape_html(node.title)}"')
        writer.write_tag("<a", attrs)

    def visit_image(self, node: Image, entering: bool) -> Optional[WalkStatus]:
        """Render an Image node.

        The alt text is the image's rendered children with tags stripped.
        Nested images only contribute their alt text.

        """
        if self.options.skip_images:
            if entering:
                logger.debug(f"Skipping image: {node.destination!r}")
            return WalkStatus.SKIP_CHILDREN

        writer = self._writer
        if entering:
            if writer.tag_suppression_depth == 0:
                destination = self._add_abs_prefix(node.destination)
                writer.write(f'<img src="{escape_link(destination)}" alt="')
            writer.disable_tags()
            return None

        writer.enable_tags()
        if writer.tag_suppression_depth == 0:
            if node.title is not None:
                writer.write(f'" title="{escape_html(node.title)}')
            writer.write('" />')
        return None

    def visit_code(self, node: Code, entering: bool) -> None:
        """Render a Code node."""
        self._writer.write(f"<code>{escape_html(node.literal)}</code>")

    def visit_html_span(self, node: HTMLSpan, entering: bool) -> None:
        """Render an HTMLSpan node verbatim unless raw HTML is skipped."""
        if self.options.skip_html:
            return
        self._writer.write(node.literal)


__all__ = ["HtmlRenderer"]
