#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/markhtml/renderers/toc.py
"""Table-of-contents construction for the HTML renderer.

The builder walks the document once before the body is rendered. Every
heading that is not a title block is renumbered ``toc_N`` and gets an entry
in a nested ``<ul>`` whose depth follows the heading levels. The inline
content of each heading is rendered into the entry through the renderer's
ordinary node rules, so emphasis and code inside a heading survive.

"""

from __future__ import annotations

import logging
from typing import Callable

from markhtml.ast.nodes import Heading, Node
from markhtml.ast.walk import WalkStatus, walk
from markhtml.constants import TOC_ID_TEMPLATE
from markhtml.renderers.writer import HtmlWriter

logger = logging.getLogger(__name__)

RenderNodeFunc = Callable[[HtmlWriter, Node, bool], WalkStatus]


class TocBuilder:
    """Build the ``<nav>`` table of contents for one document.

    Parameters
    ----------
    render_node : callable
        ``render_node(writer, node, entering)`` used for heading content

    """

    def __init__(self, render_node: RenderNodeFunc) -> None:
        self._render_node = render_node
        self.level = 0
        self.heading_count = 0
        self._in_heading = False

    def write(self, writer: HtmlWriter, document: Node) -> None:
        """Write the table of contents for ``document`` to ``writer``.

        Nothing is written when the document has no eligible headings.
        Afterwards ``writer.last_output_len`` is the length of the entries
        (zero when nothing was written).

        """
        with writer.redirect() as buffer:
            walk(document, lambda node, entering: self._visit(writer, node, entering))
            while self.level > 0:
                self.level -= 1
                writer.write("</li>\n</ul>")

        entries = "".join(buffer)
        if entries:
            writer.write(f"<nav>\n{entries}\n\n</nav>\n")
        writer.last_output_len = len(entries)
        logger.debug(f"Table of contents built with {self.heading_count} headings")

    def _visit(self, writer: HtmlWriter, node: Node, entering: bool) -> WalkStatus:
        if isinstance(node, Heading) and not node.is_titleblock:
            self._in_heading = entering
            if entering:
                self._open_entry(writer, node)
            else:
                writer.write("</a>")
            return WalkStatus.GO_TO_NEXT

        if self._in_heading:
            return self._render_node(writer, node, entering)
        return WalkStatus.GO_TO_NEXT

    def _open_entry(self, writer: HtmlWriter, heading: Heading) -> None:
        heading_id = TOC_ID_TEMPLATE.format(index=self.heading_count)
        heading.heading_id = heading_id

        if heading.level == self.level:
            writer.write("</li>\n\n<li>")
        elif heading.level < self.level:
            while heading.level < self.level:
                self.level -= 1
                writer.write("</li>\n</ul>")
            writer.write("</li>\n\n<li>")
        else:
            while heading.level > self.level:
                self.level += 1
                writer.write("\n<ul>\n<li>")

        writer.write(f'<a href="#{heading_id}">')
        self.heading_count += 1


__all__ = ["TocBuilder"]
