#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/renderers/test_toc.py
"""Unit tests for the table of contents."""

from __future__ import annotations

import pytest
from utils import render

from markhtml.ast import Document, Emphasis, Heading, Paragraph, Text
from markhtml.renderers.html import HtmlRenderer
from markhtml.renderers.toc import TocBuilder
from markhtml.renderers.writer import HtmlWriter

OPEN = "\n<ul>\n<li>"
NEXT = "</li>\n\n<li>"
CLOSE = "</li>\n</ul>"


def _heading(level: int, text: str, **kwargs) -> Heading:
    return Heading(level=level, children=[Text(text)], **kwargs)


def _entry(index: int, text: str) -> str:
    return f'<a href="#toc_{index}">{text}</a>'


def _build(document: Document) -> tuple[HtmlWriter, TocBuilder]:
    writer = HtmlWriter()
    builder = TocBuilder(HtmlRenderer().render_node)
    builder.write(writer, document)
    return writer, builder


@pytest.mark.unit
class TestTocBuilder:
    """Test entry nesting."""

    def test_level_transitions(self) -> None:
        """Test going deeper, staying, climbing out and skipping levels."""
        levels = [1, 2, 2, 1, 3]
        doc = Document(children=[_heading(level, f"H{i}") for i, level in enumerate(levels)])
        writer, builder = _build(doc)

        entries = (
            OPEN
            + _entry(0, "H0")
            + OPEN
            + _entry(1, "H1")
            + NEXT
            + _entry(2, "H2")
            + CLOSE
            + NEXT
            + _entry(3, "H3")
            + OPEN
            + OPEN
            + _entry(4, "H4")
            + CLOSE * 3
        )
        assert writer.getvalue() == f"<nav>\n{entries}\n\n</nav>\n"
        assert writer.last_output_len == len(entries)
        assert builder.heading_count == 5
        assert builder.level == 0

    def test_heading_ids_rewritten(self) -> None:
        """Test that headings are renumbered in document order."""
        first = _heading(1, "A", heading_id="custom")
        second = _heading(2, "B")
        _build(Document(children=[first, second]))
        assert (first.heading_id, second.heading_id) == ("toc_0", "toc_1")

    def test_title_block_excluded(self) -> None:
        """Test that title blocks keep their id and get no entry."""
        title = _heading(1, "Title", heading_id="t", is_titleblock=True)
        writer, builder = _build(Document(children=[title, _heading(1, "A")]))
        assert title.heading_id == "t"
        assert "Title" not in writer.getvalue()
        assert builder.heading_count == 1

    def test_no_headings(self) -> None:
        """Test that nothing is written without headings."""
        writer, builder = _build(Document(children=[Paragraph(children=[Text("x")])]))
        assert writer.getvalue() == ""
        assert writer.last_output_len == 0

    def test_inline_markup_in_entries(self) -> None:
        """Test that heading content is rendered through the node rules."""
        heading = Heading(level=1, children=[Text("A & "), Emphasis(children=[Text("B")])])
        writer, _ = _build(Document(children=[heading]))
        assert _entry(0, "A &amp; <em>B</em>") in writer.getvalue()


@pytest.mark.unit
class TestTocRendering:
    """Test the table of contents inside a full render."""

    def test_toc_precedes_body(self) -> None:
        """Test the nav block followed by renumbered headings."""
        html = render(_heading(1, "A"), _heading(2, "B"), toc=True)
        entries = OPEN + _entry(0, "A") + OPEN + _entry(1, "B") + CLOSE * 2
        assert html == (
            f"<nav>\n{entries}\n\n</nav>\n"
            '\n<h1 id="toc_0">A</h1>\n'
            '\n<h2 id="toc_1">B</h2>\n'
        )

    def test_toc_without_headings(self) -> None:
        """Test that an empty toc leaves the body untouched."""
        assert render(Paragraph(children=[Text("x")]), toc=True) == "<p>x</p>\n"

    def test_toc_in_complete_page(self) -> None:
        """Test that the nav block follows the page preamble."""
        html = render(_heading(1, "A"), toc=True, complete_page=True)
        assert "<body>\n\n<nav>\n" in html
        assert html.endswith("</h1>\n\n</body>\n</html>\n")
