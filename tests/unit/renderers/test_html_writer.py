#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/renderers/test_html_writer.py
"""Unit tests for HtmlWriter."""

from __future__ import annotations

import pytest

from markhtml.exceptions import RenderingError
from markhtml.renderers.writer import HtmlWriter


@pytest.mark.unit
class TestConditionalNewline:
    """Test cr() bookkeeping."""

    def test_cr_on_empty_output(self) -> None:
        """Test that cr writes nothing before any output."""
        writer = HtmlWriter()
        writer.cr()
        assert writer.getvalue() == ""

    def test_cr_after_write(self) -> None:
        """Test that cr writes one newline after non-empty output."""
        writer = HtmlWriter()
        writer.write("<p>")
        writer.cr()
        assert writer.getvalue() == "<p>\n"
        assert writer.last_output_len == 1

    def test_cr_after_empty_write(self) -> None:
        """Test that an empty write suppresses the next newline."""
        writer = HtmlWriter()
        writer.write("x")
        writer.write("")
        writer.cr()
        assert writer.getvalue() == "x"

    def test_write_raw_does_not_touch_length(self) -> None:
        """Test that raw writes leave the newline state alone."""
        writer = HtmlWriter()
        writer.write_raw("<body>\n")
        writer.cr()
        assert writer.getvalue() == "<body>\n"
        assert writer.last_output_len == 0


@pytest.mark.unit
class TestWriteTag:
    """Test opening tag construction."""

    def test_without_attributes(self) -> None:
        """Test a bare tag."""
        writer = HtmlWriter()
        writer.write_tag("<ul")
        assert writer.getvalue() == "<ul>"

    def test_with_attributes(self) -> None:
        """Test attributes joined by single spaces."""
        writer = HtmlWriter()
        writer.write_tag("<a", ['href="/x"', 'title="t"'])
        assert writer.getvalue() == '<a href="/x" title="t">'


@pytest.mark.unit
class TestTagSuppression:
    """Test raw tag stripping regions."""

    def test_tags_stripped_while_disabled(self) -> None:
        """Test that writes lose their tags inside a disabled region."""
        writer = HtmlWriter()
        writer.disable_tags()
        writer.write("<em>alt</em>")
        writer.enable_tags()
        writer.write("<b>")
        assert writer.getvalue() == "alt<b>"

    def test_nested_regions(self) -> None:
        """Test that suppression depth nests."""
        writer = HtmlWriter()
        writer.disable_tags()
        writer.disable_tags()
        writer.enable_tags()
        assert writer.tag_suppression_depth == 1
        writer.write("<i>x</i>")
        assert writer.getvalue() == "x"

    def test_stripped_tag_still_counts_for_cr(self) -> None:
        """Test that a tag removed by suppression still lets the next newline through."""
        writer = HtmlWriter()
        writer.disable_tags()
        writer.write("</em>")
        assert writer.last_output_len == len("</em>")
        writer.cr()
        writer.enable_tags()
        assert writer.getvalue() == "\n"

    def test_unbalanced_enable(self) -> None:
        """Test that enabling below zero is an error."""
        writer = HtmlWriter()
        with pytest.raises(RenderingError):
            writer.enable_tags()
        assert writer.tag_suppression_depth == 0


@pytest.mark.unit
class TestRedirect:
    """Test temporary output redirection."""

    def test_redirect_collects_separately(self) -> None:
        """Test that redirected writes land in the yielded buffer."""
        writer = HtmlWriter()
        writer.write("before")
        with writer.redirect() as buffer:
            writer.write("inside")
        writer.write("after")
        assert buffer == ["inside"]
        assert writer.getvalue() == "beforeafter"

    def test_redirect_restored_on_error(self) -> None:
        """Test that the destination is restored when the body raises."""
        writer = HtmlWriter()
        with pytest.raises(ValueError):
            with writer.redirect():
                raise ValueError("boom")
        writer.write("ok")
        assert writer.getvalue() == "ok"
