#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_smartypants.py
"""Unit tests for the default punctuation filter."""

from __future__ import annotations

import io

import pytest
from hypothesis import given
from hypothesis import strategies as st

from markhtml.options import HtmlRendererOptions
from markhtml.smartypants import SmartypantsRenderer


@pytest.mark.unit
class TestQuotes:
    """Test quote substitution."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ('"Hi"', "&ldquo;Hi&rdquo;"),
            ("say 'no' now", "say &lsquo;no&rsquo; now"),
            ("don't", "don&rsquo;t"),
            ("''quoted''", "&ldquo;quoted&rdquo;"),
            ("``quoted''", "&ldquo;quoted&rdquo;"),
            ("&quot;x&quot;", "&ldquo;x&rdquo;"),
            ('("x")', "(&ldquo;x&rdquo;)"),
            ("a `b` c", "a `b` c"),
        ],
    )
    def test_curly_quotes(self, text: str, expected: str) -> None:
        """Test double, single and doubled quotes."""
        assert SmartypantsRenderer().convert(text) == expected

    def test_angled_quotes(self) -> None:
        """Test angled double quotes."""
        assert SmartypantsRenderer(angled_quotes=True).convert('"x"') == "&laquo;x&raquo;"

    def test_angled_quotes_nbsp(self) -> None:
        """Test non-breaking spaces inside angled quotes."""
        converted = SmartypantsRenderer(angled_quotes=True, quotes_nbsp=True).convert('"x"')
        assert converted == "&laquo;&nbsp;x&nbsp;&raquo;"

    def test_quote_state_spans_calls(self) -> None:
        """Test that a quote opened in one call closes in the next."""
        filt = SmartypantsRenderer()
        assert filt.convert('"') == "&ldquo;"
        assert filt.convert('"') == "&rdquo;"


@pytest.mark.unit
class TestDashesAndSymbols:
    """Test dashes, ellipses and symbols."""

    def test_dashes_disabled(self) -> None:
        """Test that dashes are untouched unless enabled."""
        assert SmartypantsRenderer().convert("a -- b") == "a -- b"

    @pytest.mark.parametrize(
        "text,expected",
        [("a -- b", "a &mdash; b"), ("a - b", "a &ndash; b"), ("well-known", "well-known")],
    )
    def test_plain_dashes(self, text: str, expected: str) -> None:
        """Test the default dash rules."""
        assert SmartypantsRenderer(dashes=True).convert(text) == expected

    @pytest.mark.parametrize(
        "text,expected",
        [("a --- b", "a &mdash; b"), ("1--2", "1&ndash;2"), ("a - b", "a - b")],
    )
    def test_latex_dashes(self, text: str, expected: str) -> None:
        """Test LaTeX-style dash rules."""
        assert SmartypantsRenderer(dashes=True, latex_dashes=True).convert(text) == expected

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("wait...", "wait&hellip;"),
            ("wait. . .", "wait&hellip;"),
            ("(c) 2025", "&copy; 2025"),
            ("(R)", "&reg;"),
            ("Brand(TM)", "Brand&trade;"),
            ("(x)", "(x)"),
        ],
    )
    def test_symbols(self, text: str, expected: str) -> None:
        """Test ellipses and parenthesized symbols."""
        assert SmartypantsRenderer().convert(text) == expected

    def test_tags_and_entities_untouched(self) -> None:
        """Test that tags and entities pass through."""
        filt = SmartypantsRenderer(dashes=True)
        assert filt.convert('<a title="--">x</a>') == '<a title="--">x</a>'
        assert filt.convert("&amp; &#39;") == "&amp; &#39;"


@pytest.mark.unit
class TestFractions:
    """Test fraction substitution."""

    @pytest.mark.parametrize(
        "text,expected",
        [("1/2 cup", "&frac12; cup"), ("add 1/4.", "add &frac14;."), ("3/4", "&frac34;")],
    )
    def test_common_fractions(self, text: str, expected: str) -> None:
        """Test the three fractions with named entities."""
        assert SmartypantsRenderer().convert(text) == expected

    def test_generic_fraction_disabled(self) -> None:
        """Test that other fractions need the fractions flag."""
        assert SmartypantsRenderer().convert("4/5") == "4/5"

    def test_generic_fraction_enabled(self) -> None:
        """Test superscript/subscript fractions."""
        assert SmartypantsRenderer(fractions=True).convert("4/5") == "<sup>4</sup>&frasl;<sub>5</sub>"

    @pytest.mark.parametrize("text", ["11/22/33", "a1/2", "1/2b", "2025"])
    def test_non_fractions(self, text: str) -> None:
        """Test dates, words and plain numbers."""
        assert SmartypantsRenderer(fractions=True).convert(text) == text


@pytest.mark.unit
class TestFilterInterface:
    """Test the writer-facing interface."""

    def test_process_writes(self) -> None:
        """Test that process writes converted text."""
        out = io.StringIO()
        SmartypantsRenderer().process(out, "it's")
        assert out.getvalue() == "it&rsquo;s"

    def test_from_options(self) -> None:
        """Test building a filter from renderer options."""
        filt = SmartypantsRenderer.from_options(HtmlRendererOptions.common(smartypants_angled_quotes=True))
        assert filt.fractions and filt.dashes and filt.latex_dashes
        assert filt.angled_quotes
        assert not filt.quotes_nbsp

    @given(st.text(alphabet="abcdefXYZ ,;:!?/#\tüß"))
    def test_plain_text_unchanged(self, text: str) -> None:
        """Property: text without trigger characters is returned as is."""
        assert SmartypantsRenderer(dashes=True, fractions=True).convert(text) == text
