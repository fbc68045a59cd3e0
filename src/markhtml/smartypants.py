#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/markhtml/smartypants.py
"""Typographic punctuation substitution for rendered text.

The HTML renderer hands already-escaped text to a punctuation filter when
``smartypants`` is enabled. Any object with a ``process(writer, text)``
method can act as that filter; :class:`SmartypantsRenderer` is the default.

Substitutions
-------------
- straight double and single quotes become curly quotes (or angled quotes)
- apostrophes inside words become ``&rsquo;``
- ``--``/``---`` and spaced hyphens become en and em dashes
- ``...`` becomes an ellipsis
- ``(c)``, ``(r)`` and ``(tm)`` become the matching symbols
- ``1/2``, ``1/4`` and ``3/4`` become fraction entities; other ``n/d``
  fractions become superscript/subscript markup when fractions are enabled

Quote direction is guessed from the characters on either side of the quote.
Raw tags in the input are copied through untouched.

Examples
--------
    >>> SmartypantsRenderer(dashes=True).convert('"Hi" -- it&#39;s...')
    '&ldquo;Hi&rdquo; &mdash; it&#39;s&hellip;'

"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Optional, Protocol

from markhtml.utils.text import is_alnum, is_punctuation, is_space

if TYPE_CHECKING:
    from markhtml.options.html import HtmlRendererOptions

_SYMBOLS = {"(c)": "&copy;", "(r)": "&reg;", "(tm)": "&trade;"}
_KNOWN_FRACTIONS = {"1/2": "&frac12;", "1/4": "&frac14;", "3/4": "&frac34;"}


class SupportsWrite(Protocol):
    """Anything text can be written to."""

    def write(self, text: str) -> object:  # noqa: D102
        ...


class PunctuationFilter(Protocol):
    """Pluggable punctuation substitution engine.

    ``process`` receives HTML-escaped text and writes the substituted text to
    ``writer``.
    """

    def process(self, writer: SupportsWrite, text: str) -> None:  # noqa: D102
        ...


def _is_word_boundary(char: Optional[str]) -> bool:
    return char is None or is_space(char) or is_punctuation(char)


class SmartypantsRenderer:
    """Default punctuation filter.

    Parameters
    ----------
    fractions : bool, default False
        Turn any ``n/d`` fraction into ``<sup>n</sup>&frasl;<sub>d</sub>``
    dashes : bool, default False
        Substitute dashes
    latex_dashes : bool, default False
        With ``dashes``: ``---`` is an em dash and ``--`` an en dash.
        Otherwise ``--`` is an em dash and `` - `` an en dash.
    angled_quotes : bool, default False
        Use ``&laquo;``/``&raquo;`` for double quotes
    quotes_nbsp : bool, default False
        Put ``&nbsp;`` on the inside of angled quotes

    Notes
    -----
    Open/closed quote state carries over between ``process`` calls, so a
    quote opened in one text node can be closed in the next. Create one
    instance per document.

    """

    def __init__(
        self,
        *,
        fractions: bool = False,
        dashes: bool = False,
        latex_dashes: bool = False,
        angled_quotes: bool = False,
        quotes_nbsp: bool = False,
    ) -> None:
        self.fractions = fractions
        self.dashes = dashes
        self.latex_dashes = latex_dashes
        self.angled_quotes = angled_quotes
        self.quotes_nbsp = quotes_nbsp
        self._in_single_quote = False
        self._in_double_quote = False
        self._handlers: dict[str, Callable[[list[str], Optional[str], str, int], int]] = {
            '"': self._double_quote,
            "'": self._single_quote,
            "&": self._ampersand,
            "`": self._backtick,
            ".": self._period,
            "(": self._parenthesis,
            "<": self._tag,
        }
        if dashes:
            self._handlers["-"] = self._dash
        for digit in "0123456789":
            self._handlers[digit] = self._number

    @classmethod
    def from_options(cls, options: HtmlRendererOptions) -> SmartypantsRenderer:
        """Build a filter from the ``smartypants_*`` renderer options."""
        return cls(
            fractions=options.smartypants_fractions,
            dashes=options.smartypants_dashes,
            latex_dashes=options.smartypants_latex_dashes,
            angled_quotes=options.smartypants_angled_quotes,
            quotes_nbsp=options.smartypants_quotes_nbsp,
        )

    def process(self, writer: SupportsWrite, text: str) -> None:
        """Write ``text`` to ``writer`` with punctuation substituted."""
        writer.write(self.convert(text))

    def convert(self, text: str) -> str:
        """Return ``text`` with punctuation substituted."""
        out: list[str] = []
        start = 0
        index = 0
        while index < len(text):
            handler = self._handlers.get(text[index])
            if handler is None:
                index += 1
                continue
            out.append(text[start:index])
            previous = text[index - 1] if index > 0 else None
            index += handler(out, previous, text, index)
            start = index
        out.append(text[start:])
        return "".join(out)

    # ------------------------------------------------------------------
    # Quotes
    # ------------------------------------------------------------------

    def _quote(self, out: list[str], previous: Optional[str], following: Optional[str], kind: str) -> None:
        is_open = self._in_double_quote if kind == "d" else self._in_single_quote

        if following is None:
            # edge of the text: the neighbouring node is unseen
            is_open = (not is_open) if previous is None else is_space(previous)
        elif is_space(following):
            if previous is not None and is_space(previous):
                is_open = not is_open
            else:
                is_open = False
        elif is_punctuation(following):
            if previous is None:
                is_open = False
            elif is_space(previous):
                is_open = True
            elif is_punctuation(previous):
                is_open = not is_open
            else:
                is_open = False
        else:
            is_open = previous is None or is_space(previous) or is_punctuation(previous)

        if kind == "d":
            self._in_double_quote = is_open
        else:
            self._in_single_quote = is_open

        if kind == "d" and self.angled_quotes:
            entity = "&laquo;" if is_open else "&raquo;"
            if self.quotes_nbsp:
                entity = entity + "&nbsp;" if is_open else "&nbsp;" + entity
        else:
            entity = f"&{'l' if is_open else 'r'}{kind}quo;"
        out.append(entity)

    def _double_quote(self, out: list[str], previous: Optional[str], text: str, index: int) -> int:
        following = text[index + 1] if index + 1 < len(text) else None
        self._quote(out, previous, following, "d")
        return 1

    def _single_quote(self, out: list[str], previous: Optional[str], text: str, index: int) -> int:
        following = text[index + 1] if index + 1 < len(text) else None
        if following == "'":
            after = text[index + 2] if index + 2 < len(text) else None
            self._quote(out, previous, after, "d")
            return 2
        if previous is not None and following is not None and is_alnum(previous) and is_alnum(following):
            out.append("&rsquo;")
            return 1
        self._quote(out, previous, following, "s")
        return 1

    def _backtick(self, out: list[str], previous: Optional[str], text: str, index: int) -> int:
        if text.startswith("``", index):
            after = text[index + 2] if index + 2 < len(text) else None
            self._quote(out, previous, after, "d")
            return 2
        out.append("`")
        return 1

    def _ampersand(self, out: list[str], previous: Optional[str], text: str, index: int) -> int:
        if text.startswith("&quot;", index):
            after_index = index + len("&quot;")
            following = text[after_index] if after_index < len(text) else None
            self._quote(out, previous, following, "d")
            return len("&quot;")
        # other entities are copied whole so their letters are not rewritten
        end = text.find(";", index)
        if end != -1 and all(is_alnum(char) or char == "#" for char in text[index + 1 : end]) and end > index + 1:
            out.append(text[index : end + 1])
            return end + 1 - index
        out.append("&")
        return 1

    # ------------------------------------------------------------------
    # Dashes, ellipses, symbols
    # ------------------------------------------------------------------

    def _dash(self, out: list[str], previous: Optional[str], text: str, index: int) -> int:
        if self.latex_dashes:
            if text.startswith("---", index):
                out.append("&mdash;")
                return 3
            if text.startswith("--", index):
                out.append("&ndash;")
                return 2
        else:
            if text.startswith("--", index):
                out.append("&mdash;")
                return 2
            following = text[index + 1] if index + 1 < len(text) else None
            if previous is not None and following is not None and is_space(previous) and is_space(following):
                out.append("&ndash;")
                return 1
        out.append("-")
        return 1

    def _period(self, out: list[str], previous: Optional[str], text: str, index: int) -> int:
        if text.startswith("...", index):
            out.append("&hellip;")
            return 3
        if text.startswith(". . .", index):
            out.append("&hellip;")
            return 5
        out.append(".")
        return 1

    def _parenthesis(self, out: list[str], previous: Optional[str], text: str, index: int) -> int:
        for symbol, entity in _SYMBOLS.items():
            if text[index : index + len(symbol)].lower() == symbol:
                out.append(entity)
                return len(symbol)
        out.append("(")
        return 1

    def _tag(self, out: list[str], previous: Optional[str], text: str, index: int) -> int:
        end = text.find(">", index)
        if end == -1:
            out.append("<")
            return 1
        out.append(text[index : end + 1])
        return end + 1 - index

    # ------------------------------------------------------------------
    # Fractions
    # ------------------------------------------------------------------

    def _number(self, out: list[str], previous: Optional[str], text: str, index: int) -> int:
        if not _is_word_boundary(previous) or previous == "/":
            out.append(text[index])
            return 1

        numerator_end = index
        while numerator_end < len(text) and text[numerator_end].isdigit() and text[numerator_end].isascii():
            numerator_end += 1
        if numerator_end >= len(text) or text[numerator_end] != "/":
            out.append(text[index:numerator_end])
            return numerator_end - index

        denominator_end = numerator_end + 1
        while denominator_end < len(text) and text[denominator_end].isdigit() and text[denominator_end].isascii():
            denominator_end += 1
        following = text[denominator_end] if denominator_end < len(text) else None
        if denominator_end == numerator_end + 1 or not _is_word_boundary(following) or following == "/":
            out.append(text[index:numerator_end])
            return numerator_end - index

        fraction = text[index:denominator_end]
        if fraction in _KNOWN_FRACTIONS:
            out.append(_KNOWN_FRACTIONS[fraction])
        elif self.fractions:
            numerator = text[index:numerator_end]
            denominator = text[numerator_end + 1 : denominator_end]
            out.append(f"<sup>{numerator}</sup>&frasl;<sub>{denominator}</sub>")
        else:
            out.append(fraction)
        return denominator_end - index


__all__ = ["PunctuationFilter", "SmartypantsRenderer", "SupportsWrite"]
