#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/markhtml/renderers/writer.py
"""Output sink for the HTML renderer.

:class:`HtmlWriter` accumulates rendered text and keeps the two pieces of
state that the block renderers rely on:

- the length of the last write, which drives :meth:`HtmlWriter.cr` so that
  consecutive blocks never produce doubled blank lines
- the raw-tag suppression depth; while it is above zero every write is
  stripped of HTML tags (used for image alt text)

"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator, Optional, Sequence

from markhtml.exceptions import RenderingError
from markhtml.utils.html_utils import strip_html_tags


class HtmlWriter:
    """Accumulating text writer with conditional newlines and tag stripping.

    Examples
    --------
        >>> writer = HtmlWriter()
        >>> writer.cr()
        >>> writer.write("<p>")
        >>> writer.cr()
        >>> writer.getvalue()
        '<p>\\n'

    """

    def __init__(self) -> None:
        self._output: list[str] = []
        self.last_output_len = 0
        self._tag_suppression_depth = 0

    @property
    def tag_suppression_depth(self) -> int:
        """Current raw-tag suppression depth (never negative)."""
        return self._tag_suppression_depth

    def write(self, text: str) -> None:
        """Append ``text``, stripping raw tags while suppression is active.

        ``last_output_len`` is the length of ``text`` as passed in, before any
        stripping, so a stripped tag still counts as output for :meth:`cr`.

        """
        self.last_output_len = len(text)
        if self._tag_suppression_depth > 0:
            text = strip_html_tags(text)
        self._output.append(text)

    def write_raw(self, text: str) -> None:
        """Append ``text`` untouched, leaving ``last_output_len`` as it is.

        Used for the page preamble and footer, which sit outside the body's
        newline bookkeeping.

        """
        self._output.append(text)

    def cr(self) -> None:
        """Write a newline unless the previous write was empty."""
        if self.last_output_len > 0:
            self.write("\n")

    def write_tag(self, name: str, attrs: Optional[Sequence[str]] = None) -> None:
        """Write an opening tag built from ``name`` (e.g. ``"<a"``) and attributes.

        Parameters
        ----------
        name : str
            Tag start including the ``<``
        attrs : sequence of str, optional
            Pre-rendered ``key="value"`` attributes, joined with spaces

        """
        if attrs:
            self.write(f"{name} {' '.join(attrs)}>")
        else:
            self.write(f"{name}>")

    def disable_tags(self) -> None:
        """Enter a region where written tags are stripped."""
        self._tag_suppression_depth += 1

    def enable_tags(self) -> None:
        """Leave a region entered with :meth:`disable_tags`.

        Raises
        ------
        RenderingError
            If called more often than :meth:`disable_tags`

        """
        if self._tag_suppression_depth == 0:
            raise RenderingError("enable_tags() called without a matching disable_tags()")
        self._tag_suppression_depth -= 1

    @contextmanager
    def redirect(self) -> Iterator[list[str]]:
        """Temporarily send writes to a fresh buffer.

        Yields the buffer list; the previous destination is restored on exit.
        ``last_output_len`` keeps tracking the redirected writes.

        """
        saved_output = self._output
        buffer: list[str] = []
        self._output = buffer
        try:
            yield buffer
        finally:
            self._output = saved_output

    def getvalue(self) -> str:
        """Return everything written so far."""
        return "".join(self._output)


__all__ = ["HtmlWriter"]
