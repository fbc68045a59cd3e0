#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/markhtml/utils/html_utils.py
"""HTML-related utility helpers."""

from __future__ import annotations

import re

from markhtml.constants import HTML_TAG

HTML_TAG_RE = re.compile(HTML_TAG, re.IGNORECASE)


def strip_html_tags(text: str) -> str:
    """Remove raw HTML tags, comments, declarations and CDATA from ``text``.

    Used while rendering image alt text, where nested markup must degrade to
    plain text instead of leaking tags into an attribute value.

    Examples
    --------
        >>> strip_html_tags('a <b class="x">bold</b> <!-- c -->word')
        'a bold word'

    """
    if "<" not in text:
        return text
    return HTML_TAG_RE.sub("", text)


def language_from_info(info: str) -> str:
    """Return the language part of a code block info string.

    The language is everything up to the first space or tab.

    """
    for index, char in enumerate(info):
        if char in " \t":
            return info[:index]
    return info


__all__ = ["HTML_TAG_RE", "strip_html_tags", "language_from_info"]
