#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/markhtml/utils/escape.py
"""HTML escaping primitives used by the renderer.

Only the four characters that matter in element content and double-quoted
attribute values are escaped: ``&``, ``<``, ``>`` and ``"``. Single quotes are
left alone because every attribute the renderer writes is double-quoted.

"""

from __future__ import annotations

import html

_HTML_ESCAPES = str.maketrans({"&": "&amp;", "<": "&lt;", ">": "&gt;", '"': "&quot;"})


def escape_html(text: str) -> str:
    """Escape HTML special characters in text or an attribute value.

    Parameters
    ----------
    text : str
        Text to escape

    Returns
    -------
    str
        Escaped text

    Examples
    --------
        >>> escape_html('A & B <"c">')
        'A &amp; B &lt;&quot;c&quot;&gt;'

    """
    if not text:
        return text
    return text.translate(_HTML_ESCAPES)


def escape_link(text: str) -> str:
    """Escape a URL-ish string for use inside an ``href``/``src`` attribute.

    Entities already present in the link are decoded first so they are not
    double-escaped (``a&amp;b`` and ``a&b`` both come out as ``a&amp;b``).

    Parameters
    ----------
    text : str
        Link destination or link text

    Returns
    -------
    str
        Escaped link

    """
    if not text:
        return text
    return escape_html(html.unescape(text))


__all__ = ["escape_html", "escape_link"]
