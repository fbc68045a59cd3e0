#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/markhtml/utils/text.py
"""Text classification and slug utilities.

Character classification here is ASCII-only on purpose: footnote fragments
and safe-link checks must produce the same answer regardless of locale or
Unicode database version, so a non-ASCII letter is treated like any other
symbol.

Functions
---------
slugify : Convert text to a URL-safe fragment
is_alnum, is_letter, is_space, is_punctuation : ASCII character classes

Examples
--------
    >>> slugify("Hello, World!")
    'Hello-World'
    >>> slugify("  --  ")
    ''

"""

from __future__ import annotations

import re

_NON_ALNUM_RUN = re.compile(r"[^A-Za-z0-9]+")
_PUNCTUATION = frozenset("!\"#$%&'()*+,-./:;<=>?@[\\]^_`{|}~")


def is_letter(char: str) -> bool:
    """Return True if ``char`` is an ASCII letter."""
    return ("a" <= char <= "z") or ("A" <= char <= "Z")


def is_alnum(char: str) -> bool:
    """Return True if ``char`` is an ASCII digit or letter."""
    return ("0" <= char <= "9") or is_letter(char)


def is_space(char: str) -> bool:
    """Return True if ``char`` is an ASCII whitespace character."""
    return char in " \t\n\r\f\v"


def is_punctuation(char: str) -> bool:
    """Return True if ``char`` is an ASCII punctuation symbol."""
    return char in _PUNCTUATION


def slugify(text: str) -> str:
    """Create a URL-safe slug for use in ``id``/``href`` fragments.

    ASCII letters and digits are kept (case is preserved); every run of one
    or more other characters becomes a single ``-``; leading and trailing
    ``-`` are trimmed.

    Parameters
    ----------
    text : str
        Arbitrary text, e.g. a footnote reference

    Returns
    -------
    str
        Slug, empty when ``text`` has no ASCII alphanumerics

    Examples
    --------
        >>> slugify("My Note #1")
        'My-Note-1'
        >>> slugify("café")
        'caf'

    """
    if not text:
        return ""
    return _NON_ALNUM_RUN.sub("-", text).strip("-")


__all__ = [
    "slugify",
    "is_alnum",
    "is_letter",
    "is_space",
    "is_punctuation",
]
