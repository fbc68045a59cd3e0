#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/markhtml/utils/footnotes.py
"""Footnote anchor and reference markup.

A footnote reference and its footnote item are tied together by a fragment
built from a caller-supplied prefix and the slug of the reference text:

- the reference renders ``<sup ... id="fnref:{prefix}{slug}">`` linking to
  ``#fn:{prefix}{slug}``
- the footnote item renders ``<li id="fn:{prefix}{slug}">`` and, when return
  links are enabled, ends with an anchor back to ``#fnref:{prefix}{slug}``

The prefix keeps fragments unique when several rendered documents share a
page.

"""

from __future__ import annotations

from markhtml.utils.text import slugify


def footnote_fragment(prefix: str, reference: str) -> str:
    """Build the shared ``{prefix}{slug}`` fragment for a footnote."""
    return prefix + slugify(reference)


def footnote_ref(prefix: str, reference: str, note_id: int) -> str:
    """Render the superscript reference that points at a footnote.

    Parameters
    ----------
    prefix : str
        Footnote anchor prefix
    reference : str
        Raw reference text of the footnote
    note_id : int
        Displayed footnote number

    Returns
    -------
    str
        ``<sup>`` element containing the anchor

    Examples
    --------
        >>> footnote_ref("", "note", 1)
        '<sup class="footnote-ref" id="fnref:note"><a rel="footnote" href="#fn:note">1</a></sup>'

    """
    fragment = footnote_fragment(prefix, reference)
    anchor = f'<a rel="footnote" href="#fn:{fragment}">{note_id}</a>'
    return f'<sup class="footnote-ref" id="fnref:{fragment}">{anchor}</sup>'


def footnote_item(prefix: str, reference: str) -> str:
    """Render the opening ``<li>`` of a footnote item."""
    return f'<li id="fn:{footnote_fragment(prefix, reference)}">'


def footnote_return_link(prefix: str, contents: str, reference: str) -> str:
    """Render the anchor that leads from a footnote back to its reference.

    ``contents`` is written verbatim, so it may contain markup such as the
    default ``<sup>[return]</sup>``.

    """
    fragment = footnote_fragment(prefix, reference)
    return f' <a class="footnote-return" href="#fnref:{fragment}">{contents}</a>'


__all__ = ["footnote_fragment", "footnote_ref", "footnote_item", "footnote_return_link"]
