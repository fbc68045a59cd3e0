#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/markhtml/utils/security.py
"""Link safety checks for the HTML renderer.

These checks implement the renderer's safe-link policy: a small allowlist of
relative path prefixes and URL schemes. They are not a sanitizer; raw HTML
and other browser trust-boundary concerns are outside their scope.

"""

from __future__ import annotations

from markhtml.constants import MAILTO_PREFIX, SAFE_LINK_PATHS, SAFE_LINK_PREFIXES
from markhtml.utils.text import is_alnum


def is_relative_link(link: str) -> bool:
    """Return True if ``link`` is relative to the current document or site.

    A link is relative when it starts with ``#``, is exactly ``/``, starts
    with ``/`` followed by anything but a second ``/`` (``//host`` is
    protocol-relative, not site-relative), or starts with ``./`` or ``../``.

    Parameters
    ----------
    link : str
        Link destination

    Returns
    -------
    bool
        Whether the link is relative

    """
    if not link:
        return False
    if link[0] == "#":
        return True
    if link == "/":
        return True
    if len(link) >= 2 and link[0] == "/" and link[1] != "/":
        return True
    return link.startswith(("./", "../"))


def is_safe_link(link: str) -> bool:
    """Return True if ``link`` passes the safe-link allowlist.

    Accepted forms:

    - ``/``, ``./`` or ``../``, either alone or followed by an ASCII
      alphanumeric character
    - ``http://``, ``https://``, ``ftp://`` or ``mailto://`` (any case)
      followed by an ASCII alphanumeric character

    Parameters
    ----------
    link : str
        Link destination

    Returns
    -------
    bool
        Whether the link is considered safe

    Examples
    --------
        >>> is_safe_link("/path")
        True
        >>> is_safe_link("javascript:alert(1)")
        False
        >>> is_safe_link("HTTPS://example.com")
        True

    """
    for path in SAFE_LINK_PATHS:
        if link.startswith(path):
            if len(link) == len(path) or is_alnum(link[len(path)]):
                return True

    for prefix in SAFE_LINK_PREFIXES:
        if len(link) > len(prefix) and link[: len(prefix)].lower() == prefix and is_alnum(link[len(prefix)]):
            return True

    return False


def is_mailto(link: str) -> bool:
    """Return True if ``link`` is a ``mailto:`` link (case-sensitive)."""
    return link.startswith(MAILTO_PREFIX)


def need_skip_link(link: str, *, skip_links: bool, safelink: bool) -> bool:
    """Decide whether a link must be rendered without an anchor.

    Parameters
    ----------
    link : str
        Link destination
    skip_links : bool
        Whether all links are skipped
    safelink : bool
        Whether only safe (allowlisted or ``mailto:``) links are rendered

    Returns
    -------
    bool
        True when the link degrades to a neutral inline container

    """
    if skip_links:
        return True
    return safelink and not is_safe_link(link) and not is_mailto(link)


__all__ = ["is_relative_link", "is_safe_link", "is_mailto", "need_skip_link"]
