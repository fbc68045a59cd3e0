#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/markhtml/utils/__init__.py
"""Utility modules for markhtml package.

This package contains the escaping primitives, ASCII text helpers, link
safety checks and footnote markup builders used by the HTML renderer.
"""

from markhtml.utils.escape import escape_html, escape_link
from markhtml.utils.security import is_mailto, is_relative_link, is_safe_link, need_skip_link
from markhtml.utils.text import slugify

__all__ = [
    "escape_html",
    "escape_link",
    "is_mailto",
    "is_relative_link",
    "is_safe_link",
    "need_skip_link",
    "slugify",
]
