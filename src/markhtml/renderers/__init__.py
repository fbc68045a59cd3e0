#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/markhtml/renderers/__init__.py
"""AST renderers for markhtml.

This package holds the HTML renderer and its supporting pieces: the output
writer, the heading-id registry and the table-of-contents builder.
"""

from markhtml.renderers.base import BaseRenderer
from markhtml.renderers.heading_ids import HeadingIdRegistry
from markhtml.renderers.html import HtmlRenderer
from markhtml.renderers.toc import TocBuilder
from markhtml.renderers.writer import HtmlWriter

__all__ = [
    "BaseRenderer",
    "HeadingIdRegistry",
    "HtmlRenderer",
    "HtmlWriter",
    "TocBuilder",
]
