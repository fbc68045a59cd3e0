#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/markhtml/options/__init__.py
"""Configuration options for markhtml renderers.

Options are frozen dataclasses. Use ``create_updated`` to derive a modified
copy instead of mutating an instance.
"""

from __future__ import annotations

from markhtml.options.base import BaseRendererOptions, CloneFrozenMixin
from markhtml.options.html import HtmlRendererOptions, RenderNodeHook

__all__ = [
    "BaseRendererOptions",
    "CloneFrozenMixin",
    "HtmlRendererOptions",
    "RenderNodeHook",
]
