"""Shared helpers for the markhtml test suite."""

from markhtml.ast import Document, Node
from markhtml.options import HtmlRendererOptions
from markhtml.renderers.html import HtmlRenderer


def render(*children: Node, **option_kwargs) -> str:
    """Render ``children`` as a document body with the given option overrides."""
    options = HtmlRendererOptions(**option_kwargs)
    return HtmlRenderer(options).render_to_string(Document(children=list(children)))
