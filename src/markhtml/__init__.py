"""markhtml - render parsed markup document trees to HTML.

markhtml is the output stage of a document-processing pipeline: an upstream
parser produces a tree of typed nodes and markhtml walks that tree and writes
HTML, applying configurable policies for link safety, heading-id uniqueness,
footnotes, tables of contents and typographic punctuation.

Key Features
------------
- Entering/exiting tree walk with continue, skip-subtree and terminate control
- Exact newline placement for block elements and tight/loose lists
- Safe-link allowlist, nofollow/noreferrer/target attributes, absolute prefixes
- Footnote references and return links with namespaced anchors
- Table of contents built from heading levels
- Pluggable punctuation substitution (smart quotes, dashes, fractions)
- Full-page HTML5 or XHTML output
- JSON interchange format and a command-line interface

Examples
--------
    >>> from markhtml import render_html
    >>> from markhtml.ast import Document, Paragraph, Text
    >>> render_html(Document(children=[Paragraph(children=[Text("A & B")])]))
    '<p>A &amp; B</p>\\n'

See Also
--------
markhtml.ast : AST node definitions, walk and serialization
markhtml.options : Renderer configuration

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

from __future__ import annotations

from markhtml.ast.nodes import Document
from markhtml.options.html import HtmlRendererOptions
from markhtml.renderers.html import HtmlRenderer

__version__ = "0.1.0"


def render_html(document: Document, options: HtmlRendererOptions | None = None) -> str:
    """Render ``document`` to an HTML string.

    Parameters
    ----------
    document : Document
        Root of the tree to render
    options : HtmlRendererOptions, optional
        Rendering options (defaults apply when omitted)

    Returns
    -------
    str
        Rendered HTML

    """
    return HtmlRenderer(options).render_to_string(document)


__all__ = ["HtmlRenderer", "HtmlRendererOptions", "__version__", "render_html"]
