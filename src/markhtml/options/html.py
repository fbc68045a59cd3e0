#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/markhtml/options/html.py
"""Configuration options for HTML rendering.

This module defines the options that control how a document tree is turned
into HTML: raw HTML and link policies, full-page output, footnotes, heading
identifiers, punctuation substitution and the table of contents.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable, Optional

from markhtml.constants import (
    DEFAULT_ABSOLUTE_PREFIX,
    DEFAULT_FOOTNOTE_ANCHOR_PREFIX,
    DEFAULT_FOOTNOTE_RETURN_LINK_CONTENTS,
    DEFAULT_HEADING_ID_PREFIX,
    DEFAULT_HEADING_ID_SUFFIX,
    DEFAULT_TITLE,
)
from markhtml.options.base import BaseRendererOptions

if TYPE_CHECKING:
    from markhtml.ast.walk import HookResult

RenderNodeHook = Callable[..., "HookResult"]


@dataclass(frozen=True)
class HtmlRendererOptions(BaseRendererOptions):
    """Configuration options for rendering an AST to HTML.

    Parameters
    ----------
    skip_html : bool, default False
        Drop raw HTML blocks and spans from the output.
    skip_images : bool, default False
        Drop images, including their alt text.
    skip_links : bool, default False
        Render every link as ``<tt>`` text instead of an anchor.
    safelink : bool, default False
        Only render anchors for allowlisted destinations and ``mailto:``
        links; everything else degrades to ``<tt>`` text.
    nofollow_links : bool, default False
        Add ``rel="nofollow"`` to non-relative links.
    noreferrer_links : bool, default False
        Add ``rel="noreferrer"`` to non-relative links.
    href_target_blank : bool, default False
        Add ``target="_blank"`` to non-relative links.
    complete_page : bool, default False
        Wrap the body in a full HTML page (doctype, head, body).
    use_xhtml : bool, default False
        Use XHTML void-element syntax (``<br />``) and the XHTML doctype.
    footnote_return_links : bool, default False
        End each footnote with a link back to its reference.
    smartypants : bool, default False
        Run text through the punctuation substitution engine.
    smartypants_fractions : bool, default False
        Substitute generic ``n/d`` fractions (requires ``smartypants``).
    smartypants_dashes : bool, default False
        Substitute dashes (requires ``smartypants``).
    smartypants_latex_dashes : bool, default False
        Use LaTeX-style dashes: ``---`` em, ``--`` en (requires
        ``smartypants_dashes``).
    smartypants_angled_quotes : bool, default False
        Use angled double quotes.
    smartypants_quotes_nbsp : bool, default False
        Put non-breaking spaces inside angled quotes.
    toc : bool, default False
        Generate a table of contents ahead of the body.
    absolute_prefix : str, default ""
        Prefix prepended to relative link and image destinations.
    footnote_anchor_prefix : str, default ""
        Namespace for footnote ``id``/``href`` fragments.
    footnote_return_link_contents : str, default ""
        Markup of the footnote return link; empty means ``<sup>[return]</sup>``.
    heading_id_prefix : str, default ""
        Prefix added to every heading ``id``.
    heading_id_suffix : str, default ""
        Suffix added to every heading ``id``.
    title : str, default ""
        Page title used in full-page mode.
    css : str, default ""
        Stylesheet URL linked from the page head in full-page mode.
    icon : str, default ""
        Icon URL linked from the page head in full-page mode.
    render_node_hook : callable or None, default None
        Called as ``hook(writer, node, entering)`` before the default
        rendering of every node. Returning ``Handled(status)`` replaces the
        default rendering; ``NOT_HANDLED`` falls through to it.

    Examples
    --------
    Safe links opening in a new tab:
        >>> options = HtmlRendererOptions(safelink=True, href_target_blank=True)

    Typographic punctuation with fractions and dashes:
        >>> options = HtmlRendererOptions.common()

    """

    skip_html: bool = field(
        default=False,
        metadata={"help": "Drop raw HTML blocks and spans", "importance": "security"},
    )
    skip_images: bool = field(
        default=False,
        metadata={"help": "Drop images and their alt text", "importance": "core"},
    )
    skip_links: bool = field(
        default=False,
        metadata={"help": "Render links as plain <tt> text instead of anchors", "importance": "core"},
    )
    safelink: bool = field(
        default=False,
        metadata={
            "help": "Only render anchors for safe destinations (http, https, ftp, mailto, relative paths)",
            "importance": "security",
        },
    )
    nofollow_links: bool = field(
        default=False,
        metadata={"help": "Add rel=\"nofollow\" to non-relative links", "importance": "security"},
    )
    noreferrer_links: bool = field(
        default=False,
        metadata={"help": "Add rel=\"noreferrer\" to non-relative links", "importance": "security"},
    )
    href_target_blank: bool = field(
        default=False,
        metadata={"help": "Open non-relative links in a new tab", "importance": "advanced"},
    )
    complete_page: bool = field(
        default=False,
        metadata={"help": "Generate a complete HTML page with head and body", "importance": "core"},
    )
    use_xhtml: bool = field(
        default=False,
        metadata={"help": "Use XHTML self-closing tags and doctype", "importance": "advanced"},
    )
    footnote_return_links: bool = field(
        default=False,
        metadata={"help": "Add links from footnotes back to their references", "importance": "advanced"},
    )
    smartypants: bool = field(
        default=False,
        metadata={"help": "Enable typographic punctuation substitution", "importance": "core"},
    )
    smartypants_fractions: bool = field(
        default=False,
        metadata={"help": "Substitute fractions such as 4/5 (with --smartypants)", "importance": "advanced"},
    )
    smartypants_dashes: bool = field(
        default=False,
        metadata={"help": "Substitute dashes (with --smartypants)", "importance": "advanced"},
    )
    smartypants_latex_dashes: bool = field(
        default=False,
        metadata={"help": "Use LaTeX-style dashes (with --smartypants-dashes)", "importance": "advanced"},
    )
    smartypants_angled_quotes: bool = field(
        default=False,
        metadata={"help": "Use angled double quotes (with --smartypants)", "importance": "advanced"},
    )
    smartypants_quotes_nbsp: bool = field(
        default=False,
        metadata={"help": "Put non-breaking spaces inside angled quotes", "importance": "advanced"},
    )
    toc: bool = field(
        default=False,
        metadata={"help": "Generate a table of contents from headings", "importance": "core"},
    )
    absolute_prefix: str = field(
        default=DEFAULT_ABSOLUTE_PREFIX,
        metadata={"help": "Prefix prepended to relative link and image destinations", "importance": "advanced"},
    )
    footnote_anchor_prefix: str = field(
        default=DEFAULT_FOOTNOTE_ANCHOR_PREFIX,
        metadata={"help": "Prefix for footnote anchor ids", "importance": "advanced"},
    )
    footnote_return_link_contents: str = field(
        default="",
        metadata={
            "help": "Markup of the footnote return link (default: <sup>[return]</sup>)",
            "importance": "advanced",
        },
    )
    heading_id_prefix: str = field(
        default=DEFAULT_HEADING_ID_PREFIX,
        metadata={"help": "Prefix added to heading ids", "importance": "advanced"},
    )
    heading_id_suffix: str = field(
        default=DEFAULT_HEADING_ID_SUFFIX,
        metadata={"help": "Suffix added to heading ids", "importance": "advanced"},
    )
    title: str = field(
        default=DEFAULT_TITLE,
        metadata={"help": "Page title for complete pages", "importance": "core"},
    )
    css: str = field(
        default="",
        metadata={"help": "Stylesheet URL for complete pages", "importance": "core"},
    )
    icon: str = field(
        default="",
        metadata={"help": "Icon URL for complete pages", "importance": "advanced"},
    )
    render_node_hook: Optional[RenderNodeHook] = field(
        default=None,
        metadata={
            "help": "Callable overriding the rendering of individual nodes",
            "importance": "advanced",
            "exclude_from_cli": True,
        },
    )

    def __post_init__(self) -> None:
        """Validate field values.

        Raises
        ------
        ValueError
            If ``render_node_hook`` is set but not callable.

        """
        super().__post_init__()

        if self.render_node_hook is not None and not callable(self.render_node_hook):
            raise ValueError(f"render_node_hook must be callable, got {type(self.render_node_hook).__name__}")

    @classmethod
    def common(cls, **kwargs: object) -> HtmlRendererOptions:
        """Create options with the commonly used punctuation flags.

        Enables smartypants with fractions, dashes and LaTeX dashes. Any
        keyword argument overrides the corresponding field.

        """
        preset: dict[str, object] = {
            "smartypants": True,
            "smartypants_fractions": True,
            "smartypants_dashes": True,
            "smartypants_latex_dashes": True,
        }
        preset.update(kwargs)
        return cls(**preset)  # type: ignore[arg-type]

    @property
    def effective_footnote_return_link_contents(self) -> str:
        """Footnote return link markup with the default applied."""
        return self.footnote_return_link_contents or DEFAULT_FOOTNOTE_RETURN_LINK_CONTENTS
