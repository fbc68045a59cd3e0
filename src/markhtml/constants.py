#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/markhtml/constants.py
"""Constants and default values for the markhtml library.

Constants are organized by category:
1. Link Safety - protocol and path allowlists
2. Raw HTML Tag Grammar - pieces of the tag-matching pattern
3. HTML Renderer Defaults - option defaults and fixed markup
"""

from __future__ import annotations

# =============================================================================
# Link Safety
# =============================================================================

# Lower-case scheme prefixes accepted in safe-link mode; each must be followed
# by an ASCII alphanumeric character.
SAFE_LINK_PREFIXES: tuple[str, ...] = ("http://", "https://", "ftp://", "mailto://")

# Relative path prefixes accepted in safe-link mode; each must either be the
# whole link or be followed by an ASCII alphanumeric character.
SAFE_LINK_PATHS: tuple[str, ...] = ("/", "./", "../")

MAILTO_PREFIX = "mailto:"

# =============================================================================
# Raw HTML Tag Grammar
# =============================================================================

HTML_TAG_NAME = r"[A-Za-z][A-Za-z0-9-]*"
HTML_ATTRIBUTE_NAME = r"[a-zA-Z_:][a-zA-Z0-9:._-]*"
HTML_UNQUOTED_VALUE = r"[^\"'=<>`\x00-\x20]+"
HTML_SINGLE_QUOTED_VALUE = r"'[^']*'"
HTML_DOUBLE_QUOTED_VALUE = r'"[^"]*"'
HTML_ATTRIBUTE_VALUE = f"(?:{HTML_UNQUOTED_VALUE}|{HTML_SINGLE_QUOTED_VALUE}|{HTML_DOUBLE_QUOTED_VALUE})"
HTML_ATTRIBUTE_VALUE_SPEC = rf"(?:\s*=\s*{HTML_ATTRIBUTE_VALUE})"
HTML_ATTRIBUTE = rf"(?:\s+{HTML_ATTRIBUTE_NAME}{HTML_ATTRIBUTE_VALUE_SPEC}?)"
HTML_OPEN_TAG = rf"<{HTML_TAG_NAME}{HTML_ATTRIBUTE}*\s*/?>"
HTML_CLOSE_TAG = rf"</{HTML_TAG_NAME}\s*[>]"
HTML_COMMENT = r"<!---->|<!--(?:-?[^>-])(?:-?[^-])*-->"
HTML_PROCESSING_INSTRUCTION = r"[<][?].*?[?][>]"
HTML_DECLARATION = r"<![A-Z]+\s+[^>]*>"
HTML_CDATA = r"<!\[CDATA\[[\s\S]*?\]\]>"
HTML_TAG = (
    f"(?:{HTML_OPEN_TAG}|{HTML_CLOSE_TAG}|{HTML_COMMENT}|"
    f"{HTML_PROCESSING_INSTRUCTION}|{HTML_DECLARATION}|{HTML_CDATA})"
)

# =============================================================================
# HTML Renderer Defaults
# =============================================================================

DEFAULT_FOOTNOTE_RETURN_LINK_CONTENTS = "<sup>[return]</sup>"
DEFAULT_FOOTNOTE_ANCHOR_PREFIX = ""
DEFAULT_ABSOLUTE_PREFIX = ""
DEFAULT_HEADING_ID_PREFIX = ""
DEFAULT_HEADING_ID_SUFFIX = ""
DEFAULT_TITLE = ""

TOC_ID_TEMPLATE = "toc_{index}"

GENERATOR_NAME = "markhtml HTML renderer for Python"

HTML5_DOCTYPE = "<!DOCTYPE html>\n<html>\n"
XHTML_DOCTYPE = (
    '<!DOCTYPE html PUBLIC "-//W3C//DTD XHTML 1.0 Transitional//EN" '
    '"http://www.w3.org/TR/xhtml1/DTD/xhtml1-transitional.dtd">\n'
    '<html xmlns="http://www.w3.org/1999/xhtml">\n'
)
