#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/markhtml/renderers/base.py
"""Base classes for AST renderers.

This module defines the abstract base class renderers inherit from. It keeps
the output plumbing (strings, bytes, paths and streams) in one place so a
concrete renderer only has to produce a string.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import IO, Union

from markhtml.ast.nodes import Document
from markhtml.exceptions import InvalidOptionsError
from markhtml.options.base import BaseRendererOptions
from markhtml.utils.io_utils import write_content


class BaseRenderer(ABC):
    """Abstract base class for AST renderers.

    Parameters
    ----------
    options : BaseRendererOptions or None, default = None
        Format-specific rendering options

    Examples
    --------
    Creating a custom renderer:

        >>> from markhtml.renderers.base import BaseRenderer
        >>>
        >>> class PlainRenderer(BaseRenderer):
        ...     def render_to_string(self, doc):
        ...         return "rendered output"

    """

    def __init__(self, options: BaseRendererOptions | None = None):
        """Initialize the renderer with optional configuration."""
        self.options = options

    @abstractmethod
    def render_to_string(self, doc: Document) -> str:
        """Render the AST to a string.

        Parameters
        ----------
        doc : Document
            AST Document node to render

        Returns
        -------
        str
            Rendered document

        """

    def render(self, doc: Document, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
        """Render the AST and write it to ``output``.

        Parameters
        ----------
        doc : Document
            AST Document node to render
        output : str, Path, IO[bytes] or IO[str]
            Output destination. Paths and binary streams receive UTF-8.

        Raises
        ------
        RenderingError
            If rendering fails
        OutputWriteError
            If the output path cannot be written

        """
        self.write_text_output(self.render_to_string(doc), output)

    def render_to_bytes(self, doc: Document) -> bytes:
        """Render the AST to UTF-8 encoded bytes."""
        return self.render_to_string(doc).encode("utf-8")

    @staticmethod
    def _validate_options_type(options: BaseRendererOptions | None, expected_type: type, renderer_name: str) -> None:
        """Validate that options are of the correct type for this renderer.

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                renderer_name=renderer_name,
                expected_type=expected_type,
                received_type=type(options),
            )

    @staticmethod
    def write_text_output(text: str, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
        """Write text output to a file path or IO stream.

        Examples
        --------
        Write to StringIO:
            >>> from io import StringIO
            >>> buffer = StringIO()
            >>> BaseRenderer.write_text_output("<p>Hello</p>", buffer)
            >>> print(buffer.getvalue())
            <p>Hello</p>

        """
        write_content(text, output)


__all__ = ["BaseRenderer"]
