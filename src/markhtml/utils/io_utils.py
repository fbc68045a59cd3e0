#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/markhtml/utils/io_utils.py
"""I/O utilities for writing rendered output.

Rendered HTML is text; it is encoded as UTF-8 when the destination is a
binary stream or a file path.

"""

from __future__ import annotations

import io
from io import BytesIO, StringIO
from pathlib import Path
from typing import IO, Union, cast

from markhtml.exceptions import OutputWriteError


def _is_binary_stream(output: object) -> bool:
    if isinstance(output, BytesIO):
        return True
    if isinstance(output, StringIO):
        return False
    if isinstance(output, io.TextIOBase):
        return False
    if isinstance(output, (io.BufferedIOBase, io.RawIOBase)):
        return True
    mode = getattr(output, "mode", "")
    return isinstance(mode, str) and "b" in mode


def write_content(content: str, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
    """Write rendered text to a path or file-like object.

    Parameters
    ----------
    content : str
        Rendered text
    output : str, Path, IO[bytes] or IO[str]
        Destination. Paths are written as UTF-8; binary streams receive
        UTF-8 bytes; text streams receive the string unchanged.

    Raises
    ------
    OutputWriteError
        If a file path cannot be written
    TypeError
        If ``output`` is neither a path nor writable

    Examples
    --------
        >>> buffer = BytesIO()
        >>> write_content("<p>hi</p>\\n", buffer)
        >>> buffer.getvalue()
        b'<p>hi</p>\\n'

    """
    if isinstance(output, (str, Path)):
        output_path = Path(output)
        try:
            output_path.write_text(content, encoding="utf-8")
        except OSError as e:
            raise OutputWriteError(
                f"Failed to write output to {output_path}: {e}", output_path=str(output_path), original_error=e
            ) from e
        return

    if hasattr(output, "write"):
        if _is_binary_stream(output):
            cast(IO[bytes], output).write(content.encode("utf-8"))
        else:
            cast(IO[str], output).write(content)
        return

    raise TypeError(f"Unsupported output type: {type(output)}")


__all__ = ["write_content"]
