import os
import sys
from typing import TextIO

FALLBACK_SIZE = (80, 24)


def get_terminal_size(stream: TextIO | None = None) -> tuple[int, int]:
    """Return (columns, rows) of the terminal behind ``stream`` (stdout by default).

    Falls back to 80x24 when the stream is redirected or reports a zero size.
    """
    stream = stream if stream is not None else sys.stdout
    if not stream.isatty():
        return FALLBACK_SIZE
    try:
        size = os.get_terminal_size(stream.fileno())
    except (OSError, ValueError):
        return FALLBACK_SIZE
    if size.columns <= 0 or size.lines <= 0:
        return FALLBACK_SIZE
    return (size.columns, size.lines)


def canvas_size(columns: int, rows: int) -> tuple[int, int]:
    """Pixel canvas that fills ``rows`` text rows minus one for the prompt.

    Each text row shows two pixel rows.
    """
    return (columns, max(1, rows - 1) * 2)
