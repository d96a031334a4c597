import numpy as np

from strimg.palette import DEFAULT_BACKGROUND, DEFAULT_KEY, RESET, TerminalColourTable, colour_key

HALF_BLOCK = "▀"


def _encode_rows(buffer: np.ndarray, front, back, default_back: str, reset: str, newline: str) -> str:
    """Walk row pairs emitting codes only when they change within a line.

    ``front``/``back`` map an (r, g, b) triple to an escape code; the top row
    of each pair is the glyph's foreground, the bottom row its background.
    """
    rows = buffer[..., :3].tolist()
    lines = []
    for y in range(0, len(rows), 2):
        top = rows[y]
        bottom = rows[y + 1] if y + 1 < len(rows) else None
        prev_front = ""
        prev_back = ""
        parts = []
        for x, colour in enumerate(top):
            fg = front(colour)
            bg = back(bottom[x]) if bottom is not None else default_back
            if bg != prev_back:
                prev_back = bg
                parts.append(bg)
            if fg != prev_front:
                prev_front = fg
                parts.append(fg)
            parts.append(HALF_BLOCK)
        parts.append(reset)
        lines.append("".join(parts))
    return newline.join(lines)


def encode_palette(buffer: np.ndarray, table: TerminalColourTable, newline: str = "\n") -> str:
    """Encode an RGBA buffer using a palette's escape code table.

    Colours missing from the table use its ``default`` codes.
    """
    if buffer.size == 0:
        return ""
    fg_table = table.foreground
    bg_table = table.background
    fg_default = fg_table[DEFAULT_KEY]
    bg_default = bg_table[DEFAULT_KEY]

    def front(c):
        return fg_table.get(colour_key(*c), fg_default)

    def back(c):
        return bg_table.get(colour_key(*c), bg_default)

    return _encode_rows(buffer, front, back, bg_default, table.reset, newline)


def encode_truecolour(buffer: np.ndarray, newline: str = "\n") -> str:
    """Encode an RGBA buffer as 24-bit SGR sequences."""
    if buffer.size == 0:
        return ""

    def front(c):
        return f"\033[38;2;{c[0]};{c[1]};{c[2]}m"

    def back(c):
        return f"\033[48;2;{c[0]};{c[1]};{c[2]}m"

    return _encode_rows(buffer, front, back, DEFAULT_BACKGROUND, RESET, newline)
