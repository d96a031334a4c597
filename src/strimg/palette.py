from dataclasses import dataclass
from typing import NamedTuple, Protocol, runtime_checkable

from strimg.errors import InvalidPalette

ESC = "\033["
RESET = f"{ESC}0m"
DEFAULT_FOREGROUND = f"{ESC}39m"
DEFAULT_BACKGROUND = f"{ESC}49m"
DEFAULT_KEY = "default"


class PaletteEntry(NamedTuple):
    r: int
    g: int
    b: int
    foreground: str
    background: str
    name: str = ""


@dataclass(frozen=True)
class TerminalColourTable:
    """Escape codes keyed by ``rrggbb`` hex, each map carrying a ``default`` entry."""

    reset: str
    foreground: dict[str, str]
    background: dict[str, str]

    def __post_init__(self):
        if DEFAULT_KEY not in self.foreground or DEFAULT_KEY not in self.background:
            raise InvalidPalette("Terminal colour table needs a 'default' foreground and background")


@runtime_checkable
class TerminalColours(Protocol):
    def colours(self) -> list[tuple[int, int, int]]:
        """Representable colours, in palette order."""
        ...

    def terminal(self) -> TerminalColourTable:
        """Escape codes for every representable colour."""
        ...


def colour_key(r: int, g: int, b: int) -> str:
    return f"{r:02x}{g:02x}{b:02x}"


class CustomPalette:
    """A fixed list of palette entries.

    The first entry at a given RGB key wins the table slot, matching the
    quantizer's earliest-index tie break. Defaults fall back to the first
    entry's codes when not given.
    """

    def __init__(
        self,
        entries: list[PaletteEntry],
        reset: str = RESET,
        default_foreground: str | None = None,
        default_background: str | None = None,
    ):
        if not entries:
            raise InvalidPalette("Palette must contain at least one colour")
        self.entries = list(entries)
        self.reset = reset
        self.default_foreground = default_foreground if default_foreground is not None else entries[0].foreground
        self.default_background = default_background if default_background is not None else entries[0].background

    def __len__(self) -> int:
        return len(self.entries)

    def colours(self) -> list[tuple[int, int, int]]:
        return [(e.r, e.g, e.b) for e in self.entries]

    def terminal(self) -> TerminalColourTable:
        foreground = {DEFAULT_KEY: self.default_foreground}
        background = {DEFAULT_KEY: self.default_background}
        for e in self.entries:
            key = colour_key(e.r, e.g, e.b)
            foreground.setdefault(key, e.foreground)
            background.setdefault(key, e.background)
        return TerminalColourTable(reset=self.reset, foreground=foreground, background=background)


# Standard VGA-ish values used by most terminal emulators for the 16 ANSI colours
_ANSI16 = [
    ((0, 0, 0), "black"),
    ((128, 0, 0), "maroon"),
    ((0, 128, 0), "green"),
    ((128, 128, 0), "olive"),
    ((0, 0, 128), "navy"),
    ((128, 0, 128), "purple"),
    ((0, 128, 128), "teal"),
    ((192, 192, 192), "silver"),
    ((128, 128, 128), "gray"),
    ((255, 0, 0), "red"),
    ((0, 255, 0), "lime"),
    ((255, 255, 0), "yellow"),
    ((0, 0, 255), "blue"),
    ((255, 0, 255), "magenta"),
    ((0, 255, 255), "cyan"),
    ((255, 255, 255), "white"),
]

# xterm colour cube channel levels for indices 16-231
_CUBE_LEVELS = (0, 95, 135, 175, 215, 255)


def _ansi16_entries() -> list[PaletteEntry]:
    entries = []
    for i, ((r, g, b), name) in enumerate(_ANSI16):
        # 30-37/40-47 for the normal set, 90-97/100-107 for the bright set
        fg = 30 + i if i < 8 else 90 + i - 8
        entries.append(PaletteEntry(r, g, b, f"{ESC}{fg}m", f"{ESC}{fg + 10}m", name))
    return entries


def _xterm256_entries() -> list[PaletteEntry]:
    rgb = [c for c, _ in _ANSI16]
    rgb += [(r, g, b) for r in _CUBE_LEVELS for g in _CUBE_LEVELS for b in _CUBE_LEVELS]
    rgb += [(v, v, v) for v in range(8, 248, 10)]
    return [
        PaletteEntry(r, g, b, f"{ESC}38;5;{i}m", f"{ESC}48;5;{i}m", f"colour{i}")
        for i, (r, g, b) in enumerate(rgb)
    ]


class Terminal16Colour(CustomPalette):
    def __init__(self):
        super().__init__(
            _ansi16_entries(), default_foreground=DEFAULT_FOREGROUND, default_background=DEFAULT_BACKGROUND
        )


class Terminal256Colour(CustomPalette):
    def __init__(self):
        super().__init__(
            _xterm256_entries(), default_foreground=DEFAULT_FOREGROUND, default_background=DEFAULT_BACKGROUND
        )


FULL_COLOUR = "full"


def palette_for(selector) -> TerminalColours | None:
    """Resolve a palette selector: 16, 256, "full"/None, or a TerminalColours object.

    Returns None for full colour (no quantization).
    """
    if selector is None or selector == FULL_COLOUR:
        return None
    if isinstance(selector, TerminalColours):
        return selector
    if selector in (16, "16"):
        return Terminal16Colour()
    if selector in (256, "256"):
        return Terminal256Colour()
    raise InvalidPalette(f"Unknown palette: {selector!r}")
