import math
from dataclasses import dataclass

FIT_MODES = ("contain", "cover")
POSITIONS_X = ("left", "center", "right")
POSITIONS_Y = ("top", "center", "bottom")


@dataclass(frozen=True)
class Rect:
    x: int
    y: int
    width: int
    height: int


def _contain(source_width: int, source_height: int, canvas_width: int, canvas_height: int) -> tuple[int, int]:
    scale = canvas_width / source_width
    if source_height * scale <= canvas_height:
        return canvas_width, math.floor(source_height * scale)
    return math.floor(source_width * canvas_height / source_height), canvas_height


def _cover(source_width: int, source_height: int, canvas_width: int, canvas_height: int) -> tuple[int, int]:
    # Same branches as contain with the comparison inverted; the overflowing axis is clipped by the canvas.
    scale = canvas_width / source_width
    if canvas_height <= source_height * scale:
        return canvas_width, math.floor(source_height * scale)
    return math.floor(source_width * canvas_height / source_height), canvas_height


def _offset(position: str, far: str, canvas: int, size: int) -> int:
    if position == far:
        return canvas - size
    if position == "center":
        return math.floor((canvas - size) / 2)
    return 0


def fit_rect(
    source_width: int,
    source_height: int,
    canvas_width: int,
    canvas_height: int,
    mode: str = "contain",
    position_x: str = "center",
    position_y: str = "center",
) -> Rect:
    """Compute where a source image lands when drawn into a fixed-size canvas.

    ``contain`` keeps the whole image inside the canvas, ``cover`` lets it overflow
    on one axis. Anchors other than right/bottom/center place the rect at 0.
    """
    if source_width <= 0 or source_height <= 0:
        raise ValueError(f"Source size must be positive, got {source_width}x{source_height}")
    if canvas_width <= 0 or canvas_height <= 0:
        raise ValueError(f"Canvas size must be positive, got {canvas_width}x{canvas_height}")

    fit = _cover if mode == "cover" else _contain
    width, height = fit(source_width, source_height, canvas_width, canvas_height)
    x = _offset(position_x, "right", canvas_width, width)
    y = _offset(position_y, "bottom", canvas_height, height)
    return Rect(x=x, y=y, width=width, height=height)
