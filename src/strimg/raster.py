import io
import logging
import urllib.request
from pathlib import Path
from typing import BinaryIO

import numpy as np
from PIL import Image

from strimg.errors import NoContext
from strimg.geometry import Rect

logger = logging.getLogger(__name__)

URL_SCHEMES = ("http://", "https://")


def open_image(source: Image.Image | str | Path | BinaryIO, timeout: float = 30) -> Image.Image:
    """Decode an image from a path, URL, binary file or existing PIL image.

    Decoder and network errors propagate unchanged.
    """
    if isinstance(source, Image.Image):
        return source
    if isinstance(source, str) and source.startswith(URL_SCHEMES):
        req = urllib.request.Request(source)
        with urllib.request.urlopen(req, timeout=timeout) as resp:
            data = resp.read()
        image = Image.open(io.BytesIO(data))
    else:
        image = Image.open(source)
    image.load()
    logger.debug("Loaded %s image %dx%d", image.mode, image.width, image.height)
    return image


def draw_to_canvas(image: Image.Image, width: int, height: int, rect: Rect) -> np.ndarray:
    """Draw ``image`` scaled into ``rect`` on a transparent canvas and read it back.

    Returns a read-only uint8 array of shape (height, width, 4). Parts of the
    rect outside the canvas are clipped.
    """
    if width <= 0 or height <= 0:
        raise NoContext(f"Cannot allocate a {width}x{height} canvas")
    try:
        canvas = Image.new("RGBA", (width, height), (0, 0, 0, 0))
    except (ValueError, MemoryError) as e:
        raise NoContext(f"Cannot allocate a {width}x{height} canvas") from e

    if rect.width > 0 and rect.height > 0:
        scaled = image.convert("RGBA").resize((rect.width, rect.height), Image.LANCZOS)
        # Canvas is fully transparent; pixels are copied as-is, alpha included
        canvas.paste(scaled, (rect.x, rect.y))

    buffer = np.array(canvas, dtype=np.uint8)
    buffer.flags.writeable = False
    return buffer
