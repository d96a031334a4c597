import dataclasses
import logging
from collections.abc import Callable
from pathlib import Path
from typing import BinaryIO

import numpy as np
from PIL import Image

from strimg.config import StrimgConfig
from strimg.encoder import encode_palette, encode_truecolour
from strimg.errors import NoContext, NoImage
from strimg.geometry import fit_rect
from strimg.palette import TerminalColours, palette_for
from strimg.quantize import PaletteQuantizer
from strimg.raster import draw_to_canvas, open_image

logger = logging.getLogger(__name__)

ImageDataConverter = Callable[[np.ndarray], str]
ColourReducer = Callable[[np.ndarray], np.ndarray]


class Strimg:
    """Fits an image into a character grid and renders it with half-block glyphs.

    Each text row holds two pixel rows, so ``height`` is in pixels (twice the
    number of output lines).
    """

    def __init__(
        self,
        width: int | None = None,
        height: int | None = None,
        config: StrimgConfig | None = None,
        colours=16,
    ):
        self.config = dataclasses.replace(config) if config is not None else StrimgConfig()
        self.config.validate()
        self.image: Image.Image | None = None
        self.set_terminal_colour(colours)
        if width and height:
            self.resize(width, height)

    def load_image(self, source: Image.Image | str | Path | BinaryIO) -> "Strimg":
        self.image = open_image(source)
        return self

    def resize(self, width: int, height: int) -> None:
        """Set the target size; non-positive values leave that dimension unchanged."""
        if width > 0:
            self.config.width = width
        if height > 0:
            self.config.height = height

    def set_fit(self, mode: str | None = None, position_x: str | None = None, position_y: str | None = None) -> None:
        config = StrimgConfig(
            width=self.config.width,
            height=self.config.height,
            mode=mode if mode is not None else self.config.mode,
            position_x=position_x if position_x is not None else self.config.position_x,
            position_y=position_y if position_y is not None else self.config.position_y,
        )
        config.validate()
        self.config = config

    def set_terminal_colour(self, colours) -> None:
        """Select 16, 256, "full"/None (no quantization) or a custom TerminalColours."""
        self.colours: TerminalColours | None = palette_for(colours)
        if self.colours is None:
            self._quantizer = None
            self._table = None
        else:
            self._quantizer = PaletteQuantizer(self.colours.colours())
            self._table = self.colours.terminal()
        logger.debug("Palette set to %s", type(self.colours).__name__ if self.colours else "full colour")

    def convert(self, converter: ImageDataConverter | None = None, reducer: ColourReducer | None = None) -> str:
        buffer = self.resize_image()
        image = reducer(buffer) if reducer is not None else self.image_to_colours(buffer)
        result = converter(image) if converter is not None else self.image_to_string(image)
        logger.debug("Converted image to %d text rows", (buffer.shape[0] + 1) // 2)
        return result

    def resize_image(self) -> np.ndarray:
        """Draw the loaded image into a canvas of the target size and return its pixels."""
        if self.image is None:
            raise NoImage("No image loaded")
        if not self.config.has_size:
            raise NoContext(f"Target size is not set ({self.config.width}x{self.config.height})")
        rect = fit_rect(
            self.image.width,
            self.image.height,
            self.config.width,
            self.config.height,
            mode=self.config.mode,
            position_x=self.config.position_x,
            position_y=self.config.position_y,
        )
        logger.debug("Fitting %dx%d image into %s", self.image.width, self.image.height, rect)
        return draw_to_canvas(self.image, self.config.width, self.config.height, rect)

    def image_to_colours(self, buffer: np.ndarray) -> np.ndarray:
        if self._quantizer is None:
            return buffer
        return self._quantizer.reduce(buffer)

    def image_to_string(self, buffer: np.ndarray) -> str:
        if self._table is None:
            return encode_truecolour(buffer)
        return encode_palette(buffer, self._table)


def image_to_terminal(
    image: Image.Image | str | Path | BinaryIO,
    width: int,
    height: int,
    colours=16,
    mode: str = "contain",
    position_x: str = "center",
    position_y: str = "center",
) -> str:
    """Render an image to a terminal string in one call."""
    config = StrimgConfig(width=width, height=height, mode=mode, position_x=position_x, position_y=position_y)
    return Strimg(config=config, colours=colours).load_image(image).convert()
