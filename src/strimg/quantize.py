import logging
from collections.abc import Sequence

import numpy as np

from strimg.colour import Lab, ciede2000, rgb_to_lab
from strimg.errors import InvalidPalette

logger = logging.getLogger(__name__)


def nearest_colour(pixel: Sequence[int], palette: Sequence[Sequence[int]]):
    """Return the palette entry perceptually closest to ``pixel``.

    Entries are anything indexable as (r, g, b, ...). Ties keep the earliest entry.
    """
    if not palette:
        raise InvalidPalette("Palette must contain at least one colour")
    target = rgb_to_lab(pixel[0], pixel[1], pixel[2])
    best = palette[0]
    best_dist = ciede2000(rgb_to_lab(best[0], best[1], best[2]), target)
    for entry in palette[1:]:
        dist = ciede2000(rgb_to_lab(entry[0], entry[1], entry[2]), target)
        if dist < best_dist:
            best_dist = dist
            best = entry
    return best


class PaletteQuantizer:
    """Maps pixels onto a fixed palette using CIEDE2000 distance."""

    def __init__(self, palette: Sequence[Sequence[int]]):
        if not palette:
            raise InvalidPalette("Palette must contain at least one colour")
        self.palette = list(palette)
        self._labs: list[Lab] = [rgb_to_lab(c[0], c[1], c[2]) for c in self.palette]

    def nearest_index(self, r: int, g: int, b: int) -> int:
        target = rgb_to_lab(r, g, b)
        index = 0
        best_dist = ciede2000(self._labs[0], target)
        for i in range(1, len(self._labs)):
            dist = ciede2000(self._labs[i], target)
            if dist < best_dist:
                best_dist = dist
                index = i
        return index

    def nearest(self, r: int, g: int, b: int):
        return self.palette[self.nearest_index(r, g, b)]

    def reduce(self, buffer: np.ndarray) -> np.ndarray:
        """Return a read-only copy of an RGBA buffer with every pixel snapped to the palette."""
        out = buffer.copy()
        # Each distinct colour is searched once per call; nothing is kept between calls
        if out.size:
            rgb = out[..., :3].reshape(-1, 3)
            unique, inverse = np.unique(rgb, axis=0, return_inverse=True)
            mapped = np.array(
                [self.palette[self.nearest_index(*c)][:3] for c in unique.tolist()],
                dtype=np.uint8,
            )
            out[..., :3] = mapped[inverse.reshape(-1)].reshape(out.shape[:2] + (3,))
            logger.debug("Quantized %d distinct colours onto %d palette entries", len(unique), len(self.palette))
        out.flags.writeable = False
        return out
