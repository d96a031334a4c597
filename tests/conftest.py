import numpy as np
import pytest


def _make_buffer(rows, alpha=255):
    """Build a read-only RGBA buffer from rows of (r, g, b) tuples."""
    arr = np.array([[(*colour, alpha) for colour in row] for row in rows], dtype=np.uint8)
    arr.flags.writeable = False
    return arr


@pytest.fixture
def make_buffer():
    return _make_buffer
