class StrimgError(Exception):
    """Base class for failures raised by the conversion pipeline."""


class NoImage(StrimgError):
    """convert() was called before an image was loaded."""


class NoContext(StrimgError):
    """The drawing canvas could not be allocated."""


class InvalidPalette(StrimgError):
    """The palette is empty or could not be resolved."""
