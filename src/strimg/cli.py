import argparse
import logging
import sys

from strimg.config import StrimgConfig
from strimg.errors import StrimgError
from strimg.geometry import FIT_MODES, POSITIONS_X, POSITIONS_Y
from strimg.strimg import Strimg
from strimg.terminal import canvas_size, get_terminal_size

COLOUR_CHOICES = ("16", "256", "full")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Render an image as coloured half-block text")
    parser.add_argument("image", help="Path or http(s) URL of the input image")
    parser.add_argument(
        "-W", "--width", type=int, default=None, help="Output width in columns (default: terminal width)"
    )
    parser.add_argument(
        "-H",
        "--height",
        type=int,
        default=None,
        help="Output height in pixels, two per text row (default: fill the terminal)",
    )
    parser.add_argument(
        "-c", "--colours", default="16", choices=COLOUR_CHOICES, help="Palette to quantize to (default: 16)"
    )
    parser.add_argument("-m", "--mode", default="contain", choices=FIT_MODES, help="Fit mode (default: contain)")
    parser.add_argument("-x", "--position-x", default="center", choices=POSITIONS_X, help="Horizontal anchor")
    parser.add_argument("-y", "--position-y", default="center", choices=POSITIONS_Y, help="Vertical anchor")
    parser.add_argument("-v", "--verbose", action="store_true", default=False, help="Log pipeline details to stderr")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(message)s",
        stream=sys.stderr,
    )

    width, height = canvas_size(*get_terminal_size())
    config = StrimgConfig(
        width=args.width if args.width is not None else width,
        height=args.height if args.height is not None else height,
        mode=args.mode,
        position_x=args.position_x,
        position_y=args.position_y,
    )

    try:
        strimg = Strimg(config=config, colours=args.colours)
        print(strimg.load_image(args.image).convert())
    except (StrimgError, OSError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
