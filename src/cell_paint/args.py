"""Command line arguments for the app."""

import argparse
import re

from rich.color import Color, ColorParseError
from textual.geometry import Size

from cell_paint.__init__ import PYTEST, __version__


def canvas_size(value: str) -> Size:
    """Parse a WIDTHxHEIGHT argument."""
    match = re.fullmatch(r"(\d+)[xX](\d+)", value)
    if match is None:
        raise argparse.ArgumentTypeError(f"expected WIDTHxHEIGHT, got {value!r}")
    width, height = int(match.group(1)), int(match.group(2))
    if width < 1 or height < 1:
        raise argparse.ArgumentTypeError("canvas dimensions must be at least 1")
    return Size(width, height)


def single_char(value: str) -> str:
    """Require exactly one character."""
    if len(value) != 1:
        raise argparse.ArgumentTypeError(f"expected a single character, got {value!r}")
    return value


def color(value: str) -> str:
    """Validate a color name or hex code that Rich understands."""
    try:
        Color.parse(value)
    except ColorParseError as e:
        raise argparse.ArgumentTypeError(str(e)) from e
    return value


parser = argparse.ArgumentParser(description='Paint character cells in the terminal.', prog="cell-paint")
parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
parser.add_argument('--canvas-size', type=canvas_size, default=Size(64, 20), metavar="WIDTHxHEIGHT", help='Size of the drawing, in cells. It does not change with the terminal size.')
parser.add_argument('--brush-char', type=single_char, default="X", metavar="CHAR", help='Character painted by the Brush and Bucket tools')
parser.add_argument('--brush-color', type=color, default="cyan", metavar="COLOR", help='Color of the brush character, e.g. "red" or "#ff8800"')
parser.add_argument('--ascii-only', action='store_true', help='Use only ASCII characters for borders and tool icons, for use in older terminals')

dev_options = parser.add_argument_group('development options')
dev_options.add_argument('--show-anchors', action='store_true', help='Draw a marker anchored to each corner of the terminal')
dev_options.add_argument('--clear-screen', action='store_true', help='Clear the screen before starting, to avoid seeing outdated errors')

args = parser.parse_args([]) if PYTEST else parser.parse_args()
"""Parsed command line arguments."""

__all__ = ["args"]
