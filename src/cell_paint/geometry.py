"""Corner-relative points and rectangular areas of the terminal screen."""

from enum import Enum
from typing import NamedTuple

from textual.geometry import Offset, Region, Size


def diff_or_zero(a: int, b: int) -> int:
    """Subtract b from a, returning 0 instead of going negative."""
    if a > b:
        return a - b
    return 0


class Corner(Enum):
    """The screen corner that a Point is measured from."""
    top_left = 1
    top_right = 2
    bottom_left = 3
    bottom_right = 4


class Point(NamedTuple):
    """A position relative to one of the four corners of the terminal.

    Offsets grow inwards from the corner, so `Point(2, 0, Corner.top_right)`
    is the third column from the right edge, on the top row.
    """

    x: int
    y: int
    corner: Corner = Corner.top_left

    def resolve(self, terminal_size: Size) -> Offset:
        """Returns the absolute position of the point, where (0, 0) is the top left of the terminal.

        Always on screen: an offset larger than the terminal clamps to the far edge.
        """
        width, height = terminal_size
        if width == 0 or height == 0:
            return Offset(0, 0)
        right = width - 1
        bottom = height - 1
        if self.corner == Corner.top_left:
            return Offset(min(self.x, right), min(self.y, bottom))
        if self.corner == Corner.top_right:
            return Offset(diff_or_zero(right, self.x), min(self.y, bottom))
        if self.corner == Corner.bottom_left:
            return Offset(min(self.x, right), diff_or_zero(bottom, self.y))
        return Offset(diff_or_zero(right, self.x), diff_or_zero(bottom, self.y))


class Area(NamedTuple):
    """A rectangle between two Points, both inclusive.

    The rectangle only has a concrete position and size for a given terminal size.
    If the start resolves below or to the right of the end, the area is degenerate:
    it has no size and contains nothing.
    """

    start: Point
    end: Point

    def resolve(self, terminal_size: Size) -> tuple[Offset, Offset]:
        """Returns the absolute start and end positions."""
        return self.start.resolve(terminal_size), self.end.resolve(terminal_size)

    def is_degenerate(self, terminal_size: Size) -> bool:
        """Whether the start lies beyond the end on either axis.

        Every area is degenerate on a terminal with no width or no height.
        """
        if terminal_size.width == 0 or terminal_size.height == 0:
            return True
        start, end = self.resolve(terminal_size)
        return start.x > end.x or start.y > end.y

    def start_position(self, terminal_size: Size) -> Offset:
        """Returns the absolute position of the top left cell."""
        return self.start.resolve(terminal_size)

    def size(self, terminal_size: Size) -> Size:
        """Returns the width and height of the area, or (0, 0) if degenerate."""
        if self.is_degenerate(terminal_size):
            return Size(0, 0)
        start, end = self.resolve(terminal_size)
        return Size(end.x - start.x + 1, end.y - start.y + 1)

    def contains(self, x: int, y: int, terminal_size: Size) -> bool:
        """Whether the absolute position (x, y) lies within the area."""
        if self.is_degenerate(terminal_size):
            return False
        start, end = self.resolve(terminal_size)
        return start.x <= x <= end.x and start.y <= y <= end.y

    def region(self, terminal_size: Size) -> Region:
        """Returns the area as a Textual Region. Degenerate areas give an empty region."""
        return Region.from_offset(self.start_position(terminal_size), self.size(terminal_size))
