"""Mapping between screen coordinates and content buffer indices.

A canvas shows a fixed size content buffer through a viewport Area whose size
depends on the terminal. The buffer may be smaller than the viewport, in which
case it is centered with margins around it, or larger, in which case the
viewport sits centered over it and the rest is clipped. Both cases, and the
exact fit, are handled by a single per-axis offset:

    buffer_index = screen_coordinate + offset

The transform is a pure function of the area, the terminal size, and the
buffer size. Compute a new one whenever any of those may have changed,
rather than keeping one around.
"""

from typing import NamedTuple, Optional

from textual.geometry import Offset, Region, Size

from cell_paint.geometry import Area


def halve(n: int) -> int:
    """Divide by two, truncating towards zero (unlike `//`, which floors)."""
    if n < 0:
        return -(-n // 2)
    return n // 2


def axis_offset(buffer_dim: int, viewport_dim: int, viewport_start: int) -> int:
    """Offset from a screen coordinate to a buffer index along one axis."""
    return halve(buffer_dim - viewport_dim) - viewport_start


def axis_content_start(buffer_dim: int, viewport_dim: int, viewport_start: int, offset: int) -> int:
    """Screen coordinate of buffer index 0 along one axis, as drawn."""
    if buffer_dim < viewport_dim:
        # Centered with a margin; the offset is never positive here.
        return abs(offset)
    return viewport_start


class ViewportTransform(NamedTuple):
    """Where a content buffer appears within a viewport, for one terminal size."""

    viewport: Region
    """The absolute screen region of the viewport."""
    buffer_size: Size
    """The dimensions of the content buffer."""
    visible_size: Size
    """How many buffer columns and rows are shown."""
    content_start: Offset
    """Screen position of the first visible cell."""
    offset: Offset
    """Added to a screen coordinate to get a buffer index."""

    @property
    def visible_region(self) -> Region:
        """The screen region covered by buffer cells."""
        return Region.from_offset(self.content_start, self.visible_size)

    def to_buffer_index(self, screen_x: int, screen_y: int) -> Optional[Offset]:
        """Returns the (column, row) of the buffer cell at a screen position, or None if it isn't over the buffer.

        Only meaningful for positions inside the viewport; when the buffer is
        larger than the viewport, positions outside it still map to cells that
        aren't displayed.
        """
        col = screen_x + self.offset.x
        row = screen_y + self.offset.y
        if col < 0 or row < 0 or col >= self.buffer_size.width or row >= self.buffer_size.height:
            return None
        return Offset(col, row)

    def to_screen(self, col: int, row: int) -> Offset:
        """Returns the screen position where a buffer cell is drawn (if it is visible)."""
        return Offset(col - self.offset.x, row - self.offset.y)


def compute_transform(area: Area, terminal_size: Size, buffer_size: Size) -> ViewportTransform:
    """Work out the visible part of a buffer shown through an area of the terminal."""
    viewport = area.region(terminal_size)
    buffer_width, buffer_height = buffer_size
    visible_size = Size(min(buffer_width, viewport.width), min(buffer_height, viewport.height))
    offset = Offset(
        axis_offset(buffer_width, viewport.width, viewport.x),
        axis_offset(buffer_height, viewport.height, viewport.y),
    )
    content_start = Offset(
        axis_content_start(buffer_width, viewport.width, viewport.x, offset.x),
        axis_content_start(buffer_height, viewport.height, viewport.y, offset.y),
    )
    return ViewportTransform(viewport, Size(buffer_width, buffer_height), visible_size, content_start, offset)
