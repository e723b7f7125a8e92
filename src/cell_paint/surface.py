"""An in-memory terminal frame that components draw to with cursor commands."""

from typing import Callable, Optional

from rich.segment import Segment
from rich.style import Style
from textual.geometry import Region, Size

from cell_paint.content_buffer import BLANK, Cell

# (top left, horizontal, top right, vertical, bottom left, bottom right)
BOX_GLYPHS = ("┌", "─", "┐", "│", "└", "┘")
DASHED_BOX_GLYPHS = ("┌", "┄", "┐", "┆", "└", "┘")
ASCII_BOX_GLYPHS = ("+", "-", "+", "|", "+", "+")
ASCII_DASHED_BOX_GLYPHS = ("+", ".", "+", ":", "+", "+")


class RenderSurface:
    """A screen-sized grid of segments, with a cursor and a current attribute.

    All drawing to the terminal goes through here. Nothing is shown until `flush()`,
    which reports the region that changed since the last flush, so that each batch of
    drawing appears at once.

    Like a real terminal, writes that fall outside the frame are dropped.
    """

    def __init__(
        self,
        size: Size = Size(0, 0),
        ascii_only: bool = False,
        on_flush: Optional[Callable[[Region], None]] = None,
    ) -> None:
        """Initialize a blank frame."""
        self.ascii_only = ascii_only
        self.on_flush = on_flush
        self.size = Size(0, 0)
        self.lines: list[list[Segment]] = []
        self.cursor_x = 0
        self.cursor_y = 0
        self.attribute = Style()
        self.dirty: Optional[Region] = None
        self.resize(size)

    def resize(self, size: Size) -> None:
        """Reallocate the frame for a new terminal size. The frame is left blank."""
        self.size = Size(*size)
        self.lines = [[BLANK.as_segment() for _ in range(self.size.width)] for _ in range(self.size.height)]
        self.cursor_x = 0
        self.cursor_y = 0
        self._mark_dirty(self.size.region)

    def _mark_dirty(self, region: Region) -> None:
        region = region.intersection(self.size.region)
        if region.area == 0:
            return
        self.dirty = region if self.dirty is None else self.dirty.union(region)

    def move_to(self, x: int, y: int) -> None:
        """Move the cursor."""
        self.cursor_x = x
        self.cursor_y = y

    def write_at_cursor(self, cell: Cell) -> None:
        """Write a cell at the cursor and advance the cursor to the right."""
        x, y = self.cursor_x, self.cursor_y
        if 0 <= x < self.size.width and 0 <= y < self.size.height:
            self.lines[y][x] = cell.as_segment(self.attribute)
            self._mark_dirty(Region(x, y, 1, 1))
        self.cursor_x += 1

    def move_and_write(self, x: int, y: int, cell: Cell) -> None:
        """Write a cell at the given position."""
        self.move_to(x, y)
        self.write_at_cursor(cell)

    def write_text(self, x: int, y: int, text: str, style: Optional[Style] = None) -> None:
        """Write a string starting at the given position, one cell per character."""
        self.move_to(x, y)
        for ch in text:
            self.write_at_cursor(Cell(ch, style or Style()))

    def fill(self, x: int, y: int, width: int, height: int, cell: Cell) -> None:
        """Fill a rectangle with copies of a cell."""
        for i in range(height):
            self.move_to(x, y + i)
            for _ in range(width):
                self.write_at_cursor(cell)

    def draw_box(self, x: int, y: int, width: int, height: int, style: Optional[Style] = None) -> None:
        """Draw the outline of a box. Boxes smaller than 2x2 can't be drawn, and are skipped."""
        self._draw_box(x, y, width, height, ASCII_BOX_GLYPHS if self.ascii_only else BOX_GLYPHS, style)

    def draw_dashed_box(self, x: int, y: int, width: int, height: int, style: Optional[Style] = None) -> None:
        """Draw the outline of a box with dashed lines."""
        self._draw_box(x, y, width, height, ASCII_DASHED_BOX_GLYPHS if self.ascii_only else DASHED_BOX_GLYPHS, style)

    def _draw_box(self, x: int, y: int, width: int, height: int, glyphs: tuple[str, ...], style: Optional[Style]) -> None:
        if width < 2 or height < 2:
            return
        top_left, horizontal, top_right, vertical, bottom_left, bottom_right = glyphs
        self.write_text(x, y, top_left + horizontal * (width - 2) + top_right, style)
        for i in range(1, height - 1):
            self.write_text(x, y + i, vertical, style)
            self.write_text(x + width - 1, y + i, vertical, style)
        self.write_text(x, y + height - 1, bottom_left + horizontal * (width - 2) + bottom_right, style)

    def set_attribute(self, attribute: Style) -> None:
        """Set a style to apply under everything written until it's reset."""
        self.attribute = attribute

    def reset_attribute(self) -> None:
        """Stop applying the current attribute."""
        self.attribute = Style()

    def clear(self) -> None:
        """Blank the whole frame."""
        blank = BLANK.as_segment()
        for line in self.lines:
            line[:] = [blank] * len(line)
        self._mark_dirty(self.size.region)

    def flush(self) -> None:
        """Publish everything drawn since the last flush."""
        if self.dirty is None:
            return
        dirty, self.dirty = self.dirty, None
        if self.on_flush is not None:
            self.on_flush(dirty)

    def get_text(self) -> str:
        """Returns the characters of the frame, one line per row, without styles. Useful for tests."""
        return "\n".join("".join(segment.text for segment in line) for line in self.lines)
