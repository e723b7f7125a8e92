"""Provides the Cell and ContentBuffer classes."""

from typing import NamedTuple

from rich.segment import Segment
from rich.style import Style
from textual.geometry import Size


class Cell(NamedTuple):
    """A character with a style, occupying one cell of the terminal."""

    ch: str = " "
    style: Style = Style()

    @classmethod
    def from_color(cls, ch: str, color: str) -> "Cell":
        """Create a cell with a foreground color, given by name or hex code."""
        return cls(ch, Style(color=color))

    def as_segment(self, attribute: Style | None = None) -> Segment:
        """Returns a Segment for rendering, with the cell's style layered over the attribute."""
        if attribute:
            return Segment(self.ch, attribute + self.style)
        return Segment(self.ch, self.style)


BLANK = Cell()
"""The empty cell that a buffer starts out filled with, and which the eraser paints."""


class ContentBuffer:
    """A fixed size grid of cells. This is the drawing."""

    def __init__(self, width: int, height: int) -> None:
        """Initialize the buffer with blank cells."""
        if width < 0 or height < 0:
            raise ValueError(f"Buffer dimensions can't be negative: {width}x{height}")
        self.width = width
        self.height = height
        self.cells = [[BLANK for _ in range(width)] for _ in range(height)]

    @property
    def size(self) -> Size:
        """The width and height of the buffer."""
        return Size(self.width, self.height)

    def in_bounds(self, col: int, row: int) -> bool:
        """Whether the given column and row address a cell of the buffer."""
        return 0 <= col < self.width and 0 <= row < self.height

    def _check_bounds(self, col: int, row: int) -> None:
        # Negative indices would otherwise wrap around to the other side.
        if not self.in_bounds(col, row):
            raise IndexError(f"Cell ({col}, {row}) is outside the {self.width}x{self.height} buffer")

    def get(self, col: int, row: int) -> Cell:
        """Returns the cell at the given column and row."""
        self._check_bounds(col, row)
        return self.cells[row][col]

    def paint(self, col: int, row: int, cell: Cell) -> None:
        """Set the cell at the given column and row.

        The caller is responsible for mapping coordinates into the buffer;
        an index outside of it is a bug, and raises IndexError.
        """
        self._check_bounds(col, row)
        self.cells[row][col] = cell

    def erase(self, col: int, row: int) -> None:
        """Reset the cell at the given column and row to a blank cell."""
        self.paint(col, row, BLANK)

    def row_slice(self, row: int, start_col: int, width: int) -> list[Cell]:
        """Returns up to `width` cells of a row, starting from `start_col`."""
        if not 0 <= row < self.height:
            raise IndexError(f"Row {row} is outside the {self.width}x{self.height} buffer")
        return self.cells[row][max(0, start_col):max(0, start_col + width)]

    def get_text(self) -> str:
        """Returns the characters of the buffer, one line per row, without styles."""
        return "\n".join("".join(cell.ch for cell in row) for row in self.cells)
