"""A plain block of color, for checking how Areas resolve as the terminal is resized."""

from textual.geometry import Size

from cell_paint.content_buffer import Cell
from cell_paint.geometry import Area, Corner, Point
from cell_paint.surface import RenderSurface


class Solid:
    """An area filled with full block characters of one color."""

    def __init__(self, area: Area, color: str) -> None:
        self.area = area
        self.cell = Cell.from_color("█", color)

    def draw(self, surface: RenderSurface, terminal_size: Size) -> None:
        """Fill the area. Degenerate areas have no size, so nothing is drawn."""
        x, y = self.area.start_position(terminal_size)
        width, height = self.area.size(terminal_size)
        surface.fill(x, y, width, height, self.cell)


def corner_markers(size: int = 2) -> list[Solid]:
    """Returns a small square anchored to each corner of the terminal."""
    far = size - 1
    colors = {
        Corner.top_left: "red",
        Corner.top_right: "green",
        Corner.bottom_left: "blue",
        Corner.bottom_right: "yellow",
    }
    return [
        Solid(Area(*_ordered(Point(0, 0, corner), Point(far, far, corner))), color)
        for corner, color in colors.items()
    ]


def _ordered(a: Point, b: Point) -> tuple[Point, Point]:
    """Order two points of the same corner so the pair forms a non-degenerate Area.

    Offsets grow inwards from the corner, so for right and bottom anchors
    the point with the larger offset is the one nearer the top left.
    """
    corner = a.corner
    start_x, end_x = (a.x, b.x) if corner in (Corner.top_left, Corner.bottom_left) else (b.x, a.x)
    start_y, end_y = (a.y, b.y) if corner in (Corner.top_left, Corner.top_right) else (b.y, a.y)
    return Point(start_x, start_y, corner), Point(end_x, end_y, corner)
