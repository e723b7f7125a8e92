"""The canvas: a bordered view of the content buffer, and the painting tools acting on it."""

from typing import Iterable, Optional

from rich.style import Style
from textual import log
from textual.geometry import Offset, Size

from cell_paint.content_buffer import BLANK, Cell, ContentBuffer
from cell_paint.geometry import Area
from cell_paint.graphics_primitives import bresenham_walk, flood_fill
from cell_paint.surface import RenderSurface
from cell_paint.tool import Tool
from cell_paint.viewport import ViewportTransform, compute_transform

BUFFER_OUTLINE_STYLE = Style(dim=True)


class Canvas:
    """Displays a ContentBuffer inside a border, and handles pointer input over it.

    `frame` is where the border is drawn; `viewport` is the area inside it
    through which the buffer is seen. The buffer's size is fixed, independent of
    both, which is why every operation here works through a ViewportTransform,
    computed fresh for the current terminal size.
    """

    def __init__(self, frame: Area, viewport: Area, buffer: ContentBuffer) -> None:
        self.frame = frame
        self.viewport = viewport
        self.buffer = buffer
        self.stroke_previous: Optional[Offset] = None
        """Last screen position of the stroke in progress, if dragging."""

    def transform(self, terminal_size: Size) -> ViewportTransform:
        """Computes where the buffer is shown for the given terminal size."""
        return compute_transform(self.viewport, terminal_size, self.buffer.size)

    def draw(self, surface: RenderSurface, terminal_size: Size) -> None:
        """Draw the border and the visible part of the buffer."""
        if not self.frame.is_degenerate(terminal_size):
            x, y = self.frame.start_position(terminal_size)
            width, height = self.frame.size(terminal_size)
            surface.draw_box(x, y, width, height)
        transform = self.transform(terminal_size)
        self.draw_margin_outline(surface, transform)
        self.draw_content(surface, transform)

    def draw_margin_outline(self, surface: RenderSurface, transform: ViewportTransform) -> None:
        """Outline the edges of a buffer that is smaller than the viewport, where there's room in the margin."""
        visible = transform.visible_region
        viewport = transform.viewport
        if visible.area == 0:
            return
        outline = visible.grow((1, 1, 1, 1))
        if viewport.contains_region(outline):
            surface.draw_dashed_box(outline.x, outline.y, outline.width, outline.height, BUFFER_OUTLINE_STYLE)

    def draw_content(self, surface: RenderSurface, transform: ViewportTransform) -> None:
        """Draw the visible cells of the buffer, row by row."""
        start = transform.content_start
        width, height = transform.visible_size
        first_col, first_row = start.x + transform.offset.x, start.y + transform.offset.y
        for i in range(height):
            surface.move_to(start.x, start.y + i)
            for cell in self.buffer.row_slice(first_row + i, first_col, width):
                surface.write_at_cursor(cell)

    def pointer_down(self, surface: RenderSurface, tool: Tool, brush: Cell, x: int, y: int, terminal_size: Size) -> None:
        """Start applying a tool at a screen position. Tools that don't paint do nothing."""
        if not tool.paints:
            return
        self.stroke_previous = Offset(x, y)
        if tool == Tool.bucket:
            self.fill(surface, brush, x, y, terminal_size)
        else:
            self.stroke(surface, tool, brush, [(x, y)], terminal_size)

    def pointer_drag(self, surface: RenderSurface, tool: Tool, brush: Cell, x: int, y: int, terminal_size: Size) -> None:
        """Continue a stroke to a screen position, painting along the way."""
        if self.stroke_previous is None or tool == Tool.bucket:
            return
        previous, self.stroke_previous = self.stroke_previous, Offset(x, y)
        self.stroke(surface, tool, brush, bresenham_walk(previous.x, previous.y, x, y), terminal_size)

    def pointer_up(self) -> None:
        """End the stroke in progress."""
        self.stroke_previous = None

    def stroke(self, surface: RenderSurface, tool: Tool, brush: Cell, points: Iterable[tuple[int, int]], terminal_size: Size) -> None:
        """Paint or erase each screen position that lands on the buffer."""
        if tool == Tool.brush:
            cell = brush
        elif tool == Tool.erase:
            cell = BLANK
        else:
            return
        transform = self.transform(terminal_size)
        for x, y in points:
            # The buffer can extend past the viewport, so screen positions
            # outside it must be excluded before mapping.
            if not transform.viewport.contains(x, y):
                continue
            index = transform.to_buffer_index(x, y)
            if index is None:
                continue
            self.buffer.paint(index.x, index.y, cell)
            surface.move_and_write(x, y, cell)
        surface.flush()

    def fill(self, surface: RenderSurface, brush: Cell, x: int, y: int, terminal_size: Size) -> None:
        """Flood fill from the cell under a screen position."""
        transform = self.transform(terminal_size)
        if not transform.viewport.contains(x, y):
            return
        index = transform.to_buffer_index(x, y)
        if index is None:
            return
        region = flood_fill(self.buffer, index.x, index.y, brush)
        log.debug(f"Filled {region} from {index}")
        self.draw_content(surface, transform)
        surface.flush()
