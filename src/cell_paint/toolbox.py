"""The tool panel, a column of tool buttons at the side of the screen."""

from rich.style import Style
from textual import log
from textual.geometry import Size

from cell_paint.content_buffer import Cell
from cell_paint.geometry import Area, diff_or_zero
from cell_paint.surface import RenderSurface
from cell_paint.tool import Tool

BUTTON_WIDTH = 5
BUTTON_HEIGHT = 3

ACTIVE_ATTRIBUTE = Style(reverse=True)


class ToolPanel:
    """Tool buttons, the selected tool, and the brush.

    When there are more tools than fit in the panel's height, the list scrolls.
    """

    def __init__(self, area: Area, brush: Cell, tools: list[Tool] | None = None) -> None:
        self.area = area
        self.tools = list(tools or Tool)
        self.active_index = 0
        """Index of the selected tool in `tools`."""
        self.brush = brush
        """The cell painted by the Brush and Bucket tools."""
        self.scroll = 0
        """Index of the first visible tool."""

    def active_tool(self) -> Tool:
        """Returns the selected tool."""
        return self.tools[self.active_index]

    def brush_style(self) -> Cell:
        """Returns the cell that painting tools apply."""
        return self.brush

    def select(self, index: int) -> None:
        """Select the tool at the given index in the tool list."""
        if not 0 <= index < len(self.tools):
            raise IndexError(f"No tool at index {index}")
        self.active_index = index
        log.info(f"Selected tool: {self.active_tool().get_name()}")

    def visible_buttons(self, terminal_size: Size) -> int:
        """How many buttons fit in the panel."""
        height = self.area.size(terminal_size).height
        return min(height // BUTTON_HEIGHT, len(self.tools))

    def max_scroll(self, terminal_size: Size) -> int:
        """The furthest the list can scroll, showing the last tool at the bottom."""
        return diff_or_zero(len(self.tools), self.visible_buttons(terminal_size))

    def clamp_scroll(self, terminal_size: Size) -> None:
        """Keep the scroll position valid after the panel changes size."""
        self.scroll = min(self.scroll, self.max_scroll(terminal_size))

    def draw(self, surface: RenderSurface, terminal_size: Size) -> None:
        """Draw the visible tool buttons."""
        self.clamp_scroll(terminal_size)
        if self.area.is_degenerate(terminal_size):
            return
        start_x, start_y = self.area.start_position(terminal_size)
        for i in range(self.visible_buttons(terminal_size)):
            tool_index = self.scroll + i
            x, y = start_x, start_y + i * BUTTON_HEIGHT
            active = tool_index == self.active_index
            if active:
                surface.set_attribute(ACTIVE_ATTRIBUTE)
            surface.draw_box(x, y, BUTTON_WIDTH, BUTTON_HEIGHT)
            surface.write_text(x + 1, y + 1, self.tools[tool_index].get_icon())
            if active:
                surface.reset_attribute()

    def click(self, surface: RenderSurface, x: int, y: int, terminal_size: Size) -> None:
        """Select the tool under the given screen position, if any."""
        if not self.area.contains(x, y, terminal_size):
            return
        _, start_y = self.area.start_position(terminal_size)
        visible_index = (y - start_y) // BUTTON_HEIGHT
        if visible_index >= self.visible_buttons(terminal_size):
            # Below the last button, in the leftover rows.
            return
        self.select(self.scroll + visible_index)
        self.draw(surface, terminal_size)
        surface.flush()

    def scroll_by(self, surface: RenderSurface, delta: int, terminal_size: Size) -> None:
        """Scroll the list of tools by `delta` buttons, negative being up."""
        if delta < 0:
            scroll = diff_or_zero(self.scroll, -delta)
        else:
            scroll = min(self.scroll + delta, self.max_scroll(terminal_size))
        if scroll == self.scroll:
            return
        self.scroll = scroll
        log.debug(f"Tool panel scrolled to {self.scroll}")
        self.draw(surface, terminal_size)
        surface.flush()
