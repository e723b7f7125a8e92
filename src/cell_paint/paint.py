#!/usr/bin/env python3
"""The main application: a toolbox and a canvas, drawn with the mouse."""

import os
from typing import Optional

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.geometry import Size

from cell_paint.args import args
from cell_paint.canvas import Canvas
from cell_paint.content_buffer import Cell, ContentBuffer
from cell_paint.geometry import Area, Corner, Point
from cell_paint.solid import Solid, corner_markers
from cell_paint.stage import Stage
from cell_paint.surface import RenderSurface
from cell_paint.toolbox import BUTTON_WIDTH, ToolPanel

# Layout, in corner-relative coordinates so it follows the terminal size.
# The tool panel is one button wide, against the right edge.
TOOL_PANEL_AREA = Area(Point(BUTTON_WIDTH - 1, 0, Corner.top_right), Point(0, 0, Corner.bottom_right))
# The canvas takes the rest, leaving a column between its border and the panel.
CANVAS_FRAME = Area(Point(0, 0, Corner.top_left), Point(BUTTON_WIDTH + 1, 0, Corner.bottom_right))
CANVAS_VIEWPORT = Area(Point(1, 1, Corner.top_left), Point(BUTTON_WIDTH + 2, 1, Corner.bottom_right))


class PaintApp(App[None]):
    """Character cell paint program in the terminal."""

    BINDINGS = [
        Binding("q", "quit", "Quit"),
        Binding("ctrl+q", "quit", "Quit"),
    ]

    def __init__(
        self,
        canvas_size: Optional[Size] = None,
        brush: Optional[Cell] = None,
        ascii_only: Optional[bool] = None,
        show_anchors: Optional[bool] = None,
    ) -> None:
        """Initialize the app. Settings not given are taken from the command line arguments."""
        super().__init__()
        if canvas_size is None:
            canvas_size = args.canvas_size
        if brush is None:
            brush = Cell.from_color(args.brush_char, args.brush_color)
        if ascii_only is None:
            ascii_only = args.ascii_only
        if show_anchors is None:
            show_anchors = args.show_anchors

        self.surface = RenderSurface(ascii_only=ascii_only)
        """Everything on screen is drawn here."""
        self.canvas = Canvas(CANVAS_FRAME, CANVAS_VIEWPORT, ContentBuffer(*canvas_size))
        """The drawing area."""
        self.tool_panel = ToolPanel(TOOL_PANEL_AREA, brush)
        """The tool buttons."""
        self.solids: list[Solid] = corner_markers() if show_anchors else []
        """Markers for debugging the layout."""
        self.drawing_on_canvas = False
        """Whether the current mouse press started on the canvas."""

    @property
    def terminal_size(self) -> Size:
        """The size of the terminal, as of the last resize."""
        return self.surface.size

    def compose(self) -> ComposeResult:
        """Add our widgets."""
        yield Stage(self.surface)

    def draw(self) -> None:
        """Redraw everything."""
        terminal_size = self.terminal_size
        self.surface.clear()
        self.tool_panel.draw(self.surface, terminal_size)
        self.canvas.draw(self.surface, terminal_size)
        for solid in self.solids:
            solid.draw(self.surface, terminal_size)
        self.surface.flush()

    def on_stage_resized(self, event: Stage.Resized) -> None:
        """Called when the terminal is resized."""
        self.log.info(f"Terminal resized to {event.size.width}x{event.size.height}")
        self.draw()

    def on_stage_pointer_down(self, event: Stage.PointerDown) -> None:
        """Called when the left mouse button is pressed anywhere."""
        terminal_size = self.terminal_size
        if self.tool_panel.area.contains(event.x, event.y, terminal_size):
            self.tool_panel.click(self.surface, event.x, event.y, terminal_size)
        elif self.canvas.viewport.contains(event.x, event.y, terminal_size):
            self.drawing_on_canvas = True
            self.canvas.pointer_down(
                self.surface,
                self.tool_panel.active_tool(),
                self.tool_panel.brush_style(),
                event.x,
                event.y,
                terminal_size,
            )

    def on_stage_pointer_drag(self, event: Stage.PointerDrag) -> None:
        """Called when the mouse is dragged with the left button held."""
        if not self.drawing_on_canvas:
            return
        self.canvas.pointer_drag(
            self.surface,
            self.tool_panel.active_tool(),
            self.tool_panel.brush_style(),
            event.x,
            event.y,
            self.terminal_size,
        )

    def on_stage_pointer_up(self, event: Stage.PointerUp) -> None:
        """Called when the left mouse button is released."""
        self.drawing_on_canvas = False
        self.canvas.pointer_up()

    def on_stage_scroll(self, event: Stage.Scroll) -> None:
        """Called when the mouse wheel is turned. Only the tool panel scrolls."""
        if self.tool_panel.area.contains(event.x, event.y, self.terminal_size):
            self.tool_panel.scroll_by(self.surface, event.direction, self.terminal_size)


# `textual run --dev src/cell_paint/paint.py` will search for a
# global variable named `app`.
app = PaintApp()

def main() -> None:
    """Entry point for the cell-paint CLI."""
    if args.clear_screen:
        os.system("cls||clear")
    app.run()

if __name__ == "__main__":
    main()
