"""The Stage widget, which shows the render surface and reports input in screen coordinates."""

from typing import Any

from textual import events
from textual.geometry import Region, Size
from textual.message import Message
from textual.strip import Strip
from textual.widget import Widget

from cell_paint.surface import RenderSurface


class Stage(Widget):
    """A full screen widget displaying a RenderSurface.

    Components lay themselves out in absolute terminal coordinates,
    so mouse positions are reported relative to the screen, not the widget.
    """

    DEFAULT_CSS = """
    Stage {
        width: 100%;
        height: 100%;
    }
    """

    class PointerDown(Message):
        """Message when the left mouse button is pressed."""

        def __init__(self, x: int, y: int) -> None:
            self.x = x
            self.y = y
            super().__init__()

    class PointerDrag(Message):
        """Message when the mouse moves while the left button is held."""

        def __init__(self, x: int, y: int) -> None:
            self.x = x
            self.y = y
            super().__init__()

    class PointerUp(Message):
        """Message when the left mouse button is released."""

        def __init__(self, x: int, y: int) -> None:
            self.x = x
            self.y = y
            super().__init__()

    class Scroll(Message):
        """Message when the mouse wheel is turned. `direction` is -1 for up, 1 for down."""

        def __init__(self, x: int, y: int, direction: int) -> None:
            self.x = x
            self.y = y
            self.direction = direction
            super().__init__()

    class Resized(Message):
        """Message when the terminal changes size. The surface has already been resized, and is blank."""

        def __init__(self, size: Size) -> None:
            self.size = size
            super().__init__()

    def __init__(self, surface: RenderSurface, **kwargs: Any) -> None:
        """Initialize the stage."""
        super().__init__(**kwargs)
        self.surface = surface
        self.pointer_active = False
        surface.on_flush = self.refresh_surface_region

    def refresh_surface_region(self, region: Region) -> None:
        """Repaint the part of the widget showing a changed region of the surface."""
        self.refresh(region)

    def on_resize(self, event: events.Resize) -> None:
        """Called when the widget (which fills the terminal) is resized."""
        self.surface.resize(event.size)
        self.post_message(self.Resized(event.size))

    def on_mouse_down(self, event: events.MouseDown) -> None:
        """Called when a mouse button is pressed."""
        if event.button != 1:
            return
        self.pointer_active = True
        self.capture_mouse(True)
        self.post_message(self.PointerDown(event.screen_x, event.screen_y))

    def on_mouse_move(self, event: events.MouseMove) -> None:
        """Called when the mouse is moved."""
        if self.pointer_active:
            self.post_message(self.PointerDrag(event.screen_x, event.screen_y))

    def on_mouse_up(self, event: events.MouseUp) -> None:
        """Called when a mouse button is released."""
        if self.pointer_active:
            self.post_message(self.PointerUp(event.screen_x, event.screen_y))
        self.pointer_active = False
        self.capture_mouse(False)

    def on_mouse_scroll_up(self, event: events.MouseScrollUp) -> None:
        """Called when the mouse wheel is turned up."""
        self.post_message(self.Scroll(event.screen_x, event.screen_y, -1))

    def on_mouse_scroll_down(self, event: events.MouseScrollDown) -> None:
        """Called when the mouse wheel is turned down."""
        self.post_message(self.Scroll(event.screen_x, event.screen_y, 1))

    def render_line(self, y: int) -> Strip:
        """Render a line of the widget from the surface."""
        if y >= len(self.surface.lines):
            return Strip.blank(self.size.width)
        return Strip(self.surface.lines[y]).adjust_cell_length(self.size.width)
