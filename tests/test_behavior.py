"""General behavioral/functional tests, running the app headlessly.

Run with `pytest tests/test_behavior.py`, or `pytest` to run all tests.
"""

from textual.geometry import Size

from cell_paint.content_buffer import BLANK, Cell
from cell_paint.paint import PaintApp
from cell_paint.stage import Stage
from cell_paint.tool import Tool

TERMINAL_SIZE = (60, 20)
BRUSH = Cell.from_color("X", "cyan")

# With a 20x10 canvas in a 60x20 terminal, the buffer's top left cell is drawn at (17, 5).
# The tool panel spans columns 55 to 59, with six buttons of three rows each.
BRUSH_BUTTON = (57, 13)
ERASE_BUTTON = (57, 16)


def make_app() -> PaintApp:
    return PaintApp(canvas_size=Size(20, 10), brush=BRUSH, ascii_only=False, show_anchors=False)


def screen_rows(app: PaintApp) -> list[str]:
    return app.surface.get_text().split("\n")


async def test_initial_draw():
    app = make_app()
    async with app.run_test(size=TERMINAL_SIZE) as pilot:  # type: ignore
        await pilot.pause()
        assert app.terminal_size == Size(*TERMINAL_SIZE)
        lines = screen_rows(app)
        assert lines[0][0] == "┌"
        assert lines[0][55:60] == "┌───┐"
        assert lines[1][56:59] == Tool.select.get_icon()
        # Rendered to the screen, not just the surface.
        assert app.query_one(Stage).render_line(0).text.startswith("┌")


async def test_select_tool_and_paint():
    app = make_app()
    async with app.run_test(size=TERMINAL_SIZE) as pilot:  # type: ignore
        await pilot.pause()
        await pilot.click(Stage, offset=BRUSH_BUTTON)
        await pilot.pause()
        assert app.tool_panel.active_tool() == Tool.brush

        await pilot.click(Stage, offset=(17, 5))
        await pilot.pause()
        assert app.canvas.buffer.get(0, 0) == BRUSH
        assert screen_rows(app)[5][17] == "X"
        assert app.query_one(Stage).render_line(5).text[17] == "X"


async def test_click_in_margin_does_nothing():
    app = make_app()
    async with app.run_test(size=TERMINAL_SIZE) as pilot:  # type: ignore
        await pilot.pause()
        await pilot.click(Stage, offset=BRUSH_BUTTON)
        await pilot.click(Stage, offset=(5, 5))
        await pilot.pause()
        assert all(cell == BLANK for row in app.canvas.buffer.cells for cell in row)
        assert screen_rows(app)[5][5] == " "


async def test_drag_paints_stroke():
    app = make_app()
    async with app.run_test(size=TERMINAL_SIZE) as pilot:  # type: ignore
        await pilot.pause()
        app.tool_panel.select(list(Tool).index(Tool.brush))
        stage = app.query_one(Stage)
        stage.post_message(Stage.PointerDown(17, 6))
        stage.post_message(Stage.PointerDrag(26, 6))
        stage.post_message(Stage.PointerUp(26, 6))
        await pilot.pause()
        assert app.canvas.buffer.get_text().split("\n")[1] == "X" * 10 + " " * 10


async def test_drag_from_panel_does_not_paint():
    app = make_app()
    async with app.run_test(size=TERMINAL_SIZE) as pilot:  # type: ignore
        await pilot.pause()
        app.tool_panel.select(list(Tool).index(Tool.brush))
        stage = app.query_one(Stage)
        stage.post_message(Stage.PointerDown(*BRUSH_BUTTON))
        stage.post_message(Stage.PointerDrag(20, 6))
        stage.post_message(Stage.PointerUp(20, 6))
        await pilot.pause()
        assert app.canvas.buffer.get(3, 1) == BLANK


async def test_erase():
    app = make_app()
    async with app.run_test(size=TERMINAL_SIZE) as pilot:  # type: ignore
        await pilot.pause()
        await pilot.click(Stage, offset=BRUSH_BUTTON)
        await pilot.click(Stage, offset=(20, 7))
        await pilot.pause()
        assert app.canvas.buffer.get(3, 2) == BRUSH
        await pilot.click(Stage, offset=ERASE_BUTTON)
        await pilot.click(Stage, offset=(20, 7))
        await pilot.pause()
        assert app.tool_panel.active_tool() == Tool.erase
        assert app.canvas.buffer.get(3, 2) == BLANK
        assert screen_rows(app)[7][20] == " "


async def test_scroll_panel_and_fill():
    app = make_app()
    async with app.run_test(size=TERMINAL_SIZE) as pilot:  # type: ignore
        await pilot.pause()
        stage = app.query_one(Stage)
        stage.post_message(Stage.Scroll(57, 10, 1))
        await pilot.pause()
        assert app.tool_panel.scroll == 1
        # Scrolling over the canvas doesn't scroll anything.
        stage.post_message(Stage.Scroll(20, 10, 1))
        await pilot.pause()
        assert app.tool_panel.scroll == 1

        # The bucket is now the last visible button.
        await pilot.click(Stage, offset=(57, 16))
        await pilot.pause()
        assert app.tool_panel.active_tool() == Tool.bucket
        await pilot.click(Stage, offset=(30, 10))
        await pilot.pause()
        assert all(cell == BRUSH for row in app.canvas.buffer.cells for cell in row)
        assert screen_rows(app)[14][17:37] == "X" * 20


async def test_quit():
    app = make_app()
    async with app.run_test(size=TERMINAL_SIZE) as pilot:  # type: ignore
        await pilot.pause()
        await pilot.press("q")
        await pilot.pause()
    assert app.return_code == 0


async def test_show_anchors():
    app = PaintApp(canvas_size=Size(20, 10), brush=BRUSH, ascii_only=True, show_anchors=True)
    async with app.run_test(size=TERMINAL_SIZE) as pilot:  # type: ignore
        await pilot.pause()
        lines = screen_rows(app)
        assert lines[0][:2] == "██"
        assert lines[19][-2:] == "██"
        # ASCII borders where the markers don't cover them.
        assert lines[0][53] == "+"
