"""Enumeration of the tools available in the app."""

from enum import Enum

from cell_paint.args import args


class Tool(Enum):
    """The tools available in the app, in toolbox order."""
    select = 1
    move = 2
    rectangle = 3
    circle = 4
    brush = 5
    erase = 6
    bucket = 7
    color_picker = 8
    text = 9

    def get_icon(self) -> str:
        """Get the icon for this tool, padded to fill the three cells inside a tool button."""
        # Only single-width symbols here; emoji take two cells in most terminals
        # and would push the button's right border out of place.
        if args.ascii_only:
            enum_to_icon = {
                Tool.select: " S ",
                Tool.move: " M ",
                Tool.rectangle: " R ",
                Tool.circle: " C ",
                Tool.brush: " B ",
                Tool.erase: " E ",
                Tool.bucket: " K ",
                Tool.color_picker: " P ",
                Tool.text: " T ",
            }
            return enum_to_icon[self]
        return {
            Tool.select: " ⬚ ",
            Tool.move: " ✥ ",
            Tool.rectangle: " ▭ ",
            Tool.circle: " ◯ ",
            Tool.brush: " ✎ ",
            Tool.erase: " ⌫ ",
            Tool.bucket: " ▼ ",
            Tool.color_picker: " ⊙ ",
            Tool.text: " A ",
        }[self]

    def get_name(self) -> str:
        """Get the display name for this tool.

        Not to be confused with tool.name, which is an identifier.
        """
        return {
            Tool.select: "Select",
            Tool.move: "Move",
            Tool.rectangle: "Rectangle",
            Tool.circle: "Circle",
            Tool.brush: "Brush",
            Tool.erase: "Erase",
            Tool.bucket: "Fill With Color",
            Tool.color_picker: "Pick Color",
            Tool.text: "Text",
        }[self]

    @property
    def paints(self) -> bool:
        """Whether the tool does anything on the canvas yet."""
        return self in (Tool.brush, Tool.erase, Tool.bucket)
