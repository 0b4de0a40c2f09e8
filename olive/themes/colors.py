# Olive Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Color constants and the Rich theme used by Olive's console output.

Help text and CLI output refer to semantic style names (``olive.heading``,
``olive.flag``, ...) instead of raw colors so that embedders can swap the
palette by passing their own `rich.theme.Theme` to a console.
"""
from rich.theme import Theme


class OliveColors:
    """Olive green palette with a few accents."""

    OLIVE = "#808000"
    OLIVE_b = "bold #808000"
    LEAF = "#9CB85C"
    LEAF_b = "bold #9CB85C"
    PIT = "#5C4B3A"
    CREAM = "#E8E4C9"
    COMMENT_GREY = "#8A8A8A"
    RED = "#D75F5F"
    RED_b = "bold #D75F5F"
    CYAN = "#5FAFAF"


def get_olive_theme() -> Theme:
    """Return the Rich theme mapping Olive's semantic style names to colors."""
    return Theme(
        {
            "olive.heading": OliveColors.OLIVE_b,
            "olive.command": OliveColors.LEAF_b,
            "olive.usage": OliveColors.CREAM,
            "olive.flag": OliveColors.CYAN,
            "olive.argument": OliveColors.LEAF,
            "olive.primary": OliveColors.LEAF,
            "olive.description": "default",
            "olive.value": OliveColors.CREAM,
            "olive.muted": OliveColors.COMMENT_GREY,
            "olive.error": OliveColors.RED_b,
        }
    )
