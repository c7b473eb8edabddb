"""Colors and the theme that primitives take their initial colors from."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class Color(IntEnum):
    """Terminal colors, numbered by their index in the xterm palette.

    ``DEFAULT`` leaves the terminal's own color unchanged.
    """

    DEFAULT = -1
    BLACK = 0
    MAROON = 1
    GREEN = 2
    OLIVE = 3
    NAVY = 4
    PURPLE = 5
    TEAL = 6
    SILVER = 7
    GRAY = 8
    RED = 9
    LIME = 10
    YELLOW = 11
    BLUE = 12
    FUCHSIA = 13
    AQUA = 14
    WHITE = 15
    DARK_CYAN = 36


@dataclass
class Theme:
    """The colors used when primitives are created."""

    primitive_background_color: Color = Color.BLACK
    contrast_background_color: Color = Color.BLUE
    more_contrast_background_color: Color = Color.GREEN
    border_color: Color = Color.WHITE
    title_color: Color = Color.WHITE
    graphics_color: Color = Color.WHITE
    primary_text_color: Color = Color.WHITE
    secondary_text_color: Color = Color.YELLOW
    tertiary_text_color: Color = Color.GREEN
    inverse_text_color: Color = Color.BLUE
    contrast_secondary_text_color: Color = Color.DARK_CYAN


# The theme in effect for newly created primitives. Change its fields to
# restyle everything created afterwards.
STYLES = Theme()