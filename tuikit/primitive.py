"""Events, styles, an in-memory screen and the base class of all primitives."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum, IntEnum, IntFlag, auto
from typing import Callable, Optional

from wcwidth import wcwidth

from .styles import STYLES, Color


class Align(IntEnum):
    """Horizontal text alignment."""

    LEFT = 0
    CENTER = 1
    RIGHT = 2


class Key(Enum):
    """Keys that primitives react to."""

    RUNE = auto()
    ENTER = auto()
    TAB = auto()
    BACKTAB = auto()
    ESCAPE = auto()
    BACKSPACE = auto()
    BACKSPACE2 = auto()
    DELETE = auto()
    LEFT = auto()
    RIGHT = auto()
    UP = auto()
    DOWN = auto()
    HOME = auto()
    END = auto()
    PGUP = auto()
    PGDN = auto()
    CTRL_A = auto()
    CTRL_B = auto()
    CTRL_D = auto()
    CTRL_E = auto()
    CTRL_F = auto()
    CTRL_K = auto()
    CTRL_U = auto()
    CTRL_W = auto()


class Modifier(IntFlag):
    """Modifier keys held down during an event."""

    NONE = 0
    SHIFT = 1
    CTRL = 2
    ALT = 4
    META = 8


@dataclass(frozen=True)
class KeyEvent:
    """A key press. ``rune`` holds the character for ``Key.RUNE`` events."""

    key: Key
    rune: str = ""
    modifiers: Modifier = Modifier.NONE


class MouseAction(Enum):
    """What the mouse did."""

    MOVE = auto()
    LEFT_DOWN = auto()
    LEFT_UP = auto()
    LEFT_CLICK = auto()
    LEFT_DOUBLE_CLICK = auto()
    MIDDLE_DOWN = auto()
    MIDDLE_UP = auto()
    MIDDLE_CLICK = auto()
    MIDDLE_DOUBLE_CLICK = auto()
    RIGHT_DOWN = auto()
    RIGHT_UP = auto()
    RIGHT_CLICK = auto()
    RIGHT_DOUBLE_CLICK = auto()
    SCROLL_UP = auto()
    SCROLL_DOWN = auto()
    SCROLL_LEFT = auto()
    SCROLL_RIGHT = auto()


@dataclass(frozen=True)
class MouseEvent:
    """A mouse event at a screen position."""

    x: int
    y: int
    modifiers: Modifier = Modifier.NONE

    @property
    def position(self) -> tuple[int, int]:
        return self.x, self.y


@dataclass(frozen=True)
class Style:
    """Foreground and background color of a screen cell."""

    foreground: Color = Color.DEFAULT
    background: Color = Color.DEFAULT

    def with_foreground(self, color: Color) -> Style:
        return replace(self, foreground=color)

    def with_background(self, color: Color) -> Style:
        return replace(self, background=color)


class Screen:
    """A grid of cells that primitives draw into."""

    def __init__(self, width: int, height: int) -> None:
        if width < 0 or height < 0:
            raise ValueError("screen dimensions must not be negative")
        self.width = width
        self.height = height
        self._cells = [[(" ", Style()) for _ in range(width)] for _ in range(height)]
        self.cursor: Optional[tuple[int, int]] = None

    def size(self) -> tuple[int, int]:
        return self.width, self.height

    def _inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get_content(self, x: int, y: int) -> tuple[str, Style]:
        """Return the character and style at (x, y); blank outside the screen."""
        if not self._inside(x, y):
            return " ", Style()
        return self._cells[y][x]

    def set_content(self, x: int, y: int, ch: str, style: Optional[Style] = None) -> None:
        """Set the cell at (x, y). Positions outside the screen are ignored."""
        if self._inside(x, y):
            self._cells[y][x] = (ch, style if style is not None else Style())

    def show_cursor(self, x: int, y: int) -> None:
        self.cursor = (x, y)

    def row_text(self, y: int) -> str:
        """Return the characters of one row as a string."""
        if not 0 <= y < self.height:
            raise IndexError(f"row {y} is outside the screen")
        return "".join(ch for ch, _ in self._cells[y])


def _clusters(text: str) -> list[tuple[str, int]]:
    """Split text into printable clusters with their screen widths."""
    clusters: list[tuple[str, int]] = []
    for ch in text:
        width = wcwidth(ch)
        if width <= 0 and clusters:
            cluster, cluster_width = clusters[-1]
            clusters[-1] = (cluster + ch, cluster_width)
        else:
            clusters.append((ch, max(width, 0)))
    return clusters


def string_width(text: str) -> int:
    """Return the number of screen cells the text occupies."""
    return sum(width for _, width in _clusters(text))


def print_text(
    screen: Screen,
    text: str,
    x: int,
    y: int,
    max_width: int,
    align: Align = Align.LEFT,
    color: Color = Color.DEFAULT,
) -> tuple[int, int]:
    """Print text into at most ``max_width`` cells, keeping cell backgrounds.

    Text that does not fit is cut on the right (left alignment), on the left
    (right alignment) or alternately on both sides (centered). Returns the
    number of characters printed and their screen width.
    """
    if max_width <= 0 or not text:
        return 0, 0
    clusters = _clusters(text)
    total = sum(width for _, width in clusters)
    start, end = 0, len(clusters)
    if align == Align.RIGHT:
        while total > max_width:
            total -= clusters[start][1]
            start += 1
    elif align == Align.CENTER:
        trim_left = True
        while total > max_width:
            if trim_left:
                total -= clusters[start][1]
                start += 1
            else:
                end -= 1
                total -= clusters[end][1]
            trim_left = not trim_left
    else:
        while total > max_width:
            end -= 1
            total -= clusters[end][1]

    shown = clusters[start:end]
    if align == Align.RIGHT:
        pos = x + max_width - total
    elif align == Align.CENTER:
        pos = x + (max_width - total) // 2
    else:
        pos = x
    for cluster, width in shown:
        _, existing = screen.get_content(pos, y)
        style = existing.with_foreground(color)
        screen.set_content(pos, y, cluster, style)
        for extra in range(1, width):
            screen.set_content(pos + extra, y, "", style)
        pos += width
    return sum(len(cluster) for cluster, _ in shown), total


SetFocus = Callable[["Primitive"], None]


class Primitive:
    """A rectangular screen element that can draw itself and take focus.

    By default it fills its area with its background color, unless
    ``transparent`` is set.
    """

    def __init__(self) -> None:
        self.x = 0
        self.y = 0
        self.width = 0
        self.height = 0
        self.padding_top = 0
        self.padding_bottom = 0
        self.padding_left = 0
        self.padding_right = 0
        self.background_color: Color = STYLES.primitive_background_color
        self.transparent = False
        self._has_focus = False

    def set_rect(self, x: int, y: int, width: int, height: int) -> None:
        self.x, self.y, self.width, self.height = x, y, width, height

    def get_rect(self) -> tuple[int, int, int, int]:
        return self.x, self.y, self.width, self.height

    def set_padding(self, top: int, bottom: int, left: int, right: int) -> Primitive:
        self.padding_top, self.padding_bottom = top, bottom
        self.padding_left, self.padding_right = left, right
        return self

    def inner_rect(self) -> tuple[int, int, int, int]:
        """Return the area inside the padding."""
        width = max(self.width - self.padding_left - self.padding_right, 0)
        height = max(self.height - self.padding_top - self.padding_bottom, 0)
        return self.x + self.padding_left, self.y + self.padding_top, width, height

    def in_rect(self, x: int, y: int) -> bool:
        return self.x <= x < self.x + self.width and self.y <= y < self.y + self.height

    def draw(self, screen: Screen) -> None:
        """Fill the primitive's area with its background color."""
        if self.transparent:
            return
        style = Style(background=self.background_color)
        screen_width, screen_height = screen.size()
        for row in range(max(self.y, 0), min(self.y + self.height, screen_height)):
            for column in range(max(self.x, 0), min(self.x + self.width, screen_width)):
                screen.set_content(column, row, " ", style)

    def focus(self, delegate: SetFocus) -> None:
        self._has_focus = True

    def blur(self) -> None:
        self._has_focus = False

    def has_focus(self) -> bool:
        return self._has_focus

    def handle_key(self, event: KeyEvent, set_focus: SetFocus) -> None:
        """React to a key press. Plain primitives take no keyboard input."""

    def handle_mouse(
        self, action: MouseAction, event: MouseEvent, set_focus: SetFocus
    ) -> tuple[bool, Optional[Primitive]]:
        """Take focus on a left click inside the area.

        Returns whether the event was consumed and the primitive that captures
        further mouse events, if any.
        """
        if action == MouseAction.LEFT_CLICK and self.in_rect(*event.position):
            set_focus(self)
            return True, None
        return False, None