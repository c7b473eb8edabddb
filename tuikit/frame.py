"""A wrapper that adds space and header/footer text around a primitive."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .primitive import (
    Align,
    KeyEvent,
    MouseAction,
    MouseEvent,
    Primitive,
    Screen,
    SetFocus,
    print_text,
)
from .styles import STYLES, Color


@dataclass
class _FrameText:
    text: str
    header: bool
    align: Align
    color: Color


class Frame(Primitive):
    """Surrounds a primitive with borders and optional lines of text.

    Header lines are stacked top to bottom, footer lines bottom to top.
    """

    def __init__(self, primitive: Optional[Primitive] = None) -> None:
        super().__init__()
        self.primitive = primitive
        self._texts: list[_FrameText] = []
        self.top = 1
        self.bottom = 1
        self.header = 1
        self.footer = 1
        self.left = 1
        self.right = 1

    def add_text(
        self,
        text: str,
        header: bool = True,
        align: Align = Align.LEFT,
        color: Optional[Color] = None,
    ) -> Frame:
        """Add a line to the header (``header`` true) or the footer."""
        if color is None:
            color = STYLES.primary_text_color
        self._texts.append(_FrameText(text, header, Align(align), color))
        return self

    def clear(self) -> Frame:
        """Remove all text."""
        self._texts = []
        return self

    def set_borders(
        self, top: int, bottom: int, header: int, footer: int, left: int, right: int
    ) -> Frame:
        """Set border widths and the gaps between the text and the primitive."""
        self.top, self.bottom = top, bottom
        self.header, self.footer = header, footer
        self.left, self.right = left, right
        return self

    def draw(self, screen: Screen) -> None:
        super().draw(screen)

        x, top, width, height = self.inner_rect()
        bottom = top + height - 1
        x += self.left
        top += self.top
        bottom -= self.bottom
        width -= self.left + self.right
        if width <= 0 or top >= bottom:
            return

        # Rows used so far: header left/center/right, then footer left/center/right.
        rows = [0] * 6
        top_max = top
        bottom_min = bottom
        for text in self._texts:
            if text.header:
                y = top + rows[text.align]
                rows[text.align] += 1
                if y >= bottom_min:
                    continue
                top_max = max(top_max, y + 1)
            else:
                slot = 3 + text.align
                y = bottom - rows[slot]
                rows[slot] += 1
                if y <= top_max:
                    continue
                bottom_min = min(bottom_min, y - 1)
            print_text(screen, text.text, x, y, width, text.align, text.color)

        if self.primitive is not None:
            if top_max > top:
                top = top_max + self.header
            if bottom_min < bottom:
                bottom = bottom_min - self.footer
            if top > bottom:
                return
            self.primitive.set_rect(x, top, width, bottom + 1 - top)
            self.primitive.draw(screen)

    def focus(self, delegate: SetFocus) -> None:
        if self.primitive is not None:
            delegate(self.primitive)
        else:
            self._has_focus = True

    def has_focus(self) -> bool:
        if self.primitive is None:
            return self._has_focus
        return self.primitive.has_focus()

    def handle_key(self, event: KeyEvent, set_focus: SetFocus) -> None:
        if self.primitive is not None and self.primitive.has_focus():
            self.primitive.handle_key(event, set_focus)

    def handle_mouse(
        self, action: MouseAction, event: MouseEvent, set_focus: SetFocus
    ) -> tuple[bool, Optional[Primitive]]:
        if not self.in_rect(*event.position):
            return False, None
        if self.primitive is not None:
            return self.primitive.handle_mouse(action, event, set_focus)
        return False, None