"""A layout that places primitives side by side or above each other."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Optional

from .primitive import KeyEvent, MouseAction, MouseEvent, Primitive, Screen, SetFocus


class Direction(IntEnum):
    """The direction along which a Flex distributes its items."""

    ROW = 0
    COLUMN = 1


@dataclass
class _FlexItem:
    item: Optional[Primitive]
    fixed_size: int
    proportion: int
    focus: bool


def _div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b > 0) else -quotient


class Flex(Primitive):
    """Arranges items in a row or column by fixed sizes and proportions.

    The background is left untouched, so empty items show what lies beneath.
    """

    def __init__(self, direction: Direction = Direction.COLUMN) -> None:
        super().__init__()
        self.transparent = True
        self.direction = direction
        self.full_screen = False
        self._items: list[_FlexItem] = []

    def add_item(
        self,
        item: Optional[Primitive],
        fixed_size: int = 0,
        proportion: int = 1,
        focus: bool = False,
    ) -> Flex:
        """Append an item. A fixed size of 0 makes its size proportional.

        ``item`` may be None to leave empty space.
        """
        self._items.append(_FlexItem(item, fixed_size, proportion, focus))
        return self

    def remove_item(self, item: Optional[Primitive]) -> Flex:
        """Remove every entry holding ``item``, keeping the order of the rest."""
        self._items = [entry for entry in self._items if entry.item is not item]
        return self

    def clear(self) -> Flex:
        self._items = []
        return self

    def resize_item(self, item: Optional[Primitive], fixed_size: int, proportion: int) -> Flex:
        """Change the sizes of every entry holding ``item``."""
        for entry in self._items:
            if entry.item is item:
                entry.fixed_size = fixed_size
                entry.proportion = proportion
        return self

    def draw(self, screen: Screen) -> None:
        super().draw(screen)
        if self.full_screen:
            width, height = screen.size()
            self.set_rect(0, 0, width, height)

        x, y, width, height = self.inner_rect()
        rows = self.direction == Direction.ROW
        dist_size = height if rows else width
        proportion_sum = 0
        for entry in self._items:
            if entry.fixed_size > 0:
                dist_size -= entry.fixed_size
            else:
                proportion_sum += entry.proportion

        pos = y if rows else x
        deferred: list[Primitive] = []
        for entry in self._items:
            size = entry.fixed_size
            if size <= 0:
                if proportion_sum > 0:
                    size = _div(dist_size * entry.proportion, proportion_sum)
                    dist_size -= size
                    proportion_sum -= entry.proportion
                else:
                    size = 0
            if entry.item is not None:
                if rows:
                    entry.item.set_rect(x, pos, width, size)
                else:
                    entry.item.set_rect(pos, y, size, height)
            pos += size

            if entry.item is not None:
                if entry.item.has_focus():
                    deferred.append(entry.item)
                else:
                    entry.item.draw(screen)

        # Focused items come last so they stay on top of any overlap.
        for item in reversed(deferred):
            item.draw(screen)

    def focus(self, delegate: SetFocus) -> None:
        for entry in self._items:
            if entry.item is not None and entry.focus:
                delegate(entry.item)
                return

    def has_focus(self) -> bool:
        return any(entry.item is not None and entry.item.has_focus() for entry in self._items)

    def handle_key(self, event: KeyEvent, set_focus: SetFocus) -> None:
        for entry in self._items:
            if entry.item is not None and entry.item.has_focus():
                entry.item.handle_key(event, set_focus)
                return

    def handle_mouse(
        self, action: MouseAction, event: MouseEvent, set_focus: SetFocus
    ) -> tuple[bool, Optional[Primitive]]:
        if not self.in_rect(*event.position):
            return False, None
        consumed, capture = False, None
        for entry in self._items:
            if entry.item is None:
                continue
            consumed, capture = entry.item.handle_mouse(action, event, set_focus)
            if consumed:
                break
        return consumed, capture