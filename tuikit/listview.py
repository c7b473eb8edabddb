"""A list of selectable items with optional secondary texts and shortcuts."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from .primitive import (
    Align,
    Key,
    KeyEvent,
    MouseAction,
    MouseEvent,
    Primitive,
    Screen,
    SetFocus,
    print_text,
    string_width,
)
from .styles import STYLES, Color

ItemCallback = Callable[[int, str, str, str], None]


@dataclass
class ListItem:
    """One entry of a ListView. ``shortcut`` is empty when there is none."""

    main_text: str
    secondary_text: str = ""
    shortcut: str = ""
    selected: Optional[Callable[[], None]] = None


def _print_skipped(
    screen: Screen, text: str, x: int, y: int, skip: int, width: int, color: Color
) -> tuple[int, int]:
    """Print text with its first ``skip`` cells left out.

    Returns the printed screen width and the number of characters of ``text``
    that were skipped or printed.
    """
    consumed = 0
    skipped = 0
    for ch in text:
        if skipped >= skip:
            break
        skipped += string_width(ch)
        consumed += 1
    chars, printed = print_text(screen, text[consumed:], x, y, width, Align.LEFT, color)
    return printed, consumed + chars


class ListView(Primitive):
    """Rows of items, one of which is the current selection.

    Callbacks: ``on_changed`` when the selection moves, ``on_selected`` when an
    item is chosen (in addition to the item's own callback) and ``on_done``
    when Escape is pressed.
    """

    def __init__(self) -> None:
        super().__init__()
        self._items: list[ListItem] = []
        self._current_item = 0
        self.show_secondary_text = True
        self.main_text_color: Color = STYLES.primary_text_color
        self.secondary_text_color: Color = STYLES.tertiary_text_color
        self.shortcut_color: Color = STYLES.secondary_text_color
        self.selected_text_color: Color = STYLES.primitive_background_color
        self.selected_background_color: Color = STYLES.primary_text_color
        self.selected_focus_only = False
        self.highlight_full_line = False
        self.wrap_around = True
        self.item_offset = 0
        self.horizontal_offset = 0
        self._overflowing = False
        self.on_changed: Optional[ItemCallback] = None
        self.on_selected: Optional[ItemCallback] = None
        self.on_done: Optional[Callable[[], None]] = None

    def __len__(self) -> int:
        return len(self._items)

    @property
    def current_item(self) -> int:
        """Index of the currently selected item."""
        return self._current_item

    def _fire_changed(self, index: int) -> None:
        if self.on_changed is not None:
            item = self._items[index]
            self.on_changed(index, item.main_text, item.secondary_text, item.shortcut)

    def _fire_selected(self, index: int) -> None:
        item = self._items[index]
        if item.selected is not None:
            item.selected()
        if self.on_selected is not None:
            self.on_selected(index, item.main_text, item.secondary_text, item.shortcut)

    def set_current_item(self, index: int) -> ListView:
        """Select an item. Negative indices count from the back; others clamp."""
        if index < 0:
            index += len(self._items)
        if index >= len(self._items):
            index = len(self._items) - 1
        if index < 0:
            index = 0
        if self._items and index != self._current_item:
            self._fire_changed(index)
        self._current_item = index
        return self

    def add_item(
        self,
        main_text: str,
        secondary_text: str = "",
        shortcut: str = "",
        selected: Optional[Callable[[], None]] = None,
    ) -> ListView:
        """Append an item to the end of the list."""
        return self.insert_item(-1, main_text, secondary_text, shortcut, selected)

    def insert_item(
        self,
        index: int,
        main_text: str,
        secondary_text: str = "",
        shortcut: str = "",
        selected: Optional[Callable[[], None]] = None,
    ) -> ListView:
        """Insert an item before position ``index``.

        -1 inserts at the end, -2 before the last item, and so on. Indices out
        of range insert at the beginning or the end.
        """
        item = ListItem(main_text, secondary_text, shortcut, selected)
        if index < 0:
            index = len(self._items) + index + 1
        if index < 0:
            index = 0
        elif index > len(self._items):
            index = len(self._items)

        if index <= self._current_item < len(self._items):
            self._current_item += 1

        self._items.insert(index, item)

        if len(self._items) == 1:
            self._fire_changed(0)
        return self

    def remove_item(self, index: int) -> ListView:
        """Remove an item. Negative indices count from the back; others clamp."""
        if not self._items:
            return self
        if index < 0:
            index += len(self._items)
        if index >= len(self._items):
            index = len(self._items) - 1
        if index < 0:
            index = 0

        del self._items[index]
        if not self._items:
            return self

        previous = self._current_item
        if self._current_item >= index:
            self._current_item = max(self._current_item - 1, 0)
        if previous == index:
            self._fire_changed(self._current_item)
        return self

    def _check_index(self, index: int) -> ListItem:
        if not 0 <= index < len(self._items):
            raise IndexError(f"list index {index} out of range")
        return self._items[index]

    def get_item_text(self, index: int) -> tuple[str, str]:
        """Return the main and secondary text of an item."""
        item = self._check_index(index)
        return item.main_text, item.secondary_text

    def set_item_text(self, index: int, main: str, secondary: str) -> ListView:
        item = self._check_index(index)
        item.main_text = main
        item.secondary_text = secondary
        return self

    def find_items(
        self,
        main_search: str,
        secondary_search: str,
        must_contain_both: bool = False,
        ignore_case: bool = False,
    ) -> list[int]:
        """Return the ascending indices of items containing the search strings.

        An empty search string is ignored. With ``must_contain_both`` both
        strings must be found; otherwise one of them suffices.
        """
        if not main_search and not secondary_search:
            return []
        if ignore_case:
            main_search = main_search.lower()
            secondary_search = secondary_search.lower()

        indices = []
        for index, item in enumerate(self._items):
            main_text = item.main_text
            secondary_text = item.secondary_text
            if ignore_case:
                main_text = main_text.lower()
                secondary_text = secondary_text.lower()
            main_found = main_search in main_text
            secondary_found = secondary_search in secondary_text
            if must_contain_both:
                match = main_found and secondary_found
            else:
                match = (bool(main_text) and main_found) or (
                    bool(secondary_text) and secondary_found
                )
            if match:
                indices.append(index)
        return indices

    def clear(self) -> ListView:
        """Remove all items."""
        self._items = []
        self._current_item = 0
        return self

    def index_at_point(self, x: int, y: int) -> int:
        """Return the index of the item at a screen position, or -1."""
        rect_x, rect_y, width, height = self.inner_rect()
        if rect_x < 0 or width <= 0 or y < rect_y or y >= rect_y + height:
            return -1
        index = y - rect_y
        if self.show_secondary_text:
            index //= 2
        index += self.item_offset
        if index >= len(self._items):
            return -1
        return index

    def draw(self, screen: Screen) -> None:
        super().draw(screen)

        x, y, width, height = self.inner_rect()
        bottom_limit = min(y + height, screen.size()[1])

        show_shortcuts = any(item.shortcut for item in self._items)
        if show_shortcuts:
            x += 4
            width -= 4

        # Keep the current selection in view.
        if self._current_item < self.item_offset:
            self.item_offset = self._current_item
        elif self.show_secondary_text:
            if 2 * (self._current_item - self.item_offset) >= height - 1:
                self.item_offset = (2 * self._current_item + 3 - height) // 2
        elif self._current_item - self.item_offset >= height:
            self.item_offset = self._current_item + 1 - height
        if self.horizontal_offset < 0:
            self.horizontal_offset = 0

        max_width = 0
        overflowing = False
        for index, item in enumerate(self._items):
            if index < self.item_offset:
                continue
            if y >= bottom_limit:
                break

            if show_shortcuts and item.shortcut:
                print_text(
                    screen, f"({item.shortcut})", x - 5, y, 4, Align.RIGHT, self.shortcut_color
                )

            printed, end = _print_skipped(
                screen, item.main_text, x, y, self.horizontal_offset, width, self.main_text_color
            )
            max_width = max(max_width, printed)
            if end < len(item.main_text):
                overflowing = True

            if index == self._current_item and (not self.selected_focus_only or self.has_focus()):
                text_width = width
                if not self.highlight_full_line:
                    text_width = min(text_width, string_width(item.main_text))
                for bx in range(text_width):
                    ch, style = screen.get_content(x + bx, y)
                    foreground = style.foreground
                    if foreground == self.main_text_color:
                        foreground = self.selected_text_color
                    style = style.with_background(self.selected_background_color).with_foreground(
                        foreground
                    )
                    screen.set_content(x + bx, y, ch, style)

            y += 1
            if y >= bottom_limit:
                break

            if self.show_secondary_text:
                printed, end = _print_skipped(
                    screen,
                    item.secondary_text,
                    x,
                    y,
                    self.horizontal_offset,
                    width,
                    self.secondary_text_color,
                )
                max_width = max(max_width, printed)
                if end < len(item.secondary_text):
                    overflowing = True
                y += 1

        # Do not let the text scroll out of view entirely.
        if self.horizontal_offset > 0 and max_width < width:
            self.horizontal_offset -= width - max_width
            self.draw(screen)
        self._overflowing = overflowing

    def handle_key(self, event: KeyEvent, set_focus: SetFocus) -> None:
        if event.key == Key.ESCAPE:
            if self.on_done is not None:
                self.on_done()
            return
        if not self._items:
            return

        previous = self._current_item
        key = event.key
        if key in (Key.TAB, Key.DOWN):
            self._current_item += 1
        elif key in (Key.BACKTAB, Key.UP):
            self._current_item -= 1
        elif key == Key.RIGHT:
            if self._overflowing:
                self.horizontal_offset += 2  # Two cells, for wide characters.
            else:
                self._current_item += 1
        elif key == Key.LEFT:
            if self.horizontal_offset > 0:
                self.horizontal_offset -= 2
            else:
                self._current_item -= 1
        elif key == Key.HOME:
            self._current_item = 0
        elif key == Key.END:
            self._current_item = len(self._items) - 1
        elif key == Key.PGDN:
            self._current_item = min(
                self._current_item + self.inner_rect()[3], len(self._items) - 1
            )
        elif key == Key.PGUP:
            self._current_item = max(self._current_item - self.inner_rect()[3], 0)
        elif key == Key.ENTER:
            if 0 <= self._current_item < len(self._items):
                self._fire_selected(self._current_item)
        elif key == Key.RUNE:
            ch = event.rune
            found = ch == " "
            if not found:
                for index, item in enumerate(self._items):
                    if item.shortcut == ch:
                        found = True
                        self._current_item = index
                        break
            if found:
                self._fire_selected(self._current_item)

        if self._current_item < 0:
            self._current_item = len(self._items) - 1 if self.wrap_around else 0
        elif self._current_item >= len(self._items):
            self._current_item = 0 if self.wrap_around else len(self._items) - 1

        if self._current_item != previous:
            self._fire_changed(self._current_item)

    def handle_mouse(
        self, action: MouseAction, event: MouseEvent, set_focus: SetFocus
    ) -> tuple[bool, Optional[Primitive]]:
        if not self.in_rect(*event.position):
            return False, None

        if action == MouseAction.LEFT_CLICK:
            set_focus(self)
            index = self.index_at_point(*event.position)
            if index != -1:
                self._fire_selected(index)
                if index != self._current_item:
                    self._fire_changed(index)
                self._current_item = index
            return True, None
        if action == MouseAction.SCROLL_UP:
            if self.item_offset > 0:
                self.item_offset -= 1
            return True, None
        if action == MouseAction.SCROLL_DOWN:
            lines = len(self._items) - self.item_offset
            if self.show_secondary_text:
                lines *= 2
            if lines > self.inner_rect()[3]:
                self.item_offset += 1
            return True, None
        return False, None