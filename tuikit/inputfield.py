"""A one-line text entry field with optional masking and autocompletion."""

from __future__ import annotations

import re
import threading
from typing import Callable, Optional

from wcwidth import wcwidth

from .listview import ListView
from .primitive import (
    Align,
    Key,
    KeyEvent,
    Modifier,
    MouseAction,
    MouseEvent,
    Primitive,
    Screen,
    SetFocus,
    Style,
    print_text,
    string_width,
)
from .styles import STYLES, Color

_SPACE = r"[\t\n\f\r ]"
_NON_SPACE = r"[^\t\n\f\r ]"
_LAST_WORD = re.compile(f"{_NON_SPACE}+{_SPACE}*$")
_FIRST_WORD = re.compile(f"^{_SPACE}*{_NON_SPACE}+{_SPACE}*")

# Entries whose remaining suffix is this long or longer are never preselected.
_MAX_SUFFIX_LENGTH = 9999


def _clusters(text: str) -> list[tuple[int, int, int]]:
    """Split text into clusters as (start index, length, screen width)."""
    result: list[tuple[int, int, int]] = []
    for index, ch in enumerate(text):
        width = wcwidth(ch)
        if width <= 0 and result:
            start, length, cluster_width = result[-1]
            result[-1] = (start, length + 1, cluster_width)
        else:
            result.append((index, 1, max(width, 0)))
    return result


class InputField(Primitive):
    """A single line where the user enters text.

    ``accept`` may reject a new character given the resulting text and the
    character. ``on_changed`` receives the text after every change,
    ``on_done`` and ``on_finished`` the key that ended the input (Enter,
    Escape, Tab, Backtab, Up or Down). A non-empty ``mask_character`` hides the
    text behind that character.
    """

    def __init__(self) -> None:
        super().__init__()
        self._text = ""
        self.label = ""
        self.placeholder = ""
        self.label_color: Color = STYLES.secondary_text_color
        self.field_background_color: Color = STYLES.contrast_background_color
        self.field_text_color: Color = STYLES.primary_text_color
        self.placeholder_text_color: Color = STYLES.contrast_secondary_text_color
        self.label_width = 0
        self.field_width = 0
        self.mask_character = ""
        self.cursor_pos = 0
        self.accept: Optional[Callable[[str, str], bool]] = None
        self.on_changed: Optional[Callable[[str], None]] = None
        self.on_done: Optional[Callable[[Key], None]] = None
        self.on_finished: Optional[Callable[[Key], None]] = None
        self._autocomplete_func: Optional[Callable[[str], list[str]]] = None
        self._autocomplete_list: Optional[ListView] = None
        self._lock = threading.Lock()
        self.field_x = 0
        self.offset = 0

    @property
    def text(self) -> str:
        """The current text."""
        return self._text

    @property
    def autocomplete_list(self) -> Optional[ListView]:
        """The drop-down of autocomplete entries, or None when there is none."""
        return self._autocomplete_list

    def set_text(self, text: str) -> InputField:
        """Replace the text and move the cursor to its end."""
        self._text = text
        self.cursor_pos = len(text)
        if self.on_changed is not None:
            self.on_changed(text)
        return self

    def set_autocomplete_func(
        self, callback: Optional[Callable[[str], list[str]]]
    ) -> InputField:
        """Set the function that returns entries for the current text."""
        self._autocomplete_func = callback
        self.autocomplete()
        return self

    def autocomplete(self) -> InputField:
        """Refresh the autocomplete entries from the callback, if any."""
        with self._lock:
            if self._autocomplete_func is None:
                return self
            entries = self._autocomplete_func(self._text)
            if not entries:
                self._autocomplete_list = None
                return self

            if self._autocomplete_list is None:
                drop_down = ListView()
                drop_down.show_secondary_text = False
                drop_down.main_text_color = STYLES.primitive_background_color
                drop_down.selected_text_color = STYLES.primitive_background_color
                drop_down.selected_background_color = STYLES.primary_text_color
                drop_down.highlight_full_line = True
                drop_down.background_color = STYLES.more_contrast_background_color
                self._autocomplete_list = drop_down

            drop_down = self._autocomplete_list
            drop_down.clear()
            current_entry = -1
            for index, entry in enumerate(entries):
                drop_down.add_item(entry)
                if (
                    current_entry < 0
                    and entry.startswith(self._text)
                    and len(entry) - len(self._text) < _MAX_SUFFIX_LENGTH
                ):
                    current_entry = index
            if current_entry >= 0:
                drop_down.set_current_item(current_entry)
        return self

    def draw(self, screen: Screen) -> None:
        super().draw(screen)

        x, y, width, height = self.inner_rect()
        right_limit = x + width
        if height < 1 or right_limit <= x:
            return

        if self.label_width > 0:
            label_width = min(self.label_width, right_limit - x)
            print_text(screen, self.label, x, y, label_width, Align.LEFT, self.label_color)
            x += label_width
        else:
            _, drawn = print_text(
                screen, self.label, x, y, right_limit - x, Align.LEFT, self.label_color
            )
            x += drawn

        self.field_x = x
        field_width = self.field_width if self.field_width > 0 else right_limit - x
        field_width = min(field_width, right_limit - x)
        field_style = Style(background=self.field_background_color)
        for index in range(field_width):
            screen.set_content(x + index, y, " ", field_style)

        cursor_screen_pos = 0
        text = self._text
        if not text and self.placeholder:
            print_text(
                screen, self.placeholder, x, y, field_width, Align.LEFT, self.placeholder_text_color
            )
            self.offset = 0
        else:
            if self.mask_character:
                text = self.mask_character * len(self._text)
            if field_width >= string_width(text):
                print_text(screen, text, x, y, field_width, Align.LEFT, self.field_text_color)
                self.offset = 0
                cursor_screen_pos = sum(
                    w for start, _, w in _clusters(text) if start < self.cursor_pos
                )
            else:
                self.cursor_pos = min(max(self.cursor_pos, 0), len(text))
                shift_left = 0
                if self.offset > self.cursor_pos:
                    self.offset = self.cursor_pos
                else:
                    sub_width = string_width(text[self.offset : self.cursor_pos])
                    if sub_width > field_width - 1:
                        shift_left = sub_width - field_width + 1
                current_offset = self.offset
                for start, length, w in _clusters(text):
                    if start < current_offset:
                        continue
                    if shift_left > 0:
                        self.offset = start + length
                        shift_left -= w
                    else:
                        if start + length > self.cursor_pos:
                            break
                        cursor_screen_pos += w
                print_text(
                    screen, text[self.offset :], x, y, field_width, Align.LEFT,
                    self.field_text_color,
                )

        with self._lock:
            drop_down = self._autocomplete_list
            if drop_down is not None:
                list_height = len(drop_down)
                list_width = max(
                    (string_width(drop_down.get_item_text(i)[0]) for i in range(list_height)),
                    default=0,
                )
                list_x = x
                list_y = y + 1
                screen_height = screen.size()[1]
                if list_y + list_height >= screen_height and list_y - 2 > list_height - list_y:
                    list_y = max(y - list_height, 0)
                if list_y + list_height >= screen_height:
                    list_height = screen_height - list_y
                drop_down.set_rect(list_x, list_y, list_width, list_height)
                drop_down.draw(screen)

        if self.has_focus():
            screen.show_cursor(x + cursor_screen_pos, y)

    def _finish(self, key: Key) -> None:
        if self.on_done is not None:
            self.on_done(key)
        if self.on_finished is not None:
            self.on_finished(key)

    def handle_key(self, event: KeyEvent, set_focus: SetFocus) -> None:
        current_text = self._text

        def home() -> None:
            self.cursor_pos = 0

        def end() -> None:
            self.cursor_pos = len(self._text)

        def move_left() -> None:
            clusters = _clusters(self._text[: self.cursor_pos])
            if clusters:
                self.cursor_pos -= clusters[-1][1]

        def move_right() -> None:
            clusters = _clusters(self._text[self.cursor_pos :])
            if clusters:
                self.cursor_pos += clusters[0][1]

        def move_word_left() -> None:
            self.cursor_pos = len(_LAST_WORD.sub("", self._text[: self.cursor_pos]))

        def move_word_right() -> None:
            rest = _FIRST_WORD.sub("", self._text[self.cursor_pos :])
            self.cursor_pos = len(self._text) - len(rest)

        def add(ch: str) -> None:
            new_text = self._text[: self.cursor_pos] + ch + self._text[self.cursor_pos :]
            if self.accept is not None and not self.accept(new_text, ch):
                return
            self._text = new_text
            self.cursor_pos += len(ch)

        def autocomplete_select(step: int) -> None:
            nonlocal current_text
            drop_down = self._autocomplete_list
            assert drop_down is not None
            count = len(drop_down)
            new_entry = drop_down.current_item + step
            if new_entry >= count:
                new_entry = 0
            elif new_entry < 0:
                new_entry = count - 1
            drop_down.set_current_item(new_entry)
            # Record the new text so the change is reported only once.
            current_text = drop_down.get_item_text(new_entry)[0]
            self.set_text(current_text)

        with self._lock:
            key = event.key
            alt = bool(event.modifiers & Modifier.ALT)
            if key == Key.RUNE:
                if alt and event.rune == "a":
                    home()
                elif alt and event.rune == "e":
                    end()
                elif alt and event.rune == "b":
                    move_word_left()
                elif alt and event.rune == "f":
                    move_word_right()
                else:
                    add(event.rune)
            elif key == Key.CTRL_U:
                self._text = ""
                self.cursor_pos = 0
            elif key == Key.CTRL_K:
                self._text = self._text[: self.cursor_pos]
            elif key == Key.CTRL_W:
                new_text = (
                    _LAST_WORD.sub("", self._text[: self.cursor_pos])
                    + self._text[self.cursor_pos :]
                )
                self.cursor_pos -= len(self._text) - len(new_text)
                self._text = new_text
            elif key in (Key.BACKSPACE, Key.BACKSPACE2):
                clusters = _clusters(self._text[: self.cursor_pos])
                if clusters:
                    start, length, _ = clusters[-1]
                    self._text = self._text[:start] + self._text[start + length :]
                    self.cursor_pos -= length
                if self.offset >= self.cursor_pos:
                    self.offset = 0
            elif key in (Key.DELETE, Key.CTRL_D):
                clusters = _clusters(self._text[self.cursor_pos :])
                if clusters:
                    length = clusters[0][1]
                    self._text = (
                        self._text[: self.cursor_pos] + self._text[self.cursor_pos + length :]
                    )
            elif key == Key.LEFT:
                move_word_left() if alt else move_left()
            elif key == Key.CTRL_B:
                move_left()
            elif key == Key.RIGHT:
                move_word_right() if alt else move_right()
            elif key == Key.CTRL_F:
                move_right()
            elif key in (Key.HOME, Key.CTRL_A):
                home()
            elif key in (Key.END, Key.CTRL_E):
                end()
            elif key == Key.ENTER:
                if self._autocomplete_list is not None:
                    autocomplete_select(0)
                    self._autocomplete_list = None
                else:
                    self._finish(key)
            elif key == Key.ESCAPE:
                if self._autocomplete_list is not None:
                    self._autocomplete_list = None
                else:
                    self._finish(key)
            elif key == Key.TAB:
                if self._autocomplete_list is not None:
                    autocomplete_select(0)
                else:
                    self._finish(key)
            elif key == Key.DOWN:
                if self._autocomplete_list is not None:
                    autocomplete_select(1)
                else:
                    self._finish(key)
            elif key in (Key.UP, Key.BACKTAB):
                if self._autocomplete_list is not None:
                    autocomplete_select(-1)
                else:
                    self._finish(key)

        if self._text != current_text:
            self.autocomplete()
            if self.on_changed is not None:
                self.on_changed(self._text)

    def handle_mouse(
        self, action: MouseAction, event: MouseEvent, set_focus: SetFocus
    ) -> tuple[bool, Optional[Primitive]]:
        x, y = event.position
        rect_y = self.inner_rect()[1]
        if not self.in_rect(x, y):
            return False, None

        if action == MouseAction.LEFT_CLICK and y == rect_y:
            if x >= self.field_x:
                screen_pos = 0
                for start, _, w in _clusters(self._text[self.offset :]):
                    if x - self.field_x < screen_pos + w:
                        self.cursor_pos = start + self.offset
                        break
                    screen_pos += w
                else:
                    self.cursor_pos = len(self._text)
            set_focus(self)
            return True, None
        return False, None