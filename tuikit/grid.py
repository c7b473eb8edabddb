"""A layout that places primitives into the cells of a grid."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .primitive import (
    Key,
    KeyEvent,
    MouseAction,
    MouseEvent,
    Primitive,
    Screen,
    SetFocus,
    Style,
)
from .semigraphics import (
    BOX_DRAWINGS_LIGHT_DOWN_AND_LEFT,
    BOX_DRAWINGS_LIGHT_DOWN_AND_RIGHT,
    BOX_DRAWINGS_LIGHT_HORIZONTAL,
    BOX_DRAWINGS_LIGHT_UP_AND_LEFT,
    BOX_DRAWINGS_LIGHT_UP_AND_RIGHT,
    BOX_DRAWINGS_LIGHT_VERTICAL,
    print_joined_semigraphics,
)
from .styles import STYLES, Color

# Row offset used to scroll to the very end; it is clamped on the next draw.
_MAX_OFFSET = 2**31 - 1


@dataclass
class _GridItem:
    item: Optional[Primitive]
    row: int
    column: int
    width: int
    height: int
    min_grid_height: int
    min_grid_width: int
    focus: bool
    visible: bool = False
    x: int = 0
    y: int = 0
    w: int = 0
    h: int = 0


def _div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b > 0) else -quotient


def _layout_sizes(
    definitions: list[int], count: int, available: int, minimum: int, gap: int, borders: bool
) -> list[int]:
    """Turn row or column definitions into absolute sizes."""
    sizes = [0] * count
    remaining = available
    proportional = 0
    for index, value in enumerate(definitions):
        if value > 0:
            value = max(value, minimum)
            remaining -= value
            sizes[index] = value
        else:
            proportional += 1 if value == 0 else -value
    if borders:
        remaining -= count + 1
    else:
        remaining -= (count - 1) * gap
    if count > len(definitions):
        proportional += count - len(definitions)

    for index in range(count):
        value = definitions[index] if index < len(definitions) else 0
        if value > 0:
            continue
        share = 1 if value == 0 else -value
        size = _div(share * remaining, proportional)
        remaining -= size
        proportional -= share
        sizes[index] = max(size, minimum)
    return sizes


def _layout_positions(sizes: list[int], gap: int, borders: bool) -> list[int]:
    """Return the start position of each row or column."""
    position = 1 if borders else 0
    step = 1 if borders else gap
    positions = []
    for size in sizes:
        positions.append(position)
        position += size + step
    return positions


def _offset_range(positions: list[int], offset: int, limit: int) -> tuple[int, int]:
    """Return the first and last index allowed as a scroll offset."""
    first, last = 0, 0
    for index, pos in enumerate(positions):
        if pos - offset < 0:
            first = index + 1
        if pos - offset < limit:
            last = index
    return first, last


class Grid(Primitive):
    """Places primitives into rows and columns of fixed or proportional size.

    Row and column definitions above 0 are absolute sizes; 0 and negative
    values are proportions of the remaining space, 0 counting like -1. When
    the grid has focus itself, arrow keys (and g, G, j, k, h, l) scroll it.
    """

    def __init__(self) -> None:
        super().__init__()
        self.transparent = True
        self._items: list[_GridItem] = []
        self.rows: list[int] = []
        self.columns: list[int] = []
        self.min_width = 0
        self.min_height = 0
        self.gap_rows = 0
        self.gap_columns = 0
        self.row_offset = 0
        self.column_offset = 0
        self.borders = False
        self.borders_color: Color = STYLES.graphics_color

    def set_columns(self, *args: int) -> Grid:
        """Define the column widths, leftmost first."""
        self.columns = list(args)
        return self

    def set_rows(self, *args: int) -> Grid:
        """Define the row heights, topmost first."""
        self.rows = list(args)
        return self

    def set_size(self, num_rows: int, num_columns: int, row_size: int, column_size: int) -> Grid:
        """Give all rows one size and all columns another."""
        self.rows = [row_size] * num_rows
        self.columns = [column_size] * num_columns
        return self

    def set_min_size(self, row: int, column: int) -> Grid:
        """Set the minimum row height and column width."""
        if row < 0 or column < 0:
            raise ValueError("invalid minimum row/column size")
        self.min_height, self.min_width = row, column
        return self

    def set_gap(self, row: int, column: int) -> Grid:
        """Set the gaps between rows and columns (ignored with borders)."""
        if row < 0 or column < 0:
            raise ValueError("invalid gap size")
        self.gap_rows, self.gap_columns = row, column
        return self

    def add_item(
        self,
        item: Optional[Primitive],
        row: int,
        column: int,
        row_span: int = 1,
        col_span: int = 1,
        min_grid_height: int = 0,
        min_grid_width: int = 0,
        focus: bool = False,
    ) -> Grid:
        """Place a primitive with its top-left corner at (row, column).

        The same primitive may be added several times; the entry whose minimum
        grid sizes apply and are highest is used. A span of 0 hides it.
        """
        self._items.append(
            _GridItem(
                item=item,
                row=row,
                column=column,
                width=col_span,
                height=row_span,
                min_grid_height=min_grid_height,
                min_grid_width=min_grid_width,
                focus=focus,
            )
        )
        return self

    def remove_item(self, item: Optional[Primitive]) -> Grid:
        """Remove every entry holding ``item``, keeping the order of the rest."""
        self._items = [entry for entry in self._items if entry.item is not item]
        return self

    def clear(self) -> Grid:
        self._items = []
        return self

    def focus(self, delegate: SetFocus) -> None:
        for entry in self._items:
            if entry.focus:
                delegate(entry.item)
                return
        self._has_focus = True

    def blur(self) -> None:
        self._has_focus = False

    def has_focus(self) -> bool:
        for entry in self._items:
            if entry.visible and entry.item is not None and entry.item.has_focus():
                return True
        return self._has_focus

    def handle_key(self, event: KeyEvent, set_focus: SetFocus) -> None:
        if not self._has_focus:
            for entry in self._items:
                if entry.item is not None and entry.item.has_focus():
                    entry.item.handle_key(event, set_focus)
                    return
            return

        key = event.key
        if key == Key.RUNE:
            rune = event.rune
            if rune == "g":
                self.row_offset, self.column_offset = 0, 0
            elif rune == "G":
                self.row_offset = _MAX_OFFSET
            elif rune == "j":
                self.row_offset += 1
            elif rune == "k":
                self.row_offset -= 1
            elif rune == "h":
                self.column_offset -= 1
            elif rune == "l":
                self.column_offset += 1
        elif key == Key.HOME:
            self.row_offset, self.column_offset = 0, 0
        elif key == Key.END:
            self.row_offset = _MAX_OFFSET
        elif key == Key.UP:
            self.row_offset -= 1
        elif key == Key.DOWN:
            self.row_offset += 1
        elif key == Key.LEFT:
            self.column_offset -= 1
        elif key == Key.RIGHT:
            self.column_offset += 1

    def draw(self, screen: Screen) -> None:
        super().draw(screen)
        x, y, width, height = self.inner_rect()
        screen_width, screen_height = screen.size()

        # Pick the entry that applies for each primitive.
        items: dict[Primitive, _GridItem] = {}
        for entry in self._items:
            entry.visible = False
            if (
                entry.item is None
                or entry.width <= 0
                or entry.height <= 0
                or width < entry.min_grid_width
                or height < entry.min_grid_height
            ):
                continue
            previous = items.get(entry.item)
            if (
                previous is not None
                and entry.min_grid_width < previous.min_grid_width
                and entry.min_grid_height < previous.min_grid_height
            ):
                continue
            items[entry.item] = entry

        rows = max([len(self.rows)] + [e.row + e.height for e in items.values()])
        columns = max([len(self.columns)] + [e.column + e.width for e in items.values()])
        if rows == 0 or columns == 0:
            return

        row_heights = _layout_sizes(
            self.rows, rows, height, self.min_height, self.gap_rows, self.borders
        )
        column_widths = _layout_sizes(
            self.columns, columns, width, self.min_width, self.gap_columns, self.borders
        )
        row_pos = _layout_positions(row_heights, self.gap_rows, self.borders)
        column_pos = _layout_positions(column_widths, self.gap_columns, self.borders)

        focused: Optional[_GridItem] = None
        for primitive, entry in items.items():
            pw = sum(column_widths[entry.column : entry.column + entry.width])
            ph = sum(row_heights[entry.row : entry.row + entry.height])
            if self.borders:
                pw += entry.width - 1
                ph += entry.height - 1
            else:
                pw += (entry.width - 1) * self.gap_columns
                ph += (entry.height - 1) * self.gap_rows
            entry.x, entry.y = column_pos[entry.column], row_pos[entry.row]
            entry.w, entry.h = pw, ph
            entry.visible = True
            if primitive.has_focus():
                focused = entry

        add = 1 if self.borders else self.gap_rows
        offset_y = sum(h + add for index, h in enumerate(row_heights) if index < self.row_offset)
        add = 1 if self.borders else self.gap_columns
        offset_x = sum(
            w + add for index, w in enumerate(column_widths) if index < self.column_offset
        )

        # Line up the last row and column with the end of the area.
        border = 1 if self.borders else 0
        if row_pos[-1] + row_heights[-1] + border - offset_y < height:
            offset_y = row_pos[-1] - height + row_heights[-1] + border
        if column_pos[-1] + column_widths[-1] + border - offset_x < width:
            offset_x = column_pos[-1] - width + column_widths[-1] + border

        # Keep the focused item in view.
        if focused is not None:
            if focused.y + focused.h - offset_y >= height:
                offset_y = focused.y - height + focused.h
            if focused.y - offset_y < 0:
                offset_y = focused.y
            if focused.x + focused.w - offset_x >= width:
                offset_x = focused.x - width + focused.w
            if focused.x - offset_x < 0:
                offset_x = focused.x

        first, last = _offset_range(row_pos, offset_y, height)
        self.row_offset = min(max(self.row_offset, first), last)
        first, last = _offset_range(column_pos, offset_x, width)
        self.column_offset = min(max(self.column_offset, first), last)

        border_style = Style(foreground=self.borders_color, background=self.background_color)

        def put(bx: int, by: int, ch: str) -> None:
            if 0 <= bx < screen_width and 0 <= by < screen_height:
                print_joined_semigraphics(screen, bx, by, ch, border_style)

        deferred: Optional[Primitive] = None
        for primitive, entry in items.items():
            if not entry.visible:
                continue
            entry.x -= offset_x
            entry.y -= offset_y
            if (
                entry.x >= width
                or entry.x + entry.w <= 0
                or entry.y >= height
                or entry.y + entry.h <= 0
            ):
                entry.visible = False
                continue
            if entry.x + entry.w > width:
                entry.w = width - entry.x
            if entry.y + entry.h > height:
                entry.h = height - entry.y
            if entry.x < 0:
                entry.w += entry.x
                entry.x = 0
            if entry.y < 0:
                entry.h += entry.y
                entry.y = 0
            if entry.w <= 0 or entry.h <= 0:
                entry.visible = False
                continue
            entry.x += x
            entry.y += y
            primitive.set_rect(entry.x, entry.y, entry.w, entry.h)

            if entry is focused:
                deferred = primitive
            else:
                primitive.draw(screen)

            if self.borders:
                left, right = entry.x - 1, entry.x + entry.w
                top, bottom = entry.y - 1, entry.y + entry.h
                for bx in range(entry.x, entry.x + entry.w):
                    put(bx, top, BOX_DRAWINGS_LIGHT_HORIZONTAL)
                    put(bx, bottom, BOX_DRAWINGS_LIGHT_HORIZONTAL)
                for by in range(entry.y, entry.y + entry.h):
                    put(left, by, BOX_DRAWINGS_LIGHT_VERTICAL)
                    put(right, by, BOX_DRAWINGS_LIGHT_VERTICAL)
                put(left, top, BOX_DRAWINGS_LIGHT_DOWN_AND_RIGHT)
                put(right, top, BOX_DRAWINGS_LIGHT_DOWN_AND_LEFT)
                put(left, bottom, BOX_DRAWINGS_LIGHT_UP_AND_RIGHT)
                put(right, bottom, BOX_DRAWINGS_LIGHT_UP_AND_LEFT)

        # The focused primitive is drawn last so it stays on top.
        if deferred is not None:
            deferred.draw(screen)

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