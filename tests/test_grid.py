import pytest

from tuikit.grid import Grid
from tuikit.primitive import Key, KeyEvent, MouseAction, MouseEvent, Primitive, Screen


class Recorder(Primitive):
    def __init__(self):
        super().__init__()
        self.keys = []

    def handle_key(self, event, set_focus):
        self.keys.append(event)


def draw(grid, width, height):
    screen = Screen(width, height)
    grid.set_rect(0, 0, width, height)
    grid.draw(screen)
    return screen


def test_documented_column_widths():
    grid = Grid().set_columns(30, 10, -1, -1, -2)
    cells = [Primitive() for _ in range(5)]
    for column, cell in enumerate(cells):
        grid.add_item(cell, 0, column, 1, 1)
    draw(grid, 100, 10)
    assert [cell.get_rect()[2] for cell in cells] == [30, 10, 15, 15, 30]
    assert cells[4].get_rect()[0] == 70


def test_documented_column_widths_with_extra_columns():
    grid = Grid().set_columns(30, 10, -1, -1, -2)
    cells = [Primitive() for _ in range(7)]
    for column, cell in enumerate(cells):
        grid.add_item(cell, 0, column, 1, 1)
    draw(grid, 100, 10)
    widths = [cell.get_rect()[2] for cell in cells]
    assert widths == [30, 10, 10, 10, 20, 10, 10]
    assert sum(widths) == 100


def test_positions_follow_widths_without_gap():
    grid = Grid().set_columns(0, 0, 0)
    cells = [Primitive() for _ in range(3)]
    for column, cell in enumerate(cells):
        grid.add_item(cell, 0, column)
    draw(grid, 30, 4)
    for left, right in zip(cells, cells[1:]):
        lx, _, lw, _ = left.get_rect()
        assert right.get_rect()[0] == lx + lw


def test_gap_separates_items():
    grid = Grid().set_gap(0, 1)
    first, second = Primitive(), Primitive()
    grid.add_item(first, 0, 0).add_item(second, 0, 1)
    draw(grid, 9, 3)
    fx, _, fw, _ = first.get_rect()
    assert second.get_rect()[0] == fx + fw + 1
    assert first.get_rect()[2] == second.get_rect()[2]


def test_negative_min_size_raises():
    with pytest.raises(ValueError):
        Grid().set_min_size(-1, 0)


def test_negative_gap_raises():
    with pytest.raises(ValueError):
        Grid().set_gap(0, -2)


def test_set_size_fills_definitions():
    grid = Grid().set_size(2, 3, 4, -1)
    assert grid.rows == [4, 4]
    assert grid.columns == [-1, -1, -1]


def test_zero_span_item_is_not_placed():
    grid = Grid()
    shown, hidden = Primitive(), Primitive()
    hidden.set_rect(5, 5, 5, 5)
    grid.add_item(shown, 0, 0).add_item(hidden, 0, 1, 0, 1)
    draw(grid, 20, 5)
    assert hidden.get_rect() == (5, 5, 5, 5)
    assert shown.get_rect() == (0, 0, 20, 5)


def test_remove_item_removes_all_entries():
    grid = Grid()
    cell = Primitive()
    cell.set_rect(1, 2, 3, 4)
    grid.add_item(cell, 0, 0).add_item(cell, 1, 1, 1, 1, 0, 50)
    grid.remove_item(cell)
    draw(grid, 20, 5)
    assert cell.get_rect() == (1, 2, 3, 4)


def test_clear_removes_items():
    grid = Grid()
    cell = Primitive()
    cell.set_rect(1, 1, 1, 1)
    grid.add_item(cell, 0, 0).clear()
    draw(grid, 10, 10)
    assert cell.get_rect() == (1, 1, 1, 1)


def test_min_grid_width_selects_entry():
    grid = Grid().set_columns(0, 0)
    cell = Primitive()
    grid.add_item(cell, 0, 0, 1, 1, 0, 0)
    grid.add_item(cell, 0, 1, 1, 1, 0, 50)
    draw(grid, 20, 4)
    assert cell.get_rect() == (0, 0, 10, 4)
    draw(grid, 60, 4)
    assert cell.get_rect() == (30, 0, 30, 4)


def test_focus_delegates_to_focus_item():
    grid = Grid()
    first, second = Primitive(), Primitive()
    grid.add_item(first, 0, 0).add_item(second, 0, 1, focus=True)
    delegated = []
    grid.focus(delegated.append)
    assert delegated == [second]
    assert grid.has_focus() is False


def test_focus_without_focus_items_takes_focus_and_blur_releases():
    grid = Grid().add_item(Primitive(), 0, 0)
    grid.focus(lambda p: None)
    assert grid.has_focus() is True
    grid.blur()
    assert grid.has_focus() is False


def test_has_focus_from_visible_child():
    grid = Grid()
    child = Primitive()
    grid.add_item(child, 0, 0)
    child.focus(lambda p: None)
    assert grid.has_focus() is False
    draw(grid, 10, 3)
    assert grid.has_focus() is True


def test_keys_scroll_when_grid_has_focus():
    grid = Grid()
    grid.focus(lambda p: None)
    grid.handle_key(KeyEvent(Key.DOWN), lambda p: None)
    grid.handle_key(KeyEvent(Key.RUNE, "l"), lambda p: None)
    assert (grid.row_offset, grid.column_offset) == (1, 1)
    grid.handle_key(KeyEvent(Key.RUNE, "k"), lambda p: None)
    assert grid.row_offset == 0
    grid.handle_key(KeyEvent(Key.END), lambda p: None)
    assert grid.row_offset == 2147483647
    grid.handle_key(KeyEvent(Key.RUNE, "g"), lambda p: None)
    assert (grid.row_offset, grid.column_offset) == (0, 0)


def test_draw_clamps_row_offset():
    grid = Grid().set_rows(5, 5, 5)
    for row in range(3):
        grid.add_item(Primitive(), row, 0)
    grid.focus(lambda p: None)
    grid.handle_key(KeyEvent(Key.END), lambda p: None)
    draw(grid, 10, 5)
    assert grid.row_offset == len(grid.rows) - 1


def test_focused_child_scrolled_into_view():
    grid = Grid().set_rows(5, 5, 5)
    child = Primitive()
    grid.add_item(Primitive(), 0, 0).add_item(Primitive(), 1, 0).add_item(child, 2, 0)
    child.focus(lambda p: None)
    draw(grid, 10, 5)
    assert child.get_rect() == (0, 0, 10, 5)
    assert grid.row_offset == 2


def test_keys_forwarded_to_focused_child():
    grid = Grid()
    child = Recorder()
    grid.add_item(child, 0, 0)
    child.focus(lambda p: None)
    event = KeyEvent(Key.RUNE, "x")
    grid.handle_key(event, lambda p: None)
    assert child.keys == [event]
    assert grid.row_offset == 0


def test_borders_are_drawn_and_joined():
    grid = Grid()
    grid.borders = True
    grid.add_item(Primitive(), 0, 0).add_item(Primitive(), 0, 1)
    screen = draw(grid, 11, 3)
    assert screen.row_text(0) == "┌────┬────┐"
    assert screen.row_text(1) == "│    │    │"
    assert screen.row_text(2) == "└────┴────┘"


def test_mouse_click_reaches_child():
    grid = Grid()
    child = Primitive()
    grid.add_item(child, 0, 0)
    draw(grid, 10, 5)
    focused = []
    result = grid.handle_mouse(MouseAction.LEFT_CLICK, MouseEvent(3, 2), focused.append)
    assert result == (True, None)
    assert focused == [child]


def test_mouse_outside_is_ignored():
    grid = Grid()
    grid.add_item(Primitive(), 0, 0)
    draw(grid, 10, 5)
    focused = []
    result = grid.handle_mouse(MouseAction.LEFT_CLICK, MouseEvent(20, 20), focused.append)
    assert result == (False, None)
    assert focused == []