import pytest

from tuikit.listview import ListView
from tuikit.primitive import Key, KeyEvent, MouseAction, MouseEvent, Screen


def _no_focus(primitive):
    pass


def _make(*texts):
    lv = ListView()
    for text in texts:
        lv.add_item(text, "s" + text)
    return lv


def _press(lv, key, rune=""):
    lv.handle_key(KeyEvent(key, rune), _no_focus)


def test_first_item_fires_changed():
    calls = []
    lv = ListView()
    lv.on_changed = lambda *args: calls.append(args)
    lv.add_item("one", "first", "o")
    lv.add_item("two")
    assert calls == [(0, "one", "first", "o")]
    assert len(lv) == 2


def test_insert_shifts_current_item():
    lv = _make("a", "b")
    lv.set_current_item(1)
    lv.insert_item(0, "c")
    assert lv.current_item == 2
    assert lv.get_item_text(0) == ("c", "")
    assert lv.get_item_text(2) == ("b", "sb")


def test_insert_negative_and_out_of_range():
    lv = _make("a", "b")
    lv.insert_item(-2, "before_last")
    lv.insert_item(100, "end")
    lv.insert_item(-100, "start")
    assert [lv.get_item_text(i)[0] for i in range(len(lv))] == [
        "start",
        "a",
        "before_last",
        "b",
        "end",
    ]


def test_set_current_item_negative_and_clamped():
    lv = _make("a", "b", "c")
    lv.set_current_item(-1)
    assert lv.current_item == 2
    lv.set_current_item(50)
    assert lv.current_item == 2
    lv.set_current_item(-50)
    assert lv.current_item == 0


def test_set_current_item_fires_changed_only_on_change():
    calls = []
    lv = _make("a", "b")
    lv.on_changed = lambda *args: calls.append(args[0])
    lv.set_current_item(0)
    lv.set_current_item(1)
    lv.set_current_item(1)
    assert calls == [1]


def test_remove_current_item_fires_changed():
    calls = []
    lv = _make("a", "b", "c")
    lv.set_current_item(2)
    lv.on_changed = lambda *args: calls.append(args[:2])
    lv.remove_item(2)
    assert lv.current_item == 1
    assert calls == [(1, "b")]
    assert len(lv) == 2


def test_remove_before_current_shifts_without_event():
    calls = []
    lv = _make("a", "b", "c")
    lv.set_current_item(2)
    lv.on_changed = lambda *args: calls.append(args)
    lv.remove_item(0)
    assert lv.current_item == 1
    assert lv.get_item_text(lv.current_item)[0] == "c"
    assert calls == []


def test_remove_from_empty_list_is_noop():
    lv = ListView()
    lv.remove_item(0)
    assert len(lv) == 0


def test_get_item_text_out_of_range():
    lv = _make("a")
    with pytest.raises(IndexError):
        lv.get_item_text(1)
    with pytest.raises(IndexError):
        lv.set_item_text(-1, "x", "y")


def test_set_item_text_round_trip():
    lv = _make("a")
    lv.set_item_text(0, "main", "secondary")
    assert lv.get_item_text(0) == ("main", "secondary")


def test_find_items():
    lv = ListView()
    lv.add_item("Apple", "fruit")
    lv.add_item("Carrot", "vegetable")
    lv.add_item("apple pie", "dessert")
    assert lv.find_items("apple", "") == [2]
    assert lv.find_items("apple", "", ignore_case=True) == [0, 2]
    assert lv.find_items("", "") == []
    assert lv.find_items("Apple", "fruit", must_contain_both=True) == [0]
    assert lv.find_items("Carrot", "fruit") == [0, 1]


def test_clear_resets_selection():
    lv = _make("a", "b")
    lv.set_current_item(1)
    lv.clear()
    assert len(lv) == 0
    assert lv.current_item == 0


def test_navigation_wraps_around():
    lv = _make("a", "b", "c")
    _press(lv, Key.UP)
    assert lv.current_item == 2
    _press(lv, Key.DOWN)
    assert lv.current_item == 0


def test_navigation_without_wrap():
    lv = _make("a", "b", "c")
    lv.wrap_around = False
    _press(lv, Key.UP)
    assert lv.current_item == 0
    _press(lv, Key.END)
    _press(lv, Key.DOWN)
    assert lv.current_item == 2


def test_page_down_clamps_to_last():
    lv = _make("a", "b", "c")
    lv.set_rect(0, 0, 10, 10)
    _press(lv, Key.PGDN)
    assert lv.current_item == len(lv) - 1
    _press(lv, Key.PGUP)
    assert lv.current_item == 0


def test_enter_selects_item():
    events = []
    lv = ListView()
    lv.add_item("a", "", "", lambda: events.append("item"))
    lv.on_selected = lambda *args: events.append(args)
    _press(lv, Key.ENTER)
    assert events == ["item", (0, "a", "", "")]


def test_shortcut_rune_selects_item():
    selected = []
    lv = ListView()
    lv.add_item("a", "", "x")
    lv.add_item("b", "", "y")
    lv.on_selected = lambda *args: selected.append(args[0])
    _press(lv, Key.RUNE, "y")
    assert lv.current_item == 1
    assert selected == [1]
    _press(lv, Key.RUNE, "q")
    assert selected == [1]
    _press(lv, Key.RUNE, " ")
    assert selected == [1, 1]


def test_escape_calls_done():
    done = []
    lv = ListView()
    lv.on_done = lambda: done.append(True)
    _press(lv, Key.ESCAPE)
    assert done == [True]


def test_draw_shows_shortcut_and_text():
    lv = ListView()
    lv.add_item("first", "second", "a")
    lv.set_rect(0, 0, 20, 4)
    screen = Screen(20, 4)
    lv.draw(screen)
    assert screen.row_text(0).startswith("(a) first")
    assert screen.row_text(1)[4:10] == "second"


def test_draw_highlights_selected_text():
    lv = ListView()
    lv.add_item("first")
    lv.set_rect(0, 0, 20, 2)
    screen = Screen(20, 2)
    lv.draw(screen)
    _, style = screen.get_content(0, 0)
    assert style.background == lv.selected_background_color
    assert style.foreground == lv.selected_text_color
    _, after = screen.get_content(len("first"), 0)
    assert after.background == lv.background_color


def test_draw_keeps_current_item_visible():
    lv = _make("a", "b", "c", "d", "e")
    lv.show_secondary_text = False
    lv.set_rect(0, 0, 10, 2)
    lv.set_current_item(4)
    lv.draw(Screen(10, 2))
    assert lv.item_offset <= lv.current_item < lv.item_offset + 2
    _press(lv, Key.HOME)
    lv.draw(Screen(10, 2))
    assert lv.item_offset == 0


def test_horizontal_scroll_when_overflowing():
    lv = ListView()
    lv.show_secondary_text = False
    lv.add_item("abcdefghij")
    lv.set_rect(0, 0, 5, 2)
    screen = Screen(5, 2)
    lv.draw(screen)
    assert screen.row_text(0) == "abcde"
    _press(lv, Key.RIGHT)
    assert lv.horizontal_offset == 2
    assert lv.current_item == 0
    screen = Screen(5, 2)
    lv.draw(screen)
    assert screen.row_text(0) == "cdefg"
    _press(lv, Key.LEFT)
    assert lv.horizontal_offset == 0


def test_horizontal_offset_reset_keeps_text_in_view():
    lv = ListView()
    lv.show_secondary_text = False
    lv.add_item("abcdefghij")
    lv.set_rect(0, 0, 5, 1)
    lv.horizontal_offset = 8
    screen = Screen(5, 1)
    lv.draw(screen)
    assert screen.row_text(0) == "fghij"


def test_index_at_point():
    lv = _make("a", "b", "c")
    lv.set_rect(0, 0, 10, 6)
    assert lv.index_at_point(0, 0) == 0
    assert lv.index_at_point(0, 3) == 1
    assert lv.index_at_point(0, 6) == -1
    lv.show_secondary_text = False
    assert lv.index_at_point(0, 2) == 2
    assert lv.index_at_point(0, 3) == -1


def test_mouse_click_selects_item():
    selected, focused = [], []
    lv = _make("a", "b", "c")
    lv.set_rect(0, 0, 10, 6)
    lv.on_selected = lambda *args: selected.append(args)
    consumed, capture = lv.handle_mouse(MouseAction.LEFT_CLICK, MouseEvent(2, 3), focused.append)
    assert consumed is True
    assert capture is None
    assert focused == [lv]
    assert lv.current_item == 1
    assert selected == [(1, "b", "sb", "")]


def test_mouse_outside_is_not_consumed():
    lv = _make("a")
    lv.set_rect(0, 0, 10, 6)
    consumed, _ = lv.handle_mouse(MouseAction.LEFT_CLICK, MouseEvent(20, 20), _no_focus)
    assert consumed is False
    assert lv.current_item == 0


def test_mouse_scrolling():
    lv = _make("a", "b", "c", "d", "e")
    lv.set_rect(0, 0, 10, 4)
    lv.handle_mouse(MouseAction.SCROLL_DOWN, MouseEvent(0, 0), _no_focus)
    assert lv.item_offset == 1
    lv.handle_mouse(MouseAction.SCROLL_UP, MouseEvent(0, 0), _no_focus)
    lv.handle_mouse(MouseAction.SCROLL_UP, MouseEvent(0, 0), _no_focus)
    assert lv.item_offset == 0