import pytest

from tuikit.pages import Pages
from tuikit.primitive import Key, KeyEvent, MouseAction, MouseEvent, Primitive, Screen


class Recorder(Primitive):
    def __init__(self):
        super().__init__()
        self.draws = 0
        self.keys = []

    def draw(self, screen):
        self.draws += 1

    def handle_key(self, event, set_focus):
        self.keys.append(event)


class FocusManager:
    def __init__(self):
        self.current = None

    def __call__(self, primitive):
        if self.current is not None:
            self.current.blur()
        primitive.focus(self)
        self.current = primitive


@pytest.fixture
def three():
    pages = Pages()
    a, b, c = Recorder(), Recorder(), Recorder()
    pages.add_page("a", a, True, True)
    pages.add_page("b", b, True, False)
    pages.add_page("c", c, True, False)
    return pages, a, b, c


def test_add_and_has_page(three):
    pages, a, b, c = three
    assert len(pages) == 3
    assert pages.has_page("b")
    assert not pages.has_page("missing")


def test_add_same_name_replaces():
    pages = Pages()
    first, second = Recorder(), Recorder()
    pages.add_page("p", first)
    pages.add_page("p", second)
    assert len(pages) == 1
    assert pages.front_page() == ("p", second)


def test_front_page_empty():
    assert Pages().front_page() == ("", None)


def test_changed_callback_counts():
    pages = Pages()
    calls = []
    pages.on_changed = lambda: calls.append(1)
    pages.add_page("a", Recorder())
    pages.hide_page("a")
    pages.show_page("a")
    assert len(calls) == 3


def test_remove_only_visible_shows_last(three):
    pages, a, b, c = three
    pages.remove_page("a")
    assert pages.front_page() == ("c", c)
    assert not pages.has_page("a")


def test_remove_keeps_other_visible(three):
    pages, a, b, c = three
    pages.show_page("b")
    pages.remove_page("a")
    assert pages.front_page() == ("b", b)


def test_switch_to_page(three):
    pages, a, b, c = three
    pages.show_page("c")
    pages.switch_to_page("b")
    assert pages.front_page() == ("b", b)
    pages.hide_page("b")
    assert pages.front_page() == ("", None)


def test_send_to_front_and_back(three):
    pages, a, b, c = three
    pages.send_to_front("a")
    assert pages.names == ["b", "c", "a"]
    pages.send_to_back("c")
    assert pages.names == ["c", "b", "a"]


def test_add_and_switch(three):
    pages, a, b, c = three
    d = Recorder()
    pages.add_and_switch_to_page("d", d)
    assert pages.front_page() == ("d", d)
    pages.hide_page("d")
    assert pages.front_page() == ("", None)


def test_focus_delegates_to_top_visible(three):
    pages, a, b, c = three
    manager = FocusManager()
    pages.focus(manager)
    assert manager.current is a
    assert pages.has_focus()


def test_focus_without_delegate():
    pages = Pages()
    pages.add_page("a", Recorder())
    pages.focus(None)
    assert not pages.has_focus()


def test_show_page_moves_focus(three):
    pages, a, b, c = three
    manager = FocusManager()
    pages.focus(manager)
    pages.show_page("c")
    assert manager.current is c
    assert not a.has_focus()


def test_draw_resizes_visible_pages():
    pages = Pages()
    resized, fixed, hidden = Recorder(), Recorder(), Recorder()
    fixed.set_rect(1, 1, 2, 2)
    pages.add_page("r", resized, True, True)
    pages.add_page("f", fixed, False, True)
    pages.add_page("h", hidden, True, False)
    pages.set_rect(0, 0, 10, 5)
    pages.draw(Screen(10, 5))
    assert resized.get_rect() == (0, 0, 10, 5)
    assert fixed.get_rect() == (1, 1, 2, 2)
    assert (resized.draws, fixed.draws, hidden.draws) == (1, 1, 0)


def test_handle_key_routes_to_focused(three):
    pages, a, b, c = three
    manager = FocusManager()
    pages.focus(manager)
    event = KeyEvent(Key.ENTER)
    pages.handle_key(event, manager)
    assert a.keys == [event]
    assert b.keys == []


def test_handle_mouse_topmost_visible_first():
    pages = Pages()
    back, front = Primitive(), Primitive()
    pages.add_page("back", back)
    pages.add_page("front", front)
    pages.set_rect(0, 0, 10, 5)
    pages.draw(Screen(10, 5))
    manager = FocusManager()
    result = pages.handle_mouse(MouseAction.LEFT_CLICK, MouseEvent(2, 2), manager)
    assert result == (True, None)
    assert manager.current is front


def test_handle_mouse_outside():
    pages = Pages()
    pages.add_page("p", Primitive())
    pages.set_rect(0, 0, 4, 4)
    manager = FocusManager()
    assert pages.handle_mouse(MouseAction.LEFT_CLICK, MouseEvent(8, 8), manager) == (False, None)
    assert manager.current is None