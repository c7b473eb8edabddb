"""A container of named primitives stacked on top of each other."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from .primitive import KeyEvent, MouseAction, MouseEvent, Primitive, Screen, SetFocus


@dataclass
class _Page:
    name: str
    item: Primitive
    resize: bool
    visible: bool


class Pages(Primitive):
    """Named pages drawn back to front, any number of which may be visible.

    ``on_changed`` is called whenever the visibility or the order of pages
    changes, which can be used to trigger a redraw.
    """

    def __init__(self) -> None:
        super().__init__()
        self._pages: list[_Page] = []
        self._set_focus: Optional[SetFocus] = None
        self.on_changed: Optional[Callable[[], None]] = None

    def __len__(self) -> int:
        return len(self._pages)

    @property
    def names(self) -> list[str]:
        """The page names, from back to front."""
        return [page.name for page in self._pages]

    def _changed(self) -> None:
        if self.on_changed is not None:
            self.on_changed()

    def _refocus(self) -> None:
        if self.has_focus():
            self.focus(self._set_focus)

    def _find(self, name: str) -> Optional[int]:
        for index, page in enumerate(self._pages):
            if page.name == name:
                return index
        return None

    def add_page(
        self, name: str, item: Primitive, resize: bool = True, visible: bool = True
    ) -> Pages:
        """Add a page, replacing any page of the same name.

        With ``resize`` the primitive is given the area of the pages whenever
        they are drawn.
        """
        had_focus = self.has_focus()
        index = self._find(name)
        if index is not None:
            del self._pages[index]
        self._pages.append(_Page(name, item, resize, visible))
        self._changed()
        if had_focus:
            self.focus(self._set_focus)
        return self

    def add_and_switch_to_page(self, name: str, item: Primitive, resize: bool = True) -> Pages:
        """Add a page and make it the only visible one."""
        self.add_page(name, item, resize, True)
        self.switch_to_page(name)
        return self

    def remove_page(self, name: str) -> Pages:
        """Remove a page. If it was the only visible page, the last page is shown."""
        had_focus = self.has_focus()
        was_visible = False
        index = self._find(name)
        if index is not None:
            page = self._pages.pop(index)
            was_visible = page.visible
            if page.visible:
                self._changed()
        if was_visible and self._pages:
            if not any(page.visible for page in self._pages[:-1]):
                self._pages[-1].visible = True
        if had_focus:
            self.focus(self._set_focus)
        return self

    def has_page(self, name: str) -> bool:
        return self._find(name) is not None

    def show_page(self, name: str) -> Pages:
        """Make a page visible in addition to the pages already visible."""
        index = self._find(name)
        if index is not None:
            self._pages[index].visible = True
            self._changed()
        self._refocus()
        return self

    def hide_page(self, name: str) -> Pages:
        """Make a page invisible."""
        index = self._find(name)
        if index is not None:
            self._pages[index].visible = False
            self._changed()
        self._refocus()
        return self

    def switch_to_page(self, name: str) -> Pages:
        """Make a page visible and all others invisible."""
        for page in self._pages:
            page.visible = page.name == name
        self._changed()
        self._refocus()
        return self

    def send_to_front(self, name: str) -> Pages:
        """Move a page to the end so that it is drawn last."""
        index = self._find(name)
        if index is not None:
            page = self._pages.pop(index)
            self._pages.append(page)
            if page.visible:
                self._changed()
        self._refocus()
        return self

    def send_to_back(self, name: str) -> Pages:
        """Move a page to the beginning so that it is drawn first."""
        index = self._find(name)
        if index is not None:
            page = self._pages.pop(index)
            self._pages.insert(0, page)
            if page.visible:
                self._changed()
        self._refocus()
        return self

    def front_page(self) -> tuple[str, Optional[Primitive]]:
        """Return the name and primitive of the front-most visible page.

        Returns ("", None) when no page is visible.
        """
        for page in reversed(self._pages):
            if page.visible:
                return page.name, page.item
        return "", None

    def has_focus(self) -> bool:
        return any(page.item.has_focus() for page in self._pages)

    def focus(self, delegate: Optional[SetFocus]) -> None:
        if delegate is None:
            return
        self._set_focus = delegate
        _, top = self.front_page()
        if top is not None:
            delegate(top)

    def draw(self, screen: Screen) -> None:
        super().draw(screen)
        for page in self._pages:
            if not page.visible:
                continue
            if page.resize:
                page.item.set_rect(*self.inner_rect())
            page.item.draw(screen)

    def handle_key(self, event: KeyEvent, set_focus: SetFocus) -> None:
        for page in self._pages:
            if page.item.has_focus():
                page.item.handle_key(event, set_focus)
                return

    def handle_mouse(
        self, action: MouseAction, event: MouseEvent, set_focus: SetFocus
    ) -> tuple[bool, Optional[Primitive]]:
        if not self.in_rect(*event.position):
            return False, None
        consumed, capture = False, None
        for page in reversed(self._pages):
            if not page.visible:
                continue
            consumed, capture = page.item.handle_mouse(action, event, set_focus)
            if consumed:
                break
        return consumed, capture