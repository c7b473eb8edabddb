# tuikit

Building blocks for text-based terminal user interfaces: layout containers,
list and input widgets, and an in-memory cell screen that they draw onto.

## Installation

```
pip install tuikit
```

To run the test suite:

```
pip install "tuikit[test]"
pytest
```

## Modules

- `tuikit.styles`: `Color` (xterm palette indices, with `Color.DEFAULT` for
  the terminal's own color) and `Theme`. The module-level `STYLES` theme holds
  the colors that primitives pick up when they are created; change its fields
  to restyle everything created afterwards.
- `tuikit.semigraphics`: box-drawing character constants and the joining of
  overlapping light line characters. `join_semigraphics(previous, ch)` returns
  the combined character (for example `─` over `│` gives `┼`), and
  `print_joined_semigraphics(screen, x, y, ch, style)` draws it onto a screen.
- `tuikit.primitive`: the `Primitive` base class (position, padding via
  `set_padding`, `inner_rect`, `in_rect`, focus handling, background fill
  unless `transparent` is set), the in-memory `Screen` (`get_content`,
  `set_content`, `show_cursor`, `row_text`), `Style`, `Align`, `Key`,
  `Modifier`, `KeyEvent`, `MouseAction`, `MouseEvent`, and the text helpers
  `string_width` and `print_text`.
- `tuikit.flex`: `Flex` arranges items in a row or column (`Direction.ROW`,
  `Direction.COLUMN`) by fixed sizes or proportions. `full_screen` makes it
  take the whole screen.
- `tuikit.frame`: `Frame` puts borders of empty space around a primitive and
  adds header and footer lines with `add_text`.
- `tuikit.listview`: `ListView` is a selectable list of `ListItem`s with
  secondary texts, shortcuts, `find_items`, wrap-around navigation and
  horizontal and vertical scrolling. Callbacks are set as attributes:
  `on_changed`, `on_selected` and `on_done`.
- `tuikit.inputfield`: `InputField` is a one-line text entry with a label,
  placeholder, `mask_character`, an `accept` check, `on_changed`, `on_done`
  and `on_finished` callbacks, Emacs-style editing keys and an autocomplete
  drop-down (`set_autocomplete_func`, `autocomplete`).
- `tuikit.grid`: `Grid` places items on rows and columns (`set_rows`,
  `set_columns`, `set_size`), with gaps, optional joined borders, minimum sizes,
  size-dependent placements and scroll offsets driven by the keyboard.
- `tuikit.pages`: `Pages` stacks named primitives and switches which of them
  are visible (`add_page`, `switch_to_page`, `show_page`, `hide_page`,
  `send_to_front`, `send_to_back`, `front_page`), with an `on_changed`
  callback.

## Example

```python
from tuikit.primitive import Screen
from tuikit.flex import Flex, Direction
from tuikit.frame import Frame
from tuikit.listview import ListView
from tuikit.inputfield import InputField

screen = Screen(40, 10)

menu = ListView()
menu.add_item("Open", "Open a file", "o", None)
menu.add_item("Quit", "Leave the program", "q", None)

name = InputField()
name.set_text("hello")

layout = Flex(Direction.ROW)
layout.add_item(Frame(menu), 0, 1, True)
layout.add_item(name, 1, 0, False)
layout.set_rect(0, 0, 40, 10)
layout.draw(screen)

for y in range(10):
    print(screen.row_text(y))
```

Key and mouse input is passed in as `KeyEvent` and `MouseEvent` objects
through `handle_key` and `handle_mouse`. A container forwards an event to
whichever child currently has focus; `handle_mouse` returns whether the event
was consumed and the primitive that captures further mouse events, if any.

## What it does not do

`tuikit` does not talk to a real terminal. There is no application object, no
event loop and no terminal driver: `Screen` is an in-memory grid of cells, and
reading keys and mouse events from a terminal, focusing primitives and
showing the screen contents are left to the code that uses the package. It
also has no forms, buttons, checkboxes, drop-downs, modal dialogs, text views
or tables, and primitives draw no borders or titles of their own.