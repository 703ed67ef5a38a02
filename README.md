# sqliwidgets

Interactive widget state for a terminal SQL client, kept apart from any drawing
library. Every widget takes plain key and mouse events and updates its own state.
What comes back is a value you can check: an action, a selection, or new text.
You can drive the widgets from any terminal front end, or from tests, with no
screen at all.

## Installation

```
pip install sqliwidgets
```

## What is inside

- `sqliwidgets.events`: `Rect`, `KeyCode`, `KeyModifiers`, `KeyEvent`, `MouseKind`,
  `MouseButton` and `MouseEvent`. These are the plain input types that every widget takes.
- `sqliwidgets.layout`: `split_percentages`, `split_ratio` and `centered_rect` for
  working out where things sit on screen.
- `sqliwidgets.button`: `Button` with its `State` (normal, hover, selected, active),
  `Theme` colours and mouse handling.
- `sqliwidgets.radio_group`: `RadioGroup` of `RadioOption`s, which wraps around when
  you move with the arrow keys or the mouse.
- `sqliwidgets.textarea` and `sqliwidgets.searchable_textarea`: a line-based
  `TextArea`, and `SearchableTextArea`, which adds forward and backward search,
  replace-next and replace-all.
- `sqliwidgets.modal`: `ModalDialog`, `DialogButton`, `FocusableArea`,
  `ModalAction` and the `ModalHandler` interface.
- `sqliwidgets.password_modal`, `sqliwidgets.new_file_modal`,
  `sqliwidgets.edit_file_modal`: ready-made dialogs for entering a password,
  creating a file or folder, and renaming or moving an item between `Scope`s.
- `sqliwidgets.wide_table` and `sqliwidgets.results`: row selection and
  horizontal column scrolling for wide query results (`WideTableState`,
  `column_widths`, `visible_slice`, `ResultsTable`, `status_text`).

## Example

```python
from sqliwidgets.events import KeyCode, KeyEvent
from sqliwidgets.modal import ModalAction
from sqliwidgets.password_modal import PasswordModal

modal = PasswordModal()
for ch in "secret":
    modal.handle_key_event(KeyEvent(KeyCode.CHAR, char=ch))

action = modal.handle_key_event(KeyEvent(KeyCode.ENTER))
assert action == ModalAction.custom("submit")
```

```python
from sqliwidgets.searchable_textarea import SearchableTextArea

area = SearchableTextArea()
area.insert_str("select * from users;\nselect id from users;")
area.set_search_pattern("users")
area.replace_all("accounts")
print(area.get_content())
```

## Running the tests

```
pip install "sqliwidgets[test]"
pytest
```