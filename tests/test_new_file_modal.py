import pytest

from sqliwidgets.events import (
    KeyCode,
    KeyEvent,
    KeyModifiers,
    MouseButton,
    MouseEvent,
    MouseKind,
    Rect,
)
from sqliwidgets.modal import ActionKind, DialogButton, ModalAction, ModalDialog
from sqliwidgets.new_file_modal import NewFileModal, Scope

SCREEN = Rect(0, 0, 100, 50)


def _button_centres():
    dialog = ModalDialog(
        "New File/Folder",
        [DialogButton("Cancel", "cancel"), DialogButton("Create", "submit")],
        width_percent=50,
        height_percent=40,
        content_element_count=3,
    )
    modal_area, buttons = dialog.layout(SCREEN)
    centres = {action: (r.x + r.width // 2, r.y + r.height // 2) for r, action in buttons}
    return modal_area, centres


def _click(column, row):
    return MouseEvent(MouseKind.DOWN, column, row, MouseButton.LEFT)


def _type(modal, text):
    for ch in text:
        modal.handle_key_event(KeyEvent(KeyCode.CHAR, ch))


def test_defaults():
    modal = NewFileModal()
    assert modal.values() == ("", "file", Scope.CWD, None)
    assert modal.focused_element == 0


def test_parent_folder_is_reported():
    modal = NewFileModal(parent_folder="reports")
    assert modal.values()[3] == "reports"


def test_typing_fills_name():
    modal = NewFileModal()
    _type(modal, "query")
    assert modal.values()[0] == "query"


def test_selectors_follow_focus():
    modal = NewFileModal()
    modal.handle_key_event(KeyEvent(KeyCode.TAB))
    modal.handle_key_event(KeyEvent(KeyCode.RIGHT))
    modal.handle_key_event(KeyEvent(KeyCode.TAB))
    modal.handle_key_event(KeyEvent(KeyCode.RIGHT))
    name, kind, scope, _ = modal.values()
    assert (name, kind, scope) == ("", "folder", Scope.USER)


def test_tab_wraps_both_ways():
    modal = NewFileModal()
    modal.handle_key_event(KeyEvent(KeyCode.BACKTAB))
    assert modal.focused_element == 4
    modal.handle_key_event(KeyEvent(KeyCode.TAB))
    assert modal.focused_element == 0
    modal.handle_key_event(KeyEvent(KeyCode.TAB, modifiers=KeyModifiers.SHIFT))
    assert modal.focused_element == 4


@pytest.mark.parametrize(
    "tabs, expected",
    [
        (0, ModalAction.none()),
        (3, ModalAction.custom("cancel")),
        (4, ModalAction.custom("submit")),
    ],
)
def test_enter_on_each_element(tabs, expected):
    modal = NewFileModal()
    for _ in range(tabs):
        modal.handle_tab(False)
    assert modal.handle_key_event(KeyEvent(KeyCode.ENTER)) == expected


def test_escape_closes():
    modal = NewFileModal()
    assert modal.handle_key_event(KeyEvent(KeyCode.ESC)).kind is ActionKind.CLOSE


def test_click_outside_closes():
    modal = NewFileModal()
    assert modal.handle_mouse_event(_click(0, 0), SCREEN) == ModalAction.close()
    assert modal.focused_element == 0


@pytest.mark.parametrize("action, focus", [("cancel", 3), ("submit", 4)])
def test_click_button_moves_focus(action, focus):
    modal = NewFileModal()
    _, centres = _button_centres()
    result = modal.handle_mouse_event(_click(*centres[action]), SCREEN)
    assert result == ModalAction.custom(action)
    assert modal.focused_element == focus


def test_click_inside_content_does_nothing():
    modal = NewFileModal()
    modal_area, _ = _button_centres()
    result = modal.handle_mouse_event(_click(modal_area.x + 2, modal_area.y + 2), SCREEN)
    assert result == ModalAction.none()
    assert modal.focused_element == 0


def test_scope_from_value():
    assert Scope.from_value("user") is Scope.USER
    assert Scope.from_value("local") is Scope.CWD
    assert Scope.from_value("other") is Scope.CWD