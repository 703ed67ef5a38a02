"""A dialog for renaming, moving or deleting a file or folder."""

from __future__ import annotations

from .button import GREEN, LIGHT_GREY, RED
from .events import KeyCode, KeyEvent, KeyModifiers, MouseEvent, Rect
from .modal import DialogButton, FocusableArea, ModalAction, ModalDialog, ModalHandler
from .new_file_modal import Scope, scope_selector
from .textarea import TextArea

BUTTON_ACTIONS = ("cancel", "delete", "edit")


class EditFileModal(ModalHandler):
    """Name input (plus a scope selector for folders), then Cancel, Delete and Save.

    Content elements come first in ``focused_element``, then the three buttons.
    """

    def __init__(self, name: str, is_folder: bool, current_scope: Scope) -> None:
        self.name_input = TextArea()
        self.name_input.insert_str(name)
        self.scope_selector = scope_selector()
        self.scope_selector.set_selected(1 if current_scope is Scope.USER else 0)
        self.is_folder = is_folder
        self.focused_element = 0
        self.element_count = 2 if is_folder else 1

    @property
    def title(self) -> str:
        return "Edit Folder" if self.is_folder else "Edit File"

    def _dialog(self) -> ModalDialog:
        if self.focused_element < self.element_count:
            focused = FocusableArea.content(self.focused_element)
        else:
            focused = FocusableArea.button(self.focused_element - self.element_count)
        return ModalDialog(
            self.title,
            [
                DialogButton("Cancel", "cancel", LIGHT_GREY),
                DialogButton("Delete", "delete", RED),
                DialogButton("Save", "edit", GREEN),
            ],
            width_percent=50,
            height_percent=35 if self.is_folder else 25,
            content_element_count=self.element_count,
            focused_area=focused,
        )

    def handle_key_event(self, key: KeyEvent) -> ModalAction:
        if key.code is KeyCode.TAB:
            return self.handle_tab(bool(key.modifiers & KeyModifiers.SHIFT))
        if key.code is KeyCode.BACKTAB:
            return self.handle_tab(True)
        if key.code is KeyCode.ENTER:
            button = self.focused_element - self.element_count
            if 0 <= button < len(BUTTON_ACTIONS):
                return ModalAction.custom(BUTTON_ACTIONS[button])
            return ModalAction.none()
        if key.code is KeyCode.ESC:
            return ModalAction.close()
        if self.focused_element == 0:
            self.name_input.input(key)
        elif self.focused_element == 1 and self.is_folder:
            self.scope_selector.handle_key_event(key)
        return ModalAction.none()

    def handle_tab(self, reverse: bool) -> ModalAction:
        total = self.element_count + len(BUTTON_ACTIONS)
        self.focused_element = (self.focused_element + (-1 if reverse else 1)) % total
        return ModalAction.none()

    def handle_mouse_event(self, event: MouseEvent, area: Rect) -> ModalAction:
        result = self._dialog().handle_mouse_event(event, area)
        if result.name in BUTTON_ACTIONS:
            self.focused_element = self.element_count + BUTTON_ACTIONS.index(result.name)
        return result

    def values(self) -> tuple[str, Scope]:
        """Return (name, scope)."""
        return (
            self.name_input.lines[0],
            Scope.from_value(self.scope_selector.selected_value()),
        )