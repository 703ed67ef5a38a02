"""A dialog for creating a new file or folder in a collection."""

from __future__ import annotations

import enum

from .button import GREEN, LIGHT_GREY
from .events import KeyCode, KeyEvent, KeyModifiers, MouseEvent, Rect
from .modal import DialogButton, FocusableArea, ModalAction, ModalDialog, ModalHandler
from .radio_group import RadioGroup, RadioOption
from .textarea import TextArea

TITLE = "New File/Folder"
CONTENT_ELEMENTS = 3
ELEMENT_COUNT = 5


class Scope(enum.Enum):
    """Where a collection lives: the working directory or the user's directory."""

    CWD = "local"
    USER = "user"

    @classmethod
    def from_value(cls, value: str) -> Scope:
        """Map a selector value to a scope; anything but "user" means the working directory."""
        return cls.USER if value == "user" else cls.CWD


def scope_selector() -> RadioGroup:
    return RadioGroup([RadioOption("Local", "local"), RadioOption("User", "user")])


class NewFileModal(ModalHandler):
    """Name input, file/folder and scope selectors, then Cancel and Create buttons.

    ``focused_element`` runs 0 (name), 1 (type), 2 (scope), 3 (Cancel), 4 (Create).
    """

    def __init__(self, parent_folder: str | None = None) -> None:
        self.name_input = TextArea()
        self.type_selector = RadioGroup([RadioOption("File", "file"), RadioOption("Folder", "folder")])
        self.scope_selector = scope_selector()
        self.focused_element = 0
        self.parent_folder = parent_folder

    def _dialog(self) -> ModalDialog:
        if self.focused_element < CONTENT_ELEMENTS:
            focused = FocusableArea.content(self.focused_element)
        else:
            focused = FocusableArea.button(self.focused_element - CONTENT_ELEMENTS)
        return ModalDialog(
            TITLE,
            [
                DialogButton("Cancel", "cancel", LIGHT_GREY),
                DialogButton("Create", "submit", GREEN),
            ],
            width_percent=50,
            height_percent=40,
            content_element_count=CONTENT_ELEMENTS,
            focused_area=focused,
        )

    def handle_key_event(self, key: KeyEvent) -> ModalAction:
        if key.code is KeyCode.TAB:
            return self.handle_tab(bool(key.modifiers & KeyModifiers.SHIFT))
        if key.code is KeyCode.BACKTAB:
            return self.handle_tab(True)
        if key.code is KeyCode.ENTER:
            if self.focused_element == 3:
                return ModalAction.custom("cancel")
            if self.focused_element == 4:
                return ModalAction.custom("submit")
            return ModalAction.none()
        if key.code is KeyCode.ESC:
            return ModalAction.close()
        if self.focused_element == 0:
            self.name_input.input(key)
        elif self.focused_element == 1:
            self.type_selector.handle_key_event(key)
        elif self.focused_element == 2:
            self.scope_selector.handle_key_event(key)
        return ModalAction.none()

    def handle_tab(self, reverse: bool) -> ModalAction:
        self.focused_element = (self.focused_element + (-1 if reverse else 1)) % ELEMENT_COUNT
        return ModalAction.none()

    def handle_mouse_event(self, event: MouseEvent, area: Rect) -> ModalAction:
        result = self._dialog().handle_mouse_event(event, area)
        if result.name == "cancel":
            self.focused_element = 3
        elif result.name == "submit":
            self.focused_element = 4
        return result

    def values(self) -> tuple[str, str, Scope, str | None]:
        """Return (name, "file" or "folder", scope, parent folder)."""
        return (
            self.name_input.lines[0],
            self.type_selector.selected_value(),
            Scope.from_value(self.scope_selector.selected_value()),
            self.parent_folder,
        )