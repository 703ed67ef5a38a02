"""A dialog that asks for a password."""

from __future__ import annotations

from .button import GREEN, LIGHT_GREY
from .events import KeyCode, KeyEvent, KeyModifiers, MouseEvent, Rect
from .modal import DialogButton, FocusableArea, ModalAction, ModalDialog, ModalHandler
from .textarea import TextArea

TITLE = "Enter Password"


class PasswordModal(ModalHandler):
    """Password input followed by Cancel and Submit buttons.

    ``focus_idx`` is 0 for the input, 1 for Cancel and 2 for Submit.
    """

    def __init__(self) -> None:
        self.textarea = TextArea()
        self.mask_char = "*"
        self.focus_idx = 0

    @property
    def password(self) -> str:
        return self.textarea.lines[0]

    def _dialog(self, **dimensions) -> ModalDialog:
        focused = {
            1: FocusableArea.button(0),
            2: FocusableArea.button(1),
        }.get(self.focus_idx, FocusableArea.content(0))
        return ModalDialog(
            TITLE,
            [
                DialogButton("Cancel", "cancel", LIGHT_GREY),
                DialogButton("Submit", "submit", GREEN),
            ],
            content_element_count=1,
            focused_area=focused,
            **dimensions,
        )

    def handle_key_event(self, key: KeyEvent) -> ModalAction:
        if key.code is KeyCode.TAB:
            return self.handle_tab(bool(key.modifiers & KeyModifiers.SHIFT))
        if key.code is KeyCode.BACKTAB:
            return self.handle_tab(True)
        if key.code is KeyCode.ENTER:
            if self.focus_idx == 1:
                return ModalAction.custom("cancel")
            if self.focus_idx in (0, 2):
                return ModalAction.custom("submit")
            return ModalAction.none()
        if key.code is KeyCode.ESC:
            return ModalAction.close()
        if self.focus_idx == 0:
            self.textarea.input(key)
        return ModalAction.none()

    def handle_tab(self, reverse: bool) -> ModalAction:
        self.focus_idx = (self.focus_idx + (-1 if reverse else 1)) % 3
        return ModalAction.none()

    def handle_mouse_event(self, event: MouseEvent, area: Rect) -> ModalAction:
        result = self._dialog().handle_mouse_event(event, area)
        if result.name == "cancel":
            self.focus_idx = 1
        elif result.name == "submit":
            self.focus_idx = 2
        return result