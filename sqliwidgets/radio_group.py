"""A horizontal group of mutually exclusive options."""

from __future__ import annotations

from dataclasses import dataclass

from .events import KeyCode, KeyEvent, MouseButton, MouseEvent, MouseKind, Rect
from .layout import split_ratio


@dataclass(frozen=True)
class RadioOption:
    label: str
    value: str


class RadioGroup:
    """Options laid out side by side, exactly one of them selected."""

    def __init__(self, options) -> None:
        self.options = list(options)
        if not self.options:
            raise ValueError("a radio group needs at least one option")
        self.selected = 0

    def set_selected(self, index: int) -> None:
        """Select ``index``; an index out of range is ignored."""
        if 0 <= index < len(self.options):
            self.selected = index

    def selected_value(self) -> str:
        return self.options[self.selected].value

    def next(self) -> None:
        self.selected = (self.selected + 1) % len(self.options)

    def previous(self) -> None:
        self.selected = (self.selected - 1) % len(self.options)

    def handle_key_event(self, key: KeyEvent) -> bool:
        """Move the selection with the arrow keys; return whether the key was used."""
        if key.code in (KeyCode.LEFT, KeyCode.UP):
            self.previous()
            return True
        if key.code in (KeyCode.RIGHT, KeyCode.DOWN):
            self.next()
            return True
        return False

    def handle_mouse_event(self, mouse: MouseEvent, area: Rect) -> bool:
        """Select the option under a left click within ``area``."""
        if mouse.kind is not MouseKind.DOWN or mouse.button is not MouseButton.LEFT:
            return False
        for index, chunk in enumerate(split_ratio(area, len(self.options))):
            if chunk.contains(mouse.column, mouse.row):
                self.selected = index
                return True
        return False

    def labels(self) -> list[str]:
        """Return the rendered text of each option."""
        return [
            f"{'(*)' if index == self.selected else '( )'} {option.label}"
            for index, option in enumerate(self.options)
        ]