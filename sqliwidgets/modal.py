"""Modal dialog geometry, focus handling and the interface modals implement."""

from __future__ import annotations

import abc
import enum
from dataclasses import dataclass

from .button import BLUE, Button, Theme
from .events import KeyEvent, MouseButton, MouseEvent, MouseKind, Rect
from .layout import centered_rect

BUTTON_WIDTH = 12
BUTTON_HEIGHT = 3
BUTTON_GAP = 2


class FocusKind(enum.Enum):
    CONTENT = enum.auto()
    BUTTON = enum.auto()


@dataclass(frozen=True)
class FocusableArea:
    """The focused element of a dialog: a content element or a button, by index."""

    kind: FocusKind
    index: int = 0

    @classmethod
    def content(cls, index: int) -> FocusableArea:
        return cls(FocusKind.CONTENT, index)

    @classmethod
    def button(cls, index: int) -> FocusableArea:
        return cls(FocusKind.BUTTON, index)


class ActionKind(enum.Enum):
    NONE = enum.auto()
    CLOSE = enum.auto()
    CUSTOM = enum.auto()


@dataclass(frozen=True)
class ModalAction:
    """What a modal asks its owner to do; custom actions carry a name."""

    kind: ActionKind
    name: str = ""

    @classmethod
    def none(cls) -> ModalAction:
        return cls(ActionKind.NONE)

    @classmethod
    def close(cls) -> ModalAction:
        return cls(ActionKind.CLOSE)

    @classmethod
    def custom(cls, name: str) -> ModalAction:
        return cls(ActionKind.CUSTOM, name)


class DialogButton:
    """A dialog button that reports ``action`` when clicked."""

    def __init__(self, label: str, action: str, theme: Theme = BLUE) -> None:
        self.button = Button(label, theme=theme)
        self.action = action

    @property
    def area(self) -> Rect | None:
        return self.button.area

    @area.setter
    def area(self, area: Rect) -> None:
        self.button.area = area

    def handle_mouse_event(self, event: MouseEvent) -> bool:
        return self.button.handle_mouse_event(event)


def _shrink(rect: Rect, margin: int) -> Rect:
    x = min(rect.x + margin, rect.right)
    y = min(rect.y + margin, rect.bottom)
    return Rect(x, y, max(0, rect.width - 2 * margin), max(0, rect.height - 2 * margin))


class ModalDialog:
    """A centred dialog with a content area above a row of buttons."""

    def __init__(
        self,
        title: str,
        buttons=(),
        *,
        width_percent: int = 40,
        height_percent: int = 35,
        content_element_count: int = 1,
        focused_area: FocusableArea | None = None,
    ) -> None:
        self.title = title
        self.buttons: list[DialogButton] = list(buttons)
        self.width_percent = width_percent
        self.height_percent = height_percent
        self.content_element_count = content_element_count
        self.focused_area = focused_area if focused_area is not None else FocusableArea.content(0)

    def layout(self, area: Rect) -> tuple[Rect, list[tuple[Rect, str]]]:
        """Return the dialog area and each button's area with its action."""
        modal_area = centered_rect(self.width_percent, self.height_percent, area)
        body = _shrink(_shrink(modal_area, 1), 1)

        content_height = min(body.height, max(3, body.height - BUTTON_HEIGHT))
        row = Rect(body.x, body.y + content_height, body.width, body.height - content_height)

        total = (BUTTON_WIDTH + BUTTON_GAP) * len(self.buttons)
        x = row.x + max(0, row.width - total) // 2
        button_areas = []
        for button in self.buttons:
            button_areas.append((Rect(x, row.y, BUTTON_WIDTH, BUTTON_HEIGHT), button.action))
            x += BUTTON_WIDTH + BUTTON_GAP
        return modal_area, button_areas

    def handle_tab(self, reverse: bool) -> FocusableArea:
        """Move focus to the next (or previous) element and return it."""
        focus = self.focused_area
        idx = focus.index
        if focus.kind is FocusKind.CONTENT:
            if reverse:
                if idx > 0:
                    self.focused_area = FocusableArea.content(idx - 1)
                elif self.buttons:
                    self.focused_area = FocusableArea.button(len(self.buttons) - 1)
            elif idx < self.content_element_count - 1:
                self.focused_area = FocusableArea.content(idx + 1)
            elif self.buttons:
                self.focused_area = FocusableArea.button(0)
        else:
            if reverse:
                if idx > 0:
                    self.focused_area = FocusableArea.button(idx - 1)
                elif self.content_element_count > 0:
                    self.focused_area = FocusableArea.content(self.content_element_count - 1)
            elif idx < len(self.buttons) - 1:
                self.focused_area = FocusableArea.button(idx + 1)
            else:
                self.focused_area = FocusableArea.content(0)
        return self.focused_area

    def handle_mouse_event(self, event: MouseEvent, area: Rect) -> ModalAction:
        """Close on a click outside, report a clicked button, track hovering."""
        if event.kind is MouseKind.DOWN and event.button is MouseButton.LEFT:
            modal_area, button_areas = self.layout(area)
            if not modal_area.contains(event.column, event.row):
                return ModalAction.close()
            for index, (button, (rect, _)) in enumerate(zip(self.buttons, button_areas)):
                button.area = rect
                if rect.contains(event.column, event.row):
                    self.focused_area = FocusableArea.button(index)
                    return ModalAction.custom(button.action)
        elif event.kind is MouseKind.MOVED:
            _, button_areas = self.layout(area)
            for button, (rect, _) in zip(self.buttons, button_areas):
                button.area = rect
                button.handle_mouse_event(event)
        elif event.kind is MouseKind.UP:
            for button in self.buttons:
                button.handle_mouse_event(event)
        return ModalAction.none()


class ModalHandler(abc.ABC):
    """The interface every modal offers to the application."""

    @abc.abstractmethod
    def handle_key_event(self, key: KeyEvent) -> ModalAction:
        """React to a key press."""

    @abc.abstractmethod
    def handle_mouse_event(self, event: MouseEvent, area: Rect) -> ModalAction:
        """React to a mouse event within the screen ``area``."""

    def handle_tab(self, reverse: bool) -> ModalAction:
        return ModalAction.none()