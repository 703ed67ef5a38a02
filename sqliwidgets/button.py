"""A clickable button with themes and hover/press states."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Tuple, Union

from .events import MouseButton, MouseEvent, MouseKind, Rect

Color = Union[str, Tuple[int, int, int]]


class State(enum.Enum):
    NORMAL = enum.auto()
    HOVER = enum.auto()
    SELECTED = enum.auto()
    ACTIVE = enum.auto()


@dataclass(frozen=True)
class Theme:
    text: Color
    background: Color
    highlight: Color
    shadow: Color
    hover: Color


LIGHT_GREY = Theme(
    text="white",
    background=(128, 128, 128),
    highlight=(192, 192, 192),
    shadow=(96, 96, 96),
    hover=(168, 168, 168),
)

RED = Theme(
    text="white",
    background=(144, 48, 48),
    highlight=(192, 64, 64),
    shadow=(96, 32, 32),
    hover=(168, 64, 64),
)

GREEN = Theme(
    text="white",
    background=(48, 144, 48),
    highlight=(64, 192, 64),
    shadow=(32, 96, 32),
    hover=(64, 168, 64),
)

BLUE = Theme(
    text="white",
    background=(48, 72, 144),
    highlight=(64, 96, 192),
    shadow=(32, 48, 96),
    hover=(64, 88, 168),
)


@dataclass
class Button:
    """A labelled button; ``area`` is where it was last placed on screen."""

    label: str
    theme: Theme = BLUE
    state: State = State.NORMAL
    area: Rect | None = None

    def _is_over(self, event: MouseEvent) -> bool:
        return self.area is not None and self.area.contains(event.column, event.row)

    def handle_mouse_event(self, event: MouseEvent) -> bool:
        """Update the state from a mouse event; return whether it changed."""
        if event.kind is MouseKind.MOVED:
            if self.area is None:
                return False
            previous = self.state
            over = self._is_over(event)
            if over and self.state is State.NORMAL:
                self.state = State.HOVER
            elif not over and self.state is State.HOVER:
                self.state = State.NORMAL
            return previous is not self.state

        if event.button is not MouseButton.LEFT:
            return False

        if event.kind is MouseKind.DOWN:
            if self._is_over(event):
                self.state = State.ACTIVE
                return True
            return False

        if event.kind is MouseKind.UP and self.state is State.ACTIVE:
            self.state = State.NORMAL
            return True
        return False

    def colors(self) -> tuple[Color, Color, Color, Color]:
        """Return (background, text, shadow, highlight) for the current state."""
        theme = self.theme
        if self.state is State.HOVER:
            return theme.hover, theme.text, theme.shadow, theme.highlight
        if self.state is State.SELECTED:
            return theme.highlight, theme.text, theme.shadow, theme.highlight
        if self.state is State.ACTIVE:
            return theme.background, theme.text, theme.highlight, theme.shadow
        return theme.background, theme.text, theme.shadow, theme.highlight