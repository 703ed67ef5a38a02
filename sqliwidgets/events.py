"""Terminal geometry and input event types shared by the widgets."""

from __future__ import annotations

import enum
from dataclasses import dataclass


@dataclass(frozen=True)
class Rect:
    """A rectangular cell area of the terminal."""

    x: int
    y: int
    width: int
    height: int

    @property
    def left(self) -> int:
        return self.x

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def top(self) -> int:
        return self.y

    @property
    def bottom(self) -> int:
        return self.y + self.height

    def contains(self, column: int, row: int) -> bool:
        """Return whether the cell at (column, row) lies inside the area."""
        return self.left <= column < self.right and self.top <= row < self.bottom


class KeyCode(enum.Enum):
    CHAR = enum.auto()
    ENTER = enum.auto()
    ESC = enum.auto()
    TAB = enum.auto()
    BACKTAB = enum.auto()
    BACKSPACE = enum.auto()
    DELETE = enum.auto()
    LEFT = enum.auto()
    RIGHT = enum.auto()
    UP = enum.auto()
    DOWN = enum.auto()
    HOME = enum.auto()
    END = enum.auto()


class KeyModifiers(enum.Flag):
    NONE = 0
    SHIFT = enum.auto()
    CONTROL = enum.auto()
    ALT = enum.auto()


@dataclass(frozen=True)
class KeyEvent:
    """A key press; ``char`` holds the character when ``code`` is CHAR."""

    code: KeyCode
    char: str = ""
    modifiers: KeyModifiers = KeyModifiers.NONE

    def __post_init__(self) -> None:
        if self.code is KeyCode.CHAR and len(self.char) != 1:
            raise ValueError("a character key needs exactly one character")


class MouseKind(enum.Enum):
    DOWN = enum.auto()
    UP = enum.auto()
    DRAG = enum.auto()
    MOVED = enum.auto()
    SCROLL_DOWN = enum.auto()
    SCROLL_UP = enum.auto()


class MouseButton(enum.Enum):
    LEFT = enum.auto()
    RIGHT = enum.auto()
    MIDDLE = enum.auto()


@dataclass(frozen=True)
class MouseEvent:
    """A mouse action at a terminal cell; ``button`` is set for presses and releases."""

    kind: MouseKind
    column: int
    row: int
    button: MouseButton | None = None