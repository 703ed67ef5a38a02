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


def test_rect_contains_corners():
    r = Rect(2, 3, 4, 5)
    assert r.contains(r.x, r.y)
    assert r.contains(r.right - 1, r.bottom - 1)


def test_rect_excludes_outside_edges():
    r = Rect(2, 3, 4, 5)
    assert not r.contains(r.right, r.y)
    assert not r.contains(r.x, r.bottom)
    assert not r.contains(r.x - 1, r.y)
    assert not r.contains(r.x, r.y - 1)


def test_empty_rect_contains_nothing():
    r = Rect(1, 1, 0, 0)
    assert not r.contains(1, 1)


def test_char_key_requires_one_character():
    with pytest.raises(ValueError):
        KeyEvent(KeyCode.CHAR)
    with pytest.raises(ValueError):
        KeyEvent(KeyCode.CHAR, "ab")


def test_key_modifiers_combine():
    key = KeyEvent(KeyCode.CHAR, "s", KeyModifiers.CONTROL | KeyModifiers.SHIFT)
    assert KeyModifiers.CONTROL in key.modifiers
    assert KeyModifiers.ALT not in key.modifiers


def test_key_default_modifiers_empty():
    assert KeyEvent(KeyCode.ENTER).modifiers == KeyModifiers.NONE


def test_mouse_events_compare_and_hash():
    a = MouseEvent(MouseKind.DOWN, 3, 4, MouseButton.LEFT)
    b = MouseEvent(MouseKind.DOWN, 3, 4, MouseButton.LEFT)
    assert a == b
    assert len({a, b}) == 1
    assert MouseEvent(MouseKind.MOVED, 3, 4).button is None