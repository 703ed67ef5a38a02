from sqliwidgets.events import KeyCode, KeyEvent, KeyModifiers
from sqliwidgets.textarea import TAB_WIDTH, TextArea


def filled(text):
    t = TextArea()
    t.insert_str(text)
    return t


def test_new_area_is_single_empty_line():
    t = TextArea()
    assert t.lines == [""]
    assert t.cursor == (0, 0)


def test_insert_multiline_moves_cursor_to_end():
    t = filled("ab\ncd")
    assert t.lines == ["ab", "cd"]
    assert t.cursor == (1, len("cd"))


def test_insert_in_middle_of_line():
    t = filled("helo")
    t.jump(0, 3)
    t.insert_str("l\nX")
    assert "\n".join(t.lines) == "hell\nXo"


def test_insert_empty_is_noop():
    t = filled("abc")
    assert not t.insert_str("")
    assert t.lines == ["abc"]


def test_typing_characters_and_enter():
    t = TextArea()
    for ch in "ab":
        assert t.input(KeyEvent(KeyCode.CHAR, ch))
    assert t.input(KeyEvent(KeyCode.ENTER))
    assert t.input(KeyEvent(KeyCode.CHAR, "c"))
    assert t.lines == ["ab", "c"]


def test_control_characters_not_inserted():
    t = TextArea()
    assert not t.input(KeyEvent(KeyCode.CHAR, "s", KeyModifiers.CONTROL))
    assert t.lines == [""]


def test_tab_inserts_spaces_to_stop():
    t = TextArea()
    t.input(KeyEvent(KeyCode.TAB))
    assert t.lines == [" " * TAB_WIDTH]


def test_backspace_joins_lines_at_column_zero():
    t = filled("ab\ncd")
    t.move_head()
    assert t.input(KeyEvent(KeyCode.BACKSPACE))
    assert t.lines == ["abcd"]
    assert t.cursor == (0, len("ab"))


def test_delete_at_end_of_text_does_nothing():
    t = filled("ab")
    assert not t.input(KeyEvent(KeyCode.DELETE))
    assert t.lines == ["ab"]


def test_arrow_keys_do_not_modify():
    t = filled("ab\ncd")
    assert not t.input(KeyEvent(KeyCode.UP))
    assert t.cursor[0] == 0
    assert not t.input(KeyEvent(KeyCode.RIGHT))
    assert t.cursor == (1, 0)
    assert t.lines == ["ab", "cd"]


def test_jump_clamps():
    t = filled("one\nlonger line")
    t.jump(99, 99)
    assert t.cursor == (len(t.lines) - 1, len(t.lines[-1]))
    t.jump(-5, -5)
    assert t.cursor == (0, 0)


def test_move_head_end_top():
    t = filled("first\nsecond")
    t.move_head()
    assert t.cursor == (1, 0)
    t.move_end()
    assert t.cursor == (1, len("second"))
    t.move_top()
    assert t.cursor == (0, len("first"))


def test_delete_line_by_head_removes_prefix():
    t = filled("hello")
    t.jump(0, 3)
    assert t.delete_line_by_head()
    assert t.lines == ["hello"[3:]]
    assert t.cursor[1] == 0


def test_delete_line_by_head_at_start_joins_previous():
    t = filled("ab\ncd")
    t.move_head()
    assert t.delete_line_by_head()
    assert t.lines == ["abcd"]


def test_delete_line_by_end():
    t = filled("ab\ncd")
    t.jump(0, 1)
    assert t.delete_line_by_end()
    assert t.lines == ["a", "cd"]
    assert t.delete_line_by_end()
    assert t.lines == ["acd"]
    t.move_end()
    assert not t.delete_line_by_end()