"""A minimal multi-line text buffer with a cursor."""

from __future__ import annotations

from .events import KeyCode, KeyEvent, KeyModifiers

TAB_WIDTH = 4


class TextArea:
    """Editable lines of text with a (row, column) cursor."""

    def __init__(self) -> None:
        self._lines: list[str] = [""]
        self._cursor: tuple[int, int] = (0, 0)

    @property
    def lines(self) -> list[str]:
        return list(self._lines)

    @property
    def cursor(self) -> tuple[int, int]:
        return self._cursor

    def insert_str(self, text: str) -> bool:
        """Insert text at the cursor and leave the cursor after it."""
        text = text.replace("\r\n", "\n")
        if not text:
            return False
        row, col = self._cursor
        line = self._lines[row]
        before, after = line[:col], line[col:]
        parts = text.split("\n")
        if len(parts) == 1:
            self._lines[row] = before + text + after
            self._cursor = (row, col + len(text))
        else:
            self._lines[row:row + 1] = [before + parts[0], *parts[1:-1], parts[-1] + after]
            self._cursor = (row + len(parts) - 1, len(parts[-1]))
        return True

    def input(self, key: KeyEvent) -> bool:
        """Apply a key press; return whether the text changed."""
        row, col = self._cursor
        code = key.code
        if code is KeyCode.CHAR:
            if key.modifiers & (KeyModifiers.CONTROL | KeyModifiers.ALT):
                return False
            return self.insert_str(key.char)
        if code is KeyCode.ENTER:
            return self.insert_str("\n")
        if code is KeyCode.TAB:
            return self.insert_str(" " * (TAB_WIDTH - col % TAB_WIDTH))
        if code is KeyCode.BACKSPACE:
            return self._delete_before()
        if code is KeyCode.DELETE:
            return self._delete_after()
        if code is KeyCode.LEFT:
            if col > 0:
                self._cursor = (row, col - 1)
            elif row > 0:
                self._cursor = (row - 1, len(self._lines[row - 1]))
        elif code is KeyCode.RIGHT:
            if col < len(self._lines[row]):
                self._cursor = (row, col + 1)
            elif row < len(self._lines) - 1:
                self._cursor = (row + 1, 0)
        elif code is KeyCode.UP:
            if row > 0:
                self.jump(row - 1, col)
        elif code is KeyCode.DOWN:
            if row < len(self._lines) - 1:
                self.jump(row + 1, col)
        elif code is KeyCode.HOME:
            self.move_head()
        elif code is KeyCode.END:
            self.move_end()
        return False

    def _delete_before(self) -> bool:
        row, col = self._cursor
        line = self._lines[row]
        if col > 0:
            self._lines[row] = line[:col - 1] + line[col:]
            self._cursor = (row, col - 1)
            return True
        if row == 0:
            return False
        previous = self._lines[row - 1]
        self._lines[row - 1] = previous + self._lines.pop(row)
        self._cursor = (row - 1, len(previous))
        return True

    def _delete_after(self) -> bool:
        row, col = self._cursor
        line = self._lines[row]
        if col < len(line):
            self._lines[row] = line[:col] + line[col + 1:]
            return True
        if row == len(self._lines) - 1:
            return False
        self._lines[row] = line + self._lines.pop(row + 1)
        return True

    def jump(self, row: int, col: int) -> None:
        """Move the cursor, clamped to the text."""
        row = max(0, min(row, len(self._lines) - 1))
        col = max(0, min(col, len(self._lines[row])))
        self._cursor = (row, col)

    def move_head(self) -> None:
        self._cursor = (self._cursor[0], 0)

    def move_end(self) -> None:
        row = self._cursor[0]
        self._cursor = (row, len(self._lines[row]))

    def move_top(self) -> None:
        self.jump(0, self._cursor[1])

    def delete_line_by_head(self) -> bool:
        """Delete from line start to cursor, or the newline before a cursor at column 0."""
        row, col = self._cursor
        if col > 0:
            self._lines[row] = self._lines[row][col:]
            self._cursor = (row, 0)
            return True
        return self._delete_before()

    def delete_line_by_end(self) -> bool:
        """Delete from cursor to line end, or the newline after a cursor at line end."""
        row, col = self._cursor
        line = self._lines[row]
        if col < len(line):
            self._lines[row] = line[:col]
            return True
        return self._delete_after()