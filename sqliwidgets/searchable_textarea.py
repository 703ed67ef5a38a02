"""A text area with search, replace and height-based padding."""

from __future__ import annotations

from .textarea import TextArea

LINE_OFFSET = 10


class SearchableTextArea(TextArea):
    """Text area that remembers a search pattern and the last match position."""

    def __init__(self) -> None:
        super().__init__()
        self._search_pattern = ""
        self._last_search_pos: tuple[int, int] = (0, 0)
        self._initialized_height = 0

    @property
    def search_pattern(self) -> str:
        return self._search_pattern

    @property
    def last_search_pos(self) -> tuple[int, int]:
        return self._last_search_pos

    def get_content(self) -> str:
        """Return the text without trailing blank lines."""
        lines = self._lines
        end = next(
            (i + 1 for i in range(len(lines) - 1, -1, -1) if lines[i].strip()),
            len(lines),
        )
        return "\n".join(lines[:end])

    def delete_line(self) -> None:
        """Empty the cursor's line."""
        self.move_head()
        self.move_end()
        self.delete_line_by_head()

    def clear(self) -> None:
        """Remove all text and the search state, keeping the padded height."""
        self._lines = [""]
        self._cursor = (0, 0)
        self.update_dimensions(self._initialized_height)
        self._search_pattern = ""
        self._last_search_pos = (0, 0)

    def update_dimensions(self, height: int) -> None:
        """Pad or trim blank lines so the buffer fits a pane of ``height`` rows."""
        visible = max(0, height - LINE_OFFSET)
        current = len(self._lines)
        if visible > current:
            for _ in range(visible - current):
                self.insert_str("\n")
        elif 0 < visible < current:
            content_lines = len(self.get_content().splitlines())
            target = max(visible, content_lines)
            while len(self._lines) > target and not self._lines[-1].strip():
                if not self.delete_line_by_end():
                    break
        self._initialized_height = height
        self.move_top()

    def set_search_pattern(self, pattern: str) -> None:
        """Set the pattern and start searching from the cursor."""
        self._search_pattern = pattern
        self._last_search_pos = self._cursor

    def _found(self, row: int, col: int) -> bool:
        self.jump(row, col)
        self._last_search_pos = (row, col)
        return True

    def search_forward(self, from_start: bool) -> bool:
        """Find the next match, wrapping to the top; return whether one was found."""
        pattern = self._search_pattern
        if not pattern:
            return False
        lines = self._lines
        last_row, last_col = self._last_search_pos
        start_line = 0 if from_start else last_row
        start_col = 0 if from_start else last_col + 1

        for line_idx in range(start_line, len(lines)):
            if line_idx > start_line:
                start_col = 0
            col = lines[line_idx].find(pattern, start_col)
            if col >= 0:
                return self._found(line_idx, col)

        if not from_start and start_line > 0:
            for line_idx in range(min(last_row + 1, len(lines))):
                line = lines[line_idx]
                end = last_col if line_idx == last_row else len(line)
                col = line.find(pattern, 0, end)
                if col >= 0:
                    return self._found(line_idx, col)
        return False

    def search_back(self, from_end: bool) -> bool:
        """Find the previous match, wrapping to the bottom; return whether one was found."""
        pattern = self._search_pattern
        if not pattern:
            return False
        lines = self._lines
        last_row, last_col = self._last_search_pos
        if from_end:
            start_line = len(lines) - 1
            start_col = len(lines[start_line])
        else:
            start_line, start_col = last_row, last_col

        for line_idx in range(start_line, -1, -1):
            line = lines[line_idx]
            if line_idx < start_line:
                start_col = len(line)
            col = line.rfind(pattern, 0, start_col)
            if col >= 0:
                return self._found(line_idx, col)

        if not from_end and start_line < len(lines) - 1:
            for line_idx in range(len(lines) - 1, last_row, -1):
                col = lines[line_idx].rfind(pattern)
                if col >= 0:
                    return self._found(line_idx, col)
        return False

    def replace_next(self, replacement: str) -> bool:
        """Replace the match at the last search position; return whether it did."""
        pattern = self._search_pattern
        if not pattern:
            return False
        row, col = self._last_search_pos
        if row >= len(self._lines):
            return False
        line = self._lines[row]
        if col + len(pattern) > len(line) or not line.startswith(pattern, col):
            return False

        new_line = line[:col] + replacement + line[col + len(pattern):]
        self.delete_line()
        self.insert_str(new_line)
        new_col = col + len(replacement)
        self._last_search_pos = (row, new_col)
        self.jump(row, new_col)
        return True

    def replace_all(self, replacement: str) -> int:
        """Replace matches from the last search position onwards; return the count."""
        if not self._search_pattern:
            return 0
        count = 0
        last_pos = (0, 0)
        while self.search_forward(False):
            current = self._last_search_pos
            if current == last_pos:
                break
            if self.replace_next(replacement):
                count += 1
            last_pos = current
        return count