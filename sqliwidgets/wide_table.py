"""State and data slicing for a result table too wide to show all columns."""

from __future__ import annotations

APPROX_COLUMN_WIDTH = 15
CELL_PADDING = 2
FIXED_WIDTH_LIMIT = 10


def _next_index(selected: int | None, max_idx: int) -> int:
    if selected is None or selected >= max_idx:
        return 0
    return selected + 1


def _previous_index(selected: int | None, max_idx: int) -> int:
    if selected is None:
        return 0
    return max_idx if selected == 0 else selected - 1


class WideTableState:
    """Row selection and horizontal scrolling over ``column_count`` columns."""

    def __init__(self, column_count: int) -> None:
        if column_count < 0:
            raise ValueError("column count cannot be negative")
        self.column_count = column_count
        self.selected: int | None = 0
        self.scroll_position = 0
        self.visible_columns = 0
        self.scrollbar_position = 0

    def next_row(self, max_idx: int) -> None:
        """Select the next row, wrapping to the first after ``max_idx``."""
        self.selected = _next_index(self.selected, max_idx)

    def previous_row(self, max_idx: int) -> None:
        """Select the previous row, wrapping to ``max_idx`` before the first."""
        self.selected = _previous_index(self.selected, max_idx)

    def scroll_right(self) -> None:
        """Show one column further right, if any is hidden there."""
        if self.scroll_position + self.visible_columns < self.column_count:
            self.scroll_position += 1
            self.scrollbar_position = min(
                self.scrollbar_position + 1, max(0, self.column_count - 1)
            )

    def scroll_left(self) -> None:
        """Show one column further left, if any is hidden there."""
        if self.scroll_position > 0:
            self.scroll_position -= 1
            self.scrollbar_position = max(0, self.scrollbar_position - 1)

    def update_visible_columns(self, width: int) -> None:
        """Fit the number of visible columns to ``width`` cells."""
        max_visible = max(width // APPROX_COLUMN_WIDTH, 1)
        self.visible_columns = min(max_visible, self.column_count)
        if self.scroll_position + self.visible_columns > self.column_count:
            self.scroll_position = max(0, self.column_count - self.visible_columns)


def column_widths(columns, rows) -> list[tuple[str, int]]:
    """Return a width constraint per column from the widest header or cell.

    Each entry is ("length", n) for a fixed width under ten cells, otherwise
    ("min", n) for a minimum width.
    """
    widths = [len(column) for column in columns]
    for row in rows:
        for index, cell in enumerate(row[: len(widths)]):
            widths[index] = max(widths[index], len(cell))
    result = []
    for width in widths:
        padded = width + CELL_PADDING
        result.append(("length" if padded < FIXED_WIDTH_LIMIT else "min", padded))
    return result


def visible_slice(columns, rows, state: WideTableState) -> tuple[list[str], list[list[str]]]:
    """Return the headers and rows of the columns currently scrolled into view."""
    columns = list(columns)
    start = state.scroll_position
    end = min(start + state.visible_columns, len(columns))
    return columns[start:end], [list(row[start:end]) for row in rows]