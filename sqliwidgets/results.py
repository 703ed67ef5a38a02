"""Navigation state of the query results pane."""

from __future__ import annotations

from .wide_table import WideTableState, _next_index, _previous_index

WIDE_TABLE_THRESHOLD = 8


def status_text(execution_ms: int, row_count: int) -> str:
    """Return the summary shown under the results."""
    return f"Query time: {execution_ms}ms | {row_count} rows"


class ResultsTable:
    """Row selection for results, switching to a scrolling table for many columns."""

    def __init__(self) -> None:
        self.table_selected: int | None = 0
        self.wide_table_state: WideTableState | None = None
        self.use_wide_table = False

    @property
    def selected(self) -> int | None:
        """The selected row of whichever table is in use."""
        if self.use_wide_table and self.wide_table_state is not None:
            return self.wide_table_state.selected
        return self.table_selected

    def update(self, column_count: int) -> None:
        """Choose the table kind for a result with ``column_count`` columns."""
        self.use_wide_table = column_count > WIDE_TABLE_THRESHOLD
        if self.use_wide_table and self.wide_table_state is None:
            self.wide_table_state = WideTableState(column_count)

    def next_row(self, max_idx: int) -> None:
        if self.use_wide_table:
            if self.wide_table_state is not None:
                self.wide_table_state.next_row(max_idx)
        else:
            self.table_selected = _next_index(self.table_selected, max_idx)

    def previous_row(self, max_idx: int) -> None:
        if self.use_wide_table:
            if self.wide_table_state is not None:
                self.wide_table_state.previous_row(max_idx)
        else:
            self.table_selected = _previous_index(self.table_selected, max_idx)

    def scroll_left(self) -> None:
        if self.wide_table_state is not None:
            self.wide_table_state.scroll_left()

    def scroll_right(self) -> None:
        if self.wide_table_state is not None:
            self.wide_table_state.scroll_right()