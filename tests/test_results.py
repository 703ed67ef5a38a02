from sqliwidgets.results import ResultsTable, status_text


def test_status_text():
    assert status_text(12, 3) == "Query time: 12ms | 3 rows"


def test_starts_with_plain_table():
    table = ResultsTable()
    assert table.use_wide_table is False
    assert table.wide_table_state is None
    assert table.selected == 0


def test_eight_columns_use_plain_table():
    table = ResultsTable()
    table.update(8)
    assert table.use_wide_table is False
    assert table.wide_table_state is None


def test_many_columns_use_wide_table():
    table = ResultsTable()
    table.update(9)
    assert table.use_wide_table is True
    assert table.wide_table_state.column_count == 9


def test_wide_state_kept_across_updates():
    table = ResultsTable()
    table.update(12)
    state = table.wide_table_state
    table.update(4)
    table.update(20)
    assert table.wide_table_state is state
    assert table.use_wide_table is True


def test_plain_rows_wrap():
    table = ResultsTable()
    table.next_row(1)
    assert table.selected == 1
    table.next_row(1)
    assert table.selected == 0
    table.previous_row(1)
    assert table.selected == 1


def test_wide_rows_move_wide_selection_only():
    table = ResultsTable()
    table.update(10)
    table.next_row(4)
    table.next_row(4)
    assert table.selected == 2
    assert table.wide_table_state.selected == 2
    assert table.table_selected == 0


def test_wide_previous_row_wraps():
    table = ResultsTable()
    table.update(10)
    table.previous_row(7)
    assert table.selected == 7


def test_scrolling_without_wide_state_does_nothing():
    table = ResultsTable()
    table.scroll_right()
    table.scroll_left()
    assert table.wide_table_state is None
    assert table.selected == 0


def test_scrolling_moves_wide_state():
    table = ResultsTable()
    table.update(10)
    table.wide_table_state.update_visible_columns(30)
    table.scroll_right()
    assert table.wide_table_state.scroll_position == 1
    table.scroll_left()
    assert table.wide_table_state.scroll_position == 0