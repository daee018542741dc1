from datetime import datetime

import pytest

from logerr.logmodel import Column, LogModel, parse_entry


def _line(i: int, kind: str = "INFO") -> str:
    return f"[2020-01-01 00:00:00.000] [app] [{kind}]     message {i}\n"


def test_parse_single_line_entry():
    fields = parse_entry("[2020-01-01 00:00:00.000] [app] [ERROR]    boom\n")
    assert fields == ["2020-01-01 00:00:00.000", "app", "ERROR", "boom"]


def test_parse_entry_with_details():
    fields = parse_entry("[t] [m] [WARNING] msg\n  line1\nline2  ")
    assert fields == ["t", "m", "WARNING", "msg", "line1", "line2"]


@pytest.mark.parametrize("text", ["", "   ", "\n\n", "\t \n"])
def test_parse_whitespace_is_none(text):
    assert parse_entry(text) is None


def test_parse_raw_text_gets_defaults():
    fields = parse_entry("  hello \nworld")
    assert fields[1:] == ["unset_name", "INFO", "hello", "world"]
    parsed = datetime.strptime(fields[0], "%Y-%m-%d %H:%M:%S.%f")
    assert parsed.year >= 2020


def test_column_order():
    fields = parse_entry("[ts] [mod] [DEBUG] text\n")
    assert [fields[column] for column in Column] == ["ts", "mod", "DEBUG", "text"]
    assert Column.MESSAGE == 3


def test_queue_and_append_rows():
    model = LogModel()
    model.queue_log_entry(_line(1))
    model.queue_log_entry("   ")
    model.queue_log_entry(_line(2, "DEBUG"))
    assert model.row_count() == 0
    assert model.append_rows() == 2
    assert model.row_count() == 2
    assert model.data(0, Column.MESSAGE) == "message 1"
    assert model.data(1, Column.TYPE) == "DEBUG"
    assert model.append_rows() == 0


def test_append_rows_within_double_buffer_keeps_all():
    model = LogModel(2)
    for i in range(4):
        model.queue_log_entry(_line(i))
    model.append_rows()
    assert model.row_count() == 4


def test_append_rows_trims_to_buffer_size():
    model = LogModel(2)
    for i in range(5):
        model.queue_log_entry(_line(i))
    model.append_rows()
    assert [e[Column.MESSAGE] for e in model.entries()] == ["message 3", "message 4"]


def test_append_rows_trims_existing_first():
    model = LogModel(2)
    for i in range(3):
        model.queue_log_entry(_line(i))
    model.append_rows()
    for i in range(3, 5):
        model.queue_log_entry(_line(i))
    model.append_rows()
    assert [e[Column.MESSAGE] for e in model.entries()] == ["message 3", "message 4"]


def test_append_row_directly_and_ignores_whitespace():
    model = LogModel()
    model.append_row("  \n ")
    assert model.row_count() == 0
    assert model.has_children() is False
    model.append_row("[t] [m] [INFO] msg\ndetail")
    assert model.row_count() == 1
    assert model.has_children() is True


def test_children():
    model = LogModel()
    model.append_row("[t] [m] [ERROR] msg\nfirst\nsecond")
    model.append_row("[t] [m] [INFO] plain\n")
    assert model.has_children(0) is True
    assert model.child_count(0) == 2
    assert model.data(0, Column.MESSAGE, 0) == "first"
    assert model.data(0, Column.MESSAGE, 1) == "second"
    assert model.data(0, Column.TIMESTAMP, 1) == ""
    assert model.has_children(1) is False
    assert model.child_count(1) == 0


def test_header_data():
    model = LogModel()
    assert [model.header_data(i) for i in range(4)] == ["Timestamp", "Module", "Type", "Message"]
    assert model.header_data(4) is None


def test_set_scrollback_buffer_size_drops_oldest():
    model = LogModel()
    for i in range(5):
        model.append_row(_line(i))
    model.set_scrollback_buffer_size(3)
    assert model.scrollback_buffer_size() == 3
    assert [e[Column.MESSAGE] for e in model.entries()] == ["message 2", "message 3", "message 4"]
    model.set_scrollback_buffer_size(10)
    assert model.row_count() == 3
    assert model.scrollback_buffer_size() == 10


def test_entries_is_a_copy():
    model = LogModel()
    model.append_row(_line(0))
    copy = model.entries()
    copy[0][Column.MESSAGE] = "changed"
    copy.append(["x"])
    assert model.data(0, Column.MESSAGE) == "message 0"
    assert model.row_count() == 1


def test_default_buffer_size():
    assert LogModel().scrollback_buffer_size() == 10000