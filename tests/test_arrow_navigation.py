"""Test arrow-key navigation and selection collapsing on the text field."""

from textfield import TextField
from textfield.position import Position


def test_up_arrow_keeps_sticky_column():
    """Up arrow keeps the column across a shorter line."""
    lines = [
        "This is a long line with many characters that we can navigate",
        "Short line",
        "Another long line with many characters for testing navigation"
    ]
    field = TextField.from_lines(lines)
    field.set_cursor(Position(2, 50))

    field.up()
    # The raw column is remembered, the displayed one is clamped
    assert field.cursor == Position(1, 50)
    assert field.constrained_cursor == Position(1, 10)

    field.up()
    assert field.cursor == Position(0, 50)
    assert field.constrained_cursor == Position(0, 50)


def test_down_arrow_keeps_sticky_column():
    lines = ["A long line of text here", "tiny", "Another long line of text"]
    field = TextField.from_lines(lines)
    field.set_cursor(Position(0, 20))

    field.down()
    assert field.constrained_cursor == Position(1, 4)
    field.down()
    assert field.cursor == Position(2, 20)


def test_down_on_last_line_moves_to_end():
    field = TextField("one\ntwo three")
    field.set_cursor(Position(1, 2))
    field.down()
    assert field.cursor == Position(1, 9)


def test_left_twenty_times_stops_at_start():
    field = TextField("Hello world!")
    field.set_cursor(Position(0, 5))
    for _ in range(20):
        field.left()
    assert field.cursor == Position(0, 0)


def test_left_after_sticky_column():
    field = TextField.from_lines(["a long first line", "short"])
    field.set_cursor(Position(0, 15))
    field.down()
    field.left()
    assert field.cursor == Position(1, 4)


def test_left_collapses_selection_to_start():
    field = TextField("Hello world!")
    field.set_cursor(Position(0, 3))
    for _ in range(4):
        field.select_right()
    assert field.has_selection()

    field.left()
    assert not field.has_selection()
    assert field.cursor == Position(0, 3)


def test_right_collapses_selection_to_end():
    field = TextField("Hello world!")
    field.set_cursor(Position(0, 8))
    field.select_left()
    field.select_left()

    field.right()
    assert not field.has_selection()
    assert field.cursor == Position(0, 8)

    field.set_cursor(Position(0, 8))
    field.clear_selection()
    field.select_left()
    field.select_left()
    field.left()
    assert field.cursor == Position(0, 6)


def test_up_collapses_selection_and_moves_one_line():
    field = TextField("first line\nsecond line\nthird line")
    field.set_cursor(Position(2, 7))
    field.select_up()
    assert field.selection_marker == Position(1, 7)

    field.up()
    assert not field.has_selection()
    # From min(cursor, marker) = (1, 7), one line up, original column kept
    assert field.cursor == Position(0, 7)


def test_down_collapses_selection_and_moves_one_line():
    field = TextField("first line\nsecond line\nthird line")
    field.set_cursor(Position(0, 3))
    field.select_down()

    field.down()
    assert not field.has_selection()
    assert field.cursor == Position(2, 3)


def test_home_and_end():
    field = TextField("first line\nsecond line")
    field.set_cursor(Position(1, 4))
    field.end()
    assert field.cursor == Position(1, 11)
    field.home()
    assert field.cursor == Position(1, 0)


def test_document_never_becomes_empty():
    field = TextField("ab\ncd")
    field.select_all()
    field.delete_selection()
    for _ in range(5):
        field.delete_previous()
        field.delete_next()
        field.left()
        field.up()
        field.down()
    assert field.lines == [""]
    assert field.cursor == Position(0, 0)
