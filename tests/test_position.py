"""Test Position movement and clamping."""

import pytest
from textfield.position import Position


LINES = ["Hello world!", "What's up?", "This is a line!"]


def test_ordering_is_line_then_column():
    assert Position(0, 50) < Position(1, 0)
    assert Position(1, 2) < Position(1, 3)
    assert Position(2, 0) > Position(1, 99)
    assert Position(1, 1) == Position(1, 1)


def test_min_and_max():
    a = Position(0, 5)
    b = Position(1, 0)
    assert a.min(b) == a
    assert b.min(a) == a
    assert a.max(b) == b
    assert b.max(a) == b


def test_str():
    assert str(Position(1, 5)) == "(1, 5)"


def test_left_stops_at_document_start():
    """Twenty lefts from (0, 5) end at (0, 0)."""
    lines = ["Hello world!"]
    pos = Position(0, 5)
    for _ in range(20):
        pos = pos.left(lines)
    assert pos == Position(0, 0)


def test_left_wraps_to_end_of_previous_line():
    assert Position(1, 0).left(LINES) == Position(0, 12)


def test_left_from_sticky_column_snaps_to_line_end_first():
    # Column 40 on a 10 character line: snap to 10, then move to 9
    assert Position(1, 40).left(LINES) == Position(1, 9)


def test_left_from_sticky_column_on_empty_line():
    lines = ["abc", ""]
    assert Position(1, 7).left(lines) == Position(0, 3)


def test_right_walks_through_the_document():
    pos = Position(1, 5)
    for _ in range(100):
        pos = pos.right(LINES)
    assert pos == Position(2, len(LINES[2]))


def test_right_moves_to_next_line_start():
    assert Position(0, 12).right(LINES) == Position(1, 0)


def test_right_from_sticky_column_moves_to_next_line():
    assert Position(1, 30).right(LINES) == Position(2, 0)


def test_up_keeps_column():
    assert Position(2, 14).up() == Position(1, 14)


def test_up_on_first_line_goes_to_column_zero():
    assert Position(0, 7).up() == Position(0, 0)


def test_down_keeps_column():
    assert Position(0, 11).down(LINES) == Position(1, 11)


def test_down_on_last_line_goes_to_end():
    assert Position(2, 3).down(LINES) == Position(2, 15)


def test_constrained_clamps_column_to_line_length():
    pos = Position(1, 40)
    assert pos.constrained(LINES) == Position(1, 10)
    # The original keeps its sticky column
    assert pos.column == 40


def test_constrained_clamps_line_first():
    assert Position(10, 3).constrained(LINES) == Position(2, 3)
    assert Position(10, 99).constrained(LINES) == Position(2, 15)


def test_columns_count_characters_not_bytes():
    lines = ["héllo wörld", "日本語"]
    assert Position(1, 99).constrained(lines) == Position(1, 3)
    assert Position(0, 11).right(lines) == Position(1, 0)


def test_indexing_outside_document_is_a_contract_violation():
    with pytest.raises(AssertionError):
        Position(5, 0).right(LINES)
