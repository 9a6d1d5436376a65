import pytest

from lazy_transform.core import CursorReleasedError, Remaining


def make_cursor(text: str = "hello world", position: int = 0) -> Remaining:
    return Remaining(text, position)


def test_unshift_returns_characters_in_order() -> None:
    cursor = make_cursor("ab")

    assert cursor.unshift() == "a"
    assert cursor.unshift() == "b"
    assert cursor.unshift() is None
    assert cursor.consumed == 2
    assert len(cursor) == 0
    assert not cursor


def test_unshift_n_clamps_to_remaining() -> None:
    cursor = make_cursor("abc")

    assert cursor.unshift_n(2) == "ab"
    assert cursor.unshift_n(10) == "c"
    assert cursor.unshift_n(1) == ""
    assert cursor.consumed == 3


def test_unshift_n_rejects_negative_count() -> None:
    with pytest.raises(ValueError):
        make_cursor().unshift_n(-1)


def test_unshift_while_takes_longest_matching_prefix() -> None:
    cursor = make_cursor("123abc")

    assert cursor.unshift_while(str.isdigit) == "123"
    assert str(cursor) == "abc"
    assert cursor.unshift_while(str.isdigit) == ""
    assert cursor.consumed == 3


def test_unshift_prefix_only_consumes_on_match() -> None:
    cursor = make_cursor("\\n rest")

    assert cursor.unshift_prefix("\\t") is False
    assert cursor.consumed == 0
    assert cursor.unshift_prefix("\\n") is True
    assert str(cursor) == " rest"
    assert cursor.unshift_prefix("") is False


def test_peek_and_startswith_do_not_consume() -> None:
    cursor = make_cursor("xyz")

    assert cursor.peek() == "x"
    assert cursor.peek(2) == "z"
    assert cursor.peek(3) is None
    assert cursor.startswith("xy")
    assert cursor.consumed == 0


def test_position_is_absolute() -> None:
    cursor = make_cursor("hello world", position=6)

    assert str(cursor) == "world"
    cursor.unshift_n(2)
    assert cursor.position == 8
    assert cursor.consumed == 2


def test_out_of_range_position_rejected() -> None:
    with pytest.raises(ValueError):
        make_cursor("abc", position=4)


def test_released_cursor_refuses_use() -> None:
    cursor = make_cursor("abc")
    cursor.unshift()
    cursor.release()

    with pytest.raises(CursorReleasedError) as info:
        cursor.peek()

    assert info.value.position == 1
    for read in (len, bool, str):
        with pytest.raises(CursorReleasedError):
            read(cursor)
    assert cursor.consumed == 1
    assert cursor.position == 1
    assert "released" in repr(cursor)
