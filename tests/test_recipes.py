from lazy_transform import escape_double_quotes, unescape_backslashed_verbatim


def test_escape_double_quotes() -> None:
    output = escape_double_quotes(r'a "quoted" word')

    assert output.is_owned
    assert output == r'a \"quoted\" word'


def test_escape_double_quotes_escapes_backslashes() -> None:
    assert escape_double_quotes("C:\\dir") == "C:\\\\dir"


def test_escape_borrows_plain_text() -> None:
    text = "nothing to see"

    output = escape_double_quotes(text)

    assert output.is_borrowed
    assert output.value is text


def test_unescape_strips_one_level() -> None:
    output = unescape_backslashed_verbatim(r'A \"quoted\" word\\!')

    assert output == r'A "quoted" word\!'

    output = unescape_backslashed_verbatim(output.value)

    assert output == r'A "quoted" word!'


def test_unescape_drops_trailing_backslash() -> None:
    assert unescape_backslashed_verbatim("end\\") == "end"


def test_unescape_borrows_plain_text() -> None:
    text = "plain"

    assert unescape_backslashed_verbatim(text).value is text


def test_escape_then_unescape_restores_input() -> None:
    text = r'mixed \ and " chars'

    escaped = escape_double_quotes(text)

    assert unescape_backslashed_verbatim(escaped.value) == text
