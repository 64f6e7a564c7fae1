import pytest

from twlint.reflow import normalize_whitespace


def test_trim_and_collapse():
    res = normalize_whitespace("  b  a  ")
    assert res.text == "b a"
    assert res.changed is True


def test_normalized_is_noop():
    res = normalize_whitespace("b a")
    assert res.text == "b a"
    assert res.changed is False


def test_empty():
    assert normalize_whitespace("").changed is False


@pytest.mark.parametrize("allow_multiline, expected", [
    (True, "d c\n  b a"),
    (False, "d c b a"),
])
def test_two_lines(allow_multiline, expected):
    assert normalize_whitespace("  d  c\n  b  a  ", allow_multiline).text == expected


def test_multiline_keeps_line_breaks_and_indentation():
    unclean = "\n      d  c\n      b  a\n    "
    clean = "\n      d c\n      b a\n    "
    assert normalize_whitespace(unclean, True).text == clean
    assert normalize_whitespace(clean, True).changed is False


def test_multiline_disallowed_joins_lines():
    clean = "\n      d c\n      b a\n    "
    assert normalize_whitespace(clean, False).text == "d c b a"


def test_trailing_spaces_before_line_break_removed():
    assert normalize_whitespace("c   \n  b", True).text == "c\n  b"


def test_blank_separator_rows_survive():
    text = "\n    a\n\n    hover:b\n"
    assert normalize_whitespace(text, True).changed is False


def test_sides_next_to_expressions_keep_one_space():
    assert normalize_whitespace("  a  b  ", keep_leading=True, keep_trailing=True).text == " a b "
    assert normalize_whitespace("  a  b  ", keep_leading=True).text == " a b"
    assert normalize_whitespace("  a  b  ", keep_trailing=True).text == "a b "


def test_whitespace_only_between_expressions():
    assert normalize_whitespace("   ", keep_leading=True, keep_trailing=True).text == " "
    assert normalize_whitespace("   ").text == ""


def test_crlf_line_breaks_kept():
    res = normalize_whitespace("a\r\n  b", True)
    assert res.text == "a\r\n  b"
    assert res.changed is False
    assert normalize_whitespace("a  \r\n  b", True).text == "a\r\n  b"


def test_indented_empty_row_survives():
    text = "\n    \n    " + "x" * 90 + "\n"
    assert normalize_whitespace(text, True).changed is False
