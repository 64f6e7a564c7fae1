import pytest

from twlint.range_edits import RangeEditor


def test_multiple_edits_applied_back_to_front():
    text = "abcdef\n123456\nXYZ\n"
    ed = RangeEditor(text)

    ed.add_replacement(2, 5, "C", edit_type="replace_cde")
    ed.add_replacement(0, 0, ">>> ", edit_type="insert_prefix")
    start = text.index("456")
    ed.add_replacement(start, start + len("456\n"), "", edit_type="delete_tail")

    result, stats = ed.apply_edits()

    assert result == ">>> abCf\n123XYZ\n"
    assert stats["edits_applied"] == 3
    assert stats["by_type"] == {"replace_cde": 1, "insert_prefix": 1, "delete_tail": 1}


def test_same_width_first_wins():
    ed = RangeEditor("hello world")
    assert ed.add_replacement(0, 5, "hi", edit_type="first") is True
    assert ed.add_replacement(0, 5, "yo", edit_type="second") is False

    result, stats = ed.apply_edits()
    assert result == "hi world"
    assert stats["edits_applied"] == 1


def test_wider_edit_wins():
    ed = RangeEditor("hello world")
    ed.add_replacement(0, 5, "hi", edit_type="narrow")
    ed.add_replacement(0, 11, "bye", edit_type="wide")
    result, _ = ed.apply_edits()
    assert result == "bye"


def test_no_edits():
    result, stats = RangeEditor("abc").apply_edits()
    assert result == "abc"
    assert stats["edits_applied"] == 0


def test_invalid_range():
    with pytest.raises(ValueError):
        RangeEditor("abc").add_replacement(2, 1, "", edit_type=None)


def test_out_of_bounds_rejected_on_apply():
    ed = RangeEditor("abc")
    ed.add_replacement(1, 10, "x", edit_type=None)
    with pytest.raises(ValueError, match="exceeds text length"):
        ed.apply_edits()
