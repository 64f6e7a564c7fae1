from twlint.reflow import Document, Group, pack_group
from twlint.reflow.lines import Line
from twlint.types import MultilineOptions


def _group(*classes):
    g = Group()
    for c in classes:
        g.add_class(c)
    return g


def _pack(group, **kw):
    doc = Document(start_column=4)
    pack_group(doc, group, MultilineOptions(**kw))
    return [line.to_string() for line in doc]


def test_measure_has_no_side_effects():
    line = Line(start_column=4).indent().add_class("flex")
    assert line.measure_with("flex-col") == len("    flex flex-col")
    assert line.classes == ["flex"]


def test_fits_on_one_line():
    assert _pack(_group("flex", "flex-col")) == ["", "    flex flex-col"]


def test_width_breaks_lines():
    classes = ["aaaaa", "bbbbb", "ccccc", "ddddd", "eeeee"]
    lines = _pack(_group(*classes), print_width=20)
    assert lines[1:] == ["    aaaaa bbbbb", "    ccccc ddddd", "    eeeee"]
    assert all(len(line) <= 20 for line in lines)


def test_width_is_checked_after_append():
    # exactly at the limit still fits
    lines = _pack(_group("aaaaa", "bbbbb"), print_width=len("    aaaaa bbbbb"))
    assert lines[1:] == ["    aaaaa bbbbb"]


def test_classes_per_line():
    lines = _pack(_group("flex", "flex-col", "items-center", "justify-center"), classes_per_line=2)
    assert lines[1:] == ["    flex flex-col", "    items-center justify-center"]


def test_long_first_class_leaves_indented_empty_line():
    long = "x" * 30
    lines = _pack(_group(long, "a"), print_width=20)
    assert lines[1:] == ["    ", f"    {long}", "    a"]


def test_long_class_after_others_gets_own_line():
    long = "x" * 30
    lines = _pack(_group("a", long), print_width=20)
    assert lines[1:] == ["    a", f"    {long}"]


def test_empty_group_is_blank_row():
    assert _pack(Group()) == ["", ""]


def test_tab_indentation():
    doc = Document(start_column=2, indent_char="\t")
    pack_group(doc, _group("a", "b"), MultilineOptions(indent="tab"))
    assert doc.to_string() == "\n\t\ta b"
