import pytest

from twlint.reflow import build_document, reflow, split_classes
from twlint.types import BoundaryMeta, MultilineOptions

from .conftest import quoted


def test_short_literal_is_canonical():
    res = reflow("a b", quoted(), MultilineOptions())
    assert res.text == "`\n    a b\n`"
    assert res.line_count == 3
    assert res.changed is False


def test_canonical_ignores_textual_difference():
    # current text is single-line, computed layout has 3 lines: still not reported
    res = reflow("  b   a  ", quoted(), MultilineOptions(), raw="`  b   a  `")
    assert res.changed is False


def test_canonical_does_not_apply_with_braces():
    meta = BoundaryMeta(start_column=4, closing_braces="}", closing_quote="`")
    res = reflow(" a b", meta, MultilineOptions())
    assert res.text == "}\n    a b\n`"
    assert res.line_count == 3
    assert res.changed is True


def test_group_separation_with_quotes():
    res = reflow("sm:text-lg text-sm hover:underline", quoted(), MultilineOptions(group="newLine"))
    assert res.text == "`\n    sm:text-lg\n    text-sm\n    hover:underline\n`"
    assert res.changed is True


def test_empty_line_policy_renders_blank_rows():
    res = reflow("sm:text-lg text-sm", quoted(), MultilineOptions())
    assert res.text == "`\n    sm:text-lg\n\n    text-sm\n`"


def test_two_per_line():
    res = reflow(
        "flex flex-col items-center justify-center",
        quoted(),
        MultilineOptions(classes_per_line=2),
    )
    assert res.text == "`\n    flex flex-col\n    items-center justify-center\n`"


def test_closing_quote_is_one_level_left():
    res = reflow("a hover:b", quoted(start_column=8), MultilineOptions())
    lines = res.text.split("\n")
    assert lines[-1] == "    `"
    assert lines[1] == "        a"


def test_tab_indent_closing_quote():
    meta = BoundaryMeta(start_column=2, opening_quote="`", closing_quote="`")
    res = reflow("a hover:b", meta, MultilineOptions(indent="tab"))
    assert res.text == "`\n\t\ta\n\n\t\thover:b\n\t`"


def test_template_segment_before_expression():
    meta = BoundaryMeta(start_column=4, opening_quote="`", opening_braces="${")
    res = reflow("a ", meta, MultilineOptions(), raw="`a ${")
    assert res.text == "`\n    a\n    ${"
    assert res.changed is True


def test_template_segment_between_expressions():
    meta = BoundaryMeta(start_column=4, closing_braces="}", opening_braces="${")
    res = reflow(" a b ", meta, MultilineOptions())
    assert res.text == "}\n    a b\n    ${"


def test_no_classes_renders_boundaries_only():
    res = reflow("   ", quoted(start_column=4), MultilineOptions())
    assert res.text == "`\n`"
    assert res.line_count == 2


def test_unchanged_when_already_laid_out():
    text = "`\n    a\n\n    hover:b\n`"
    res = reflow("\n    a\n\n    hover:b\n", quoted(), MultilineOptions(), raw=text)
    assert res.text == text
    assert res.changed is False


@pytest.mark.parametrize("policy", ["never", "newLine", "emptyLine"])
@pytest.mark.parametrize("width", [12, 30, 80])
def test_idempotent_and_conserves_tokens(policy, width):
    content = "flex md:flex-col md:items-center justify-center hover:underline hover:text-lg p-4"
    options = MultilineOptions(group=policy, print_width=width)
    first = reflow(content, quoted(), options)
    inner = first.text[1:-1]
    second = reflow(inner, quoted(), options, raw=first.text)

    assert second.text == first.text
    assert second.changed is False
    assert split_classes(inner) == split_classes(content)


def test_width_bound_holds():
    content = " ".join(f"class-{i}" for i in range(40))
    doc = build_document(content, quoted(), MultilineOptions(print_width=30, group="never"))
    for line in doc:
        assert len(line) <= 30 or line.class_count == 1


def test_count_bound_holds():
    content = " ".join(f"c{i}" for i in range(11))
    doc = build_document(content, quoted(), MultilineOptions(classes_per_line=3, group="never"))
    assert max(line.class_count for line in doc) == 3
