from twlint.reflow import split_classes, variant_prefix


def test_split_on_any_whitespace():
    assert split_classes("  a\tb\n  c   d ") == ["a", "b", "c", "d"]


def test_split_empty_and_blank():
    assert split_classes("") == []
    assert split_classes(" \n\t ") == []


def test_variant_prefix_up_to_first_colon():
    assert variant_prefix("hover:underline") == "hover:"
    assert variant_prefix("md:hover:underline") == "md:"
    assert variant_prefix("[&>*]:p-2") == "[&>*]:"


def test_variant_prefix_absent():
    assert variant_prefix("underline") is None
    assert variant_prefix("") is None
    assert variant_prefix(None) is None
