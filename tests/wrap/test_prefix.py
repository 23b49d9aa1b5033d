import pytest

from softbreaks.wrap.prefix import detect_prefix


@pytest.mark.parametrize(
    "line, expected",
    [
        ("- item", "  "),
        ("-\t\titem", "   "),
        ("    - nested item", "      "),
        ("\t\t- tab nested", "    "),
        ("1. first", "   "),
        ("123.  spaced", "      "),
        ("  42. indented", "      "),
        ("> quote", "  "),
        ("\t> tabbed quote", "   "),
        ("    code-ish indent", "    "),
        ("\t  tab then spaces", "\t  "),
    ],
)
def test_detect_prefix_lead_ins(line, expected):
    assert detect_prefix(line) == expected


@pytest.mark.parametrize(
    "line",
    [
        "plain text",
        "-no space after dash",
        "1.no space after dot",
        ">no space after quote",
        "\tonly tabs",
        "a. lettered item",
        "",
    ],
)
def test_detect_prefix_no_lead_in(line):
    assert detect_prefix(line) == ""


def test_list_marker_wins_over_indentation():
    # Both the list rule and the plain-indent rule match; the list rule comes first.
    assert detect_prefix("  - item") == "    "


def test_mixed_tab_and_space_indent_is_not_a_list_marker():
    # " \t- x" mixes spaces and tabs, so only the plain-indent rule applies.
    assert detect_prefix(" \t- x") == " "


def test_prefix_is_always_whitespace():
    for line in ["- a", "10. b", "> c", "\t  d", "\t- e"]:
        assert detect_prefix(line).strip(" \t") == ""
