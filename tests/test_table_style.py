import re

import pytest

from clifkit.table import Table
from clifkit.table_style import (
    closed_table_style,
    default_table_style,
    open_table_style,
)
from clifkit.wrap import visible_length

HEADERS = ["H1", "H2", "H3"]

_HEADER_RX = re.compile(r"([\t\n\f\r ]*)\**([^\t\n\f\r ].+?)\**([\t\n\f\r ]*)")


def header_renderer(text):
    match = _HEADER_RX.fullmatch(text)
    if match:
        return f"{match.group(1)}*{match.group(2)}*{match.group(3)}"
    return text


CASES = [
    ([["foo", "bar", "baz"]], [17, 17, 19]),
    ([["foofoofoofoofoo", "bar", "baz"]], [26, 12, 15]),
    ([["foo\nfoo\nfoo\nfoo\nfoo", "bar", "baz"]], [17, 17, 19]),
    (
        [["foofoofoofoofoo", "bar", "baz"], ["foo", "barbarbarbarbar", "baz"]],
        [21, 21, 11],
    ),
    (
        [
            ["foofoofoofoofoo", "bar", "baz"],
            ["foo", "barbarbarbarbar", "baz"],
            ["foo", "bar", "bazbazbazbazbaz"],
        ],
        [17, 17, 19],
    ),
    (
        [
            ["foofoofoofoofoofoofoofoofoofoofoofoofoofoofoo", "bar", "baz"],
            ["foo", "barbarbarbarbarbarbarbarbarbarbarbarbarbarbar", "baz"],
            ["foo", "bar", "bazbazbazbazbazbazbazbazbazbazbazbazbazbazbaz"],
        ],
        [17, 17, 19],
    ),
    (
        [
            [
                "foo foo foo foo foo foo foo foo foo foo foo foo foo foo foo foo foo foo foo",
                "bar bar bar bar bar bar bar bar bar bar bar bar bar bar bar bar bar bar bar",
                "baz baz baz baz baz baz baz baz baz baz baz baz baz baz baz baz baz baz baz",
            ]
        ],
        [17, 17, 19],
    ),
]


def make_table(data, style=None):
    style = style if style is not None else default_table_style()
    table = Table(HEADERS, style)
    for row in data:
        table.add_row(row)
    return table, style


@pytest.mark.parametrize("data,expected", CASES)
def test_col_widths_fill_total(data, expected):
    table, style = make_table(data)
    widths = style.calculate_col_widths(table, 60)
    waste = style.waste(table.col_amount)
    assert waste == 7
    assert waste + sum(widths) == 60
    assert widths == expected


@pytest.mark.parametrize("data,expected", CASES)
def test_rendered_lines_have_equal_width(data, expected):
    table, style = make_table(data)
    style.header_renderer = header_renderer
    out = style.render(table, 60)
    lines = out.rstrip("\n").split("\n")
    widths = {visible_length(line) for line in lines}
    assert len(widths) == 1
    assert out.endswith("\n")
    assert "*H1*" in lines[1]


def test_render_simple_table():
    table, style = make_table([["foo", "bar", "baz"]])
    style.header_renderer = header_renderer
    expected = "\n".join(
        [
            "┌" + "─" * 19 + "┬" + "─" * 19 + "┬" + "─" * 21 + "┐",
            "│ *H1*" + " " * 13 + " │ *H2*" + " " * 13 + " │ *H3*" + " " * 15 + " │",
            "├" + "─" * 19 + "┼" + "─" * 19 + "┼" + "─" * 21 + "┤",
            "│ foo" + " " * 14 + " │ bar" + " " * 14 + " │ baz" + " " * 16 + " │",
            "└" + "─" * 19 + "┴" + "─" * 19 + "┴" + "─" * 21 + "┘",
        ]
    ) + "\n"
    assert style.render(table, 60) == expected


def test_render_open_style_has_no_outer_box():
    table, _ = make_table(CASES[5][0])
    style = open_table_style()
    style.header_renderer = header_renderer
    out = style.render(table, 60)
    lines = out.rstrip("\n").split("\n")
    assert "*H1*" in lines[0]
    assert not any(ch in out for ch in "┌┐└┘│├┤"[0:4])
    assert out.endswith("\n")


def test_default_header_renderer_applies_formatting():
    table, style = make_table([["foo", "bar", "baz"]])
    out = style.render(table, 60)
    assert "\x1b[1;4mH1\x1b[0m" in out


def test_copy_is_independent():
    original = closed_table_style()
    copied = original.copy()
    copied.left = "X"
    assert original.left == "│"
    assert copied.top == original.top


def test_render_without_headers_fails():
    table = Table()
    with pytest.raises(ValueError):
        default_table_style().render(table, 60)