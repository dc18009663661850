import pytest

from clifkit.progress_style import (
    Addon,
    ascii_style,
    default_render_count,
    default_render_elapsed,
    default_render_estimate,
    default_render_percentage,
    default_render_prefix,
    default_render_suffix,
    render_fixed_size_duration,
    utf8_style,
)


def test_duration_minutes_and_seconds():
    assert render_fixed_size_duration(120) == "02m00s"
    assert render_fixed_size_duration(360) == "06m00s"


@pytest.mark.parametrize("seconds", [0, 0.5, -5, -3600])
def test_duration_below_one_second(seconds):
    assert render_fixed_size_duration(seconds) == "00m00s"


def test_duration_seconds_with_millis():
    assert render_fixed_size_duration(5.25) == "05s250"


def test_duration_days_and_weeks():
    assert render_fixed_size_duration(3 * 24 * 3600) == "03d00h"
    assert render_fixed_size_duration(100 * 7 * 24 * 3600) == "00100w"


def test_duration_years():
    rendered = render_fixed_size_duration(11 * 365 * 24 * 3600)
    assert rendered.startswith("11y")
    assert rendered.endswith("w")


@pytest.mark.parametrize(
    "seconds", [1, 9.5, 99, 100, 3599, 3700, 90000, 200000, 2_000_000, 10_000_000, 400_000_000]
)
def test_duration_is_fixed_size(seconds):
    assert len(render_fixed_size_duration(seconds)) == 6


def test_render_count_pads_position():
    assert default_render_count(50, 200, None) == " 50/200"
    assert default_render_count(200, 200, None) == "200/200"
    assert default_render_count(0, 200, None) == "  0/200"


def test_render_elapsed_and_estimate():
    assert default_render_elapsed(120, None) == "@02m00s"
    assert default_render_estimate(360, None) == "~06m00s"
    assert default_render_estimate(0, None) == "~00m00s"


def test_render_percentage():
    assert default_render_percentage(25.0, None) == "25.0%"
    assert default_render_percentage(0.0, None) == " 0.0%"
    assert default_render_percentage(100.0, None) == " 100%"


def test_render_prefix_and_suffix():
    assert default_render_prefix(" 50/200", "@00m00s", "", "") == " 50/200 / @00m00s "
    assert default_render_suffix("", "", "~00m00s", "25.0%") == " ~00m00s / 25.0%"
    assert default_render_prefix("", "", "", "") == ""
    assert default_render_suffix("", "", "", "") == ""


def test_styles_are_independent_instances():
    first = ascii_style()
    second = ascii_style()
    first.percentage = Addon.OFF
    assert second.percentage is Addon.APPEND
    assert second.elapsed is Addon.PREPEND


def test_copy_is_independent():
    style = utf8_style()
    clone = style.copy()
    clone.count = Addon.PREPEND
    clone.progress = "#"
    assert style.count is Addon.OFF
    assert style.progress == "█"
    assert clone.render_count is style.render_count


def test_style_characters():
    style = ascii_style()
    assert (style.left_border, style.progress, style.rightmost, style.none, style.right_border) == (
        "[",
        "=",
        ">",
        "-",
        "]",
    )
    assert utf8_style().rightmost == "▓"