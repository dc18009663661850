import time

import pytest

from clifkit.progress_bar import OutOfBoundsError, ProgressBar
from clifkit.progress_style import Addon, ascii_style, utf8_style
from clifkit.wrap import visible_length


def _render_at(bar, position):
    bar.set(position)
    rendered = bar.render()
    assert visible_length(rendered) == bar.render_width
    return rendered


def _all_off(style):
    style.percentage = Addon.OFF
    style.estimate = Addon.OFF
    style.elapsed = Addon.OFF
    style.count = Addon.OFF
    return style


@pytest.fixture
def bar():
    pb = ProgressBar(200)
    pb.style = ascii_style()
    pb.render_width = 80
    return pb


def test_render_without_info(bar):
    _all_off(bar.style)
    assert _render_at(bar, 0) == "[" + "-" * 78 + "]"
    assert _render_at(bar, 50) == "[" + "=" * 18 + ">" + "-" * 59 + "]"
    assert _render_at(bar, 100) == "[" + "=" * 38 + ">" + "-" * 39 + "]"
    assert _render_at(bar, 200) == "[" + "=" * 78 + "]"


def test_render_without_info_length(bar):
    _all_off(bar.style)
    for position in range(201):
        _render_at(bar, position)


def _with_info(bar):
    bar.style.percentage = Addon.APPEND
    bar.style.estimate = Addon.APPEND
    bar.style.elapsed = Addon.APPEND
    bar.style.count = Addon.PREPEND
    bar.started = time.monotonic() - 120


def test_render_with_info(bar):
    _with_info(bar)
    assert _render_at(bar, 0) == "  0/200 [" + "-" * 44 + "] @02m00s / ~00m00s /  0.0%"
    assert _render_at(bar, 50) == " 50/200 [" + "=" * 10 + ">" + "-" * 33 + "] @02m00s / ~06m00s / 25.0%"
    assert _render_at(bar, 100) == "100/200 [" + "=" * 21 + ">" + "-" * 22 + "] @02m00s / ~02m00s / 50.0%"
    assert _render_at(bar, 200) == "200/200 [" + "=" * 44 + "] @02m00s / ~00m00s /  100%"


def test_render_with_info_length(bar):
    _with_info(bar)
    for position in range(201):
        _render_at(bar, position)


def test_render_unicode_style(bar):
    bar.style = _all_off(utf8_style())
    assert _render_at(bar, 0) == "▕" + "░" * 78 + "▏"
    assert _render_at(bar, 50) == "▕" + "█" * 18 + "▓" + "░" * 59 + "▏"
    assert _render_at(bar, 100) == "▕" + "█" * 38 + "▓" + "░" * 39 + "▏"
    assert _render_at(bar, 200) == "▕" + "█" * 78 + "▏"


def test_render_unicode_style_with_info(bar):
    bar.style = _all_off(utf8_style())
    _render_at(bar, 0)
    bar.style.percentage = Addon.APPEND
    bar.style.estimate = Addon.APPEND
    bar.style.elapsed = Addon.PREPEND
    bar.style.count = Addon.PREPEND
    rendered = _render_at(bar, 50)
    assert rendered == " 50/200 / @00m00s ▕" + "█" * 10 + "▓" + "░" * 33 + "▏ ~00m00s / 25.0%"


def test_increase_and_increment(bar):
    bar.increase(10)
    bar.increment()
    assert bar.position() == 11
    with pytest.raises(OutOfBoundsError):
        bar.increase(190)
    assert bar.position() == 11


@pytest.mark.parametrize("position", [-1, 201])
def test_set_out_of_bounds(bar, position):
    with pytest.raises(OutOfBoundsError, match="Position is out of bounds"):
        bar.set(position)


def test_finish_and_reset(bar):
    assert bar.done() is False
    bar.finish()
    assert bar.done() is True
    assert bar.position() == 200
    assert bar.stopped is not None and bar.started is not None
    bar.reset()
    assert bar.position() == 0
    assert bar.started is None
    assert bar.stopped is None


def test_leaving_end_clears_stop_time(bar):
    bar.set(200)
    assert bar.stopped is not None
    bar.set(199)
    assert bar.stopped is None
    assert bar.done() is False


def test_default_style_is_utf8():
    pb = ProgressBar(5)
    assert pb.style == utf8_style()
    assert pb.size == 5