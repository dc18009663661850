"""A single progress bar that renders itself to a fixed width."""

from __future__ import annotations

import struct
import threading
import time

from .progress_style import Addon, ProgressBarStyle, utf8_style
from .term import DEFAULT_WIDTH, current_width, term_width
from .wrap import visible_length


def _f32(value: float) -> float:
    return struct.unpack("f", struct.pack("f", value))[0]


class OutOfBoundsError(ValueError):
    """Raised when a position is below zero or beyond the size of the bar."""

    def __init__(self, message: str = "Position is out of bounds") -> None:
        super().__init__(message)


class ProgressBar:
    """Progress from zero to ``size``, rendered to ``render_width`` characters.

    ``started`` and ``stopped`` are monotonic timestamps, or None when unset.
    """

    def __init__(self, size: int) -> None:
        if size == 0:
            try:
                term_width()
            except OSError:
                size = DEFAULT_WIDTH
        self.size = size
        self.render_width = current_width()
        self.style: ProgressBarStyle = utf8_style()
        self.started: float | None = None
        self.stopped: float | None = None
        self._position = 0
        self._lock = threading.Lock()

    def _done(self) -> bool:
        return self._position == self.size

    def done(self) -> bool:
        """Return whether the bar has reached its size."""
        with self._lock:
            return self._done()

    def finish(self) -> None:
        """Skip to the end of the progress."""
        self.set(self.size)

    def increase(self, amount: int) -> None:
        """Add ``amount`` to the position; raises OutOfBoundsError beyond size."""
        with self._lock:
            if self._position + amount > self.size:
                raise OutOfBoundsError()
            self._position += amount
            self._set_times()

    def increment(self) -> None:
        """Add one to the position."""
        self.increase(1)

    def position(self) -> int:
        """Return the current position."""
        with self._lock:
            return self._position

    def reset(self) -> None:
        """Set the position to zero and clear the timers."""
        with self._lock:
            self._position = 0
            self.started = None
            self.stopped = None

    def set(self, position: int) -> None:
        """Move to ``position``; raises OutOfBoundsError outside 0..size."""
        with self._lock:
            if position < 0 or position > self.size:
                raise OutOfBoundsError()
            self._position = position
            self._set_times()

    def render(self) -> str:
        """Return the bar rendered at its current position."""
        with self._lock:
            self._set_times()
            style = self.style
            size = self.size or 1
            percentage = _f32(_f32(self._position * 100) / _f32(size))
            prefix = self._build_info(percentage, size, Addon.PREPEND)
            suffix = self._build_info(percentage, size, Addon.APPEND)
            info_size = (
                visible_length(prefix)
                + visible_length(suffix)
                + len(style.left_border)
                + len(style.right_border)
            )
            width = self.render_width - info_size
            if width == 0:
                width = 1
            progress = int(_f32(_f32(percentage * _f32(width)) / 100))
            remaining = width - progress

            parts = [prefix, style.left_border]
            if progress > 1:
                parts.append(style.progress * (progress - 1 if progress < width else progress))
            if 0 < progress < width:
                parts.append(style.rightmost)
            if remaining > 0:
                parts.append(style.none * remaining)
            parts.append(style.right_border)
            parts.append(suffix)
            return "".join(parts)

    def _build_info(self, percentage: float, size: int, placement: Addon) -> str:
        style = self.style
        count = self._render_count(size) if style.count is placement else ""
        elapsed = self._render_elapsed() if style.elapsed is placement else ""
        estimate = self._render_estimate(size) if style.estimate is placement else ""
        percent = style.render_percentage(percentage, self) if style.percentage is placement else ""
        if placement is Addon.APPEND:
            return style.render_suffix(count, elapsed, estimate, percent)
        return style.render_prefix(count, elapsed, estimate, percent)

    def _set_times(self) -> None:
        now = time.monotonic()
        if self.started is None:
            self.started = now
        if self.size == self._position:
            if self.stopped is None:
                self.stopped = now
        else:
            self.stopped = None

    def _since_start(self) -> float:
        return time.monotonic() - (self.started if self.started is not None else time.monotonic())

    def _render_count(self, size: int) -> str:
        return self.style.render_count(self._position, size, self)

    def _render_elapsed(self) -> str:
        if self._done() and self.started is not None and self.stopped is not None:
            duration = self.stopped - self.started
        else:
            duration = self._since_start()
        return self.style.render_elapsed(duration, self)

    def _render_estimate(self, size: int) -> str:
        if self._done():
            return self.style.render_estimate(0.0, self)
        duration = self._since_start()
        expected = duration * size / self._position if self._position > 0 else 0.0
        return self.style.render_estimate(expected - duration, self)