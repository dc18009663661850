"""A pool of named progress bars rendered together to a live output."""

from __future__ import annotations

import sys
import threading
from typing import TextIO

from .progress_bar import ProgressBar
from .progress_style import ProgressBarStyle, utf8_style
from .term import current_width

DEFAULT_REFRESH = 0.05
"""Seconds between two renderings of a started pool."""

_CLEAR_LINE = "\x1b[1A\x1b[2K"


class _LiveWriter:
    """Writes blocks of lines, replacing the previously written block."""

    def __init__(self, stream: TextIO) -> None:
        self.stream = stream
        self._lines = 0

    def start(self) -> None:
        self._lines = 0

    def write(self, text: str) -> None:
        self.stream.write(_CLEAR_LINE * self._lines + text)
        self.stream.flush()
        self._lines = text.count("\n")

    def stop(self) -> None:
        self.stream.flush()
        self._lines = 0


class ProgressBarPool:
    """Named progress bars that are rendered together while the pool runs."""

    def __init__(
        self, style: ProgressBarStyle | None = None, stream: TextIO | None = None
    ) -> None:
        self.refresh = DEFAULT_REFRESH
        self._style = style if style is not None else utf8_style()
        self._width = current_width()
        self._bars: dict[str, ProgressBar] = {}
        self._lock = threading.RLock()
        self._writer = _LiveWriter(stream if stream is not None else sys.stdout)
        self._started = False
        self._stop = threading.Event()
        self._done = threading.Event()

    @property
    def started(self) -> bool:
        """Whether the pool is currently rendering."""
        with self._lock:
            return self._started

    def _bar(self, name: str) -> ProgressBar:
        try:
            return self._bars[name]
        except KeyError:
            raise KeyError(f'Progress bar with name "{name}" does not exist') from None

    def increase(self, name: str, amount: int) -> None:
        """Add ``amount`` to the named bar."""
        with self._lock:
            self._bar(name).increase(amount)

    def init(self, name: str, size: int) -> ProgressBar:
        """Create, register and return a new named bar of the given size.

        Raises ValueError if a bar of that name exists already.
        """
        with self._lock:
            if name in self._bars:
                raise ValueError(f'Progress bar with name "{name}" does already exist')
            bar = ProgressBar(size)
            bar.style = self._style
            bar.render_width = self._width
            self._bars[name] = bar
            return bar

    def has(self, name: str) -> bool:
        """Return whether a bar with this name exists."""
        with self._lock:
            return name in self._bars

    def increment(self, name: str, *args: str) -> None:
        """Increment each named bar by one; nothing changes if one is missing."""
        with self._lock:
            bars = [self._bar(n) for n in (name, *args)]
            for bar in bars:
                bar.increment()

    def set(self, name: str, position: int) -> None:
        """Move the named bar to ``position``."""
        with self._lock:
            self._bar(name).set(position)

    def start(self) -> None:
        """Begin rendering all bars periodically; does nothing if running."""
        with self._lock:
            if self._started:
                return
            self._started = True
            self._stop = threading.Event()
            self._done = threading.Event()
            self._writer.start()
            thread = threading.Thread(
                target=self._run, args=(self._stop, self._done), daemon=True
            )
            thread.start()

    def _run(self, stop: threading.Event, done: threading.Event) -> None:
        try:
            while not stop.wait(self.refresh):
                self._render()
            self._render()
            self._writer.stop()
        finally:
            with self._lock:
                self._started = False
                for bar in self._bars.values():
                    bar.reset()
            done.set()

    def _render(self) -> None:
        with self._lock:
            text = "".join(bar.render() + "\n" for bar in self._bars.values())
            self._writer.write(text)

    def finish(self) -> threading.Event:
        """Move all bars to their end and stop rendering.

        Returns an event that is set once the final rendering is written.
        """
        with self._lock:
            for bar in self._bars.values():
                bar.finish()
            if not self._started:
                finished = threading.Event()
                finished.set()
                return finished
            self._stop.set()
            return self._done

    def use_style(self, style: ProgressBarStyle) -> None:
        """Set the style of all bars; raises RuntimeError once started."""
        with self._lock:
            if self._started:
                raise RuntimeError("Cannot set style after start")
            self._style = style
            for bar in self._bars.values():
                bar.style = style

    def use_width(self, width: int) -> None:
        """Set the render width of all bars; raises RuntimeError once started."""
        with self._lock:
            if self._started:
                raise RuntimeError("Cannot set width after start")
            self._width = width
            for bar in self._bars.values():
                bar.render_width = width