"""Rendering styles for progress bars."""

from __future__ import annotations

import dataclasses
import enum
from dataclasses import dataclass
from typing import Any, Callable

_HOURS_PER_YEAR = 365.0 * 24
_HOURS_PER_WEEK = 7.0 * 24
_HOURS_PER_DAY = 24.0


class Addon(enum.Enum):
    """Where an information addon is placed relative to the bar."""

    OFF = 0
    PREPEND = 1
    APPEND = 2


def render_fixed_size_duration(seconds: float) -> str:
    """Render a duration in seconds as a six character string."""
    hours = seconds / 3600
    minutes = seconds / 60
    if hours > _HOURS_PER_YEAR * 10:
        years = int(hours / _HOURS_PER_YEAR)
        hours -= years * _HOURS_PER_YEAR
        return f"{years:02d}y{int(hours / _HOURS_PER_WEEK):02d}w"
    if hours > _HOURS_PER_WEEK * 10:
        return f"{int(hours / _HOURS_PER_WEEK):05d}w"
    if hours > _HOURS_PER_DAY * 2:
        days = int(hours / _HOURS_PER_DAY)
        hours -= _HOURS_PER_DAY * days
        return f"{days:02d}d{int(hours):02d}h"
    if hours > 1:
        whole_hours = int(hours)
        rest = minutes - whole_hours * 60
        return f"{whole_hours:02d}h{int(rest):02d}m"
    if seconds > 99:
        whole_minutes = int(minutes)
        rest = seconds - whole_minutes * 60
        return f"{whole_minutes:02d}m{int(rest):02d}s"
    if seconds < 1:
        return "00m00s"
    millis = (seconds - int(seconds)) * 1000
    return f"{int(seconds):02d}s{int(millis):03d}"


def default_render_count(position: int, maximum: int, bar: Any) -> str:
    """Render "position/maximum", the position padded to the width of maximum."""
    digits = len(str(maximum))
    return f"{position:>{digits}d}/{maximum}"


def default_render_elapsed(elapsed: float, bar: Any) -> str:
    """Render the elapsed time in seconds."""
    return "@" + render_fixed_size_duration(elapsed)


def default_render_estimate(forecast: float, bar: Any) -> str:
    """Render the estimated remaining time in seconds."""
    return "~" + render_fixed_size_duration(forecast)


def default_render_percentage(percent: float, bar: Any) -> str:
    """Render a percentage with one decimal, five characters wide."""
    if percent > 99.99:
        return " 100%"
    return f"{percent:4.1f}%"


def _join(parts: tuple[str, ...]) -> str:
    return " / ".join(part for part in parts if part)


def default_render_prefix(count: str, elapsed: str, estimate: str, percentage: str) -> str:
    """Join the non-empty addons placed before the bar."""
    joined = _join((count, elapsed, estimate, percentage))
    return joined + " " if joined else ""


def default_render_suffix(count: str, elapsed: str, estimate: str, percentage: str) -> str:
    """Join the non-empty addons placed after the bar."""
    joined = _join((count, elapsed, estimate, percentage))
    return " " + joined if joined else ""


@dataclass
class ProgressBarStyle:
    """Characters, addon placement and addon renderers of a progress bar."""

    empty: str = "-"
    progress: str = "="
    rightmost: str = ">"
    none: str = "-"
    left_border: str = "["
    right_border: str = "]"
    count: Addon = Addon.OFF
    elapsed: Addon = Addon.OFF
    estimate: Addon = Addon.OFF
    percentage: Addon = Addon.OFF
    render_count: Callable[[int, int, Any], str] = default_render_count
    render_elapsed: Callable[[float, Any], str] = default_render_elapsed
    render_estimate: Callable[[float, Any], str] = default_render_estimate
    render_percentage: Callable[[float, Any], str] = default_render_percentage
    render_prefix: Callable[[str, str, str, str], str] = default_render_prefix
    render_suffix: Callable[[str, str, str, str], str] = default_render_suffix

    def copy(self) -> "ProgressBarStyle":
        """Return an independent copy of this style."""
        return dataclasses.replace(self)


def ascii_style() -> ProgressBarStyle:
    """Return a new ASCII style with elapsed time before and percentage after."""
    return ProgressBarStyle(
        empty="-",
        progress="=",
        rightmost=">",
        none="-",
        left_border="[",
        right_border="]",
        percentage=Addon.APPEND,
        elapsed=Addon.PREPEND,
    )


def utf8_style() -> ProgressBarStyle:
    """Return a new block character style with elapsed time before and percentage after."""
    return ProgressBarStyle(
        empty=" ",
        progress="█",
        rightmost="▓",
        none="░",
        left_border="▕",
        right_border="▏",
        percentage=Addon.APPEND,
        elapsed=Addon.PREPEND,
    )