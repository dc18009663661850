"""Terminal width detection."""

from __future__ import annotations

import os
import sys

DEFAULT_WIDTH = 78
"""Width used whenever the terminal size cannot be determined."""

TERM_MARGIN = 0 if os.name == "nt" else 4
"""Columns kept free at the right edge of the terminal."""


def term_width() -> int:
    """Return the usable width of the terminal attached to standard input.

    Raises OSError if standard input is not a terminal or its size is unknown.
    """
    try:
        fd = sys.stdin.fileno()
    except (AttributeError, ValueError, OSError) as exc:
        raise OSError("standard input has no usable file descriptor") from exc
    columns = os.get_terminal_size(fd).columns
    return columns - TERM_MARGIN


def current_width() -> int:
    """Return the terminal width, or DEFAULT_WIDTH when it cannot be determined."""
    try:
        return term_width()
    except OSError:
        return DEFAULT_WIDTH