"""A single table cell whose content can be wrapped to a width."""

from __future__ import annotations

import re
from typing import Any, Callable

from .wrap import TrimMode, WhitespaceMode, Wrapper, visible_length

_RIGHT_SPACE = re.compile(r"[\t\n\f\r ]+\Z")

Renderer = Callable[[str], str]


def table_col_wrapper(limit: int) -> Wrapper:
    """Return the wrapper used to fit cell content into ``limit`` characters."""
    return Wrapper(
        limit,
        break_words=True,
        trim_mode=TrimMode.RIGHT,
        whitespace_mode=WhitespaceMode.CONTRACT,
    )


class TableCol:
    """A table cell with right-trimmed content and an optional renderer."""

    def __init__(self, content: str = "", row: Any = None) -> None:
        self.row = row
        self.renderer: Renderer | None = None
        self._set_content(content)

    def _set_content(self, content: str) -> None:
        self._content = _RIGHT_SPACE.sub("", content)
        self._line_count = len(self._content.split("\n"))

    def _rendered(self) -> str:
        if self.renderer is not None:
            return self.renderer(self._content)
        return self._content

    def render(self, max_width: int = 0) -> tuple[str, int, int]:
        """Return the content padded to ``max_width``, its widest line and its line count."""
        width = 0
        lines = []
        for line in self.content(max_width).split("\n"):
            length = visible_length(line)
            width = max(width, length)
            if max_width > 0 and max_width > length:
                line += " " * (max_width - length)
            lines.append(line)
        return "\n".join(lines), width, len(lines)

    def line_count(self, max_width: int = 0) -> int:
        """Return the number of lines, after wrapping if ``max_width`` is given."""
        if max_width == 0:
            return self._line_count
        return self.content(max_width).count("\n") + 1

    def content(self, max_width: int = 0) -> str:
        """Return the rendered content, wrapped if ``max_width`` is positive."""
        rendered = self._rendered()
        if max_width > 0:
            return table_col_wrapper(max_width).wrap(rendered)
        return rendered

    def content_prefixed(self, prefix: str, max_width: int = 0) -> str:
        """Return the content with ``prefix`` before every line."""
        return "\n".join(prefix + line for line in self.content(max_width).split("\n"))

    def width(self, max_width: int = 0) -> int:
        """Return the visible length of the widest line."""
        return max(visible_length(line) for line in self.content(max_width).split("\n"))