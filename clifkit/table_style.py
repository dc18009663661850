"""Border characters and layout rules for rendering tables."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Optional

from .term import current_width
from .wrap import visible_length

if TYPE_CHECKING:
    from .table import Table

Renderer = Callable[[str], str]

_DIM = "\x1b[38;5;234m{}\x1b[0m"


def _bold_underline(content: str) -> str:
    return f"\x1b[1;4m{content}\x1b[0m"


def _bold(content: str) -> str:
    return f"\x1b[1m{content}\x1b[0m"


def _dim(text: str) -> str:
    return _DIM.format(text)


@dataclass
class TableStyle:
    """Characters drawn around and between cells, and the cell renderers.

    A renderer of ``None`` leaves cell content unchanged.
    """

    left_top: str = ""
    left: str = ""
    left_bottom: str = ""
    right: str = ""
    right_top: str = ""
    right_bottom: str = ""
    cross_inner: str = ""
    cross_top: str = ""
    cross_bottom: str = ""
    cross_left: str = ""
    cross_right: str = ""
    inner_horizontal: str = ""
    inner_vertical: str = ""
    top: str = ""
    bottom: str = ""
    prefix: str = ""
    suffix: str = ""
    header_renderer: Optional[Renderer] = None
    content_renderer: Optional[Renderer] = None

    def copy(self) -> "TableStyle":
        """Return an independent copy of this style."""
        return dataclasses.replace(self)

    def waste(self, col_count: int) -> int:
        """Return the number of characters used by borders and padding."""
        col_count = 0 if col_count <= 1 else col_count - 1
        per_col = visible_length(self.prefix) + visible_length(self.suffix)
        return (
            visible_length(self.left)
            + visible_length(self.right)
            + per_col * col_count
            + (col_count - 1) * visible_length(self.inner_vertical)
        )

    def render(self, table: "Table", max_width: int = 0) -> str:
        """Render ``table`` fitted to ``max_width`` (0: the terminal width)."""
        widths = self.calculate_col_widths(table, max_width)
        parts = [self._top_row(widths)]
        parts.append(self._header_row(table, widths))
        parts.extend(self._data_row(row, widths) for row in table.rows)
        parts.append(self._bottom_row(widths))
        return "".join(parts).rstrip("\n") + "\n"

    def calculate_col_widths(self, table: "Table", total_width: int = 0) -> list[int]:
        """Return the content width of each column for the given total width."""
        if table.headers is None:
            raise ValueError("Cannot render a table without headers")
        if total_width == 0:
            total_width = current_width()
        waste = self.waste(table.col_amount)
        total_width = 0 if waste >= total_width else total_width - waste

        table.headers.apply_renderer(self.header_renderer)
        for row in table.rows:
            row.apply_renderer(self.content_renderer)

        col_widths = [0] * table.col_amount
        for row in (table.headers, *table.rows):
            for index, width in enumerate(row.calculate_widths(total_width)):
                if width > col_widths[index]:
                    col_widths[index] = width

        total = sum(col_widths) or 1
        if total_width > 0 and col_widths:
            factor = total_width / total
            col_widths = [int(width * factor) for width in col_widths]
            col_widths[-1] += total_width - sum(col_widths)
        return col_widths

    def _border_row(
        self,
        first: str,
        fill: str,
        cross: str,
        last: str,
        col_widths: list[int],
    ) -> str:
        prefix = fill * visible_length(self.prefix)
        suffix = fill * visible_length(self.suffix)
        cells = [prefix + fill * max(width, 0) + suffix for width in col_widths]
        return first + cross.join(cells) + last

    def _content_row(
        self, first: str, cross: str, last: str, contents: list[str], col_widths: list[int]
    ) -> str:
        if not contents:
            return ""
        columns = [content.split("\n") for content in contents]
        height = max(len(lines) for lines in columns)
        for lines, width in zip(columns, col_widths):
            lines.extend([" " * width] * (height - len(lines)))
        out = []
        for line_parts in zip(*columns):
            cells = (self.prefix + part + self.suffix for part in line_parts)
            out.append(first + cross.join(cells) + last + "\n")
        return "".join(out)

    def _top_row(self, col_widths: list[int]) -> str:
        if not self.top:
            return ""
        return (
            self._border_row(self.left_top, self.top, self.cross_top, self.right_top, col_widths)
            + "\n"
        )

    def _header_row(self, table: "Table", col_widths: list[int]) -> str:
        headers = table.headers
        headers.apply_renderer(self.header_renderer)
        rendered, _ = headers.render_with_widths(col_widths)
        return self._content_row(self.left, self.inner_vertical, self.right, rendered, col_widths)

    def _data_row(self, row, col_widths: list[int]) -> str:
        row.apply_renderer(self.content_renderer)
        rendered, _ = row.render_with_widths(col_widths)
        border = self._border_row(
            self.cross_left, self.inner_horizontal, self.cross_inner, self.cross_right, col_widths
        )
        content = self._content_row(
            self.left, self.inner_vertical, self.right, rendered, col_widths
        )
        return border + "\n" + content

    def _bottom_row(self, col_widths: list[int]) -> str:
        if not self.bottom:
            return ""
        return self._border_row(
            self.left_bottom, self.bottom, self.cross_bottom, self.right_bottom, col_widths
        )


def closed_table_style() -> TableStyle:
    """Return a style with a full box drawn around and between all cells."""
    return TableStyle(
        bottom="─",
        cross_bottom="┴",
        cross_inner="┼",
        cross_left="├",
        cross_right="┤",
        cross_top="┬",
        header_renderer=_bold_underline,
        inner_horizontal="─",
        inner_vertical="│",
        left="│",
        left_bottom="└",
        left_top="┌",
        prefix=" ",
        right="│",
        right_bottom="┘",
        right_top="┐",
        suffix=" ",
        top="─",
    )


def closed_table_style_light() -> TableStyle:
    """Return the closed style with dimmed border characters."""
    return TableStyle(
        bottom=_dim("─"),
        cross_bottom=_dim("┴"),
        cross_inner=_dim("┼"),
        cross_left=_dim("├"),
        cross_right=_dim("┤"),
        cross_top=_dim("┬"),
        header_renderer=_bold_underline,
        inner_horizontal=_dim("─"),
        inner_vertical=_dim("│"),
        left=_dim("│"),
        left_bottom=_dim("└"),
        left_top=_dim("┌"),
        prefix=" ",
        right=_dim("│"),
        right_bottom=_dim("┘"),
        right_top=_dim("┐"),
        suffix=" ",
        top=_dim("─"),
    )


def open_table_style() -> TableStyle:
    """Return a style with lines only between cells, no outer box."""
    return TableStyle(
        cross_bottom="┴",
        cross_inner="┼",
        cross_top="┬",
        header_renderer=_bold,
        inner_horizontal="─",
        inner_vertical="│",
        prefix=" ",
        suffix=" ",
    )


def open_table_style_light() -> TableStyle:
    """Return the open style with dimmed border characters."""
    return TableStyle(
        cross_bottom=_dim("┴"),
        cross_inner=_dim("┼"),
        cross_top=_dim("┬"),
        header_renderer=_bold,
        inner_horizontal=_dim("─"),
        inner_vertical=_dim("│"),
        prefix=" ",
        suffix=" ",
    )


def default_table_style() -> TableStyle:
    """Return a new copy of the default (closed) style."""
    return closed_table_style()