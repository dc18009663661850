"""A table row: a fixed number of cells rendered side by side."""

from __future__ import annotations

from typing import Any, Callable

from .table_col import TableCol


class TableRow:
    """A row of table cells created from plain strings."""

    def __init__(self, cols: list[str]) -> None:
        self.col_amount = len(cols)
        self.max_line_count = 0
        self.table: Any = None
        self.cols: list[TableCol | None] = [None] * self.col_amount
        for index, content in enumerate(cols):
            self.set_col(index, TableCol(content, self))

    def _cells(self) -> list[TableCol]:
        return [col for col in self.cols if col is not None]

    def render(self, total_width: int) -> tuple[list[str], int]:
        """Render the cells fitted to ``total_width``; 0 means unrestricted."""
        return self.render_with_widths(self.calculate_widths(total_width))

    def width(self, max_width: int = 0) -> int:
        """Return the sum of the widths of all cells."""
        return sum(col.width(max_width) for col in self._cells())

    def calculate_widths(self, total_width: int) -> list[int]:
        """Share ``total_width`` among the cells in proportion to their widths."""
        actual = self.width()
        factor = 1.0
        if total_width > 0 and total_width != actual:
            factor = total_width / actual if actual else 0.0
        sizes = []
        used = 0
        last = self.col_amount - 1
        for index, col in enumerate(self._cells()):
            width = factor * col.width()
            if total_width == 0:
                width = 0.0
            elif index == last:
                width += total_width - (used + int(width))
            elif width == 0:
                width = 1.0
            else:
                used += int(width)
            sizes.append(int(width))
        return sizes

    def render_with_widths(self, col_widths: list[int]) -> tuple[list[str], int]:
        """Render each cell to its given width; also return the most lines of any cell."""
        rendered = []
        max_lines = 0
        for col, width in zip(self._cells(), col_widths):
            content, _, lines = col.render(width)
            rendered.append(content)
            max_lines = max(max_lines, lines)
        return rendered, max_lines

    def set_col(self, index: int, col: TableCol) -> None:
        """Put ``col`` at ``index``; raises IndexError beyond the column count."""
        if index >= self.col_amount:
            raise IndexError(
                f"Column index {index} is beyond colum size {self.col_amount}"
            )
        self.max_line_count = max(self.max_line_count, col.line_count())
        self.cols[index] = col
        col.row = self

    def apply_renderer(self, renderer: Callable[[str], str] | None) -> "TableRow":
        """Use ``renderer`` for the content of every cell."""
        for col in self._cells():
            col.renderer = renderer
        return self