"""Tables of text cells with headers, rendered with a table style."""

from __future__ import annotations

from .table_col import TableCol
from .table_row import TableRow
from .table_style import TableStyle, default_table_style


class TableError(ValueError):
    """Raised when table data cannot be added or set."""


_HEADERS_NOT_SET = "Cannot add/set data when headers are not set"


class Table:
    """Headers and rows of equally many columns.

    With ``allow_empty_fill`` set, setting a row beyond the existing ones
    inserts empty rows in between.
    """

    def __init__(self, headers: list[str] | None = None, style: TableStyle | None = None) -> None:
        self.allow_empty_fill = False
        self.headers: TableRow | None = None
        self.col_amount = 0
        self.rows: list[TableRow] = []
        self.style = style if style is not None else default_table_style()
        if headers is not None:
            self.set_headers(headers)

    def render(self, max_width: int = 0) -> str:
        """Render the table with its style; 0 means the terminal width."""
        return self.style.render(self, max_width)

    def reset(self) -> None:
        """Remove all rows."""
        self.rows = []

    def set_headers(self, headers: list[str]) -> None:
        """Set the headers; not allowed once data has been added."""
        if self.headers is not None and self.rows:
            raise TableError("Cannot set headers after data has been added")
        self.col_amount = len(headers)
        self.headers = TableRow(headers)

    def add_row(self, cols: list[str]) -> None:
        """Append a row; headers must be set and the column count must match."""
        self._check_cols(cols)
        self._add_row(cols)

    def add_rows(self, rows: list[list[str]]) -> None:
        """Append several rows; nothing is added if any row is invalid."""
        for number, cols in enumerate(rows, start=1):
            try:
                self._check_cols(cols)
            except TableError as exc:
                raise TableError(f"Row {number}: {exc}") from exc
        for cols in rows:
            self._add_row(cols)

    def set_row(self, index: int, cols: list[str]) -> None:
        """Replace the row at ``index`` or append it right after the last row."""
        self._check_cols(cols)
        count = len(self.rows)
        if index < 0:
            raise TableError(f"Cannot set row at index {index} -> Only {count} rows in data")
        if index < count:
            self.rows[index] = self._new_row(cols)
        elif index > count:
            if not self.allow_empty_fill:
                raise TableError(
                    f"Cannot set row at index {index} -> Only {count} rows in data"
                )
            empty = [""] * self.col_amount
            for _ in range(index - count):
                self._add_row(empty)
            self._add_row(cols)
        else:
            self._add_row(cols)

    def set_column(self, row_index: int, col_index: int, content: str) -> None:
        """Set the content of one cell; see ``set_row`` for the row index."""
        if self.headers is None:
            raise TableError(_HEADERS_NOT_SET)
        if col_index < 0 or col_index >= self.col_amount:
            raise TableError(
                f"Cannot set row at index {row_index} -> Only {len(self.rows)} rows in data"
            )
        if 0 <= row_index < len(self.rows):
            row = self.rows[row_index]
            row.set_col(col_index, TableCol(content, row))
        else:
            cols = [""] * self.col_amount
            cols[col_index] = content
            self.set_row(row_index, cols)

    def _new_row(self, cols: list[str]) -> TableRow:
        row = TableRow(cols)
        row.table = self
        return row

    def _add_row(self, cols: list[str]) -> None:
        self.rows.append(self._new_row(cols))

    def _check_cols(self, cols: list[str]) -> None:
        if self.headers is None:
            raise TableError(_HEADERS_NOT_SET)
        if len(cols) != self.col_amount:
            raise TableError(
                f"Cannot add {len(cols)} cols. Expected width is {self.col_amount}"
            )