"""
ExcelWriter — high-level helpers for building styled Excel workbooks.
"""
from __future__ import annotations

from pathlib import Path

from openpyxl import Workbook
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.worksheet import Worksheet

from fincheck.excel.styles import (
    TITLE_FONT, SUBTITLE_FONT, NOTE_FONT,
    LISTED_FONT, UNLISTED_FONT, LISTED_FILL, UNLISTED_FILL,
)
from fincheck.excel.formatters import (
    format_header_row,
    format_data_cell,
    auto_column_width,
    add_kpi_card,
)


ColSpec = tuple[str, str, str]  # (key, col_type, label)


class ExcelWriter:
    """Fluent builder for styled Excel workbooks."""

    def __init__(self) -> None:
        self.wb = Workbook()
        self._first_sheet = True

    # ------------------------------------------------------------------
    # Sheet management
    # ------------------------------------------------------------------

    def add_sheet(self, title: str) -> Worksheet:
        """Create a new worksheet (re-uses the default sheet for the first call)."""
        if self._first_sheet:
            ws = self.wb.active
            ws.title = title
            self._first_sheet = False
        else:
            ws = self.wb.create_sheet(title=title)
        return ws

    # ------------------------------------------------------------------
    # Title block
    # ------------------------------------------------------------------

    def write_title(
        self,
        ws: Worksheet,
        title: str,
        subtitle: str,
        merge_cols: int = 7,
    ) -> int:
        """Write title + subtitle rows. Returns next available row."""
        ws.cell(row=1, column=1).value = title
        ws.cell(row=1, column=1).font = TITLE_FONT
        ws.merge_cells(start_row=1, start_column=1, end_row=1, end_column=merge_cols)

        ws.cell(row=2, column=1).value = subtitle
        ws.cell(row=2, column=1).font = SUBTITLE_FONT
        ws.merge_cells(start_row=2, start_column=1, end_row=2, end_column=merge_cols)

        for col in range(1, merge_cols + 1):
            ws.column_dimensions[get_column_letter(col)].width = 18

        return 4

    def write_verdict(
        self,
        ws: Worksheet,
        row: int,
        message: str,
        listed: bool,
        note: str | None = None,
        merge_cols: int = 7,
    ) -> int:
        """Write the compliance verdict banner (+ optional note). Returns next row."""
        cell = ws.cell(row=row, column=1)
        cell.value = message
        cell.font = LISTED_FONT if listed else UNLISTED_FONT
        cell.fill = LISTED_FILL if listed else UNLISTED_FILL
        ws.merge_cells(start_row=row, start_column=1, end_row=row, end_column=merge_cols)
        if note:
            ws.cell(row=row + 1, column=1).value = note
            ws.cell(row=row + 1, column=1).font = NOTE_FONT
            return row + 3
        return row + 2

    # ------------------------------------------------------------------
    # KPI cards
    # ------------------------------------------------------------------

    def write_kpi_row(
        self,
        ws: Worksheet,
        row: int,
        kpis: list[tuple],  # [(value, label), ...]
        start_col: int = 1,
        col_spacing: int = 2,
    ) -> int:
        """Write a row of KPI cards. Returns next row (row + 3)."""
        col = start_col
        for value, label in kpis:
            add_kpi_card(ws, row, col, value, label)
            col += col_spacing
        return row + 3

    # ------------------------------------------------------------------
    # Data tables
    # ------------------------------------------------------------------

    def write_table(
        self,
        ws: Worksheet,
        start_row: int,
        columns: list[ColSpec],
        rows: list[dict],
        freeze: bool = True,
    ) -> int:
        """Write a full table with headers + data rows.

        Absent values are written as empty cells. Returns the row number
        after the last data row.
        """
        for col_num, (_, _, label) in enumerate(columns, 1):
            ws.cell(row=start_row, column=col_num).value = label
        format_header_row(ws, start_row, len(columns))

        row = start_row + 1
        for row_data in rows:
            for col_num, (key, col_type, _) in enumerate(columns, 1):
                format_data_cell(ws, row, col_num, row_data.get(key), col_type)
            row += 1

        auto_column_width(ws)
        if freeze:
            ws.freeze_panes = f"A{start_row + 1}"

        return row

    # ------------------------------------------------------------------
    # Save
    # ------------------------------------------------------------------

    def save(self, path: str | Path) -> Path:
        """Save the workbook to disk."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        self.wb.save(path)
        return path
