"""
Registry Search Report — verdict banner, counts, matched records table.
"""
from __future__ import annotations

from datetime import datetime
from pathlib import Path

from fincheck.config import (
    DISPLAY_COLUMNS, ORDER_FIELD, UNLISTED_TIP,
    VERDICT_IDLE, VERDICT_LISTED, VERDICT_UNLISTED,
)
from fincheck.data.schemas import FilterSpec, Record
from fincheck.data.store import RecordStore
from fincheck.excel.writer import ExcelWriter


def display_rows(records: list[Record]) -> list[dict]:
    """Table rows for the display columns. "No" falls back to the row number."""
    rows = []
    for i, rec in enumerate(records, 1):
        row = {key: rec.get(key) for key, _, _ in DISPLAY_COLUMNS}
        if row[ORDER_FIELD] is None:
            row[ORDER_FIELD] = i
        rows.append(row)
    return rows


def generate_json(store: RecordStore, spec: FilterSpec | None = None) -> dict:
    spec = spec or FilterSpec()
    result = store.search(spec)
    return {
        "criteria": spec.label,
        "total": result.total,
        "matched": result.matched,
        "criteria_active": result.criteria_active,
        "verdict": result.verdict,
        "message": result.message,
        "date_range": store.date_range(),
        "rows": display_rows(result.records),
    }


def generate_excel(
    store: RecordStore,
    output_path: str | Path,
    spec: FilterSpec | None = None,
) -> Path:
    data = generate_json(store, spec)
    ew = ExcelWriter()

    ws = ew.add_sheet("Search Results")
    generated = f"{datetime.now():%Y-%m-%d %H:%M}"
    row = ew.write_title(
        ws, "FINTECH CHECKER",
        f"Registry search  |  {data['criteria']}  |  Generated {generated}",
        merge_cols=len(DISPLAY_COLUMNS),
    )

    if data["verdict"] != VERDICT_IDLE:
        note = UNLISTED_TIP if data["verdict"] == VERDICT_UNLISTED else None
        row = ew.write_verdict(
            ws, row, data["message"], data["verdict"] == VERDICT_LISTED,
            note=note, merge_cols=len(DISPLAY_COLUMNS),
        )

    row = ew.write_kpi_row(ws, row, [
        (data["total"], "Registered Entities"),
        (data["matched"], "Matches"),
    ])

    ew.write_table(ws, row, DISPLAY_COLUMNS, data["rows"])
    return ew.save(output_path)
