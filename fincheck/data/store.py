"""
RecordStore — immutable in-memory registry snapshot.

Built once per load and never mutated; a reload builds a new store and the
caller swaps the reference. The search frame is derived at build time so every
query runs as a handful of vectorized masks.
"""
from __future__ import annotations

import datetime as dt
from pathlib import Path
from typing import Iterable, Mapping, Optional

import pandas as pd

from fincheck.config import DATA_FILE, DATE_FIELD, BUSINESS_TYPE_FIELD
from fincheck.data.dates import parse_indo_date
from fincheck.data.filters import build_frame, match_frame
from fincheck.data.loader import load_raw_records
from fincheck.data.schemas import FilterSpec, MatchResult, Record


class RecordStore:
    """Identifier-tagged, date-normalized registry records with search."""

    def __init__(self, records: Iterable[Record] = (), source: Optional[str] = None) -> None:
        self._records: tuple[Record, ...] = tuple(records)
        self._frame: pd.DataFrame = build_frame(self._records)
        self.source = source
        self.loaded_at = dt.datetime.now()

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    @classmethod
    def load(cls, raw_records: Iterable, source: Optional[str] = None) -> "RecordStore":
        """Tag each raw entry with its position and normalized registration date."""
        records = []
        for idx, raw in enumerate(raw_records):
            fields = raw if isinstance(raw, Mapping) else {}
            records.append(Record(
                id=idx,
                iso_date=parse_indo_date(fields.get(DATE_FIELD)),
                fields=fields,
            ))
        return cls(records, source=source)

    @classmethod
    def from_file(cls, filepath: Path = DATA_FILE) -> "RecordStore":
        print("Loading registry data...")
        store = cls.load(load_raw_records(filepath), source=str(filepath))
        print(f"  {store.row_count():,} records, {store.dated_count():,} with a parseable date")
        return store

    # ------------------------------------------------------------------
    # Searching
    # ------------------------------------------------------------------

    @property
    def records(self) -> tuple[Record, ...]:
        return self._records

    def match(self, spec: FilterSpec) -> list[Record]:
        return match_frame(self._frame, self._records, spec)

    def search(self, spec: FilterSpec) -> MatchResult:
        """Run spec against this snapshot and wrap the outcome with counts."""
        return MatchResult(
            records=self.match(spec),
            total=self.row_count(),
            criteria_active=spec.is_active,
        )

    # ------------------------------------------------------------------
    # Metadata queries
    # ------------------------------------------------------------------

    def row_count(self) -> int:
        return len(self._records)

    def dated_count(self) -> int:
        return sum(1 for r in self._records if r.iso_date is not None)

    def business_types(self) -> list[str]:
        """Unique non-empty business types, sorted alphabetically."""
        values = {
            str(v).strip() for v in (r.get(BUSINESS_TYPE_FIELD) for r in self._records)
            if v is not None and str(v).strip()
        }
        return sorted(values)

    def date_range(self) -> str:
        """Earliest to latest normalized registration date."""
        dates = self._frame["iso_date"].dropna()
        if dates.empty:
            return "N/A"
        return f"{dates.min():%Y-%m-%d} to {dates.max():%Y-%m-%d}"
