"""
Multi-field record matching: free-text query, per-field filters, date range.

All criteria are evaluated as vectorized boolean masks over a frame of
lower-cased searchable columns, then mapped back onto the record sequence so
results keep their original load order.
"""
from __future__ import annotations

import math
from typing import Sequence

import numpy as np
import pandas as pd

from fincheck.config import QUERY_FIELDS, FILTER_FIELDS
from fincheck.data.schemas import FilterSpec, Record

_SEARCH_KEYS = list(dict.fromkeys(QUERY_FIELDS + list(FILTER_FIELDS.values())))
_DATE_COL = "iso_date"
_END_OF_DAY = pd.Timedelta(days=1) - pd.Timedelta(milliseconds=1)


def _fold(value) -> str | None:
    """Lower-cased text form of a field value; None when the field is absent."""
    if value is None:
        return None
    if isinstance(value, float):
        if math.isnan(value):
            return None
        if value.is_integer():
            value = int(value)
    return str(value).lower()


def build_frame(records: Sequence[Record]) -> pd.DataFrame:
    """Searchable columns (folded text) plus a parsed date column, one row per record."""
    columns = {key: [_fold(r.get(key)) for r in records] for key in _SEARCH_KEYS}
    frame = pd.DataFrame(columns, index=pd.RangeIndex(len(records)), dtype=object)
    iso = pd.Series([r.iso_date for r in records], index=frame.index, dtype=object)
    # Normalized dates with out-of-range days ("2021-01-35") become NaT
    frame[_DATE_COL] = pd.to_datetime(iso, format="%Y-%m-%d", errors="coerce")
    return frame


def _contains(col: pd.Series, term: str) -> np.ndarray:
    return col.str.contains(term.lower(), regex=False, na=False).to_numpy(dtype=bool)


def _date_mask(dates: pd.Series, spec: FilterSpec) -> np.ndarray:
    """Closed interval [date_from 00:00:00.000, date_to 23:59:59.999]."""
    in_range = dates.notna()
    if spec.date_from is not None:
        in_range &= dates >= pd.Timestamp(spec.date_from)
    if spec.date_to is not None:
        in_range &= dates <= pd.Timestamp(spec.date_to) + _END_OF_DAY
    return in_range.to_numpy(dtype=bool)


def match_frame(frame: pd.DataFrame, records: Sequence[Record], spec: FilterSpec) -> list[Record]:
    """Filter records using a frame previously built from the same sequence."""
    if not spec.is_active:
        return list(records)

    mask = np.ones(len(records), dtype=bool)

    if spec.query:
        any_field = np.zeros(len(records), dtype=bool)
        for key in QUERY_FIELDS:
            any_field |= _contains(frame[key], spec.query)
        mask &= any_field

    for key, term in spec.field_filters().items():
        mask &= _contains(frame[key], term)

    if spec.has_date_range:
        mask &= _date_mask(frame[_DATE_COL], spec)

    return [records[i] for i in np.flatnonzero(mask)]


def match_records(records: Sequence[Record], spec: FilterSpec) -> list[Record]:
    """Records satisfying every active criterion of spec, in input order."""
    records = tuple(records)
    if not spec.is_active:
        return list(records)
    return match_frame(build_frame(records), records, spec)
