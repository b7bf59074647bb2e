"""
Record, filter and result schemas for registry lookups.
"""
from __future__ import annotations

import copy
import datetime as dt
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping, Optional

from fincheck.config import (
    ID_KEY, ISO_DATE_KEY, FILTER_FIELDS,
    VERDICT_IDLE, VERDICT_LISTED, VERDICT_UNLISTED, VERDICT_MESSAGES,
)


@dataclass(frozen=True)
class Record:
    """One registry entry as loaded: original fields plus id and ISO date.

    The field mapping is read-only and holds a deep copy of the source entry.
    Nested list or dict values are not frozen; treat them as read-only too.
    """
    id: int
    iso_date: Optional[str]
    fields: Mapping[str, Any] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "fields", MappingProxyType(copy.deepcopy(dict(self.fields))))

    def get(self, key: str, default=None):
        return self.fields.get(key, default)

    def __getitem__(self, key: str):
        return self.fields[key]

    def __contains__(self, key: str) -> bool:
        return key in self.fields

    def to_dict(self) -> dict[str, Any]:
        """Serialized form: derived attributes first, then every original field."""
        return {ID_KEY: self.id, ISO_DATE_KEY: self.iso_date, **self.fields}


def _coerce_date(value) -> Optional[dt.date]:
    if value is None or value == "":
        return None
    if isinstance(value, dt.datetime):
        return value.date()
    if isinstance(value, dt.date):
        return value
    return dt.date.fromisoformat(str(value))


@dataclass
class FilterSpec:
    """One snapshot of search criteria. Empty values impose no constraint."""
    query: str = ""
    company: str = ""
    system: str = ""
    license: str = ""
    business_type: str = ""
    website: str = ""
    date_from: Optional[dt.date] = None
    date_to: Optional[dt.date] = None

    def __post_init__(self) -> None:
        self.date_from = _coerce_date(self.date_from)
        self.date_to = _coerce_date(self.date_to)

    def field_filters(self) -> dict[str, str]:
        """Non-empty per-field filters keyed by record field name."""
        return {
            FILTER_FIELDS[name]: getattr(self, name)
            for name in FILTER_FIELDS
            if getattr(self, name)
        }

    @property
    def has_date_range(self) -> bool:
        return self.date_from is not None or self.date_to is not None

    @property
    def is_active(self) -> bool:
        """True once any criterion is set (searching mode)."""
        return bool(self.query) or bool(self.field_filters()) or self.has_date_range

    @property
    def label(self) -> str:
        """Human-readable summary of the active criteria."""
        if not self.is_active:
            return "No criteria"
        parts = []
        if self.query:
            parts.append(f'"{self.query}"')
        for name in FILTER_FIELDS:
            value = getattr(self, name)
            if value:
                parts.append(f"{name}={value}")
        if self.has_date_range:
            s = self.date_from.isoformat() if self.date_from else "?"
            e = self.date_to.isoformat() if self.date_to else "?"
            parts.append(f"{s} to {e}")
        return ", ".join(parts)


@dataclass
class MatchResult:
    """Records that satisfied a FilterSpec, in load order."""
    records: list[Record]
    total: int
    criteria_active: bool

    @property
    def matched(self) -> int:
        return len(self.records)

    @property
    def verdict(self) -> str:
        if not self.criteria_active:
            return VERDICT_IDLE
        return VERDICT_LISTED if self.records else VERDICT_UNLISTED

    @property
    def message(self) -> str:
        return VERDICT_MESSAGES[self.verdict]
