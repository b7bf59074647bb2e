"""
FastAPI dependencies — RecordStore singleton, filter parsing.
"""
from __future__ import annotations

import datetime as dt
from typing import Optional

from fastapi import HTTPException, Query

from fincheck.data.store import RecordStore
from fincheck.data.schemas import FilterSpec

# ---------------------------------------------------------------------------
# Global store singleton (set during startup, replaced whole on reload)
# ---------------------------------------------------------------------------
_store: RecordStore | None = None


def set_store(store: RecordStore) -> None:
    global _store
    _store = store


def get_store() -> RecordStore:
    if _store is None:
        raise HTTPException(503, "Registry not loaded yet")
    return _store


# ---------------------------------------------------------------------------
# Filter parsing from query params
# ---------------------------------------------------------------------------

def _parse_date(name: str, value: Optional[str]) -> Optional[dt.date]:
    if not value:
        return None
    try:
        return dt.date.fromisoformat(value)
    except ValueError:
        raise HTTPException(400, f"Invalid {name}: {value} (expected YYYY-MM-DD)")


def parse_filter(
    q: str = Query("", description="Free-text search (company, system, website, license, business type)"),
    company: str = Query("", description="Nama Perusahaan contains"),
    system: str = Query("", description="Nama Sistem Elektronik contains"),
    license: str = Query("", description="Surat Tanda Berizin/Terdaftar contains"),
    business_type: str = Query("", description="Jenis Usaha contains"),
    website: str = Query("", description="Alamat Website contains"),
    date_from: Optional[str] = Query(None, description="YYYY-MM-DD, inclusive"),
    date_to: Optional[str] = Query(None, description="YYYY-MM-DD, inclusive"),
) -> FilterSpec:
    """Parse search query parameters into a FilterSpec."""
    return FilterSpec(
        query=q,
        company=company,
        system=system,
        license=license,
        business_type=business_type,
        website=website,
        date_from=_parse_date("date_from", date_from),
        date_to=_parse_date("date_to", date_to),
    )
