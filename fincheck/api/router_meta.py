"""
Meta endpoints: health, summary, business types, reload.
"""
from __future__ import annotations

from fastapi import APIRouter, Depends

from fincheck.config import DATA_FILE
from fincheck.data.store import RecordStore
from fincheck.api.dependencies import get_store, set_store
from fincheck.api.response_models import (
    HealthResponse, SummaryResponse, BusinessTypesResponse, ReloadResponse,
)

router = APIRouter(prefix="/api", tags=["meta"])


@router.get("/health", response_model=HealthResponse)
def health(store: RecordStore = Depends(get_store)):
    return HealthResponse(
        status="ok",
        records=store.row_count(),
        dated_records=store.dated_count(),
        business_types=len(store.business_types()),
        source=store.source,
        loaded_at=store.loaded_at.isoformat(timespec="seconds"),
    )


@router.get("/summary", response_model=SummaryResponse)
def summary(store: RecordStore = Depends(get_store)):
    """Registration summary shown before any search is performed."""
    return SummaryResponse(
        total=store.row_count(),
        business_types=len(store.business_types()),
        date_range=store.date_range(),
    )


@router.get("/business-types", response_model=BusinessTypesResponse)
def list_business_types(store: RecordStore = Depends(get_store)):
    types = store.business_types()
    return BusinessTypesResponse(business_types=types, count=len(types))


@router.post("/reload", response_model=ReloadResponse)
def reload_data(store: RecordStore = Depends(get_store)):
    """Re-read the registry file into a fresh store and swap it in.

    Requests already holding the old store keep searching that snapshot.
    """
    new_store = RecordStore.from_file(DATA_FILE)
    set_store(new_store)
    print(f"  Reload complete — {new_store.row_count():,} records (was {store.row_count():,})")
    return ReloadResponse(status="reloaded", records=new_store.row_count(), source=new_store.source)
