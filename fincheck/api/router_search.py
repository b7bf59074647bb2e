"""
Search endpoint: the registry lookup itself.
"""
from __future__ import annotations

from fastapi import APIRouter, Depends

from fincheck.data.store import RecordStore
from fincheck.data.schemas import FilterSpec
from fincheck.api.dependencies import get_store, parse_filter
from fincheck.api.response_models import SearchResponse

router = APIRouter(prefix="/api", tags=["search"])


@router.get("/search", response_model=SearchResponse)
def search(
    spec: FilterSpec = Depends(parse_filter),
    store: RecordStore = Depends(get_store),
):
    """Matching records in registry order, with the compliance verdict.

    With no criteria the full registry comes back and the verdict is "idle";
    criteria with zero matches give "unlisted".
    """
    result = store.search(spec)
    return SearchResponse.from_result(result, spec.label)
