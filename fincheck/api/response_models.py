"""
Pydantic response schemas for the API.
"""
from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel

from fincheck.data.schemas import MatchResult


class HealthResponse(BaseModel):
    status: str
    records: int
    dated_records: int
    business_types: int
    source: Optional[str] = None
    loaded_at: str


class SummaryResponse(BaseModel):
    total: int
    business_types: int
    date_range: str


class BusinessTypesResponse(BaseModel):
    business_types: list[str]
    count: int


class SearchResponse(BaseModel):
    total: int
    matched: int
    criteria_active: bool
    verdict: str  # "idle", "listed", "unlisted"
    message: str
    criteria: str
    results: list[dict[str, Any]]

    @classmethod
    def from_result(cls, result: MatchResult, criteria: str) -> "SearchResponse":
        return cls(
            total=result.total,
            matched=result.matched,
            criteria_active=result.criteria_active,
            verdict=result.verdict,
            message=result.message,
            criteria=criteria,
            results=[r.to_dict() for r in result.records],
        )


class ReloadResponse(BaseModel):
    status: str
    records: int
    source: Optional[str] = None
