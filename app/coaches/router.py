"""
Coach Directory Endpoints
=========================
Verified career coaches, linked from each match by field id. No authentication.

Endpoints:
- GET /api/v1/coaches?fieldId=<field_id>  - Verified coaches by name, optionally per field
- GET /api/v1/coaches/{coach_id}          - One verified coach (404 if unknown or unverified)
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from app.dependencies import get_coaches_store
from app.matching.errors import UpstreamFetchError
from app.matching.models import ErrorResponse
from app.stores.coaches import CoachesStore
from app.stores.errors import StoreError
from .models import Coach, CoachDetail

router = APIRouter(prefix="/api/v1/coaches", tags=["coaches"])


@router.get("", response_model=List[Coach], response_model_by_alias=False)
async def list_coaches(
    field_id: Optional[str] = Query(default=None, alias="fieldId"),
    store: CoachesStore = Depends(get_coaches_store),
):
    try:
        return await store.list_coaches(field_id or None)
    except StoreError as e:
        raise UpstreamFetchError(e.message) from e


@router.get(
    "/{coach_id}",
    response_model=CoachDetail,
    response_model_by_alias=False,
    responses={404: {"model": ErrorResponse}},
)
async def get_coach(coach_id: str, store: CoachesStore = Depends(get_coaches_store)):
    try:
        coach = await store.get_coach(coach_id)
    except StoreError as e:
        raise UpstreamFetchError(e.message) from e

    if coach is None:
        return JSONResponse(status_code=404, content={"error": "Coach not found"})
    return coach
