"""
Career Field Catalog Endpoints
==============================
Read-only browse of the catalog used for matching. No authentication.

Endpoints:
- GET /api/v1/career-fields             - All fields, by name
- GET /api/v1/career-fields/{field_id}  - One field (404 if unknown)
"""

from typing import List

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from app.dependencies import get_fields_store
from app.matching.errors import UpstreamFetchError
from app.matching.models import CareerField, ErrorResponse
from app.stores.errors import StoreError
from app.stores.fields import FieldsStore

router = APIRouter(prefix="/api/v1/career-fields", tags=["career-fields"])


@router.get("", response_model=List[CareerField])
async def list_career_fields(store: FieldsStore = Depends(get_fields_store)):
    try:
        return await store.list_fields()
    except StoreError as e:
        raise UpstreamFetchError(e.message) from e


@router.get(
    "/{field_id}",
    response_model=CareerField,
    responses={404: {"model": ErrorResponse}},
)
async def get_career_field(field_id: str, store: FieldsStore = Depends(get_fields_store)):
    try:
        field = await store.get_field(field_id)
    except StoreError as e:
        raise UpstreamFetchError(e.message) from e

    if field is None:
        return JSONResponse(status_code=404, content={"error": "Career field not found"})
    return field
