"""
Matching Endpoints

GET  /api/v1/matches            - Top career fields for the caller
POST /functions/v1/get-matches  - Same, at the original function path
GET  /api/v1/matching/health    - Health check

Response contract:
    200 {"matches": [{"fieldId", "name", "score"}, ...]}
    401 {"error": "Unauthorized"}
    500 {"error": "<message>"}
"""

from typing import Optional

from fastapi import APIRouter, Depends

from app.dependencies import (
    get_credential,
    get_fields_store,
    get_identity_client,
    get_preferences_store,
)
from app.identity.client import IdentityClient
from app.stores.fields import FieldsStore
from app.stores.preferences import PreferencesStore
from .models import ErrorResponse, MatchesResponse, MatchingHealthResponse
from .orchestrate import get_matches

router = APIRouter(tags=["matching"])

ERROR_RESPONSES = {
    401: {"model": ErrorResponse, "description": "Missing or invalid credential"},
    500: {"model": ErrorResponse, "description": "Preferences or catalog fetch failed"},
}


@router.get("/api/v1/matching/health", response_model=MatchingHealthResponse)
async def matching_health():
    """
    Health check for matching module.

    Does not require authentication.
    """
    return MatchingHealthResponse()


@router.get("/api/v1/matches", response_model=MatchesResponse, responses=ERROR_RESPONSES)
@router.post("/functions/v1/get-matches", response_model=MatchesResponse, responses=ERROR_RESPONSES)
async def get_matches_endpoint(
    credential: Optional[str] = Depends(get_credential),
    identity: IdentityClient = Depends(get_identity_client),
    preferences_store: PreferencesStore = Depends(get_preferences_store),
    fields_store: FieldsStore = Depends(get_fields_store),
):
    """
    Recommend up to 3 career fields for the authenticated user.

    Matches are recomputed on every call from the stored preferences and
    the current catalog. A user without saved preferences gets an empty list.
    """
    matches = await get_matches(credential, identity, preferences_store, fields_store)
    return MatchesResponse(matches=matches)
