"""
Preferences Endpoints
=====================
The caller's own preference profile.

Endpoints:
- GET /api/v1/preferences - Stored profile (404 if none saved yet)
- PUT /api/v1/preferences - Insert or replace the profile
"""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from app.dependencies import get_current_user, get_preferences_store
from app.identity.client import AuthenticatedUser
from app.matching.errors import UpstreamFetchError
from app.matching.models import ErrorResponse, PreferencesRecord, PreferencesUpdate
from app.stores.errors import StoreError
from app.stores.preferences import PreferencesStore

router = APIRouter(prefix="/api/v1/preferences", tags=["preferences"])


@router.get(
    "",
    response_model=PreferencesRecord,
    responses={404: {"model": ErrorResponse}, 401: {"model": ErrorResponse}},
)
async def read_preferences(
    user: AuthenticatedUser = Depends(get_current_user),
    store: PreferencesStore = Depends(get_preferences_store),
):
    """Get the caller's saved preferences."""
    try:
        record = await store.get_preferences(user.user_id)
    except StoreError as e:
        raise UpstreamFetchError(e.message) from e

    if record is None:
        return JSONResponse(status_code=404, content={"error": "Preferences not found"})
    return record


@router.put(
    "",
    response_model=PreferencesRecord,
    responses={401: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def save_preferences(
    update: PreferencesUpdate,
    user: AuthenticatedUser = Depends(get_current_user),
    store: PreferencesStore = Depends(get_preferences_store),
):
    """
    Insert if no row exists for the caller, replace it if one does.

    `hobbies` may be sent as a comma-separated string.
    """
    try:
        return await store.upsert_preferences(user.user_id, update)
    except StoreError as e:
        raise UpstreamFetchError(e.message) from e
