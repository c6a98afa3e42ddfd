"""
FastAPI dependencies shared by the routers.

Collaborators are built per request from app.state, so nothing is kept
in module globals.
"""

from typing import Optional

from fastapi import Depends, Header, Request

from app.config import Settings
from app.identity.client import AuthenticatedUser, IdentityClient, extract_bearer_token
from app.matching.orchestrate import authenticate
from app.stores.coaches import CoachesStore
from app.stores.db import Database
from app.stores.fields import FieldsStore
from app.stores.preferences import PreferencesStore


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_database(request: Request) -> Database:
    return request.app.state.db


def get_identity_client(settings: Settings = Depends(get_settings)) -> IdentityClient:
    return IdentityClient(
        base_url=settings.supabase_url,
        anon_key=settings.supabase_anon_key,
        timeout=settings.identity_timeout_seconds,
    )


def get_preferences_store(db: Database = Depends(get_database)) -> PreferencesStore:
    return PreferencesStore(db)


def get_fields_store(db: Database = Depends(get_database)) -> FieldsStore:
    return FieldsStore(db)


def get_coaches_store(db: Database = Depends(get_database)) -> CoachesStore:
    return CoachesStore(db)


def get_credential(authorization: Optional[str] = Header(default=None)) -> Optional[str]:
    """Bearer token from the Authorization header, if any."""
    return extract_bearer_token(authorization)


async def get_current_user(
    credential: Optional[str] = Depends(get_credential),
    identity: IdentityClient = Depends(get_identity_client),
) -> AuthenticatedUser:
    """Authenticated caller; raises UnauthorizedError otherwise."""
    return await authenticate(credential, identity)
