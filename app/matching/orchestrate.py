"""
Matches Request Orchestration

credential → identity → (preferences ∥ catalog) → normalize → match

Outcomes:
- UnauthorizedError: missing or rejected credential, raised before any store access
- []: user has no saved preferences, or no tags, or an empty catalog
- UpstreamFetchError: a store fetch failed (never reported as empty matches)
"""

import asyncio
import logging
from typing import List, Optional

from app.identity.client import AuthenticatedUser, IdentityClient, IdentityError
from app.stores.errors import StoreError
from app.stores.fields import FieldsStore
from app.stores.preferences import PreferencesStore
from .errors import UnauthorizedError, UpstreamFetchError
from .match import MAX_MATCHES, resolve_matches
from .models import MatchResult
from .normalize import build_user_tag_set

logger = logging.getLogger(__name__)


async def authenticate(
    credential: Optional[str],
    identity: IdentityClient
) -> AuthenticatedUser:
    """Resolve the caller or raise UnauthorizedError."""
    if not credential:
        logger.warning("User auth error: missing credential")
        raise UnauthorizedError()

    try:
        user = await identity.get_user(credential)
    except IdentityError as e:
        logger.warning(f"User auth error: {e.message}")
        raise UnauthorizedError() from e

    logger.debug(f"Authenticated {user.user_id} <{user.email or 'no email'}>")
    return user


def _raise_if_failed(outcome: object) -> None:
    if isinstance(outcome, StoreError):
        raise UpstreamFetchError(outcome.message) from outcome
    if isinstance(outcome, BaseException):
        raise outcome


async def get_matches(
    credential: Optional[str],
    identity: IdentityClient,
    preferences_store: PreferencesStore,
    fields_store: FieldsStore,
    limit: int = MAX_MATCHES,
) -> List[MatchResult]:
    """
    Compute the caller's best-fit career fields.

    The profile and catalog are fetched concurrently. A failed fetch of
    either one is an internal error, even for a user with no profile.

    Raises:
        UnauthorizedError: credential missing or rejected
        UpstreamFetchError: the profile or catalog fetch failed
    """
    user = await authenticate(credential, identity)

    profile, catalog = await asyncio.gather(
        preferences_store.get_preferences(user.user_id),
        fields_store.list_fields(),
        return_exceptions=True,
    )

    _raise_if_failed(profile)
    _raise_if_failed(catalog)

    if profile is None:
        logger.info(f"No preferences saved for {user.user_id}")
        return []

    user_tags = build_user_tag_set(profile)
    matches = resolve_matches(user_tags, catalog, limit)

    logger.info(
        f"Matched {user.user_id}: {len(user_tags)} tags, "
        f"{len(catalog)} fields, {len(matches)} matches"
    )
    return matches
