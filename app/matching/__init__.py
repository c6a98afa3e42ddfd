"""
Career Matching Layer

Preference tags → Career fields

This module answers: "Given what the user likes, enjoys and is good at,
which career fields fit best?"

- Normalizes likes, hobbies and skills into one case-folded tag set
- Scores each career field by keyword overlap
- Ranks by score (ties broken on field_id) and returns the top 3

Version: matching_engine_v1
"""

from .models import (
    UserPreferenceProfile,
    PreferencesRecord,
    PreferencesUpdate,
    CareerField,
    MatchResult,
    MatchesResponse,
    ErrorResponse,
)
from .normalize import normalize_tags, build_user_tag_set
from .match import MAX_MATCHES, resolve_matches
from .errors import MatchingRequestException, UnauthorizedError, UpstreamFetchError

__all__ = [
    "UserPreferenceProfile",
    "PreferencesRecord",
    "PreferencesUpdate",
    "CareerField",
    "MatchResult",
    "MatchesResponse",
    "ErrorResponse",
    "normalize_tags",
    "build_user_tag_set",
    "MAX_MATCHES",
    "resolve_matches",
    "MatchingRequestException",
    "UnauthorizedError",
    "UpstreamFetchError",
]

__version__ = "matching_engine_v1"
