"""
Tag Normalizer

Canonicalizes preference text into a comparable tag set:
- None lists count as empty
- None, empty and whitespace-only entries are dropped
- surviving entries are trimmed and lowercased
- duplicates collapse (set semantics)
"""

from typing import FrozenSet, Iterable, Optional

from .models import UserPreferenceProfile


def normalize_tag(value: Optional[str]) -> Optional[str]:
    """Return the canonical form of one tag, or None if it carries no text."""
    if not value:
        return None
    tag = value.strip().lower()
    return tag or None


def normalize_tags(values: Optional[Iterable[Optional[str]]]) -> FrozenSet[str]:
    """Normalize a list of optional strings into a tag set."""
    if not values:
        return frozenset()
    tags = set()
    for value in values:
        tag = normalize_tag(value)
        if tag:
            tags.add(tag)
    return frozenset(tags)


def build_user_tag_set(profile: UserPreferenceProfile) -> FrozenSet[str]:
    """
    Union of likes, hobbies and skills as a normalized tag set.

    A tag appearing in several lists is counted once.
    """
    return (
        normalize_tags(profile.likes)
        | normalize_tags(profile.hobbies)
        | normalize_tags(profile.skills)
    )
