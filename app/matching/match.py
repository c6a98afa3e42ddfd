"""
Matching Engine Core Logic

Preference tags → Career fields

This module implements the core matching function that:
1. Normalizes each field's keywords into a field tag set
2. Scores fields by overlap with the user's tag set
3. Drops fields with no overlap
4. Ranks by score, breaking ties on field_id
5. Truncates to the top matches

The engine is pure: same tags + same catalog -> same ordered result.
"""

import logging
from typing import FrozenSet, Iterable, List, Sequence, Tuple

from .models import CareerField, MatchResult
from .normalize import normalize_tags

logger = logging.getLogger(__name__)

MAX_MATCHES = 3


def field_tag_set(field: CareerField) -> FrozenSet[str]:
    """Normalized keyword set of a career field."""
    return normalize_tags(field.keywords)


def calculate_overlap_score(
    user_tags: FrozenSet[str],
    field_tags: FrozenSet[str]
) -> int:
    """
    Count tags shared by the user and a field.

    Each shared tag contributes exactly 1.
    """
    return len(user_tags & field_tags)


def score_fields(
    user_tags: FrozenSet[str],
    catalog: Iterable[CareerField]
) -> List[MatchResult]:
    """
    Score every field in the catalog, keeping only fields with score > 0.

    Returns:
        Unsorted candidates in catalog order
    """
    candidates: List[MatchResult] = []

    for field in catalog:
        score = calculate_overlap_score(user_tags, field_tag_set(field))
        if score > 0:
            candidates.append(MatchResult(
                field_id=field.field_id,
                name=field.name,
                score=score,
            ))

    return candidates


def rank_key(candidate: MatchResult) -> Tuple[int, str]:
    """Score descending, then field_id ascending."""
    return (-candidate.score, candidate.field_id)


def rank_candidates(
    candidates: Sequence[MatchResult],
    limit: int = MAX_MATCHES
) -> List[MatchResult]:
    """Sort candidates by rank_key and keep the first `limit`."""
    if limit < 0:
        raise ValueError(f"limit must be >= 0, got {limit}")
    return sorted(candidates, key=rank_key)[:limit]


def resolve_matches(
    user_tags: FrozenSet[str],
    catalog: Sequence[CareerField],
    limit: int = MAX_MATCHES
) -> List[MatchResult]:
    """
    Main matching function - resolves a user tag set to ranked career fields.

    An empty tag set means there is nothing to match against: the catalog
    is not scanned and the result is empty.

    Args:
        user_tags: Normalized user tags (see build_user_tag_set)
        catalog: All career fields
        limit: Maximum number of matches returned

    Returns:
        Up to `limit` MatchResults, score descending, field_id ascending
    """
    if not user_tags:
        return []

    candidates = score_fields(user_tags, catalog)
    ranked = rank_candidates(candidates, limit)

    logger.debug(
        f"Scored {len(catalog)} fields: {len(candidates)} candidates, "
        f"{len(ranked)} returned"
    )
    return ranked
