"""
Matching Engine Tests

Tests for tag normalization and career field scoring.

Tests validate:
- Tag normalization (case folding, blanks, None, dedup)
- Overlap score calculation
- Zero-score filtering
- Ranking and top-3 truncation
- Deterministic tie-break on field_id
- Idempotence
"""

import pytest
from typing import List, Optional

from app.matching.models import CareerField, MatchResult, UserPreferenceProfile
from app.matching.normalize import normalize_tag, normalize_tags, build_user_tag_set
from app.matching.match import (
    MAX_MATCHES,
    calculate_overlap_score,
    field_tag_set,
    rank_candidates,
    resolve_matches,
    score_fields,
)


# ============================================================================
# Test Fixtures
# ============================================================================

def make_field(
    field_id: str,
    keywords: Optional[List[Optional[str]]],
    name: Optional[str] = None,
) -> CareerField:
    """Helper to create test career fields."""
    return CareerField(
        field_id=field_id,
        name=name or f"Field {field_id}",
        keywords=keywords,
        description="Not used in scoring",
    )


def make_profile(likes=None, hobbies=None, skills=None) -> UserPreferenceProfile:
    """Helper to create test profiles."""
    return UserPreferenceProfile(likes=likes, hobbies=hobbies, skills=skills)


def scores_of(matches: List[MatchResult]) -> List[int]:
    return [m.score for m in matches]


# ============================================================================
# Tag Normalizer Tests
# ============================================================================

class TestNormalizeTags:
    """Test canonicalization of preference text."""

    def test_lowercases(self):
        assert normalize_tags(["Coding", "ART"]) == {"coding", "art"}

    def test_drops_none_empty_and_blank(self):
        assert normalize_tags([None, "", "   ", "Music"]) == {"music"}

    def test_none_list_is_empty(self):
        assert normalize_tags(None) == frozenset()

    def test_trims_surrounding_whitespace(self):
        assert normalize_tag("  Helping People ") == "helping people"

    def test_duplicates_collapse(self):
        assert normalize_tags(["Art", "art", "ART "]) == {"art"}

    def test_inner_whitespace_preserved(self):
        """Multi-word tags stay a single tag."""
        assert normalize_tags(["Problem Solving"]) == {"problem solving"}


class TestBuildUserTagSet:
    """Test the union of likes, hobbies and skills."""

    def test_unions_all_three_lists(self):
        profile = make_profile(likes=["Art"], hobbies=["Hiking"], skills=["Coding"])

        assert build_user_tag_set(profile) == {"art", "hiking", "coding"}

    def test_tag_in_two_lists_counted_once(self):
        profile = make_profile(likes=["Coding"], skills=["coding"])

        assert build_user_tag_set(profile) == {"coding"}

    def test_all_empty_lists(self):
        profile = make_profile(likes=[], hobbies=[], skills=[])

        assert build_user_tag_set(profile) == frozenset()

    def test_all_absent_lists(self):
        assert build_user_tag_set(make_profile()) == frozenset()

    def test_display_only_lists_ignored(self):
        """dislikes and work_styles never become tags."""
        profile = UserPreferenceProfile(
            likes=["Art"],
            dislikes=["Math"],
            work_styles=["Remote"],
        )

        assert build_user_tag_set(profile) == {"art"}


# ============================================================================
# Scoring Tests
# ============================================================================

class TestOverlapScore:
    """Test per-field scoring."""

    def test_counts_shared_tags(self):
        assert calculate_overlap_score(frozenset({"a", "b", "c"}), frozenset({"b", "c", "d"})) == 2

    def test_no_overlap(self):
        assert calculate_overlap_score(frozenset({"a"}), frozenset({"b"})) == 0

    def test_field_keywords_normalized(self):
        field = make_field("F1", ["Art", "art", None, " Nature "])

        assert field_tag_set(field) == {"art", "nature"}

    def test_field_without_keywords(self):
        assert field_tag_set(make_field("F1", None)) == frozenset()

    def test_art_nature_vs_art_music_scores_one(self):
        """Field ["Art","Nature"] with user tags ["art","music"] scores exactly 1."""
        user_tags = build_user_tag_set(make_profile(likes=["art", "music"]))
        field = make_field("F1", ["Art", "Nature"])

        matches = resolve_matches(user_tags, [field])

        assert len(matches) == 1
        assert matches[0].score == 1

    def test_case_insensitive_match(self):
        user_tags = build_user_tag_set(make_profile(skills=["Coding"]))

        matches = resolve_matches(user_tags, [make_field("F1", ["coding"])])

        assert scores_of(matches) == [1]

    def test_duplicate_user_tag_contributes_once(self):
        """'coding' in likes and hobbies scores 1, not 2."""
        user_tags = build_user_tag_set(
            make_profile(likes=["coding"], hobbies=["Coding"], skills=["coding"])
        )

        matches = resolve_matches(user_tags, [make_field("F1", ["Coding", "Math"])])

        assert scores_of(matches) == [1]

    def test_zero_score_fields_excluded(self):
        candidates = score_fields(
            frozenset({"art"}),
            [make_field("F1", ["art"]), make_field("F2", ["math"]), make_field("F3", [])],
        )

        assert [c.field_id for c in candidates] == ["F1"]


# ============================================================================
# Ranking Tests
# ============================================================================

class TestRanking:
    """Test ordering, truncation and tie-breaks."""

    def test_top_three_of_five(self):
        """Overlaps 4,3,2,1,0 -> fields scoring 4,3,2 in that order."""
        user_tags = frozenset({"a", "b", "c", "d"})
        catalog = [
            make_field("F1", ["a"]),                 # 1
            make_field("F0", ["z"]),                 # 0
            make_field("F3", ["a", "b", "c"]),       # 3
            make_field("F4", ["a", "b", "c", "d"]),  # 4
            make_field("F2", ["a", "b"]),            # 2
        ]

        matches = resolve_matches(user_tags, catalog)

        assert [m.field_id for m in matches] == ["F4", "F3", "F2"]
        assert scores_of(matches) == [4, 3, 2]

    def test_fewer_than_three_candidates(self):
        matches = resolve_matches(
            frozenset({"art"}),
            [make_field("F1", ["art"]), make_field("F2", ["math"])],
        )

        assert len(matches) == 1

    def test_never_more_than_max(self):
        catalog = [make_field(f"F{i}", ["art"]) for i in range(10)]

        matches = resolve_matches(frozenset({"art"}), catalog)

        assert len(matches) == MAX_MATCHES == 3

    def test_ties_broken_by_field_id_ascending(self):
        catalog = [
            make_field("c-field", ["art"]),
            make_field("a-field", ["art"]),
            make_field("b-field", ["art"]),
            make_field("d-field", ["art"]),
        ]

        matches = resolve_matches(frozenset({"art"}), catalog)

        assert [m.field_id for m in matches] == ["a-field", "b-field", "c-field"]

    def test_tie_break_independent_of_catalog_order(self):
        catalog = [make_field(fid, ["art", "math"]) for fid in ("F9", "F1", "F5")]

        forward = resolve_matches(frozenset({"art"}), catalog)
        backward = resolve_matches(frozenset({"art"}), list(reversed(catalog)))

        assert forward == backward

    def test_custom_limit(self):
        catalog = [make_field(f"F{i}", ["art"]) for i in range(5)]

        assert len(rank_candidates(score_fields(frozenset({"art"}), catalog), limit=1)) == 1

    def test_negative_limit_rejected(self):
        with pytest.raises(ValueError):
            rank_candidates([], limit=-1)


# ============================================================================
# Edge Cases
# ============================================================================

class TestEdgeCases:
    """Test empty inputs and purity."""

    def test_empty_tags_return_empty(self):
        assert resolve_matches(frozenset(), [make_field("F1", ["art"])]) == []

    def test_empty_tags_do_not_scan_catalog(self):
        """Nothing to match against: the catalog is never iterated."""
        class ExplodingCatalog(list):
            def __iter__(self):
                raise AssertionError("catalog scanned")

        assert resolve_matches(frozenset(), ExplodingCatalog()) == []

    def test_empty_catalog(self):
        assert resolve_matches(frozenset({"art"}), []) == []

    def test_idempotent(self):
        user_tags = frozenset({"art", "music", "coding"})
        catalog = [
            make_field("F1", ["Art", "Music"]),
            make_field("F2", ["coding"]),
            make_field("F3", ["music"]),
            make_field("F4", ["Coding", "art"]),
        ]

        first = resolve_matches(user_tags, catalog)
        second = resolve_matches(user_tags, catalog)

        assert first == second
        assert [m.field_id for m in first] == ["F1", "F4", "F2"]

    def test_serializes_with_field_id_alias(self):
        match = MatchResult(field_id="F1", name="Design", score=2)

        assert match.model_dump(by_alias=True) == {"fieldId": "F1", "name": "Design", "score": 2}
