"""
Matching Layer Models

Pydantic models for preference profiles, career fields and match results.

Wire compatibility: MatchResult serializes as {"fieldId", "name", "score"}
and the matches endpoint returns {"matches": [...]} or {"error": "..."}.
"""

from datetime import datetime
from typing import List, Optional, Union
from pydantic import BaseModel, Field, field_validator


class UserPreferenceProfile(BaseModel):
    """
    A user's stored preferences prior to normalization.

    Every list may be absent (None) and may contain None or blank entries;
    the normalizer discards those. Only likes, hobbies and skills are used
    for matching.
    """
    likes: Optional[List[Optional[str]]] = Field(
        default=None,
        description="Things the user likes e.g. ['Computers', 'Art']"
    )
    hobbies: Optional[List[Optional[str]]] = Field(
        default=None,
        description="Free-text hobbies e.g. ['Reading', 'Hiking']"
    )
    skills: Optional[List[Optional[str]]] = Field(
        default=None,
        description="Skills the user has or wants to use e.g. ['Coding']"
    )
    dislikes: Optional[List[Optional[str]]] = Field(
        default=None,
        description="Stored for display only, not used in scoring"
    )
    work_styles: Optional[List[Optional[str]]] = Field(
        default=None,
        description="Stored for display only, not used in scoring"
    )

    class Config:
        extra = "ignore"


class PreferencesRecord(UserPreferenceProfile):
    """A profile together with the identity it is keyed on."""
    user_id: str
    updated_at: Optional[datetime] = None

    @field_validator("user_id", mode="before")
    @classmethod
    def coerce_user_id(cls, value):
        # uuid columns arrive as uuid.UUID from asyncpg
        return str(value) if value is not None else value


class PreferencesUpdate(BaseModel):
    """
    Insert-or-replace payload for a user's preferences.

    `hobbies` accepts either a list or a comma-separated string
    ("Reading, Video Games, Hiking"); the string form is split and trimmed.
    """
    likes: List[str] = Field(default_factory=list)
    dislikes: List[str] = Field(default_factory=list)
    hobbies: List[str] = Field(default_factory=list)
    skills: List[str] = Field(default_factory=list)
    work_styles: List[str] = Field(default_factory=list)

    class Config:
        extra = "forbid"

    @field_validator("hobbies", mode="before")
    @classmethod
    def split_hobbies(cls, value: Union[str, List[str], None]) -> List[str]:
        if value is None:
            return []
        if isinstance(value, str):
            return [part.strip() for part in value.split(",") if part.strip()]
        return value


class CareerField(BaseModel):
    """
    A catalog entry. Read-only to the matching engine.

    Only `keywords` participates in scoring; `description` is descriptive.
    """
    field_id: str
    name: str
    keywords: Optional[List[Optional[str]]] = Field(default=None)
    description: Optional[str] = None

    class Config:
        extra = "ignore"

    @field_validator("field_id", mode="before")
    @classmethod
    def coerce_field_id(cls, value):
        return str(value) if value is not None else value


class MatchResult(BaseModel):
    """A scored career field, owned by the response and never persisted."""
    field_id: str = Field(alias="fieldId")
    name: str
    score: int = Field(
        ge=0,
        description="Count of tags shared between user and field"
    )

    class Config:
        populate_by_name = True
        extra = "forbid"


# Response models for API endpoints

class MatchesResponse(BaseModel):
    """Successful matches response: 0-3 entries, descending score."""
    matches: List[MatchResult] = Field(default_factory=list)


class ErrorResponse(BaseModel):
    """Error response paired with a 401 or 500 status."""
    error: str


class MatchingHealthResponse(BaseModel):
    """Health check response for matching module."""
    status: str = "ok"
    module: str = "matching_engine"
    version: str = "matching_engine_v1"
    timestamp: str = Field(default_factory=lambda: datetime.utcnow().isoformat())
