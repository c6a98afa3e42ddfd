"""
Coach Directory Models

Verified career coaches and the career fields they specialize in.
"""

from typing import List, Optional
from pydantic import BaseModel, Field


class Coach(BaseModel):
    """A verified coach as shown in the directory list."""
    coach_id: str = Field(alias="id")
    name: str
    bio: Optional[str] = None
    photo_url: Optional[str] = None
    specialization_ids: List[str] = Field(
        default_factory=list,
        description="CareerFields.field_id values this coach covers"
    )

    class Config:
        populate_by_name = True
        extra = "ignore"


class CoachSpecialization(BaseModel):
    """Display name of one specialization."""
    field_id: str
    name: str


class CoachDetail(Coach):
    """A coach with specialization names resolved from the catalog."""
    specializations: List[CoachSpecialization] = Field(default_factory=list)
