from __future__ import annotations

from typing import List, Literal, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator


LocationType = Literal["In-Person", "Remote", "Hybrid"]


def _null_to_empty(v):
    # Array columns come back as NULL when never set
    return [] if v is None else v


class VolunteerProfile(BaseModel):
    """A volunteer's stated preferences, as saved during onboarding."""
    user_id: Optional[str] = None
    full_name: Optional[str] = None
    age: Optional[int] = None
    interests: List[str] = Field(default_factory=list)
    causes: List[str] = Field(default_factory=list)
    skills: List[str] = Field(default_factory=list)
    location_types: List[LocationType] = Field(default_factory=list)
    preferred_locations: List[str] = Field(default_factory=list)
    time_commitment: Optional[str] = None

    @field_validator(
        "interests", "causes", "skills", "location_types", "preferred_locations",
        mode="before"
    )
    @classmethod
    def null_to_empty(cls, v):
        return _null_to_empty(v)


class AgeRange(BaseModel):
    """Eligible ages, inclusive. Unspecified unless both bounds are set."""
    min: Optional[int] = None
    max: Optional[int] = None

    @property
    def is_specified(self) -> bool:
        return self.min is not None and self.max is not None


class Opportunity(BaseModel):
    """An opportunity as shown to volunteers (camelCase aliases accepted)."""
    model_config = ConfigDict(populate_by_name=True)

    id: str
    type: LocationType
    title: Optional[str] = None
    organization: Optional[str] = None
    location: Optional[str] = None
    tags: List[str] = Field(default_factory=list)
    age_range: Optional[AgeRange] = Field(default=None, alias="ageRange")
    time_commitment: Optional[str] = Field(default=None, alias="timeCommitment")
    requirements: List[str] = Field(default_factory=list)

    @field_validator("tags", "requirements", mode="before")
    @classmethod
    def null_to_empty(cls, v):
        return _null_to_empty(v)


class OpportunityRecord(BaseModel):
    """An opportunity row as stored in the opportunities table."""
    id: str
    type: LocationType
    title: Optional[str] = None
    organization: Optional[str] = None
    age_min: Optional[int] = None
    age_max: Optional[int] = None
    time_commitment: Optional[str] = None
    time_commitment_unit: str = "hours/week"
    location: Optional[str] = None
    tags: List[str] = Field(default_factory=list)
    requirements: List[str] = Field(default_factory=list)

    @field_validator("tags", "requirements", mode="before")
    @classmethod
    def null_to_empty(cls, v):
        return _null_to_empty(v)

    def to_opportunity(self) -> Opportunity:
        """
        Convert a stored row to scoring input.

        The time commitment number and unit are joined ("4" + "hours/week"),
        a missing location becomes "Online", and the age range is kept only
        when both bounds are set.
        """
        age_range = None
        if self.age_min is not None and self.age_max is not None:
            age_range = AgeRange(min=self.age_min, max=self.age_max)

        time_commitment = None
        if self.time_commitment is not None:
            time_commitment = f"{self.time_commitment} {self.time_commitment_unit}"

        return Opportunity(
            id=self.id,
            type=self.type,
            title=self.title,
            organization=self.organization,
            location=self.location or "Online",
            tags=list(self.tags),
            age_range=age_range,
            time_commitment=time_commitment,
            requirements=list(self.requirements),
        )


class MatchResult(BaseModel):
    """Score (0-100) and up to three reasons, in the order they were found."""
    opportunity_id: str
    score: int = Field(ge=0, le=100)
    match_reasons: List[str] = Field(default_factory=list, max_length=3)


class RankedOpportunity(BaseModel):
    """An opportunity paired with its match result."""
    opportunity: Opportunity
    match: MatchResult
