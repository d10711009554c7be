# brief_engine/models/audience.py
from enum import StrEnum
from typing import List, Literal, Optional
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _ProfileModel(BaseModel):
    # Brand records arrive camelCased from the UI layer
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")


class AgeRange(_ProfileModel):
    min: int = Field(ge=0)
    max: int = Field(ge=0)


class Demographics(_ProfileModel):
    age_range: Optional[AgeRange] = None
    gender: Optional[Literal["all", "male", "female", "other"]] = None
    income: Optional[Literal["low", "middle", "high", "enterprise"]] = None


class Firmographics(_ProfileModel):
    company_size: List[str] = Field(default_factory=list)
    industries: List[str] = Field(default_factory=list)
    job_titles: List[str] = Field(default_factory=list)
    departments: List[str] = Field(default_factory=list)
    decision_making_role: Optional[str] = None


class Psychographics(_ProfileModel):
    pain_points: List[str] = Field(default_factory=list)
    goals: List[str] = Field(default_factory=list)
    values: List[str] = Field(default_factory=list)


class AudienceProfile(_ProfileModel):
    """A brand's known audience segment. Read-only input to the matcher."""
    name: str = Field(..., min_length=1)
    is_primary: bool = False
    demographics: Optional[Demographics] = None
    firmographics: Optional[Firmographics] = None
    psychographics: Optional[Psychographics] = None

    @property
    def keywords(self) -> list[str]:
        """Lowercased terms that identify this audience inside free text."""
        terms = [self.name]
        if self.firmographics:
            terms += self.firmographics.job_titles + self.firmographics.industries
        if self.psychographics:
            terms += self.psychographics.values
        return [t.strip().lower() for t in terms if t and t.strip()]

    def format_demographics(self) -> Optional[str]:
        if not self.demographics:
            return None
        parts = []
        if self.demographics.age_range:
            parts.append(f"Ages {self.demographics.age_range.min}-{self.demographics.age_range.max}")
        if self.demographics.income:
            parts.append(f"{self.demographics.income} income")
        return ", ".join(parts) if parts else None


class AudienceSource(StrEnum):
    INFERRED = "inferred"
    SELECTED = "selected"
    CUSTOM = "custom"


class AudienceBrief(BaseModel):
    """The audience slot as stored on a LiveBrief."""
    model_config = ConfigDict(frozen=True)

    name: str
    demographics: Optional[str] = None
    psychographics: Optional[str] = None
    pain_points: List[str] = Field(default_factory=list)
    goals: List[str] = Field(default_factory=list)
    source: AudienceSource = AudienceSource.INFERRED

    @classmethod
    def from_profile(cls, profile: AudienceProfile) -> "AudienceBrief":
        psycho = profile.psychographics
        return cls(
            name=profile.name,
            demographics=profile.format_demographics(),
            psychographics=", ".join(psycho.values) if psycho and psycho.values else None,
            pain_points=list(psycho.pain_points) if psycho else [],
            goals=list(psycho.goals) if psycho else [],
        )
