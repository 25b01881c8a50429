"""
Domain Models for University Matcher

Pure Pydantic models with no framework dependencies.
These models define the catalog entries and the computed match results.
"""

from enum import Enum
from typing import Optional, List, Tuple, Dict
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class MatchCategory(str, Enum):
    """University classification for a given student."""
    REACH = "reach"
    TARGET = "target"
    SAFETY = "safety"


class InstitutionType(str, Enum):
    PUBLIC = "public"
    PRIVATE = "private"


class AdmissionRequirements(BaseModel):
    """Minimum admission thresholds. All must be strictly positive."""
    model_config = ConfigDict(frozen=True)

    min_gpa: float = Field(..., gt=0.0, le=4.0, description="Minimum GPA on 4.0 scale")
    min_toefl: float = Field(..., gt=0, le=120, description="Minimum TOEFL iBT score")
    min_sat: int = Field(..., gt=0, le=1600, description="Minimum SAT total")


class University(BaseModel):
    """Static catalog entry. Loaded once, never mutated."""
    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    country: str
    location: str
    ranking: int = Field(..., ge=1)
    tuition_usd: int = Field(..., ge=0, description="Annual tuition for international students")
    acceptance_rate: float = Field(..., ge=0.0, le=100.0, description="Percent of applicants admitted")
    requirements: AdmissionRequirements
    strong_majors: Tuple[str, ...] = ()
    description: str = ""
    type: InstitutionType

    @field_validator("strong_majors")
    @classmethod
    def strip_majors(cls, v: Tuple[str, ...]) -> Tuple[str, ...]:
        return tuple(m.strip() for m in v if m.strip())


class MatchResult(University):
    """A University extended with its computed fit for one student."""
    match_score: int = Field(..., ge=0, le=100)
    category: MatchCategory
    reasons: List[str] = Field(default_factory=list)

    @classmethod
    def from_university(
        cls,
        university: University,
        match_score: int,
        category: MatchCategory,
        reasons: List[str],
    ) -> "MatchResult":
        return cls(
            **university.model_dump(),
            match_score=match_score,
            category=category,
            reasons=list(reasons),
        )


class CategorizedMatches(BaseModel):
    """Match results partitioned by category, each keeping score order."""
    reach: List[MatchResult] = Field(default_factory=list)
    target: List[MatchResult] = Field(default_factory=list)
    safety: List[MatchResult] = Field(default_factory=list)

    def get(self, category: MatchCategory) -> List[MatchResult]:
        return getattr(self, MatchCategory(category).value)

    def summary(self) -> Dict[str, int]:
        """Count of universities per category."""
        return {
            MatchCategory.REACH.value: len(self.reach),
            MatchCategory.TARGET.value: len(self.target),
            MatchCategory.SAFETY.value: len(self.safety),
        }

    @property
    def total(self) -> int:
        return len(self.reach) + len(self.target) + len(self.safety)


class CatalogFilter(BaseModel):
    """Optional pre-scoring narrowing of the catalog. Unset fields match everything."""
    countries: Optional[List[str]] = None
    types: Optional[List[InstitutionType]] = None
    max_tuition: Optional[int] = Field(None, ge=0)
    ranking_range: Optional[Tuple[int, int]] = None

    @model_validator(mode="after")
    def validate_ranking_range(self) -> "CatalogFilter":
        if self.ranking_range is not None:
            low, high = self.ranking_range
            if low > high:
                raise ValueError("ranking_range lower bound must not exceed upper bound")
        return self

    def matches(self, university: University) -> bool:
        if self.countries and university.country not in self.countries:
            return False
        if self.types and university.type not in self.types:
            return False
        if self.max_tuition is not None and university.tuition_usd > self.max_tuition:
            return False
        if self.ranking_range is not None:
            low, high = self.ranking_range
            if not low <= university.ranking <= high:
                return False
        return True
