"""
Scoring Interfaces for University Matcher

Defines protocols and data models for the scoring engine.
Each factor contributes points out of its own weight plus the reasons
behind them; the engine only sums and classifies.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Optional, List, Dict, Protocol, runtime_checkable

from university_matcher.domain.language import LanguageTestType, default_converter
from university_matcher.domain.models import University


@dataclass
class StudentProfile:
    """
    Student academic profile for one calculation.

    Transient: built by the caller, validated by the engine, then discarded.
    The language score may be TOEFL, Duolingo or IELTS; scoring always uses
    its TOEFL equivalent.
    """
    gpa: Optional[float] = None  # 0.0-4.0
    sat: Optional[int] = None  # 400-1600
    major: str = ""
    language_score: Optional[float] = None
    language_test: LanguageTestType = LanguageTestType.TOEFL

    def __post_init__(self):
        self.language_test = LanguageTestType(self.language_test)

    @property
    def toefl_equivalent(self) -> float:
        return default_converter.to_toefl(self.language_score, self.language_test)


@dataclass(frozen=True)
class FieldError:
    """A single failed profile check."""
    field: str
    message: str

    def to_dict(self) -> Dict[str, str]:
        return {"field": self.field, "message": self.message}


@dataclass
class FactorScore:
    """Points a factor awarded and the reasons it noted."""
    points: float = 0.0
    reasons: List[str] = field(default_factory=list)


@runtime_checkable
class ScoringFactor(Protocol):
    """
    Protocol for scoring factors.

    Each factor awards between 0 and `weight` points for one aspect.
    """

    @property
    def name(self) -> str:
        """Factor name for transparency."""
        ...

    @property
    def weight(self) -> float:
        """Maximum points this factor can award."""
        ...

    def calculate(
        self,
        profile: StudentProfile,
        university: University
    ) -> FactorScore:
        ...


class BaseScoringFactor(ABC):
    """Base class for scoring factors with common functionality."""

    @property
    @abstractmethod
    def name(self) -> str:
        pass

    @property
    @abstractmethod
    def weight(self) -> float:
        pass

    @abstractmethod
    def calculate(
        self,
        profile: StudentProfile,
        university: University
    ) -> FactorScore:
        pass
