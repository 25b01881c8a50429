"""
Requirement Ratio Factor

Shared scoring rule for every factor that compares a student value
against a university minimum.

ratio = student / required
- ratio >= 1.0: full weight
- ratio < 1.0: weight * ratio (never negative)

A "strong" reason is noted at or above the strong threshold and a
"below requirement" reason under the below threshold.
"""

from abc import abstractmethod

from university_matcher.domain.models import University
from university_matcher.domain.scoring.interfaces import (
    BaseScoringFactor,
    FactorScore,
    StudentProfile,
)


class RequirementRatioFactor(BaseScoringFactor):
    """Base for factors scored by the student-to-minimum ratio."""

    STRONG_THRESHOLD = 1.10
    BELOW_THRESHOLD = 0.95

    @abstractmethod
    def student_value(self, profile: StudentProfile) -> float:
        pass

    @abstractmethod
    def required_value(self, university: University) -> float:
        pass

    @abstractmethod
    def strong_reason(self, student: float, required: float) -> str:
        pass

    @abstractmethod
    def below_reason(self, student: float, required: float) -> str:
        pass

    def calculate(
        self,
        profile: StudentProfile,
        university: University
    ) -> FactorScore:
        student = self.student_value(profile)
        required = self.required_value(university)
        ratio = student / required

        result = FactorScore()
        if ratio >= 1.0:
            result.points = self.weight
            if ratio >= self.STRONG_THRESHOLD:
                result.reasons.append(self.strong_reason(student, required))
        else:
            result.points = max(0.0, self.weight * ratio)
            if ratio < self.BELOW_THRESHOLD:
                result.reasons.append(self.below_reason(student, required))

        return result


def format_number(value: float) -> str:
    """Render 3.0 as "3" and 3.5 as "3.5"."""
    return f"{value:g}"
