"""
GPA Fit Factor

Weight: 40 points. Strong at 110% of the minimum GPA.
"""

from university_matcher.domain.models import University
from university_matcher.domain.scoring.interfaces import StudentProfile
from university_matcher.domain.scoring.factors.requirement_ratio import (
    RequirementRatioFactor,
    format_number,
)


class GpaFitFactor(RequirementRatioFactor):
    """GPA against the university's minimum GPA."""

    STRONG_THRESHOLD = 1.10
    BELOW_THRESHOLD = 0.95

    @property
    def name(self) -> str:
        return "gpa"

    @property
    def weight(self) -> float:
        return 40

    def student_value(self, profile: StudentProfile) -> float:
        return profile.gpa

    def required_value(self, university: University) -> float:
        return university.requirements.min_gpa

    def strong_reason(self, student: float, required: float) -> str:
        return f"Strong GPA ({student:.2f} vs required {format_number(required)})"

    def below_reason(self, student: float, required: float) -> str:
        return f"GPA below requirement ({student:.2f} vs required {format_number(required)})"
