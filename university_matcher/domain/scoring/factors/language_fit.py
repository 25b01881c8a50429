"""
Language Fit Factor

Weight: 25 points. Compares the TOEFL equivalent of whatever test the
student took (Duolingo and IELTS are converted first) against the
university's minimum TOEFL.
"""

from university_matcher.domain.models import University
from university_matcher.domain.scoring.interfaces import StudentProfile
from university_matcher.domain.scoring.factors.requirement_ratio import (
    RequirementRatioFactor,
    format_number,
)


class LanguageFitFactor(RequirementRatioFactor):
    """TOEFL-equivalent score against the minimum TOEFL."""

    STRONG_THRESHOLD = 1.10
    BELOW_THRESHOLD = 0.95

    @property
    def name(self) -> str:
        return "language"

    @property
    def weight(self) -> float:
        return 25

    def student_value(self, profile: StudentProfile) -> float:
        return profile.toefl_equivalent

    def required_value(self, university: University) -> float:
        return university.requirements.min_toefl

    def strong_reason(self, student: float, required: float) -> str:
        return f"Strong TOEFL score ({format_number(student)} vs required {format_number(required)})"

    def below_reason(self, student: float, required: float) -> str:
        return f"TOEFL below requirement ({format_number(student)} vs required {format_number(required)})"
