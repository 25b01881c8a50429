"""
SAT Fit Factor

Weight: 25 points. Strong at 105% of the minimum SAT.
"""

from university_matcher.domain.models import University
from university_matcher.domain.scoring.interfaces import StudentProfile
from university_matcher.domain.scoring.factors.requirement_ratio import (
    RequirementRatioFactor,
    format_number,
)


class SatFitFactor(RequirementRatioFactor):

    STRONG_THRESHOLD = 1.05
    BELOW_THRESHOLD = 0.95

    @property
    def name(self) -> str:
        return "sat"

    @property
    def weight(self) -> float:
        return 25

    def student_value(self, profile: StudentProfile) -> float:
        return profile.sat

    def required_value(self, university: University) -> float:
        return university.requirements.min_sat

    def strong_reason(self, student: float, required: float) -> str:
        return f"Strong SAT score ({format_number(student)} vs required {format_number(required)})"

    def below_reason(self, student: float, required: float) -> str:
        return f"SAT below requirement ({format_number(student)} vs required {format_number(required)})"
