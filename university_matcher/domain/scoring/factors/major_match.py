"""
Major Match Factor

Weight: 10 points, all or nothing. Awarded only when the student's
intended major is one of the university's strong majors.
"""

from university_matcher.domain.models import University
from university_matcher.domain.scoring.interfaces import (
    BaseScoringFactor,
    FactorScore,
    StudentProfile,
)


class MajorMatchFactor(BaseScoringFactor):
    """Exact membership of the intended major in strong_majors."""

    @property
    def name(self) -> str:
        return "major"

    @property
    def weight(self) -> float:
        return 10

    def calculate(
        self,
        profile: StudentProfile,
        university: University
    ) -> FactorScore:
        major = profile.major.strip()
        if major in university.strong_majors:
            return FactorScore(
                points=self.weight,
                reasons=[f"Strong program in {major}"],
            )
        # No partial credit for related majors
        return FactorScore()
