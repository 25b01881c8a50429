"""
Profile Validator

Field-level checks run once before any university is scored.
Every failing field is reported, not just the first.
"""

from typing import Iterable, List, Optional

from university_matcher.domain.language import LanguageScoreConverter, default_converter
from university_matcher.domain.scoring.interfaces import FieldError, StudentProfile


class ProfileValidator:
    """Validates a StudentProfile against the accepted ranges."""

    GPA_MAX = 4.0
    SAT_MIN = 400
    SAT_MAX = 1600

    def __init__(
        self,
        majors: Optional[Iterable[str]] = None,
        converter: LanguageScoreConverter = default_converter,
    ):
        """
        Args:
            majors: Recognized major names. When given, the intended major
                must be one of them; otherwise any non-empty major passes.
            converter: Source of the language test ranges.
        """
        self._majors = frozenset(majors) if majors is not None else None
        self._converter = converter

    def validate(self, profile: StudentProfile) -> List[FieldError]:
        errors: List[FieldError] = []

        # Lower bound is exclusive
        if not (self._in_range(profile.gpa, 0.0, self.GPA_MAX) and profile.gpa > 0):
            errors.append(FieldError("gpa", "GPA must be between 0.0 and 4.0"))

        if not self._converter.is_valid_score(profile.language_score, profile.language_test):
            low, high = self._converter.valid_range(profile.language_test)
            errors.append(FieldError(
                "language_score",
                f"{profile.language_test.label} score must be between {low} and {high}",
            ))

        if not self._in_range(profile.sat, self.SAT_MIN, self.SAT_MAX):
            errors.append(FieldError(
                "sat", f"SAT score must be between {self.SAT_MIN} and {self.SAT_MAX}"
            ))

        major = (profile.major or "").strip()
        if not major:
            errors.append(FieldError("major", "Please select your intended major"))
        elif self._majors is not None and major not in self._majors:
            errors.append(FieldError("major", f"Unrecognized major: {major}"))

        return errors

    @staticmethod
    def _in_range(value, low: float, high: float) -> bool:
        if value is None or isinstance(value, bool):
            return False
        try:
            return low <= value <= high
        except TypeError:
            return False


def validate_profile(
    profile: StudentProfile,
    majors: Optional[Iterable[str]] = None,
) -> List[FieldError]:
    """Return every failed check for the profile; empty when valid."""
    return ProfileValidator(majors).validate(profile)
