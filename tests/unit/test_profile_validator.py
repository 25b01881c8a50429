"""
Unit tests for profile validation.

Every failing field must be reported, and scoring must not start when
any check fails.
"""

import pytest

from university_matcher.domain.language import LanguageTestType
from university_matcher.domain.scoring import (
    ProfileValidator,
    StudentProfile,
    compute_matches,
    validate_profile,
)
from university_matcher.exceptions import ProfileValidationError, ValidationError


def fields(errors):
    return [error.field for error in errors]


class TestProfileValidator:
    """Tests for field-level checks."""

    def test_valid_profile_has_no_errors(self, cs_student):
        """A complete profile passes."""
        assert validate_profile(cs_student) == []

    def test_gpa_above_scale_rejected(self, cs_student):
        """GPA above 4.0 is rejected."""
        cs_student.gpa = 4.5
        errors = validate_profile(cs_student)
        assert fields(errors) == ["gpa"]
        assert errors[0].message == "GPA must be between 0.0 and 4.0"

    def test_gpa_zero_rejected(self, cs_student):
        """GPA of zero is rejected."""
        cs_student.gpa = 0.0
        assert fields(validate_profile(cs_student)) == ["gpa"]

    def test_gpa_upper_bound_inclusive(self, cs_student):
        """GPA of exactly 4.0 passes."""
        cs_student.gpa = 4.0
        assert validate_profile(cs_student) == []

    def test_empty_major_rejected(self, cs_student):
        """An empty major is rejected."""
        cs_student.major = ""
        errors = validate_profile(cs_student)
        assert fields(errors) == ["major"]
        assert errors[0].message == "Please select your intended major"

    def test_whitespace_major_rejected(self, cs_student):
        """A blank major is rejected."""
        cs_student.major = "   "
        assert fields(validate_profile(cs_student)) == ["major"]

    @pytest.mark.parametrize("sat", [399, 1601, None])
    def test_sat_out_of_range(self, cs_student, sat):
        """SAT outside 400-1600 or missing is rejected."""
        cs_student.sat = sat
        errors = validate_profile(cs_student)
        assert fields(errors) == ["sat"]
        assert errors[0].message == "SAT score must be between 400 and 1600"

    @pytest.mark.parametrize("sat", [400, 1600])
    def test_sat_bounds_inclusive(self, cs_student, sat):
        """SAT bounds are inclusive."""
        cs_student.sat = sat
        assert validate_profile(cs_student) == []

    def test_toefl_out_of_range(self, cs_student):
        """TOEFL above 120 is rejected."""
        cs_student.language_score = 121
        errors = validate_profile(cs_student)
        assert fields(errors) == ["language_score"]
        assert errors[0].message == "TOEFL score must be between 0 and 120"

    def test_language_range_follows_test_type(self):
        """The message uses the range of the test taken."""
        profile = StudentProfile(
            gpa=3.5, sat=1300, major="Biology",
            language_score=5, language_test=LanguageTestType.DUOLINGO,
        )
        errors = validate_profile(profile)
        assert errors[0].message == "Duolingo score must be between 10 and 160"

    def test_ielts_score_accepted(self):
        """A valid IELTS band passes."""
        profile = StudentProfile(gpa=3.5, sat=1300, major="Biology", language_score=7.0, language_test="ielts")
        assert validate_profile(profile) == []

    def test_all_failures_reported_together(self):
        """Every failing field is reported in order."""
        profile = StudentProfile(gpa=5.0, sat=200, major="", language_score=200)
        assert fields(validate_profile(profile)) == ["gpa", "language_score", "sat", "major"]

    def test_missing_fields_fail(self):
        """An empty profile fails every check."""
        assert fields(validate_profile(StudentProfile())) == ["gpa", "language_score", "sat", "major"]


class TestRecognizedMajors:
    """Tests for the optional recognized-major check."""

    def test_known_major_accepted(self, cs_student):
        """A listed major passes."""
        assert ProfileValidator(["Computer Science", "Biology"]).validate(cs_student) == []

    def test_unknown_major_rejected(self, cs_student):
        """An unlisted major is rejected."""
        cs_student.major = "Basket Weaving"
        errors = validate_profile(cs_student, majors=["Computer Science"])
        assert fields(errors) == ["major"]
        assert errors[0].message == "Unrecognized major: Basket Weaving"

    def test_without_list_any_major_passes(self, cs_student):
        """Without a list any non-empty major passes."""
        cs_student.major = "Basket Weaving"
        assert validate_profile(cs_student) == []


class TestComputeMatchesValidation:
    """compute_matches refuses to score an invalid profile."""

    def test_raises_with_every_error(self, small_catalog):
        """The exception carries every field error."""
        profile = StudentProfile(gpa=4.5, sat=1400, major="", language_score=100)

        with pytest.raises(ProfileValidationError) as exc_info:
            compute_matches(profile, small_catalog)

        error = exc_info.value
        assert isinstance(error, ValidationError)
        assert [e.field for e in error.errors] == ["gpa", "major"]
        assert error.messages == [
            "GPA must be between 0.0 and 4.0",
            "Please select your intended major",
        ]
        assert error.to_dict()["details"]["fields"] == ["gpa", "major"]

    def test_unknown_major_blocks_scoring(self, cs_student, small_catalog):
        """An unlisted major stops scoring."""
        cs_student.major = "Alchemy"
        with pytest.raises(ProfileValidationError):
            compute_matches(cs_student, small_catalog, majors=["Computer Science"])
