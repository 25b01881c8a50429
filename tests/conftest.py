"""
Test configuration and fixtures for University Matcher.

Provides shared fixtures for unit tests.
"""

import pytest

from university_matcher.domain.language import LanguageTestType
from university_matcher.domain.models import AdmissionRequirements, InstitutionType, University
from university_matcher.domain.scoring import StudentProfile


# =============================================================================
# Helpers
# =============================================================================

def make_university(
    id: str = "test-u",
    min_gpa: float = 3.5,
    min_toefl: float = 90,
    min_sat: int = 1300,
    acceptance_rate: float = 30.0,
    strong_majors=("Computer Science",),
    **overrides,
) -> University:
    """Build a catalog entry with sensible defaults."""
    data = dict(
        id=id,
        name=overrides.pop("name", f"University {id}"),
        country="United States",
        location="Somewhere, ST",
        ranking=50,
        tuition_usd=40000,
        acceptance_rate=acceptance_rate,
        requirements=AdmissionRequirements(min_gpa=min_gpa, min_toefl=min_toefl, min_sat=min_sat),
        strong_majors=tuple(strong_majors),
        description="A test university.",
        type=InstitutionType.PUBLIC,
    )
    data.update(overrides)
    return University(**data)


# =============================================================================
# Sample Data Fixtures
# =============================================================================

@pytest.fixture
def cs_student():
    """Student comfortably above a 3.5 / 90 / 1300 school."""
    return StudentProfile(
        gpa=3.85,
        language_score=100,
        sat=1400,
        major="Computer Science",
    )


@pytest.fixture
def duolingo_student():
    """Student reporting a Duolingo score instead of TOEFL."""
    return StudentProfile(
        gpa=3.6,
        language_score=120,
        language_test=LanguageTestType.DUOLINGO,
        sat=1350,
        major="Economics",
    )


@pytest.fixture
def selective_university():
    """3.5 / 90 / 1300 CS school admitting 10%."""
    return make_university(id="selective", acceptance_rate=10.0)


@pytest.fixture
def accessible_university():
    """3.5 / 90 / 1300 CS school admitting 40%."""
    return make_university(id="accessible", acceptance_rate=40.0)


@pytest.fixture
def small_catalog():
    """Three universities with distinct difficulty."""
    return [
        make_university(id="hard", min_gpa=3.9, min_toefl=110, min_sat=1550, acceptance_rate=5.0,
                        strong_majors=("Physics",)),
        make_university(id="mid", min_gpa=3.6, min_toefl=95, min_sat=1380, acceptance_rate=25.0),
        make_university(id="easy", min_gpa=3.0, min_toefl=70, min_sat=1100, acceptance_rate=80.0),
    ]


@pytest.fixture
def university_factory():
    """Factory for ad-hoc catalog entries."""
    return make_university
