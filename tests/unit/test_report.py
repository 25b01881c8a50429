"""
Unit tests for the markdown report.
"""

from datetime import date

import pytest

from university_matcher.domain.language import LanguageTestType
from university_matcher.domain.scoring import StudentProfile, compute_matches
from university_matcher.exceptions import ValidationError
from university_matcher.infrastructure.report import render_markdown_report


@pytest.fixture
def results(cs_student, small_catalog):
    """Scored small catalog for the CS student."""
    return compute_matches(cs_student, small_catalog)


class TestRenderMarkdownReport:
    """Tests for report layout."""

    def test_header_and_profile(self, cs_student, results):
        """Title, date and profile lines are rendered."""
        report = render_markdown_report(cs_student, results, generated_on=date(2025, 1, 27))

        assert report.startswith("# University Matching Report\n")
        assert "**Generated on:** 2025-01-27" in report
        assert "- **GPA:** 3.85/4.0" in report
        assert "- **TOEFL:** 100/120" in report
        assert "- **SAT:** 1400/1600" in report
        assert "- **Intended Major:** Computer Science" in report

    def test_sections_in_safety_target_reach_order(self, cs_student, results):
        """Sections follow Safety, Target, Reach and skip empty ones."""
        report = render_markdown_report(cs_student, results)

        assert report.index("## Safety Schools") < report.index("## Reach Schools")
        # No target results, so no empty target section
        assert "## Target Schools" not in report

    def test_university_details(self, cs_student, results):
        """Each entry lists its details and reasons."""
        report = render_markdown_report(cs_student, results)

        assert "### 1. University mid" in report
        assert "### 2. University easy" in report
        assert "### 1. University hard" in report
        assert "- **Match Score:** 85%" in report
        assert "- **Annual Tuition:** $40,000" in report
        assert "- Minimum TOEFL: 110" in report
        assert "- TOEFL below requirement (100 vs required 110)" in report

    def test_summary_and_legend(self, cs_student, results):
        """The report ends with summary, legend and disclaimer."""
        report = render_markdown_report(cs_student, results)

        assert "This report shows 3 universities" in report
        assert "**Legend:**" in report
        assert report.rstrip().endswith("personalized advice.*")

    def test_custom_title(self, cs_student, results):
        """An explicit title replaces the configured one."""
        report = render_markdown_report(cs_student, results, title="My Shortlist")
        assert report.startswith("# My Shortlist\n")

    def test_other_language_test_shown_on_its_scale(self, results):
        """IELTS is shown out of 9."""
        profile = StudentProfile(
            gpa=3.6, language_score=7.5, language_test=LanguageTestType.IELTS,
            sat=1350, major="Biology",
        )
        report = render_markdown_report(profile, results)
        assert "- **IELTS:** 7.5/9" in report

    def test_empty_results_rejected(self, cs_student):
        """No results raises ValidationError."""
        with pytest.raises(ValidationError):
            render_markdown_report(cs_student, [])
