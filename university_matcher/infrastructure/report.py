"""
Markdown Report

Renders a scored result list into a human-readable markdown document.
Formatting only: no scoring happens here.
"""

from datetime import date
from typing import List, Optional, Sequence

from university_matcher.config.settings import settings
from university_matcher.domain.language import default_converter
from university_matcher.domain.models import InstitutionType, MatchCategory, MatchResult
from university_matcher.domain.scoring import StudentProfile, categorize_matches
from university_matcher.exceptions import ValidationError

SECTION_ORDER = (MatchCategory.SAFETY, MatchCategory.TARGET, MatchCategory.REACH)

SECTION_TITLES = {
    MatchCategory.SAFETY: "Safety Schools",
    MatchCategory.TARGET: "Target Schools",
    MatchCategory.REACH: "Reach Schools",
}

LEGEND = (
    "**Legend:**\n"
    "- **Reach Schools:** Competitive admits (apply to 2-4)\n"
    "- **Target Schools:** Good fit schools (apply to 4-6)\n"
    "- **Safety Schools:** Likely admits (apply to 2-3)\n"
)

DISCLAIMER = (
    "*This report is generated for reference only. "
    "Please consult with education counselors for personalized advice.*"
)


def _format_profile(profile: StudentProfile) -> List[str]:
    language = profile.language_test
    _, high = default_converter.valid_range(language)
    return [
        "## Student Profile",
        "",
        f"- **GPA:** {profile.gpa:.2f}/4.0",
        f"- **{language.label}:** {profile.language_score:g}/{high}",
        f"- **SAT:** {profile.sat}/1600",
        f"- **Intended Major:** {profile.major}",
        "",
    ]


def _format_result(index: int, result: MatchResult) -> List[str]:
    kind = "Private" if result.type == InstitutionType.PRIVATE else "Public"
    lines = [
        f"### {index}. {result.name}",
        "",
        f"- **Location:** {result.location}, {result.country}",
        f"- **World Ranking:** #{result.ranking}",
        f"- **Match Score:** {result.match_score}%",
        f"- **Acceptance Rate:** {result.acceptance_rate:g}%",
        f"- **Annual Tuition:** ${result.tuition_usd:,}",
        f"- **Type:** {kind}",
        "",
        "**Requirements:**",
        f"- Minimum GPA: {result.requirements.min_gpa:g}",
        f"- Minimum TOEFL: {result.requirements.min_toefl:g}",
        f"- Minimum SAT: {result.requirements.min_sat}",
        "",
        f"**Strong Majors:** {', '.join(result.strong_majors)}",
        "",
    ]

    if result.reasons:
        lines.append("**Match Analysis:**")
        lines.extend(f"- {reason}" for reason in result.reasons)
        lines.append("")

    lines.extend([
        f"**Description:** {result.description}",
        "",
        "---",
        "",
    ])
    return lines


def render_markdown_report(
    profile: StudentProfile,
    results: Sequence[MatchResult],
    generated_on: Optional[date] = None,
    title: Optional[str] = None,
) -> str:
    """
    Render results as a markdown report grouped Safety, Target, Reach.

    Raises:
        ValidationError: when there are no results to report
    """
    if not results:
        raise ValidationError("Cannot render a report without match results")

    generated_on = generated_on or date.today()
    lines = [
        f"# {title or settings.report_title}",
        "",
        f"**Generated on:** {generated_on.isoformat()}",
        "",
    ]
    lines.extend(_format_profile(profile))

    categorized = categorize_matches(results)
    for category in SECTION_ORDER:
        section = categorized.get(category)
        if not section:
            continue
        lines.append(f"## {SECTION_TITLES[category]}")
        lines.append("")
        for index, result in enumerate(section, start=1):
            lines.extend(_format_result(index, result))

    lines.extend([
        "## Summary",
        "",
        f"This report shows {len(results)} universities ranked by compatibility with your profile. "
        "Focus on applying to a balanced mix of reach, target, and safety schools.",
        "",
        LEGEND,
        DISCLAIMER,
    ])
    return "\n".join(lines)
