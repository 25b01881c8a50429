"""
Match Universities Script

Scores the bundled university catalog for one student profile and prints
the ranked results, or the full markdown report.

Usage:
    python scripts/match_universities.py --gpa 3.85 --toefl 100 --sat 1400 --major "Computer Science"
    python scripts/match_universities.py --gpa 3.6 --duolingo 120 --sat 1350 --major Economics --report
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from university_matcher.config.settings import settings
from university_matcher.domain.language import LanguageTestType, describe_score
from university_matcher.domain.models import CatalogFilter, InstitutionType
from university_matcher.domain.scoring import (
    StudentProfile,
    categorize_matches,
    compute_matches,
    validate_profile,
)
from university_matcher.exceptions import CatalogError
from university_matcher.infrastructure.catalog import (
    filter_universities,
    load_majors,
    load_universities,
)
from university_matcher.infrastructure.report import render_markdown_report

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper()),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def non_negative_int(value: str) -> int:
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be non-negative: {value}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Rank universities for a student profile.")
    parser.add_argument("--gpa", type=float, required=True, help="GPA on a 4.0 scale")
    parser.add_argument("--sat", type=int, required=True, help="SAT total (400-1600)")
    parser.add_argument("--major", required=True, help="Intended major")

    language = parser.add_mutually_exclusive_group(required=True)
    language.add_argument("--toefl", type=float, help="TOEFL iBT score (0-120)")
    language.add_argument("--duolingo", type=float, help="Duolingo English Test score (10-160)")
    language.add_argument("--ielts", type=float, help="IELTS band score (0-9)")

    parser.add_argument("--country", action="append", dest="countries", help="Only universities in this country")
    parser.add_argument("--type", choices=[t.value for t in InstitutionType], action="append", dest="types")
    parser.add_argument("--max-tuition", type=non_negative_int, help="Maximum annual tuition in USD")
    parser.add_argument("--report", action="store_true", help="Print the markdown report")
    return parser


def profile_from_args(args: argparse.Namespace) -> StudentProfile:
    if args.toefl is not None:
        test_type, score = LanguageTestType.TOEFL, args.toefl
    elif args.duolingo is not None:
        test_type, score = LanguageTestType.DUOLINGO, args.duolingo
    else:
        test_type, score = LanguageTestType.IELTS, args.ielts

    return StudentProfile(
        gpa=args.gpa,
        sat=args.sat,
        major=args.major,
        language_score=score,
        language_test=test_type,
    )


def print_table(results) -> None:
    summary = categorize_matches(results).summary()
    print(f"{len(results)} universities: "
          f"{summary['reach']} reach, {summary['target']} target, {summary['safety']} safety")
    print()
    for result in results:
        print(f"{result.match_score:>3}  {result.category.value:<6}  {result.name}")
        for reason in result.reasons:
            print(f"       - {reason}")


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    profile = profile_from_args(args)

    try:
        catalog = load_universities()
        majors = load_majors() if settings.strict_major_validation else None
    except CatalogError as e:
        logger.error(f"Could not load catalog: {e.message}")
        return 2

    # Field errors are reported before any filtering
    errors = validate_profile(profile, majors)
    if errors:
        for error in errors:
            print(f"error: {error.message}", file=sys.stderr)
        return 1

    criteria = CatalogFilter(
        countries=args.countries,
        types=args.types,
        max_tuition=args.max_tuition,
    )
    candidates = filter_universities(catalog, criteria)
    if not candidates:
        print("No universities match the given filters.")
        return 1

    results = compute_matches(profile, candidates, majors)

    if args.report:
        print(render_markdown_report(profile, results))
    else:
        tier = describe_score(profile.language_score, profile.language_test)
        print(f"English level: {tier}")
        print_table(results)
    return 0


if __name__ == "__main__":
    sys.exit(main())
