"""
Match Scorer

Central scoring engine that sums all factor points for every university
in the catalog, classifies each one and returns them best-first.
"""

import logging
from typing import Iterable, List, Optional, Sequence

from university_matcher.domain.models import (
    CategorizedMatches,
    MatchCategory,
    MatchResult,
    University,
)
from university_matcher.domain.numbers import clamp, round_half_up
from university_matcher.domain.scoring.factors import (
    GpaFitFactor,
    LanguageFitFactor,
    SatFitFactor,
    MajorMatchFactor,
)
from university_matcher.domain.scoring.interfaces import ScoringFactor, StudentProfile
from university_matcher.domain.scoring.label_classifier import LabelClassifier
from university_matcher.domain.scoring.profile_validator import ProfileValidator
from university_matcher.exceptions import ProfileValidationError

logger = logging.getLogger(__name__)


class MatchScorer:
    """
    University match scoring engine.

    Stateless apart from its factor list: each call reads the catalog and
    returns fresh results.
    """

    MIN_SCORE = 0
    MAX_SCORE = 100

    def __init__(
        self,
        factors: Optional[List[ScoringFactor]] = None,
        classifier: Optional[LabelClassifier] = None,
    ):
        """
        Initialize scorer with factors.

        Args:
            factors: List of scoring factors. If None, uses defaults.
            classifier: Category classifier. If None, uses defaults.
        """
        self._factors = factors or self._default_factors()
        self._label_classifier = classifier or LabelClassifier()

    def _default_factors(self) -> List[ScoringFactor]:
        """Default factors; their weights sum to 100."""
        return [
            GpaFitFactor(),
            LanguageFitFactor(),
            SatFitFactor(),
            MajorMatchFactor(),
        ]

    @property
    def factors(self) -> List[ScoringFactor]:
        return list(self._factors)

    def score_university(
        self,
        profile: StudentProfile,
        university: University
    ) -> MatchResult:
        """
        Score a single university for an already validated profile.

        Returns:
            MatchResult with score, category and reasons
        """
        total = 0.0
        reasons: List[str] = []

        for factor in self._factors:
            factor_score = factor.calculate(profile, university)
            total += factor_score.points
            reasons.extend(factor_score.reasons)

        score = int(clamp(round_half_up(total), self.MIN_SCORE, self.MAX_SCORE))
        category = self._label_classifier.classify(score, university.acceptance_rate)

        return MatchResult.from_university(
            university,
            match_score=score,
            category=category,
            reasons=reasons,
        )

    def score_universities(
        self,
        profile: StudentProfile,
        universities: Iterable[University]
    ) -> List[MatchResult]:
        """
        Score every university. Nothing is filtered out.

        Returns:
            Results sorted by match score descending; ties keep catalog order
        """
        scored = [self.score_university(profile, uni) for uni in universities]

        # sorted() is stable
        return sorted(scored, key=lambda r: r.match_score, reverse=True)

    def compute_matches(
        self,
        profile: StudentProfile,
        catalog: Sequence[University],
        majors: Optional[Iterable[str]] = None,
    ) -> List[MatchResult]:
        """
        Validate the profile, then score the whole catalog.

        Args:
            profile: Student profile
            catalog: Universities to score
            majors: Recognized majors; enables the major membership check

        Raises:
            ProfileValidationError: with every failing field; nothing is scored
        """
        errors = ProfileValidator(majors).validate(profile)
        if errors:
            logger.info(
                f"[MATCH-ENGINE] Profile rejected: {', '.join(e.field for e in errors)}"
            )
            raise ProfileValidationError(errors)

        results = self.score_universities(profile, catalog)

        summary = categorize_matches(results).summary()
        logger.debug(
            f"[MATCH-ENGINE] Scored {len(results)} universities "
            f"(reach={summary['reach']}, target={summary['target']}, safety={summary['safety']})"
        )
        return results


def categorize_matches(results: Iterable[MatchResult]) -> CategorizedMatches:
    """Partition results by category in one pass, preserving order."""
    buckets = {category: [] for category in MatchCategory}
    for result in results:
        buckets[result.category].append(result)

    return CategorizedMatches(
        reach=buckets[MatchCategory.REACH],
        target=buckets[MatchCategory.TARGET],
        safety=buckets[MatchCategory.SAFETY],
    )


def compute_matches(
    profile: StudentProfile,
    catalog: Sequence[University],
    majors: Optional[Iterable[str]] = None,
) -> List[MatchResult]:
    """Score the catalog for a profile with the default factors."""
    return MatchScorer().compute_matches(profile, catalog, majors)
