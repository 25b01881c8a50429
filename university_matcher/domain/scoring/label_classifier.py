"""
Label Classifier

Classifies a scored university as Reach, Target, or Safety.
Uses the match score together with the university's raw acceptance rate.
"""

from university_matcher.domain.models import MatchCategory


class LabelClassifier:
    """
    University label classifier.

    - Safety: score >= 85 AND acceptance rate > 15%
    - Target: 70 <= score < 85
    - Reach: everything else

    A score of 85 or more at a school admitting 15% or fewer is a Reach,
    not a Target: the Target band stops at 85.
    """

    SAFETY_MIN_SCORE = 85
    SAFETY_MIN_ACCEPTANCE_RATE = 15.0  # percent, exclusive
    TARGET_MIN_SCORE = 70

    def classify(self, score: float, acceptance_rate: float) -> MatchCategory:
        if score >= self.SAFETY_MIN_SCORE and acceptance_rate > self.SAFETY_MIN_ACCEPTANCE_RATE:
            return MatchCategory.SAFETY
        if self.TARGET_MIN_SCORE <= score < self.SAFETY_MIN_SCORE:
            return MatchCategory.TARGET
        return MatchCategory.REACH
