# Scoring module for University Matcher
from university_matcher.domain.scoring.interfaces import (
    StudentProfile,
    FieldError,
    FactorScore,
    ScoringFactor,
    BaseScoringFactor,
)
from university_matcher.domain.scoring.label_classifier import LabelClassifier
from university_matcher.domain.scoring.profile_validator import ProfileValidator, validate_profile
from university_matcher.domain.scoring.match_scorer import (
    MatchScorer,
    categorize_matches,
    compute_matches,
)

__all__ = [
    "StudentProfile",
    "FieldError",
    "FactorScore",
    "ScoringFactor",
    "BaseScoringFactor",
    "LabelClassifier",
    "ProfileValidator",
    "validate_profile",
    "MatchScorer",
    "categorize_matches",
    "compute_matches",
]
