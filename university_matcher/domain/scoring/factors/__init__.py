# Scoring factors submodule
from university_matcher.domain.scoring.factors.requirement_ratio import RequirementRatioFactor
from university_matcher.domain.scoring.factors.gpa_fit import GpaFitFactor
from university_matcher.domain.scoring.factors.language_fit import LanguageFitFactor
from university_matcher.domain.scoring.factors.sat_fit import SatFitFactor
from university_matcher.domain.scoring.factors.major_match import MajorMatchFactor

__all__ = [
    "RequirementRatioFactor",
    "GpaFitFactor",
    "LanguageFitFactor",
    "SatFitFactor",
    "MajorMatchFactor",
]
