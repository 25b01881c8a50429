"""
Language Test Score Converter

Converts scores between TOEFL iBT, Duolingo English Test and IELTS.

TOEFL <-> Duolingo uses piecewise-linear interpolation over a fixed
breakpoint table. IELTS has no table entry and maps to TOEFL through a
fixed multiplier of 12.
"""

from bisect import bisect_left
from dataclasses import dataclass
from enum import Enum
from typing import List, Tuple, Union

from university_matcher.domain.numbers import clamp, round_half_up


class LanguageTestType(str, Enum):
    """Supported English proficiency tests."""
    TOEFL = "toefl"
    DUOLINGO = "duolingo"
    IELTS = "ielts"

    @property
    def label(self) -> str:
        return _LABELS[self]


_LABELS = {
    LanguageTestType.TOEFL: "TOEFL",
    LanguageTestType.DUOLINGO: "Duolingo",
    LanguageTestType.IELTS: "IELTS",
}

TestTypeLike = Union[LanguageTestType, str]


@dataclass(frozen=True)
class ConversionEntry:
    """One breakpoint of the TOEFL/Duolingo concordance."""
    toefl: int
    duolingo: int
    description: str


@dataclass(frozen=True)
class LanguageTest:
    """A score together with the test it was taken on."""
    type: LanguageTestType
    score: float


# Ascending in both columns
CONVERSION_TABLE: Tuple[ConversionEntry, ...] = (
    ConversionEntry(60, 85, "Minimum admission standard"),
    ConversionEntry(67, 90, "Minimum admission standard"),
    ConversionEntry(68, 95, "Typical admission standard"),
    ConversionEntry(78, 100, "Typical admission standard"),
    ConversionEntry(79, 105, "Recommended score"),
    ConversionEntry(93, 110, "Recommended score"),
    ConversionEntry(94, 115, "Competitive score"),
    ConversionEntry(101, 120, "Competitive score"),
    ConversionEntry(102, 125, "Top-ranked university standard"),
    ConversionEntry(109, 130, "Top-ranked university standard"),
    ConversionEntry(110, 135, "Elite university standard"),
    ConversionEntry(120, 160, "Elite university standard"),
)


class LanguageScoreConverter:
    """
    Language test score converter.

    All methods are pure; the breakpoint table is fixed at construction.
    """

    VALID_RANGES = {
        LanguageTestType.TOEFL: (0, 120),
        LanguageTestType.DUOLINGO: (10, 160),
        LanguageTestType.IELTS: (0, 9),
    }

    IELTS_TO_TOEFL_MULTIPLIER = 12

    # Matching window used by describe_score
    DESCRIPTION_TOLERANCE = 2

    BELOW_MINIMUM_DESCRIPTION = "Below minimum admission standard"
    TOP_TIER_DESCRIPTION = "Elite university standard"
    MID_TIER_DESCRIPTION = "Intermediate level"
    TOP_TIER_TOEFL = 110

    def __init__(self, table: Tuple[ConversionEntry, ...] = CONVERSION_TABLE):
        self._table = table
        toefl_floor, toefl_ceiling = self.VALID_RANGES[LanguageTestType.TOEFL]
        duolingo_floor, duolingo_ceiling = self.VALID_RANGES[LanguageTestType.DUOLINGO]
        self._toefl_floor = toefl_floor
        self._toefl_ceiling = toefl_ceiling
        self._duolingo_floor = duolingo_floor
        self._duolingo_ceiling = duolingo_ceiling

        # The scale floor anchors interpolation below the first breakpoint
        self._toefl_points = [toefl_floor] + [e.toefl for e in table]
        self._duolingo_points = [duolingo_floor] + [e.duolingo for e in table]

    # ------------------------------------------------------------------
    # TOEFL <-> Duolingo
    # ------------------------------------------------------------------

    def toefl_to_duolingo(self, toefl_score: float) -> int:
        """Convert a TOEFL iBT score to the equivalent Duolingo score."""
        if toefl_score <= self._toefl_floor:
            return self._duolingo_floor
        if toefl_score >= self._toefl_ceiling:
            return self._duolingo_ceiling
        return self._interpolate(toefl_score, self._toefl_points, self._duolingo_points)

    def duolingo_to_toefl(self, duolingo_score: float) -> int:
        """Convert a Duolingo score to the equivalent TOEFL iBT score."""
        if duolingo_score <= self._duolingo_floor:
            return self._toefl_floor
        if duolingo_score >= self._duolingo_ceiling:
            return self._toefl_ceiling
        return self._interpolate(duolingo_score, self._duolingo_points, self._toefl_points)

    def _interpolate(self, score: float, xs: List[int], ys: List[int]) -> int:
        index = bisect_left(xs, score)
        if xs[index] == score:
            return ys[index]

        x0, x1 = xs[index - 1], xs[index]
        y0, y1 = ys[index - 1], ys[index]
        ratio = (score - x0) / (x1 - x0)
        return round_half_up(y0 + ratio * (y1 - y0))

    # ------------------------------------------------------------------
    # Cross-scale conversion
    # ------------------------------------------------------------------

    def to_toefl(self, score: float, test_type: TestTypeLike) -> float:
        """Express any supported score as a TOEFL-equivalent value."""
        test_type = LanguageTestType(test_type)
        if test_type == LanguageTestType.TOEFL:
            return score
        if test_type == LanguageTestType.DUOLINGO:
            return self.duolingo_to_toefl(score)
        return round_half_up(score * self.IELTS_TO_TOEFL_MULTIPLIER)

    def convert(
        self,
        score: float,
        from_type: TestTypeLike,
        to_type: TestTypeLike,
    ) -> float:
        """
        Convert a score from one test scale to another.

        Same-scale conversion returns the score untouched. Everything else
        goes through the TOEFL-equivalent value.
        """
        from_type = LanguageTestType(from_type)
        to_type = LanguageTestType(to_type)

        if from_type == to_type:
            return score

        toefl = self.to_toefl(score, from_type)

        if to_type == LanguageTestType.TOEFL:
            return toefl
        if to_type == LanguageTestType.DUOLINGO:
            return self.toefl_to_duolingo(toefl)
        return self._toefl_to_ielts(toefl)

    def _toefl_to_ielts(self, toefl_score: float) -> float:
        # IELTS is reported in half bands
        bands = round_half_up(toefl_score / self.IELTS_TO_TOEFL_MULTIPLIER * 2) / 2
        low, high = self.VALID_RANGES[LanguageTestType.IELTS]
        return clamp(bands, low, high)

    # ------------------------------------------------------------------
    # Normalization / validation / description
    # ------------------------------------------------------------------

    def normalize(self, score: float, test_type: TestTypeLike) -> float:
        """Map a score onto [0, 1] for comparison across scales."""
        test_type = LanguageTestType(test_type)
        if test_type == LanguageTestType.TOEFL:
            value = score / 120
        elif test_type == LanguageTestType.DUOLINGO:
            value = (score - 10) / 150
        else:
            value = score / 9
        return clamp(value, 0.0, 1.0)

    def compare_scores(self, first: LanguageTest, second: LanguageTest) -> float:
        """Positive when the first score is relatively stronger."""
        return self.normalize(first.score, first.type) - self.normalize(second.score, second.type)

    def is_valid_score(self, score: float, test_type: TestTypeLike) -> bool:
        """Check a score against its test's range. Never raises."""
        try:
            low, high = self.VALID_RANGES[LanguageTestType(test_type)]
        except ValueError:
            return False
        if score is None or isinstance(score, bool):
            return False
        try:
            return low <= score <= high
        except TypeError:
            return False

    def describe_score(self, score: float, test_type: TestTypeLike) -> str:
        """Describe the admission tier a score corresponds to."""
        toefl = self.to_toefl(score, test_type)

        for entry in self._table:
            if abs(toefl - entry.toefl) <= self.DESCRIPTION_TOLERANCE:
                return entry.description

        if toefl < self._table[0].toefl:
            return self.BELOW_MINIMUM_DESCRIPTION
        if toefl >= self.TOP_TIER_TOEFL:
            return self.TOP_TIER_DESCRIPTION
        return self.MID_TIER_DESCRIPTION

    def conversion_table(self) -> List[ConversionEntry]:
        """Copy of the breakpoint table."""
        return list(self._table)

    def valid_range(self, test_type: TestTypeLike) -> Tuple[float, float]:
        return self.VALID_RANGES[LanguageTestType(test_type)]


default_converter = LanguageScoreConverter()

# Convenience exports for direct import
toefl_to_duolingo = default_converter.toefl_to_duolingo
duolingo_to_toefl = default_converter.duolingo_to_toefl
to_toefl = default_converter.to_toefl
convert = default_converter.convert
normalize = default_converter.normalize
compare_scores = default_converter.compare_scores
is_valid_score = default_converter.is_valid_score
describe_score = default_converter.describe_score
conversion_table = default_converter.conversion_table
