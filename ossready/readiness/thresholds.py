"""Score thresholds shared by the aggregator, checklist and release gate."""

from dataclasses import dataclass

from ossready.readiness.models import Status

GOOD_SCORE = 80
WARNING_SCORE = 50
RELEASE_MINIMUM_SCORE = 90


@dataclass(frozen=True)
class ScoreThresholds:
    """Cut-offs for status tiers and the release gate."""

    good: int = GOOD_SCORE
    warning: int = WARNING_SCORE
    release_minimum: int = RELEASE_MINIMUM_SCORE

    def __post_init__(self) -> None:
        if not 0 <= self.warning <= self.good <= 100:
            raise ValueError(
                f"Thresholds must satisfy 0 <= warning <= good <= 100 "
                f"(got warning={self.warning}, good={self.good})"
            )
        if not 0 <= self.release_minimum <= 100:
            raise ValueError(f"release_minimum must be within 0-100, got {self.release_minimum}")

    def classify(self, score: int) -> Status:
        """Convert a numeric score to a status tier.

        Args:
            score: Score from 0-100

        Returns:
            GOOD at or above ``good``, WARNING at or above ``warning``,
            ERROR otherwise
        """
        if score >= self.good:
            return Status.GOOD
        elif score >= self.warning:
            return Status.WARNING
        else:
            return Status.ERROR


@dataclass(frozen=True)
class ChecklistThreshold:
    """(done, warning) cut-offs for a score-driven checklist entry."""

    done: int
    warning: int


DEFAULT_THRESHOLDS = ScoreThresholds()

DOCUMENTATION_CHECK = ChecklistThreshold(done=80, warning=50)
TESTS_CHECK = ChecklistThreshold(done=80, warning=50)
CI_CHECK = ChecklistThreshold(done=80, warning=50)
LICENSE_CHECK = ChecklistThreshold(done=90, warning=50)
COMMUNITY_CHECK = ChecklistThreshold(done=60, warning=30)
DEPENDENCY_CHECK = ChecklistThreshold(done=100, warning=60)
CODE_QUALITY_CHECK = ChecklistThreshold(done=80, warning=50)
