"""Seniority tiers assigned to a candidate from resume text."""

from enum import Enum


class ExperienceLevel(str, Enum):
    """Closed set of seniority tiers.

    fresher < junior < mid < senior; ``unknown`` is outside the ordering.
    """
    FRESHER = "fresher"
    JUNIOR = "junior"
    MID = "mid"
    SENIOR = "senior"
    UNKNOWN = "unknown"

    @property
    def seniority(self) -> int | None:
        """Ordinal rank (0-3), or None for ``unknown``."""
        return _SENIORITY.get(self)


_SENIORITY: dict[ExperienceLevel, int] = {
    ExperienceLevel.FRESHER: 0,
    ExperienceLevel.JUNIOR: 1,
    ExperienceLevel.MID: 2,
    ExperienceLevel.SENIOR: 3,
}
