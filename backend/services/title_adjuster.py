"""Score correction for seniority mismatch between candidate and job title."""

from models.schemas.experience_level import ExperienceLevel
from services.experience_classifier import SENIOR_KEYWORDS

SENIOR_TITLE_KEYWORDS: tuple[str, ...] = tuple(kw for kw in SENIOR_KEYWORDS if kw != "team lead")
FRESHER_TITLE_KEYWORDS: tuple[str, ...] = (
    "intern", "trainee", "junior", "jr.", "entry level", "associate", "fresher", "graduate",
)

FRESHER_SENIOR_TITLE_PENALTY = 40
FRESHER_ENTRY_TITLE_BONUS = 15
SENIOR_ENTRY_TITLE_PENALTY = 20


def _title_has(title: str, keywords: tuple[str, ...]) -> bool:
    return any(kw in title for kw in keywords)


def adjust_for_title(base_score: int, experience_level: ExperienceLevel, job_title: str) -> int:
    """Shift a match score by the seniority the job title implies.

    Each rule applies at most once regardless of how many keywords hit.
    Result is clamped to 0-100.
    """
    title = (job_title or "").lower()
    score = base_score

    if experience_level == ExperienceLevel.FRESHER:
        if _title_has(title, SENIOR_TITLE_KEYWORDS):
            score -= FRESHER_SENIOR_TITLE_PENALTY
        if _title_has(title, FRESHER_TITLE_KEYWORDS):
            score += FRESHER_ENTRY_TITLE_BONUS
    elif experience_level == ExperienceLevel.SENIOR:
        if _title_has(title, FRESHER_TITLE_KEYWORDS):
            score -= SENIOR_ENTRY_TITLE_PENALTY

    return max(0, min(100, score))
