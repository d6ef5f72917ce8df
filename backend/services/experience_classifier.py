"""Heuristic seniority classification from resume free text.

Signals (keywords, "N years of experience" claims, graduation year, section
headers) are extracted once, then an ordered rule table picks the tier:
the first rule whose predicate holds wins.
"""

import re
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime

from models.schemas.experience_level import ExperienceLevel

MIN_TEXT_LENGTH = 20

FRESHER_KEYWORDS: tuple[str, ...] = (
    "fresher", "fresh graduate", "recent graduate", "entry level", "entry-level",
    "final year", "final semester", "0 years", "no experience",
    "seeking first", "first job", "career start", "beginner",
    "just graduated", "newly graduated", "campus placement",
)

SENIOR_KEYWORDS: tuple[str, ...] = (
    "senior", "sr.", "lead", "principal", "staff", "architect",
    "director", "vp", "head of", "manager", "team lead",
)

# "8+ years of experience", "3 yrs exp"
YEARS_OF_EXPERIENCE_RE = re.compile(
    r"(\d{1,2})\+?\s*(?:years?|yrs?)(?:\s+of)?\s+(?:experience|exp)", re.IGNORECASE
)
GRAD_YEAR_RE = re.compile(
    r"(?:graduated?|graduation|batch|class of|passing year)\s*:?\s*(\d{4})", re.IGNORECASE
)
WORK_SECTION_RE = re.compile(
    r"(?:work\s+experience|professional\s+experience|employment\s+history|career\s+history)",
    re.IGNORECASE,
)
INTERNSHIP_RE = re.compile(r"(?:internship|intern)\b", re.IGNORECASE)

RECENT_GRAD_WINDOW = 2


@dataclass(frozen=True)
class ExperienceSignals:
    has_fresher_keyword: bool = False
    max_years: int = -1  # -1 when no "N years of experience" claim was found
    recent_grad: bool = False
    has_work_section: bool = False
    internship_mentions: int = 0
    has_senior_keyword: bool = False


def extract_experience_signals(text: str, current_year: int | None = None) -> ExperienceSignals:
    """Compute the raw classification signals from resume text."""
    if current_year is None:
        current_year = datetime.now().year

    lower = text.lower()

    years = [int(m.group(1)) for m in YEARS_OF_EXPERIENCE_RE.finditer(lower)]
    grad_years = [int(m.group(1)) for m in GRAD_YEAR_RE.finditer(lower)]

    return ExperienceSignals(
        has_fresher_keyword=any(kw in lower for kw in FRESHER_KEYWORDS),
        max_years=max(years) if years else -1,
        recent_grad=any(0 <= current_year - y <= RECENT_GRAD_WINDOW for y in grad_years),
        has_work_section=WORK_SECTION_RE.search(lower) is not None,
        internship_mentions=len(INTERNSHIP_RE.findall(lower)),
        has_senior_keyword=any(kw in lower for kw in SENIOR_KEYWORDS),
    )


Rule = tuple[str, Callable[[ExperienceSignals], bool], ExperienceLevel]

# Evaluated top to bottom; order is significant.
EXPERIENCE_RULES: tuple[Rule, ...] = (
    (
        "many_years_or_senior_title",
        lambda s: s.max_years >= 6 or (s.has_senior_keyword and s.max_years >= 4),
        ExperienceLevel.SENIOR,
    ),
    ("mid_years", lambda s: 3 <= s.max_years < 6, ExperienceLevel.MID),
    (
        "fresher_keyword_or_recent_grad",
        lambda s: s.has_fresher_keyword or s.recent_grad,
        ExperienceLevel.FRESHER,
    ),
    ("few_years", lambda s: 0 <= s.max_years < 3, ExperienceLevel.JUNIOR),
    (
        "no_work_section",
        lambda s: not s.has_work_section
        or (s.internship_mentions > 0 and not s.has_work_section),
        ExperienceLevel.FRESHER,
    ),
)


def apply_rules(signals: ExperienceSignals) -> ExperienceLevel:
    for _name, predicate, level in EXPERIENCE_RULES:
        if predicate(signals):
            return level
    return ExperienceLevel.UNKNOWN


def classify_experience(text: str | None, current_year: int | None = None) -> ExperienceLevel:
    """Classify a candidate's seniority from resume text.

    Text that is missing or shorter than 20 characters yields ``unknown``.
    """
    if text is not None and not isinstance(text, str):
        raise TypeError(f"text must be a str, got {type(text).__name__}")
    if not text or len(text.strip()) < MIN_TEXT_LENGTH:
        return ExperienceLevel.UNKNOWN
    return apply_rules(extract_experience_signals(text, current_year))
