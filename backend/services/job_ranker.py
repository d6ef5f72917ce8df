"""Rank a job catalog for one candidate.

Per posting: skill match (skill_matcher) -> title adjustment (title_adjuster).
Postings are consumed lazily; only the best ``limit`` results are kept.
"""

import heapq
import logging
from collections.abc import Iterable

from config import settings
from models.schemas.experience_level import ExperienceLevel
from models.schemas.job_posting import JobPosting
from models.schemas.match_result import MatchedJob
from services.skill_matcher import compute_match
from services.title_adjuster import adjust_for_title

logger = logging.getLogger(__name__)


def match_job(
    user_skills: Iterable[str],
    experience_level: ExperienceLevel,
    job: JobPosting,
) -> MatchedJob:
    """Score one posting and apply the title-based adjustment."""
    result = compute_match(user_skills, job.skills)
    adjusted = adjust_for_title(result.match_percentage, experience_level, job.title)
    return MatchedJob(
        **job.model_dump(),
        match_percentage=adjusted,
        matching_skills=result.matching_skills,
        missing_skills=result.missing_skills,
    )


def rank_jobs(
    user_skills: Iterable[str],
    experience_level: ExperienceLevel,
    jobs: Iterable[JobPosting],
    limit: int | None = None,
) -> list[MatchedJob]:
    """Best ``limit`` postings by adjusted match, highest first.

    Ties keep catalog order. ``limit`` defaults to settings.max_results.
    """
    if limit is None:
        limit = settings.max_results
    experience_level = ExperienceLevel(experience_level)
    skills = list(user_skills)

    scored = (match_job(skills, experience_level, job) for job in jobs)
    ranked = heapq.nlargest(limit, scored, key=lambda m: m.match_percentage)

    logger.debug(
        "Ranked jobs for %d skills (level=%s): returning %d",
        len(skills), experience_level.value, len(ranked),
    )
    return ranked
