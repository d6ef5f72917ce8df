"""Skill match outcome for one job posting."""

from pydantic import BaseModel, Field

from models.schemas.job_posting import JobPosting


class MatchResult(BaseModel):
    """Coverage of a posting's skills by a candidate's skill set.

    ``matching_skills`` and ``missing_skills`` partition the posting's skills,
    both in the posting's order.
    """
    match_percentage: int = Field(default=0, ge=0, le=100)
    matching_skills: list[str] = []
    missing_skills: list[str] = []


class MatchedJob(JobPosting):
    """Posting enriched with its (title-adjusted) match result."""
    match_percentage: int = Field(default=0, ge=0, le=100)
    matching_skills: list[str] = []
    missing_skills: list[str] = []
