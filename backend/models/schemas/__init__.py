"""Domain contracts shared by the matching services and the API."""

from models.schemas.experience_level import ExperienceLevel
from models.schemas.job_posting import JobPosting
from models.schemas.match_result import MatchedJob, MatchResult
from models.schemas.skill_profile import SkillSource, UserSkillProfile

__all__ = [
    "ExperienceLevel",
    "JobPosting",
    "MatchResult",
    "MatchedJob",
    "SkillSource",
    "UserSkillProfile",
]
