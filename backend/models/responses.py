from pydantic import BaseModel

from models.schemas.experience_level import ExperienceLevel
from models.schemas.match_result import MatchedJob


class ResumeAnalysisResponse(BaseModel):
    skills: list[str] = []
    experience_level: ExperienceLevel = ExperienceLevel.UNKNOWN
    skills_section_found: bool = False


class MatchJobsResponse(BaseModel):
    jobs: list[MatchedJob] = []
    user_skills: list[str] = []
    has_resume: bool = False
