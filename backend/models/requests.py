from pydantic import BaseModel, Field

from models.schemas.experience_level import ExperienceLevel
from models.schemas.job_posting import JobPosting
from models.schemas.skill_profile import SkillSource


class AnalyzeResumeRequest(BaseModel):
    resume_text: str = Field(..., max_length=50000, description="Plain text resume content")


class SkillsUpdateRequest(BaseModel):
    skills: list[str] = Field(..., max_length=500, description="Full replacement skill list")
    source: SkillSource | None = None


class ExperienceLevelUpdateRequest(BaseModel):
    experience_level: ExperienceLevel


class MatchJobsRequest(BaseModel):
    skills: list[str] = Field(default=[], max_length=500)
    experience_level: ExperienceLevel = ExperienceLevel.UNKNOWN
    jobs: list[JobPosting] = Field(default=[], max_length=5000)


class ProfileMatchRequest(BaseModel):
    jobs: list[JobPosting] = Field(default=[], max_length=5000)
