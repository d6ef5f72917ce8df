"""Per-user skill profile."""

from datetime import datetime, timezone
from enum import Enum

from pydantic import BaseModel, Field

from models.schemas.experience_level import ExperienceLevel


class SkillSource(str, Enum):
    MANUAL = "manual"
    UPLOAD = "upload"
    BUILDER = "builder"


class UserSkillProfile(BaseModel):
    """Stored skills and experience tier for one user.

    Always written whole: every save replaces the skill list entirely.
    """
    user_id: str
    skills: list[str] = []  # sanitized: lowercase, deduplicated, <=100 x <=50 chars
    experience_level: ExperienceLevel = ExperienceLevel.UNKNOWN
    source: SkillSource = SkillSource.MANUAL
    resume_file_name: str | None = None  # last uploaded file
    extracted_text: str = ""  # first 5000 chars of the last uploaded resume
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def has_resume(self) -> bool:
        return bool(self.skills)
