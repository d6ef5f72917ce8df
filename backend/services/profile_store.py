"""In-memory per-user skill profiles with whole-profile replacement.

No merge/patch operation exists: every write replaces the
stored skill list entirely (last write wins).
"""

import logging
import threading
from collections.abc import Iterable
from datetime import datetime, timezone

from models.schemas.experience_level import ExperienceLevel
from models.schemas.skill_profile import SkillSource, UserSkillProfile
from services.experience_classifier import classify_experience
from services.skill_extractor import extract_skills

logger = logging.getLogger(__name__)

MAX_SKILLS = 100
MAX_SKILL_LENGTH = 50
MAX_EXTRACTED_TEXT_CHARS = 5000


def sanitize_skills(skills: Iterable[str]) -> list[str]:
    """Lowercase, trim, truncate, drop empties, dedupe (first wins), cap count."""
    cleaned: list[str] = []
    seen: set[str] = set()
    for skill in skills:
        s = skill.lower().strip()[:MAX_SKILL_LENGTH]
        if not s or s in seen:
            continue
        seen.add(s)
        cleaned.append(s)
        if len(cleaned) == MAX_SKILLS:
            break
    return cleaned


class ProfileStore:
    """Thread-safe map of user_id -> UserSkillProfile."""

    def __init__(self) -> None:
        self._profiles: dict[str, UserSkillProfile] = {}
        self._lock = threading.Lock()

    def get(self, user_id: str) -> UserSkillProfile | None:
        with self._lock:
            return self._profiles.get(user_id)

    def _put(self, profile: UserSkillProfile) -> UserSkillProfile:
        self._profiles[profile.user_id] = profile
        logger.info(
            "Saved profile for %s: %d skills, level=%s, source=%s",
            profile.user_id, len(profile.skills),
            profile.experience_level.value, profile.source.value,
        )
        return profile

    def replace_skills(
        self,
        user_id: str,
        skills: Iterable[str],
        source: SkillSource | None = None,
    ) -> UserSkillProfile:
        """Replace the user's whole skill list.

        Without an explicit source the existing profile's source is kept
        (``manual`` for a new profile). The experience level and the last
        uploaded file name and text are kept.
        """
        sanitized = sanitize_skills(skills)
        with self._lock:
            existing = self._profiles.get(user_id)
            if source is None:
                source = existing.source if existing else SkillSource.MANUAL
            level = existing.experience_level if existing else ExperienceLevel.UNKNOWN
            return self._put(UserSkillProfile(
                user_id=user_id,
                skills=sanitized,
                experience_level=level,
                source=source,
                resume_file_name=existing.resume_file_name if existing else None,
                extracted_text=existing.extracted_text if existing else "",
            ))

    def save_resume(
        self, user_id: str, text: str, file_name: str | None = None
    ) -> UserSkillProfile:
        """Replace skills and experience level with those found in resume text.

        The file name and the first 5000 characters of the text are stored too.
        """
        skills = sanitize_skills(sorted(extract_skills(text)))
        level = classify_experience(text)
        with self._lock:
            return self._put(UserSkillProfile(
                user_id=user_id,
                skills=skills,
                experience_level=level,
                source=SkillSource.UPLOAD,
                resume_file_name=file_name,
                extracted_text=text[:MAX_EXTRACTED_TEXT_CHARS],
            ))

    def set_experience_level(
        self, user_id: str, level: ExperienceLevel
    ) -> UserSkillProfile | None:
        """Override the stored tier. Returns None if the user has no profile."""
        with self._lock:
            existing = self._profiles.get(user_id)
            if existing is None:
                return None
            return self._put(existing.model_copy(update={
                "experience_level": level,
                "updated_at": datetime.now(timezone.utc),
            }))

    def delete(self, user_id: str) -> bool:
        with self._lock:
            return self._profiles.pop(user_id, None) is not None

    def clear(self) -> None:
        with self._lock:
            self._profiles.clear()


_store = ProfileStore()


def get_profile_store() -> ProfileStore:
    return _store
