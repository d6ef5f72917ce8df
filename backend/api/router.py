import logging

from fastapi import APIRouter, Depends, File, HTTPException, Request, UploadFile
from slowapi import Limiter
from slowapi.util import get_remote_address

from api.dependencies import get_store
from config import settings
from models.requests import (
    AnalyzeResumeRequest,
    ExperienceLevelUpdateRequest,
    MatchJobsRequest,
    ProfileMatchRequest,
    SkillsUpdateRequest,
)
from models.responses import MatchJobsResponse, ResumeAnalysisResponse
from models.schemas.experience_level import ExperienceLevel
from models.schemas.skill_profile import UserSkillProfile
from services import pdf_parser
from services.experience_classifier import classify_experience
from services.job_ranker import rank_jobs
from services.profile_store import ProfileStore, sanitize_skills
from services.skill_aliases import ALIAS_TABLE
from services.skill_extractor import extract_skills, find_skills_section

logger = logging.getLogger(__name__)

router = APIRouter()
limiter = Limiter(key_func=get_remote_address, enabled=settings.rate_limit_enabled)


@router.get("/health")
async def health():
    return {
        "status": "ok",
        "alias_families": len(ALIAS_TABLE),
    }


@router.post("/resume/analyze", response_model=ResumeAnalysisResponse)
@limiter.limit(settings.rate_limit)
async def analyze_resume(request: Request, body: AnalyzeResumeRequest):
    text = body.resume_text
    return ResumeAnalysisResponse(
        skills=sorted(extract_skills(text)),
        experience_level=classify_experience(text),
        skills_section_found=find_skills_section(text) is not None,
    )


@router.post("/jobs/match", response_model=MatchJobsResponse)
@limiter.limit(settings.rate_limit)
async def match_jobs(request: Request, body: MatchJobsRequest):
    skills = sanitize_skills(body.skills)
    ranked = rank_jobs(skills, body.experience_level, body.jobs)
    return MatchJobsResponse(jobs=ranked, user_skills=skills, has_resume=bool(skills))


@router.get("/profiles/{user_id}", response_model=UserSkillProfile)
async def get_profile(user_id: str, store: ProfileStore = Depends(get_store)):
    profile = store.get(user_id)
    if profile is None:
        raise HTTPException(status_code=404, detail="Profile not found")
    return profile


@router.put("/profiles/{user_id}/skills", response_model=UserSkillProfile)
@limiter.limit(settings.rate_limit)
async def replace_skills(
    request: Request,
    user_id: str,
    body: SkillsUpdateRequest,
    store: ProfileStore = Depends(get_store),
):
    return store.replace_skills(user_id, body.skills, source=body.source)


@router.put("/profiles/{user_id}/experience-level", response_model=UserSkillProfile)
@limiter.limit(settings.rate_limit)
async def set_experience_level(
    request: Request,
    user_id: str,
    body: ExperienceLevelUpdateRequest,
    store: ProfileStore = Depends(get_store),
):
    profile = store.set_experience_level(user_id, body.experience_level)
    if profile is None:
        raise HTTPException(status_code=404, detail="Profile not found")
    return profile


@router.post("/profiles/{user_id}/resume", response_model=UserSkillProfile)
@limiter.limit(settings.rate_limit)
async def upload_resume(
    request: Request,
    user_id: str,
    resume_file: UploadFile = File(...),
    store: ProfileStore = Depends(get_store),
):
    filename = resume_file.filename or ""
    if not filename.lower().endswith(tuple(pdf_parser.SUPPORTED_EXTENSIONS)):
        raise HTTPException(status_code=400, detail="Only PDF, DOCX or TXT files are accepted")

    # Read and validate size
    content = await resume_file.read()
    max_bytes = settings.max_upload_size_mb * 1024 * 1024
    if len(content) > max_bytes:
        raise HTTPException(
            status_code=400,
            detail=f"File too large. Max size: {settings.max_upload_size_mb}MB",
        )

    try:
        resume_text = pdf_parser.extract_upload_text(filename, content)
    except Exception:
        logger.warning("Could not parse uploaded resume %r for %s", filename, user_id, exc_info=True)
        raise HTTPException(status_code=400, detail="Could not parse resume file")

    if not resume_text.strip():
        raise HTTPException(status_code=400, detail="No text could be extracted from file")

    return store.save_resume(
        user_id, resume_text[: settings.max_resume_chars], file_name=filename
    )


@router.post("/profiles/{user_id}/matches", response_model=MatchJobsResponse)
@limiter.limit(settings.rate_limit)
async def match_profile_jobs(
    request: Request,
    user_id: str,
    body: ProfileMatchRequest,
    store: ProfileStore = Depends(get_store),
):
    profile = store.get(user_id)
    if profile is None:
        ranked = rank_jobs([], ExperienceLevel.UNKNOWN, body.jobs)
        return MatchJobsResponse(jobs=ranked, user_skills=[], has_resume=False)

    ranked = rank_jobs(profile.skills, profile.experience_level, body.jobs)
    return MatchJobsResponse(
        jobs=ranked, user_skills=profile.skills, has_resume=profile.has_resume
    )
