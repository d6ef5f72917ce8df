"""Skill equivalence and per-posting match scoring."""

from collections.abc import Iterable, Sequence

from models.schemas.match_result import MatchResult
from services.skill_aliases import ALIAS_TABLE, AliasTable
from services.skill_normalizer import normalize_skill


def skills_match(user_skill: str, job_skill: str, table: AliasTable = ALIAS_TABLE) -> bool:
    """True if both strings name the same competency.

    Equal after normalization, or members of the same alias family.
    """
    return _normalized_match(normalize_skill(user_skill), normalize_skill(job_skill), table)


def _normalized_match(user_norm: str, job_norm: str, table: AliasTable) -> bool:
    if user_norm == job_norm:
        return True
    return table.same_family_normalized(user_norm, job_norm)


def _round_half_up_percent(part: int, total: int) -> int:
    """round(100 * part / total) with halves rounded up, in exact integers."""
    return (200 * part + total) // (2 * total)


def compute_match(
    user_skills: Iterable[str],
    job_skills: Sequence[str],
    table: AliasTable = ALIAS_TABLE,
) -> MatchResult:
    """Split a posting's skills into matching/missing for a candidate.

    Output lists keep the posting's order. A posting without skills scores 0.
    """
    if not job_skills:
        return MatchResult(match_percentage=0, matching_skills=[], missing_skills=[])

    user_norms = {normalize_skill(s) for s in user_skills}

    matching: list[str] = []
    missing: list[str] = []
    for job_skill in job_skills:
        job_norm = normalize_skill(job_skill)
        if any(_normalized_match(u, job_norm, table) for u in user_norms):
            matching.append(job_skill)
        else:
            missing.append(job_skill)

    return MatchResult(
        match_percentage=_round_half_up_percent(len(matching), len(job_skills)),
        matching_skills=matching,
        missing_skills=missing,
    )
