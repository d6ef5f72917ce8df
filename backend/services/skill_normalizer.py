"""Canonical form of a skill token for comparison."""

_JS_SUFFIX = ".js"


def normalize_skill(raw: str) -> str:
    """Normalize a skill string for comparison.

    "Node.js" -> "node", "ASP.NET" -> "aspnet", "ci-cd" -> "ci cd".
    Idempotent.
    """
    if not isinstance(raw, str):
        raise TypeError(f"skill must be a str, got {type(raw).__name__}")

    skill = raw.lower().strip()
    if skill.endswith(_JS_SUFFIX):
        skill = skill[: -len(_JS_SUFFIX)]
    skill = skill.replace(".", "").replace("-", " ")
    return skill.strip()
