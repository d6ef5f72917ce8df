"""Whitelist-based skill extraction from raw resume text.

When the resume has a skills section, only that section is scanned, and
short ambiguous skills ("r", "go", "c#") are accepted as standalone list
items. Without one, the whole text is scanned using only whitelist entries
of four or more characters.
"""

import logging
import re

logger = logging.getLogger(__name__)

# Curated vocabulary: no single-letter or otherwise ambiguous short words
SKILLS_WHITELIST: tuple[str, ...] = (
    # Data & Analytics
    "python", "sql", "excel", "power bi", "pandas", "numpy", "matplotlib", "mysql",
    "postgresql", "tableau", "data analysis", "machine learning", "statistics",
    "scikit-learn", "data science", "data engineering", "spark", "hadoop", "airflow",
    "kafka", "etl", "deep learning", "nlp", "tensorflow", "pytorch", "keras",
    # Web Development
    "javascript", "typescript", "react", "angular", "vue.js", "svelte", "next.js",
    "node.js", "express", "django", "flask", "fastapi", "html", "css", "sass",
    "tailwind", "bootstrap", "graphql", "webpack", "vite",
    # Backend & Infrastructure
    "java", "spring boot", "ruby on rails", "asp.net", "laravel", "docker",
    "kubernetes", "terraform", "aws", "azure", "gcp", "linux", "nginx", "redis",
    "mongodb", "elasticsearch", "dynamodb", "firebase", "supabase",
    # Programming languages (multi-character, unambiguous)
    "kotlin", "swift", "scala", "matlab", "rust", "perl", "powershell", "bash", "shell",
    # Mobile
    "react native", "flutter", "ios development", "android development", "xamarin",
    # Tools & Practices
    "git", "github", "gitlab", "jira", "confluence", "figma", "ci/cd",
    "agile methodology", "scrum", "microservices",
    # Soft skills
    "leadership", "project management", "communication", "problem-solving",
    "mentoring", "teamwork",
    # Additional
    "seaborn", "opencv", "jupyter notebook", "vs code", "manual testing",
    "sdlc", "stlc", "speech recognition", "power automate", "canva",
)

# Only accepted as a standalone list item inside a skills section
AMBIGUOUS_SKILLS: tuple[str, ...] = ("c++", "c#", "r", "go", "php", "ruby")

# Entries shorter than this are skipped when there is no skills section
MIN_FALLBACK_SKILL_LENGTH = 4

# Skills section cut-off when no following header is found
MAX_SECTION_CHARS = 2000

# "Skills", "Technical Skills:", "Tech Stack", "Skills: Python, SQL"
SKILLS_HEADER_RE = re.compile(
    r"^\s*(?:"
    r"(?:technical\s+|key\s+|core\s+)?skills"
    r"|core\s+competencies"
    r"|technologies"
    r"|tech\s+stack"
    r"|tools\s*(?:&|and)\s*technologies"
    r"|proficiencies"
    r"|areas\s+of\s+expertise"
    r")[ \t]*(?::|$)",
    re.IGNORECASE | re.MULTILINE,
)

# Any all-caps header line ("EDUCATION", "WORK EXPERIENCE") ends the section
GENERIC_SECTION_RE = re.compile(r"^\s*(?:[A-Z][A-Z\s&]{2,})\s*:?\s*$", re.MULTILINE)

_LIST_DELIMITERS = r",;|•\n"


def _whole_word_pattern(skill: str) -> re.Pattern:
    return re.compile(rf"\b{re.escape(skill)}\b", re.IGNORECASE)


def _list_item_pattern(skill: str) -> re.Pattern:
    return re.compile(
        rf"(?:^|[{_LIST_DELIMITERS}])\s*{re.escape(skill)}\s*(?:[{_LIST_DELIMITERS}]|$)",
        re.IGNORECASE | re.MULTILINE,
    )


_WHITELIST_PATTERNS: tuple[tuple[str, re.Pattern], ...] = tuple(
    (skill, _whole_word_pattern(skill)) for skill in SKILLS_WHITELIST
)
_FALLBACK_PATTERNS: tuple[tuple[str, re.Pattern], ...] = tuple(
    (skill, pattern)
    for skill, pattern in _WHITELIST_PATTERNS
    if len(skill) >= MIN_FALLBACK_SKILL_LENGTH
)
_AMBIGUOUS_PATTERNS: tuple[tuple[str, re.Pattern], ...] = tuple(
    (skill, _list_item_pattern(skill)) for skill in AMBIGUOUS_SKILLS
)


def find_skills_section(text: str) -> str | None:
    """Return the body of the resume's skills section, or None if it has none."""
    header = SKILLS_HEADER_RE.search(text)
    if header is None:
        return None

    remaining = text[header.end():]
    next_section = GENERIC_SECTION_RE.search(remaining)
    if next_section is not None:
        return remaining[: next_section.start()]
    return remaining[:MAX_SECTION_CHARS]


def _match_patterns(text: str, patterns: tuple[tuple[str, re.Pattern], ...]) -> set[str]:
    return {skill.lower() for skill, pattern in patterns if pattern.search(text)}


def extract_skills(text: str | None) -> set[str]:
    """Extract a lowercase, deduplicated skill set from resume text."""
    if not text:
        return set()

    section = find_skills_section(text)
    if section is not None:
        found = _match_patterns(section, _WHITELIST_PATTERNS)
        found |= _match_patterns(section, _AMBIGUOUS_PATTERNS)
    else:
        logger.debug("No skills section found, scanning full text")
        found = _match_patterns(text, _FALLBACK_PATTERNS)

    return found
