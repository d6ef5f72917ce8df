"""Tests for whitelist skill extraction."""

from services.skill_extractor import extract_skills, find_skills_section


def test_inline_skills_header():
    text = "Skills: Python, React, AWS\n\nEDUCATION\n..."
    assert extract_skills(text) == {"python", "react", "aws"}


def test_section_stops_at_next_header():
    text = """Jane Doe

Technical Skills
Python, Docker, Kubernetes

EXPERIENCE
Built Java services with Kafka
"""
    skills = extract_skills(text)
    assert skills == {"python", "docker", "kubernetes"}
    assert "java" not in skills


def test_header_variants():
    for header in ("Core Competencies", "Tech Stack", "Tools and Technologies",
                   "Tools & Technologies", "Proficiencies", "Areas of Expertise"):
        text = f"{header}\nTerraform, Redis\n"
        assert find_skills_section(text) is not None, header
        assert extract_skills(text) == {"terraform", "redis"}, header


def test_ambiguous_skills_as_list_items():
    text = "Skills\nPython, R, Go | C++ ; C#\nEDUCATION\nBSc"
    skills = extract_skills(text)
    assert {"python", "r", "go", "c++", "c#"} <= skills


def test_ambiguous_skills_not_matched_inside_words():
    text = "Skills\nDirector of golf programs, Python\nEDUCATION"
    skills = extract_skills(text)
    assert "r" not in skills
    assert "go" not in skills
    assert "python" in skills


def test_whole_word_matching():
    text = "Skills\nJavaScript, TypeScript\n"
    skills = extract_skills(text)
    assert skills == {"javascript", "typescript"}
    assert "java" not in skills


def test_dotted_and_multiword_skills():
    text = "Skills:\nNode.js, Next.js, machine learning, CI/CD, Power BI\n"
    skills = extract_skills(text)
    assert {"node.js", "next.js", "machine learning", "ci/cd", "power bi"} <= skills


def test_section_capped_without_following_header():
    text = "Skills\n" + "x" * 2100 + " python"
    assert len(find_skills_section(text)) == 2000
    assert "python" not in extract_skills(text)


def test_fallback_scans_full_text_with_long_skills_only():
    text = "Built dashboards in Tableau and pipelines with Python, SQL and AWS."
    skills = extract_skills(text)
    assert {"tableau", "python"} <= skills
    assert "sql" not in skills
    assert "aws" not in skills


def test_fallback_ignores_ambiguous_skills():
    assert extract_skills("Wrote tooling in Go and R for the director") == set()


def test_no_section_returns_none():
    assert find_skills_section("Just a paragraph about communication skills") is None


def test_empty_text():
    assert extract_skills("") == set()
    assert extract_skills(None) == set()


def test_results_lowercased_and_deduplicated():
    skills = extract_skills("Skills: PYTHON, python, Python\n")
    assert skills == {"python"}
