import pytest

from services.skill_normalizer import normalize_skill


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("Node.js", "node"),
        ("  Python  ", "python"),
        ("ASP.NET", "aspnet"),
        ("ci-cd", "ci cd"),
        ("Vue.JS", "vue"),
        ("C#", "c#"),
        ("", ""),
    ],
)
def test_normalize_skill(raw, expected):
    assert normalize_skill(raw) == expected


def test_only_one_trailing_js_suffix_is_stripped():
    # ".js" is stripped once, the remaining dot is removed afterwards
    assert normalize_skill("foo.js.js") == "foojs"


def test_js_inside_word_is_not_stripped():
    assert normalize_skill("nodejs") == "nodejs"


def test_all_dots_removed_not_just_first():
    assert normalize_skill("a.b.c") == "abc"


@pytest.mark.parametrize(
    "raw",
    ["Node.js", "-python", "node .js ", "React-Native", "a.js.js", " .NET ", "---", "ÄBC.js"],
)
def test_normalize_is_idempotent(raw):
    once = normalize_skill(raw)
    assert normalize_skill(once) == once


def test_non_string_fails_fast():
    with pytest.raises(TypeError):
        normalize_skill(None)
