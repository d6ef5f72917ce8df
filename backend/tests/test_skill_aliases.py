import pytest

from services.skill_aliases import (
    ALIAS_TABLE,
    SKILL_FAMILIES,
    AliasTable,
    OverlappingAliasError,
)


def test_default_table_has_every_family():
    assert len(ALIAS_TABLE) == len(SKILL_FAMILIES)


@pytest.mark.parametrize(
    "a, b",
    [
        ("Node.js", "nodejs"),
        ("node", "NodeJS"),
        ("JavaScript", "ES6"),
        ("TypeScript", "ts"),
        ("React", "ReactJS"),
        ("React Native", "rn"),
        ("Vue", "vue.js"),
        ("Angular", "AngularJS"),
        ("Next.js", "nextjs"),
        ("Nuxt", "nuxtjs"),
        ("Express", "express.js"),
        ("Tailwind", "TailwindCSS"),
        ("CSS", "css3"),
        ("Sass", "SCSS"),
        ("PostgreSQL", "pg"),
        ("MongoDB", "mongo"),
        ("MySQL", "MariaDB"),
        ("SQL", "structured-query-language"),
        ("AWS", "amazon-web-services"),
        ("GCP", "google cloud"),
        ("Azure", "microsoft azure"),
        ("Kubernetes", "k8s"),
        ("Docker", "containerization"),
        ("Python", "python3"),
        ("C#", ".NET"),
        ("Go", "golang"),
        ("C++", "cpp"),
        ("GraphQL", "gql"),
        ("REST", "RESTful"),
        ("CI/CD", "continuous-integration"),
        ("Machine-Learning", "ML"),
        ("Artificial-Intelligence", "AI"),
    ],
)
def test_required_families_resolve(a, b):
    assert ALIAS_TABLE.same_family(a, b)


def test_members_are_normalized_and_include_key():
    family = ALIAS_TABLE.family_of("Node.js")
    assert family is not None
    assert family.key == "nodejs"
    assert {"nodejs", "node", "node js"} <= family.members
    assert "node.js" not in family.members  # stored normalized


def test_members_of_unknown_skill_is_empty():
    assert ALIAS_TABLE.members_of("cobol") == frozenset()
    assert ALIAS_TABLE.family_of("cobol") is None
    assert "cobol" not in ALIAS_TABLE


def test_contains_uses_normalization():
    assert "Node.JS" in ALIAS_TABLE
    assert "node.js" in ALIAS_TABLE.family_of("node")


def test_different_families_do_not_match():
    assert not ALIAS_TABLE.same_family("java", "javascript")
    assert not ALIAS_TABLE.same_family("react", "react native")


def test_overlapping_families_are_rejected():
    with pytest.raises(OverlappingAliasError) as exc:
        AliasTable({"golang": ("go",), "go": ("gopher",)})
    assert "'go'" in str(exc.value)


def test_overlap_detected_after_normalization():
    with pytest.raises(OverlappingAliasError):
        AliasTable({"nodejs": ("node",), "node-runtime": ("Node.js",)})


def test_overlapping_error_is_value_error():
    assert issubclass(OverlappingAliasError, ValueError)


def test_index_is_read_only():
    with pytest.raises(TypeError):
        ALIAS_TABLE._index["cobol"] = None
