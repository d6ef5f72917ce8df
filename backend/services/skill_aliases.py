"""Static alias families: interchangeable spellings of the same skill.

Members are compared in normalized form (see skill_normalizer), so "Node.js",
"node" and "NodeJS" all land in the same family.
"""

import logging
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from services.skill_normalizer import normalize_skill

logger = logging.getLogger(__name__)

# canonical key -> alternate spellings (the key is always a member)
SKILL_FAMILIES: dict[str, tuple[str, ...]] = {
    # Languages
    "javascript": ("js", "ecmascript", "es6", "es2015"),
    "typescript": ("ts",),
    "python": ("py", "python3"),
    "c#": ("csharp", "c sharp", "dotnet", ".net"),
    "go": ("golang",),
    "c++": ("cpp",),
    # Frontend
    "react": ("reactjs", "react.js"),
    "react native": ("reactnative", "react-native", "rn"),
    "vue": ("vuejs", "vue.js"),
    "angular": ("angularjs", "angular.js"),
    "next": ("nextjs", "next.js"),
    "nuxt": ("nuxtjs", "nuxt.js"),
    "tailwind": ("tailwindcss", "tailwind css"),
    "css": ("css3",),
    "sass": ("scss",),
    # Backend
    "nodejs": ("node", "node.js", "node js"),
    "express": ("expressjs", "express.js"),
    "graphql": ("gql",),
    "rest": ("restful", "rest api", "restful api"),
    # Databases
    "postgresql": ("postgres", "psql", "pg"),
    "mongodb": ("mongo",),
    "mysql": ("mariadb",),
    "sql": ("structured query language",),
    # Cloud & DevOps
    "aws": ("amazon web services",),
    "gcp": ("google cloud", "google cloud platform"),
    "azure": ("microsoft azure",),
    "kubernetes": ("k8s",),
    "docker": ("containerization",),
    "ci/cd": ("cicd", "ci-cd", "continuous integration", "continuous deployment"),
    # Data & ML
    "machine learning": ("ml",),
    "artificial intelligence": ("ai",),
    "natural language processing": ("nlp",),
    "scikit-learn": ("sklearn", "scikit learn"),
    "power bi": ("powerbi",),
}


class OverlappingAliasError(ValueError):
    """Raised when one spelling would belong to two alias families."""


@dataclass(frozen=True)
class AliasFamily:
    key: str
    members: frozenset[str]  # normalized, includes the normalized key

    def __contains__(self, skill: object) -> bool:
        return isinstance(skill, str) and normalize_skill(skill) in self.members


class AliasTable:
    """Read-only lookup from any spelling to its alias family.

    Built once; overlapping families are rejected at construction time.
    """

    def __init__(self, families: Mapping[str, Iterable[str]]) -> None:
        index: dict[str, AliasFamily] = {}
        built: list[AliasFamily] = []

        for key, aliases in families.items():
            members = frozenset(
                m for m in (normalize_skill(s) for s in (key, *aliases)) if m
            )
            family = AliasFamily(key=key, members=members)
            for member in members:
                other = index.get(member)
                if other is not None:
                    raise OverlappingAliasError(
                        f"'{member}' belongs to both '{other.key}' and '{key}'"
                    )
                index[member] = family
            built.append(family)

        self._families: tuple[AliasFamily, ...] = tuple(built)
        self._index: Mapping[str, AliasFamily] = MappingProxyType(index)
        logger.debug(
            "Alias table built: %d families, %d spellings", len(built), len(index)
        )

    def family_of(self, skill: str) -> AliasFamily | None:
        return self._index.get(normalize_skill(skill))

    def members_of(self, skill: str) -> frozenset[str]:
        """All normalized spellings sharing ``skill``'s family (empty if none)."""
        family = self.family_of(skill)
        return family.members if family else frozenset()

    def same_family(self, a: str, b: str) -> bool:
        return self.same_family_normalized(normalize_skill(a), normalize_skill(b))

    def same_family_normalized(self, a: str, b: str) -> bool:
        """Like same_family() for inputs already passed through normalize_skill."""
        family = self._index.get(a)
        return family is not None and family is self._index.get(b)

    def __contains__(self, skill: object) -> bool:
        return isinstance(skill, str) and normalize_skill(skill) in self._index

    def __iter__(self) -> Iterator[AliasFamily]:
        return iter(self._families)

    def __len__(self) -> int:
        return len(self._families)


ALIAS_TABLE = AliasTable(SKILL_FAMILIES)
