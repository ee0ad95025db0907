"""Resolve a user-typed skill name to a skill."""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Sequence

from whatlocks.core.reference_data import SkillSource
from whatlocks.core.skill_def import Skill

logger = logging.getLogger(__name__)


class ResolutionKind(Enum):
    NO_MATCH = "no_match"
    ONE = "one"
    MANY = "many"


@dataclass(frozen=True)
class Resolution:
    """Outcome of a skill search."""

    kind: ResolutionKind
    candidates: tuple[Skill, ...] = ()

    @classmethod
    def of(cls, matches: Sequence[Skill]) -> "Resolution":
        if not matches:
            return cls(ResolutionKind.NO_MATCH)
        if len(matches) == 1:
            return cls(ResolutionKind.ONE, tuple(matches))
        return cls(ResolutionKind.MANY, tuple(matches))

    @property
    def skill(self) -> Skill | None:
        """The resolved skill, or None unless exactly one matched."""
        if self.kind is ResolutionKind.ONE:
            return self.candidates[0]
        return None


def _distinct(skills: Iterable[Skill]) -> list[Skill]:
    seen: set[tuple[int, str]] = set()
    result = []
    for skill in skills:
        key = (skill.id, skill.name)
        if key not in seen:
            seen.add(key)
            result.append(skill)
    return result


class SkillResolver:
    """Exact-then-token lookup of skills by name."""

    def __init__(self, source: SkillSource):
        self.source = source

    def resolve(self, query: str, skills: Sequence[Skill] | None = None) -> Resolution:
        """
        Find the skill(s) matching a user query.

        An exact (case-insensitive) name match wins on its own, so that "Bow"
        resolves to Bow even though "Bow Special Attack" contains it too.
        Otherwise every whitespace-separated token of the query has to occur
        in the skill name.

        Args:
            query: Skill name as typed by the user
            skills: Skills to search; defaults to all skills of the source

        Returns:
            Resolution with zero, one or many candidates
        """
        if skills is None:
            skills = self.source.fetch_skills()

        needle = query.lower()
        exact = _distinct(s for s in skills if s.name.lower() == needle)
        if len(exact) == 1:
            return Resolution.of(exact)

        tokens = query.split()
        if not tokens:
            return Resolution.of([])

        predicate = self.source.token_predicate(tokens, "name")
        matches = _distinct(s for s in skills if predicate(s))
        logger.debug(f"Skill query {query!r} matched {len(matches)} skills")
        return Resolution.of(matches)
