"""Reference data for skills, items and the locks between them."""

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Iterable, Protocol

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from whatlocks.core.exceptions import ReferenceDataError
from whatlocks.core.skill_def import Item, ItemLock, LockEntry, Skill, SkillLockCount
from whatlocks.core.token_filter import Predicate, build_token_predicate

if TYPE_CHECKING:
    from whatlocks.utils.config import Config

logger = logging.getLogger(__name__)


class SkillSource(Protocol):
    """What the skill resolver needs from the reference data."""

    def fetch_skills(self) -> list[Skill]: ...

    def token_predicate(self, tokens: Iterable[str], field: str) -> Predicate: ...


class ReferenceDataFile(BaseModel):
    """Schema of the reference data YAML file."""

    model_config = ConfigDict(extra="forbid")

    skills: list[Skill] = Field(default_factory=list)
    items: list[Item] = Field(default_factory=list)
    locks: list[LockEntry] = Field(default_factory=list)


class YamlReferenceData:
    """Read-only skills, items and locks, loaded once from a YAML file."""

    @staticmethod
    def from_config(config: "Config") -> "YamlReferenceData":
        """Create YamlReferenceData from config."""
        return YamlReferenceData.load(config.data_path)

    @classmethod
    def load(cls, path: Path) -> "YamlReferenceData":
        """
        Load reference data from a YAML file.

        Raises:
            ReferenceDataError: If the file is missing, not YAML, or invalid
        """
        if not path.exists():
            raise ReferenceDataError(path, "file not found")

        try:
            with open(path, encoding="utf-8") as f:
                raw = yaml.safe_load(f) or {}
            data = ReferenceDataFile.model_validate(raw)
        except OSError as e:
            raise ReferenceDataError(path, f"cannot read file: {e}") from e
        except UnicodeDecodeError as e:
            raise ReferenceDataError(path, f"not UTF-8 text: {e}") from e
        except yaml.YAMLError as e:
            raise ReferenceDataError(path, f"malformed YAML: {e}") from e
        except ValidationError as e:
            raise ReferenceDataError(path, str(e)) from e

        logger.info(
            f"Loaded {len(data.skills)} skills, {len(data.items)} items "
            f"and {len(data.locks)} locks from {path}"
        )
        return cls(data.skills, data.items, data.locks)

    def __init__(
        self,
        skills: list[Skill],
        items: list[Item] | None = None,
        locks: list[LockEntry] | None = None,
    ):
        self._skills = tuple(skills)
        self._items = {item.low_id: item for item in items or []}
        self._locks = tuple(locks or [])

    def fetch_skills(self) -> list[Skill]:
        return list(self._skills)

    def token_predicate(self, tokens: Iterable[str], field: str) -> Predicate:
        return build_token_predicate(tokens, field)

    def _joined_locks(self) -> Iterable[tuple[LockEntry, Item]]:
        """Locks whose item is known; the others are skipped."""
        for lock in self._locks:
            item = self._items.get(lock.item_id)
            if item is None:
                logger.debug(f"Skipping lock on unknown item {lock.item_id}")
                continue
            yield lock, item

    def lock_counts(self) -> list[SkillLockCount]:
        """Number of locking items per skill name, sorted by name."""
        names = {skill.id: skill.name for skill in self._skills}
        counts: dict[str, int] = {}
        for lock, _ in self._joined_locks():
            name = names.get(lock.skill_id)
            if name is None:
                continue
            counts[name] = counts.get(name, 0) + 1
        return [
            SkillLockCount(name=name, amount=amount)
            for name, amount in sorted(counts.items())
        ]

    def locks_for_skill(self, skill_id: int) -> list[ItemLock]:
        """Items locking a skill, shortest duration first."""
        locks = [
            ItemLock(item=item, duration=lock.duration)
            for lock, item in self._joined_locks()
            if lock.skill_id == skill_id
        ]
        return sorted(locks, key=lambda lock: lock.duration)
