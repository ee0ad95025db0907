"""Reference data models for skills, items and locks."""

from pydantic import BaseModel, ConfigDict, Field


class Skill(BaseModel):
    """A character skill that items may lock."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    id: int
    name: str = Field(min_length=1)


class Item(BaseModel):
    """Game item descriptor."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    low_id: int
    high_id: int
    low_ql: int = Field(default=1, ge=0)
    high_ql: int = Field(default=1, ge=0)
    name: str


class LockEntry(BaseModel):
    """An item locking a skill for `duration` seconds."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    skill_id: int
    item_id: int  # Item.low_id
    duration: int = Field(ge=0)


class ItemLock(BaseModel):
    """A lock joined with the item that causes it."""

    model_config = ConfigDict(frozen=True)

    item: Item
    duration: int


class SkillLockCount(BaseModel):
    """How many items lock a given skill."""

    model_config = ConfigDict(frozen=True)

    name: str
    amount: int
