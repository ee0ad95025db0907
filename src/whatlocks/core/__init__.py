"""Skill lookup and lock duration formatting."""

from .duration import DurationFormatter, DurationRendering
from .exceptions import InvalidDurationError, ReferenceDataError
from .reference_data import SkillSource, YamlReferenceData
from .skill_def import Item, ItemLock, LockEntry, Skill, SkillLockCount
from .skill_resolver import Resolution, ResolutionKind, SkillResolver

__all__ = [
    "DurationFormatter",
    "DurationRendering",
    "InvalidDurationError",
    "Item",
    "ItemLock",
    "LockEntry",
    "ReferenceDataError",
    "Resolution",
    "ResolutionKind",
    "Skill",
    "SkillLockCount",
    "SkillResolver",
    "SkillSource",
    "YamlReferenceData",
]
