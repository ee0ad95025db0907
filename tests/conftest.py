"""Shared test fixtures for whatlocks test suite."""

from pathlib import Path

import pytest
import yaml

from whatlocks.core.context import SharedContext
from whatlocks.core.reference_data import YamlReferenceData
from whatlocks.core.skill_def import Item, LockEntry, Skill
from whatlocks.utils.config import Config, MarkupConfig
from whatlocks.utils.markup import Markup

SAMPLE_DATA = {
    "skills": [
        {"id": 1, "name": "Bow"},
        {"id": 2, "name": "Bow Special Attack"},
        {"id": 3, "name": "Assault Rifle"},
        {"id": 4, "name": "Rifle"},
        {"id": 5, "name": "Nano Pool"},
    ],
    "items": [
        {"low_id": 100, "high_id": 101, "low_ql": 1, "high_ql": 200, "name": "Sword of Testing"},
        {"low_id": 200, "high_id": 201, "low_ql": 50, "high_ql": 50, "name": "Ring of Patience"},
        {"low_id": 300, "high_id": 301, "low_ql": 100, "high_ql": 150, "name": "Belt of Waiting"},
    ],
    "locks": [
        {"skill_id": 1, "item_id": 100, "duration": 10},
        {"skill_id": 1, "item_id": 200, "duration": 86400},
        {"skill_id": 1, "item_id": 300, "duration": 3600},
        {"skill_id": 2, "item_id": 200, "duration": 600},
        # Item 999 is not in the item list
        {"skill_id": 4, "item_id": 999, "duration": 30},
    ],
}


@pytest.fixture
def markup_config() -> MarkupConfig:
    """Plain-text markers, easy to assert on."""
    return MarkupConfig(
        highlight="<highlight>{text}<end>",
        dim="<black>{text}<end>",
        command="{label} ({command})",
        item="{name} (QL {ql})",
    )


@pytest.fixture
def markup(markup_config: MarkupConfig) -> Markup:
    return Markup(markup_config)


@pytest.fixture
def test_config(tmp_path: Path, markup_config: MarkupConfig) -> Config:
    """Config with workspace pointing to tmp_path."""
    return Config(workspace=tmp_path, markup=markup_config)


@pytest.fixture
def skills() -> list[Skill]:
    return [Skill(**row) for row in SAMPLE_DATA["skills"]]


@pytest.fixture
def reference_data(skills: list[Skill]) -> YamlReferenceData:
    """In-memory reference data built from the sample rows."""
    return YamlReferenceData(
        skills,
        [Item(**row) for row in SAMPLE_DATA["items"]],
        [LockEntry(**row) for row in SAMPLE_DATA["locks"]],
    )


@pytest.fixture
def data_file(tmp_path: Path) -> Path:
    """Sample reference data written to the default data path."""
    path = tmp_path / "what_locks.yaml"
    path.write_text(yaml.dump(SAMPLE_DATA))
    return path


@pytest.fixture
def test_context(test_config: Config, reference_data: YamlReferenceData) -> SharedContext:
    """SharedContext with test config and sample reference data."""
    return SharedContext(config=test_config, reference_data=reference_data)
