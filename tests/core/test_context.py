"""Tests for SharedContext."""

import pytest

from whatlocks.core.context import SharedContext
from whatlocks.core.exceptions import ReferenceDataError


class TestSharedContext:
    def test_reference_data_loaded_lazily(self, test_config, data_file):
        ctx = SharedContext(config=test_config)
        assert ctx._reference_data is None

        assert ctx.skill_resolver.resolve("bow").skill.id == 1
        assert ctx._reference_data is not None

    def test_missing_reference_data_only_fails_when_needed(self, test_config):
        ctx = SharedContext(config=test_config)
        assert "/whatlocks" in ctx.command_registry.dispatch("/help", ctx)

        with pytest.raises(ReferenceDataError):
            ctx.command_registry.dispatch("/whatlocks bow", ctx)

    def test_markup_follows_config(self, test_context):
        assert test_context.markup.highlight("x") == "<highlight>x<end>"
        assert test_context.duration_formatter.markup is test_context.markup
