"""Utilities package."""

from whatlocks.utils.config import Config, MarkupConfig
from whatlocks.utils.logging import setup_logging
from whatlocks.utils.markup import Markup

__all__ = [
    "Config",
    "Markup",
    "MarkupConfig",
    "setup_logging",
]
