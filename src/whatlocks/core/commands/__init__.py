"""Slash commands."""

from whatlocks.core.commands.base import Command
from whatlocks.core.commands.registry import CommandRegistry

__all__ = ["Command", "CommandRegistry"]
