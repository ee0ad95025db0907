"""Command registry for managing slash commands."""

from typing import TYPE_CHECKING

from whatlocks.core.commands.base import Command

if TYPE_CHECKING:
    from whatlocks.core.context import SharedContext


class CommandRegistry:
    """Registry for slash commands."""

    def __init__(self) -> None:
        self._commands: dict[str, Command] = {}

    def register(self, cmd: Command) -> None:
        """Register a command and its aliases."""
        self._commands[cmd.name] = cmd
        for alias in cmd.aliases:
            self._commands[alias] = cmd

    def list_commands(self) -> list[Command]:
        """Registered commands, without alias duplicates, in registration order."""
        unique: dict[str, Command] = {}
        for cmd in self._commands.values():
            unique.setdefault(cmd.name, cmd)
        return list(unique.values())

    def resolve(self, input: str) -> tuple[Command, str] | None:
        """
        Parse input and return (command, args) if it matches.

        Args:
            input: Full input string (e.g., "/whatlocks bow" or "/help")

        Returns:
            Tuple of (Command, args_string) or None if no match
        """
        if not input.startswith("/"):
            return None

        parts = input[1:].split(None, 1)
        if not parts:
            return None

        cmd_name = parts[0].lower()
        args = parts[1].strip() if len(parts) > 1 else ""

        cmd = self._commands.get(cmd_name)
        if cmd:
            return (cmd, args)
        return None

    def dispatch(self, input: str, ctx: "SharedContext") -> str | None:
        """
        Parse and execute a slash command.

        Args:
            input: Full input string
            ctx: SharedContext for accessing reference data and formatters

        Returns:
            Reply text if command matched, None if not a command
        """
        resolved = self.resolve(input)
        if not resolved:
            return None

        cmd, args = resolved
        return cmd.execute(args, ctx)

    @classmethod
    def with_builtins(cls) -> "CommandRegistry":
        """Create registry with built-in commands registered."""
        from whatlocks.core.commands.handlers import HelpCommand, WhatLocksCommand

        registry = cls()
        registry.register(HelpCommand())
        registry.register(WhatLocksCommand())
        return registry
