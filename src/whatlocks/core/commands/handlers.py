"""Built-in slash command handlers."""

import logging
from typing import TYPE_CHECKING

from whatlocks.core.commands.base import Command
from whatlocks.core.skill_def import Skill
from whatlocks.core.skill_resolver import ResolutionKind

if TYPE_CHECKING:
    from whatlocks.core.context import SharedContext

logger = logging.getLogger(__name__)


def _plural(count: int, word: str) -> str:
    return f"{count} {word}" if count == 1 else f"{count} {word}s"


class HelpCommand(Command):
    """Show available commands."""

    name = "help"
    aliases = ["?"]
    description = "Show available commands"

    def execute(self, args: str, ctx: "SharedContext") -> str:
        lines = [ctx.markup.highlight("Available Commands:")]
        for cmd in ctx.command_registry.list_commands():
            lines.append(f"/{cmd.name} - {cmd.description}")
        return "\n".join(lines)


class WhatLocksCommand(Command):
    """
    List skills locked by using items.

    Without arguments, lists every skill that can be locked together with the
    number of items locking it. With a skill name, lists the items locking
    that skill, shortest lock first.
    """

    name = "whatlocks"
    description = "List skills locked by using items"

    def execute(self, args: str, ctx: "SharedContext") -> str:
        query = args.strip()
        if not query:
            return self.list_lockable_skills(ctx)
        return self.list_locking_items(query, ctx)

    def _skill_command(self, skill_name: str, ctx: "SharedContext") -> str:
        return ctx.markup.command(skill_name, f"/{self.name} {skill_name}")

    def list_lockable_skills(self, ctx: "SharedContext") -> str:
        counts = ctx.reference_data.lock_counts()
        if not counts:
            return "No skills can be locked by items."

        lines = [
            f"{_plural(len(counts), 'skill')} that can be locked by items found:"
        ]
        for row in counts:
            lines.append(
                f"{ctx.markup.align_number(row.amount, 3)} - "
                f"{self._skill_command(row.name, ctx)}"
            )
        return "\n".join(lines)

    def skill_choice_dialog(self, skills: tuple[Skill, ...], ctx: "SharedContext") -> str:
        """Ask the user which of several matching skills they meant."""
        lines = [ctx.markup.highlight("WhatLocks - Choose Skill")]
        for skill in skills:
            lines.append(self._skill_command(skill.name, ctx))
        return "\n".join(lines)

    def list_locking_items(self, query: str, ctx: "SharedContext") -> str:
        resolution = ctx.skill_resolver.resolve(query)
        if resolution.kind is ResolutionKind.NO_MATCH:
            return f"Could not find any skills matching {ctx.markup.highlight(query)}."
        if resolution.kind is ResolutionKind.MANY:
            return self.skill_choice_dialog(resolution.candidates, ctx)

        skill = resolution.skill
        locks = ctx.reference_data.locks_for_skill(skill.id)
        logger.info(f"Found {len(locks)} items locking {skill.name}")
        if not locks:
            return (
                "There is currently no item in the game locking "
                f"{ctx.markup.highlight(skill.name)}."
            )

        durations = ctx.duration_formatter.format_many([lock.duration for lock in locks])
        verb = "locks" if len(locks) == 1 else "lock"
        lines = [
            f"{_plural(len(locks), 'item')} found that {verb} "
            f"{ctx.markup.highlight(skill.name)}:"
        ]
        for duration, lock in zip(durations, locks):
            lines.append(f"{duration} - {ctx.markup.item(lock.item)}")
        return "\n".join(lines)
