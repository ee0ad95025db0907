"""Inline text markers for chat and console output."""

from typing import TYPE_CHECKING

from rich.markup import escape

if TYPE_CHECKING:
    from whatlocks.core.skill_def import Item
    from whatlocks.utils.config import MarkupConfig


class Markup:
    """Wraps text fragments in the configured highlight/de-emphasize markers."""

    def __init__(self, config: "MarkupConfig"):
        self.config = config

    def _value(self, text: str) -> str:
        # User queries and data file names must not be read as Rich tags
        return escape(text) if self.config.escape else text

    def highlight(self, text: str) -> str:
        return self.config.highlight.format(text=self._value(text))

    def dim(self, text: str) -> str:
        # Empty slices get no markers at all
        if not text:
            return ""
        return self.config.dim.format(text=self._value(text))

    def command(self, label: str, command: str) -> str:
        """A clickable (or at least copyable) bot command."""
        return self.config.command.format(
            label=self._value(label), command=self._value(command)
        )

    def item(self, item: "Item") -> str:
        return self.config.item.format(
            name=self._value(item.name),
            low_id=item.low_id,
            high_id=item.high_id,
            ql=item.low_ql,
        )

    def align_number(self, number: int, digits: int) -> str:
        """Left-pad a number to `digits` places with de-emphasized zeros."""
        text = str(number)
        padding = digits - len(text)
        if padding <= 0:
            return text
        return self.dim("0" * padding) + text

    def strip(self, text: str) -> str:
        """Remove highlight and de-emphasize markers from text, e.g. for logs."""
        for template in (self.config.highlight, self.config.dim):
            opening, _, closing = template.partition("{text}")
            if opening:
                text = text.replace(opening, "")
            if closing:
                text = text.replace(closing, "")
        if self.config.escape:
            text = text.replace("\\[", "[")
        return text
