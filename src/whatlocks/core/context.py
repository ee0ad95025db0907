from whatlocks.core.commands.registry import CommandRegistry
from whatlocks.core.duration import DurationFormatter
from whatlocks.core.reference_data import YamlReferenceData
from whatlocks.core.skill_resolver import SkillResolver
from whatlocks.utils.config import Config
from whatlocks.utils.markup import Markup


class SharedContext:
    """Global shared state for the application."""

    config: Config
    markup: Markup
    duration_formatter: DurationFormatter
    command_registry: CommandRegistry
    _reference_data: YamlReferenceData | None
    _skill_resolver: SkillResolver | None

    def __init__(self, config: Config, reference_data: YamlReferenceData | None = None):
        self.config = config
        self.markup = Markup(config.markup)
        self.duration_formatter = DurationFormatter(self.markup)
        self.command_registry = CommandRegistry.with_builtins()
        self._reference_data = reference_data
        self._skill_resolver = None

    @property
    def reference_data(self) -> YamlReferenceData:
        """Lazily load reference data on first access."""
        if self._reference_data is None:
            self._reference_data = YamlReferenceData.from_config(self.config)
        return self._reference_data

    @property
    def skill_resolver(self) -> SkillResolver:
        if self._skill_resolver is None:
            self._skill_resolver = SkillResolver(self.reference_data)
        return self._skill_resolver
