"""Configuration management for whatlocks."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, field_validator, model_validator


# ============================================================================
# Configuration Models
# ============================================================================


class MarkupConfig(BaseModel):
    """Templates for inline text markers (Rich console markup by default)."""

    highlight: str = "[bold cyan]{text}[/bold cyan]"
    dim: str = "[dim]{text}[/dim]"
    command: str = "{label} [dim]({command})[/dim]"
    item: str = "{name} [dim](QL {ql})[/dim]"
    # Escape Rich markup in inserted values; turn off for non-Rich templates
    escape: bool = True

    @field_validator("highlight", "dim")
    @classmethod
    def must_wrap_text(cls, v: str) -> str:
        if "{text}" not in v:
            raise ValueError("marker template must contain {text}")
        return v


# ============================================================================
# Main Configuration Class
# ============================================================================


class Config(BaseModel):
    """
    Main configuration for whatlocks.

    Configuration is loaded from the workspace directory (~/.whatlocks/ by
    default). config.user.yaml is optional; Pydantic defaults are used for
    anything it does not specify.
    """

    workspace: Path
    data_path: Path = Field(default=Path("what_locks.yaml"))
    logging_path: Path = Field(default=Path(".logs"))
    markup: MarkupConfig = Field(default_factory=MarkupConfig)

    @model_validator(mode="after")
    def resolve_paths(self) -> "Config":
        """Resolve relative paths to absolute using workspace."""
        for field_name in ("data_path", "logging_path"):
            path = getattr(self, field_name)
            if path.is_absolute():
                raise ValueError(f"{field_name} must be relative, got: {path}")
            setattr(self, field_name, self.workspace / path)
        return self

    @classmethod
    def load(cls, workspace_dir: Path) -> "Config":
        """
        Load configuration from a workspace directory.

        Args:
            workspace_dir: Path to the workspace directory

        Returns:
            Config instance with all settings loaded and validated

        Raises:
            ValidationError: If configuration is invalid
        """
        config_data: dict = {"workspace": workspace_dir}

        user_config = workspace_dir / "config.user.yaml"
        if user_config.exists():
            with open(user_config) as f:
                user_data = yaml.safe_load(f) or {}
            config_data = cls._deep_merge(config_data, user_data)

        return cls.model_validate(config_data)

    @staticmethod
    def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
        """
        Deep merge override dict into base dict.

        Args:
            base: Base dictionary
            override: Override dictionary (takes precedence)

        Returns:
            Merged dictionary
        """
        result = base.copy()

        for key, value in override.items():
            if (
                key in result
                and isinstance(result[key], dict)
                and isinstance(value, dict)
            ):
                result[key] = Config._deep_merge(result[key], value)
            else:
                result[key] = value

        return result
