"""CLI interface for whatlocks using Typer."""

import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape

from whatlocks.core.context import SharedContext
from whatlocks.core.exceptions import ReferenceDataError
from whatlocks.utils.config import Config
from whatlocks.utils.logging import setup_logging

app = typer.Typer(
    name="whatlocks",
    help="WhatLocks: find which items lock a skill, and for how long",
    no_args_is_help=True,
    add_completion=True,
)

logger = logging.getLogger(__name__)

console = Console()


# Global config option callback
def load_config_callback(ctx: typer.Context, workspace: str):
    """Load configuration and store it in the context."""
    try:
        cfg = Config.load(Path(workspace))
    except Exception as e:
        console.print(f"[red]Error loading config: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    ctx.ensure_object(dict)
    ctx.obj["config"] = cfg


@app.callback()
def main(
    ctx: typer.Context,
    workspace: str = typer.Option(
        Path.home() / ".whatlocks",
        "--workspace",
        "-w",
        help="Path to workspace directory",
        callback=load_config_callback,
    ),
) -> None:
    """
    WhatLocks: find which items lock a skill, and for how long.

    Configuration and reference data are loaded from ~/.whatlocks/ by default.
    Use --workspace to specify a custom workspace directory.
    """
    pass


def _run(ctx: typer.Context, command_line: str) -> None:
    config: Config = ctx.obj["config"]
    setup_logging(config, console_output=False)
    shared = SharedContext(config=config)

    try:
        reply = shared.command_registry.dispatch(command_line, shared)
    except ReferenceDataError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(1)

    if reply is None:
        console.print(
            f"[yellow]Unknown command: {escape(command_line)}. Try /help.[/yellow]"
        )
        raise typer.Exit(1)

    logger.debug(f"Reply to {command_line!r}:\n{shared.markup.strip(reply)}")
    console.print(reply)


@app.command()
def skills(ctx: typer.Context) -> None:
    """List skills that can be locked by items."""
    _run(ctx, "/whatlocks")


@app.command()
def locks(
    ctx: typer.Context,
    skill: Annotated[
        list[str],
        typer.Argument(help="Skill name, or part of it (e.g. 'bow spec')"),
    ],
) -> None:
    """List items locking a skill, shortest lock first."""
    _run(ctx, f"/whatlocks {' '.join(skill)}")


@app.command("run")
def run_command(
    ctx: typer.Context,
    command_line: Annotated[
        str,
        typer.Argument(help="Slash command as typed in chat, e.g. '/whatlocks bow'"),
    ],
) -> None:
    """Execute a chat slash command."""
    _run(ctx, command_line)


if __name__ == "__main__":
    app()
