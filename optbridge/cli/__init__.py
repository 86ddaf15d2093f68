"""
Click-based CLI for optbridge.

Usage:
    from optbridge.cli import cli
    cli()  # Invokes the CLI
"""

from __future__ import annotations

from pathlib import Path

import click

from ..core.bootstrap import reset
from ..core.exceptions import OptBridgeException
from .context import OptBridgeContext

try:
    from importlib.metadata import version

    __version__ = version("optbridge")
except Exception:
    __version__ = "0.1.0"


@click.group()
@click.version_option(version=__version__, prog_name="optbridge")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Config file to use instead of searching for .optbridge/config.toml",
)
@click.pass_context
def cli(ctx: click.Context, config_path: Path | None) -> None:
    """optbridge - get, add, update and delete options

    \b
    Quick Start:
        optbridge init                 Create .optbridge/config.toml
        optbridge add blogname "Blog"  Add an option
        optbridge get blogname         Read it back
    """
    if ctx.invoked_subcommand == "init":
        return
    try:
        ctx.obj = OptBridgeContext.create(config_path=config_path)
    except OptBridgeException as e:
        raise click.ClickException(str(e)) from e
    ctx.call_on_close(reset)


def register_commands() -> None:
    """Register all CLI commands with the main group."""
    from .commands import COMMANDS

    for cmd in COMMANDS:
        cli.add_command(cmd)


register_commands()


__all__ = [
    "OptBridgeContext",
    "__version__",
    "cli",
]
