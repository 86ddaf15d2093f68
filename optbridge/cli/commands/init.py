"""
Native Click implementation of the init command.

Usage: optbridge init [--force]
"""

from pathlib import Path

import click

from ...core.exceptions import ConfigFileError
from ...core.settings import CONFIG_DIR_NAME, CONFIG_FILE_NAME

DEFAULT_CONFIG_TEMPLATE = """\
# optbridge configuration

[store]
# "memory" keeps options for the lifetime of the process only
backend = "sqlite"
# Relative paths are resolved against the directory holding .optbridge/
path = ".optbridge/options.db"
table_prefix = "wp_"

[bridge]
# Raise instead of logging when an option name is not a string
strict_names = false

[logging]
level = "warning"
console = true
file = false
"""


def write_default_config(base_dir: Path, force: bool = False) -> Path:
    """
    Write the default config template under base_dir/.optbridge.

    Raises:
        ConfigFileError: If the file exists (and force is False) or cannot be written
    """
    config_path = base_dir / CONFIG_DIR_NAME / CONFIG_FILE_NAME
    if config_path.exists() and not force:
        raise ConfigFileError("Config file already exists", file_path=str(config_path))
    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        config_path.write_text(DEFAULT_CONFIG_TEMPLATE)
    except OSError as e:
        raise ConfigFileError("Failed to write config file", file_path=str(config_path), cause=e) from e
    return config_path


@click.command("init")
@click.option("--force", is_flag=True, help="Overwrite an existing config file")
def init(force: bool) -> None:
    """Create .optbridge/config.toml in the current directory."""
    try:
        config_path = write_default_config(Path.cwd(), force=force)
    except ConfigFileError as e:
        raise click.ClickException(str(e)) from e
    click.echo(f"Created {config_path}")
