"""
Native Click implementation of the option commands.

Usage:
    optbridge get NAME [--default VALUE]
    optbridge add NAME VALUE
    optbridge update NAME VALUE
    optbridge delete NAME
    optbridge list
"""

import json
from typing import Any

import click

from ...core.exceptions import OptBridgeException
from ...platform import get_default_store
from ..context import OptBridgeContext


def parse_value(raw: str) -> Any:
    """Parse a command-line value as JSON, falling back to the raw string."""
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        return raw


def format_value(value: Any) -> str:
    """Render an option value for display."""
    if isinstance(value, str):
        return value
    return json.dumps(value, ensure_ascii=False)


# Marks "no --default given" so a stored null still prints as null
_NOT_SET = object()


def _run_write(description: str, name: str, operation) -> None:
    try:
        ok = operation()
    except OptBridgeException as e:
        raise click.ClickException(str(e)) from e
    if not ok:
        raise click.ClickException(f"Option '{name}' was not {description}")
    click.echo(f"Option '{name}' {description}")


@click.command("get")
@click.argument("name")
@click.option("--default", "default", default=None, help="Value to print if the option is missing")
@click.pass_obj
def get(obj: OptBridgeContext, name: str, default: str | None) -> None:
    """Print the value of an option."""
    fallback = parse_value(default) if default is not None else _NOT_SET
    value = obj.bridge.get(name, fallback)
    if value is _NOT_SET:
        click.echo(f"{name}: (not set)")
    else:
        click.echo(format_value(value))


@click.command("add")
@click.argument("name")
@click.argument("value")
@click.pass_obj
def add(obj: OptBridgeContext, name: str, value: str) -> None:
    """Add a new option. Fails if it already exists.

    VALUE is parsed as JSON when possible, otherwise stored as a string.
    """
    _run_write("added", name, lambda: obj.bridge.add(name, parse_value(value)))


@click.command("update")
@click.argument("name")
@click.argument("value")
@click.pass_obj
def update(obj: OptBridgeContext, name: str, value: str) -> None:
    """Update an option, adding it if missing.

    Fails when the new value equals the stored one.
    """
    _run_write("updated", name, lambda: obj.bridge.update(name, parse_value(value)))


@click.command("delete")
@click.argument("name")
@click.pass_obj
def delete(obj: OptBridgeContext, name: str) -> None:
    """Delete an option."""
    _run_write("deleted", name, lambda: obj.bridge.delete(name))


@click.command("list")
@click.pass_obj
def list_options(obj: OptBridgeContext) -> None:
    """List all stored options."""
    records = get_default_store().list_options()
    if not records:
        click.echo("No options stored.")
        return
    for record in records:
        flag = "" if record.autoload else " (no autoload)"
        click.echo(f"{record.name} = {format_value(record.value)}{flag}")
