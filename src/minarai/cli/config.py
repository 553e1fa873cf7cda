"""CLI: minarai config show|set"""

import click
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from minarai.config import CONFIG_FILE, ClientConfig, load_config, load_raw, save_config

console = Console()


@click.group()
def config():
    """Connection settings."""


@config.command("show")
def config_show():
    """Show effective settings (file + MINARAI_* env)."""
    cfg = load_config()
    table = Table(title=str(CONFIG_FILE))
    table.add_column("Key", style="bold")
    table.add_column("Value")
    for key, value in cfg.model_dump().items():
        table.add_row(key, "" if value is None else str(value))
    console.print(table)


@config.command("set")
@click.argument("key")
@click.argument("value")
def config_set(key: str, value: str):
    """Set KEY to VALUE. `transports` takes a comma-separated list."""
    if key not in ClientConfig.model_fields:
        raise click.BadParameter(f"unknown key {key!r}", param_hint="KEY")
    raw = load_raw()
    raw[key] = [t.strip() for t in value.split(",") if t.strip()] if key == "transports" else value
    try:
        cfg = ClientConfig.model_validate(raw)
    except ValidationError as e:
        raise click.BadParameter(str(e), param_hint="VALUE")
    save_config(cfg)
    console.print(f"[green]{key} saved.[/green]")
