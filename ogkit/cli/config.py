"""CLI commands: config show, config path."""

from __future__ import annotations

from dataclasses import asdict

import click

from ogkit.config import DEFAULT_CONFIG_PATH, Config


@click.group("config")
def config_group() -> None:
    """Configuration management."""


@config_group.command("show")
@click.pass_obj
def config_show(config: Config) -> None:
    """Show current configuration."""
    cfg = asdict(config)
    for section_name, section in cfg.items():
        click.echo(f"[{section_name}]")
        for key, value in section.items():
            click.echo(f"  {key} = {value}")
        click.echo()


@config_group.command("path")
def config_path() -> None:
    """Print the configuration file location."""
    suffix = "" if DEFAULT_CONFIG_PATH.exists() else " (not found, using defaults)"
    click.echo(f"{DEFAULT_CONFIG_PATH}{suffix}")
