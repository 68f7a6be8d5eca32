"""ogkit CLI — Click command group and sub-commands.

- ``extract`` — ``fetch``, ``parse``, ``tags``
- ``config`` — ``config show``
"""

from __future__ import annotations

import logging
import sys

import click
import structlog

from ogkit import __version__


def configure_logging(level: str = "info") -> None:
    """Configure structlog to write leveled, timestamped lines to stderr."""
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelName(level.upper())
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


@click.group()
@click.version_option(version=__version__, prog_name="ogkit")
@click.option(
    "--log-level",
    type=click.Choice(["debug", "info", "warning", "error"], case_sensitive=False),
    default=None,
    help="Override the configured log level.",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str | None) -> None:
    """ogkit — read and write Open Graph metadata."""
    from ogkit.config import load_config
    from ogkit.errors import ConfigError, format_error

    configure_logging(log_level or "info")
    try:
        config = load_config()
    except ConfigError as exc:
        click.echo(format_error(exc.code), err=True)
        click.echo(str(exc), err=True)
        raise SystemExit(1) from exc
    if log_level is None:
        configure_logging(config.logging.level)
    ctx.obj = config


# Register sub-command modules
from ogkit.cli.config import config_group  # noqa: E402
from ogkit.cli.extract import fetch, parse, tags  # noqa: E402

cli.add_command(fetch)
cli.add_command(parse)
cli.add_command(tags)
cli.add_command(config_group)
