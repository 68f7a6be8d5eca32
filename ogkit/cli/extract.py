"""CLI commands: fetch, parse, tags."""

from __future__ import annotations

import asyncio
import json
from dataclasses import replace
from typing import NoReturn, TextIO

import click

from ogkit.config import Config
from ogkit.consumer import Consumer
from ogkit.errors import OpenGraphError, format_error
from ogkit.objects.base import ObjectBase
from ogkit.publisher import Publisher


def _consumer(config: Config, fallback: bool | None, strict: bool | None) -> Consumer:
    return Consumer(
        config.consumer,
        fallback_mode=fallback,
        strict_mode=strict,
        fetch_config=config.fetch,
    )


def _fail(exc: OpenGraphError) -> NoReturn:
    click.echo(format_error(exc.code), err=True)
    click.echo(f"Detail: {exc}", err=True)
    raise SystemExit(1) from exc


def _echo_object(obj: ObjectBase, as_json: bool) -> None:
    data = obj.to_dict()
    if as_json:
        click.echo(json.dumps(data, indent=2, ensure_ascii=False))
        return
    for key, value in data.items():
        if value in (None, []):
            continue
        if isinstance(value, list):
            click.echo(f"{key}:")
            for item in value:
                if isinstance(item, dict):
                    parts = ", ".join(
                        f"{k}={v}" for k, v in item.items() if v is not None
                    )
                    click.echo(f"  - {parts}")
                else:
                    click.echo(f"  - {item}")
        else:
            click.echo(f"{key}: {value}")


_fallback_option = click.option(
    "--fallback/--no-fallback",
    default=None,
    help="Fill title/description/url from plain HTML when Open Graph data is missing.",
)
_strict_option = click.option(
    "--strict/--lenient",
    default=None,
    help="Fail on orphaned or invalid Open Graph properties.",
)
_json_option = click.option(
    "--json", "as_json", is_flag=True, default=False, help="Output as JSON"
)


@click.command()
@click.argument("url")
@_fallback_option
@_strict_option
@_json_option
@click.pass_obj
def fetch(
    config: Config,
    url: str,
    fallback: bool | None,
    strict: bool | None,
    as_json: bool,
) -> None:
    """Fetch URL and print its Open Graph data."""
    consumer = _consumer(config, fallback, strict)
    try:
        obj = asyncio.run(consumer.load_url(url))
    except OpenGraphError as exc:
        _fail(exc)
    _echo_object(obj, as_json)


@click.command()
@click.argument("source", type=click.File("r", encoding="utf-8"), default="-")
@click.option("--url", "fallback_url", default=None, help="Fallback URL for the page")
@_fallback_option
@_strict_option
@_json_option
@click.pass_obj
def parse(
    config: Config,
    source: TextIO,
    fallback_url: str | None,
    fallback: bool | None,
    strict: bool | None,
    as_json: bool,
) -> None:
    """Parse an HTML file (or stdin) and print its Open Graph data."""
    consumer = _consumer(config, fallback, strict)
    try:
        obj = consumer.load_html(source.read(), fallback_url=fallback_url)
    except OpenGraphError as exc:
        _fail(exc)
    _echo_object(obj, as_json)


@click.command()
@click.argument("source", type=click.File("r", encoding="utf-8"), default="-")
@click.option("--xhtml", is_flag=True, default=False, help="Self-closing tags")
@_fallback_option
@click.pass_obj
def tags(
    config: Config,
    source: TextIO,
    xhtml: bool,
    fallback: bool | None,
) -> None:
    """Re-emit the Open Graph data of an HTML file as meta tags."""
    publisher_cfg = config.publisher
    if xhtml:
        publisher_cfg = replace(publisher_cfg, doctype="xhtml")
    consumer = _consumer(config, fallback, None)
    try:
        obj = consumer.load_html(source.read())
        html = Publisher(publisher_cfg.doctype).generate_html(obj)
    except OpenGraphError as exc:
        _fail(exc)
    if html:
        click.echo(html)
