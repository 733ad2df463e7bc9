"""selectorkit CLI entry point: Click group with subcommands."""

from __future__ import annotations

import logging
import sys

import click

from selectorkit import __version__
from selectorkit.config import SelectorkitConfig
from selectorkit.errors import SelectorError
from selectorkit.objects import get_json
from selectorkit.selector import css_selector_builder

_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


@click.group()
@click.version_option(version=__version__, prog_name="selectorkit")
def cli() -> None:
    """selectorkit - build CSS selector strings from their parts."""


@cli.command()
@click.option("--element", "elements", multiple=True, help="Type selector, e.g. div")
@click.option("--id", "ids", multiple=True, help="Id selector without '#'")
@click.option("--class", "classes", multiple=True, help="Class name; repeatable")
@click.option("--attr", "attrs", multiple=True, help="Attribute expression without brackets; repeatable")
@click.option("--pseudo-class", "pseudo_classes", multiple=True, help="Pseudo-class; repeatable")
@click.option("--pseudo-element", "pseudo_elements", multiple=True, help="Pseudo-element without '::'")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default=SelectorkitConfig.output_format,
    help="Print the selector string or its JSON fields",
)
@click.option(
    "--log-level",
    type=click.Choice(_LOG_LEVELS, case_sensitive=False),
    default=SelectorkitConfig.log_level,
    help="Logging level",
)
def build(
    elements: tuple[str, ...],
    ids: tuple[str, ...],
    classes: tuple[str, ...],
    attrs: tuple[str, ...],
    pseudo_classes: tuple[str, ...],
    pseudo_elements: tuple[str, ...],
    output_format: str,
    log_level: str,
) -> None:
    """Build a compound selector and print it.

    Element, id and pseudo-element may be given at most once; class, attr
    and pseudo-class options append in the order given.
    """
    config = SelectorkitConfig(log_level=log_level.upper(), output_format=output_format)
    logging.basicConfig(level=config.log_level)

    selector = css_selector_builder.root
    try:
        for value in elements:
            selector = selector.element(value)
        for value in ids:
            selector = selector.id(value)
        for value in classes:
            selector = selector.class_(value)
        for value in attrs:
            selector = selector.attr(value)
        for value in pseudo_classes:
            selector = selector.pseudo_class(value)
        for value in pseudo_elements:
            selector = selector.pseudo_element(value)
    except SelectorError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    if config.output_format == "json":
        click.echo(get_json(selector))
    else:
        click.echo(selector.stringify())
