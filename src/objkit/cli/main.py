"""objkit CLI entry point: Click group with subcommands."""

from __future__ import annotations

import logging
import sys
from dataclasses import replace
from typing import IO

import click

from objkit import __version__
from objkit.codec import deserialize, serialize
from objkit.config import ObjkitConfig
from objkit.errors import ParseError
from objkit.selector import CssSelectorBuilder, css_selector_builder
from objkit.shapes import Rectangle


@click.group()
@click.version_option(version=__version__, prog_name="objkit")
@click.option("--verbose", "-v", is_flag=True, help="Log debug output to stderr")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """objkit - rectangles, JSON round-trips and CSS selector building."""
    config = ObjkitConfig(log_level="DEBUG" if verbose else "WARNING")
    logging.basicConfig(level=config.log_level, format="%(name)s: %(message)s")
    ctx.obj = config


@cli.command()
@click.argument("width", type=float)
@click.argument("height", type=float)
def area(width: float, height: float) -> None:
    """Print the area of a WIDTH x HEIGHT rectangle."""
    result = Rectangle(width, height).get_area()
    click.echo(int(result) if result.is_integer() else result)


@cli.command()
@click.option("--element", "element", default=None, help="Element (type) name")
@click.option("--id", "id_", default=None, help="Id, without '#'")
@click.option("--class", "classes", multiple=True, help="Class name (repeatable)")
@click.option("--attr", "attributes", multiple=True, help="Attribute selector without brackets (repeatable)")
@click.option("--pseudo-class", "pseudo_classes", multiple=True, help="Pseudo-class (repeatable)")
@click.option("--pseudo-element", default=None, help="Pseudo-element, without '::'")
def selector(
    element: str | None,
    id_: str | None,
    classes: tuple[str, ...],
    attributes: tuple[str, ...],
    pseudo_classes: tuple[str, ...],
    pseudo_element: str | None,
) -> None:
    """Build a compound CSS selector from its parts."""
    builder = CssSelectorBuilder()
    if element is not None:
        builder.element(element)
    if id_ is not None:
        builder.id(id_)
    for name in classes:
        builder.class_(name)
    for raw in attributes:
        builder.attr(raw)
    for name in pseudo_classes:
        builder.pseudo_class(name)
    if pseudo_element is not None:
        builder.pseudo_element(pseudo_element)
    click.echo(builder.stringify())


@cli.command()
@click.argument("left")
@click.argument("combinator")
@click.argument("right")
def combine(left: str, combinator: str, right: str) -> None:
    """Join two rendered selectors with a combinator (' ', '+', '~', '>')."""
    click.echo(css_selector_builder.combine(left, combinator, right).stringify())


@cli.command("json")
@click.argument("source", type=click.File("r"), default="-")
@click.option("--sort-keys/--no-sort-keys", default=False, help="Emit mapping keys sorted")
@click.pass_obj
def json_(config: ObjkitConfig, source: IO[str], sort_keys: bool) -> None:
    """Print SOURCE (default: stdin) as compact JSON."""
    try:
        value = deserialize(dict, source.read())
    except ParseError as exc:
        location = f" (line {exc.line}, column {exc.column})" if exc.line is not None else ""
        click.echo(f"Parse error: {exc}{location}", err=True)
        sys.exit(1)
    click.echo(serialize(value, replace(config, sort_keys=sort_keys)))

