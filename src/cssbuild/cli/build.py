"""CLI commands: cssbuild build / cssbuild combine -- render selectors from parts."""

from __future__ import annotations

import shlex
import sys
from typing import Callable

import click

from cssbuild.selector import COMBINATORS, Selector, SelectorError

# Part kinds accepted on the command line, mapped to their Selector append method.
PART_KINDS: dict[str, Callable[[Selector, str], Selector]] = {
    "element": Selector.element,
    "id": Selector.id,
    "class": Selector.class_,
    "attr": Selector.attr,
    "pseudo-class": Selector.pseudo_class,
    "pseudo-element": Selector.pseudo_element,
}

_COMBINATOR_ALIASES = {"descendant": " "}


def build_selector(parts: list[str] | tuple[str, ...]) -> Selector:
    """Apply ``KIND=VALUE`` parts, in the given order, to a new Selector.

    Raises :class:`click.BadParameter` for a malformed part or unknown kind;
    ordering and uniqueness violations propagate as :class:`SelectorError`.
    """
    if not parts:
        raise click.BadParameter("at least one KIND=VALUE part is required")
    selector = Selector()
    for part in parts:
        kind, sep, value = part.partition("=")
        if not sep:
            raise click.BadParameter(f"expected KIND=VALUE, got {part!r}")
        append = PART_KINDS.get(kind)
        if append is None:
            raise click.BadParameter(
                f"unknown part kind {kind!r} (choose from {', '.join(PART_KINDS)})"
            )
        append(selector, value)
    return selector


@click.command()
@click.argument("parts", nargs=-1, required=True)
def build(parts: tuple[str, ...]) -> None:
    """Render a selector from KIND=VALUE parts, applied in the order given.

    KIND is one of element, id, class, attr, pseudo-class, pseudo-element.
    Example: cssbuild build element=a 'attr=href$=".png"' pseudo-class=focus
    """
    try:
        selector = build_selector(parts)
    except SelectorError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)
    click.echo(selector.render())


@click.command()
@click.argument("left")
@click.argument(
    "combinator",
    type=click.Choice([*COMBINATORS, *_COMBINATOR_ALIASES]),
)
@click.argument("right")
def combine(left: str, combinator: str, right: str) -> None:
    """Join two selectors with a combinator.

    LEFT and RIGHT are quoted, space-separated KIND=VALUE part lists.
    Example: cssbuild combine "element=div id=main" + "element=table id=data"
    """
    token = _COMBINATOR_ALIASES.get(combinator, combinator)
    try:
        composite = Selector().combine(
            build_selector(shlex.split(left)),
            token,
            build_selector(shlex.split(right)),
        )
    except SelectorError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)
    click.echo(composite.render())
