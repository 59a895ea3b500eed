"""CLI command: cascade selector -- build a selector from its parts."""

from __future__ import annotations

import sys

import click

from cascade.errors import CascadeError
from cascade.selector import Category, Combinator, Selector, SelectorFragment, combine

# Part prefixes accepted on the command line; "element" and "attr" are
# aliases of "type" and "attribute".
_PART_KINDS: dict[str, Category] = {
    "type": Category.TYPE,
    "element": Category.TYPE,
    "id": Category.ID,
    "class": Category.CLASS,
    "attribute": Category.ATTRIBUTE,
    "attr": Category.ATTRIBUTE,
    "pseudo-class": Category.PSEUDO_CLASS,
    "pseudo-element": Category.PSEUDO_ELEMENT,
}

_COMBINATORS = frozenset(c.value for c in Combinator)


def _parse_part(token: str) -> tuple[Category, str]:
    kind, sep, value = token.partition(":")
    if not sep or kind not in _PART_KINDS:
        raise click.BadParameter(
            f"expected KIND:VALUE with KIND one of {', '.join(_PART_KINDS)}, got {token!r}",
            param_hint="PARTS",
        )
    return _PART_KINDS[kind], value


def build_selector(parts: tuple[str, ...]) -> Selector:
    """Fold command-line parts into a selector, combining left to right."""
    result: Selector | None = None
    pending: str | None = None
    fragment: SelectorFragment | None = None

    for token in parts:
        if token in _COMBINATORS:
            if fragment is None:
                raise click.BadParameter(
                    f"combinator {token!r} must follow a selector", param_hint="PARTS"
                )
            result = fragment if result is None else combine(result, pending, fragment)
            pending = token
            fragment = None
            continue
        category, value = _parse_part(token)
        fragment = (fragment or SelectorFragment()).append(category, value)

    if fragment is None:
        raise click.BadParameter("selector must not end with a combinator", param_hint="PARTS")
    return fragment if result is None else combine(result, pending, fragment)


@click.command()
@click.argument("parts", nargs=-1, required=True)
def selector(parts: tuple[str, ...]) -> None:
    """Build a CSS selector from KIND:VALUE parts and combinators.

    KIND is one of type, id, class, attribute, pseudo-class or
    pseudo-element. A bare '>', '+', '~' or ' ' combines the selectors on
    either side.

    Example: cascade selector type:div id:main + type:table
    """
    try:
        result = build_selector(parts)
    except CascadeError as exc:
        click.echo(f"Selector error: {exc}", err=True)
        sys.exit(1)
    click.echo(result.stringify())
