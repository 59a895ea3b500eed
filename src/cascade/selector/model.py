"""Selector model: categories, combinators, fragments and combined selectors.

A selector sequence is built one part at a time:

    element#id.class[attr]:pseudo-class::pseudo-element
              \\----/\\----/\\----------/
              may occur several times

Every append returns a new ``SelectorFragment``; nothing is accumulated
outside the value itself.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum, IntEnum

from cascade.errors import DuplicateError, OrderError, SelectorError

__all__ = [
    "Category",
    "Combinator",
    "SelectorFragment",
    "CombinedSelector",
    "Selector",
    "combine",
    "stringify",
]

logger = logging.getLogger(__name__)

ORDER_MESSAGE = (
    "Selector parts should be arranged in the following order: "
    "element, id, class, attribute, pseudo-class, pseudo-element"
)
DUPLICATE_MESSAGE = (
    "Element, id and pseudo-element should not occur more than one time "
    "inside the selector"
)


class Category(IntEnum):
    """Selector part kinds, in the order they must appear."""

    TYPE = 0
    ID = 1
    CLASS = 2
    ATTRIBUTE = 3
    PSEUDO_CLASS = 4
    PSEUDO_ELEMENT = 5

    @property
    def repeatable(self) -> bool:
        return self in _REPEATABLE

    def render(self, value: str) -> str:
        """Return *value* wrapped in this category's syntax."""
        prefix, suffix = _SYNTAX[self]
        return f"{prefix}{value}{suffix}"


_REPEATABLE = frozenset({Category.CLASS, Category.ATTRIBUTE, Category.PSEUDO_CLASS})

# (prefix, suffix) per category.
_SYNTAX: dict[Category, tuple[str, str]] = {
    Category.TYPE: ("", ""),
    Category.ID: ("#", ""),
    Category.CLASS: (".", ""),
    Category.ATTRIBUTE: ("[", "]"),
    Category.PSEUDO_CLASS: (":", ""),
    Category.PSEUDO_ELEMENT: ("::", ""),
}


class Combinator(Enum):
    """Combinators joining two selectors."""

    DESCENDANT = " "
    CHILD = ">"
    ADJACENT_SIBLING = "+"
    GENERAL_SIBLING = "~"

    @classmethod
    def coerce(cls, value: Combinator | str) -> Combinator:
        """Return *value* as a Combinator, accepting its raw string form."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise SelectorError(f"Unknown combinator: {value!r}") from None


@dataclass(frozen=True)
class SelectorFragment:
    """A single simple selector sequence such as ``a#nav.item:hover``.

    Attributes:
        text: The rendered selector text accumulated so far.
        last_category: The most recently appended category, or None for an
            empty fragment.
    """

    text: str = ""
    last_category: Category | None = None

    # --- building -------------------------------------------------------------

    def append(self, category: Category, value: str) -> SelectorFragment:
        """Return a new fragment with *value* appended as *category*.

        Raises:
            OrderError: *category* ranks below the last appended category.
            DuplicateError: *category* is unique and already present.
        """
        last = self.last_category
        if last is not None:
            if category < last:
                raise OrderError(ORDER_MESSAGE, category=category, last_category=last)
            if category == last and not category.repeatable:
                raise DuplicateError(DUPLICATE_MESSAGE, category=category)
        fragment = SelectorFragment(
            text=self.text + category.render(value), last_category=category
        )
        logger.debug("Appended %s: %r -> %r", category.name, self.text, fragment.text)
        return fragment

    def type(self, value: str) -> SelectorFragment:
        return self.append(Category.TYPE, value)

    def id(self, value: str) -> SelectorFragment:
        return self.append(Category.ID, value)

    def class_(self, value: str) -> SelectorFragment:
        return self.append(Category.CLASS, value)

    def attribute(self, value: str) -> SelectorFragment:
        return self.append(Category.ATTRIBUTE, value)

    def pseudo_class(self, value: str) -> SelectorFragment:
        return self.append(Category.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> SelectorFragment:
        return self.append(Category.PSEUDO_ELEMENT, value)

    # --- rendering ------------------------------------------------------------

    def stringify(self) -> str:
        return self.text

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class CombinedSelector:
    """Two selectors joined by a combinator. Cannot be extended further."""

    left: str
    combinator: Combinator
    right: str

    def stringify(self) -> str:
        return f"{self.left} {self.combinator.value} {self.right}"

    def __str__(self) -> str:
        return self.stringify()


Selector = SelectorFragment | CombinedSelector


def stringify(selector: Selector) -> str:
    """Render a fragment or combined selector to its CSS text."""
    if not isinstance(selector, (SelectorFragment, CombinedSelector)):
        raise SelectorError(f"Not a selector: {selector!r}")
    return selector.stringify()


def combine(
    left: Selector, combinator: Combinator | str, right: Selector
) -> CombinedSelector:
    """Join two selectors with *combinator*.

    Either side may itself be a combined selector, so chains such as
    ``a + b ~ c`` are built by nesting calls.
    """
    combined = CombinedSelector(
        left=stringify(left),
        combinator=Combinator.coerce(combinator),
        right=stringify(right),
    )
    logger.debug("Combined selector: %r", combined.stringify())
    return combined
