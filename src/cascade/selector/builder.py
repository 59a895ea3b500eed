"""Facade for building CSS selectors.

Example:
    builder = css_selector_builder
    builder.id("main").class_("container").class_("editable").stringify()
    # '#main.container.editable'
"""

from __future__ import annotations

from cascade.selector.model import (
    Category,
    CombinedSelector,
    Combinator,
    Selector,
    SelectorFragment,
    combine,
    stringify,
)

__all__ = ["SelectorBuilder", "css_selector_builder"]


class SelectorBuilder:
    """Stateless entry point: every category method starts a new fragment."""

    def type(self, value: str) -> SelectorFragment:
        return SelectorFragment().append(Category.TYPE, value)

    def id(self, value: str) -> SelectorFragment:
        return SelectorFragment().append(Category.ID, value)

    def class_(self, value: str) -> SelectorFragment:
        return SelectorFragment().append(Category.CLASS, value)

    def attribute(self, value: str) -> SelectorFragment:
        return SelectorFragment().append(Category.ATTRIBUTE, value)

    def pseudo_class(self, value: str) -> SelectorFragment:
        return SelectorFragment().append(Category.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> SelectorFragment:
        return SelectorFragment().append(Category.PSEUDO_ELEMENT, value)

    def combine(
        self, left: Selector, combinator: Combinator | str, right: Selector
    ) -> CombinedSelector:
        return combine(left, combinator, right)

    def stringify(self, selector: Selector) -> str:
        return stringify(selector)


css_selector_builder = SelectorBuilder()
