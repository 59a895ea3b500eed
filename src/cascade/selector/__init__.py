from cascade.selector.builder import SelectorBuilder, css_selector_builder
from cascade.selector.model import (
    Category,
    CombinedSelector,
    Combinator,
    Selector,
    SelectorFragment,
    combine,
    stringify,
)

__all__ = [
    "SelectorBuilder",
    "css_selector_builder",
    "Category",
    "CombinedSelector",
    "Combinator",
    "Selector",
    "SelectorFragment",
    "combine",
    "stringify",
]
