"""Error hierarchy shared by the selector, serialization and shape modules."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from cascade.selector.model import Category


class CascadeError(Exception):
    """Base error for all cascade errors."""


# ---------------------------------------------------------------------------
# Selector errors
# ---------------------------------------------------------------------------


class SelectorError(CascadeError):
    """Raised when a selector is built incorrectly."""


class OrderError(SelectorError):
    """A selector part was appended after a part that must follow it."""

    def __init__(
        self,
        message: str,
        *,
        category: Category | None = None,
        last_category: Category | None = None,
    ) -> None:
        super().__init__(message)
        self.category = category
        self.last_category = last_category


class DuplicateError(SelectorError):
    """Element, id or pseudo-element appended twice to one selector."""

    def __init__(self, message: str, *, category: Category | None = None) -> None:
        super().__init__(message)
        self.category = category


# ---------------------------------------------------------------------------
# Serialization errors
# ---------------------------------------------------------------------------


class ParseError(CascadeError):
    """Raised when JSON source cannot be parsed."""

    def __init__(
        self, message: str, line: int | None = None, column: int | None = None
    ):
        self.line = line
        self.column = column
        super().__init__(message)


class SerializationError(CascadeError):
    """A value cannot be turned into JSON, or JSON into the target type."""


# ---------------------------------------------------------------------------
# Shape errors
# ---------------------------------------------------------------------------


class InvalidArgumentError(CascadeError, ValueError):
    """A shape was given a negative or non-numeric dimension."""
