"""Rectangle value type."""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real

from cascade.errors import InvalidArgumentError

__all__ = ["Rectangle", "make_rectangle"]


def _check_dimension(name: str, value: object) -> None:
    # bool is a Real subclass but never a meaningful length.
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidArgumentError(
            f"{name} must be a number, got {type(value).__name__}"
        )
    if not math.isfinite(value):
        raise InvalidArgumentError(f"{name} must be finite, got {value}")
    if value < 0:
        raise InvalidArgumentError(f"{name} must not be negative, got {value}")


@dataclass(frozen=True)
class Rectangle:
    """An axis-aligned rectangle with non-negative sides."""

    width: float
    height: float

    def __post_init__(self) -> None:
        _check_dimension("width", self.width)
        _check_dimension("height", self.height)

    def area(self) -> float:
        return self.width * self.height


def make_rectangle(width: float, height: float) -> Rectangle:
    """Return a Rectangle, raising InvalidArgumentError on bad dimensions."""
    return Rectangle(width=width, height=height)
