"""Inclusive integer ranges and aspect-ratio bounds.

``IntRange(first, last)`` is closed on both ends. Aspect helpers answer:
for a side of ``length``, which integer other sides keep the ratio
``length / other`` within ``[min_aspect, max_aspect]``?
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Union

from ..core.rational import ONE, Rational
from ..core.rational_ops import round_down, round_up
from ..foundation.exceptions import InvalidArgumentError
from ..runtime.logging_utils import get_logger

_logger = get_logger(__name__)


@dataclass(frozen=True)
class IntRange:
    first: int
    last: int

    @property
    def size(self) -> int:
        return self.last - self.first + 1

    def is_empty(self) -> bool:
        return self.last < self.first

    def __contains__(self, item: Union[int, "IntRange"]) -> bool:
        if isinstance(item, IntRange):
            return self.first <= item.first and self.last >= item.last
        return self.first <= item <= self.last

    def __iter__(self) -> Iterator[int]:
        return iter(range(self.first, self.last + 1))

    def overlaps(self, other: "IntRange") -> bool:
        return (
            self.first in other
            or self.last in other
            or other.first in self
            or other.last in self
        )

    def intersect(self, other: "IntRange") -> "IntRange":
        """Common part; a disjoint pair collapses to a single-element range."""
        first = max(self.first, other.first)
        return IntRange(first, max(min(self.last, other.last), first))

    def offset_from(self, other: "IntRange") -> int:
        """Gap between two ranges; 0 when they overlap."""
        if self.overlaps(other):
            return 0
        if self.last < other.first:
            return other.first - self.last
        return self.first - other.last

    def as_progression(self, step: int) -> range:
        """Closed progression from ``first`` towards ``last`` by ``step``.

        A negative step only yields values when ``first >= last``, so an
        ascending range with a negative step is empty.
        """
        if step == 0:
            raise InvalidArgumentError("Progression step cannot be zero.")
        if step > 0:
            return range(self.first, self.last + 1, step)
        return range(self.first, self.last - 1, step)


def for_width(start: int, width: int) -> IntRange:
    """The ``width`` integers beginning at ``start``."""
    return IntRange(start, start + width - 1)


def aspect_range(length: int, min_aspect: Rational, max_aspect: Rational) -> IntRange:
    """
    Integer sides ``x`` with ``min_aspect <= length / x <= max_aspect``.

    Args:
        length: 已知边长
        min_aspect: 最小长宽比
        max_aspect: 最大长宽比

    Returns:
        IntRange(ceil(length / max_aspect), floor(length / min_aspect))

    Raises:
        InvalidArgumentError: 如果 min_aspect > max_aspect

    Example:
        >>> aspect_range(12, Rational(1, 2), Rational(2))
        IntRange(first=6, last=24)
    """
    if min_aspect > max_aspect:
        raise InvalidArgumentError(
            f"minAspect {min_aspect} was larger than maxAspect {max_aspect}"
        )
    result = IntRange(round_up(length / max_aspect), round_down(length / min_aspect))
    _logger.debug(
        "aspect_range(%s, %s, %s) -> %s..%s",
        length,
        min_aspect,
        max_aspect,
        result.first,
        result.last,
    )
    return result


def symmetric_aspect_range(length: int, aspect: Rational) -> IntRange:
    """aspect_range() bounded by ``aspect`` and its reciprocal."""
    if aspect > ONE:
        return aspect_range(length, aspect.reciprocal(), aspect)
    return aspect_range(length, aspect, aspect.reciprocal())


__all__ = [
    "IntRange",
    "for_width",
    "aspect_range",
    "symmetric_aspect_range",
]
