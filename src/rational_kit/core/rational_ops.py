"""Rounding, folding, integer interop and percentage helpers built on Rational.

Every helper here is expressed through the canonical constructor and the
arithmetic on :class:`~rational_kit.core.rational.Rational`, so results are
always in reduced form.
"""

from __future__ import annotations

import re
from typing import Callable, Iterable, Optional, TypeVar, Union

from ..foundation.constants import PERCENT_SCALE
from ..foundation.exceptions import InvalidArgumentError
from .rational import HALF, ONE, ZERO, Rational, make_rational

T = TypeVar("T")

_RATIONAL_PATTERN = re.compile(
    r"^\s*(?P<num>[+-]?\d+)\s*(?:/\s*(?P<den>[+-]?\d+)\s*)?(?P<pct>%)?\s*$"
)


# ---------------------------------------------------------------------------
# Rounding
# ---------------------------------------------------------------------------


def round_down(value: Rational) -> int:
    """Largest integer less than or equal to ``value`` (floor)."""
    return value.numerator // value.denominator


def round_up(value: Rational) -> int:
    """Smallest integer greater than or equal to ``value`` (ceiling)."""
    if value.is_integral():
        return round_down(value)
    return round_down(value) + 1


def round_nearest(value: Rational) -> int:
    """
    Nearest integer to ``value``.

    The fractional part ``value - floor(value)`` is compared with 1/2; only a
    part strictly greater than 1/2 rounds up, so exact halves round DOWN
    towards negative infinity (neither half-even nor half-away-from-zero).

    Example:
        >>> round_nearest(make_rational(1, 2))
        0
        >>> round_nearest(make_rational(5, 3))
        2
        >>> round_nearest(make_rational(-1, 2))
        -1
    """
    partial = value - round_down(value)
    if partial > HALF:
        return round_up(value)
    return round_down(value)


def round_to_digits(value: Rational, ndigits: int) -> Rational:
    """Round to the nearest multiple of ``10 ** -ndigits`` with the same tie-break."""
    if ndigits >= 0:
        factor = make_rational(10**ndigits)
    else:
        factor = make_rational(1, 10 ** (-ndigits))
    return make_rational(round_nearest(value * factor)) / factor


def round_with_mode(value: Rational, mode: str = "nearest") -> int:
    """Dispatch to round_down/round_up/round_nearest by name."""
    rounders = {
        "down": round_down,
        "up": round_up,
        "nearest": round_nearest,
    }
    try:
        rounder = rounders[mode]
    except KeyError as exc:
        raise InvalidArgumentError(
            f"Unknown rounding mode: {mode}. Use down/up/nearest."
        ) from exc
    return rounder(value)


# ---------------------------------------------------------------------------
# Folding
# ---------------------------------------------------------------------------


def rational_fold(
    items: Iterable[T],
    rationalizer: Callable[[T], Optional[Rational]],
    initial: Rational = ONE,
) -> Rational:
    """
    Multiply ``initial`` by ``rationalizer(item)`` for each item, in order.

    Items for which ``rationalizer`` returns ``None`` leave the accumulator
    unchanged.
    """
    acc = initial
    for item in items:
        ratio = rationalizer(item)
        if ratio is not None:
            acc = ratio * acc
    return acc


def rational_sum(
    items: Iterable[T],
    key: Optional[Callable[[T], Rational]] = None,
) -> Rational:
    """Sum in sequence order; the empty sum is 0/1."""
    acc = ZERO
    for item in items:
        acc = acc + (key(item) if key is not None else item)
    return acc


def rational_product(
    items: Iterable[T],
    key: Optional[Callable[[T], Rational]] = None,
) -> Rational:
    """Product in sequence order; the empty product is 1/1."""
    acc = ONE
    for item in items:
        acc = acc * (key(item) if key is not None else item)
    return acc


# ---------------------------------------------------------------------------
# Integer interop
# ---------------------------------------------------------------------------


def to_rational(value: Union[int, Rational]) -> Rational:
    """Convert an int to ``value/1``; a Rational passes through unchanged."""
    if isinstance(value, Rational):
        return value
    return make_rational(value, 1)


def ratio_of(value: int, ratio: Rational) -> int:
    """Integer approximation (floor) of ``value`` times ``ratio``."""
    return (ratio * value).to_int()


def percentage(percent: int) -> Rational:
    """
    ``percent / 100`` in simplest form.

    The denominator of the result is therefore not necessarily 100.

    Example:
        >>> percentage(50)
        Rational(1, 2)
    """
    return make_rational(percent, PERCENT_SCALE)


percent = percentage


def parse_rational(text: str) -> Rational:
    """
    Parse ``"a/b"``, ``"a"`` or ``"p%"`` into a Rational.

    Raises:
        InvalidArgumentError: if the text is malformed or the denominator is 0.
    """
    match = _RATIONAL_PATTERN.match(text or "")
    if match is None:
        raise InvalidArgumentError(f"Cannot parse rational from: {text!r}")
    if match.group("den") is not None and match.group("pct") is not None:
        raise InvalidArgumentError(f"Cannot parse rational from: {text!r}")

    numerator = int(match.group("num"))
    if match.group("pct") is not None:
        return percentage(numerator)
    denominator = int(match.group("den")) if match.group("den") is not None else 1
    return make_rational(numerator, denominator)


__all__ = [
    "round_down",
    "round_up",
    "round_nearest",
    "round_to_digits",
    "round_with_mode",
    "rational_fold",
    "rational_sum",
    "rational_product",
    "to_rational",
    "ratio_of",
    "percentage",
    "percent",
    "parse_rational",
]
