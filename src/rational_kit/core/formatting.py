"""Number formatting helpers."""

from __future__ import annotations

from typing import Optional

from ..foundation.constants import PERCENT_SCALE
from .options import PercentageFormat
from .rational import Rational


def to_string_with_sign(value: int) -> str:
    """Render an int with an explicit ``+`` for non-negative values."""
    if value >= 0:
        return f"+{value}"
    return str(value)


def format_percentage(
    value: Rational,
    with_sign: Optional[bool] = None,
    options: Optional[PercentageFormat] = None,
) -> str:
    """
    Render ``value`` as an integer percentage.

    The percentage is ``numerator * 100 / denominator`` truncated toward
    zero; ``with_sign`` overrides ``options.with_sign`` when given.

    Example:
        >>> format_percentage(Rational(1, 2))
        '50%'
        >>> format_percentage(Rational(1, 3), with_sign=True)
        '+33%'
        >>> format_percentage(Rational(-1, 3))
        '-33%'
    """
    opts = options or PercentageFormat()
    signed = opts.with_sign if with_sign is None else with_sign
    scaled = abs(value.numerator) * PERCENT_SCALE // value.denominator
    pct = -scaled if value.numerator < 0 else scaled
    text = to_string_with_sign(pct) if signed else str(pct)
    return text + opts.suffix


__all__ = ["to_string_with_sign", "format_percentage"]
