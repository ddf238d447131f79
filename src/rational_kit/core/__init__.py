"""Core computational subpackage public exports."""

from .formatting import format_percentage, to_string_with_sign
from .options import ConversionOptions, PercentageFormat
from .rational import HALF, ONE, ZERO, Rational, make_rational, over, reduce
from .rational_ops import (
    parse_rational,
    percent,
    percentage,
    ratio_of,
    rational_fold,
    rational_product,
    rational_sum,
    round_down,
    round_nearest,
    round_to_digits,
    round_up,
    round_with_mode,
    to_rational,
)

__all__ = [
    "Rational",
    "make_rational",
    "reduce",
    "over",
    "ZERO",
    "ONE",
    "HALF",
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
    "format_percentage",
    "to_string_with_sign",
    "PercentageFormat",
    "ConversionOptions",
]
