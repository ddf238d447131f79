"""Foundation utilities and shared definitions public exports."""

from .constants import *
from .exceptions import *
from .fixed_width import divide_as_float, wrap_int
from .integer_utils import (
    gcd,
    gcd_many,
    greatest_common_divisor,
    is_even,
    is_negative,
    is_non_negative,
    is_non_positive,
    is_not_null_or_zero,
    is_null_or_zero,
    is_odd,
    is_positive,
    lcm,
    lcm_many,
    least_common_multiple,
    subtractive_gcd,
)

__all__ = [
    "gcd",
    "lcm",
    "subtractive_gcd",
    "greatest_common_divisor",
    "least_common_multiple",
    "gcd_many",
    "lcm_many",
    "is_even",
    "is_odd",
    "is_positive",
    "is_negative",
    "is_non_positive",
    "is_non_negative",
    "is_null_or_zero",
    "is_not_null_or_zero",
    "wrap_int",
    "divide_as_float",
]
