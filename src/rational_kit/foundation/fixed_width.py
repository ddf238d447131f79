"""Fixed-width numeric conversions backed by numpy scalar types.

Python ints never overflow, so the fixed-width bound of a rational only
shows up here: integers are wrapped into the target width the way a C cast
truncates, and floats are produced in the requested precision.
"""

from __future__ import annotations

from typing import Any

import numpy as np

from .constants import SUPPORTED_FLOAT_DTYPES, SUPPORTED_INT_DTYPES
from .exceptions import InvalidArgumentError


def resolve_dtype(dtype: Any, supported) -> np.dtype:
    """Normalize a dtype spec and check it against the supported names."""
    try:
        resolved = np.dtype(dtype)
    except TypeError as exc:
        raise InvalidArgumentError(f"Unknown dtype: {dtype!r}") from exc
    if resolved.name not in supported:
        raise InvalidArgumentError(
            f"Unsupported dtype {resolved.name}; expected one of {', '.join(supported)}"
        )
    return resolved


def wrap_int(value: int, dtype: Any) -> np.integer:
    """Wrap a Python int into a numpy integer of the given width.

    Example:
        >>> int(wrap_int(300, "int8"))
        44
        >>> int(wrap_int(-1, "uint8"))
        255
    """
    resolved = resolve_dtype(dtype, SUPPORTED_INT_DTYPES)
    bits = resolved.itemsize * 8
    modulus = 1 << bits
    wrapped = int(value) % modulus
    if resolved.kind == "i" and wrapped >= modulus >> 1:
        wrapped -= modulus
    return resolved.type(wrapped)


def divide_as_float(numerator: int, denominator: int, dtype: Any) -> np.floating:
    """Convert both operands to the float type, then divide in that precision."""
    resolved = resolve_dtype(dtype, SUPPORTED_FLOAT_DTYPES)
    return resolved.type(numerator) / resolved.type(denominator)


__all__ = ["resolve_dtype", "wrap_int", "divide_as_float"]
