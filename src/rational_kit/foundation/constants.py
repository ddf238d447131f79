"""Shared constants for rational-kit."""

from __future__ import annotations

from typing import Tuple

# Percentages are ratios over this scale.
PERCENT_SCALE = 100
PERCENT_SUFFIX = "%"

# Conceptual fixed-width bound of a numerator/denominator.
DEFAULT_INT_DTYPE = "int32"
DEFAULT_FLOAT_DTYPE = "float64"

SUPPORTED_INT_DTYPES: Tuple[str, ...] = (
    "int8",
    "int16",
    "int32",
    "int64",
    "uint8",
    "uint16",
    "uint32",
    "uint64",
)
SUPPORTED_FLOAT_DTYPES: Tuple[str, ...] = ("float16", "float32", "float64")

ROUNDING_MODES: Tuple[str, ...] = ("down", "up", "nearest")

__all__ = [
    "PERCENT_SCALE",
    "PERCENT_SUFFIX",
    "DEFAULT_INT_DTYPE",
    "DEFAULT_FLOAT_DTYPE",
    "SUPPORTED_INT_DTYPES",
    "SUPPORTED_FLOAT_DTYPES",
    "ROUNDING_MODES",
]
