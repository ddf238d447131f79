"""Public options objects.

These dataclasses provide a stable way to pass configuration into the API.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..foundation.constants import DEFAULT_FLOAT_DTYPE, DEFAULT_INT_DTYPE, PERCENT_SUFFIX


@dataclass(slots=True)
class PercentageFormat:
    """Options that control percentage rendering."""

    with_sign: bool = False
    suffix: str = PERCENT_SUFFIX


@dataclass(slots=True)
class ConversionOptions:
    """Target numpy types for fixed-width conversions."""

    int_dtype: str = DEFAULT_INT_DTYPE
    float_dtype: str = DEFAULT_FLOAT_DTYPE
