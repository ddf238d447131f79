"""
有理数值类型
=====================================
功能：
1. Rational：分子/分母组成的不可变值，始终保持最简规范形式
2. make_rational / reduce / over：唯一的规范化构造入口
3. 算术、比较与数值转换（整数取整为向下取整，定宽类型由 numpy 提供）

规范形式约束：
    - 分母恒为正，数值的符号完全由分子承担
    - gcd(|分子|, 分母) == 1
    - 分子为 0 时分母必为 1（零的唯一表示）

Notes:
    分子分母均为 Python int，不会溢出；定宽整数的上限只在
    to_fixed_int() 等显式转换中体现（按 C 风格截断回绕）。
"""

from __future__ import annotations

import json
import numbers
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Tuple, Union

import numpy as np

from ..foundation.constants import DEFAULT_FLOAT_DTYPE, DEFAULT_INT_DTYPE
from ..foundation.exceptions import InvalidArgumentError
from ..foundation.fixed_width import divide_as_float, wrap_int
from ..foundation.integer_utils import gcd

RationalLike = Union["Rational", int]

_ZERO_DENOMINATOR_MESSAGE = "Denominator of rational number cannot be zero."


def _coerce_int(value: Any, name: str) -> int:
    if isinstance(value, numbers.Integral):
        return int(value)
    raise InvalidArgumentError(
        f"{name} must be an integer, got {type(value).__name__}: {value!r}"
    )


def _canonical(numerator: int, denominator: int) -> Tuple[int, int]:
    """Reduce by the gcd and move the sign onto the numerator."""
    if denominator == 0:
        raise InvalidArgumentError(_ZERO_DENOMINATOR_MESSAGE)
    divisor = gcd(numerator, denominator)
    numerator //= divisor
    denominator //= divisor
    if denominator < 0:
        numerator, denominator = -numerator, -denominator
    return numerator, denominator


@dataclass(frozen=True, eq=False, repr=False, slots=True)
class Rational:
    """A ratio of two integers held in canonical reduced form.

    Constructing a ``Rational`` always validates and normalizes:

        >>> Rational(4, 8)
        Rational(1, 2)
        >>> Rational(3, -6)
        Rational(-1, 2)
        >>> Rational(5)
        Rational(5, 1)

    Raises:
        InvalidArgumentError: if ``denominator`` is 0 or either component is
            not an integer.
    """

    numerator: int
    denominator: int = 1

    def __post_init__(self) -> None:
        num, den = _canonical(
            _coerce_int(self.numerator, "numerator"),
            _coerce_int(self.denominator, "denominator"),
        )
        object.__setattr__(self, "numerator", num)
        object.__setattr__(self, "denominator", den)

    @classmethod
    def _raw(cls, numerator: int, denominator: int) -> "Rational":
        # Callers guarantee (numerator, denominator) is already canonical.
        obj = object.__new__(cls)
        object.__setattr__(obj, "numerator", numerator)
        object.__setattr__(obj, "denominator", denominator)
        return obj

    @classmethod
    def _coerce(cls, value: Any) -> Optional["Rational"]:
        if isinstance(value, Rational):
            return value
        if isinstance(value, numbers.Integral):
            return cls._raw(int(value), 1)
        return None

    @classmethod
    def _require(cls, value: Any) -> "Rational":
        coerced = cls._coerce(value)
        if coerced is None:
            raise TypeError(
                f"Expected Rational or int, got {type(value).__name__}: {value!r}"
            )
        return coerced

    # ------------------------------------------------------------------
    # Structure
    # ------------------------------------------------------------------

    def is_integral(self) -> bool:
        """Whether this value is a whole number (denominator 1, or zero)."""
        return self.denominator == 1 or self.numerator == 0

    def reduce(self) -> "Rational":
        """Return the canonical form; a no-op for values built by the constructor."""
        return make_rational(self.numerator, self.denominator)

    def reciprocal(self) -> "Rational":
        """
        Swap numerator and denominator.

        Raises:
            InvalidArgumentError: for the reciprocal of zero.
        """
        if self.numerator == 0:
            raise InvalidArgumentError("Cannot take the reciprocal of zero.")
        if self.numerator < 0:
            return Rational._raw(-self.denominator, -self.numerator)
        return Rational._raw(self.denominator, self.numerator)

    def negate(self) -> "Rational":
        return Rational._raw(-self.numerator, self.denominator)

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def add(self, other: RationalLike) -> "Rational":
        other = Rational._require(other)
        if self.denominator == other.denominator:
            return make_rational(self.numerator + other.numerator, self.denominator)
        return make_rational(
            self.numerator * other.denominator + other.numerator * self.denominator,
            self.denominator * other.denominator,
        )

    def subtract(self, other: RationalLike) -> "Rational":
        return self.add(Rational._require(other).negate())

    def multiply(self, other: RationalLike) -> "Rational":
        other = Rational._require(other)
        return make_rational(
            self.numerator * other.numerator,
            self.denominator * other.denominator,
        )

    def divide(self, other: RationalLike) -> "Rational":
        return self.multiply(Rational._require(other).reciprocal())

    def scale(self, scalar: float) -> float:
        """Multiply by a float scalar; the result is an approximate float."""
        return self.numerator * scalar / self.denominator

    def compare(self, other: RationalLike) -> int:
        """Return -1, 0 or 1 as this value is less than, equal to or greater than ``other``."""
        other = Rational._require(other)
        if self.is_integral() and other.is_integral():
            left, right = self.numerator, other.numerator
        else:
            # Both denominators are positive, so cross-multiplying keeps the order.
            left = self.numerator * other.denominator
            right = other.numerator * self.denominator
        return (left > right) - (left < right)

    def __add__(self, other: Any) -> "Rational":
        if Rational._coerce(other) is None:
            return NotImplemented
        return self.add(other)

    __radd__ = __add__

    def __sub__(self, other: Any) -> "Rational":
        if Rational._coerce(other) is None:
            return NotImplemented
        return self.subtract(other)

    def __rsub__(self, other: Any) -> "Rational":
        coerced = Rational._coerce(other)
        if coerced is None:
            return NotImplemented
        return coerced.subtract(self)

    def __mul__(self, other: Any) -> Union["Rational", float]:
        if isinstance(other, (float, np.floating)):
            return self.scale(other)
        if Rational._coerce(other) is None:
            return NotImplemented
        return self.multiply(other)

    __rmul__ = __mul__

    def __truediv__(self, other: Any) -> "Rational":
        if Rational._coerce(other) is None:
            return NotImplemented
        return self.divide(other)

    def __rtruediv__(self, other: Any) -> "Rational":
        coerced = Rational._coerce(other)
        if coerced is None:
            return NotImplemented
        return coerced.divide(self)

    def __neg__(self) -> "Rational":
        return self.negate()

    def __pos__(self) -> "Rational":
        return self

    def __abs__(self) -> "Rational":
        return self.negate() if self.numerator < 0 else self

    # ------------------------------------------------------------------
    # Comparison
    # ------------------------------------------------------------------

    def __eq__(self, other: Any) -> bool:
        coerced = Rational._coerce(other)
        if coerced is None:
            return NotImplemented
        return (
            self.numerator == coerced.numerator
            and self.denominator == coerced.denominator
        )

    def __hash__(self) -> int:
        if self.denominator == 1:
            return hash(self.numerator)
        return hash((self.numerator, self.denominator))

    def __lt__(self, other: Any) -> bool:
        if Rational._coerce(other) is None:
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other: Any) -> bool:
        if Rational._coerce(other) is None:
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other: Any) -> bool:
        if Rational._coerce(other) is None:
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other: Any) -> bool:
        if Rational._coerce(other) is None:
            return NotImplemented
        return self.compare(other) >= 0

    def __bool__(self) -> bool:
        return self.numerator != 0

    # ------------------------------------------------------------------
    # Conversion
    # ------------------------------------------------------------------

    def to_int(self) -> int:
        """Largest integer less than or equal to this value."""
        return self.numerator // self.denominator

    def to_float(self) -> float:
        """
        Double-precision approximation.

        Repeating fractions such as 1/3 and very long decimal expansions lose
        precision.
        """
        return self.numerator / self.denominator

    def to_fixed_int(self, dtype: Any = DEFAULT_INT_DTYPE) -> np.integer:
        """Floor, then wrap into the numpy integer type ``dtype``."""
        return wrap_int(self.to_int(), dtype)

    def to_byte(self) -> np.integer:
        return self.to_fixed_int("int8")

    def to_short(self) -> np.integer:
        return self.to_fixed_int("int16")

    def to_long(self) -> np.integer:
        return self.to_fixed_int("int64")

    def to_fixed_float(self, dtype: Any = DEFAULT_FLOAT_DTYPE) -> np.floating:
        """Divide in the precision of the numpy float type ``dtype``."""
        return divide_as_float(self.numerator, self.denominator, dtype)

    def __int__(self) -> int:
        return self.to_int()

    def __float__(self) -> float:
        return self.to_float()

    def __floor__(self) -> int:
        from .rational_ops import round_down

        return round_down(self)

    def __ceil__(self) -> int:
        from .rational_ops import round_up

        return round_up(self)

    def __round__(self, ndigits: Optional[int] = None) -> Union[int, "Rational"]:
        from .rational_ops import round_nearest, round_to_digits

        if ndigits is None:
            return round_nearest(self)
        return round_to_digits(self, ndigits)

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    def to_dict(self) -> Dict[str, int]:
        return {"numerator": self.numerator, "denominator": self.denominator}

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "Rational":
        """
        Rebuild a value through the canonical constructor.

        ``denominator`` defaults to 1; a non-reduced payload is normalized.

        Raises:
            InvalidArgumentError: 缺少 numerator、分量不是整数或分母为 0
        """
        if not isinstance(payload, Mapping) or "numerator" not in payload:
            raise InvalidArgumentError(
                f"Rational payload must be a mapping with a numerator, got {payload!r}"
            )
        return cls(payload["numerator"], payload.get("denominator", 1))

    def to_json(self, **kwargs: Any) -> str:
        return json.dumps(self.to_dict(), **kwargs)

    @classmethod
    def from_json(cls, text: str) -> "Rational":
        try:
            payload = json.loads(text)
        except json.JSONDecodeError as exc:
            raise InvalidArgumentError(f"Invalid rational JSON: {text!r}") from exc
        return cls.from_dict(payload)

    def __repr__(self) -> str:
        return f"Rational({self.numerator}, {self.denominator})"

    def __str__(self) -> str:
        if self.denominator == 1:
            return str(self.numerator)
        return f"{self.numerator}/{self.denominator}"


def make_rational(numerator: int, denominator: int = 1) -> Rational:
    """
    规范化构造有理数

    Args:
        numerator: 分子
        denominator: 分母，不能为 0

    Returns:
        最简形式的 Rational

    Raises:
        InvalidArgumentError: 分母为 0

    Example:
        >>> make_rational(-2, -4)
        Rational(1, 2)
    """
    return Rational(numerator, denominator)


reduce = make_rational


def over(numerator: int, denominator: int) -> Rational:
    """Natural spelling of a fraction: ``over(1, 2)`` is one half."""
    return make_rational(numerator, denominator)


ZERO = Rational._raw(0, 1)
ONE = Rational._raw(1, 1)
HALF = Rational._raw(1, 2)

__all__ = [
    "Rational",
    "RationalLike",
    "make_rational",
    "reduce",
    "over",
    "ZERO",
    "ONE",
    "HALF",
]
