"""
整数工具
=====================================
功能：
1. 最大公约数(GCD) / 最小公倍数(LCM)，结果恒为非负
2. 多个整数的 GCD / LCM 聚合
3. 整数谓词（奇偶、符号、空值判断）
"""

from __future__ import annotations

from functools import reduce
from typing import Iterable, Optional


def gcd(a: int, b: int) -> int:
    """
    计算最大公约数（Greatest Common Divisor）

    先对两个参数取绝对值，因此结果与符号无关且恒为非负。
    约定 gcd(0, 0) == 0（形式上的约定，0 能被任何整数整除）。

    Args:
        a: 第一个整数
        b: 第二个整数

    Returns:
        最大公约数

    Example:
        >>> gcd(12, 18)
        6
        >>> gcd(-12, 18)
        6
        >>> gcd(0, 0)
        0
    """
    a, b = abs(a), abs(b)
    while b:
        a, b = b, a % b
    return a


def subtractive_gcd(a: int, b: int) -> int:
    """
    用反复相减的欧几里得算法计算最大公约数

    结果与 gcd() 完全一致；当两数量级相差悬殊时明显更慢，仅用于对照。

    Example:
        >>> subtractive_gcd(12, 18)
        6
    """
    a, b = abs(a), abs(b)
    if a == 0:
        return b
    if b == 0:
        return a
    while a != b:
        if a == 1 or b == 1:
            return 1
        if a > b:
            a -= b
        else:
            b -= a
    return a


def lcm(a: int, b: int) -> int:
    """
    计算最小公倍数（Least Common Multiple）

    结果恒为非负；约定任一参数为 0 时返回 0。

    Args:
        a: 第一个整数
        b: 第二个整数

    Returns:
        最小公倍数

    Example:
        >>> lcm(4, 6)
        12
        >>> lcm(0, 5)
        0
    """
    a, b = abs(a), abs(b)
    if a == 0 or b == 0:
        return 0
    if a == 1:
        return b
    if b == 1:
        return a
    return a // gcd(a, b) * b


greatest_common_divisor = gcd
least_common_multiple = lcm


def gcd_many(values: Iterable[int]) -> int:
    """Fold gcd over values; an empty iterable yields 0."""
    return reduce(gcd, values, 0)


def lcm_many(values: Iterable[int]) -> int:
    """Fold lcm over values; an empty iterable yields 1."""
    return reduce(lcm, values, 1)


def is_even(value: int) -> bool:
    return value % 2 == 0


def is_odd(value: int) -> bool:
    return not is_even(value)


def is_positive(value: int) -> bool:
    return value > 0


def is_negative(value: int) -> bool:
    return value < 0


def is_non_positive(value: int) -> bool:
    return value <= 0


def is_non_negative(value: int) -> bool:
    return value >= 0


def is_null_or_zero(value: Optional[int]) -> bool:
    """True for ``None`` or ``0``."""
    return value is None or value == 0


def is_not_null_or_zero(value: Optional[int]) -> bool:
    return not is_null_or_zero(value)


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
]
