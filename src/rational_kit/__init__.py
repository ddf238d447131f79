"""
rational-kit: 精确有理数运算工具

主要功能：
- Rational：始终保持最简规范形式的不可变有理数
- 整数 GCD / LCM 及整数谓词
- 取整（向下、向上、最近且恰为一半时向下）、求和/求积、百分比格式化
- 区间与长宽比辅助、加权随机选择

快速开始：
    >>> from rational_kit import make_rational, round_nearest, format_percentage
    >>> half = make_rational(4, 8)
    >>> half
    Rational(1, 2)
    >>> round_nearest(half)
    0
    >>> format_percentage(half)
    '50%'

更多信息：
    - 核心类型: rational_kit.core.rational
    - 派生运算: rational_kit.core.rational_ops
    - 异常类型: rational_kit.foundation.exceptions
"""

__version__ = "1.0.0"

from .foundation.exceptions import InvalidArgumentError, RationalKitError
from .foundation.constants import (
    DEFAULT_FLOAT_DTYPE,
    DEFAULT_INT_DTYPE,
    PERCENT_SCALE,
)
from .foundation.integer_utils import (
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
)

from .core.rational import HALF, ONE, ZERO, Rational, make_rational, over, reduce
from .core.rational_ops import (
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
    to_rational,
)
from .core.formatting import format_percentage, to_string_with_sign
from .core.options import ConversionOptions, PercentageFormat

from .helpers.ranges import IntRange, aspect_range, for_width, symmetric_aspect_range
from .helpers.weighted_choice import weighted_random_choice, weighted_random_choice_by

__all__ = [
    # 版本
    "__version__",
    # 异常类
    "RationalKitError",
    "InvalidArgumentError",
    # 常数
    "DEFAULT_INT_DTYPE",
    "DEFAULT_FLOAT_DTYPE",
    "PERCENT_SCALE",
    # 整数工具
    "gcd",
    "lcm",
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
    # 有理数核心
    "Rational",
    "make_rational",
    "reduce",
    "over",
    "ZERO",
    "ONE",
    "HALF",
    # 派生运算
    "round_down",
    "round_up",
    "round_nearest",
    "round_to_digits",
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
    # 辅助工具
    "IntRange",
    "for_width",
    "aspect_range",
    "symmetric_aspect_range",
    "weighted_random_choice",
    "weighted_random_choice_by",
]
