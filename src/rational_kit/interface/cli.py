#!/usr/bin/env python
"""
命令行工具：有理数化简、取整与百分比格式化

用法:
    python -m rational_kit.interface.cli reduce 4 8
    python -m rational_kit.interface.cli gcd -12 18
    python -m rational_kit.interface.cli round 3/2 --mode up
    python -m rational_kit.interface.cli percent 1/3 --with-sign
    python -m rational_kit.interface.cli convert 300/1 --int-dtype int8
"""

import argparse
import re
import sys
from typing import List, Optional

from .. import __version__
from ..core.formatting import format_percentage
from ..core.options import ConversionOptions, PercentageFormat
from ..core.rational import make_rational
from ..core.rational_ops import parse_rational, round_with_mode
from ..foundation.constants import (
    DEFAULT_FLOAT_DTYPE,
    DEFAULT_INT_DTYPE,
    ROUNDING_MODES,
    SUPPORTED_FLOAT_DTYPES,
    SUPPORTED_INT_DTYPES,
)
from ..foundation.exceptions import RationalKitError
from ..foundation.integer_utils import gcd, lcm
from ..runtime.logging_utils import configure_verbosity, get_logger

_logger = get_logger(__name__)

# Negative ints, decimals, fractions and percents are values, not options.
_NEGATIVE_VALUE_MATCHER = re.compile(r"^-(\d+\s*(/\s*[+-]?\d+)?%?|\d*\.\d+)$")


def _accept_negative_values(parser: argparse.ArgumentParser) -> None:
    """Let ``-7/2`` or ``-25%`` reach positional ``value`` arguments."""
    parser._negative_number_matcher = _NEGATIVE_VALUE_MATCHER


def reduce_command(args):
    """化简命令"""
    value = make_rational(args.numerator, args.denominator)
    _logger.debug("reduce %s/%s -> %r", args.numerator, args.denominator, value)
    print(value)
    return 0


def gcd_command(args):
    print(gcd(args.a, args.b))
    return 0


def lcm_command(args):
    print(lcm(args.a, args.b))
    return 0


def round_command(args):
    """取整命令"""
    value = parse_rational(args.value)
    result = round_with_mode(value, args.mode)
    _logger.debug("round %r mode=%s -> %s", value, args.mode, result)
    print(result)
    return 0


def percent_command(args):
    """百分比格式化命令"""
    value = parse_rational(args.value)
    print(format_percentage(value, options=PercentageFormat(with_sign=args.with_sign)))
    return 0


def convert_command(args):
    """定宽数值转换命令"""
    value = parse_rational(args.value)
    options = ConversionOptions(int_dtype=args.int_dtype, float_dtype=args.float_dtype)
    as_int = value.to_fixed_int(options.int_dtype)
    as_float = value.to_fixed_float(options.float_dtype)
    print(f"{options.int_dtype}: {as_int}")
    print(f"{options.float_dtype}: {as_float}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rational-kit",
        description="rational-kit: 精确有理数运算工具",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "--version", action="version", version=f"rational-kit {__version__}"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="显示调试日志")

    subparsers = parser.add_subparsers(dest="command", help="可用命令")

    reduce_parser = subparsers.add_parser("reduce", help="化简分数 N/D")
    reduce_parser.add_argument("numerator", type=int)
    reduce_parser.add_argument("denominator", type=int)
    reduce_parser.set_defaults(handler=reduce_command)

    gcd_parser = subparsers.add_parser("gcd", help="最大公约数")
    gcd_parser.add_argument("a", type=int)
    gcd_parser.add_argument("b", type=int)
    gcd_parser.set_defaults(handler=gcd_command)

    lcm_parser = subparsers.add_parser("lcm", help="最小公倍数")
    lcm_parser.add_argument("a", type=int)
    lcm_parser.add_argument("b", type=int)
    lcm_parser.set_defaults(handler=lcm_command)

    round_parser = subparsers.add_parser("round", help="取整（恰为一半时向下）")
    round_parser.add_argument("value", help="如 3/2、-7、25%%")
    round_parser.add_argument(
        "--mode", choices=ROUNDING_MODES, default="nearest", help="取整方式（默认 nearest）"
    )
    round_parser.set_defaults(handler=round_command)

    percent_parser = subparsers.add_parser("percent", help="格式化为整数百分比")
    percent_parser.add_argument("value", help="如 1/2")
    percent_parser.add_argument(
        "--with-sign", action="store_true", help="非负值前显示 + 号"
    )
    percent_parser.set_defaults(handler=percent_command)

    convert_parser = subparsers.add_parser("convert", help="转换为定宽整数/浮点数")
    convert_parser.add_argument("value", help="如 300/1")
    convert_parser.add_argument(
        "--int-dtype", choices=SUPPORTED_INT_DTYPES, default=DEFAULT_INT_DTYPE
    )
    convert_parser.add_argument(
        "--float-dtype", choices=SUPPORTED_FLOAT_DTYPES, default=DEFAULT_FLOAT_DTYPE
    )
    convert_parser.set_defaults(handler=convert_command)

    for sub in [parser, *subparsers.choices.values()]:
        _accept_negative_values(sub)

    return parser


def main(argv: Optional[List[str]] = None):
    """主入口"""
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_verbosity(args.verbose)

    if args.command is None:
        parser.print_help()
        return 0

    try:
        return args.handler(args)
    except RationalKitError as e:
        print(f"❌ 错误：{e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
