"""
rational-kit 极简使用示例
========================
三个常用场景：规范化构造、取整与聚合、百分比与长宽比
"""

import numpy as np

from rational_kit import (
    InvalidArgumentError,
    aspect_range,
    format_percentage,
    make_rational,
    percentage,
    rational_sum,
    round_down,
    round_nearest,
    round_up,
    weighted_random_choice,
)

print("rational-kit 极简使用示例")
print("=" * 70)

# ============================================================================
# 场景1: 规范化构造
# ============================================================================
print("\n场景1: 规范化构造")
print("-" * 70)
for n, d in [(4, 8), (-2, -4), (3, -6), (0, -5)]:
    print(f"make_rational({n}, {d}) -> {make_rational(n, d)!r}")

try:
    make_rational(1, 0)
except InvalidArgumentError as e:
    print(f"make_rational(1, 0) -> InvalidArgumentError: {e}")

# ============================================================================
# 场景2: 取整与聚合
# ============================================================================
print("\n场景2: 取整与聚合")
print("-" * 70)
for value in [make_rational(1, 2), make_rational(3, 2), make_rational(-7, 3)]:
    print(
        f"{str(value):>6}: down={round_down(value)} up={round_up(value)} "
        f"nearest={round_nearest(value)}"
    )

shares = [make_rational(1, 2), make_rational(1, 3), make_rational(1, 6)]
print(f"sum({', '.join(map(str, shares))}) = {rational_sum(shares)}")
print(f"sum([]) = {rational_sum([])!r}")

# ============================================================================
# 场景3: 百分比、长宽比与加权随机
# ============================================================================
print("\n场景3: 百分比、长宽比与加权随机")
print("-" * 70)
print(f"percentage(50) = {percentage(50)!r} -> {format_percentage(percentage(50))}")
print(f"1/3 as percent (signed): {format_percentage(make_rational(1, 3), with_sign=True)}")

bounds = aspect_range(12, make_rational(1, 2), make_rational(2))
print(f"sides for 12 within aspect 1/2..2: {bounds.first}..{bounds.last}")

rng = np.random.default_rng(0)
picks = [weighted_random_choice({"common": 9, "rare": 1}, rng=rng) for _ in range(10)]
print(f"weighted picks: {picks}")
