"""测试04: 区间、长宽比与加权随机选择。

学习目标:
1. 理解闭区间的包含、相交与间距
2. 用有理数长宽比推导整数边长范围
3. 用固定种子的 numpy Generator 验证加权随机选择
"""

import logging
from collections import Counter

import numpy as np
import pytest

from conftest import print_section, print_concept, print_code_example
from rational_kit import InvalidArgumentError
from rational_kit.core.rational import Rational, make_rational
from rational_kit.helpers.ranges import (
    IntRange,
    aspect_range,
    for_width,
    symmetric_aspect_range,
)
from rational_kit.helpers.weighted_choice import (
    weighted_random_choice,
    weighted_random_choice_by,
)


class TestIntRange:
    def test_size_and_membership(self):
        r = IntRange(3, 7)
        assert r.size == 5
        assert 3 in r and 7 in r
        assert 8 not in r
        assert IntRange(4, 6) in r
        assert IntRange(2, 6) not in r
        assert list(r) == [3, 4, 5, 6, 7]

    def test_overlaps(self):
        assert IntRange(1, 5).overlaps(IntRange(5, 9))
        assert IntRange(1, 10).overlaps(IntRange(3, 4))
        assert IntRange(3, 4).overlaps(IntRange(1, 10))
        assert not IntRange(1, 4).overlaps(IntRange(5, 9))

    def test_intersect(self):
        assert IntRange(1, 5).intersect(IntRange(3, 9)) == IntRange(3, 5)
        assert IntRange(1, 2).intersect(IntRange(5, 9)) == IntRange(5, 5)

    def test_offset_from(self):
        assert IntRange(1, 5).offset_from(IntRange(4, 9)) == 0
        assert IntRange(1, 3).offset_from(IntRange(7, 9)) == 4
        assert IntRange(10, 12).offset_from(IntRange(1, 4)) == 6

    def test_for_width_and_progression(self):
        assert for_width(4, 3) == IntRange(4, 6)
        assert for_width(4, 3).size == 3
        assert list(IntRange(0, 10).as_progression(5)) == [0, 5, 10]
        with pytest.raises(InvalidArgumentError):
            IntRange(0, 1).as_progression(0)

    def test_negative_step_progression_runs_from_first_to_last(self):
        print_concept("负步长从 first 走向 last；first < last 时为空")
        assert list(IntRange(0, 10).as_progression(-4)) == []
        assert list(IntRange(10, 0).as_progression(-4)) == [10, 6, 2]
        assert list(IntRange(5, 5).as_progression(-1)) == [5]


class TestAspectRange:
    def test_aspect_range_bounds(self):
        print_section("长宽比范围")
        print_concept("ceil(length / max_aspect) .. floor(length / min_aspect)")

        result = aspect_range(12, make_rational(1, 2), make_rational(2))
        print_code_example(f"aspect_range(12, 1/2, 2) -> {result}")

        assert result == IntRange(6, 24)

    def test_aspect_range_rounds_inward(self):
        assert aspect_range(10, make_rational(2, 3), make_rational(3, 2)) == IntRange(7, 15)

    def test_invalid_aspect_order(self):
        with pytest.raises(InvalidArgumentError):
            aspect_range(10, make_rational(2), make_rational(1, 2))

    def test_symmetric_aspect_range(self):
        expected = IntRange(6, 24)
        assert symmetric_aspect_range(12, Rational(2)) == expected
        assert symmetric_aspect_range(12, Rational(1, 2)) == expected
        assert symmetric_aspect_range(12, Rational(1)) == IntRange(12, 12)

    def test_aspect_range_logs_at_debug(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="rational_kit"):
            aspect_range(12, make_rational(1, 2), make_rational(2))
        assert any("aspect_range" in rec.getMessage() for rec in caplog.records)


class TestWeightedChoice:
    def test_empty_mapping_fails(self, rng):
        with pytest.raises(InvalidArgumentError):
            weighted_random_choice({}, rng=rng)

    def test_single_positive_weight_always_wins(self, rng):
        options = {"a": 0, "b": 5, "c": 0}
        assert all(weighted_random_choice(options, rng=rng) == "b" for _ in range(50))

    def test_integer_weights_follow_distribution(self, rng):
        print_section("加权随机选择")
        print_concept("累计权重首次超过随机截断值的元素被选中")

        counts = Counter(
            weighted_random_choice({"x": 1, "y": 3}, rng=rng) for _ in range(4000)
        )
        assert 0.2 < counts["x"] / 4000 < 0.3

    def test_float_weights(self, rng):
        counts = Counter(
            weighted_random_choice({"x": 0.5, "y": 1.5}, rng=rng) for _ in range(4000)
        )
        assert set(counts) == {"x", "y"}
        assert counts["y"] > counts["x"]

    def test_seeded_generator_is_reproducible(self):
        options = {"a": 2, "b": 3, "c": 5}
        first = [weighted_random_choice(options, rng=np.random.default_rng(7)) for _ in range(5)]
        second = [weighted_random_choice(options, rng=np.random.default_rng(7)) for _ in range(5)]
        assert first == second

    def test_choice_by_selector(self, rng):
        words = ["a", "bb", "ccc"]
        picked = weighted_random_choice_by(
            words, lambda w: 1 if w == "ccc" else 0, rng=rng
        )
        assert picked == "ccc"

    def test_non_positive_integer_total_fails(self, rng):
        with pytest.raises(InvalidArgumentError):
            weighted_random_choice({"a": 0}, rng=rng)
