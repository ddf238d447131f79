"""
pytest配置和fixtures
====================
提供测试基础设施和常用测试数据
"""

import os
import sys
from pathlib import Path

import numpy as np
import pytest

# 统一添加 src 根路径，确保测试使用包名 `rational_kit` 导入
PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_ROOT = PROJECT_ROOT / "src"
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))

from rational_kit.core.rational import make_rational  # noqa: E402

# 检测运行模式
LEARNING_MODE = os.environ.get("LEARNING_MODE", "0") == "1"


@pytest.fixture
def half():
    """1/2"""
    return make_rational(1, 2)


@pytest.fixture
def third():
    """1/3"""
    return make_rational(1, 3)


@pytest.fixture
def sample_rationals():
    """覆盖正负、整数、零的一组有理数"""
    return [
        make_rational(1, 2),
        make_rational(-3, 4),
        make_rational(7, 3),
        make_rational(5),
        make_rational(0),
        make_rational(-11, 6),
    ]


@pytest.fixture
def rng():
    """固定种子的 numpy 随机数生成器"""
    return np.random.default_rng(20240601)


def print_section(title: str):
    """打印章节标题"""
    if LEARNING_MODE:
        print(f"\n{'='*60}")
        print(f"  {title}")
        print(f"{'='*60}")


def print_concept(content: str):
    """打印概念说明"""
    if LEARNING_MODE:
        print(f"\n💡 {content}")


def print_code_example(code: str):
    """打印代码示例"""
    if LEARNING_MODE:
        print(f"\n📝 代码示例:")
        for line in code.strip().split("\n"):
            print(f"   {line}")
