"""
统一的异常类定义
=====================================
为 rational-kit 项目定义自定义异常，便于错误处理和调试

异常层级：
    RationalKitError (基类)
    └── InvalidArgumentError - 参数违反前置条件（分母为零、零的倒数等）
"""


class RationalKitError(Exception):
    """rational-kit 项目的基础异常类

    所有其他异常都应该继承此类，便于用户捕获所有项目相关的错误。

    Example:
        >>> try:
        ...     value = make_rational(1, 0)
        >>> except RationalKitError as e:
        ...     print(f"rational-kit error: {e}")
    """

    pass


class InvalidArgumentError(RationalKitError, ValueError):
    """参数错误

    调用违反前置条件时同步抛出，没有重试或恢复逻辑。
    同时继承 ValueError，便于按标准库习惯捕获。

    Examples:
        - 构造有理数时分母为 0
        - 对 0 取倒数
        - 无法解析的有理数字符串
        - 空的加权随机选择集合
    """

    pass
