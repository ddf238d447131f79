"""测试05: 命令行入口与日志开关。

学习目标:
1. 确保各子命令输出与库函数一致
2. 确保参数错误返回非零退出码而不是抛出异常
3. 确保 --verbose 只在包 logger 上挂载控制台 handler
"""

import logging

import pytest

from conftest import print_section, print_concept
from rational_kit import __version__
from rational_kit.interface.cli import build_parser, main
from rational_kit.runtime.logging_utils import (
    ROOT_LOGGER_NAME,
    configure_verbosity,
    ensure_console_handler,
    get_logger,
)


class TestCliCommands:
    @pytest.mark.parametrize(
        "argv,expected",
        [
            (["reduce", "4", "8"], "1/2"),
            (["reduce", "3", "-6"], "-1/2"),
            (["reduce", "6", "3"], "2"),
            (["gcd", "-12", "18"], "6"),
            (["lcm", "4", "6"], "12"),
            (["round", "1/2"], "0"),
            (["round", "7/3", "--mode", "up"], "3"),
            (["round", "7/3", "--mode", "down"], "2"),
            (["percent", "1/2"], "50%"),
            (["percent", "1/3", "--with-sign"], "+33%"),
        ],
    )
    def test_command_output(self, argv, expected, capsys):
        print_section("CLI 子命令")
        print_concept("CLI 只做参数解析，计算全部委托给库函数")

        assert main(argv) == 0
        assert capsys.readouterr().out.strip() == expected

    @pytest.mark.parametrize(
        "argv,expected",
        [
            (["round", "-7/2"], "-4"),
            (["round", "-7/2", "--mode", "up"], "-3"),
            (["round", "-1/2"], "-1"),
            (["percent", "-1/3"], "-33%"),
            (["percent", "-25%"], "-25%"),
            (["reduce", "-4", "-8"], "1/2"),
        ],
    )
    def test_negative_values_are_positionals(self, argv, expected, capsys):
        print_concept("-7/2 这样的负分数应作为取值解析，而不是未知选项")
        assert main(argv) == 0
        assert capsys.readouterr().out.strip() == expected

    def test_convert_negative_fraction(self, capsys):
        assert main(["convert", "-7/2", "--int-dtype", "int8"]) == 0
        lines = capsys.readouterr().out.strip().splitlines()
        assert lines[0] == "int8: -4"
        assert lines[1] == "float64: -3.5"

    def test_unknown_option_still_rejected(self):
        with pytest.raises(SystemExit):
            main(["round", "1/2", "--bogus"])

    def test_convert_command(self, capsys):
        assert main(["convert", "300", "--int-dtype", "int8", "--float-dtype", "float32"]) == 0
        lines = capsys.readouterr().out.strip().splitlines()
        assert lines[0] == "int8: 44"
        assert lines[1] == "float32: 300.0"

    def test_zero_denominator_returns_error_code(self, capsys):
        assert main(["reduce", "1", "0"]) == 1
        assert "错误" in capsys.readouterr().out

    def test_malformed_value_returns_error_code(self, capsys):
        assert main(["round", "abc"]) == 1

    def test_no_command_prints_help(self, capsys):
        assert main([]) == 0
        assert "rational-kit" in capsys.readouterr().out

    def test_parser_defaults(self):
        args = build_parser().parse_args(["round", "1/2"])
        assert args.mode == "nearest"
        assert args.verbose is False

    def test_version(self, capsys):
        with pytest.raises(SystemExit):
            main(["--version"])
        assert __version__ in capsys.readouterr().out


class TestLogging:
    def test_child_logger_names(self):
        assert get_logger().name == ROOT_LOGGER_NAME
        assert get_logger("ranges").name == "rational_kit.ranges"
        assert get_logger("rational_kit.helpers.ranges").name == "rational_kit.helpers.ranges"

    def test_console_handler_toggle(self):
        logger = logging.getLogger("rational_kit.test_toggle")
        ensure_console_handler(logger, enabled=True)
        ensure_console_handler(logger, enabled=True)
        named = [h for h in logger.handlers if h.name == "rational_kit_console"]
        assert len(named) == 1
        assert logger.propagate is False

        ensure_console_handler(logger, enabled=False)
        assert not [h for h in logger.handlers if h.name == "rational_kit_console"]

    def test_configure_verbosity(self):
        logger = configure_verbosity(True)
        try:
            assert logger.level == logging.DEBUG
            assert any(h.name == "rational_kit_console" for h in logger.handlers)
        finally:
            configure_verbosity(False)
            logger.propagate = True
            logger.setLevel(logging.NOTSET)
        assert not any(h.name == "rational_kit_console" for h in logger.handlers)
