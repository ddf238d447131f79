"""Interface subpackage public exports."""

from .cli import build_parser, main

__all__ = ["build_parser", "main"]
