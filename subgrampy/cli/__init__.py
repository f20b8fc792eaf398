"""Command-line interface for SubgramPy."""

from subgrampy.cli.parser import create_parser

__all__ = ["create_parser"]
