"""Utility functions for SubgramPy."""

from subgrampy.utils.constants import Constants
from subgrampy.utils.helpers import expand_file_path, is_ascii_alpha
from subgrampy.utils.logging import add_log_file_handler, setup_logger

__all__ = [
    "Constants",
    "add_log_file_handler",
    "expand_file_path",
    "is_ascii_alpha",
    "setup_logger",
]
