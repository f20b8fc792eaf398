"""Result presentation for SubgramPy."""

from subgrampy.reports.console import format_word_rows, print_results
from subgrampy.reports.helpers import format_time

__all__ = [
    "format_time",
    "format_word_rows",
    "print_results",
]
