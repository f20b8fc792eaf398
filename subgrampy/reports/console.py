"""Console output of found words."""

import sys
from typing import TextIO

from subgrampy.reports.helpers import format_time
from subgrampy.utils import Constants


def format_word_rows(
    words: list[str],
    columns: int = Constants.DEFAULT_COLUMNS,
    min_length: int = Constants.DEFAULT_MIN_DISPLAY_LENGTH,
) -> list[str]:
    """Lay words out as tab-separated rows.

    Words shorter than min_length are left out of the grid.

    Args:
        words: Words in display order
        columns: Words per row
        min_length: Shortest word to show

    Returns:
        One string per row
    """
    shown = [word for word in words if len(word) >= min_length]
    return ["\t".join(shown[i : i + columns]) for i in range(0, len(shown), columns)]


def print_results(
    words: list[str],
    count: int,
    columns: int = Constants.DEFAULT_COLUMNS,
    min_length: int = Constants.DEFAULT_MIN_DISPLAY_LENGTH,
    stream: TextIO | None = None,
    elapsed_time: float | None = None,
) -> None:
    """Write the word grid, the total count and, if given, the elapsed time."""
    out = stream if stream is not None else sys.stdout
    for row in format_word_rows(words, columns, min_length):
        out.write(row + "\n")
    out.write(f"\nTotal words found: {count}\n")
    if elapsed_time is not None:
        out.write(f"Time elapsed: {format_time(elapsed_time)}\n")
