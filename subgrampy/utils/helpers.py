"""Shared utility functions for SubgramPy."""

import os


def expand_file_path(filepath: str | None) -> str | None:
    """Expand user home directory in file path.

    Args:
        filepath: File path (may contain ~)

    Returns:
        Expanded file path string, or None if filepath is None
    """
    if not filepath:
        return None
    return os.path.expanduser(filepath)


def is_ascii_alpha(text: str) -> bool:
    """Check that text is non-empty and made only of ASCII letters."""
    return text.isascii() and text.isalpha()
