"""Data loading for SubgramPy."""

from subgrampy.data.dictionary import load_builtin_dictionary, load_dictionary

__all__ = [
    "load_builtin_dictionary",
    "load_dictionary",
]
