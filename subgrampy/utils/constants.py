"""Constants shared across SubgramPy."""


class Constants:
    """Fixed limits and defaults."""

    # Accepted input length (inclusive)
    MIN_LETTERS = 3
    MAX_LETTERS = 10

    # Shortest subset (and therefore shortest word) ever generated
    MIN_SUBSET_LENGTH = 2

    # Matching
    DEFAULT_CHUNK_SIZE = 10000

    # Presentation
    DEFAULT_COLUMNS = 10
    DEFAULT_MIN_DISPLAY_LENGTH = 3

    # Built-in word list (english-words package)
    BUILTIN_WORD_LISTS = ("web2",)
