"""Dictionary loading."""

from english_words import get_english_words_set  # type: ignore[import-untyped]
from loguru import logger

from subgrampy.utils import Constants, expand_file_path, is_ascii_alpha


def load_dictionary(filepath: str, verbose: bool = False) -> list[str]:
    """Load a word list file into a sorted list of lowercase words.

    The file holds one word per line in any case. Blank lines are skipped.
    Duplicates are kept; the matcher only needs the list to be sorted.

    Args:
        filepath: Path to the word list
        verbose: Whether to log progress

    Returns:
        Words sorted ascending
    """
    filepath = expand_file_path(filepath) or filepath

    if verbose:
        logger.info(f"  Loading dictionary from {filepath}...")

    words = []
    try:
        with open(filepath, "r", encoding="utf-8") as f:
            for line in f:
                word = line.strip().lower()
                if word:
                    words.append(word)
    except FileNotFoundError:
        logger.error(f"✗ Dictionary file not found: {filepath}")
        logger.error("  Please check the file path and try again")
        raise
    except PermissionError:
        logger.error(f"✗ Permission denied reading file: {filepath}")
        logger.error("  Please check file permissions and try again")
        raise
    except UnicodeDecodeError as e:
        logger.error(f"✗ Encoding error reading {filepath}: {e}")
        logger.error("  Please ensure the file is UTF-8 encoded")
        raise
    except IsADirectoryError:
        logger.error(f"✗ Dictionary path is a directory: {filepath}")
        raise

    words.sort()

    if verbose:
        logger.info(f"  Loaded {len(words)} words")

    return words


def load_builtin_dictionary(verbose: bool = False) -> list[str]:
    """Load the english-words word list as a sorted list of lowercase words."""
    if verbose:
        logger.info("  Loading built-in English words dictionary...")

    try:
        words: set[str] = get_english_words_set(list(Constants.BUILTIN_WORD_LISTS), lower=True)
    except Exception as e:
        logger.error(f"✗ Failed to load English words dictionary: {e}")
        logger.error("  This may indicate a problem with the 'english-words' package")
        logger.error("  Try reinstalling: pip install english-words")
        raise RuntimeError("Failed to load built-in dictionary") from e

    # Hyphenated and accented entries can never be formed from validated letters
    dictionary = sorted(word for word in words if is_ascii_alpha(word))

    if verbose:
        logger.info(f"  Loaded {len(dictionary)} words")

    return dictionary
