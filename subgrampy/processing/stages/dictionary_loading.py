"""Stage 1: Dictionary loading."""

import time

from loguru import logger

from subgrampy.core import Config
from subgrampy.data import load_builtin_dictionary, load_dictionary
from subgrampy.processing.stages.data_models import DictionaryData


def load_dictionaries(config: Config, verbose: bool = False) -> DictionaryData:
    """Load the configured word list, or the built-in one.

    Args:
        config: Configuration object
        verbose: Whether to print verbose output

    Returns:
        DictionaryData with words sorted ascending
    """
    start_time = time.time()

    if config.dictionary:
        words = load_dictionary(config.dictionary, verbose)
        source = config.dictionary
    else:
        words = load_builtin_dictionary(verbose)
        source = "built-in"

    if not words:
        logger.warning(f"⚠️  Dictionary {source} is empty, no words can be found")

    return DictionaryData(words=words, source=source, elapsed_time=time.time() - start_time)
