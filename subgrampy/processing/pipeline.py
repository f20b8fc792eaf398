"""Main processing pipeline orchestration."""

import time
from typing import Callable, Sequence, TextIO

from loguru import logger

from subgrampy.core import Config, generate_subsets, prompt_for_letters, validate_letters
from subgrampy.matching import finalize, match_subsets
from subgrampy.processing.stages import (
    SolveResult,
    generate_letter_subsets,
    load_dictionaries,
    match_candidates,
)
from subgrampy.reports import format_time, print_results


def solve(letters: str, dictionary: Sequence[str], jobs: int | None = None) -> list[str]:
    """Find the dictionary words buildable from a subset of letters.

    Args:
        letters: Raw letter sequence (validated and lowercased here)
        dictionary: Words sorted ascending
        jobs: Worker processes (defaults to CPU count)

    Returns:
        Matching words sorted ascending
    """
    letters = validate_letters(letters)
    words, _count = finalize(match_subsets(generate_subsets(letters), dictionary, jobs=jobs))
    return words


def run_pipeline(
    config: Config,
    input_func: Callable[[str], str] = input,
    stream: TextIO | None = None,
) -> SolveResult:
    """Prompt (if needed), load, generate, match and print.

    Args:
        config: Configuration object containing all settings
        input_func: Line reader used when config.letters is not set
        stream: Where results are printed (stdout by default)

    Returns:
        SolveResult with the sorted words and their count
    """
    verbose = config.verbose
    letters = config.letters or prompt_for_letters(input_func)

    start_time = time.time()

    # Stage 1: Load dictionary
    if verbose:
        logger.info("Stage 1: Loading dictionary")
    dict_data = load_dictionaries(config, verbose)

    # Stage 2: Generate subsets
    if verbose:
        logger.info(f"Stage 2: Generating letter subsets of '{letters}'")
    subset_result = generate_letter_subsets(letters, verbose)

    # Stage 3: Match candidates
    if verbose:
        logger.info("Stage 3: Matching candidates against dictionary")
    match_result = match_candidates(subset_result, dict_data, config, verbose)

    if verbose:
        logger.info(f"  Dictionary: {format_time(dict_data.elapsed_time)}")
        logger.info(f"  Subsets: {format_time(subset_result.elapsed_time)}")
        logger.info(f"  Matching: {format_time(match_result.elapsed_time)}")

    elapsed_time = time.time() - start_time

    # Stage 4: Output
    print_results(
        match_result.words,
        match_result.count,
        columns=config.columns,
        min_length=config.min_display_length,
        stream=stream,
        elapsed_time=elapsed_time,
    )

    return SolveResult(
        letters=letters,
        words=match_result.words,
        count=match_result.count,
        candidate_count=subset_result.candidate_count,
        elapsed_time=elapsed_time,
    )
