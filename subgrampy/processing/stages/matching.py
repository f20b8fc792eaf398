"""Stage 3: Parallel matching and finalizing."""

import time

from subgrampy.core import Config
from subgrampy.matching import finalize, match_subsets
from subgrampy.processing.stages.data_models import (
    DictionaryData,
    MatchResult,
    SubsetGenerationResult,
)


def match_candidates(
    subset_result: SubsetGenerationResult,
    dict_data: DictionaryData,
    config: Config,
    verbose: bool = False,
) -> MatchResult:
    """Test every permutation of every subset against the dictionary.

    Args:
        subset_result: Output of the subset generation stage
        dict_data: Output of the dictionary loading stage
        config: Configuration object
        verbose: Whether to show progress

    Returns:
        MatchResult with the found words sorted ascending
    """
    start_time = time.time()

    result_set = match_subsets(
        subset_result.subsets,
        dict_data.words,
        jobs=config.jobs,
        chunk_size=config.chunk_size,
        verbose=verbose,
        total=subset_result.candidate_count,
    )
    words, count = finalize(result_set)

    return MatchResult(words=words, count=count, elapsed_time=time.time() - start_time)
