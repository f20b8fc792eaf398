"""Stage 2: Subset generation."""

import time

from loguru import logger

from subgrampy.core import count_candidates, generate_subsets
from subgrampy.processing.stages.data_models import SubsetGenerationResult


def generate_letter_subsets(letters: str, verbose: bool = False) -> SubsetGenerationResult:
    """Generate the subsets of letters and size their candidate pool."""
    start_time = time.time()

    subsets = generate_subsets(letters)
    candidate_count = count_candidates(subsets)

    if verbose:
        logger.info(f"  {len(subsets)} letter subsets, {candidate_count} candidates to test")
    logger.debug(f"Subsets for '{letters}': {', '.join(subsets)}")

    return SubsetGenerationResult(
        letters=letters,
        subsets=subsets,
        candidate_count=candidate_count,
        elapsed_time=time.time() - start_time,
    )
