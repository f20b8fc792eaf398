"""Pipeline stages for finding words."""

from .data_models import (
    DictionaryData,
    MatchResult,
    SolveResult,
    StageResult,
    SubsetGenerationResult,
)
from .dictionary_loading import load_dictionaries
from .matching import match_candidates
from .subset_generation import generate_letter_subsets

__all__ = [
    # Data models
    "DictionaryData",
    "MatchResult",
    "SolveResult",
    "StageResult",
    "SubsetGenerationResult",
    # Stage functions
    "generate_letter_subsets",
    "load_dictionaries",
    "match_candidates",
]
