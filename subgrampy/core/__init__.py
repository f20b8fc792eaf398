"""Core domain logic for SubgramPy."""

from .candidates import (
    build_candidate_pool,
    count_candidates,
    iter_candidates,
    iter_subset_tasks,
)
from .config import Config, load_config
from .letters import InvalidLettersError, prompt_for_letters, validate_letters
from .permutations import count_permutations, generate_permutations, iter_permutations
from .subsets import generate_subsets, max_subset_count

__all__ = [
    "Config",
    "InvalidLettersError",
    "build_candidate_pool",
    "count_candidates",
    "count_permutations",
    "generate_permutations",
    "generate_subsets",
    "iter_candidates",
    "iter_permutations",
    "iter_subset_tasks",
    "load_config",
    "max_subset_count",
    "prompt_for_letters",
    "validate_letters",
]
