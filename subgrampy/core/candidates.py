"""Candidate pool construction."""

from typing import Iterable, Iterator

from subgrampy.core.permutations import count_permutations, iter_permutations
from subgrampy.core.subsets import generate_subsets


def iter_candidates(letters: str, subsets: Iterable[str] | None = None) -> Iterator[str]:
    """Lazily yield the candidate pool for letters.

    Args:
        letters: Validated letter sequence
        subsets: Precomputed subsets of letters (generated when omitted)

    Yields:
        Each subset's sorted permutations, subsets in generation order
    """
    if subsets is None:
        subsets = generate_subsets(letters)
    for subset in subsets:
        yield from iter_permutations(subset)


def build_candidate_pool(letters: str) -> list[str]:
    """Build the full candidate pool for letters.

    Duplicates across different subsets are kept; they collapse in the
    result set during matching.
    """
    return list(iter_candidates(letters))


def count_candidates(subsets: Iterable[str]) -> int:
    """Size of the candidate pool for the given subsets, without building it."""
    return sum(count_permutations(subset) for subset in subsets)


def iter_subset_tasks(subset: str, max_candidates: int) -> Iterator[tuple[str, str]]:
    """Split a subset's permutations into tasks of bounded size.

    Each task is a (prefix, remainder) pair standing for the prefix followed
    by every distinct ordering of the remainder. Large subsets are split on
    each distinct next letter until a remainder has at most max_candidates
    orderings, so together the tasks cover the subset's permutations exactly
    once and in ascending order.

    Args:
        subset: Subset string
        max_candidates: Largest number of candidates a task may stand for

    Yields:
        (prefix, remainder) pairs
    """

    def split(prefix: str, remainder: str) -> Iterator[tuple[str, str]]:
        if len(remainder) <= 1 or count_permutations(remainder) <= max_candidates:
            yield prefix, remainder
            return
        for letter in sorted(set(remainder)):
            yield from split(prefix + letter, remainder.replace(letter, "", 1))

    yield from split("", subset)
