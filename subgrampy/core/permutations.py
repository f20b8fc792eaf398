"""Distinct permutation generation."""

from collections import Counter
from itertools import permutations
from math import factorial, prod
from typing import Iterator


def _next_permutation(chars: list[str]) -> bool:
    """Rearrange chars in place into the next lexicographic permutation.

    Returns False (leaving chars untouched) when chars is already the last one.
    """
    pivot = len(chars) - 2
    while pivot >= 0 and chars[pivot] >= chars[pivot + 1]:
        pivot -= 1
    if pivot < 0:
        return False

    successor = len(chars) - 1
    while chars[successor] <= chars[pivot]:
        successor -= 1
    chars[pivot], chars[successor] = chars[successor], chars[pivot]
    chars[pivot + 1 :] = reversed(chars[pivot + 1 :])
    return True


def iter_permutations(subset: str) -> Iterator[str]:
    """Yield each distinct ordering of subset in ascending order."""
    chars = sorted(subset)

    # itertools already emits sorted output for sorted, distinct input
    if len(set(chars)) == len(chars):
        yield from map("".join, permutations(chars))
        return

    yield "".join(chars)
    while _next_permutation(chars):
        yield "".join(chars)


def generate_permutations(subset: str) -> list[str]:
    """Generate all distinct orderings of subset, sorted ascending.

    Repeated characters collapse, so ``"aab"`` yields three strings, not six.
    """
    return list(iter_permutations(subset))


def count_permutations(subset: str) -> int:
    """Number of distinct orderings: n! / product of each letter's multiplicity!."""
    return factorial(len(subset)) // prod(factorial(n) for n in Counter(subset).values())
