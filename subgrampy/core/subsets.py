"""Letter subset generation."""

from itertools import combinations

from subgrampy.utils import Constants


def generate_subsets(letters: str) -> list[str]:
    """Generate every distinct subset of the letters, longest first.

    For each length from ``len(letters)`` down to 2, all strictly increasing
    index combinations are rendered in index order. A rendered string is kept
    only the first time it is seen across the whole run, so repeated letters
    in the input never yield the same subset twice.

    Args:
        letters: Validated letter sequence

    Returns:
        Subset strings in generation order
    """
    seen: set[str] = set()
    subsets: list[str] = []

    for length in range(len(letters), Constants.MIN_SUBSET_LENGTH - 1, -1):
        for indices in combinations(range(len(letters)), length):
            subset = "".join(letters[i] for i in indices)
            if subset not in seen:
                seen.add(subset)
                subsets.append(subset)

    return subsets


def max_subset_count(length: int) -> int:
    """Upper bound on the number of subsets for a sequence of this length.

    Every non-empty index combination minus the single letters.
    """
    return 2**length - (length + 1)
