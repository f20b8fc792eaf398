"""Unit tests for letter subset generation.

Tests verify subset generation behavior. Each test has exactly one assertion.
"""

from itertools import combinations

from subgrampy.core import generate_subsets, max_subset_count


def _per_length_subsets(letters: str) -> list[str]:
    """Subsets deduplicated within each length only."""
    result = []
    for length in range(len(letters), 1, -1):
        seen = set()
        for indices in combinations(range(len(letters)), length):
            subset = "".join(letters[i] for i in indices)
            if subset not in seen:
                seen.add(subset)
                result.append(subset)
    return result


class TestGenerateSubsets:
    """Test subset generation behavior."""

    def test_generates_longest_subsets_first(self) -> None:
        """Subsets of 'cat' come out longest first, in index order."""
        assert generate_subsets("cat") == ["cat", "ca", "ct", "at"]

    def test_never_emits_single_letters(self) -> None:
        """Shortest subset has two letters."""
        assert min(len(s) for s in generate_subsets("abcde")) == 2

    def test_longest_subset_is_whole_input(self) -> None:
        """First subset is the input itself."""
        assert generate_subsets("stare")[0] == "stare"

    def test_distinct_letters_reach_count_bound(self) -> None:
        """Four distinct letters yield 2^4 - 5 subsets."""
        assert len(generate_subsets("abcd")) == max_subset_count(4)

    def test_repeated_letters_drop_duplicate_subsets(self) -> None:
        """Subset 'ab' of 'aab' appears once although two index pairs render it."""
        assert generate_subsets("aab") == ["aab", "aa", "ab"]

    def test_repeated_letters_stay_below_count_bound(self) -> None:
        """'aabb' yields six subsets, fewer than the bound of eleven."""
        assert len(generate_subsets("aabb")) == 6

    def test_output_has_no_duplicates(self) -> None:
        """No subset string is emitted twice."""
        subsets = generate_subsets("banana")
        assert len(subsets) == len(set(subsets))

    def test_subsets_preserve_source_order(self) -> None:
        """Letters keep their relative input order, so 'tc' is never produced."""
        assert "tc" not in generate_subsets("cat")

    def test_cross_length_suppression_never_fires(self) -> None:
        """Deduplicating across all lengths equals deduplicating per length."""
        assert generate_subsets("abracadab") == _per_length_subsets("abracadab")


class TestMaxSubsetCount:
    """Test the subset count bound."""

    def test_bound_for_ten_letters(self) -> None:
        """Ten letters allow 1013 subsets of length two or more."""
        assert max_subset_count(10) == 1013
