"""Thread-safe accumulator for matched words."""

import threading
from typing import Iterable, Iterator


class ResultSet:
    """Deduplicated collection of matched words shared between workers.

    Every membership check and insert happens as one step under a single
    lock, so two concurrent callers can never both record the same word as
    new. Once frozen, the set rejects further inserts.
    """

    def __init__(self, words: Iterable[str] = ()):
        self._words: set[str] = set(words)
        self._lock = threading.Lock()
        self._frozen = False

    def add(self, word: str) -> bool:
        """Insert word if absent.

        Returns:
            True if the word was new, False if it was already present

        Raises:
            RuntimeError: If the set has been frozen
        """
        with self._lock:
            self._check_not_frozen()
            if word in self._words:
                return False
            self._words.add(word)
            return True

    def add_all(self, words: Iterable[str]) -> int:
        """Insert several words under one lock acquisition.

        Returns:
            Number of words that were new
        """
        added = 0
        with self._lock:
            self._check_not_frozen()
            for word in words:
                if word not in self._words:
                    self._words.add(word)
                    added += 1
        return added

    def freeze(self) -> None:
        """Stop accepting inserts."""
        with self._lock:
            self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    def snapshot(self) -> frozenset[str]:
        """Return an immutable copy of the current contents."""
        with self._lock:
            return frozenset(self._words)

    def _check_not_frozen(self) -> None:
        if self._frozen:
            raise RuntimeError("ResultSet is frozen and cannot be modified")

    def __contains__(self, word: object) -> bool:
        with self._lock:
            return word in self._words

    def __len__(self) -> int:
        with self._lock:
            return len(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(self.snapshot())


def finalize(result_set: ResultSet | Iterable[str]) -> tuple[list[str], int]:
    """Sort the matched words for display.

    Args:
        result_set: Matched words

    Returns:
        Tuple of (words sorted ascending, number of words)
    """
    if isinstance(result_set, ResultSet):
        words = sorted(result_set.snapshot())
    else:
        words = sorted(set(result_set))
    return words, len(words)
