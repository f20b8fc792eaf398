"""Tests for worker context without global state."""

from multiprocessing import Pool

import pytest

from subgrampy.matching import WorkerContext, get_worker_context, init_worker
from subgrampy.matching.matcher import match_chunk_worker, match_subset_worker


# Module-level worker functions (needed for multiprocessing)
def _dictionary_size(_):
    """Worker that returns the size of its dictionary."""
    return len(get_worker_context().dictionary)


class TestWorkerContextBehavior:
    """Tests for WorkerContext behavior."""

    def test_context_can_be_created_from_dictionary(self):
        """Workers need context created from the loaded word list."""
        context = WorkerContext.from_dictionary(["act", "cat"])
        assert context.dictionary == ("act", "cat")

    def test_context_is_immutable(self):
        """Context fields cannot be reassigned."""
        context = WorkerContext.from_dictionary(["cat"])
        with pytest.raises(AttributeError):
            context.dictionary = ("dog",)  # type: ignore[misc]


class TestWorkerFunctions:
    """Tests for matcher worker functions run in-process."""

    def test_chunk_worker_reports_tested_and_found(self):
        """Chunk worker returns the chunk size and its hits."""
        init_worker(WorkerContext.from_dictionary(["act", "cat"]))
        assert match_chunk_worker(["cat", "cta", "act"]) == (3, ["cat", "act"])

    def test_subset_worker_expands_permutations(self):
        """Subset worker tests every ordering of its subset."""
        init_worker(WorkerContext.from_dictionary(["act", "cat", "tac"]))
        assert match_subset_worker(("", "tca")) == (6, ["act", "cat", "tac"])

    def test_subset_worker_keeps_task_prefix(self):
        """Subset worker only tests orderings that start with the task prefix."""
        init_worker(WorkerContext.from_dictionary(["act", "cat", "tac"]))
        assert match_subset_worker(("t", "ca")) == (2, ["tac"])


class TestMultiprocessingBehavior:
    """Tests for multiprocessing behavior without globals."""

    def test_workers_can_process_using_context(self):
        """Workers must be able to access and use context data."""
        context = WorkerContext.from_dictionary(["a", "b", "c"])

        with Pool(processes=2, initializer=init_worker, initargs=(context,)) as pool:
            results = pool.map(_dictionary_size, range(4))

        assert results == [3, 3, 3, 3]
