"""Dictionary matching for SubgramPy."""

from subgrampy.matching.matcher import find_words, is_word, iter_chunks, match_all, match_subsets
from subgrampy.matching.result_set import ResultSet, finalize
from subgrampy.matching.worker_context import WorkerContext, get_worker_context, init_worker

__all__ = [
    "ResultSet",
    "WorkerContext",
    "finalize",
    "find_words",
    "get_worker_context",
    "init_worker",
    "is_word",
    "iter_chunks",
    "match_all",
    "match_subsets",
]
