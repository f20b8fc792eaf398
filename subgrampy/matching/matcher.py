"""Parallel dictionary matching of candidate strings."""

from bisect import bisect_left
from itertools import islice
from multiprocessing import Pool, cpu_count
from typing import Any, Iterable, Iterator, Sequence

from loguru import logger
from tqdm import tqdm

from subgrampy.core.candidates import iter_subset_tasks
from subgrampy.core.permutations import count_permutations, iter_permutations
from subgrampy.matching.result_set import ResultSet
from subgrampy.matching.worker_context import WorkerContext, get_worker_context, init_worker
from subgrampy.utils import Constants


def is_word(candidate: str, dictionary: Sequence[str]) -> bool:
    """Binary search for candidate in a dictionary sorted ascending."""
    index = bisect_left(dictionary, candidate)
    return index < len(dictionary) and dictionary[index] == candidate


def find_words(candidates: Iterable[str], dictionary: Sequence[str]) -> list[str]:
    """Return the candidates present in the dictionary, in input order."""
    return [candidate for candidate in candidates if is_word(candidate, dictionary)]


def iter_chunks(candidates: Iterable[str], chunk_size: int) -> Iterator[list[str]]:
    """Split candidates into lists of at most chunk_size items."""
    iterator = iter(candidates)
    while chunk := list(islice(iterator, chunk_size)):
        yield chunk


def match_chunk_worker(chunk: list[str]) -> tuple[int, list[str]]:
    """Worker function: test one chunk of candidates.

    Returns:
        Tuple of (number of candidates tested, words found)
    """
    context = get_worker_context()
    return len(chunk), find_words(chunk, context.dictionary)


def _match_subset_task(task: tuple[str, str], dictionary: Sequence[str]) -> tuple[int, list[str]]:
    prefix, remainder = task
    candidates = (prefix + ordering for ordering in iter_permutations(remainder))
    return count_permutations(remainder), find_words(candidates, dictionary)


def match_subset_worker(task: tuple[str, str]) -> tuple[int, list[str]]:
    """Worker function: expand one (prefix, remainder) task and test it.

    Returns:
        Tuple of (number of candidates tested, words found)
    """
    return _match_subset_task(task, get_worker_context().dictionary)


def _resolve_jobs(jobs: int | None) -> int:
    return jobs if jobs is not None else cpu_count()


def _collect(
    results: Iterable[tuple[int, list[str]]],
    result_set: ResultSet,
    total: int | None,
    verbose: bool,
) -> None:
    """Insert worker hits into the result set, advancing the progress bar."""
    progress: Any = tqdm(total=total, desc="Matching candidates", unit="cand", disable=not verbose)
    with progress:
        for tested, words in results:
            result_set.add_all(words)
            progress.update(tested)


def _run_pool(worker, tasks: Iterable, dictionary: Sequence[str], jobs: int, chunksize: int):
    """Yield worker results from a pool sharing one read-only dictionary."""
    context = WorkerContext.from_dictionary(dictionary)
    with Pool(processes=jobs, initializer=init_worker, initargs=(context,)) as pool:
        yield from pool.imap_unordered(worker, tasks, chunksize=chunksize)


def match_all(
    candidates: Iterable[str],
    dictionary: Sequence[str],
    jobs: int | None = None,
    chunk_size: int = Constants.DEFAULT_CHUNK_SIZE,
    verbose: bool = False,
    total: int | None = None,
) -> ResultSet:
    """Find every candidate that is a dictionary word.

    Candidates are consumed lazily in chunks, so a generator never has to be
    fully materialized. Misses, including malformed candidates, are silently
    skipped.

    Args:
        candidates: Strings to test, duplicates allowed
        dictionary: Words sorted ascending (not re-sorted here)
        jobs: Worker processes (defaults to CPU count, 1 runs in-process)
        chunk_size: Candidates per worker task
        verbose: Whether to show a progress bar
        total: Number of candidates, for the progress bar

    Returns:
        Frozen ResultSet holding each matched word once
    """
    jobs = _resolve_jobs(jobs)
    result_set = ResultSet()
    chunks = iter_chunks(candidates, chunk_size)

    if verbose:
        logger.info(f"  Using {jobs} worker{'s' if jobs != 1 else ''}")

    if jobs > 1:
        results: Iterable[tuple[int, list[str]]] = _run_pool(
            match_chunk_worker, chunks, dictionary, jobs, chunksize=1
        )
    else:
        results = ((len(chunk), find_words(chunk, dictionary)) for chunk in chunks)

    _collect(results, result_set, total, verbose)
    result_set.freeze()
    return result_set


def match_subsets(
    subsets: Iterable[str],
    dictionary: Sequence[str],
    jobs: int | None = None,
    chunk_size: int = Constants.DEFAULT_CHUNK_SIZE,
    verbose: bool = False,
    total: int | None = None,
) -> ResultSet:
    """Find every dictionary word among the permutations of the subsets.

    Equivalent to ``match_all`` over the candidate pool of the subsets, but
    workers expand the permutations themselves so the pool never leaves the
    worker. Subsets with more than chunk_size permutations are split into
    several tasks, one task per worker call.

    Args:
        subsets: Subset strings, as produced by generate_subsets
        dictionary: Words sorted ascending (not re-sorted here)
        jobs: Worker processes (defaults to CPU count, 1 runs in-process)
        chunk_size: Largest number of candidates per worker task
        verbose: Whether to show a progress bar
        total: Number of candidates, for the progress bar

    Returns:
        Frozen ResultSet holding each matched word once
    """
    jobs = _resolve_jobs(jobs)
    result_set = ResultSet()
    tasks = (task for subset in subsets for task in iter_subset_tasks(subset, chunk_size))

    if verbose:
        logger.info(f"  Using {jobs} worker{'s' if jobs != 1 else ''}")

    if jobs > 1:
        results: Iterable[tuple[int, list[str]]] = _run_pool(
            match_subset_worker, tasks, dictionary, jobs, chunksize=1
        )
    else:
        results = (_match_subset_task(task, dictionary) for task in tasks)

    _collect(results, result_set, total, verbose)
    result_set.freeze()
    return result_set
