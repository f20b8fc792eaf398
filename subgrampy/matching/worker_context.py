"""Worker context for multiprocessing without global state."""

import threading
from dataclasses import dataclass
from typing import Sequence


@dataclass(frozen=True)
class WorkerContext:
    """Immutable context for matcher workers.

    Attributes:
        dictionary: Words sorted ascending, shared read-only by every worker
    """

    dictionary: tuple[str, ...]

    @classmethod
    def from_dictionary(cls, dictionary: Sequence[str]) -> "WorkerContext":
        """Create WorkerContext from an already sorted dictionary."""
        return cls(dictionary=tuple(dictionary))


# Thread-local storage for worker context
_worker_context = threading.local()


def init_worker(context: WorkerContext) -> None:
    """Initialize worker process with context in thread-local storage.

    Args:
        context: WorkerContext to store in thread-local storage
    """
    _worker_context.value = context


def get_worker_context() -> WorkerContext:
    """Get the current worker's context from thread-local storage.

    Raises:
        RuntimeError: If called before init_worker
    """
    try:
        return _worker_context.value
    except AttributeError as e:
        raise RuntimeError("Worker context not initialized. Call init_worker first.") from e
