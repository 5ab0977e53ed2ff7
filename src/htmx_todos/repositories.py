from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from contextlib import contextmanager
from functools import lru_cache
from threading import Lock
from typing import Iterator, List, Optional

from .exceptions import StoreLockError
from .models import Summary, Task, summarize
from .settings import get_settings

logger = logging.getLogger(__name__)


# PUBLIC_INTERFACE
class TaskRepository(ABC):
    """Abstract contract for the shared task store."""

    @abstractmethod
    def create(self, text: str) -> Task:
        """Append a new Task with the next identifier and return a copy of it."""

    @abstractmethod
    def toggle(self, task_id: int) -> Optional[Task]:
        """Flip the done flag of a Task. Return a copy of it, or None if no Task has that id."""

    @abstractmethod
    def snapshot(self) -> List[Task]:
        """Return copies of all Tasks in insertion order, taken at a single point in time."""

    @abstractmethod
    def summary(self) -> Summary:
        """Return completed and total counts taken at a single point in time."""


class InMemoryTaskRepository(TaskRepository):
    """
    Thread-safe in-memory task store.

    One lock guards both the task list and the id counter. Every operation
    holds it for its whole duration. If an operation fails while holding the
    lock, the store is poisoned and every later operation raises
    StoreLockError instead of touching possibly inconsistent data.
    """

    def __init__(self, lock_timeout: float = 5.0) -> None:
        self._lock = Lock()
        self._lock_timeout = lock_timeout
        self._poisoned = False
        self._tasks: List[Task] = []
        self._next_id = 0

    @property
    def poisoned(self) -> bool:
        return self._poisoned

    @contextmanager
    def _guard(self, operation: str) -> Iterator[None]:
        if not self._lock.acquire(timeout=self._lock_timeout):
            logger.debug("Timed out after %.1fs waiting for the store lock (%s)", self._lock_timeout, operation)
            raise StoreLockError(operation)
        try:
            if self._poisoned:
                raise StoreLockError(operation)
            try:
                yield
            except BaseException:
                self._poisoned = True
                logger.exception("Store operation %r failed while holding the lock; store is poisoned", operation)
                raise
        finally:
            self._lock.release()

    def create(self, text: str) -> Task:
        with self._guard("create"):
            task: Task = {"id": self._next_id, "text": text, "done": False}
            self._tasks.append(task)
            self._next_id += 1
            return task.copy()

    def toggle(self, task_id: int) -> Optional[Task]:
        with self._guard("toggle"):
            for task in self._tasks:
                if task["id"] == task_id:
                    task["done"] = not task["done"]
                    return task.copy()
            return None

    def snapshot(self) -> List[Task]:
        with self._guard("snapshot"):
            # Return copies to avoid external mutation
            return [t.copy() for t in self._tasks]

    def summary(self) -> Summary:
        with self._guard("summary"):
            return summarize(self._tasks)


# PUBLIC_INTERFACE
@lru_cache(maxsize=1)
def get_repository() -> TaskRepository:
    """
    Return the process-wide task store.

    The store lives for the lifetime of the process; tests swap it out through
    FastAPI's dependency_overrides.
    """
    settings = get_settings()
    return InMemoryTaskRepository(lock_timeout=settings.lock_timeout)
