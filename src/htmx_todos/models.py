from __future__ import annotations

from typing import Iterable, NamedTuple, TypedDict


# PUBLIC_INTERFACE
class Task(TypedDict):
    """
    A single to-do item held by the task store.

    Fields:
    - id: Unique integer identifier, assigned by the store and never reused
    - text: Free-form label supplied at creation time (may be empty)
    - done: Completion flag, False at creation and flipped by toggle
    """

    id: int
    text: str
    done: bool


# PUBLIC_INTERFACE
class Summary(NamedTuple):
    """Completed/total counts read from one consistent state of the store."""

    completed: int
    total: int


# PUBLIC_INTERFACE
def summarize(tasks: Iterable[Task]) -> Summary:
    """Count completed and total tasks in an already-taken snapshot."""
    items = list(tasks)
    return Summary(completed=sum(1 for t in items if t["done"]), total=len(items))
