from __future__ import annotations


# PUBLIC_INTERFACE
class StoreLockError(RuntimeError):
    """
    Raised when a store operation cannot acquire the task store lock.

    This happens when acquisition times out or when a previous holder failed
    while holding the lock (the store is poisoned). The operation label names
    the store call that failed so the HTTP layer can report it.
    """

    def __init__(self, operation: str) -> None:
        super().__init__(f"could not acquire the task store lock: {operation}")
        self.operation = operation
