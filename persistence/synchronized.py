"""Lock-serialized CRUD adapter.

Neither ``InMemoryPersistenceService`` nor ``AnyCRUD`` is thread-safe: update
and delete rebuild the whole backing list. Wrap the implementation in
``SynchronizedCRUD`` before sharing it between threads; the result still
satisfies the contract, so it can be erased like any other implementation.
"""
from __future__ import annotations
import threading
from typing import Any, Generic, List, Optional, TypeVar

from .base_crud import Filter, missing_operations
from .errors import ContractViolation

M = TypeVar("M")


class SynchronizedCRUD(Generic[M]):
    def __init__(self, base: Any, lock: Optional[threading.RLock] = None):
        missing = missing_operations(base)
        if missing:
            raise ContractViolation(base, missing)
        self.model_type = base.model_type
        self._base = base
        # Reentrant so a filter may read through the same handle.
        self._lock = lock or threading.RLock()

    def create(self, model: M) -> None:
        with self._lock:
            self._base.create(model)

    def read(self, filter: Optional[Filter] = None) -> List[M]:
        with self._lock:
            return self._base.read(filter)

    def update(self, filter: Filter, new_model: M) -> None:
        with self._lock:
            self._base.update(filter, new_model)

    def delete(self, filter: Filter) -> None:
        with self._lock:
            self._base.delete(filter)

    def __repr__(self) -> str:
        return f"SynchronizedCRUD({self._base!r})"
