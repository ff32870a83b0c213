"""Type-erased CRUD handle.

``AnyCRUD`` wraps any object implementing the CRUD contract and exposes the
same four operations, so callers can hold an ``AnyCRUD[Note]`` without knowing
whether an in-memory list, a file or a remote service sits behind it::

    notes: AnyCRUD[Note] = AnyCRUD(InMemoryPersistenceService(Note), model_type=Note)

The model class stays visible (``model_type``) and is checked once, when the
wrapper is built. The backing implementation is not: it is only reachable
through the forwarding callables captured at construction.
"""
from __future__ import annotations
from typing import Any, Generic, List, Optional, TypeVar

from .base_crud import Filter, missing_operations
from .errors import ContractViolation, TypeMismatch
from .logging_util import debug

M = TypeVar("M")


class AnyCRUD(Generic[M]):
    """Forwarding facade over one CRUD implementation.

    All four callables are bound methods of the same base instance, taken at
    construction. The handle is immutable afterwards.
    """

    __slots__ = ("model_type", "_create", "_read", "_update", "_delete")

    def __init__(self, base: Any, model_type: Optional[type] = None):
        missing = missing_operations(base)
        if missing:
            raise ContractViolation(base, missing)
        if model_type is not None and base.model_type is not model_type:
            raise TypeMismatch(model_type, base.model_type)
        _set = object.__setattr__
        _set(self, "model_type", base.model_type)
        _set(self, "_create", base.create)
        _set(self, "_read", base.read)
        _set(self, "_update", base.update)
        _set(self, "_delete", base.delete)
        debug("crud_erased", model_type=base.model_type.__name__)

    def create(self, model: M) -> None:
        return self._create(model)

    def read(self, filter: Optional[Filter] = None) -> List[M]:
        return self._read(filter)

    def update(self, filter: Filter, new_model: M) -> None:
        return self._update(filter, new_model)

    def delete(self, filter: Filter) -> None:
        return self._delete(filter)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __repr__(self) -> str:
        return f"AnyCRUD[{self.model_type.__name__}]"


def erase(base: Any, model_type: Optional[type] = None) -> AnyCRUD[Any]:
    """Build an ``AnyCRUD`` over base (functional spelling of the constructor)."""
    return AnyCRUD(base, model_type=model_type)

