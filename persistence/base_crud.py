"""CRUD capability contract.

Any persistence service (in-memory, file, network) plugs in by exposing the
four operations below plus ``model_type``, the one model class every operation
on that instance works with. Structural typing: no base class to inherit.
"""
from __future__ import annotations
from typing import Any, Callable, List, Optional, Protocol, TypeVar, Union, runtime_checkable

from .predicates import Predicate

M = TypeVar("M")

Filter = Union[Predicate[Any], Callable[[Any], bool]]

CONTRACT_OPERATIONS = ("create", "read", "update", "delete")


@runtime_checkable
class CRUD(Protocol[M]):
    model_type: type

    def create(self, model: M) -> None:
        """Append one model to the backing store."""
        ...

    def read(self, filter: Optional[Filter] = None) -> List[M]:
        """Return a new list of stored models; all of them when filter is None."""
        ...

    def update(self, filter: Filter, new_model: M) -> None:
        """Drop every model matching filter, then append new_model once."""
        ...

    def delete(self, filter: Filter) -> None:
        """Drop every model matching filter; the rest keep their order."""
        ...


def matches(filter: Filter, model: Any) -> bool:
    """Evaluate a filter against one model."""
    if isinstance(filter, Predicate):
        return filter.evaluate(model)
    return bool(filter(model))


def missing_operations(obj: object) -> List[str]:
    """Names of contract members obj lacks (empty list when it conforms)."""
    missing = [name for name in CONTRACT_OPERATIONS if not callable(getattr(obj, name, None))]
    if not isinstance(getattr(obj, "model_type", None), type):
        missing.insert(0, "model_type")
    return missing
