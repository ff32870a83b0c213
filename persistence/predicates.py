"""Filter values for CRUD reads, updates and deletes.

A filter is anything callable as ``filter(model) -> bool``. ``Predicate`` adds
composition and a few constructors on top of a plain callable:

    adults = Predicate.where(kind="person") & Predicate(lambda p: p.age >= 18)
    store.read(adults)

The CRUD layer never inspects a filter; it only evaluates it per model.
"""
from __future__ import annotations
from typing import Any, Callable, Generic, TypeVar

M = TypeVar("M")

_MISSING = object()


class Predicate(Generic[M]):
    __slots__ = ("_fn", "_label")

    def __init__(self, fn: Callable[[M], bool], label: str | None = None):
        if not callable(fn):
            raise TypeError(f"predicate must be callable, got {type(fn).__name__}")
        self._fn = fn
        self._label = label or getattr(fn, "__name__", "predicate")

    @classmethod
    def where(cls, **attrs: Any) -> "Predicate[Any]":
        """Match models whose attributes equal every given value.

        Mapping models are matched by key instead of attribute.
        """
        if not attrs:
            raise ValueError("where() needs at least one attribute")

        def _lookup(model: Any, name: str) -> Any:
            if isinstance(model, dict):
                return model.get(name, _MISSING)
            return getattr(model, name, _MISSING)

        def _match(model: Any) -> bool:
            return all(_lookup(model, k) == v for k, v in attrs.items())

        label = "where(" + ", ".join(f"{k}={v!r}" for k, v in sorted(attrs.items())) + ")"
        return cls(_match, label)

    @classmethod
    def always(cls) -> "Predicate[Any]":
        return cls(lambda _m: True, "always")

    @classmethod
    def never(cls) -> "Predicate[Any]":
        return cls(lambda _m: False, "never")

    def evaluate(self, model: M) -> bool:
        return bool(self._fn(model))

    __call__ = evaluate

    def __and__(self, other: Callable[[M], bool]) -> "Predicate[M]":
        return Predicate(lambda m: self.evaluate(m) and bool(other(m)), f"({self._label} & {_label(other)})")

    def __or__(self, other: Callable[[M], bool]) -> "Predicate[M]":
        return Predicate(lambda m: self.evaluate(m) or bool(other(m)), f"({self._label} | {_label(other)})")

    def __invert__(self) -> "Predicate[M]":
        return Predicate(lambda m: not self.evaluate(m), f"~{self._label}")

    def __repr__(self) -> str:
        return f"Predicate({self._label})"


def _label(fn: Callable[..., Any]) -> str:
    if isinstance(fn, Predicate):
        return fn._label
    return getattr(fn, "__name__", "predicate")
