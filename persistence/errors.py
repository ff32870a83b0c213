"""Exception types raised by the CRUD layer.

Each error also derives from the closest builtin so callers can catch
``TypeError`` / ``RuntimeError`` without importing this module.
"""
from __future__ import annotations


class CRUDError(Exception):
    """Base class for every error raised by this package."""


class TypeMismatch(CRUDError, TypeError):
    """Model type does not match the one a contract instance is bound to."""

    def __init__(self, expected: type, got: object, where: str = "construction"):
        self.expected = expected
        self.got = got
        self.where = where
        super().__init__(f"model type mismatch at {where}: expected {_name(expected)}, got {_name(got)}")


class ContractViolation(CRUDError, TypeError):
    """Object handed in as a CRUD implementation is missing part of the contract."""

    def __init__(self, base: object, missing: list[str]):
        self.missing = missing
        super().__init__(f"{type(base).__name__} does not implement CRUD (missing: {', '.join(missing)})")


class StoreExhausted(CRUDError, RuntimeError):
    """In-memory store hit its configured capacity."""

    def __init__(self, capacity: int):
        self.capacity = capacity
        super().__init__(f"store is full (max_items={capacity})")


def _name(obj: object) -> str:
    if isinstance(obj, type):
        return obj.__qualname__
    return type(obj).__qualname__
