"""Type-erased CRUD persistence layer.

Single source of truth for the package version so that code, tests, and
scripts can import it without duplicating literals.
"""

PACKAGE_VERSION = "0.1.0"  # Keep in sync with pyproject version.

from .any_crud import AnyCRUD, erase
from .base_crud import CRUD, Filter, matches
from .errors import CRUDError, ContractViolation, StoreExhausted, TypeMismatch
from .memory_store import InMemoryPersistenceService, StoreConfig
from .predicates import Predicate
from .synchronized import SynchronizedCRUD

__all__ = [
    "PACKAGE_VERSION",
    "AnyCRUD",
    "erase",
    "CRUD",
    "Filter",
    "matches",
    "CRUDError",
    "ContractViolation",
    "StoreExhausted",
    "TypeMismatch",
    "InMemoryPersistenceService",
    "StoreConfig",
    "Predicate",
    "SynchronizedCRUD",
]
