"""In-memory CRUD implementation.

Features:
    - Generic over one model class, fixed at construction (``model_type``)
    - Environment driven limits with clamping + warning logs (``StoreConfig.from_env``)
    - Optional strict instance checks on writes (CRUD_STRICT_TYPES=1)
    - Optional capacity ceiling (CRUD_MAX_ITEMS); a full store raises StoreExhausted
    - Small stats helper + ``python -m persistence.memory_store`` config dump
"""
from __future__ import annotations
import os
from dataclasses import dataclass
from typing import Any, Dict, Generic, List, Optional, TypeVar

from .base_crud import Filter, matches
from .errors import StoreExhausted, TypeMismatch
from .logging_util import warn, debug

M = TypeVar("M")

MAX_ITEMS_CEILING = 10_000_000
DEFAULT_MAX_ITEMS = 0  # 0 => unbounded


@dataclass
class StoreConfig:
    max_items: int = DEFAULT_MAX_ITEMS
    strict_types: bool = False

    @classmethod
    def from_env(cls) -> "StoreConfig":
        def _int(name: str, default: int) -> int:
            raw = os.environ.get(name)
            if raw is None:
                return default
            try:
                return int(raw)
            except ValueError:
                warn("invalid_env_int", key=name, value=raw, default=default)
                return default
        max_items = _int("CRUD_MAX_ITEMS", DEFAULT_MAX_ITEMS)
        strict = os.environ.get("CRUD_STRICT_TYPES", "0") == "1"
        if max_items < 0 or max_items > MAX_ITEMS_CEILING:
            clamped = min(MAX_ITEMS_CEILING, max(0, max_items))
            warn("store_config_clamped", original={"max_items": max_items}, clamped={"max_items": clamped})
            max_items = clamped
        return cls(max_items=max_items, strict_types=strict)


class InMemoryPersistenceService(Generic[M]):
    """List-backed CRUD service for a single model class.

    Reads return copies; update and delete rebuild the list and swap it in with
    a single assignment, so a failed call never leaves a half-applied store.
    """

    def __init__(self, model_type: type, config: Optional[StoreConfig] = None):
        if not isinstance(model_type, type):
            raise TypeError(f"model_type must be a class, got {model_type!r}")
        self.model_type = model_type
        self.config = config or StoreConfig.from_env()
        self._store: List[M] = []

    # --- CRUD -----------------------------------------------------------------------
    def create(self, model: M) -> None:
        self._check_model(model)
        self._check_capacity(len(self._store) + 1)
        self._store.append(model)

    def read(self, filter: Optional[Filter] = None) -> List[M]:
        if filter is None:
            return list(self._store)
        return [m for m in self._store if matches(filter, m)]

    def update(self, filter: Filter, new_model: M) -> None:
        self._check_model(new_model)
        kept = [m for m in self._store if not matches(filter, m)]
        self._check_capacity(len(kept) + 1)
        debug("store_update", model_type=self.model_type.__name__, replaced=len(self._store) - len(kept))
        kept.append(new_model)
        self._store = kept

    def delete(self, filter: Filter) -> None:
        kept = [m for m in self._store if not matches(filter, m)]
        debug("store_delete", model_type=self.model_type.__name__, removed=len(self._store) - len(kept))
        self._store = kept

    # --- Introspection --------------------------------------------------------------
    def __len__(self) -> int:
        return len(self._store)

    def stats(self) -> Dict[str, Any]:
        """Return size and limits of the store."""
        return {
            "model_type": self.model_type.__name__,
            "count": len(self._store),
            "max_items": self.config.max_items,
            "strict_types": self.config.strict_types,
        }

    def __repr__(self) -> str:
        return f"InMemoryPersistenceService[{self.model_type.__name__}](count={len(self._store)})"

    # --- Internal -------------------------------------------------------------------
    def _check_model(self, model: Any) -> None:
        if self.config.strict_types and not isinstance(model, self.model_type):
            warn("model_type_rejected", expected=self.model_type.__name__, got=type(model).__name__)
            raise TypeMismatch(self.model_type, model, where="write")

    def _check_capacity(self, size_after: int) -> None:
        cap = self.config.max_items
        if cap and size_after > cap:
            warn("store_exhausted", model_type=self.model_type.__name__, max_items=cap)
            raise StoreExhausted(cap)


_BUILTIN_MODEL_TYPES = {t.__name__: t for t in (dict, str, bytes, int, float, tuple, list)}


def cli_dump_config(argv: Optional[List[str]] = None):  # pragma: no cover - thin CLI wrapper
    """CLI helper: print resolved StoreConfig + stats JSON."""
    import argparse, json
    ap = argparse.ArgumentParser(description='Dump in-memory store config and stats')
    ap.add_argument('--model-type', default='dict', choices=sorted(_BUILTIN_MODEL_TYPES),
                    help='Builtin model class to bind the store to')
    args = ap.parse_args(argv)
    store = InMemoryPersistenceService(_BUILTIN_MODEL_TYPES[args.model_type])
    out = {'config': store.config.__dict__.copy(), 'stats': store.stats()}
    print(json.dumps(out, indent=2))

if __name__ == '__main__':  # pragma: no cover
    cli_dump_config()
