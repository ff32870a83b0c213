import pytest
from dataclasses import dataclass
from persistence import AnyCRUD, InMemoryPersistenceService, StoreConfig

@dataclass(frozen=True)
class Note:
    title: str
    tag: str = "misc"
    stars: int = 0

@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in ('CRUD_MAX_ITEMS', 'CRUD_STRICT_TYPES', 'CRUD_LOG_LEVEL', 'LOG_LEVEL'):
        monkeypatch.delenv(key, raising=False)

@pytest.fixture()
def store():
    return InMemoryPersistenceService(Note, StoreConfig())

@pytest.fixture()
def erased(store):
    return AnyCRUD(store, model_type=Note)

@pytest.fixture()
def notes():
    return [
        Note('groceries', 'home', 1),
        Note('standup', 'work', 3),
        Note('laundry', 'home', 0),
        Note('review', 'work', 5),
    ]
