# Persistence modules

from .storage import KeyValueStorage, MemoryStorage, JsonFileStorage
from .repository import StoreRepository

__all__ = [
    "KeyValueStorage",
    "MemoryStorage",
    "JsonFileStorage",
    "StoreRepository",
]
