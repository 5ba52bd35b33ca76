# Storefront services

from functools import lru_cache

from ..core.config import settings
from ..database import JsonFileStorage, MemoryStorage, StoreRepository
from .notifications import Notifier, Notification, LoggingNotifier, NotificationLog
from .storefront import StorefrontService


def create_storefront(
    storage_backend: str = settings.storage_backend,
    storage_path: str = settings.storage_path,
    seed_catalog: bool = settings.seed_catalog,
) -> StorefrontService:
    """Build a storefront service wired to the configured storage"""
    if storage_backend == "json":
        storage = JsonFileStorage(storage_path)
    else:
        storage = MemoryStorage()

    return StorefrontService(
        repository=StoreRepository(storage, seed=seed_catalog),
        notifier=NotificationLog(),
        currency_symbol=settings.currency_symbol,
        currency_unit=settings.currency_unit,
    )


@lru_cache()
def get_storefront() -> StorefrontService:
    """Get the shared storefront service"""
    return create_storefront()


__all__ = [
    "Notifier",
    "Notification",
    "LoggingNotifier",
    "NotificationLog",
    "StorefrontService",
    "create_storefront",
    "get_storefront",
]
