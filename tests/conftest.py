import pytest
from fastapi.testclient import TestClient

from storefront.core.config import Settings, get_settings
from storefront.database import MemoryStorage, StoreRepository
from storefront.main import app
from storefront.services import NotificationLog, StorefrontService, get_storefront

from factories import make_product


@pytest.fixture
def product():
    return make_product()


@pytest.fixture
def storage():
    return MemoryStorage()


@pytest.fixture
def notifier():
    return NotificationLog()


@pytest.fixture
def storefront(storage, notifier):
    return StorefrontService(StoreRepository(storage, seed=True), notifier)


@pytest.fixture
def settings():
    return Settings(admin_api_key=None, storage_backend="memory")


@pytest.fixture
def client(storefront, settings):
    app.dependency_overrides[get_storefront] = lambda: storefront
    app.dependency_overrides[get_settings] = lambda: settings
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
