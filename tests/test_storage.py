import json
import logging

import pytest

from storefront.database import JsonFileStorage, MemoryStorage, StoreRepository
from storefront.database.seed import COUPONS, PRODUCTS

from factories import line, make_product, percent_coupon


@pytest.fixture(params=["memory", "json"])
def any_storage(request, tmp_path):
    if request.param == "memory":
        return MemoryStorage()
    return JsonFileStorage(str(tmp_path / "store.json"))


class TestStorage:
    def test_missing_key(self, any_storage):
        assert any_storage.get("cart") is None

    def test_set_and_get(self, any_storage):
        any_storage.set("cart", [{"a": 1}])
        assert any_storage.get("cart") == [{"a": 1}]

    def test_empty_list_removes_key(self, any_storage):
        any_storage.set("cart", [{"a": 1}])
        any_storage.set("cart", [])
        assert any_storage.get("cart") is None

    def test_keys_are_independent(self, any_storage):
        any_storage.set("cart", [1])
        any_storage.set("coupons", [2])
        any_storage.remove("cart")
        assert any_storage.get("cart") is None
        assert any_storage.get("coupons") == [2]


class TestJsonFileStorage:
    def test_persists_across_instances(self, tmp_path):
        path = str(tmp_path / "nested" / "store.json")
        JsonFileStorage(path).set("products", [{"id": "p1"}])
        assert JsonFileStorage(path).get("products") == [{"id": "p1"}]

    def test_corrupt_file_reads_as_empty(self, tmp_path, caplog):
        path = tmp_path / "store.json"
        path.write_text("{not json", encoding="utf-8")

        with caplog.at_level(logging.WARNING):
            assert JsonFileStorage(str(path)).get("cart") is None
        assert "Error loading" in caplog.text

    def test_non_list_value_is_ignored(self, tmp_path):
        path = tmp_path / "store.json"
        path.write_text(json.dumps({"cart": {"oops": True}}), encoding="utf-8")
        assert JsonFileStorage(str(path)).get("cart") is None


class TestStoreRepository:
    def test_defaults_to_seed_data(self):
        repository = StoreRepository(MemoryStorage())
        assert repository.load_products() == PRODUCTS
        assert repository.load_coupons() == COUPONS
        assert repository.load_cart() == []

    def test_without_seed(self):
        repository = StoreRepository(MemoryStorage(), seed=False)
        assert repository.load_products() == []
        assert repository.load_coupons() == []

    def test_round_trips_collections(self, tmp_path):
        storage = JsonFileStorage(str(tmp_path / "store.json"))
        repository = StoreRepository(storage)
        product = make_product()
        cart = [line(product, 3)]

        repository.save_cart(cart)
        repository.save_products([product])
        repository.save_coupons([percent_coupon()])

        reloaded = StoreRepository(JsonFileStorage(str(tmp_path / "store.json")))
        assert reloaded.load_cart() == cart
        assert reloaded.load_products() == [product]
        assert reloaded.load_coupons() == [percent_coupon()]

    def test_stored_coupon_type_is_plain_string(self):
        storage = MemoryStorage()
        StoreRepository(storage).save_coupons([percent_coupon()])
        assert storage.get("coupons")[0]["discount_type"] == "percentage"

    def test_emptied_collections_stay_empty(self):
        repository = StoreRepository(MemoryStorage())
        repository.save_products([])
        repository.save_coupons([])
        assert repository.load_products() == []
        assert repository.load_coupons() == []

    def test_existing_catalog_is_not_reseeded(self):
        storage = MemoryStorage()
        StoreRepository(storage).save_products([make_product()])

        repository = StoreRepository(storage)
        assert repository.load_products() == [make_product()]
        assert repository.load_coupons() == COUPONS

    def test_invalid_data_reads_as_empty(self, caplog):
        storage = MemoryStorage()
        storage.set("cart", [{"product": {"id": "p1"}, "quantity": 0}])

        with caplog.at_level(logging.WARNING):
            assert StoreRepository(storage).load_cart() == []
        assert "Discarding invalid cart data" in caplog.text
