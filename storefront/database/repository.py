"""Typed access to the persisted cart, catalog and coupon registry"""

import logging

from pydantic import TypeAdapter, ValidationError

from ..models.cart import CartItem
from ..models.coupon import Coupon
from ..models.product import Product
from .seed import COUPONS, PRODUCTS
from .storage import KeyValueStorage

logger = logging.getLogger(__name__)

CART_KEY = "cart"
PRODUCTS_KEY = "products"
COUPONS_KEY = "coupons"

_cart_adapter = TypeAdapter(list[CartItem])
_products_adapter = TypeAdapter(list[Product])
_coupons_adapter = TypeAdapter(list[Coupon])


class StoreRepository:
    """
    Loads and saves full snapshots of the three store collections.

    With `seed` set, a store with no catalog or coupons is filled with the
    seed data when the repository is created. After that a missing key reads
    as an empty collection, so deleting every product stays deleted.
    """

    def __init__(self, storage: KeyValueStorage, seed: bool = True):
        self.storage = storage
        if seed:
            self._seed(PRODUCTS_KEY, _products_adapter, PRODUCTS)
            self._seed(COUPONS_KEY, _coupons_adapter, COUPONS)

    def _seed(self, key: str, adapter: TypeAdapter, value: list) -> None:
        if self.storage.get(key) is None:
            logger.info(f"Seeding {key} with {len(value)} entries")
            self._save(key, adapter, value)

    def _load(self, key: str, adapter: TypeAdapter) -> list:
        raw = self.storage.get(key)
        if raw is None:
            return []

        try:
            return adapter.validate_python(raw)
        except ValidationError as e:
            logger.warning(f"Discarding invalid {key} data: {e.error_count()} errors")
            return []

    def _save(self, key: str, adapter: TypeAdapter, value: list) -> None:
        self.storage.set(key, adapter.dump_python(value, mode="json"))

    def load_cart(self) -> list[CartItem]:
        return self._load(CART_KEY, _cart_adapter)

    def save_cart(self, cart: list[CartItem]) -> None:
        self._save(CART_KEY, _cart_adapter, cart)

    def load_products(self) -> list[Product]:
        return self._load(PRODUCTS_KEY, _products_adapter)

    def save_products(self, products: list[Product]) -> None:
        self._save(PRODUCTS_KEY, _products_adapter, products)

    def load_coupons(self) -> list[Coupon]:
        return self._load(COUPONS_KEY, _coupons_adapter)

    def save_coupons(self, coupons: list[Coupon]) -> None:
        self._save(COUPONS_KEY, _coupons_adapter, coupons)
