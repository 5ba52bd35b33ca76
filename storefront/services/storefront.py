"""
Storefront service

Runs each storefront action as one read-compute-replace cycle: load the
current snapshot from the repository, hand it to the engine, persist the
new snapshot if the engine accepted the change, and forward the outcome
message to the notifier.
"""

import logging
import uuid
from datetime import datetime, timezone
from typing import Any, Optional

from pydantic import ValidationError

from ..database.repository import StoreRepository
from ..engine import cart as cart_model
from ..engine import catalog
from ..engine import coupon as coupon_model
from ..engine.formatters import format_price
from ..engine.validators import (
    validate_coupon_code,
    validate_discount_amount,
    validate_discount_rate,
    validate_price_input,
    validate_stock_input,
)
from ..models.cart import CartItem, CartTotals, OrderConfirmation
from ..models.coupon import Coupon, DiscountType
from ..models.product import Product
from ..models.results import ErrorKind, OperationResult
from .notifications import Notifier

logger = logging.getLogger(__name__)

PRODUCT_NOT_FOUND_MESSAGE = "Product not found"
COUPON_NOT_FOUND_MESSAGE = "Coupon not found"
EMPTY_CART_MESSAGE = "Cart is empty"


class StorefrontService:
    """Caller-side orchestration of the pricing and inventory engine"""

    def __init__(
        self,
        repository: StoreRepository,
        notifier: Notifier,
        currency_symbol: str = "₩",
        currency_unit: str = "원",
    ):
        self.repository = repository
        self.notifier = notifier
        self.currency_symbol = currency_symbol
        self.currency_unit = currency_unit
        # Copy of the active coupon; not persisted
        self.selected_coupon: Optional[Coupon] = None

    def _report(self, result: OperationResult) -> OperationResult:
        self.notifier.notify(result.message, result.severity)
        return result

    # ---- Catalog ----

    def list_products(self) -> list[Product]:
        return self.repository.load_products()

    def search_products(self, query: Optional[str] = None) -> list[Product]:
        return catalog.filter_products(self.repository.load_products(), query)

    def get_product(self, product_id: str) -> Optional[Product]:
        return catalog.find_product(self.repository.load_products(), product_id)

    def _check_product_fields(self, fields: dict[str, Any]) -> Optional[OperationResult]:
        checks = [("price", validate_price_input), ("stock", validate_stock_input)]
        for field, validate in checks:
            if field not in fields:
                continue
            validated = validate(fields[field])
            if not validated.is_valid:
                return OperationResult.fail(ErrorKind.INVALID_INPUT_FORMAT, validated.error)
        return None

    def create_product(self, fields: dict[str, Any]) -> OperationResult:
        """Add a product to the catalog"""
        rejected = self._check_product_fields(fields)
        if rejected:
            return self._report(rejected)

        try:
            result = catalog.add_product(self.repository.load_products(), fields)
        except ValidationError as e:
            return self._report(
                OperationResult.fail(ErrorKind.INVALID_INPUT_FORMAT, f"Invalid product: {e.errors()[0]['msg']}")
            )

        self.repository.save_products(result.products)
        logger.info(f"Product {result.product.id} added: {result.product.name}")
        return self._report(OperationResult.ok("Product added.", result.product))

    def update_product(self, product_id: str, updates: dict[str, Any]) -> OperationResult:
        """Merge field updates into a product"""
        products = self.repository.load_products()
        if catalog.find_product(products, product_id) is None:
            return self._report(
                OperationResult.fail(ErrorKind.PRODUCT_NOT_FOUND, PRODUCT_NOT_FOUND_MESSAGE)
            )

        rejected = self._check_product_fields(updates)
        if rejected:
            return self._report(rejected)

        try:
            result = catalog.update_product(products, product_id, updates)
        except ValidationError as e:
            return self._report(
                OperationResult.fail(ErrorKind.INVALID_INPUT_FORMAT, f"Invalid product: {e.errors()[0]['msg']}")
            )

        self.repository.save_products(result.products)
        logger.info(f"Product {product_id} updated: {sorted(updates)}")
        return self._report(OperationResult.ok("Product updated.", result.product))

    def delete_product(self, product_id: str) -> OperationResult:
        """Remove a product from the catalog"""
        products = self.repository.load_products()
        if catalog.find_product(products, product_id) is None:
            return self._report(
                OperationResult.fail(ErrorKind.PRODUCT_NOT_FOUND, PRODUCT_NOT_FOUND_MESSAGE)
            )

        self.repository.save_products(catalog.delete_product(products, product_id))
        logger.info(f"Product {product_id} deleted")
        return self._report(OperationResult.ok("Product deleted."))

    def display_price(
        self,
        price: float,
        product: Optional[Product] = None,
        is_admin: bool = False,
        cart: Optional[list[CartItem]] = None,
    ) -> str:
        """Format a price, showing SOLD OUT for a product with nothing left to add"""
        if product is not None and cart is None:
            cart = self.repository.load_cart()
        return format_price(
            price,
            is_admin=is_admin,
            product=product,
            cart=cart,
            currency_symbol=self.currency_symbol,
            currency_unit=self.currency_unit,
        )

    # ---- Coupon registry ----

    def list_coupons(self) -> list[Coupon]:
        return self.repository.load_coupons()

    def create_coupon(self, coupon: Coupon) -> OperationResult:
        """
        Register a coupon after checking its code and discount bounds.

        Negative discounts are stored as 0; values above the maximum are
        rejected.
        """
        validated_code = validate_coupon_code(coupon.code)
        if not validated_code.is_valid:
            return self._report(
                OperationResult.fail(ErrorKind.INVALID_INPUT_FORMAT, validated_code.error)
            )

        if coupon.discount_type == DiscountType.PERCENTAGE:
            validated_value = validate_discount_rate(coupon.discount_value)
        else:
            validated_value = validate_discount_amount(coupon.discount_value)
        if not validated_value.is_valid:
            return self._report(
                OperationResult.fail(ErrorKind.INVALID_INPUT_FORMAT, validated_value.error)
            )
        coupon = coupon.model_copy(update={"discount_value": validated_value.value})

        result = coupon_model.add_coupon(self.repository.load_coupons(), coupon)
        if not result.success:
            return self._report(OperationResult.fail(result.error, result.message))

        self.repository.save_coupons(result.coupons)
        logger.info(f"Coupon {coupon.code} added")
        return self._report(OperationResult.ok(result.message, coupon))

    def delete_coupon(self, code: str) -> OperationResult:
        """
        Remove a coupon from the registry.

        The cart's selection is a copy of the coupon, so it is cleared here
        when it refers to the deleted code.
        """
        coupons = self.repository.load_coupons()
        if coupon_model.find_coupon(coupons, code) is None:
            return self._report(
                OperationResult.fail(ErrorKind.COUPON_NOT_FOUND, COUPON_NOT_FOUND_MESSAGE)
            )

        self.repository.save_coupons(coupon_model.delete_coupon(coupons, code))
        if self.selected_coupon is not None and self.selected_coupon.code == code:
            self.selected_coupon = None
            logger.info(f"Cleared selected coupon {code}")

        logger.info(f"Coupon {code} deleted")
        return self._report(OperationResult.ok("Coupon deleted."))

    # ---- Cart ----

    def get_cart(self) -> list[CartItem]:
        return self.repository.load_cart()

    def totals(self, cart: Optional[list[CartItem]] = None) -> CartTotals:
        if cart is None:
            cart = self.repository.load_cart()
        return cart_model.cart_total(cart, self.selected_coupon)

    def item_count(self) -> int:
        return cart_model.cart_item_count(self.repository.load_cart())

    def remaining_stock(self, product: Product, cart: Optional[list[CartItem]] = None) -> int:
        if cart is None:
            cart = self.repository.load_cart()
        return cart_model.remaining_stock(product, cart)

    def add_to_cart(self, product_id: str) -> OperationResult:
        """Add one unit of a catalog product to the cart"""
        product = self.get_product(product_id)
        if product is None:
            return self._report(
                OperationResult.fail(ErrorKind.PRODUCT_NOT_FOUND, PRODUCT_NOT_FOUND_MESSAGE)
            )

        result = cart_model.add_item(self.repository.load_cart(), product)
        if not result.success:
            return self._report(OperationResult.fail(result.error, result.message))

        self.repository.save_cart(result.cart)
        return self._report(OperationResult.ok(result.message, result.cart))

    def remove_from_cart(self, product_id: str) -> OperationResult:
        cart = cart_model.remove_item(self.repository.load_cart(), product_id)
        self.repository.save_cart(cart)
        return OperationResult.ok("Item removed", cart)

    def update_quantity(self, product_id: str, quantity: int) -> OperationResult:
        """
        Set a cart line's quantity against the catalog's current stock.

        Only rejections are notified; quantity changes are silent.
        """
        if quantity <= 0:
            # Removing a line needs no catalog entry
            cart = cart_model.remove_item(self.repository.load_cart(), product_id)
            self.repository.save_cart(cart)
            return OperationResult.ok("Cart updated", cart)

        product = self.get_product(product_id)
        if product is None:
            return self._report(
                OperationResult.fail(ErrorKind.PRODUCT_NOT_FOUND, PRODUCT_NOT_FOUND_MESSAGE)
            )

        result = cart_model.update_quantity(
            self.repository.load_cart(), product_id, quantity, product.stock
        )
        if not result.success:
            return self._report(OperationResult.fail(result.error, result.message))

        self.repository.save_cart(result.cart)
        return OperationResult.ok("Cart updated", result.cart)

    def apply_coupon(self, code: Optional[str]) -> OperationResult:
        """Select a registered coupon for the cart; None clears the selection"""
        if code is None:
            result = coupon_model.apply_coupon(self.repository.load_cart(), None)
            self.selected_coupon = result.selected
            return OperationResult.ok(result.message)

        coupon = coupon_model.find_coupon(self.repository.load_coupons(), code)
        if coupon is None:
            return self._report(
                OperationResult.fail(ErrorKind.COUPON_NOT_FOUND, COUPON_NOT_FOUND_MESSAGE)
            )

        result = coupon_model.apply_coupon(
            self.repository.load_cart(), coupon, selected=self.selected_coupon
        )
        self.selected_coupon = result.selected
        if not result.success:
            return self._report(OperationResult.fail(result.error, result.message))
        return self._report(OperationResult.ok(result.message, coupon))

    def checkout(self) -> OperationResult:
        """
        Complete the order: record the totals, then clear the cart and the
        selected coupon.
        """
        cart = self.repository.load_cart()
        if not cart:
            return self._report(OperationResult.fail(ErrorKind.EMPTY_CART, EMPTY_CART_MESSAGE))

        order = OrderConfirmation(
            order_id=f"ORD-{uuid.uuid4().hex[:8].upper()}",
            item_count=cart_model.cart_item_count(cart),
            totals=cart_model.cart_total(cart, self.selected_coupon),
            coupon_code=self.selected_coupon.code if self.selected_coupon else None,
            created_at=datetime.now(timezone.utc),
        )

        self.repository.save_cart([])
        self.selected_coupon = None

        logger.info(f"Order {order.order_id} created: {order.totals.total_after_discount}")
        return self._report(
            OperationResult.ok(f"Order placed. Order number: {order.order_id}", order)
        )
