"""
Cart operations.

Every function takes the current cart and returns a new one; the input
list and its items are never modified. A rejected mutation hands back the
input cart unchanged together with the reason.
"""

from typing import Optional

from ..models.cart import CartItem, CartTotals
from ..models.coupon import Coupon
from ..models.product import Product
from ..models.results import CartResult, ErrorKind
from .discount import apply_coupon_to_total, has_bulk_purchase, line_total, round_half_up

ADDED_MESSAGE = "Added to cart"
INSUFFICIENT_STOCK_MESSAGE = "Insufficient stock!"


def stock_limit_message(max_stock: int) -> str:
    return f"Only {max_stock} items in stock."


def find_item(cart: list[CartItem], product_id: str) -> Optional[CartItem]:
    """Get the cart line for a product"""
    return next((item for item in cart if item.product.id == product_id), None)


def remaining_stock(product: Product, cart: list[CartItem]) -> int:
    """Units of `product` still available once the cart's quantity is taken"""
    item = find_item(cart, product.id)
    return product.stock - (item.quantity if item else 0)


def add_item(cart: list[CartItem], product: Product) -> CartResult:
    """Add one unit of a product to the cart"""
    if remaining_stock(product, cart) <= 0:
        return CartResult(
            cart=cart,
            success=False,
            message=INSUFFICIENT_STOCK_MESSAGE,
            error=ErrorKind.INSUFFICIENT_STOCK,
        )

    existing_item = find_item(cart, product.id)

    if existing_item:
        new_quantity = existing_item.quantity + 1
        if new_quantity > product.stock:
            return CartResult(
                cart=cart,
                success=False,
                message=stock_limit_message(product.stock),
                error=ErrorKind.STOCK_LIMIT_EXCEEDED,
            )

        updated_cart = [
            item.model_copy(update={"quantity": new_quantity})
            if item.product.id == product.id else item
            for item in cart
        ]
        return CartResult(cart=updated_cart, success=True, message=ADDED_MESSAGE)

    return CartResult(
        cart=[*cart, CartItem(product=product, quantity=1)],
        success=True,
        message=ADDED_MESSAGE,
    )


def remove_item(cart: list[CartItem], product_id: str) -> list[CartItem]:
    """Remove a product's line; absent products are ignored"""
    return [item for item in cart if item.product.id != product_id]


def update_quantity(
    cart: list[CartItem],
    product_id: str,
    new_quantity: int,
    max_stock: int,
) -> CartResult:
    """
    Set the quantity of a product's line.

    A quantity of zero or less removes the line. Quantities above
    `max_stock` are rejected and the cart is returned as it was.
    """
    if new_quantity <= 0:
        return CartResult(cart=remove_item(cart, product_id), success=True)

    if new_quantity > max_stock:
        return CartResult(
            cart=cart,
            success=False,
            message=stock_limit_message(max_stock),
            error=ErrorKind.STOCK_LIMIT_EXCEEDED,
        )

    updated_cart = [
        item.model_copy(update={"quantity": new_quantity})
        if item.product.id == product_id else item
        for item in cart
    ]
    return CartResult(cart=updated_cart, success=True)


def cart_total(cart: list[CartItem], selected_coupon: Optional[Coupon] = None) -> CartTotals:
    """Totals before any discount and after line discounts and the coupon"""
    bulk_unlocked = has_bulk_purchase(cart)

    total_before_discount = sum(item.product.price * item.quantity for item in cart)
    total_after_discount = sum(line_total(item, cart, bulk_unlocked) for item in cart)
    total_after_discount = apply_coupon_to_total(total_after_discount, selected_coupon)

    return CartTotals(
        total_before_discount=round_half_up(total_before_discount),
        total_after_discount=round_half_up(total_after_discount),
    )


def cart_item_count(cart: list[CartItem]) -> int:
    """Total number of units in the cart"""
    return sum(item.quantity for item in cart)
