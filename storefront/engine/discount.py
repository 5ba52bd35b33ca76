"""
Discount rules for cart lines.

A line's rate is the best quantity tier it has reached, plus the bulk
bonus when any line in the cart has reached BULK_PURCHASE_QUANTITY,
capped at MAX_DISCOUNT_RATE. The bulk flag depends on the whole cart, so
rates are recomputed against the current cart on every call.
"""

import math
from typing import Optional

from ..models.cart import CartItem
from ..models.coupon import Coupon, DiscountType

BULK_PURCHASE_QUANTITY = 10
BULK_PURCHASE_BONUS = 0.05
MAX_DISCOUNT_RATE = 0.5


def round_half_up(value: float) -> int:
    """Round to the nearest currency unit, halves toward +inf"""
    return math.floor(value + 0.5)


def has_bulk_purchase(cart: list[CartItem]) -> bool:
    """True if any line has reached the bulk purchase quantity"""
    return any(item.quantity >= BULK_PURCHASE_QUANTITY for item in cart)


def base_discount_rate(item: CartItem) -> float:
    """Best tier rate whose quantity threshold the line has reached"""
    return max(
        (tier.rate for tier in item.product.discounts if item.quantity >= tier.quantity),
        default=0.0,
    )


def discount_rate(item: CartItem, bulk_unlocked: bool) -> float:
    rate = base_discount_rate(item)
    if bulk_unlocked:
        rate += BULK_PURCHASE_BONUS
    return min(max(rate, 0.0), MAX_DISCOUNT_RATE)


def max_applicable_discount(item: CartItem, cart: list[CartItem]) -> float:
    """Discount rate in [0, MAX_DISCOUNT_RATE] for one line of `cart`"""
    return discount_rate(item, has_bulk_purchase(cart))


def line_total(
    item: CartItem,
    cart: list[CartItem],
    bulk_unlocked: Optional[bool] = None,
) -> int:
    """
    Discounted total for one line.

    Pass `bulk_unlocked` when pricing many lines of the same cart so the
    bulk check runs once per cart instead of once per line.
    """
    if bulk_unlocked is None:
        bulk_unlocked = has_bulk_purchase(cart)
    rate = discount_rate(item, bulk_unlocked)
    return round_half_up(item.product.price * item.quantity * (1 - rate))


def line_discount_rate_percent(item: CartItem, cart: list[CartItem]) -> int:
    """Effective discount of a line as a whole percentage"""
    total = line_total(item, cart)
    full_price = item.product.price * item.quantity
    if total >= full_price:
        return 0
    return round_half_up((1 - total / full_price) * 100)


def apply_coupon_to_total(total: float, coupon: Optional[Coupon]) -> float:
    """Fold the active coupon into an already-discounted total, once"""
    if coupon is None:
        return total
    if coupon.discount_type == DiscountType.AMOUNT:
        return max(0, total - coupon.discount_value)
    return round_half_up(total * (1 - coupon.discount_value / 100))
