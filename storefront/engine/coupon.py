"""
Coupon registry and coupon selection rules.

Only one coupon is active for a cart at a time. Percentage coupons need a
minimum purchase, measured on the cart total after line discounts and
before any coupon; amount coupons have no minimum.
"""

from typing import Optional

from ..models.cart import CartItem
from ..models.coupon import Coupon, DiscountType
from ..models.results import CouponResult, ErrorKind, RegistryResult
from .cart import cart_total
from .discount import apply_coupon_to_total

PERCENTAGE_COUPON_MINIMUM = 10000

COUPON_APPLIED_MESSAGE = "Coupon applied."
COUPON_CLEARED_MESSAGE = "Coupon removed."
COUPON_MINIMUM_MESSAGE = (
    f"Percentage coupons require a purchase of {PERCENTAGE_COUPON_MINIMUM:,} or more."
)
COUPON_ADDED_MESSAGE = "Coupon added."
DUPLICATE_COUPON_MESSAGE = "A coupon with this code already exists."

__all__ = [
    "PERCENTAGE_COUPON_MINIMUM",
    "apply_coupon",
    "apply_coupon_to_total",
    "is_coupon_code_duplicate",
    "add_coupon",
    "delete_coupon",
    "find_coupon",
]


def apply_coupon(
    cart: list[CartItem],
    coupon: Optional[Coupon],
    selected: Optional[Coupon] = None,
    couponless_total: Optional[int] = None,
) -> CouponResult:
    """
    Decide whether `coupon` may become the active coupon.

    Args:
        cart: Current cart
        coupon: Coupon to select, or None to clear the selection
        selected: Currently active coupon, kept when the new one is rejected
        couponless_total: Cart total after line discounts without any coupon;
            computed from `cart` when omitted

    Returns:
        CouponResult whose `selected` is the active coupon afterwards
    """
    if coupon is None:
        return CouponResult(selected=None, success=True, message=COUPON_CLEARED_MESSAGE)

    if couponless_total is None:
        couponless_total = cart_total(cart, None).total_after_discount

    if (
        coupon.discount_type == DiscountType.PERCENTAGE
        and couponless_total < PERCENTAGE_COUPON_MINIMUM
    ):
        return CouponResult(
            selected=selected,
            success=False,
            message=COUPON_MINIMUM_MESSAGE,
            error=ErrorKind.COUPON_MINIMUM_NOT_MET,
        )

    return CouponResult(selected=coupon, success=True, message=COUPON_APPLIED_MESSAGE)


def is_coupon_code_duplicate(coupons: list[Coupon], code: str) -> bool:
    return any(c.code == code for c in coupons)


def add_coupon(coupons: list[Coupon], new_coupon: Coupon) -> RegistryResult:
    """Register a coupon; codes must be unique"""
    if is_coupon_code_duplicate(coupons, new_coupon.code):
        return RegistryResult(
            coupons=coupons,
            success=False,
            message=DUPLICATE_COUPON_MESSAGE,
            error=ErrorKind.DUPLICATE_COUPON_CODE,
        )

    return RegistryResult(
        coupons=[*coupons, new_coupon],
        success=True,
        message=COUPON_ADDED_MESSAGE,
    )


def delete_coupon(coupons: list[Coupon], code: str) -> list[Coupon]:
    """
    Remove a coupon from the registry.

    A cart that has this coupon selected keeps its copy; clearing that
    selection is up to the caller.
    """
    return [c for c in coupons if c.code != code]


def find_coupon(coupons: list[Coupon], code: str) -> Optional[Coupon]:
    return next((c for c in coupons if c.code == code), None)
