"""Price display helpers"""

from typing import Optional

from ..models.cart import CartItem
from ..models.product import Product
from .cart import remaining_stock

SOLD_OUT = "SOLD OUT"


def _format_amount(price: float) -> str:
    if float(price).is_integer():
        return f"{int(price):,}"
    return f"{price:,}"


def format_price(
    price: float,
    *,
    is_admin: bool = False,
    product: Optional[Product] = None,
    cart: Optional[list[CartItem]] = None,
    currency_symbol: str = "₩",
    currency_unit: str = "원",
) -> str:
    """
    Render a price for display.

    Shows SOLD OUT when a product and cart are given and nothing of the
    product is left to add. The admin screens use a trailing unit, the
    storefront a leading symbol.
    """
    if product is not None and cart is not None:
        if remaining_stock(product, cart) <= 0:
            return SOLD_OUT

    if is_admin:
        return f"{_format_amount(price)}{currency_unit}"

    return f"{currency_symbol}{_format_amount(price)}"
