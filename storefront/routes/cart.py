"""Cart API routes"""

import logging
from fastapi import APIRouter, Depends

from ..engine.discount import has_bulk_purchase, line_discount_rate_percent, line_total
from ..models.cart import (
    Cart,
    CartItem,
    CartLineView,
    AddToCartRequest,
    UpdateCartItemRequest,
    CartResponse,
    CheckoutResponse,
)
from ..models.coupon import ApplyCouponRequest
from ..security.admin import AdminContext, display_mode
from ..services import StorefrontService, get_storefront
from .errors import raise_for_failure

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/cart", tags=["Cart"])


def build_cart(
    storefront: StorefrontService,
    items: list[CartItem],
    is_admin: bool = False,
) -> Cart:
    """Price every line of `items` against the whole cart"""
    bulk_unlocked = has_bulk_purchase(items)

    lines = []
    for item in items:
        total = line_total(item, items, bulk_unlocked)
        lines.append(
            CartLineView(
                product_id=item.product.id,
                product_name=item.product.name,
                quantity=item.quantity,
                unit_price=item.product.price,
                line_total=total,
                discount_rate_percent=line_discount_rate_percent(item, items),
                display_total=storefront.display_price(total, is_admin=is_admin),
            )
        )

    return Cart(
        items=lines,
        item_count=sum(item.quantity for item in items),
        totals=storefront.totals(items),
        selected_coupon=storefront.selected_coupon,
    )


@router.get("", response_model=CartResponse)
async def get_cart(
    admin: AdminContext = Depends(display_mode),
    storefront: StorefrontService = Depends(get_storefront),
):
    """Get the cart with line pricing and totals"""
    return CartResponse(cart=build_cart(storefront, storefront.get_cart(), admin.is_admin))


@router.post("/items", response_model=CartResponse)
async def add_to_cart(
    request: AddToCartRequest,
    admin: AdminContext = Depends(display_mode),
    storefront: StorefrontService = Depends(get_storefront),
):
    """Add one unit of a product to the cart"""
    result = storefront.add_to_cart(request.product_id)
    raise_for_failure(result)
    return CartResponse(
        cart=build_cart(storefront, result.data, admin.is_admin),
        message=result.message,
    )


@router.put("/items/{product_id}", response_model=CartResponse)
async def update_cart_item(
    product_id: str,
    request: UpdateCartItemRequest,
    admin: AdminContext = Depends(display_mode),
    storefront: StorefrontService = Depends(get_storefront),
):
    """Set a line quantity; zero or less removes the line"""
    result = storefront.update_quantity(product_id, request.quantity)
    raise_for_failure(result)
    return CartResponse(
        cart=build_cart(storefront, result.data, admin.is_admin),
        message=result.message,
    )


@router.delete("/items/{product_id}", response_model=CartResponse)
async def remove_from_cart(
    product_id: str,
    admin: AdminContext = Depends(display_mode),
    storefront: StorefrontService = Depends(get_storefront),
):
    """Remove an item from the cart"""
    result = storefront.remove_from_cart(product_id)
    return CartResponse(
        cart=build_cart(storefront, result.data, admin.is_admin),
        message=result.message,
    )


@router.put("/coupon", response_model=CartResponse)
async def apply_coupon(
    request: ApplyCouponRequest,
    admin: AdminContext = Depends(display_mode),
    storefront: StorefrontService = Depends(get_storefront),
):
    """Select a coupon for the cart; a null code clears the selection"""
    result = storefront.apply_coupon(request.code)
    raise_for_failure(result)
    return CartResponse(
        cart=build_cart(storefront, storefront.get_cart(), admin.is_admin),
        message=result.message,
    )


@router.delete("/coupon", response_model=CartResponse)
async def clear_coupon(
    admin: AdminContext = Depends(display_mode),
    storefront: StorefrontService = Depends(get_storefront),
):
    """Clear the selected coupon"""
    result = storefront.apply_coupon(None)
    return CartResponse(
        cart=build_cart(storefront, storefront.get_cart(), admin.is_admin),
        message=result.message,
    )


@router.post("/checkout", response_model=CheckoutResponse)
async def checkout(storefront: StorefrontService = Depends(get_storefront)):
    """
    Complete the order.

    No payment is taken; the cart and the selected coupon are cleared.
    """
    result = storefront.checkout()
    raise_for_failure(result)

    logger.info(f"Checkout completed: {result.data.order_id}")
    return CheckoutResponse(success=True, order=result.data, message=result.message)
