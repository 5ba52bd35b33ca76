"""Cart models for the storefront"""

from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from datetime import datetime

from .coupon import Coupon
from .product import Product


class CartItem(BaseModel):
    """One line of a cart: a product snapshot and its quantity"""
    model_config = ConfigDict(frozen=True)

    product: Product
    quantity: int = Field(gt=0)


class CartTotals(BaseModel):
    """Cart totals before and after discounts"""
    total_before_discount: int
    total_after_discount: int

    @property
    def total_discount(self) -> int:
        return self.total_before_discount - self.total_after_discount


class CartLineView(BaseModel):
    """Cart line with its computed pricing"""
    product_id: str
    product_name: str
    quantity: int
    unit_price: float
    line_total: int
    discount_rate_percent: int
    display_total: str


class Cart(BaseModel):
    """Cart as returned by the API"""
    items: list[CartLineView] = []
    item_count: int = 0
    totals: CartTotals
    selected_coupon: Optional[Coupon] = None


class AddToCartRequest(BaseModel):
    """Request to add one unit of a product to the cart"""
    product_id: str


class UpdateCartItemRequest(BaseModel):
    """Request to set a line quantity; zero or less removes the line"""
    quantity: int


class CartResponse(BaseModel):
    """Cart API response"""
    cart: Cart
    message: Optional[str] = None


class OrderConfirmation(BaseModel):
    """Completed checkout"""
    order_id: str
    item_count: int
    totals: CartTotals
    coupon_code: Optional[str] = None
    created_at: datetime


class CheckoutResponse(BaseModel):
    """Response from checkout"""
    success: bool
    order: Optional[OrderConfirmation] = None
    message: Optional[str] = None
