"""Coupon models for the storefront"""

from pydantic import BaseModel, ConfigDict
from typing import Optional
from enum import Enum


class DiscountType(str, Enum):
    AMOUNT = "amount"
    PERCENTAGE = "percentage"


class Coupon(BaseModel):
    """Coupon in the registry"""
    model_config = ConfigDict(frozen=True)

    code: str
    name: str
    discount_type: DiscountType
    # Currency amount for AMOUNT, 0..100 for PERCENTAGE
    discount_value: float


class CouponCreateRequest(BaseModel):
    """Request to register a coupon"""
    code: str
    name: str
    discount_type: DiscountType
    discount_value: float


class ApplyCouponRequest(BaseModel):
    """Request to select a coupon for the cart; a null code clears it"""
    code: Optional[str] = None


class CouponListResponse(BaseModel):
    """Coupon registry listing"""
    coupons: list[Coupon]
    total: int


class CouponResponse(BaseModel):
    """Coupon API response"""
    coupon: Optional[Coupon] = None
    message: Optional[str] = None
