"""Outcome types returned by the pricing and inventory engine"""

from dataclasses import dataclass
from typing import Any, Optional
from enum import Enum

from .cart import CartItem
from .coupon import Coupon
from .product import Product


class ErrorKind(str, Enum):
    """Why an operation was rejected"""
    INSUFFICIENT_STOCK = "insufficient_stock"
    STOCK_LIMIT_EXCEEDED = "stock_limit_exceeded"
    DUPLICATE_COUPON_CODE = "duplicate_coupon_code"
    COUPON_MINIMUM_NOT_MET = "coupon_minimum_not_met"
    INVALID_INPUT_FORMAT = "invalid_input_format"
    PRODUCT_NOT_FOUND = "product_not_found"
    COUPON_NOT_FOUND = "coupon_not_found"
    EMPTY_CART = "empty_cart"


class Severity(str, Enum):
    """Severity of a user-visible outcome message"""
    ERROR = "error"
    SUCCESS = "success"
    WARNING = "warning"


@dataclass(frozen=True)
class CartResult:
    """Result of a cart mutation; on failure `cart` is the input cart"""
    cart: list[CartItem]
    success: bool
    message: Optional[str] = None
    error: Optional[ErrorKind] = None


@dataclass(frozen=True)
class CouponResult:
    """Result of selecting a coupon; `selected` is the active coupon afterwards"""
    selected: Optional[Coupon]
    success: bool
    message: str
    error: Optional[ErrorKind] = None

    @property
    def accepted(self) -> bool:
        return self.success


@dataclass(frozen=True)
class RegistryResult:
    """Result of a coupon registry mutation"""
    coupons: list[Coupon]
    success: bool
    message: str
    error: Optional[ErrorKind] = None


@dataclass(frozen=True)
class ProductResult:
    """Result of a catalog mutation"""
    products: list[Product]
    product: Optional[Product] = None


@dataclass(frozen=True)
class OperationResult:
    """Outcome handed back by the storefront service to its caller"""
    success: bool
    message: str
    error: Optional[ErrorKind] = None
    data: Any = None

    @property
    def severity(self) -> Severity:
        return Severity.SUCCESS if self.success else Severity.ERROR

    @classmethod
    def ok(cls, message: str, data: Any = None) -> "OperationResult":
        return cls(success=True, message=message, data=data)

    @classmethod
    def fail(cls, error: ErrorKind, message: str) -> "OperationResult":
        return cls(success=False, message=message, error=error)
