# Storefront Models

from .product import (
    DiscountTier,
    Product,
    ProductCreateRequest,
    ProductUpdateRequest,
    ProductView,
    ProductSearchResponse,
    ProductResponse,
)
from .coupon import (
    Coupon,
    DiscountType,
    CouponCreateRequest,
    ApplyCouponRequest,
    CouponListResponse,
    CouponResponse,
)
from .cart import (
    Cart,
    CartItem,
    CartTotals,
    CartLineView,
    AddToCartRequest,
    UpdateCartItemRequest,
    CartResponse,
    OrderConfirmation,
    CheckoutResponse,
)
from .results import (
    ErrorKind,
    Severity,
    CartResult,
    CouponResult,
    RegistryResult,
    ProductResult,
    OperationResult,
)

__all__ = [
    "DiscountTier",
    "Product",
    "ProductCreateRequest",
    "ProductUpdateRequest",
    "ProductView",
    "ProductSearchResponse",
    "ProductResponse",
    "Coupon",
    "DiscountType",
    "CouponCreateRequest",
    "ApplyCouponRequest",
    "CouponListResponse",
    "CouponResponse",
    "Cart",
    "CartItem",
    "CartTotals",
    "CartLineView",
    "AddToCartRequest",
    "UpdateCartItemRequest",
    "CartResponse",
    "OrderConfirmation",
    "CheckoutResponse",
    "ErrorKind",
    "Severity",
    "CartResult",
    "CouponResult",
    "RegistryResult",
    "ProductResult",
    "OperationResult",
]
