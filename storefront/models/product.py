"""Product models for the storefront catalog"""

from pydantic import BaseModel, ConfigDict, Field
from typing import Optional


class DiscountTier(BaseModel):
    """Quantity tier: buying at least `quantity` units unlocks `rate`"""
    model_config = ConfigDict(frozen=True)

    quantity: int = Field(gt=0)
    rate: float = Field(ge=0, le=1)


class Product(BaseModel):
    """Product in the catalog"""
    model_config = ConfigDict(frozen=True, from_attributes=True)

    id: str
    name: str
    price: float = Field(gt=0)
    stock: int = Field(ge=0, le=9999)
    discounts: list[DiscountTier] = []
    description: Optional[str] = None
    is_recommended: bool = False


class ProductCreateRequest(BaseModel):
    """Request to add a product (the id is assigned by the catalog)"""
    name: str
    price: float
    stock: int
    discounts: list[DiscountTier] = []
    description: Optional[str] = None
    is_recommended: bool = False


class ProductUpdateRequest(BaseModel):
    """Partial product update; omitted fields are left untouched"""
    name: Optional[str] = None
    price: Optional[float] = None
    stock: Optional[int] = None
    discounts: Optional[list[DiscountTier]] = None
    description: Optional[str] = None
    is_recommended: Optional[bool] = None


class ProductView(BaseModel):
    """Product as shown on the storefront"""
    product: Product
    remaining_stock: int
    display_price: str


class ProductSearchResponse(BaseModel):
    """Response from product search"""
    products: list[ProductView]
    total: int
    query: Optional[str] = None


class ProductResponse(BaseModel):
    """Product API response"""
    product: Optional[Product] = None
    message: Optional[str] = None
