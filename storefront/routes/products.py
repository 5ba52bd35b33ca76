"""Product API routes"""

from typing import Optional
from fastapi import APIRouter, HTTPException, Query, Depends

from ..models.product import (
    Product,
    ProductCreateRequest,
    ProductUpdateRequest,
    ProductView,
    ProductSearchResponse,
    ProductResponse,
)
from ..security.admin import AdminContext, require_admin, display_mode
from ..services import StorefrontService, get_storefront
from .errors import raise_for_failure

router = APIRouter(prefix="/api/products", tags=["Products"])


@router.get("", response_model=ProductSearchResponse)
async def search_products(
    query: Optional[str] = Query(None, description="Match on name or description"),
    admin: AdminContext = Depends(display_mode),
    storefront: StorefrontService = Depends(get_storefront),
):
    """
    Search products in the catalog.

    Prices render as SOLD OUT once the cart holds the whole stock.
    """
    products = storefront.search_products(query)
    cart = storefront.get_cart()

    views = [
        ProductView(
            product=product,
            remaining_stock=storefront.remaining_stock(product, cart),
            display_price=storefront.display_price(
                product.price, product=product, is_admin=admin.is_admin, cart=cart
            ),
        )
        for product in products
    ]
    return ProductSearchResponse(products=views, total=len(views), query=query)


@router.get("/{product_id}", response_model=Product)
async def get_product(
    product_id: str,
    storefront: StorefrontService = Depends(get_storefront),
):
    """Get a product by ID"""
    product = storefront.get_product(product_id)
    if not product:
        raise HTTPException(status_code=404, detail="Product not found")
    return product


@router.post("", response_model=ProductResponse, status_code=201)
async def create_product(
    request: ProductCreateRequest,
    admin: AdminContext = Depends(require_admin),
    storefront: StorefrontService = Depends(get_storefront),
):
    """Add a product to the catalog"""
    result = storefront.create_product(request.model_dump())
    raise_for_failure(result)
    return ProductResponse(product=result.data, message=result.message)


@router.put("/{product_id}", response_model=ProductResponse)
async def update_product(
    product_id: str,
    request: ProductUpdateRequest,
    admin: AdminContext = Depends(require_admin),
    storefront: StorefrontService = Depends(get_storefront),
):
    """Update the given fields of a product"""
    result = storefront.update_product(product_id, request.model_dump(exclude_none=True))
    raise_for_failure(result)
    return ProductResponse(product=result.data, message=result.message)


@router.delete("/{product_id}", response_model=ProductResponse)
async def delete_product(
    product_id: str,
    admin: AdminContext = Depends(require_admin),
    storefront: StorefrontService = Depends(get_storefront),
):
    """Remove a product from the catalog"""
    result = storefront.delete_product(product_id)
    raise_for_failure(result)
    return ProductResponse(message=result.message)
