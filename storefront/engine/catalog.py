"""Product catalog operations"""

import time
from typing import Any, Optional

from ..models.product import Product
from ..models.results import ProductResult


def generate_product_id(products: list[Product], now: Optional[float] = None) -> str:
    """Timestamp-based id that is unique within `products`"""
    millis = int((time.time() if now is None else now) * 1000)
    existing = {p.id for p in products}

    product_id = f"p{millis}"
    suffix = 1
    while product_id in existing:
        product_id = f"p{millis}-{suffix}"
        suffix += 1
    return product_id


def find_product(products: list[Product], product_id: str) -> Optional[Product]:
    """Get a product by ID"""
    return next((p for p in products if p.id == product_id), None)


def add_product(products: list[Product], new_product: dict[str, Any]) -> ProductResult:
    """
    Append a product built from `new_product` under a freshly generated id.

    Any `id` in `new_product` is ignored.
    """
    fields = {k: v for k, v in new_product.items() if k != "id"}
    product = Product(id=generate_product_id(products), **fields)
    return ProductResult(products=[*products, product], product=product)


def update_product(
    products: list[Product],
    product_id: str,
    updates: dict[str, Any],
) -> ProductResult:
    """Merge `updates` into the matching product; unknown ids leave the catalog as is"""
    target = find_product(products, product_id)
    if target is None:
        return ProductResult(products=products)

    merged = {**target.model_dump(), **updates, "id": target.id}
    updated = Product.model_validate(merged)
    return ProductResult(
        products=[updated if p.id == product_id else p for p in products],
        product=updated,
    )


def delete_product(products: list[Product], product_id: str) -> list[Product]:
    return [p for p in products if p.id != product_id]


def filter_products(products: list[Product], search_term: Optional[str]) -> list[Product]:
    """Case-insensitive match on name or description; an empty term matches everything"""
    if not search_term:
        return list(products)

    term = search_term.lower()
    return [
        p for p in products
        if term in p.name.lower()
        or (p.description and term in p.description.lower())
    ]
