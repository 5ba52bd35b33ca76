# Cart pricing and inventory engine

from .validators import (
    is_valid_price,
    is_valid_stock,
    is_valid_stock_range,
    is_valid_coupon_code,
    is_valid_discount_rate,
    is_valid_discount_amount,
    extract_numbers,
    is_numeric_string,
)
from .discount import (
    max_applicable_discount,
    line_total,
    line_discount_rate_percent,
    has_bulk_purchase,
    apply_coupon_to_total,
)
from .cart import (
    remaining_stock,
    add_item,
    remove_item,
    update_quantity,
    cart_total,
    cart_item_count,
)
from .coupon import apply_coupon, add_coupon, delete_coupon
from .catalog import add_product, update_product, delete_product, filter_products
from .formatters import format_price

__all__ = [
    "is_valid_price",
    "is_valid_stock",
    "is_valid_stock_range",
    "is_valid_coupon_code",
    "is_valid_discount_rate",
    "is_valid_discount_amount",
    "extract_numbers",
    "is_numeric_string",
    "max_applicable_discount",
    "line_total",
    "line_discount_rate_percent",
    "has_bulk_purchase",
    "apply_coupon_to_total",
    "remaining_stock",
    "add_item",
    "remove_item",
    "update_quantity",
    "cart_total",
    "cart_item_count",
    "apply_coupon",
    "add_coupon",
    "delete_coupon",
    "add_product",
    "update_product",
    "delete_product",
    "filter_products",
    "format_price",
]
