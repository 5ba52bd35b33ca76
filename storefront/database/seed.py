"""Default catalog and coupons for a fresh store"""

from ..models.coupon import Coupon, DiscountType
from ..models.product import DiscountTier, Product

# Default product catalog
PRODUCTS: list[Product] = [
    Product(
        id="p1",
        name="Product 1",
        price=10000,
        stock=20,
        discounts=[
            DiscountTier(quantity=10, rate=0.1),
            DiscountTier(quantity=20, rate=0.2),
        ],
        description="Premium quality, our best seller.",
    ),
    Product(
        id="p2",
        name="Product 2",
        price=20000,
        stock=20,
        discounts=[DiscountTier(quantity=10, rate=0.15)],
        description="Recommended for everyday use.",
        is_recommended=True,
    ),
    Product(
        id="p3",
        name="Product 3",
        price=30000,
        stock=20,
        discounts=[
            DiscountTier(quantity=10, rate=0.2),
            DiscountTier(quantity=30, rate=0.25),
        ],
        description="Large capacity, built to last.",
    ),
]

# Default coupon registry
COUPONS: list[Coupon] = [
    Coupon(
        code="AMOUNT5000",
        name="5,000 off",
        discount_type=DiscountType.AMOUNT,
        discount_value=5000,
    ),
    Coupon(
        code="PERCENT10",
        name="10% off",
        discount_type=DiscountType.PERCENTAGE,
        discount_value=10,
    ),
]
