from storefront.models import CartItem, Coupon, DiscountTier, DiscountType, Product


def make_product(
    id="p1",
    price=1000,
    stock=10,
    discounts=((10, 0.1),),
    name=None,
    description=None,
):
    return Product(
        id=id,
        name=name or f"Product {id}",
        price=price,
        stock=stock,
        discounts=[DiscountTier(quantity=q, rate=r) for q, r in discounts],
        description=description,
    )


def line(product, quantity):
    return CartItem(product=product, quantity=quantity)


def percent_coupon(code="PERCENT10", value=10):
    return Coupon(
        code=code,
        name=f"{value}% off",
        discount_type=DiscountType.PERCENTAGE,
        discount_value=value,
    )


def amount_coupon(code="AMOUNT5000", value=5000):
    return Coupon(
        code=code,
        name=f"{value} off",
        discount_type=DiscountType.AMOUNT,
        discount_value=value,
    )
