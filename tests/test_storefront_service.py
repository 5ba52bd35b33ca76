import pytest

from storefront.database import StoreRepository
from storefront.engine.validators import STOCK_NEGATIVE_ERROR, STOCK_RANGE_ERROR
from storefront.models import DiscountType, ErrorKind, Severity
from storefront.services import StorefrontService

from factories import amount_coupon, make_product, percent_coupon


def last_notification(notifier):
    return notifier.recent(1)[0]


@pytest.fixture
def small_store(storage, notifier):
    """Store with one 1000-priced product, 10 in stock, 10% off from 10 units"""
    repository = StoreRepository(storage, seed=False)
    repository.save_products([make_product()])
    repository.save_coupons([percent_coupon(), amount_coupon()])
    return StorefrontService(repository, notifier)


class TestCart:
    def test_add_to_cart_persists_and_notifies(self, small_store, storage, notifier):
        result = small_store.add_to_cart("p1")
        assert result.success
        assert storage.get("cart")[0]["quantity"] == 1
        assert last_notification(notifier).severity == Severity.SUCCESS

    def test_add_unknown_product(self, small_store, notifier):
        result = small_store.add_to_cart("missing")
        assert result.error == ErrorKind.PRODUCT_NOT_FOUND
        assert last_notification(notifier).severity == Severity.ERROR

    def test_sold_out_is_not_persisted(self, small_store, storage, notifier):
        for _ in range(10):
            small_store.add_to_cart("p1")
        before = storage.get("cart")

        result = small_store.add_to_cart("p1")
        assert not result.success
        assert result.error == ErrorKind.INSUFFICIENT_STOCK
        assert storage.get("cart") == before
        assert last_notification(notifier).message == result.message

    def test_update_quantity_uses_catalog_stock(self, small_store):
        small_store.add_to_cart("p1")
        small_store.update_product("p1", {"stock": 4})

        result = small_store.update_quantity("p1", 5)
        assert result.error == ErrorKind.STOCK_LIMIT_EXCEEDED
        assert small_store.get_cart()[0].quantity == 1

        assert small_store.update_quantity("p1", 4).success
        assert small_store.get_cart()[0].quantity == 4

    def test_update_to_zero_removes(self, small_store, storage):
        small_store.add_to_cart("p1")
        assert small_store.update_quantity("p1", 0).success
        assert small_store.get_cart() == []
        assert storage.get("cart") is None

    def test_line_of_deleted_product_can_be_removed(self, small_store):
        small_store.add_to_cart("p1")
        small_store.delete_product("p1")

        result = small_store.update_quantity("p1", 0)
        assert result.success
        assert small_store.get_cart() == []

    def test_deleted_product_cannot_be_increased(self, small_store):
        small_store.add_to_cart("p1")
        small_store.delete_product("p1")
        assert small_store.update_quantity("p1", 2).error == ErrorKind.PRODUCT_NOT_FOUND

    def test_quantity_changes_are_silent(self, small_store, notifier):
        small_store.add_to_cart("p1")
        notifier.clear()
        small_store.update_quantity("p1", 3)
        small_store.remove_from_cart("p1")
        assert notifier.recent() == []

    def test_totals_and_item_count(self, small_store):
        small_store.add_to_cart("p1")
        small_store.update_quantity("p1", 9)
        assert small_store.item_count() == 9
        assert small_store.totals().total_after_discount == 9000


class TestCoupons:
    def test_percentage_coupon_below_minimum(self, small_store, notifier):
        small_store.add_to_cart("p1")
        small_store.update_quantity("p1", 9)

        result = small_store.apply_coupon("PERCENT10")
        assert result.error == ErrorKind.COUPON_MINIMUM_NOT_MET
        assert small_store.selected_coupon is None
        assert last_notification(notifier).severity == Severity.ERROR

    def test_amount_coupon_applies(self, storage, notifier):
        repository = StoreRepository(storage, seed=False)
        repository.save_products([make_product(price=10000, stock=5, discounts=())])
        repository.save_coupons([amount_coupon()])
        store = StorefrontService(repository, notifier)

        store.add_to_cart("p1")
        store.add_to_cart("p1")
        assert store.apply_coupon("AMOUNT5000").success
        assert store.totals().total_after_discount == 15000

    def test_unknown_coupon(self, small_store):
        assert small_store.apply_coupon("NOPE1").error == ErrorKind.COUPON_NOT_FOUND

    def test_clear_coupon(self, small_store):
        small_store.add_to_cart("p1")
        small_store.apply_coupon("AMOUNT5000")
        assert small_store.apply_coupon(None).success
        assert small_store.selected_coupon is None

    def test_create_coupon_twice(self, small_store):
        coupon = percent_coupon(code="SAVE10")
        assert small_store.create_coupon(coupon).success

        result = small_store.create_coupon(coupon)
        assert result.error == ErrorKind.DUPLICATE_COUPON_CODE
        assert len(small_store.list_coupons()) == 3

    @pytest.mark.parametrize(
        "code, discount_type, value",
        [
            ("bad", DiscountType.AMOUNT, 1000),
            ("GOOD1", DiscountType.PERCENTAGE, 120),
            ("GOOD2", DiscountType.AMOUNT, 200000),
        ],
    )
    def test_create_coupon_validates(self, small_store, code, discount_type, value):
        coupon = amount_coupon(code=code, value=value).model_copy(
            update={"discount_type": discount_type}
        )
        result = small_store.create_coupon(coupon)
        assert result.error == ErrorKind.INVALID_INPUT_FORMAT
        assert len(small_store.list_coupons()) == 2

    def test_negative_amount_is_stored_as_zero(self, small_store):
        result = small_store.create_coupon(amount_coupon(code="ZERO1", value=-500))
        assert result.success
        assert small_store.list_coupons()[-1].discount_value == 0

    def test_code_can_be_reused_after_deleting_every_coupon(self, storefront):
        for coupon in storefront.list_coupons():
            storefront.delete_coupon(coupon.code)
        assert storefront.list_coupons() == []

        assert storefront.create_coupon(amount_coupon()).success
        assert [c.code for c in storefront.list_coupons()] == ["AMOUNT5000"]

    def test_deleting_selected_coupon_clears_selection(self, small_store):
        small_store.add_to_cart("p1")
        small_store.apply_coupon("AMOUNT5000")

        assert small_store.delete_coupon("AMOUNT5000").success
        assert small_store.selected_coupon is None
        assert [c.code for c in small_store.list_coupons()] == ["PERCENT10"]

    def test_deleting_other_coupon_keeps_selection(self, small_store):
        small_store.add_to_cart("p1")
        small_store.apply_coupon("AMOUNT5000")
        small_store.delete_coupon("PERCENT10")
        assert small_store.selected_coupon.code == "AMOUNT5000"

    def test_delete_unknown_coupon(self, small_store):
        assert small_store.delete_coupon("NOPE1").error == ErrorKind.COUPON_NOT_FOUND


class TestCatalog:
    def test_create_product(self, small_store, storage):
        result = small_store.create_product({"name": "Lamp", "price": 3000, "stock": 4})
        assert result.success
        assert len(storage.get("products")) == 2
        assert small_store.get_product(result.data.id).name == "Lamp"

    @pytest.mark.parametrize(
        "fields",
        [
            {"name": "Free", "price": 0, "stock": 1},
            {"name": "Huge", "price": 10, "stock": 10000},
            {"name": "NoPrice", "stock": 1},
            {"name": "Negative", "price": 10, "stock": -1},
        ],
    )
    def test_create_product_rejects_invalid_input(self, small_store, fields):
        result = small_store.create_product(fields)
        assert result.error == ErrorKind.INVALID_INPUT_FORMAT
        assert len(small_store.list_products()) == 1

    def test_negative_stock_message(self, small_store):
        result = small_store.create_product({"name": "Negative", "price": 10, "stock": -1})
        assert result.message == STOCK_NEGATIVE_ERROR

        result = small_store.create_product({"name": "Huge", "price": 10, "stock": 10000})
        assert result.message == STOCK_RANGE_ERROR

    def test_update_product(self, small_store):
        result = small_store.update_product("p1", {"name": "Renamed"})
        assert result.data.name == "Renamed"

    def test_update_rejects_bad_price(self, small_store):
        result = small_store.update_product("p1", {"price": -5})
        assert result.error == ErrorKind.INVALID_INPUT_FORMAT
        assert small_store.get_product("p1").price == 1000

    def test_update_unknown_product(self, small_store):
        assert small_store.update_product("zz", {"name": "x"}).error == ErrorKind.PRODUCT_NOT_FOUND

    def test_delete_product(self, small_store):
        assert small_store.delete_product("p1").success
        assert small_store.get_product("p1") is None
        assert small_store.delete_product("p1").error == ErrorKind.PRODUCT_NOT_FOUND

    def test_deleting_every_product_empties_catalog(self, storefront):
        for product in storefront.list_products():
            assert storefront.delete_product(product.id).success
        assert storefront.list_products() == []
        assert storefront.search_products("product") == []

    def test_search(self, storefront):
        assert [p.id for p in storefront.search_products("product 2")] == ["p2"]

    def test_display_price_sold_out(self, small_store):
        product = small_store.get_product("p1")
        assert small_store.display_price(product.price, product=product) == "₩1,000"

        small_store.add_to_cart("p1")
        small_store.update_quantity("p1", 10)
        assert small_store.display_price(product.price, product=product) == "SOLD OUT"
        assert small_store.display_price(product.price, is_admin=True) == "1,000원"


class TestCheckout:
    def test_checkout_clears_cart_and_coupon(self, small_store, storage):
        small_store.add_to_cart("p1")
        small_store.update_quantity("p1", 10)
        small_store.apply_coupon("PERCENT10")

        result = small_store.checkout()
        assert result.success
        order = result.data
        assert order.order_id.startswith("ORD-")
        assert order.item_count == 10
        # 8500 after line discounts, below the percentage coupon minimum
        assert order.coupon_code is None
        assert order.totals.total_after_discount == 8500
        assert storage.get("cart") is None
        assert small_store.selected_coupon is None

    def test_checkout_records_totals(self, small_store):
        small_store.add_to_cart("p1")
        small_store.update_quantity("p1", 3)
        small_store.apply_coupon("AMOUNT5000")

        order = small_store.checkout().data
        assert order.totals.total_before_discount == 3000
        assert order.totals.total_after_discount == 0
        assert order.coupon_code == "AMOUNT5000"

    def test_empty_cart(self, small_store):
        assert small_store.checkout().error == ErrorKind.EMPTY_CART
