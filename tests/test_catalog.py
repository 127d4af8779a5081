from decimal import Decimal

from storefront.engine.catalog import (
    available_stock,
    find_variant,
    is_orderable,
    is_size_selectable,
    size_matrix,
    stock_for,
    stock_status,
    total_stock,
)
from storefront.models.product import Product, ProductVariant, StockStatus


def test_stock_for_defined_and_undefined_combinations(tiered_shirt):
    assert stock_for(tiered_shirt, "Red", "M") == 3
    assert stock_for(tiered_shirt, "Red", "L") == 0
    assert stock_for(tiered_shirt, "Blue", "L") == 0
    assert find_variant(tiered_shirt, "Red", "L") is None
    assert find_variant(tiered_shirt, "Blue", "L").stock == 0


def test_single_variant_example():
    product = Product(
        id="p",
        name="P",
        price=Decimal("10"),
        variants=[ProductVariant(color="Red", size="M", stock=3)],
    )

    assert stock_for(product, "Red", "L") == 0
    assert is_orderable(product, "Red", "M")
    assert not is_orderable(product, "Red", "L")


def test_zero_stock_variant_is_not_orderable(tiered_shirt):
    assert not is_orderable(tiered_shirt, "Blue", "L")


def test_unselected_axes_are_not_orderable(tiered_shirt):
    assert not is_orderable(tiered_shirt, None, "M")
    assert not is_orderable(tiered_shirt, "Red", None)
    assert not is_orderable(tiered_shirt, "Green", "M")


def test_product_without_variants_is_unconstrained(plain_mug):
    assert is_orderable(plain_mug, None, None)
    assert is_size_selectable(plain_mug, "XL")
    assert stock_for(plain_mug, None, None) == 0


def test_size_selectable_with_and_without_color_filter(tiered_shirt):
    assert is_size_selectable(tiered_shirt, "M")
    assert is_size_selectable(tiered_shirt, "S", "Red")
    assert not is_size_selectable(tiered_shirt, "S", "Blue")
    assert not is_size_selectable(tiered_shirt, "L")


def test_size_matrix_follows_declared_size_order(tiered_shirt):
    assert size_matrix(tiered_shirt) == [("S", True), ("M", True), ("L", False)]
    assert size_matrix(tiered_shirt, "Blue") == [("S", False), ("M", True), ("L", False)]


def test_color_only_product_resolves_with_blank_size():
    cap = Product(
        id="cap",
        name="Cap",
        price=Decimal("1500"),
        variants=[
            ProductVariant(color="Black", size="", stock=4),
            ProductVariant(color="White", size="", stock=0),
        ],
    )

    assert is_orderable(cap, "Black", None)
    assert not is_orderable(cap, "White", None)
    assert stock_for(cap, "Black", "") == 4


def test_blank_color_does_not_narrow_size_matrix(tiered_shirt):
    assert size_matrix(tiered_shirt, "") == size_matrix(tiered_shirt)
    assert is_size_selectable(tiered_shirt, "M", "")


def test_total_stock_sums_variants_or_uses_product_stock(tiered_shirt, plain_mug):
    assert total_stock(tiered_shirt) == 21
    assert total_stock(plain_mug) == 0
    assert total_stock(plain_mug.model_copy(update={"stock": 7})) == 7


def test_available_stock_for_plain_product_ignores_selection(plain_mug):
    mug = plain_mug.model_copy(update={"stock": 12})

    assert available_stock(mug, None, None) == 12
    assert available_stock(mug, "Red", "XL") == 12


def test_stock_status_thresholds(plain_mug):
    def status(stock):
        return stock_status(plain_mug.model_copy(update={"stock": stock}))

    assert status(0) == StockStatus.OUT
    assert status(1) == StockStatus.LOW
    assert status(5) == StockStatus.LOW
    assert status(6) == StockStatus.IN


def test_stock_status_counts_every_variant(tiered_shirt):
    assert stock_status(tiered_shirt) == StockStatus.IN

    sparse = tiered_shirt.model_copy(
        update={"variants": [ProductVariant(color="Red", size="S", stock=2)]}
    )
    assert stock_status(sparse) == StockStatus.LOW
