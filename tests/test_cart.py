from decimal import Decimal

import pytest

from storefront.engine.cart import Cart, CartKey
from storefront.engine.pricing import effective_price
from storefront.models.cart import BulkEntry


@pytest.fixture
def cart():
    return Cart()


def test_repeated_add_merges_into_one_line(cart, tiered_shirt):
    cart.add_item(tiered_shirt, "Red", "M", 2)
    cart.add_item(tiered_shirt, "Red", "M", 2)

    assert len(cart) == 1
    assert cart.get_line("shirt", "Red", "M").quantity == 4


def test_different_variants_are_distinct_lines(cart, tiered_shirt):
    cart.add_item(tiered_shirt, "Red", "M", 1)
    cart.add_item(tiered_shirt, "Blue", "M", 1)

    assert len(cart) == 2
    assert [line.key for line in cart.lines] == [
        CartKey("shirt", "Red", "M"),
        CartKey("shirt", "Blue", "M"),
    ]


def test_add_is_additive_update_is_replace(cart, tiered_shirt):
    cart.add_item(tiered_shirt, "Red", "S", 3)

    cart.add_item(tiered_shirt, "Red", "S", 2)
    assert cart.get_line("shirt", "Red", "S").quantity == 5

    cart.update_quantity("shirt", 2, "Red", "S")
    assert cart.get_line("shirt", "Red", "S").quantity == 2


def test_update_to_zero_removes_line(cart, tiered_shirt, plain_mug):
    cart.add_item(tiered_shirt, "Red", "S", 3)
    cart.add_item(plain_mug, quantity=2)

    cart.update_quantity("shirt", 0, "Red", "S")

    assert cart.get_line("shirt", "Red", "S") is None
    assert cart.get_total() == Decimal("1000")


def test_update_keeps_line_position(cart, tiered_shirt, plain_mug):
    cart.add_item(tiered_shirt, "Red", "S", 1)
    cart.add_item(plain_mug)

    cart.update_quantity("shirt", 7, "Red", "S")

    assert [line.product.id for line in cart.lines] == ["shirt", "mug"]


def test_update_of_missing_line_is_noop(cart, plain_mug):
    cart.add_item(plain_mug)
    cart.update_quantity("nope", 5)

    assert len(cart) == 1


def test_remove_missing_line_is_noop(cart, plain_mug):
    cart.add_item(plain_mug)
    cart.remove_item("mug", "Red", "S")

    assert len(cart) == 1
    cart.remove_item("mug")
    assert len(cart) == 0


def test_unset_selection_matches_blank_key(cart, plain_mug):
    cart.add_item(plain_mug, None, None, 1)
    cart.add_item(plain_mug, "", "", 1)

    assert len(cart) == 1
    assert CartKey.of("mug", None, None) == CartKey("mug", "", "")


def test_non_positive_add_counts_as_one(cart, plain_mug):
    cart.add_item(plain_mug, quantity=0)

    assert cart.get_line("mug").quantity == 1


def test_total_is_sum_of_per_line_tiered_prices(cart, tiered_shirt, plain_mug):
    cart.add_item(tiered_shirt, "Red", "S", 12)
    cart.add_item(tiered_shirt, "Blue", "M", 3)
    cart.add_item(plain_mug, quantity=4)

    expected = sum(
        effective_price(line.product, line.quantity) * line.quantity for line in cart.lines
    )
    assert cart.get_total() == expected
    assert cart.get_total() == Decimal("12") * 900 + Decimal("3") * 1000 + Decimal("4") * 500


def test_bulk_items_are_priced_per_line_after_merge(cart, tiered_shirt):
    cart.add_bulk_items(
        tiered_shirt,
        [
            BulkEntry(selected_color="Red", selected_size="S", quantity=6),
            BulkEntry(selected_color="Blue", selected_size="M", quantity=6),
        ],
    )

    assert len(cart) == 2
    # Each line of 6 is below the first tier
    assert cart.get_total() == Decimal("12000")


def test_bulk_entries_sharing_a_key_accumulate(cart, tiered_shirt):
    cart.add_item(tiered_shirt, "Red", "S", 1)
    cart.add_bulk_items(
        tiered_shirt,
        [
            BulkEntry(selected_color="Red", selected_size="S", quantity=4),
            BulkEntry(selected_color="Red", selected_size="S", quantity=5),
            BulkEntry(selected_color="Blue", selected_size="M", quantity=0),
        ],
    )

    assert len(cart) == 1
    line = cart.get_line("shirt", "Red", "S")
    assert line.quantity == 10
    assert line.unit_price == Decimal("900")


def test_empty_and_cleared_cart_total_zero(cart, tiered_shirt):
    assert cart.get_total() == 0

    cart.add_item(tiered_shirt, "Red", "S", 3)
    cart.clear()

    assert cart.get_total() == 0
    assert cart.lines == []


def test_snapshot_is_isolated_from_later_changes(cart, plain_mug):
    cart.add_item(plain_mug, quantity=2)
    snapshot = cart.snapshot()

    cart.add_item(plain_mug, quantity=5)
    cart.clear()

    assert snapshot.total == Decimal("1000")
    assert snapshot.lines[0].quantity == 2


def test_serialize_and_hydrate_restore_lines_in_order(cart, tiered_shirt, plain_mug):
    cart.add_item(plain_mug, quantity=2)
    cart.add_item(tiered_shirt, "Blue", "M", 11)

    restored = Cart.from_snapshot(cart.serialize())

    assert [line.key for line in restored.lines] == [line.key for line in cart.lines]
    assert restored.get_total() == cart.get_total()
    assert restored.get_line("shirt", "Blue", "M").product.pricing_tiers[0].min_qty == 10


def test_hydrate_replaces_existing_lines(cart, plain_mug, tiered_shirt):
    other = Cart()
    other.add_item(tiered_shirt, "Red", "S", 1)
    cart.add_item(plain_mug)

    cart.hydrate(other.serialize())

    assert [line.product.id for line in cart.lines] == ["shirt"]
