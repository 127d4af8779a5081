"""
Quantity-tiered pricing.

Tiers map an aggregate quantity to a per-unit price. A quantity that falls
outside every tier is charged the product's base price.
"""

from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, Optional

from ..models.cart import BulkEntry, BulkQuote
from ..models.product import PricingTier, Product


def matching_tier(product: Product, quantity: int) -> Optional[PricingTier]:
    """Return the first tier (ascending min_qty) covering quantity, if any"""
    for tier in sorted(product.pricing_tiers, key=lambda t: t.min_qty):
        if tier.matches(quantity):
            return tier
    return None


def effective_price(product: Product, quantity: int) -> Decimal:
    """Per-unit price for buying `quantity` units of `product`"""
    tier = matching_tier(product, quantity)
    if tier is None:
        return product.price
    return tier.price_per_unit


def discount_percent(base_price: Decimal, unit_price: Decimal) -> int:
    """Whole-percent saving of unit_price against base_price"""
    if base_price <= 0 or unit_price >= base_price:
        return 0
    saving = (base_price - unit_price) / base_price * 100
    return int(saving.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def bulk_quote(product: Product, entries: Iterable[BulkEntry]) -> BulkQuote:
    """
    Price a mixed-variant bulk request as a single aggregate quantity.

    Entry quantities are summed before the tier lookup, so a buyer mixing
    sizes and colors gets the same unit price as buying that many of one
    variant. The quote is a preview only: once merged into a cart each line
    is priced on its own quantity.
    """
    total_quantity = sum(entry.quantity for entry in entries if entry.quantity > 0)
    tier = matching_tier(product, total_quantity)
    unit_price = tier.price_per_unit if tier else product.price

    return BulkQuote(
        product_id=product.id,
        base_price=product.price,
        unit_price=unit_price,
        total_quantity=total_quantity,
        total_price=unit_price * total_quantity,
        discount_percent=discount_percent(product.price, unit_price),
        tier=tier,
    )
