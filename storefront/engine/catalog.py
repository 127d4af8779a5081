"""Stock resolution over a product's (color, size) variant matrix"""

from typing import Optional

from ..models.product import Product, ProductVariant, StockStatus

LOW_STOCK_THRESHOLD = 5


def find_variant(
    product: Product,
    color: Optional[str],
    size: Optional[str],
) -> Optional[ProductVariant]:
    """Return the variant entry for (color, size), or None if it is not defined"""
    color = color or ""
    size = size or ""
    return next(
        (v for v in product.variants if v.color == color and v.size == size),
        None,
    )


def stock_for(product: Product, color: Optional[str], size: Optional[str]) -> int:
    """Stock for a combination; undefined combinations count as zero"""
    variant = find_variant(product, color, size)
    return variant.stock if variant else 0


def available_stock(product: Product, color: Optional[str], size: Optional[str]) -> int:
    """Units that can be sold for a selection: variant stock, or product stock without variants"""
    if not product.has_variants:
        return product.stock
    return stock_for(product, color, size)


def total_stock(product: Product) -> int:
    """Stock across all variants, or the product's own stock when it has none"""
    if not product.has_variants:
        return product.stock
    return sum(v.stock for v in product.variants)


def stock_status(product: Product) -> StockStatus:
    total = total_stock(product)
    if total == 0:
        return StockStatus.OUT
    if total <= LOW_STOCK_THRESHOLD:
        return StockStatus.LOW
    return StockStatus.IN


def is_size_selectable(
    product: Product,
    size: str,
    color: Optional[str] = None,
) -> bool:
    """
    Whether `size` can be picked, optionally narrowed to one color.

    Products without variants are unconstrained. A blank color means none
    has been picked yet and does not narrow the check.
    """
    if not product.has_variants:
        return True
    return any(
        v.size == size and (not color or v.color == color) and v.stock > 0
        for v in product.variants
    )


def is_orderable(product: Product, color: Optional[str], size: Optional[str]) -> bool:
    """Whether (color, size) resolves to an in-stock variant"""
    if not product.has_variants:
        return True
    return stock_for(product, color, size) > 0


def size_matrix(product: Product, color: Optional[str] = None) -> list[tuple[str, bool]]:
    """(size, selectable) for every declared size, in catalog order"""
    return [(size, is_size_selectable(product, size, color)) for size in product.sizes]
