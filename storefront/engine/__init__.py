# Cart & pricing engine

from .pricing import effective_price, bulk_quote, matching_tier, discount_percent
from .catalog import (
    find_variant,
    stock_for,
    available_stock,
    total_stock,
    stock_status,
    is_size_selectable,
    is_orderable,
    size_matrix,
)
from .cart import Cart, CartKey, CartLine, CartSnapshot
from .orders import assemble

__all__ = [
    "effective_price",
    "bulk_quote",
    "matching_tier",
    "discount_percent",
    "find_variant",
    "stock_for",
    "available_stock",
    "total_stock",
    "stock_status",
    "is_size_selectable",
    "is_orderable",
    "size_matrix",
    "Cart",
    "CartKey",
    "CartLine",
    "CartSnapshot",
    "assemble",
]
