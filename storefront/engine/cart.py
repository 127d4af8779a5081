"""
Cart aggregation.

A cart is an insertion-ordered set of lines keyed by (product id, color,
size). Adding an existing key merges quantities; setting a quantity
replaces it. The cart does not consult stock: callers gate on
`catalog.is_orderable` before adding.
"""

import logging
from dataclasses import dataclass, replace
from decimal import Decimal
from typing import Any, Iterable, NamedTuple, Optional

from ..models.cart import BulkEntry
from ..models.product import Product
from .pricing import effective_price

logger = logging.getLogger(__name__)


class CartKey(NamedTuple):
    """Composite identity of a cart line"""
    product_id: str
    color: str = ""
    size: str = ""

    @classmethod
    def of(
        cls,
        product_id: Optional[str],
        color: Optional[str] = None,
        size: Optional[str] = None,
    ) -> "CartKey":
        return cls(product_id or "", color or "", size or "")


@dataclass
class CartLine:
    """One product selection and its quantity"""
    product: Product
    quantity: int
    selected_color: str = ""
    selected_size: str = ""

    @property
    def key(self) -> CartKey:
        return CartKey.of(self.product.id, self.selected_color, self.selected_size)

    @property
    def unit_price(self) -> Decimal:
        return effective_price(self.product, self.quantity)

    @property
    def total_price(self) -> Decimal:
        return self.unit_price * self.quantity


@dataclass(frozen=True)
class CartSnapshot:
    """Read-only view of a cart handed to checkout"""
    lines: tuple[CartLine, ...]
    total: Decimal

    @property
    def is_empty(self) -> bool:
        return not self.lines


class Cart:
    """Shopping cart aggregate"""

    def __init__(self):
        self._lines: dict[CartKey, CartLine] = {}

    def __len__(self) -> int:
        return len(self._lines)

    @property
    def lines(self) -> list[CartLine]:
        return list(self._lines.values())

    @property
    def item_count(self) -> int:
        return sum(line.quantity for line in self._lines.values())

    def get_line(
        self,
        product_id: str,
        color: Optional[str] = None,
        size: Optional[str] = None,
    ) -> Optional[CartLine]:
        return self._lines.get(CartKey.of(product_id, color, size))

    def add_item(
        self,
        product: Product,
        color: Optional[str] = None,
        size: Optional[str] = None,
        quantity: int = 1,
    ) -> None:
        """Merge quantity into the matching line, or append a new one"""
        quantity = max(quantity, 1)
        key = CartKey.of(product.id, color, size)
        line = self._lines.get(key)

        if line:
            line.quantity += quantity
        else:
            self._lines[key] = CartLine(
                product=product,
                quantity=quantity,
                selected_color=key.color,
                selected_size=key.size,
            )
        logger.debug(f"Cart line {key} now at {self._lines[key].quantity}")

    def add_bulk_items(self, product: Product, entries: Iterable[BulkEntry]) -> None:
        """Apply add_item for each entry in order; empty rows are skipped"""
        for entry in entries:
            if entry.quantity <= 0:
                continue
            self.add_item(product, entry.selected_color, entry.selected_size, entry.quantity)

    def remove_item(
        self,
        product_id: str,
        color: Optional[str] = None,
        size: Optional[str] = None,
    ) -> None:
        self._lines.pop(CartKey.of(product_id, color, size), None)

    def update_quantity(
        self,
        product_id: str,
        quantity: int,
        color: Optional[str] = None,
        size: Optional[str] = None,
    ) -> None:
        """Set a line's quantity exactly; zero or less removes the line"""
        if quantity <= 0:
            self.remove_item(product_id, color, size)
            return

        line = self._lines.get(CartKey.of(product_id, color, size))
        if line:
            line.quantity = quantity

    def clear(self) -> None:
        self._lines.clear()

    def get_total(self) -> Decimal:
        """Sum of line totals, each line tiered on its own quantity"""
        return sum((line.total_price for line in self._lines.values()), Decimal("0"))

    def snapshot(self) -> CartSnapshot:
        return CartSnapshot(
            lines=tuple(replace(line) for line in self._lines.values()),
            total=self.get_total(),
        )

    def serialize(self) -> dict[str, Any]:
        """JSON-safe representation for an external storage adapter"""
        return {
            "items": [
                {
                    "product": line.product.model_dump(mode="json"),
                    "quantity": line.quantity,
                    "selected_color": line.selected_color,
                    "selected_size": line.selected_size,
                }
                for line in self._lines.values()
            ]
        }

    def hydrate(self, snapshot: dict[str, Any]) -> None:
        """Replace the cart's lines with those of a serialized cart"""
        self._lines = {}
        for item in snapshot.get("items", []):
            line = CartLine(
                product=Product.model_validate(item["product"]),
                quantity=int(item["quantity"]),
                selected_color=item.get("selected_color") or "",
                selected_size=item.get("selected_size") or "",
            )
            self._lines[line.key] = line

    @classmethod
    def from_snapshot(cls, snapshot: dict[str, Any]) -> "Cart":
        cart = cls()
        cart.hydrate(snapshot)
        return cart
