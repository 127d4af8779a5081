"""Cart storage for the storefront"""

import logging
import uuid
from typing import Any, Optional

from ..engine.cart import Cart

logger = logging.getLogger(__name__)


class CartDatabase:
    """
    In-memory cart storage.

    Carts are kept as serialized snapshots, the same shape a cookie or
    device-storage adapter would hold, and hydrated on every load.
    """

    def __init__(self):
        self.carts: dict[str, dict[str, Any]] = {}

    def create_cart(self) -> tuple[str, Cart]:
        """Create a new, empty cart"""
        cart_id = str(uuid.uuid4())
        cart = Cart()
        self.carts[cart_id] = cart.serialize()
        logger.info(f"Cart {cart_id} created")
        return cart_id, cart

    def get_cart(self, cart_id: str) -> Optional[Cart]:
        """Load a cart by ID"""
        snapshot = self.carts.get(cart_id)
        if snapshot is None:
            return None
        return Cart.from_snapshot(snapshot)

    def save_cart(self, cart_id: str, cart: Cart) -> None:
        """Persist the cart's current lines; last write wins"""
        self.carts[cart_id] = cart.serialize()


# Singleton instance
cart_db = CartDatabase()
