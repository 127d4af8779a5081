"""Order storage for the storefront"""

import logging
from typing import Optional

from ..models.checkout import Order, OrderStatus

logger = logging.getLogger(__name__)


class OrderDatabase:
    """In-memory order storage"""

    def __init__(self):
        self.orders: dict[str, Order] = {}

    def save_order(self, order: Order) -> Order:
        """Store a newly assembled order"""
        self.orders[order.order_id] = order
        return order

    def get_order(self, order_id: str) -> Optional[Order]:
        """Get an order by ID"""
        return self.orders.get(order_id)

    def update_status(self, order_id: str, status: OrderStatus) -> Optional[Order]:
        """Replace the stored order with a copy carrying the new status"""
        order = self.get_order(order_id)
        if not order:
            return None

        updated = order.model_copy(update={"status": status})
        self.orders[order_id] = updated
        logger.info(f"Order {order_id} status: {order.status.value} -> {status.value}")
        return updated

    def list_orders(self, limit: int = 50) -> list[Order]:
        """List recent orders"""
        orders = list(self.orders.values())
        orders.sort(key=lambda o: o.created_at, reverse=True)
        return orders[:limit]


# Singleton instance
order_db = OrderDatabase()
