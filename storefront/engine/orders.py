"""Turns a cart snapshot into an immutable order record"""

import uuid
from datetime import datetime

from ..models.checkout import GUEST_USER_ID, CustomerIdentity, Order, OrderItem, OrderStatus
from .cart import CartSnapshot


def new_order_id() -> str:
    return f"ORD-{uuid.uuid4().hex[:8].upper()}"


def assemble(
    snapshot: CartSnapshot,
    customer: CustomerIdentity,
    currency: str = "NGN",
) -> Order:
    """
    Build an order from the cart's lines at checkout time.

    Unit prices are frozen at the tiered price each line had when the
    snapshot was taken. The cart itself is left untouched; clearing it is
    up to the caller once the order has been stored.
    """
    if snapshot.is_empty:
        raise ValueError("Cannot assemble an order from an empty cart")

    items = tuple(
        OrderItem(
            product_id=line.product.id,
            name=line.product.name,
            unit_price=line.unit_price,
            quantity=line.quantity,
            selected_color=line.selected_color,
            selected_size=line.selected_size,
            total_price=line.total_price,
        )
        for line in snapshot.lines
    )

    return Order(
        order_id=new_order_id(),
        user_id=customer.user_id or GUEST_USER_ID,
        customer_name=customer.name,
        customer_email=customer.email,
        customer_phone=customer.phone,
        items=items,
        total=snapshot.total,
        currency=currency,
        status=OrderStatus.PENDING,
        created_at=datetime.utcnow(),
    )
