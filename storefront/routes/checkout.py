"""Checkout API routes for the storefront"""

import logging
from fastapi import APIRouter, HTTPException

from ..core.config import settings
from ..models.checkout import (
    CheckoutRequest,
    CheckoutResponse,
    Order,
)
from ..database.carts import cart_db
from ..database.orders import order_db
from ..database.products import product_db
from ..engine import catalog
from ..engine.orders import assemble

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/checkout", tags=["Checkout"])


@router.post("", response_model=CheckoutResponse)
async def checkout(request: CheckoutRequest):
    """
    Place an order for the cart's current contents.

    Prices are frozen at each line's tiered unit price. The cart is cleared
    only after the order has been stored.
    """
    cart = cart_db.get_cart(request.cart_id)
    if cart is None:
        raise HTTPException(status_code=404, detail="Cart not found")

    if not len(cart):
        raise HTTPException(status_code=400, detail="Cart is empty")

    # Re-check availability against the live catalog
    for line in cart.lines:
        product = product_db.get_product(line.product.id)
        if not product:
            raise HTTPException(
                status_code=400,
                detail=f"{line.product.name} is no longer available",
            )
        if (
            catalog.available_stock(product, line.selected_color, line.selected_size)
            < line.quantity
        ):
            raise HTTPException(
                status_code=400,
                detail=f"Insufficient stock for {line.product.name}",
            )

    order = assemble(cart.snapshot(), request.customer, currency=settings.currency)
    order_db.save_order(order)

    cart.clear()
    cart_db.save_cart(request.cart_id, cart)

    logger.info(
        f"Order {order.order_id} created: {order.total} {order.currency} "
        f"for {order.user_id}"
    )

    return CheckoutResponse(success=True, order=order)


@router.get("/orders/{order_id}", response_model=Order)
async def get_order(order_id: str):
    """Get order details"""
    order = order_db.get_order(order_id)
    if not order:
        raise HTTPException(status_code=404, detail="Order not found")
    return order
