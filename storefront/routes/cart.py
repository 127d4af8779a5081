"""Cart API routes for the storefront"""

import logging
from typing import Optional

from fastapi import APIRouter, HTTPException, Query

from ..core.config import settings
from ..models.cart import (
    Cart,
    CartItem,
    AddToCartRequest,
    BulkAddToCartRequest,
    UpdateCartItemRequest,
    CartResponse,
)
from ..models.product import Product
from ..database.carts import cart_db
from ..engine import catalog, pricing
from ..engine.cart import Cart as CartAggregate
from .products import get_product_or_404

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/cart", tags=["Cart"])


def to_response_cart(cart_id: str, cart: CartAggregate) -> Cart:
    return Cart(
        cart_id=cart_id,
        items=[
            CartItem(
                product_id=line.product.id,
                product_name=line.product.name,
                selected_color=line.selected_color,
                selected_size=line.selected_size,
                quantity=line.quantity,
                unit_price=line.unit_price,
                total_price=line.total_price,
            )
            for line in cart.lines
        ],
        item_count=cart.item_count,
        total=cart.get_total(),
        currency=settings.currency,
    )


def load_cart_or_404(cart_id: str) -> CartAggregate:
    cart = cart_db.get_cart(cart_id)
    if cart is None:
        raise HTTPException(status_code=404, detail="Cart not found")
    return cart


def ensure_available(
    cart: CartAggregate,
    product: Product,
    color: Optional[str],
    size: Optional[str],
    quantity: int,
) -> None:
    """Reject selections that are unavailable or would exceed the stock on hand"""
    if not catalog.is_orderable(product, color, size):
        raise HTTPException(
            status_code=400,
            detail=f"{product.name} is not available in the selected color/size",
        )

    line = cart.get_line(product.id, color, size)
    wanted = quantity + (line.quantity if line else 0)
    available = catalog.available_stock(product, color, size)
    if wanted > available:
        raise HTTPException(
            status_code=400,
            detail=f"Insufficient stock. Available: {available}",
        )


@router.post("", response_model=CartResponse)
async def create_cart():
    """Create a new shopping cart"""
    cart_id, cart = cart_db.create_cart()
    return CartResponse(cart=to_response_cart(cart_id, cart), message="Cart created")


@router.get("/{cart_id}", response_model=CartResponse)
async def get_cart(cart_id: str):
    """Get cart by ID"""
    cart = load_cart_or_404(cart_id)
    return CartResponse(cart=to_response_cart(cart_id, cart))


@router.post("/{cart_id}/items", response_model=CartResponse)
async def add_to_cart(cart_id: str, request: AddToCartRequest):
    """Add an item to the cart"""
    cart = load_cart_or_404(cart_id)
    product = get_product_or_404(request.product_id)

    ensure_available(
        cart, product, request.selected_color, request.selected_size, request.quantity
    )

    cart.add_item(product, request.selected_color, request.selected_size, request.quantity)
    cart_db.save_cart(cart_id, cart)

    return CartResponse(
        cart=to_response_cart(cart_id, cart),
        message=f"Added {request.quantity}x {product.name} to cart",
    )


@router.post("/{cart_id}/items/bulk", response_model=CartResponse)
async def add_bulk_to_cart(cart_id: str, request: BulkAddToCartRequest):
    """
    Add several color/size selections of one product in one call.

    The returned quote prices the combined quantity; cart lines are still
    priced individually.
    """
    cart = load_cart_or_404(cart_id)
    product = get_product_or_404(request.product_id)

    entries = [e for e in request.entries if e.quantity > 0]
    if not entries:
        raise HTTPException(status_code=400, detail="No quantities given")

    # Validate against a scratch copy so a bad row leaves the cart untouched
    scratch = CartAggregate.from_snapshot(cart.serialize())
    for entry in entries:
        ensure_available(
            scratch, product, entry.selected_color, entry.selected_size, entry.quantity
        )
        scratch.add_item(product, entry.selected_color, entry.selected_size, entry.quantity)

    quote = pricing.bulk_quote(product, entries)
    cart.add_bulk_items(product, entries)
    cart_db.save_cart(cart_id, cart)

    logger.info(
        f"Bulk add to cart {cart_id}: {quote.total_quantity}x {product.id} "
        f"quoted at {quote.unit_price}/unit"
    )

    return CartResponse(
        cart=to_response_cart(cart_id, cart),
        message=f"Added {quote.total_quantity}x {product.name} to cart",
        quote=quote,
    )


@router.put("/{cart_id}/items/{product_id}", response_model=CartResponse)
async def update_cart_item(
    cart_id: str,
    product_id: str,
    request: UpdateCartItemRequest,
):
    """Set an item's quantity; 0 removes it"""
    cart = load_cart_or_404(cart_id)

    if cart.get_line(product_id, request.selected_color, request.selected_size) is None:
        raise HTTPException(status_code=404, detail="Item not in cart")

    if request.quantity > 0:
        product = get_product_or_404(product_id)
        available = catalog.available_stock(
            product, request.selected_color, request.selected_size
        )
        if request.quantity > available:
            raise HTTPException(
                status_code=400,
                detail=f"Insufficient stock. Available: {available}",
            )

    cart.update_quantity(
        product_id, request.quantity, request.selected_color, request.selected_size
    )
    cart_db.save_cart(cart_id, cart)

    return CartResponse(cart=to_response_cart(cart_id, cart), message="Cart updated")


@router.delete("/{cart_id}/items/{product_id}", response_model=CartResponse)
async def remove_from_cart(
    cart_id: str,
    product_id: str,
    color: Optional[str] = Query(None),
    size: Optional[str] = Query(None),
):
    """Remove an item from the cart"""
    cart = load_cart_or_404(cart_id)

    cart.remove_item(product_id, color, size)
    cart_db.save_cart(cart_id, cart)

    return CartResponse(cart=to_response_cart(cart_id, cart), message="Item removed")


@router.delete("/{cart_id}", response_model=CartResponse)
async def clear_cart(cart_id: str):
    """Clear all items from cart"""
    cart = load_cart_or_404(cart_id)

    cart.clear()
    cart_db.save_cart(cart_id, cart)

    return CartResponse(cart=to_response_cart(cart_id, cart), message="Cart cleared")
