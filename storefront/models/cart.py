"""Cart models for the storefront"""

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field

from .product import PricingTier


class BulkEntry(BaseModel):
    """One row of a bulk order form"""
    selected_color: str = ""
    selected_size: str = ""
    quantity: int = Field(default=0, ge=0)


class BulkQuote(BaseModel):
    """Pre-merge price preview for a set of bulk entries of one product"""
    product_id: str
    base_price: Decimal
    unit_price: Decimal
    total_quantity: int
    total_price: Decimal
    discount_percent: int
    tier: Optional[PricingTier] = None


class CartItem(BaseModel):
    """Item in a shopping cart"""
    product_id: str
    product_name: str
    selected_color: str = ""
    selected_size: str = ""
    quantity: int = Field(gt=0)
    unit_price: Decimal
    total_price: Decimal


class Cart(BaseModel):
    """Shopping cart"""
    cart_id: str
    items: list[CartItem] = []
    item_count: int = 0
    total: Decimal = Decimal("0")
    currency: str = "NGN"


class AddToCartRequest(BaseModel):
    """Request to add item to cart"""
    product_id: str
    selected_color: Optional[str] = None
    selected_size: Optional[str] = None
    quantity: int = Field(default=1, gt=0)


class BulkAddToCartRequest(BaseModel):
    """Request to add several variants of one product at once"""
    product_id: str
    entries: list[BulkEntry] = Field(min_length=1)


class BulkQuoteRequest(BaseModel):
    entries: list[BulkEntry] = Field(min_length=1)


class UpdateCartItemRequest(BaseModel):
    """Request to update cart item quantity; 0 removes the item"""
    quantity: int = Field(ge=0)
    selected_color: Optional[str] = None
    selected_size: Optional[str] = None


class CartResponse(BaseModel):
    """Cart API response"""
    cart: Cart
    message: Optional[str] = None
    quote: Optional[BulkQuote] = None
