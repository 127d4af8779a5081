"""Checkout and order models for the storefront"""

from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


GUEST_USER_ID = "GUEST"


class OrderStatus(str, Enum):
    PENDING = "Pending"
    PAID = "Paid"
    SHIPPED = "Shipped"
    DELIVERED = "Delivered"
    CANCELLED = "Cancelled"


class CustomerIdentity(BaseModel):
    """Registered user id or guest contact details"""
    user_id: Optional[str] = None
    name: str = ""
    email: str = ""
    phone: str = ""

    @model_validator(mode="after")
    def _require_identity(self) -> "CustomerIdentity":
        if not self.user_id and not (self.name and self.email):
            raise ValueError("Either user_id or customer name and email are required")
        return self


class OrderItem(BaseModel):
    """Line snapshot taken at checkout"""
    model_config = ConfigDict(frozen=True)

    product_id: str
    name: str
    unit_price: Decimal
    quantity: int
    selected_color: str = ""
    selected_size: str = ""
    total_price: Decimal


class Order(BaseModel):
    """Placed order; never mutated once created"""
    model_config = ConfigDict(frozen=True)

    order_id: str
    user_id: str = GUEST_USER_ID
    customer_name: str = ""
    customer_email: str = ""
    customer_phone: str = ""
    items: tuple[OrderItem, ...]
    total: Decimal
    currency: str = "NGN"
    status: OrderStatus = OrderStatus.PENDING
    created_at: datetime


class CheckoutRequest(BaseModel):
    """Request to checkout"""
    cart_id: str
    customer: CustomerIdentity


class CheckoutResponse(BaseModel):
    """Response from checkout"""
    success: bool
    order: Optional[Order] = None
    error_message: Optional[str] = None


class OrderStatusUpdateRequest(BaseModel):
    status: OrderStatus


class OrderListResponse(BaseModel):
    orders: list[Order]
    total: int = Field(ge=0)
