# Storefront Models

from .product import (
    Product,
    ProductColor,
    ProductVariant,
    PricingTier,
    TargetAudience,
    StockStatus,
    ProductView,
    ProductCreateRequest,
    ProductUpdateRequest,
    ProductSearchResponse,
    VariantAvailability,
    SizeOption,
)
from .cart import (
    Cart,
    CartItem,
    BulkEntry,
    BulkQuote,
    AddToCartRequest,
    BulkAddToCartRequest,
    BulkQuoteRequest,
    UpdateCartItemRequest,
    CartResponse,
)
from .checkout import (
    Order,
    OrderItem,
    OrderStatus,
    CustomerIdentity,
    CheckoutRequest,
    CheckoutResponse,
    OrderStatusUpdateRequest,
    OrderListResponse,
)

__all__ = [
    "Product",
    "ProductColor",
    "ProductVariant",
    "PricingTier",
    "TargetAudience",
    "StockStatus",
    "ProductView",
    "ProductCreateRequest",
    "ProductUpdateRequest",
    "ProductSearchResponse",
    "VariantAvailability",
    "SizeOption",
    "Cart",
    "CartItem",
    "BulkEntry",
    "BulkQuote",
    "AddToCartRequest",
    "BulkAddToCartRequest",
    "BulkQuoteRequest",
    "UpdateCartItemRequest",
    "CartResponse",
    "Order",
    "OrderItem",
    "OrderStatus",
    "CustomerIdentity",
    "CheckoutRequest",
    "CheckoutResponse",
    "OrderStatusUpdateRequest",
    "OrderListResponse",
]
