# Database modules

from .products import product_db, ProductDatabase
from .carts import cart_db, CartDatabase
from .orders import order_db, OrderDatabase

__all__ = [
    "product_db",
    "ProductDatabase",
    "cart_db",
    "CartDatabase",
    "order_db",
    "OrderDatabase",
]
