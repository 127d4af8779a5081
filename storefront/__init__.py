"""Event storefront: catalog, tiered pricing, cart and checkout."""

__version__ = "1.0.0"
