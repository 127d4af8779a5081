"""In-memory product catalog for the storefront"""

import logging
import uuid
from decimal import Decimal
from typing import Optional

from ..models.product import (
    PricingTier,
    Product,
    ProductColor,
    ProductCreateRequest,
    ProductUpdateRequest,
    ProductVariant,
    TargetAudience,
)

logger = logging.getLogger(__name__)


def _variants(stock: dict[tuple[str, str], int], sku_prefix: str) -> list[ProductVariant]:
    return [
        ProductVariant(
            color=color,
            size=size,
            stock=count,
            sku=f"{sku_prefix}-{color[:3].upper() or 'STD'}-{size or 'OS'}",
        )
        for (color, size), count in stock.items()
    ]


# Seed catalog
PRODUCTS: dict[str, Product] = {
    "prod-001": Product(
        id="prod-001",
        name="Conference T-Shirt",
        description="Soft cotton tee with the conference crest on the chest.",
        price=Decimal("1000"),
        category="Apparel",
        images=["media/tee-front.jpg", "media/tee-back.jpg"],
        colors=[
            ProductColor(name="Red", display_color="#d32f2f"),
            ProductColor(name="Blue", display_color="#1565c0"),
        ],
        sizes=["S", "M", "L", "XL"],
        variants=_variants(
            {
                ("Red", "S"): 20,
                ("Red", "M"): 15,
                ("Red", "L"): 0,
                ("Red", "XL"): 5,
                ("Blue", "S"): 10,
                ("Blue", "M"): 30,
                ("Blue", "L"): 12,
            },
            "TEE",
        ),
        pricing_tiers=[
            PricingTier(min_qty=10, max_qty=49, price_per_unit=Decimal("900")),
            PricingTier(min_qty=50, price_per_unit=Decimal("800")),
        ],
    ),
    "prod-002": Product(
        id="prod-002",
        name="Kids Conference T-Shirt",
        description="The conference tee cut for younger attendees.",
        price=Decimal("800"),
        category="Apparel",
        target_audience=TargetAudience.KIDS,
        colors=[ProductColor(name="Yellow", display_color="#fbc02d")],
        sizes=["4-5", "6-7", "8-9"],
        variants=_variants(
            {
                ("Yellow", "4-5"): 8,
                ("Yellow", "6-7"): 0,
                ("Yellow", "8-9"): 6,
            },
            "KTEE",
        ),
        pricing_tiers=[
            PricingTier(min_qty=10, price_per_unit=Decimal("700")),
        ],
    ),
    "prod-003": Product(
        id="prod-003",
        name="Event Tote Bag",
        description="Heavy canvas tote, one size.",
        price=Decimal("2500"),
        category="Accessories",
        images=["media/tote.jpg"],
        stock=40,
    ),
    "prod-004": Product(
        id="prod-004",
        name="Branded Cap",
        description="Adjustable cap with embroidered logo.",
        price=Decimal("1500"),
        category="Accessories",
        colors=[
            ProductColor(name="Black", display_color="#000000"),
            ProductColor(name="White", display_color="#ffffff"),
        ],
        variants=_variants({("Black", ""): 25, ("White", ""): 0}, "CAP"),
        pricing_tiers=[
            PricingTier(min_qty=5, max_qty=19, price_per_unit=Decimal("1350")),
            PricingTier(min_qty=20, price_per_unit=Decimal("1200")),
        ],
    ),
}


class ProductDatabase:
    """In-memory product catalog"""

    def __init__(self):
        self.products = {pid: p.model_copy(deep=True) for pid, p in PRODUCTS.items()}

    def get_product(self, product_id: str) -> Optional[Product]:
        """Get a product by ID"""
        return self.products.get(product_id)

    def search_products(
        self,
        query: Optional[str] = None,
        category: Optional[str] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> tuple[list[Product], int]:
        """
        Search products with filters, newest first.

        Returns:
            Tuple of (matching products, total count)
        """
        results = sorted(self.products.values(), key=lambda p: p.created_at, reverse=True)

        if query:
            query_lower = query.lower()
            results = [
                p for p in results
                if query_lower in p.name.lower() or query_lower in p.description.lower()
            ]

        if category:
            results = [p for p in results if p.category.lower() == category.lower()]

        total = len(results)
        return results[offset : offset + limit], total

    def list_categories(self) -> list[str]:
        return sorted({p.category for p in self.products.values() if p.category})

    def create_product(self, request: ProductCreateRequest) -> Product:
        product = Product(id=f"prod-{uuid.uuid4().hex[:8]}", **request.model_dump())
        self.products[product.id] = product
        logger.info(f"Product {product.id} created: {product.name}")
        return product

    def update_product(self, product_id: str, request: ProductUpdateRequest) -> Optional[Product]:
        """Apply a partial update; the result is re-validated as a whole"""
        product = self.products.get(product_id)
        if not product:
            return None

        changes = {
            k: v for k, v in request.model_dump(exclude_unset=True).items() if v is not None
        }
        updated = Product.model_validate({**product.model_dump(), **changes})
        self.products[product_id] = updated
        logger.info(f"Product {product_id} updated: {sorted(changes)}")
        return updated

    def delete_product(self, product_id: str) -> bool:
        if product_id in self.products:
            del self.products[product_id]
            logger.info(f"Product {product_id} deleted")
            return True
        return False


# Singleton instance
product_db = ProductDatabase()
