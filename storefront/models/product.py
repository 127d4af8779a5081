"""Product catalog models for the storefront"""

from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, field_validator, model_validator


class TargetAudience(str, Enum):
    ADULT = "adult"
    KIDS = "kids"


class StockStatus(str, Enum):
    OUT = "out"
    LOW = "low"
    IN = "in"


class ProductColor(BaseModel):
    """A selectable color swatch"""
    name: str
    display_color: str = ""


class ProductVariant(BaseModel):
    """One (color, size) combination with its own stock"""
    color: str = ""
    size: str = ""
    stock: int = Field(default=0, ge=0)
    sku: str = ""


class PricingTier(BaseModel):
    """Quantity range mapped to a per-unit price"""
    min_qty: int = Field(ge=1)
    max_qty: Optional[int] = None  # None means unbounded ("50+")
    price_per_unit: Decimal = Field(ge=0)

    @model_validator(mode="after")
    def _check_bounds(self) -> "PricingTier":
        if self.max_qty is not None and self.max_qty < self.min_qty:
            raise ValueError(
                f"max_qty ({self.max_qty}) must not be below min_qty ({self.min_qty})"
            )
        return self

    def matches(self, quantity: int) -> bool:
        if quantity < self.min_qty:
            return False
        return self.max_qty is None or quantity <= self.max_qty


def _ordered_tiers(tiers: list[PricingTier]) -> list[PricingTier]:
    """Sort tiers by min_qty and reject overlapping ranges"""
    ordered = sorted(tiers, key=lambda t: t.min_qty)
    for previous, current in zip(ordered, ordered[1:]):
        if previous.max_qty is None or previous.max_qty >= current.min_qty:
            raise ValueError(
                f"Pricing tier starting at {current.min_qty} overlaps "
                f"the tier starting at {previous.min_qty}"
            )
    return ordered


class ProductFields(BaseModel):
    """Attributes shared by stored products and admin create requests"""
    name: str = Field(min_length=1)
    description: str = ""
    price: Decimal = Field(ge=0)
    category: str = ""
    images: list[str] = []
    target_audience: TargetAudience = TargetAudience.ADULT
    stock: int = Field(default=0, ge=0)  # used only when there are no variants
    colors: list[ProductColor] = []
    sizes: list[str] = []
    variants: list[ProductVariant] = []
    pricing_tiers: list[PricingTier] = []

    @field_validator("pricing_tiers")
    @classmethod
    def _validate_tiers(cls, tiers: list[PricingTier]) -> list[PricingTier]:
        return _ordered_tiers(tiers)


class Product(ProductFields):
    """Product in the catalog"""
    id: str
    created_at: datetime = Field(default_factory=datetime.utcnow)

    @property
    def has_variants(self) -> bool:
        return bool(self.variants)


class ProductCreateRequest(ProductFields):
    """Admin request to create a product"""


class ProductUpdateRequest(BaseModel):
    """Admin request to update a product; omitted fields are left unchanged"""
    name: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    price: Optional[Decimal] = Field(default=None, ge=0)
    category: Optional[str] = None
    images: Optional[list[str]] = None
    target_audience: Optional[TargetAudience] = None
    stock: Optional[int] = Field(default=None, ge=0)
    colors: Optional[list[ProductColor]] = None
    sizes: Optional[list[str]] = None
    variants: Optional[list[ProductVariant]] = None
    pricing_tiers: Optional[list[PricingTier]] = None


class ProductView(Product):
    """Product as shown in the storefront, with its overall stock level"""
    total_stock: int
    stock_status: StockStatus


class ProductSearchResponse(BaseModel):
    """Response from product search"""
    products: list[ProductView]
    total: int
    limit: int
    offset: int


class VariantAvailability(BaseModel):
    """Stock answer for one (color, size) selection"""
    product_id: str
    color: str
    size: str
    stock: int
    orderable: bool


class SizeOption(BaseModel):
    size: str
    selectable: bool
