"""Product API routes for the storefront"""

from typing import Optional
from fastapi import APIRouter, HTTPException, Query

from ..models.product import (
    Product,
    ProductSearchResponse,
    ProductView,
    SizeOption,
    VariantAvailability,
)
from ..models.cart import BulkQuote, BulkQuoteRequest
from ..database.products import product_db
from ..engine import catalog, pricing

router = APIRouter(prefix="/api/products", tags=["Products"])


def get_product_or_404(product_id: str) -> Product:
    product = product_db.get_product(product_id)
    if not product:
        raise HTTPException(status_code=404, detail="Product not found")
    return product


def to_product_view(product: Product) -> ProductView:
    return ProductView(
        **product.model_dump(),
        total_stock=catalog.total_stock(product),
        stock_status=catalog.stock_status(product),
    )


@router.get("", response_model=ProductSearchResponse)
async def search_products(
    query: Optional[str] = Query(None, description="Search query"),
    category: Optional[str] = Query(None, description="Filter by category"),
    limit: int = Query(20, ge=1, le=100, description="Max results"),
    offset: int = Query(0, ge=0, description="Offset for pagination"),
):
    """Search products in the catalog"""
    products, total = product_db.search_products(
        query=query,
        category=category,
        limit=limit,
        offset=offset,
    )

    return ProductSearchResponse(
        products=[to_product_view(p) for p in products],
        total=total,
        limit=limit,
        offset=offset,
    )


@router.get("/categories", response_model=list[str])
async def list_categories():
    """List all product categories"""
    return product_db.list_categories()


@router.get("/{product_id}", response_model=ProductView)
async def get_product(product_id: str):
    """Get a product by ID, with its overall stock status"""
    return to_product_view(get_product_or_404(product_id))


@router.get("/{product_id}/availability", response_model=VariantAvailability)
async def get_availability(
    product_id: str,
    color: Optional[str] = Query(None),
    size: Optional[str] = Query(None),
):
    """Stock and orderability of one (color, size) selection"""
    product = get_product_or_404(product_id)
    return VariantAvailability(
        product_id=product.id,
        color=color or "",
        size=size or "",
        stock=catalog.available_stock(product, color, size),
        orderable=catalog.is_orderable(product, color, size),
    )


@router.get("/{product_id}/sizes", response_model=list[SizeOption])
async def get_size_options(
    product_id: str,
    color: Optional[str] = Query(None, description="Only consider this color"),
):
    """Size picker: which declared sizes currently have stock"""
    product = get_product_or_404(product_id)
    return [
        SizeOption(size=size, selectable=selectable)
        for size, selectable in catalog.size_matrix(product, color)
    ]


@router.post("/{product_id}/bulk-quote", response_model=BulkQuote)
async def quote_bulk_order(product_id: str, request: BulkQuoteRequest):
    """
    Preview the unit price for a mixed-variant bulk order.

    Quantities across all entries are combined before the tier lookup.
    """
    product = get_product_or_404(product_id)
    return pricing.bulk_quote(product, request.entries)
