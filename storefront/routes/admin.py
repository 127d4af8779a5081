"""Admin back-office routes for the storefront"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, Response
from pydantic import BaseModel, ValidationError

from ..models.product import Product, ProductCreateRequest, ProductUpdateRequest
from ..models.checkout import Order, OrderListResponse, OrderStatusUpdateRequest
from ..database.products import product_db
from ..database.orders import order_db
from ..security.admin_session import (
    check_password,
    end_session,
    optional_admin,
    require_admin,
    start_session,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/admin", tags=["Admin"])


class LoginRequest(BaseModel):
    password: str


class SessionStatus(BaseModel):
    authenticated: bool


@router.post("/login", response_model=SessionStatus)
async def login(request: LoginRequest, response: Response):
    """Exchange the shared admin password for a session cookie"""
    if not check_password(request.password):
        logger.warning("Admin login failed")
        raise HTTPException(status_code=401, detail="Invalid password")

    start_session(response)
    logger.info("Admin logged in")
    return SessionStatus(authenticated=True)


@router.post("/logout", response_model=SessionStatus)
async def logout(response: Response):
    end_session(response)
    return SessionStatus(authenticated=False)


@router.get("/session", response_model=SessionStatus)
async def session_status(is_admin: bool = Depends(optional_admin)):
    return SessionStatus(authenticated=is_admin)


@router.post("/products", response_model=Product, status_code=201)
async def create_product(
    request: ProductCreateRequest,
    _: bool = Depends(require_admin),
):
    """Add a product to the catalog"""
    return product_db.create_product(request)


@router.put("/products/{product_id}", response_model=Product)
async def update_product(
    product_id: str,
    request: ProductUpdateRequest,
    _: bool = Depends(require_admin),
):
    """Partially update a product"""
    try:
        product = product_db.update_product(product_id, request)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))

    if not product:
        raise HTTPException(status_code=404, detail="Product not found")
    return product


@router.delete("/products/{product_id}", status_code=204)
async def delete_product(product_id: str, _: bool = Depends(require_admin)):
    """Remove a product from the catalog"""
    if not product_db.delete_product(product_id):
        raise HTTPException(status_code=404, detail="Product not found")
    return Response(status_code=204)


@router.get("/orders", response_model=OrderListResponse)
async def list_orders(
    limit: int = Query(50, ge=1, le=500),
    _: bool = Depends(require_admin),
):
    """List recent orders, newest first"""
    orders = order_db.list_orders(limit=limit)
    return OrderListResponse(orders=orders, total=len(order_db.orders))


@router.patch("/orders/{order_id}", response_model=Order)
async def update_order_status(
    order_id: str,
    request: OrderStatusUpdateRequest,
    _: bool = Depends(require_admin),
):
    """Move an order to a new status"""
    order = order_db.update_status(order_id, request.status)
    if not order:
        raise HTTPException(status_code=404, detail="Order not found")
    return order
