"""
Event Storefront Application

Merchandise store for the event site: product catalog with color/size
variants, bulk tier pricing, cart, checkout and an admin back-office.
"""

import os
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.templating import Jinja2Templates
from fastapi.middleware.cors import CORSMiddleware
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

from .core.config import settings
from .database.products import product_db
from .routes import products_router, cart_router, checkout_router, admin_router
from .security.admin_session import AdminSessionMiddleware

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events"""
    logger.info(f"{settings.app_name} starting up...")
    logger.info(f"Admin back-office: {'enabled' if settings.admin_enabled else 'disabled'}")
    logger.info(f"Catalog loaded with {len(product_db.products)} products")
    yield
    logger.info(f"{settings.app_name} shutting down...")


# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    description="Event merchandise store with variant stock and bulk pricing",
    version="1.0.0",
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Admin session flag
app.add_middleware(AdminSessionMiddleware)

# Templates
templates_dir = os.path.join(os.path.dirname(__file__), "templates")

templates = Jinja2Templates(directory=templates_dir) if os.path.exists(templates_dir) else None

# Include API routers
app.include_router(products_router)
app.include_router(cart_router)
app.include_router(checkout_router)
app.include_router(admin_router)


@app.get("/")
async def home(request: Request):
    """Storefront home page"""
    if templates:
        products, _ = product_db.search_products(limit=100)
        return templates.TemplateResponse(
            request,
            "index.html",
            {
                "title": settings.app_name,
                "products": products,
                "currency": settings.currency,
            },
        )
    return {
        "message": f"{settings.app_name} API",
        "docs": "/docs",
        "endpoints": {
            "products": "/api/products",
            "cart": "/api/cart",
            "checkout": "/api/checkout",
            "admin": "/api/admin",
        },
    }


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "service": "storefront"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "storefront.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
