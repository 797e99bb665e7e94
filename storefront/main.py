"""
Storefront Application

Product listing with image search, a cart with quantity controls and
a generated bill, and the static Home, About and Contact pages.
"""

import os
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles
from dotenv import load_dotenv

# Load environment variables before settings are read
load_dotenv(os.path.join(os.getcwd(), ".env"))

from .core.config import settings
from .routes import products_router, cart_router, contact_router, pages_router
from .routes.deps import close_clients

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events"""
    logger.info("Storefront starting up...")
    logger.info(f"Image search configured: {settings.image_search_configured}")
    logger.info(f"Email delivery configured: {settings.email_configured}")
    yield
    logger.info("Storefront shutting down...")
    await close_clients()


# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    description="Storefront with product search, cart and bill",
    version="1.0.0",
    lifespan=lifespan,
)

static_dir = os.path.join(os.path.dirname(__file__), "static")
if os.path.exists(static_dir):
    app.mount("/static", StaticFiles(directory=static_dir), name="static")

# Include routers
app.include_router(products_router)
app.include_router(cart_router)
app.include_router(contact_router)
app.include_router(pages_router)


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "service": "storefront",
        "image_search_configured": settings.image_search_configured,
        "email_configured": settings.email_configured,
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "storefront.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
