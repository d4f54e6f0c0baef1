"""
AR Storefront - Main Application Entry Point
Multi-tenant furniture storefront with AR product models
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
import structlog

from storefront.core.config import get_settings
from storefront.core.database import init_db
from storefront.core.tenant_middleware import TenantContextMiddleware
from storefront.api import (
    companies, products, ar_requests, dashboard, upload, homepage
)

# Configure structured logging
structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.JSONRenderer()
    ],
    context_class=dict,
    logger_factory=structlog.stdlib.LoggerFactory(),
)

logger = structlog.get_logger(__name__)
settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager"""
    # Startup
    logger.info("Initializing AR Storefront backend")
    await init_db()

    yield

    # Shutdown
    logger.info("Shutting down AR Storefront backend")


# Create FastAPI application
app = FastAPI(
    title="AR Storefront API",
    description="Multi-tenant furniture storefront with AR product models",
    version="1.0.0",
    lifespan=lifespan,
)

# Configure middleware stack
app.add_middleware(TenantContextMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
api = settings.API_PREFIX
app.include_router(companies.router, prefix=f"{api}/companies", tags=["companies"])
app.include_router(products.router, prefix=f"{api}/products", tags=["products"])
app.include_router(ar_requests.router, prefix=f"{api}/ar-requests", tags=["ar-requests"])
app.include_router(dashboard.router, prefix=f"{api}/dashboard", tags=["dashboard"])
app.include_router(upload.router, prefix=f"{api}/upload", tags=["upload"])
app.include_router(homepage.router, prefix=f"{api}/homepage", tags=["homepage"])


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "service": "ar-storefront-api"}


@app.get("/")
async def root():
    """Root endpoint"""
    return {
        "message": "AR Storefront API",
        "version": "1.0.0",
        "docs": "/docs",
    }


def run():
    import uvicorn
    uvicorn.run(
        "storefront.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.ENVIRONMENT == "development",
        log_level="info",
    )


if __name__ == "__main__":
    run()
