"""Inventory Analytics - FastAPI Application.

Stock health, depletion projection and stockout alerting for inventory dashboards.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from inventory_analytics import __version__
from inventory_analytics.core.config import settings
from inventory_analytics.api import analytics

app = FastAPI(
    title=settings.APP_NAME,
    description="Inventory Analytics - stock classification, depletion projection and alerts",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Configure appropriately for production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(analytics.router)


@app.get("/")
async def root():
    """Service descriptor."""
    return {
        "service": settings.APP_NAME,
        "version": __version__,
        "status": "operational",
    }


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy"}
