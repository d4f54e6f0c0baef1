"""
Dashboard API endpoints
"""

from fastapi import APIRouter, Depends, HTTPException, status, Query
from typing import Optional
import structlog

from storefront.api.dependencies import get_catalog
from storefront.schemas.dashboard import DashboardStats
from storefront.services.catalog import CatalogService

logger = structlog.get_logger(__name__)
router = APIRouter()


@router.get("/stats", response_model=DashboardStats)
async def get_dashboard_stats(
    shop_id: Optional[int] = Query(None, description="Limit counts to one shop"),
    catalog: CatalogService = Depends(get_catalog)
):
    """Product and AR request counts for the dashboard"""
    try:
        return await catalog.get_dashboard_stats(shop_id)
    except Exception as e:
        logger.error(f"Error fetching dashboard stats: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch stats"
        )
