"""
AR request API endpoints
"""

from fastapi import APIRouter, Depends, HTTPException, status, Query
from typing import List, Optional
import structlog

from storefront.api.dependencies import get_catalog
from storefront.core.exceptions import InvalidTransitionError
from storefront.models.ar_request import ARRequest
from storefront.schemas.ar_request import ARRequestCreate, ARRequestUpdate
from storefront.services.catalog import CatalogService

logger = structlog.get_logger(__name__)
router = APIRouter()


@router.get("", response_model=List[ARRequest])
async def list_ar_requests(
    shop_id: Optional[int] = Query(None, description="Filter by shop"),
    catalog: CatalogService = Depends(get_catalog)
):
    """List AR requests, newest first"""
    try:
        return await catalog.get_ar_requests(shop_id)
    except Exception as e:
        logger.error(f"Error fetching AR requests: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch AR requests"
        )


@router.post("", response_model=ARRequest, status_code=status.HTTP_201_CREATED)
async def create_ar_request(
    request_data: ARRequestCreate,
    catalog: CatalogService = Depends(get_catalog)
):
    """Ask for an AR model for one of the shop's products"""
    try:
        ar_request = await catalog.create_ar_request(request_data.product_id, request_data.shop_id)
        if not ar_request:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Product not found for this shop"
            )
        return ar_request

    except HTTPException:
        raise
    except Exception as e:
        await catalog.session.rollback()
        logger.error(f"Error creating AR request: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create AR request"
        )


@router.put("/{request_id}", response_model=ARRequest)
async def update_ar_request(
    request_id: int,
    request_update: ARRequestUpdate,
    catalog: CatalogService = Depends(get_catalog)
):
    """Approve or reject a pending AR request"""
    try:
        ar_request = await catalog.update_ar_request(request_id, request_update.status)
        if not ar_request:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="AR request not found"
            )
        return ar_request

    except HTTPException:
        raise
    except InvalidTransitionError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    except Exception as e:
        await catalog.session.rollback()
        logger.error(f"Error updating AR request {request_id}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update AR request"
        )
