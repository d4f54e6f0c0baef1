"""
Homepage content API endpoints used by the dashboard editor
"""

from fastapi import APIRouter, Depends, HTTPException, status, Query
from typing import Optional
import structlog

from storefront.api.dependencies import get_homepage_store, get_tenant_subdomain
from storefront.schemas.homepage import HomepageData, StorageInfo
from storefront.services.homepage import DEFAULT_KEY, HomepageStore

logger = structlog.get_logger(__name__)
router = APIRouter()


async def get_homepage_key(
    subdomain: Optional[str] = Query(None, description="Shop whose homepage to use"),
    tenant_subdomain: Optional[str] = Depends(get_tenant_subdomain),
) -> str:
    return subdomain or tenant_subdomain or DEFAULT_KEY


@router.get("", response_model=HomepageData)
async def get_homepage(
    key: str = Depends(get_homepage_key),
    store: HomepageStore = Depends(get_homepage_store)
):
    """Saved homepage content, or the defaults if nothing was saved"""
    try:
        return await store.load_or_default(key)
    except Exception as e:
        logger.error(f"Failed to load homepage data for {key}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to load homepage data"
        )


@router.put("", response_model=HomepageData)
async def save_homepage(
    data: HomepageData,
    key: str = Depends(get_homepage_key),
    store: HomepageStore = Depends(get_homepage_store)
):
    """Replace the homepage content"""
    try:
        return await store.save(key, data)
    except Exception as e:
        logger.error(f"Failed to save homepage data for {key}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to save homepage data"
        )


@router.post("/reset", response_model=HomepageData)
async def reset_homepage(
    key: str = Depends(get_homepage_key),
    store: HomepageStore = Depends(get_homepage_store)
):
    """Drop saved content and return the defaults"""
    try:
        await store.reset(key)
        return await store.load_or_default(key)
    except Exception as e:
        logger.error(f"Failed to reset homepage data for {key}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to reset homepage data"
        )


@router.get("/storage-info", response_model=StorageInfo)
async def get_storage_info(
    key: str = Depends(get_homepage_key),
    store: HomepageStore = Depends(get_homepage_store)
):
    return await store.storage_info(key)
