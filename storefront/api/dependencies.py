"""
Shared dependencies for FastAPI routes
"""

from functools import lru_cache
from typing import Optional

from fastapi import Depends, HTTPException, Request, status
from sqlmodel.ext.asyncio.session import AsyncSession

from storefront.core.config import get_settings
from storefront.core.database import get_session
from storefront.services.catalog import CatalogService
from storefront.services.homepage import HomepageStore, build_homepage_store
from storefront.services.object_storage import ObjectStorage
from storefront.services.signed_urls import SignedUrlService


@lru_cache()
def get_storage() -> ObjectStorage:
    """Process-wide object storage client"""
    return ObjectStorage.from_settings()


@lru_cache()
def get_signer() -> SignedUrlService:
    """Process-wide signer, so its cache and concurrency limit are shared"""
    settings = get_settings()
    return SignedUrlService(
        get_storage(),
        expires_in=settings.SIGNED_URL_EXPIRES_SECONDS,
        cache_seconds=settings.SIGNED_URL_CACHE_SECONDS,
        max_concurrency=settings.SIGNING_CONCURRENCY,
    )


@lru_cache()
def get_homepage_store() -> HomepageStore:
    return build_homepage_store()


async def get_catalog(
    session: AsyncSession = Depends(get_session),
    signer: SignedUrlService = Depends(get_signer),
) -> CatalogService:
    return CatalogService(session, signer)


async def get_tenant_subdomain(request: Request) -> Optional[str]:
    """Subdomain resolved by TenantContextMiddleware, if any"""
    return getattr(request.state, "subdomain", None)


async def get_tenant_company_id(
    subdomain: Optional[str] = Depends(get_tenant_subdomain),
    catalog: CatalogService = Depends(get_catalog),
) -> Optional[int]:
    """
    Company id of the request's tenant, or None when no tenant is in context.

    A subdomain that names no shop is a 404, so product routes never fall
    back to unscoped access.
    """
    if not subdomain:
        return None
    company = await catalog.get_company_by_subdomain(subdomain)
    if not company:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Shop not found"
        )
    return company.id
