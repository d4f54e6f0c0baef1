"""
Product API endpoints
"""

from fastapi import APIRouter, Depends, HTTPException, status, Query
from typing import List, Optional
import structlog

from storefront.api.dependencies import get_catalog, get_tenant_company_id, get_tenant_subdomain
from storefront.core.exceptions import PriceInvariantError
from storefront.schemas.product import ProductCreate, ProductEventRead, ProductRead, ProductUpdate
from storefront.services.catalog import CatalogService

logger = structlog.get_logger(__name__)
router = APIRouter()


def product_not_found() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail="Product not found"
    )


@router.get("", response_model=List[ProductRead])
async def list_products(
    shop_id: Optional[int] = Query(None, description="Filter by company id"),
    subdomain: Optional[str] = Query(None, description="Filter by company subdomain"),
    tenant_subdomain: Optional[str] = Depends(get_tenant_subdomain),
    catalog: CatalogService = Depends(get_catalog)
):
    """List active products, featured first then newest"""
    try:
        if subdomain:
            return await catalog.get_products_by_subdomain(subdomain)
        if shop_id is not None:
            return await catalog.get_products(shop_id)
        if tenant_subdomain:
            return await catalog.get_products_by_subdomain(tenant_subdomain)
        return await catalog.get_products()

    except Exception as e:
        logger.error(f"Error listing products: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error"
        )


@router.post("", response_model=ProductRead, status_code=status.HTTP_201_CREATED)
async def create_product(
    product_data: ProductCreate,
    catalog: CatalogService = Depends(get_catalog)
):
    """Create a new product"""
    try:
        product = await catalog.create_product(product_data)
        if not product:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Company not found"
            )
        return product

    except HTTPException:
        raise
    except PriceInvariantError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception as e:
        await catalog.session.rollback()
        logger.error(f"Error creating product: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error"
        )


@router.get("/{product_id}", response_model=ProductRead)
async def get_product(
    product_id: int,
    tenant_company_id: Optional[int] = Depends(get_tenant_company_id),
    catalog: CatalogService = Depends(get_catalog)
):
    """Get a specific product"""
    try:
        product = await catalog.get_product(product_id, company_id=tenant_company_id)
        if not product:
            raise product_not_found()
        return product

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error fetching product {product_id}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error"
        )


@router.put("/{product_id}", response_model=ProductRead)
async def update_product(
    product_id: int,
    product_update: ProductUpdate,
    tenant_company_id: Optional[int] = Depends(get_tenant_company_id),
    catalog: CatalogService = Depends(get_catalog)
):
    """Update only the fields present in the request body"""
    try:
        product = await catalog.update_product(
            product_id, product_update, company_id=tenant_company_id
        )
        if not product:
            raise product_not_found()
        return product

    except HTTPException:
        raise
    except PriceInvariantError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception as e:
        await catalog.session.rollback()
        logger.error(f"Error updating product {product_id}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error"
        )


@router.delete("/{product_id}")
async def delete_product(
    product_id: int,
    tenant_company_id: Optional[int] = Depends(get_tenant_company_id),
    catalog: CatalogService = Depends(get_catalog)
):
    """Soft delete a product"""
    try:
        deleted = await catalog.delete_product(product_id, company_id=tenant_company_id)
        if not deleted:
            raise product_not_found()
        return {"success": True}

    except HTTPException:
        raise
    except Exception as e:
        await catalog.session.rollback()
        logger.error(f"Error deleting product {product_id}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error"
        )


@router.get("/{product_id}/events", response_model=List[ProductEventRead])
async def list_product_events(
    product_id: int,
    tenant_company_id: Optional[int] = Depends(get_tenant_company_id),
    catalog: CatalogService = Depends(get_catalog)
):
    """Audit trail of writes to a product, oldest first"""
    try:
        return await catalog.get_product_events(product_id, company_id=tenant_company_id)
    except Exception as e:
        logger.error(f"Error listing events for product {product_id}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error"
        )
