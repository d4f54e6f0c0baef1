"""
Company API endpoints
"""

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel
from typing import List
import structlog

from storefront.api.dependencies import get_catalog
from storefront.core.exceptions import DuplicateSubdomainError
from storefront.schemas.company import CompanyCreate, CompanyResponse
from storefront.schemas.product import ProductRead
from storefront.services.catalog import CatalogService

logger = structlog.get_logger(__name__)
router = APIRouter()


class StorefrontResponse(BaseModel):
    """A shop and its active products"""
    company: CompanyResponse
    products: List[ProductRead]


@router.get("", response_model=List[CompanyResponse])
async def list_companies(catalog: CatalogService = Depends(get_catalog)):
    """List all companies, newest first"""
    try:
        return await catalog.get_companies()
    except Exception as e:
        logger.error(f"Error listing companies: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error"
        )


@router.post("", response_model=CompanyResponse, status_code=status.HTTP_201_CREATED)
async def create_company(
    company_data: CompanyCreate,
    catalog: CatalogService = Depends(get_catalog)
):
    """Onboard a new company"""
    try:
        return await catalog.create_company(company_data)
    except DuplicateSubdomainError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    except Exception as e:
        await catalog.session.rollback()
        logger.error(f"Failed to create company: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error"
        )


@router.get("/{subdomain}", response_model=StorefrontResponse)
async def get_storefront(
    subdomain: str,
    catalog: CatalogService = Depends(get_catalog)
):
    """Get a company by subdomain together with its products"""
    try:
        logger.info(f"Fetching data for subdomain: {subdomain}")
        company = await catalog.get_company_by_subdomain(subdomain)
        if not company:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Company not found"
            )

        products = await catalog.get_products(company.id)
        logger.info(f"Found company {company.shop_name} with {len(products)} products")
        return StorefrontResponse(
            company=CompanyResponse.model_validate(company),
            products=products,
        )

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error fetching storefront {subdomain}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error"
        )
