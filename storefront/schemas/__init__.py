"""
Schemas for API responses and requests
"""

from storefront.schemas.company import CompanyCreate, CompanyResponse
from storefront.schemas.product import (
    ProductCreate, ProductUpdate, ProductRead, CompanySummary, ProductEventRead
)
from storefront.schemas.ar_request import ARRequestCreate, ARRequestUpdate
from storefront.schemas.dashboard import DashboardStats
from storefront.schemas.homepage import HomepageData, StorageInfo

__all__ = [
    "CompanyCreate",
    "CompanyResponse",
    "ProductCreate",
    "ProductUpdate",
    "ProductRead",
    "CompanySummary",
    "ProductEventRead",
    "ARRequestCreate",
    "ARRequestUpdate",
    "DashboardStats",
    "HomepageData",
    "StorageInfo",
]
