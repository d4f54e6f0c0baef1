"""
Pydantic schemas for companies
"""

from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime

from storefront.models.company import CompanyStatus, CompanyPlan


class CompanyCreate(BaseModel):
    """Company onboarding schema"""
    shop_name: str = Field(..., min_length=1, max_length=255)
    subdomain: str = Field(..., min_length=1, max_length=100, pattern=r"^[a-z0-9][a-z0-9-]*$")
    description: Optional[str] = None
    logo: Optional[str] = None
    phone: Optional[str] = Field(default=None, max_length=20)
    whatsapp: Optional[str] = Field(default=None, max_length=20)
    website: Optional[str] = None
    plan: CompanyPlan = Field(default=CompanyPlan.TRIAL)
    status: CompanyStatus = Field(default=CompanyStatus.ACTIVE)


class CompanyResponse(BaseModel):
    """Company response model"""
    id: int
    shop_name: str
    subdomain: str
    description: Optional[str] = None
    logo: Optional[str] = None
    phone: Optional[str] = None
    whatsapp: Optional[str] = None
    website: Optional[str] = None
    status: CompanyStatus
    plan: CompanyPlan
    join_date: datetime

    class Config:
        from_attributes = True
