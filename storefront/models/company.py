"""
Company model - tenant identity
"""

from sqlmodel import Field, SQLModel
from datetime import datetime
from typing import Optional
from enum import Enum


class CompanyStatus(str, Enum):
    """Account status of a company"""
    ACTIVE = "Active"
    SUSPENDED = "Suspended"


class CompanyPlan(str, Enum):
    """Subscription plan of a company"""
    TRIAL = "Trial"
    PAID = "Paid"


class Company(SQLModel, table=True):
    """Shop owning a storefront, routed by subdomain"""

    __tablename__ = "companies"

    id: Optional[int] = Field(default=None, primary_key=True)
    shop_name: str = Field(max_length=255, nullable=False)
    subdomain: str = Field(
        max_length=100,
        unique=True,
        index=True,
        description="Unique tenant identifier for subdomain routing"
    )
    description: Optional[str] = None
    logo: Optional[str] = Field(default=None, description="Storage key or URL of the logo")
    phone: Optional[str] = Field(default=None, max_length=20)
    whatsapp: Optional[str] = Field(default=None, max_length=20)
    website: Optional[str] = None

    status: CompanyStatus = Field(default=CompanyStatus.ACTIVE, index=True)
    plan: CompanyPlan = Field(default=CompanyPlan.TRIAL)

    # Timestamps
    join_date: datetime = Field(default_factory=datetime.utcnow)
    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)
