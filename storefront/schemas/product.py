"""
Schemas for product requests and the enriched product response
"""

from pydantic import field_validator
from sqlmodel import SQLModel, Field
from datetime import datetime
from decimal import Decimal
from typing import Optional, List

from storefront.models.product import ProductStatus, ARPlacement
from storefront.models.product_event import ProductEventType


class ProductCreate(SQLModel):
    """Schema for creating a product"""
    name: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    price: Decimal
    discount_price: Optional[Decimal] = None
    shop_id: int
    category: Optional[str] = None
    images: List[str] = Field(default_factory=list, max_length=4)
    dimensions: Optional[str] = None
    weight: Optional[str] = None
    material: Optional[str] = None
    color: Optional[str] = None
    has_ar: bool = False
    glb_file: Optional[str] = None
    usdz_file: Optional[str] = None
    ar_scale: Decimal = Decimal("1.00")
    ar_placement: ARPlacement = ARPlacement.FLOOR
    featured: bool = False


class ProductUpdate(SQLModel):
    """Schema for partial product updates - all fields optional"""
    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    description: Optional[str] = None
    price: Optional[Decimal] = None
    discount_price: Optional[Decimal] = None
    category: Optional[str] = None
    image_1: Optional[str] = None
    image_2: Optional[str] = None
    image_3: Optional[str] = None
    image_4: Optional[str] = None
    dimensions: Optional[str] = None
    weight: Optional[str] = None
    material: Optional[str] = None
    color: Optional[str] = None
    has_ar: Optional[bool] = None
    glb_file: Optional[str] = None
    usdz_file: Optional[str] = None
    ar_scale: Optional[Decimal] = None
    ar_placement: Optional[ARPlacement] = None
    featured: Optional[bool] = None

    @field_validator("name", "price", "has_ar", "ar_scale", "ar_placement", "featured")
    @classmethod
    def not_null(cls, value):
        # Omit a field to leave it unchanged; these columns cannot be cleared
        if value is None:
            raise ValueError("Field cannot be null")
        return value


class CompanySummary(SQLModel):
    """Company fields nested on every product"""
    id: int
    name: str
    subdomain: str
    description: Optional[str] = None
    logo: Optional[str] = None


class ProductRead(SQLModel):
    """Product as returned by the API, with signed file URLs"""
    id: int
    name: str
    description: Optional[str] = None
    price: float
    discount_price: Optional[float] = None
    discount_percentage: int
    effective_price: float
    company_id: int
    company: CompanySummary
    category: Optional[str] = None
    images: List[str]
    image_1: Optional[str] = None
    image_2: Optional[str] = None
    image_3: Optional[str] = None
    image_4: Optional[str] = None
    dimensions: Optional[str] = None
    weight: Optional[str] = None
    material: Optional[str] = None
    color: Optional[str] = None
    ar_scale: float
    ar_placement: ARPlacement
    has_ar: bool
    glb_file: Optional[str] = None
    usdz_file: Optional[str] = None
    featured: bool
    status: ProductStatus
    created_at: datetime
    updated_at: datetime


class ProductEventRead(SQLModel):
    id: int
    product_id: int
    company_id: int
    event_type: ProductEventType
    changed_fields: Optional[str] = None
    created_at: datetime
