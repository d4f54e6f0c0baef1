"""
Product model for storefront items
"""

from sqlmodel import Field, SQLModel
from sqlalchemy import Column, ForeignKey, Integer, Numeric
from decimal import Decimal
from datetime import datetime
from typing import Optional
from enum import Enum


class ProductStatus(str, Enum):
    """Inactive marks a soft-deleted product"""
    ACTIVE = "Active"
    INACTIVE = "Inactive"


class ARPlacement(str, Enum):
    """Surface an AR model is anchored to"""
    FLOOR = "floor"
    WALL = "wall"
    TABLE = "table"


IMAGE_FIELDS = ("image_1", "image_2", "image_3", "image_4")
MODEL_FIELDS = ("glb_file", "usdz_file")


class Product(SQLModel, table=True):
    """Sellable item owned by exactly one company"""

    __tablename__ = "products"

    id: Optional[int] = Field(default=None, primary_key=True)
    company_id: int = Field(
        sa_column=Column(
            Integer,
            ForeignKey("companies.id", ondelete="CASCADE"),
            nullable=False,
            index=True,
        ),
        description="Owning company"
    )

    # Item details
    name: str = Field(max_length=255, nullable=False)
    description: Optional[str] = None
    category: Optional[str] = Field(default=None, max_length=100)

    # Pricing
    price: Decimal = Field(sa_column=Column(Numeric(10, 2), nullable=False))
    discount_price: Optional[Decimal] = Field(
        default=None,
        sa_column=Column(Numeric(10, 2), nullable=True)
    )

    # Images (storage keys)
    image_1: Optional[str] = None
    image_2: Optional[str] = None
    image_3: Optional[str] = None
    image_4: Optional[str] = None

    # Physical attributes
    dimensions: Optional[str] = Field(default=None, max_length=100)
    weight: Optional[str] = Field(default=None, max_length=50)
    material: Optional[str] = Field(default=None, max_length=100)
    color: Optional[str] = Field(default=None, max_length=50)

    # AR
    has_ar: bool = Field(default=False)
    glb_file: Optional[str] = None
    usdz_file: Optional[str] = None
    ar_scale: Decimal = Field(
        default=Decimal("1.00"),
        sa_column=Column(Numeric(5, 2), nullable=False, default=Decimal("1.00"))
    )
    ar_placement: ARPlacement = Field(default=ARPlacement.FLOOR)

    # Display
    featured: bool = Field(default=False, index=True)
    status: ProductStatus = Field(default=ProductStatus.ACTIVE, index=True)

    # Timestamps
    created_at: datetime = Field(default_factory=datetime.utcnow, index=True)
    updated_at: datetime = Field(default_factory=datetime.utcnow)

    def image_keys(self) -> list[Optional[str]]:
        return [getattr(self, name) for name in IMAGE_FIELDS]
