"""
ProductEvent model - audit trail for product writes
"""

from sqlmodel import Field, SQLModel
from datetime import datetime
from typing import Optional
from enum import Enum


class ProductEventType(str, Enum):
    """Types of product events"""
    CREATED = "created"
    UPDATED = "updated"
    DELETED = "deleted"     # Soft delete, status set to Inactive


class ProductEvent(SQLModel, table=True):
    """One write to a product, committed together with the write"""

    __tablename__ = "product_events"

    id: Optional[int] = Field(default=None, primary_key=True)
    product_id: int = Field(index=True)
    company_id: int = Field(index=True)
    event_type: ProductEventType = Field(index=True)
    changed_fields: Optional[str] = Field(
        default=None,
        description="Comma separated field names for updates"
    )
    created_at: datetime = Field(default_factory=datetime.utcnow, index=True)
