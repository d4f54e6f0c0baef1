"""
Pydantic schemas for AR requests
"""

from pydantic import BaseModel, ConfigDict, Field

from storefront.models.ar_request import ARRequestStatus


class ARRequestCreate(BaseModel):
    """AR request schema, accepts the dashboard's camelCase keys"""
    model_config = ConfigDict(populate_by_name=True)

    product_id: int = Field(..., alias="productId")
    shop_id: int = Field(..., alias="shopId")


class ARRequestUpdate(BaseModel):
    """Status change for an AR request"""
    status: ARRequestStatus
