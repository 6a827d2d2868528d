"""Schemas for binary assets"""

import base64
import binascii
from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from domain.schemas.document_schemas import CategoryRef


class AssetCreate(BaseModel):
    """Asset upload; data is base64 encoded"""

    category_id: int = Field(..., ge=1)
    description: str = Field("", max_length=500)
    data: str = Field(..., min_length=1, description="Base64 encoded content")
    recorded_at: datetime

    @field_validator("data")
    @classmethod
    def validate_base64(cls, v: str) -> str:
        try:
            base64.b64decode(v, validate=True)
        except (binascii.Error, ValueError):
            raise ValueError("data must be valid base64")
        return v

    def decoded_data(self) -> bytes:
        return base64.b64decode(self.data)


class AssetResponse(BaseModel):
    asset_id: int
    category_id: int
    description: str
    data: str
    recorded_at: datetime
    category: CategoryRef
