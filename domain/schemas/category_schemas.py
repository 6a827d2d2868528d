"""Schemas for categories and document types"""

from pydantic import BaseModel


class CategoryResponse(BaseModel):
    category_id: int
    description: str
    sort_order: int

    model_config = {"from_attributes": True}


class DocumentTypeResponse(BaseModel):
    document_type_id: int
    description: str

    model_config = {"from_attributes": True}
