"""
Finance domain mappers.
Handles transformation between ORM models and DTOs for documents and assets.
"""

import base64

from domain.models import Asset, Document
from domain.schemas.document_schemas import (
    CategoryRef,
    DocumentTypeRef,
    DocumentResponse,
)
from domain.schemas.asset_schemas import AssetResponse


class DocumentMapper:
    """Mapper for document transformations."""

    @staticmethod
    def to_response(document: Document) -> DocumentResponse:
        """
        Convert a Document ORM row into its response DTO.

        The category is optional (it is nulled when its category is deleted);
        the document type always exists.
        """
        category = None
        if document.category is not None:
            category = CategoryRef(
                id=document.category.category_id,
                description=document.category.description,
            )

        return DocumentResponse(
            document_id=document.document_id,
            document_type_id=document.document_type_id,
            purpose=document.purpose or "",
            amount=float(document.amount),
            date=document.date,
            category_id=document.category_id,
            category=category,
            document_type=DocumentTypeRef(
                id=document.document_type.document_type_id,
                description=document.document_type.description,
            ),
        )


class AssetMapper:
    """Mapper for asset transformations; binary content leaves as base64."""

    @staticmethod
    def to_response(asset: Asset) -> AssetResponse:
        return AssetResponse(
            asset_id=asset.asset_id,
            category_id=asset.category_id,
            description=asset.description or "",
            data=base64.b64encode(asset.data or b"").decode("ascii"),
            recorded_at=asset.recorded_at,
            category=CategoryRef(
                id=asset.category.category_id,
                description=asset.category.description,
            ),
        )
