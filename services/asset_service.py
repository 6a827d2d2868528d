"""
Asset (binary attachment) business logic.
"""

import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from app.exceptions import NotFoundError, UnprocessableError
from domain.models import Asset, retry_transient
from domain.schemas.asset_schemas import AssetCreate
from repositories import AssetRepository, CategoryRepository

logger = logging.getLogger("scpp.assets")


class AssetService:
    @staticmethod
    @retry_transient
    def list_assets(db: Session, ids: Optional[List[int]] = None) -> List[Asset]:
        return AssetRepository(db).list_assets(ids)

    @staticmethod
    @retry_transient
    def get_asset(db: Session, asset_id: int) -> Asset:
        asset = AssetRepository(db).get_by_id(asset_id)
        if asset is None:
            raise NotFoundError(f"Asset not found: {asset_id}")
        return asset

    @staticmethod
    @retry_transient
    def create_asset(db: Session, payload: AssetCreate) -> Asset:
        """
        Store an uploaded asset; payload.data arrives base64 encoded and is
        stored as raw bytes.

        Raises:
            UnprocessableError: If the category does not exist
        """
        if not CategoryRepository(db).exists(payload.category_id):
            raise UnprocessableError(
                f"Unknown category: {payload.category_id}",
                details={"category_id": payload.category_id},
            )
        try:
            asset = AssetRepository(db).add(
                Asset(
                    category_id=payload.category_id,
                    description=payload.description,
                    data=payload.decoded_data(),
                    recorded_at=payload.recorded_at,
                )
            )
            db.commit()
        except Exception:
            db.rollback()
            logger.exception("Error storing asset")
            raise
        logger.info(f"Stored asset {asset.asset_id} ({len(asset.data)} bytes)")
        return asset

    @staticmethod
    @retry_transient
    def delete_asset(db: Session, asset_id: int) -> None:
        repo = AssetRepository(db)
        asset = repo.get_by_id(asset_id)
        if asset is None:
            raise NotFoundError(f"Asset not found: {asset_id}")
        try:
            repo.remove(asset)
            db.commit()
        except Exception:
            db.rollback()
            logger.exception("Error deleting asset %s", asset_id)
            raise
