"""
Asset Repository - binary attachments
"""

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from repositories.base import BaseRepository
from domain.models import Asset


class AssetRepository(BaseRepository[Asset]):
    def __init__(self, db: Session):
        super().__init__(db, Asset)

    def list_assets(self, ids: Optional[List[int]] = None) -> List[Asset]:
        """Assets ordered by recorded_at desc, id desc; optionally restricted to ids"""
        stmt = select(Asset)
        if ids:
            stmt = stmt.where(Asset.asset_id.in_(ids))
        stmt = stmt.order_by(Asset.recorded_at.desc(), Asset.asset_id.desc())
        return list(self.db.scalars(stmt).unique())
