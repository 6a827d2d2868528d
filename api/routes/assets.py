"""Asset routes"""

from typing import List

from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import Response
from sqlalchemy.orm import Session

from api.dependencies import require_session
from api.responses import AUTH_ERROR_RESPONSES, success_response
from domain.mappers import AssetMapper
from domain.models import get_db_session
from domain.schemas.asset_schemas import AssetCreate, AssetResponse
from services.asset_service import AssetService

router = APIRouter(
    prefix="/assets",
    tags=["Assets"],
    dependencies=[Depends(require_session)],
    responses=AUTH_ERROR_RESPONSES,
)


@router.get("", response_model=List[AssetResponse])
def list_assets(
    id: List[int] = Query(default=[]), db: Session = Depends(get_db_session)
):
    """Assets with base64 content, newest first"""
    return [AssetMapper.to_response(a) for a in AssetService.list_assets(db, id)]


@router.post("", status_code=status.HTTP_201_CREATED)
def create_asset(payload: AssetCreate, db: Session = Depends(get_db_session)):
    asset = AssetService.create_asset(db, payload)
    return success_response(data=AssetMapper.to_response(asset), message="Asset stored")


@router.get("/{asset_id}/content")
def get_asset_content(asset_id: int, db: Session = Depends(get_db_session)):
    """Raw asset bytes"""
    asset = AssetService.get_asset(db, asset_id)
    return Response(content=asset.data, media_type="application/octet-stream")


@router.delete("/{asset_id}")
def delete_asset(asset_id: int, db: Session = Depends(get_db_session)):
    AssetService.delete_asset(db, asset_id)
    return success_response(data={"id": asset_id}, message="Asset deleted")
