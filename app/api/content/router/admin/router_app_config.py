from typing import List

from fastapi import APIRouter, Depends, Path, status
from sqlalchemy.orm import Session

from app.api.content.schemas.schema_app_config import (
    AppConfigCreate,
    AppConfigUpdate,
    AppConfigResponse,
)
from app.api.content.services.service_content import AppConfigService
from app.core.admin_dependencies import get_current_user
from app.database.db_connection import get_db

router = APIRouter(
    prefix="/api/content/admin/config",
    tags=["Admin - App config"],
    dependencies=[Depends(get_current_user)]
)


@router.get("", response_model=List[AppConfigResponse])
def list_config(db: Session = Depends(get_db)):
    return AppConfigService(db).list()


@router.post("", response_model=AppConfigResponse, status_code=status.HTTP_201_CREATED)
def create_config(req: AppConfigCreate, db: Session = Depends(get_db)):
    return AppConfigService(db).create(req)


@router.put("/{config_id}", response_model=AppConfigResponse)
def update_config(
    req: AppConfigUpdate,
    config_id: str = Path(...),
    db: Session = Depends(get_db),
):
    return AppConfigService(db).update(config_id, req)


@router.delete("/{config_id}")
def delete_config(config_id: str = Path(...), db: Session = Depends(get_db)):
    AppConfigService(db).delete(config_id)
    return {"message": "Config entry deleted"}
