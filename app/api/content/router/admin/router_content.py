from typing import List, Optional

from fastapi import APIRouter, Depends, Path, Query, status
from sqlalchemy.orm import Session

from app.api.content.schemas.schema_content import (
    ContentCreate,
    ContentUpdate,
    ContentResponse,
)
from app.api.content.services.service_content import ContentService
from app.core.admin_dependencies import get_current_user
from app.database.db_connection import get_db
from app.utils.logger import logger

router = APIRouter(
    prefix="/api/content/admin/content",
    tags=["Admin - Content"],
    dependencies=[Depends(get_current_user)]
)


@router.get("", response_model=List[ContentResponse])
def list_content(
    page: Optional[str] = Query(None),
    db: Session = Depends(get_db),
):
    return ContentService(db).list(page)


@router.post("", response_model=ContentResponse, status_code=status.HTTP_201_CREATED)
def create_content(req: ContentCreate, db: Session = Depends(get_db)):
    logger.info(f"[Content] Create - page={req.page} section={req.section}")
    return ContentService(db).create(req)


@router.put("/{content_id}", response_model=ContentResponse)
def update_content(
    req: ContentUpdate,
    content_id: str = Path(...),
    db: Session = Depends(get_db),
):
    return ContentService(db).update(content_id, req)


@router.delete("/{content_id}")
def delete_content(content_id: str = Path(...), db: Session = Depends(get_db)):
    ContentService(db).delete(content_id)
    return {"message": "Content deleted"}
