from typing import List, Literal, Optional

from fastapi import APIRouter, Depends, File, Path, Query, UploadFile, status
from sqlalchemy.orm import Session

from app.api.files.schemas.schema_file import FileResponse
from app.api.files.services.service_file import FileService
from app.core.admin_dependencies import get_current_user
from app.database.db_connection import get_db
from app.utils.logger import logger

router = APIRouter(
    prefix="/api/files/admin/files",
    tags=["Admin - Files"],
    dependencies=[Depends(get_current_user)]
)


@router.get("", response_model=List[FileResponse])
def list_files(
    type: Optional[Literal["image", "document"]] = Query(None),
    db: Session = Depends(get_db),
):
    return FileService(db).list(type)


@router.post("", response_model=FileResponse, status_code=status.HTTP_201_CREATED)
def upload_file(
    file: UploadFile = File(...),
    db: Session = Depends(get_db),
):
    logger.info(f"[Files] Upload - name={file.filename} content_type={file.content_type}")
    return FileService(db).upload(file)


@router.delete("/{file_id}")
def delete_file(file_id: str = Path(...), db: Session = Depends(get_db)):
    logger.info(f"[Files] Delete - id={file_id}")
    FileService(db).delete(file_id)
    return {"message": "File deleted"}
