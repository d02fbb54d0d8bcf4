from typing import Optional

from fastapi import APIRouter, Depends, File, Query, UploadFile, status

from app.api.files.schemas.schema_file import ImageUploadResponse
from app.api.files.services.service_file import upload_image
from app.core.admin_dependencies import get_current_user
from app.utils.logger import logger

router = APIRouter(
    prefix="/api/uploads",
    tags=["Admin - Uploads"],
    dependencies=[Depends(get_current_user)]
)


@router.post("/images", response_model=ImageUploadResponse, status_code=status.HTTP_201_CREATED)
def upload_image_file(
    file: UploadFile = File(...),
    bucket: Optional[str] = Query(None, description="Target bucket (defaults to the images bucket)"),
):
    logger.info(f"[Uploads] Image - name={file.filename} bucket={bucket}")
    return upload_image(file, bucket)
