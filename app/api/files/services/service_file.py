import time
import uuid
from typing import List, Optional

from fastapi import HTTPException, UploadFile, status
from sqlalchemy.orm import Session

from app.api.files.models.model_file import FileModel
from app.api.files.repositories.repo_file import FileRepository
from app.api.files.schemas.schema_file import ImageUploadResponse
from app.config.settings import FILES_BUCKET, IMAGES_BUCKET, MAX_IMAGE_SIZE_BYTES
from app.utils import minio_client
from app.utils.logger import logger

UPLOADS_PREFIX = "uploads"


def _image_too_large() -> HTTPException:
    limit_mb = MAX_IMAGE_SIZE_BYTES / (1024 * 1024)
    return HTTPException(status.HTTP_400_BAD_REQUEST, f"Image size must be less than {limit_mb:g}MB")


def _storage_failure(e: minio_client.StorageError) -> HTTPException:
    return HTTPException(status.HTTP_500_INTERNAL_SERVER_ERROR, str(e))


class FileService:
    def __init__(self, db: Session):
        self.db = db
        self.repo = FileRepository(db)

    def _file_or_404(self, file_id: str) -> FileModel:
        obj = self.repo.get_by_id(file_id)
        if not obj:
            raise HTTPException(status.HTTP_404_NOT_FOUND, "File not found")
        return obj

    def list(self, file_type: Optional[str] = None) -> List[FileModel]:
        return self.repo.list(file_type)

    def upload(self, file: UploadFile) -> FileModel:
        """Stores the binary first, then records its metadata row."""
        data = file.file.read()
        content_type = file.content_type or "application/octet-stream"
        ext = minio_client.object_extension(file.filename, content_type)
        object_name = minio_client.random_object_name(UPLOADS_PREFIX, ext)

        try:
            url = minio_client.upload_bytes(FILES_BUCKET, object_name, data, content_type)
        except minio_client.StorageError as e:
            raise _storage_failure(e)

        obj = self.repo.create(
            name=file.filename or object_name,
            type="image" if content_type.startswith("image/") else "document",
            url=url,
            path=object_name,
            size=len(data),
            mime_type=content_type,
            is_public=True,
        )
        self.db.commit()
        self.db.refresh(obj)
        logger.info(f"[FileService] Uploaded id={obj.id} path={obj.path}")
        return obj

    def delete(self, file_id: str):
        obj = self._file_or_404(file_id)
        try:
            minio_client.remove_object(FILES_BUCKET, obj.path)
        except minio_client.StorageError as e:
            raise _storage_failure(e)
        self.repo.delete(obj)
        self.db.commit()
        logger.info(f"[FileService] Deleted id={file_id} path={obj.path}")


def upload_image(file: UploadFile, bucket: Optional[str] = None) -> ImageUploadResponse:
    """
    Image picker upload: only ``image/*`` up to MAX_IMAGE_SIZE_BYTES, stored
    as ``<bucket>/<epoch_ms>-<random>.<ext>`` inside the bucket.
    """
    content_type = file.content_type or ""
    if not content_type.startswith("image/"):
        raise HTTPException(status.HTTP_400_BAD_REQUEST, "Please select an image file")

    if file.size is not None and file.size > MAX_IMAGE_SIZE_BYTES:
        raise _image_too_large()
    # Never buffer more than one byte past the limit
    data = file.file.read(MAX_IMAGE_SIZE_BYTES + 1)
    if len(data) > MAX_IMAGE_SIZE_BYTES:
        raise _image_too_large()

    bucket_name = minio_client.bucket_name_for(bucket or IMAGES_BUCKET)
    if len(bucket_name) < 3:
        raise HTTPException(status.HTTP_400_BAD_REQUEST, "Invalid bucket name")

    ext = minio_client.object_extension(file.filename, content_type)
    file_name = f"{int(time.time() * 1000)}-{uuid.uuid4().hex[:8]}.{ext}"
    object_name = f"{bucket_name}/{file_name}"

    try:
        url = minio_client.upload_bytes(bucket_name, object_name, data, content_type)
    except minio_client.StorageError as e:
        raise _storage_failure(e)

    return ImageUploadResponse(url=url, path=object_name, bucket=bucket_name)
