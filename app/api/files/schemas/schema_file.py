from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict


class FileResponse(BaseModel):
    id: str
    name: str
    type: str
    url: str
    path: str
    size: int
    mime_type: Optional[str] = None
    is_public: bool
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class ImageUploadResponse(BaseModel):
    url: str
    path: str
    bucket: str
