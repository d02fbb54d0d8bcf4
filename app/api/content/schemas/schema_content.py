from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict


class ContentCreate(BaseModel):
    page: Optional[str] = None
    section: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None
    content: Optional[Dict[str, Any]] = None
    image_url: Optional[str] = None
    order_index: int = 0
    is_active: bool = True


class ContentUpdate(BaseModel):
    page: Optional[str] = None
    section: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None
    content: Optional[Dict[str, Any]] = None
    image_url: Optional[str] = None
    order_index: Optional[int] = None
    is_active: Optional[bool] = None


class ContentResponse(BaseModel):
    id: str
    page: str
    section: str
    title: Optional[str] = None
    description: Optional[str] = None
    content: Dict[str, Any]
    image_url: Optional[str] = None
    order_index: int
    is_active: bool
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
