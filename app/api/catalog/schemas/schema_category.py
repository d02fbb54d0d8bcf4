from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class CategoryCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    slug: Optional[str] = Field(None, max_length=120)
    image_url: Optional[str] = None
    icon: Optional[str] = Field(None, max_length=50)
    order_index: int = 0
    is_active: bool = True


class CategoryUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    slug: Optional[str] = Field(None, max_length=120)
    image_url: Optional[str] = None
    icon: Optional[str] = Field(None, max_length=50)
    order_index: Optional[int] = None
    is_active: Optional[bool] = None


class CategoryResponse(BaseModel):
    id: str
    name: str
    slug: Optional[str] = None
    image_url: Optional[str] = None
    icon: Optional[str] = None
    order_index: int
    is_active: bool
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class CategoryLookup(BaseModel):
    id: str
    name: str

    model_config = ConfigDict(from_attributes=True)
