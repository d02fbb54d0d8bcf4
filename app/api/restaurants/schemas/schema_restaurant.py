from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


# ------ Requests ------
class RestaurantCreate(BaseModel):
    name: Optional[str] = Field(None, max_length=150)
    slug: Optional[str] = Field(None, max_length=160)
    description: Optional[str] = None
    image_url: Optional[str] = None
    cover_image_url: Optional[str] = None
    rating: Optional[float] = Field(None, ge=0, le=5)
    review_count: Optional[int] = Field(None, ge=0)
    delivery_time_min: Optional[int] = Field(None, ge=0)
    delivery_fee: Optional[float] = Field(None, ge=0)
    minimum_order: Optional[float] = Field(None, ge=0)
    category_id: Optional[str] = None
    address: Optional[str] = None
    latitude: Optional[float] = Field(None, ge=-90, le=90)
    longitude: Optional[float] = Field(None, ge=-180, le=180)
    phone: Optional[str] = None
    is_featured: Optional[bool] = None
    is_active: Optional[bool] = None


class RestaurantUpdate(RestaurantCreate):
    pass


# ------ Responses ------
class RestaurantResponse(BaseModel):
    id: str
    name: str
    slug: str
    description: Optional[str] = None
    image_url: Optional[str] = None
    cover_image_url: Optional[str] = None
    rating: float
    review_count: int
    delivery_time_min: int
    delivery_fee: float
    minimum_order: float
    category_id: Optional[str] = None
    category_name: Optional[str] = None
    address: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    phone: Optional[str] = None
    is_featured: bool
    is_active: bool
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class RestaurantLookup(BaseModel):
    """Minimal shape for restaurant pickers."""
    id: str
    name: str

    model_config = ConfigDict(from_attributes=True)
