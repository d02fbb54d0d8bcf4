from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

DiscountType = Literal["percentage", "fixed"]


class SpecialOfferCreate(BaseModel):
    restaurant_id: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None
    discount_type: Optional[DiscountType] = None
    discount_value: Optional[float] = Field(None, ge=0)
    minimum_order: Optional[float] = Field(None, ge=0)
    max_discount: Optional[float] = Field(None, ge=0)
    code: Optional[str] = None
    image_url: Optional[str] = None
    start_date: Optional[str] = Field(None, description="ISO date or datetime")
    end_date: Optional[str] = Field(None, description="ISO date or datetime")
    is_active: Optional[bool] = None
    usage_limit: Optional[int] = Field(None, ge=0)


class SpecialOfferUpdate(SpecialOfferCreate):
    pass


class SpecialOfferResponse(BaseModel):
    id: str
    restaurant_id: Optional[str] = None
    restaurant_name: Optional[str] = None
    title: str
    description: Optional[str] = None
    discount_type: str
    discount_value: float
    minimum_order: float
    max_discount: Optional[float] = None
    code: Optional[str] = None
    image_url: Optional[str] = None
    start_date: datetime
    end_date: datetime
    is_active: bool
    usage_limit: Optional[int] = None
    usage_count: int
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
