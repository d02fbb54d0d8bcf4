from datetime import datetime
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field


# Numeric inputs arrive from text fields, so strings are accepted and coerced by the service.
NumberInput = Optional[Union[float, str]]


class MenuItemCreate(BaseModel):
    restaurant_id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1, max_length=150)
    description: Optional[str] = None
    image_url: Optional[str] = None
    price: NumberInput = 0
    category: Optional[str] = None
    is_available: bool = True
    is_vegetarian: bool = False
    is_vegan: bool = False
    is_spicy: bool = False
    calories: NumberInput = 0
    order_index: NumberInput = 0


class MenuItemUpdate(BaseModel):
    restaurant_id: Optional[str] = None
    name: Optional[str] = Field(None, min_length=1, max_length=150)
    description: Optional[str] = None
    image_url: Optional[str] = None
    price: NumberInput = None
    category: Optional[str] = None
    is_available: Optional[bool] = None
    is_vegetarian: Optional[bool] = None
    is_vegan: Optional[bool] = None
    is_spicy: Optional[bool] = None
    calories: NumberInput = None
    order_index: NumberInput = None


class MenuItemResponse(BaseModel):
    id: str
    restaurant_id: str
    restaurant_name: Optional[str] = None
    name: str
    description: Optional[str] = None
    image_url: Optional[str] = None
    price: float
    category: str
    is_available: bool
    is_vegetarian: bool
    is_vegan: bool
    is_spicy: bool
    calories: int
    order_index: int
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
