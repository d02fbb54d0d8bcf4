from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, condecimal


# ------ Addons ------
class AddonCreate(BaseModel):
    menu_item_id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1, max_length=100)
    description: Optional[str] = None
    price: condecimal(max_digits=10, decimal_places=2, ge=0) = Field(default=0)
    is_required: bool = False
    max_selections: Optional[int] = Field(None, ge=1)
    order_index: int = 0
    is_active: bool = True


class AddonUpdate(BaseModel):
    menu_item_id: Optional[str] = None
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    description: Optional[str] = None
    price: Optional[condecimal(max_digits=10, decimal_places=2, ge=0)] = None
    is_required: Optional[bool] = None
    max_selections: Optional[int] = Field(None, ge=1)
    order_index: Optional[int] = None
    is_active: Optional[bool] = None


# ------ Options ------
class AddonOptionCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    price: condecimal(max_digits=10, decimal_places=2, ge=0) = Field(default=0)
    order_index: int = 0
    is_active: bool = True


class AddonOptionUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    price: Optional[condecimal(max_digits=10, decimal_places=2, ge=0)] = None
    order_index: Optional[int] = None
    is_active: Optional[bool] = None


class AddonOptionResponse(BaseModel):
    id: str
    addon_id: str
    name: str
    price: float
    order_index: int
    is_active: bool

    model_config = ConfigDict(from_attributes=True)


class AddonResponse(BaseModel):
    id: str
    menu_item_id: str
    menu_item_name: Optional[str] = None
    restaurant_name: Optional[str] = None
    name: str
    description: Optional[str] = None
    price: float
    is_required: bool
    max_selections: Optional[int] = None
    order_index: int
    is_active: bool
    options: List[AddonOptionResponse] = []

    model_config = ConfigDict(from_attributes=True)
