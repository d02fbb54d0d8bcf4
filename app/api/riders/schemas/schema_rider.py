from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

VehicleType = Literal["bike", "motorcycle", "car", "scooter"]


class RiderCreate(BaseModel):
    user_id: Optional[str] = None
    name: str = Field(..., min_length=1, max_length=150)
    phone: str = Field(..., min_length=1, max_length=40)
    vehicle_type: VehicleType = "bike"
    vehicle_number: Optional[str] = None
    license_number: Optional[str] = None
    current_latitude: Optional[float] = Field(None, ge=-90, le=90)
    current_longitude: Optional[float] = Field(None, ge=-180, le=180)
    is_available: bool = True
    is_active: bool = True


class RiderUpdate(BaseModel):
    user_id: Optional[str] = None
    name: Optional[str] = Field(None, min_length=1, max_length=150)
    phone: Optional[str] = Field(None, min_length=1, max_length=40)
    vehicle_type: Optional[VehicleType] = None
    vehicle_number: Optional[str] = None
    license_number: Optional[str] = None
    current_latitude: Optional[float] = Field(None, ge=-90, le=90)
    current_longitude: Optional[float] = Field(None, ge=-180, le=180)
    is_available: Optional[bool] = None
    is_active: Optional[bool] = None


class RiderResponse(BaseModel):
    id: str
    user_id: Optional[str] = None
    name: str
    phone: str
    vehicle_type: str
    vehicle_number: Optional[str] = None
    license_number: Optional[str] = None
    current_latitude: Optional[float] = None
    current_longitude: Optional[float] = None
    is_available: bool
    is_active: bool
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class RiderLookup(BaseModel):
    id: str
    name: str

    model_config = ConfigDict(from_attributes=True)


class LinkedUser(BaseModel):
    user_id: str
    name: str

    model_config = ConfigDict(from_attributes=True)
