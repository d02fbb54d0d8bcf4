from datetime import datetime, time
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, field_validator

NumberInput = Optional[Union[float, str]]


class EventCreate(BaseModel):
    """
    Event form. Date is ``YYYY-MM-DD`` and times are ``HH:MM``; the required
    fields are checked by the service so a missing one yields a single 400.
    """
    restaurant_id: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None
    event_date: Optional[str] = None
    start_time: Optional[str] = None
    end_time: Optional[str] = None
    image_url: Optional[str] = None
    cover_image_url: Optional[str] = None
    has_dj: Optional[bool] = False
    dj_name: Optional[str] = None
    dj_contact: Optional[str] = None
    max_attendees: NumberInput = None
    ticket_price: NumberInput = 0
    is_active: Optional[bool] = True


class EventUpdate(EventCreate):
    pass


class EventResponse(BaseModel):
    id: str
    restaurant_id: str
    restaurant_name: Optional[str] = None
    title: str
    description: Optional[str] = None
    event_date: datetime
    start_time: str
    end_time: str
    image_url: Optional[str] = None
    cover_image_url: Optional[str] = None
    has_dj: bool
    dj_name: Optional[str] = None
    dj_contact: Optional[str] = None
    max_attendees: Optional[int] = None
    ticket_price: float
    is_active: bool
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)

    @field_validator("start_time", "end_time", mode="before")
    @classmethod
    def _hh_mm(cls, value):
        if isinstance(value, time):
            return value.strftime("%H:%M")
        return str(value)[:5]
