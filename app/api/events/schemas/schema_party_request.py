from datetime import date, datetime, time
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, field_validator

PartyRequestStatus = Literal["pending", "approved", "rejected"]


class PartyRequestReview(BaseModel):
    status: PartyRequestStatus
    admin_notes: Optional[str] = None


class PartyRequestResponse(BaseModel):
    id: str
    user_id: str
    user_email: Optional[str] = None
    restaurant_id: str
    restaurant_name: Optional[str] = None
    event_name: str
    event_date: date
    start_time: Optional[str] = None
    end_time: Optional[str] = None
    expected_attendees: Optional[int] = None
    requires_dj: bool
    special_requirements: Optional[str] = None
    contact_phone: Optional[str] = None
    contact_email: Optional[str] = None
    status: str
    admin_notes: Optional[str] = None
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)

    @field_validator("start_time", "end_time", mode="before")
    @classmethod
    def _hh_mm(cls, value):
        if isinstance(value, time):
            return value.strftime("%H:%M")
        return value
