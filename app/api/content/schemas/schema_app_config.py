from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class AppConfigCreate(BaseModel):
    key: str = Field(..., min_length=1, max_length=100)
    # A string is parsed as JSON text; anything else is stored as sent.
    value: Any = None
    description: Optional[str] = None


class AppConfigUpdate(BaseModel):
    value: Any = None
    description: Optional[str] = None


class AppConfigResponse(BaseModel):
    id: str
    key: str
    value: Any = None
    description: Optional[str] = None
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
