from typing import Any, Optional

from pydantic import BaseModel, Field


class CacheSetRequest(BaseModel):
    key: Optional[str] = None
    value: Any = None
    ttl: Optional[int] = Field(None, ge=0, description="Expiry in seconds")


class CacheClearRequest(BaseModel):
    pattern: Optional[str] = Field(None, description="Glob pattern, e.g. 'menu:*'")


class CacheValueResponse(BaseModel):
    value: Any = None


class CacheSuccessResponse(BaseModel):
    success: bool = True
