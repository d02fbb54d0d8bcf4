from typing import Optional

from fastapi import APIRouter, Body, Depends, HTTPException, Query, status

from app.api.cache.schemas.schema_cache import (
    CacheClearRequest,
    CacheSetRequest,
    CacheSuccessResponse,
    CacheValueResponse,
)
from app.core.admin_dependencies import get_current_user
from app.utils import redis_client
from app.utils.logger import logger

router = APIRouter(
    prefix="/api/redis",
    tags=["Admin - Cache"],
    dependencies=[Depends(get_current_user)]
)


def _cache_failure(e: redis_client.CacheError) -> HTTPException:
    return HTTPException(status.HTTP_500_INTERNAL_SERVER_ERROR, str(e))


@router.get("", response_model=CacheValueResponse)
def get_cache_value(key: Optional[str] = Query(None)):
    if not key:
        raise HTTPException(status.HTTP_400_BAD_REQUEST, "Key is required")
    try:
        return CacheValueResponse(value=redis_client.cache_get(key))
    except redis_client.CacheError as e:
        raise _cache_failure(e)


@router.post("", response_model=CacheSuccessResponse)
def set_cache_value(req: CacheSetRequest):
    # An explicit null is a value; an absent one is not.
    if not req.key or "value" not in req.model_fields_set:
        raise HTTPException(status.HTTP_400_BAD_REQUEST, "Key and value are required")
    try:
        redis_client.cache_set(req.key, req.value, req.ttl)
    except redis_client.CacheError as e:
        raise _cache_failure(e)
    logger.info(f"[Cache] Set - key={req.key} ttl={req.ttl}")
    return CacheSuccessResponse()


@router.delete("", response_model=CacheSuccessResponse)
def delete_cache_value(key: Optional[str] = Query(None)):
    if not key:
        raise HTTPException(status.HTTP_400_BAD_REQUEST, "Key is required")
    try:
        redis_client.cache_delete(key)
    except redis_client.CacheError as e:
        raise _cache_failure(e)
    return CacheSuccessResponse()


@router.post("/clear", response_model=CacheSuccessResponse)
def clear_cache(req: Optional[CacheClearRequest] = Body(None)):
    pattern = req.pattern if req else None
    logger.info(f"[Cache] Clear - pattern={pattern}")
    try:
        redis_client.cache_clear(pattern)
    except redis_client.CacheError as e:
        raise _cache_failure(e)
    return CacheSuccessResponse()
