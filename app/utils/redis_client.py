# app/utils/redis_client.py

import json
from typing import Any, Optional

import redis
from redis.exceptions import RedisError

from app.config.settings import REDIS_URL
from app.utils.logger import logger
from app.utils.prometheus_metrics import record_external_call


class CacheError(Exception):
    """Cache service call failed."""


# Global Redis client (lazy initialization)
client = None


def get_redis_client() -> redis.Redis:
    """Returns the shared Redis client, creating it on first use."""
    global client
    if client is None:
        logger.info(f"[Redis] Connecting to {REDIS_URL}")
        client = redis.Redis.from_url(REDIS_URL, decode_responses=True)
    return client


def reset_redis_client():
    global client
    if client is not None:
        client.close()
    client = None


def _call(operation: str, fn, *args, **kwargs):
    try:
        result = fn(*args, **kwargs)
    except RedisError as e:
        record_external_call("redis", operation, ok=False)
        logger.error(f"[Redis] {operation} failed: {e}")
        raise CacheError(str(e)) from e
    record_external_call("redis", operation, ok=True)
    return result


def cache_get(key: str) -> Any:
    """Decoded JSON value, or None when the key is missing."""
    raw = _call("get", get_redis_client().get, key)
    if raw is None:
        return None
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        # Written by something other than this service.
        return raw


def cache_set(key: str, value: Any, ttl: Optional[int] = None):
    payload = json.dumps(value)
    if ttl:
        _call("setex", get_redis_client().setex, key, ttl, payload)
    else:
        _call("set", get_redis_client().set, key, payload)


def cache_delete(key: str):
    _call("delete", get_redis_client().delete, key)


def cache_clear(pattern: Optional[str] = None) -> int:
    """Deletes keys matching ``pattern``, or the whole current database. Returns keys removed (-1 on flush)."""
    redis_client = get_redis_client()
    if not pattern:
        _call("flushdb", redis_client.flushdb)
        logger.info("[Redis] Database flushed")
        return -1

    keys = _call("scan", lambda: list(redis_client.scan_iter(match=pattern)))
    if keys:
        _call("delete", redis_client.delete, *keys)
    logger.info(f"[Redis] Cleared {len(keys)} keys matching '{pattern}'")
    return len(keys)
