import pytest
from redis.exceptions import ConnectionError as RedisConnectionError

from app.utils import redis_client

CACHE = "/api/redis"


def test_set_and_get_json_value(auth_client, fake_redis):
    resp = auth_client.post(CACHE, json={"key": "menu:1", "value": {"items": [1, 2]}})
    assert resp.status_code == 200, resp.text
    assert resp.json() == {"success": True}

    resp = auth_client.get(CACHE, params={"key": "menu:1"})
    assert resp.json() == {"value": {"items": [1, 2]}}
    assert fake_redis.ttl("menu:1") == -1


def test_set_with_ttl(auth_client, fake_redis):
    auth_client.post(CACHE, json={"key": "session", "value": "abc", "ttl": 60})
    assert 0 < fake_redis.ttl("session") <= 60


def test_explicit_null_is_a_value(auth_client, fake_redis):
    resp = auth_client.post(CACHE, json={"key": "empty", "value": None})
    assert resp.status_code == 200, resp.text
    assert fake_redis.get("empty") == "null"


def test_missing_key_is_null(auth_client, fake_redis):
    assert auth_client.get(CACHE, params={"key": "nope"}).json() == {"value": None}


def test_raw_string_is_returned_as_is(auth_client, fake_redis):
    fake_redis.set("legacy", "not json")
    assert auth_client.get(CACHE, params={"key": "legacy"}).json() == {"value": "not json"}


@pytest.mark.parametrize("payload", [{"value": 1}, {"key": "k"}, {"key": "", "value": 1}])
def test_set_requires_key_and_value(auth_client, fake_redis, payload):
    resp = auth_client.post(CACHE, json=payload)
    assert resp.status_code == 400
    assert resp.json() == {"detail": "Key and value are required"}


def test_get_and_delete_require_key(auth_client, fake_redis):
    assert auth_client.get(CACHE).json() == {"detail": "Key is required"}
    assert auth_client.delete(CACHE).status_code == 400


def test_delete(auth_client, fake_redis):
    fake_redis.set("a", "1")
    assert auth_client.delete(CACHE, params={"key": "a"}).json() == {"success": True}
    assert fake_redis.exists("a") == 0


def test_clear_by_pattern(auth_client, fake_redis):
    for key in ("menu:1", "menu:2", "offers:1"):
        fake_redis.set(key, "1")
    resp = auth_client.post(f"{CACHE}/clear", json={"pattern": "menu:*"})
    assert resp.status_code == 200, resp.text
    assert sorted(fake_redis.keys("*")) == ["offers:1"]


def test_clear_everything(auth_client, fake_redis):
    fake_redis.set("menu:1", "1")
    fake_redis.set("offers:1", "1")
    assert auth_client.post(f"{CACHE}/clear").status_code == 200
    assert fake_redis.keys("*") == []


class _DownRedis:
    def get(self, key):
        raise RedisConnectionError("connection refused")


def test_cache_outage_is_500(auth_client, monkeypatch):
    monkeypatch.setattr(redis_client, "client", _DownRedis())
    resp = auth_client.get(CACHE, params={"key": "menu:1"})
    assert resp.status_code == 500
    assert "connection refused" in resp.json()["detail"]
