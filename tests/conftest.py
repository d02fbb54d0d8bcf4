import os
import tempfile

# Settings are read at import time, so the environment goes first.
os.environ["RUNNING_IN_DOCKER"] = "1"
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SECRET_KEY"] = "test-secret-key"
os.environ["LOG_DIR"] = tempfile.mkdtemp(prefix="delivery-admin-logs-")
os.environ["MINIO_PUBLIC_ENDPOINT"] = "http://cdn.test"
os.environ.pop("ADMIN_EMAIL", None)
os.environ.pop("ADMIN_PASSWORD", None)

import fakeredis
import pytest
from fastapi.testclient import TestClient

from app.main import app
from app.api.auth.auth_repo import AuthRepository
from app.database.db_connection import Base, SessionLocal, engine
from app.database.init_db import import_models
from app.utils import minio_client, redis_client

ADMIN_EMAIL = "admin@example.com"
ADMIN_PASSWORD = "s3cret-pass"


class FakeMinio:
    """In-memory stand-in for minio.Minio with the calls the storage helpers make."""

    def __init__(self, fail: bool = False):
        self.fail = fail
        self.buckets = set()
        self.policies = {}
        self.objects = {}

    def bucket_exists(self, bucket_name):
        if self.fail:
            raise OSError("connection refused")
        return bucket_name in self.buckets

    def make_bucket(self, bucket_name):
        self.buckets.add(bucket_name)

    def set_bucket_policy(self, bucket_name, policy):
        self.policies[bucket_name] = policy

    def put_object(self, bucket_name, object_name, data, length, content_type=None):
        self.objects[(bucket_name, object_name)] = (data.read(), content_type)

    def remove_object(self, bucket_name, object_name):
        if self.fail:
            raise OSError("connection refused")
        self.objects.pop((bucket_name, object_name), None)


@pytest.fixture(autouse=True)
def database():
    import_models()
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def admin(db):
    user = AuthRepository(db).create_user(ADMIN_EMAIL, ADMIN_PASSWORD, full_name="Test Admin")
    db.commit()
    return user


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def auth_client(client, admin):
    resp = client.post("/api/auth/token", json={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD})
    assert resp.status_code == 200, resp.text
    client.headers.update({"Authorization": f"Bearer {resp.json()['access_token']}"})
    return client


@pytest.fixture
def fake_storage(monkeypatch):
    fake = FakeMinio()
    monkeypatch.setattr(minio_client, "client", fake)
    return fake


@pytest.fixture
def failing_storage(monkeypatch):
    fake = FakeMinio(fail=True)
    monkeypatch.setattr(minio_client, "client", fake)
    return fake


@pytest.fixture
def fake_redis(monkeypatch):
    fake = fakeredis.FakeRedis(decode_responses=True)
    monkeypatch.setattr(redis_client, "client", fake)
    return fake


@pytest.fixture
def restaurant(auth_client):
    resp = auth_client.post(
        "/api/restaurants/admin/restaurants",
        json={"name": "Trattoria Roma", "slug": "trattoria-roma"},
    )
    assert resp.status_code == 201, resp.text
    return resp.json()
