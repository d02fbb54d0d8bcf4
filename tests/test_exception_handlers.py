import asyncio
import json

import pytest
from sqlalchemy.exc import IntegrityError
from starlette.requests import Request

from app.api.orders.models import OrderModel
from app.core.exception_handlers import integrity_error_handler
from app.utils.database_utils import is_foreign_key_violation


def _request(method="DELETE", path="/api/anything"):
    return Request({"type": "http", "method": method, "path": path, "query_string": b"", "headers": []})


def _handle(exc):
    resp = asyncio.run(integrity_error_handler(_request(), exc))
    return resp.status_code, json.loads(resp.body)


def test_missing_parent_row_is_foreign_key_violation(db):
    db.add(OrderModel(user_id="customer-1", restaurant_id="missing", order_number="ORD-X"))
    with pytest.raises(IntegrityError) as exc:
        db.commit()
    db.rollback()

    assert is_foreign_key_violation(exc.value)
    status_code, body = _handle(exc.value)
    assert status_code == 400
    assert body == {"detail": "Referenced record does not exist or is still in use"}


def test_other_integrity_errors_are_409_without_sql(db, restaurant):
    for _ in range(2):
        db.add(OrderModel(user_id="customer-1", restaurant_id=restaurant["id"], order_number="ORD-DUP"))
    with pytest.raises(IntegrityError) as exc:
        db.commit()
    db.rollback()

    assert not is_foreign_key_violation(exc.value)
    status_code, body = _handle(exc.value)
    assert status_code == 409
    assert body == {"detail": "Record conflicts with existing data"}
    assert "orders" not in json.dumps(body)


class _PgError(Exception):
    pgcode = "23503"


def test_postgres_foreign_key_code():
    exc = IntegrityError("DELETE FROM restaurants", {}, _PgError("update or delete violates constraint"))
    assert is_foreign_key_violation(exc)
