import uuid
from datetime import datetime, timezone

from sqlalchemy.exc import IntegrityError

# SQLSTATE foreign_key_violation
PG_FOREIGN_KEY_VIOLATION = "23503"


def new_uuid() -> str:
    """Default for the string primary keys of every table."""
    return str(uuid.uuid4())


def now_trimmed():
    """Current UTC datetime without microseconds."""
    return datetime.now(timezone.utc).replace(microsecond=0)


def is_foreign_key_violation(exc: IntegrityError) -> bool:
    """True for a missing or still-referenced row (PostgreSQL and SQLite)."""
    if getattr(exc.orig, "pgcode", None) == PG_FOREIGN_KEY_VIOLATION:
        return True
    return "foreign key" in str(exc.orig).lower()
